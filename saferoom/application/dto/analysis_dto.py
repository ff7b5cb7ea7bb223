from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer

# Field names follow the JSON contract of the mobile/web client (camelCase).


class AnalyzeRoomRequest(BaseModel):
    """DTO for room analysis request"""
    imageBase64: Optional[str] = None  # Base64-encoded image bytes


class AiDecisionResponse(BaseModel):
    """DTO for the language model decision (extra keys from the model are relayed)"""
    model_config = ConfigDict(extra="allow")
    
    status: Optional[Any] = None  # NORMAL | WARNING | EMERGENCY by convention, not enforced
    reason: Optional[Any] = None
    action: Optional[Any] = None
    rawResponse: Optional[Any] = None  # Only set when the reply was not JSON
    
    @model_serializer(mode="wrap")
    def _omit_missing_raw_response(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        # Model-supplied nulls are relayed; only an unset rawResponse is left out
        data = handler(self)
        if data.get("rawResponse") is None:
            data.pop("rawResponse", None)
        return data


class SignalsResponse(BaseModel):
    """DTO for public safety signals (peopleCount is reported at the top level)"""
    fallRisk: bool
    voiceStress: bool


class AnalyzeRoomResponse(BaseModel):
    """DTO for room analysis response"""
    sceneDescription: str
    caption: str
    tags: List[str] = Field(default_factory=list)
    peopleCount: int
    aiDecision: AiDecisionResponse
    signals: SignalsResponse


class ErrorResponse(BaseModel):
    """DTO for error responses"""
    error: str
    details: Optional[Any] = None
