from .analysis_dto import (
    AiDecisionResponse,
    AnalyzeRoomRequest,
    AnalyzeRoomResponse,
    ErrorResponse,
    SignalsResponse,
)

__all__ = [
    "AiDecisionResponse",
    "AnalyzeRoomRequest",
    "AnalyzeRoomResponse",
    "ErrorResponse",
    "SignalsResponse",
]
