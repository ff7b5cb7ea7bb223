# Standard library imports
import base64
import logging
import re
from typing import Optional

# Local application imports
from ....core.exceptions import InvalidInputError
from ....infrastructure.external.azure_openai_client import AzureOpenAIClient
from ....infrastructure.external.azure_vision_client import AzureVisionClient
from ....processing.prompts import (
    DECISION_MAX_TOKENS,
    DECISION_TEMPERATURE,
    build_chat_messages,
    build_scene_description,
    parse_ai_decision,
)
from ....processing.safety_signals import compute_safety_signals
from ...dto.analysis_dto import AiDecisionResponse, AnalyzeRoomResponse, SignalsResponse

logger = logging.getLogger(__name__)

# URL-safe alphabet folds onto the standard one; anything else is skipped
_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")
_NON_BASE64_CHARS = re.compile(r"[^A-Za-z0-9+/]")


def decode_image(image_base64: Optional[str]) -> bytes:
    """
    Decode the base64 image payload leniently.
    
    Standard and URL-safe alphabets are both accepted, padding is optional,
    decoding stops at the first "=" and characters outside the alphabet
    (whitespace, a data-URL prefix's punctuation) are skipped. A single
    trailing character (length % 4 == 1) holds no full byte and is dropped.
    
    Raises:
        InvalidInputError: If the payload is missing, empty, or decodes to no bytes
    """
    if not image_base64:
        raise InvalidInputError("imageBase64 is required")
    
    data = image_base64.split("=", 1)[0].translate(_URLSAFE_TO_STANDARD)
    data = _NON_BASE64_CHARS.sub("", data)
    if len(data) % 4 == 1:
        data = data[:-1]
    data += "=" * (-len(data) % 4)
    image_bytes = base64.b64decode(data, validate=True)
    
    if not image_bytes:
        raise InvalidInputError("imageBase64 is not valid base64")
    return image_bytes


class AnalyzeRoomUseCase:
    """
    Use case for analyzing one room snapshot.
    
    Validate -> describe scene (vision) -> derive signals and compose prompt ->
    reason (language model). Stateless; upstream failures propagate as
    UpstreamServiceError without retry.
    """
    
    def __init__(
        self,
        vision_client: AzureVisionClient,
        openai_client: AzureOpenAIClient,
    ) -> None:
        self.vision_client = vision_client
        self.openai_client = openai_client
    
    async def execute(self, image_base64: Optional[str]) -> AnalyzeRoomResponse:
        """
        Analyze a room snapshot
        
        Args:
            image_base64: Base64-encoded image from the request body
            
        Returns:
            AnalyzeRoomResponse with scene description, signals and AI decision
            
        Raises:
            InvalidInputError: If the image payload is missing or undecodable
            UpstreamServiceError: If the vision or language model call fails
        """
        image_bytes = decode_image(image_base64)
        
        vision = await self.vision_client.analyze_image(image_bytes)
        
        signals = compute_safety_signals(vision.objects)
        scene_description = build_scene_description(
            vision.caption, signals.people_count, vision.tags
        )
        
        completion = await self.openai_client.complete(
            build_chat_messages(scene_description),
            temperature=DECISION_TEMPERATURE,
            max_tokens=DECISION_MAX_TOKENS,
        )
        decision = parse_ai_decision(completion)
        
        logger.info(
            f"Room analyzed: people={signals.people_count} fall_risk={signals.fall_risk} "
            f"status={decision.status}"
        )
        
        return AnalyzeRoomResponse(
            sceneDescription=scene_description,
            caption=vision.caption,
            tags=vision.tags,
            peopleCount=signals.people_count,
            aiDecision=AiDecisionResponse(**decision.to_payload()),
            signals=SignalsResponse(**signals.public_payload()),
        )
