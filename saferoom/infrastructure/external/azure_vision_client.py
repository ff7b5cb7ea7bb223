"""Azure Computer Vision client for scene captions, tags and object detection."""
import logging
from typing import Any, Dict, List, Optional

import httpx

from ...core.config import get_settings
from ...domain.models import BoundingRectangle, DetectedObject, VisionResult
from .base_upstream_client import BaseUpstreamClient

logger = logging.getLogger(__name__)


class AzureVisionClient(BaseUpstreamClient):
    """
    HTTP client for the Azure Computer Vision v3.2 analyze API.
    
    This client handles:
    - Posting raw image bytes with the subscription key header
    - Requesting the Description, Tags and Objects visual features
    - Converting the JSON analysis into a VisionResult
    """
    
    service_name = "vision"
    
    ANALYZE_PATH = "/vision/v3.2/analyze"
    VISUAL_FEATURES = "Description,Tags,Objects"
    NO_CAPTION = "No caption available"
    
    def __init__(
        self,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize Azure Vision client.
        
        Args:
            endpoint: Vision resource base URL. If None, reads from settings.
            api_key: Subscription key. If None, reads from settings.
            http_client: Optional HTTP client (defaults to the shared pool).
        """
        super().__init__(http_client)
        settings = get_settings()
        self.endpoint = (endpoint if endpoint is not None else settings.azure_vision_endpoint).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.azure_vision_key
        
        if not self.endpoint or not self.api_key:
            logger.warning("AZURE_VISION_ENDPOINT or AZURE_VISION_KEY not configured")
    
    @property
    def analyze_url(self) -> str:
        return f"{self.endpoint}{self.ANALYZE_PATH}?visualFeatures={self.VISUAL_FEATURES}"
    
    async def analyze_image(self, image_bytes: bytes) -> VisionResult:
        """
        Describe an image.
        
        Args:
            image_bytes: Raw image file bytes (JPEG, PNG, ...)
            
        Returns:
            VisionResult with caption, tags and detected objects
            
        Raises:
            UpstreamServiceError: If the request fails or the API returns non-2xx
        """
        headers = {
            "Ocp-Apim-Subscription-Key": self.api_key,
            "Content-Type": "application/octet-stream",
        }
        
        logger.debug(f"Calling Azure Vision analyze ({len(image_bytes)} bytes)")
        response = await self._post(self.analyze_url, content=image_bytes, headers=headers)
        
        try:
            payload = response.json()
        except ValueError:
            payload = {}
        
        return self.parse_analysis(payload if isinstance(payload, dict) else {})
    
    @classmethod
    def parse_analysis(cls, payload: Dict[str, Any]) -> VisionResult:
        """Convert an analyze API body into a VisionResult (missing sections become empty)."""
        return VisionResult(
            caption=cls._first_caption(payload),
            tags=cls._tag_names(payload),
            objects=cls._objects(payload),
        )
    
    @classmethod
    def _first_caption(cls, payload: Dict[str, Any]) -> str:
        description = payload.get("description")
        captions = description.get("captions") if isinstance(description, dict) else None
        if isinstance(captions, list) and captions and isinstance(captions[0], dict):
            text = captions[0].get("text")
            if text:
                return str(text)
        return cls.NO_CAPTION
    
    @staticmethod
    def _tag_names(payload: Dict[str, Any]) -> List[str]:
        tags = payload.get("tags") or []
        return [
            str(tag.get("name"))
            for tag in tags
            if isinstance(tag, dict) and tag.get("name") is not None
        ]
    
    @staticmethod
    def _objects(payload: Dict[str, Any]) -> List[DetectedObject]:
        detected = []
        for item in payload.get("objects") or []:
            if not isinstance(item, dict):
                continue
            rect = item.get("rectangle")
            rectangle = None
            if isinstance(rect, dict):
                rectangle = BoundingRectangle(
                    x=rect.get("x") or 0,
                    y=rect.get("y") or 0,
                    w=rect.get("w"),
                    h=rect.get("h"),
                )
            detected.append(DetectedObject(label=item.get("object"), rectangle=rectangle))
        return detected
