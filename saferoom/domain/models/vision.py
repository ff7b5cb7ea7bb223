# Standard library imports
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class BoundingRectangle:
    """Object bounding box in image pixels. Only w and h feed the safety heuristics."""
    x: float = 0.0
    y: float = 0.0
    w: Optional[float] = None
    h: Optional[float] = None


@dataclass
class DetectedObject:
    """
    One object detection from the vision service.
    
    - label: free-text object name (e.g. "person"); may be missing
    - rectangle: bounding box; may be missing
    """
    label: Optional[str] = None
    rectangle: Optional[BoundingRectangle] = None


@dataclass
class VisionResult:
    """
    Structured output of the vision-description call.
    
    - caption: top caption text (placeholder when the service gave none)
    - tags: tag names in service order
    - objects: detected objects in service order
    """
    caption: str
    tags: List[str] = field(default_factory=list)
    objects: List[DetectedObject] = field(default_factory=list)
