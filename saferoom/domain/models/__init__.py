from .vision import BoundingRectangle, DetectedObject, VisionResult
from .safety import AiDecision, SafetySignals

__all__ = [
    "BoundingRectangle",
    "DetectedObject",
    "VisionResult",
    "AiDecision",
    "SafetySignals",
]
