"""Constants for safety heuristics and AI decisions"""

from .decision_status import DecisionStatus, FALLBACK_ACTION, FALLBACK_REASON
from .safety_constants import (
    DEFAULT_RECT_HEIGHT,
    DEFAULT_RECT_WIDTH,
    FALL_ASPECT_RATIO_THRESHOLD,
    PERSON_LABEL_SUBSTRING,
    VOICE_STRESS_PLACEHOLDER,
)

__all__ = [
    "DecisionStatus",
    "FALLBACK_ACTION",
    "FALLBACK_REASON",
    "DEFAULT_RECT_HEIGHT",
    "DEFAULT_RECT_WIDTH",
    "FALL_ASPECT_RATIO_THRESHOLD",
    "PERSON_LABEL_SUBSTRING",
    "VOICE_STRESS_PLACEHOLDER",
]
