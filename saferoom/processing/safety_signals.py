"""
Safety signals
--------------

Derive room safety indicators from vision object detections, without any
upstream call:

- people count: objects whose label contains "person" (case-insensitive).
- fall risk: any person whose bounding box is wider than tall by more than
  FALL_ASPECT_RATIO_THRESHOLD (lying-down proxy).
- voice stress: fixed placeholder.

Pure functions; malformed or missing fields fall back to defaults and never raise.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Iterable, List, Mapping, Optional, Tuple

# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------
from ..domain.constants import (
    DEFAULT_RECT_HEIGHT,
    DEFAULT_RECT_WIDTH,
    FALL_ASPECT_RATIO_THRESHOLD,
    PERSON_LABEL_SUBSTRING,
    VOICE_STRESS_PLACEHOLDER,
)
from ..domain.models import SafetySignals


# -----------------------------------------------------------------------------
# Field access (accepts DetectedObject or raw vision API dicts)
# -----------------------------------------------------------------------------


def _field(record: Any, *names: str) -> Any:
    for name in names:
        if isinstance(record, Mapping):
            if name in record:
                return record[name]
        elif hasattr(record, name):
            return getattr(record, name)
    return None


def _as_number(value: Any) -> float:
    """Numeric value of a rectangle dimension; 0 for anything unusable."""
    if isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    # NaN compares unequal to itself
    return number if number == number else 0.0


def _label_of(record: Any) -> str:
    label = _field(record, "label", "object")
    return label if isinstance(label, str) else ""


def _dimensions_of(record: Any) -> Tuple[float, float]:
    """(width, height) with 0-width and 1-height defaults for absent or zero values."""
    rectangle = _field(record, "rectangle")
    width = _as_number(_field(rectangle, "w")) if rectangle is not None else 0.0
    height = _as_number(_field(rectangle, "h")) if rectangle is not None else 0.0
    return (width or DEFAULT_RECT_WIDTH, height or DEFAULT_RECT_HEIGHT)


# -----------------------------------------------------------------------------
# Heuristics
# -----------------------------------------------------------------------------


def is_person(record: Any) -> bool:
    """Loose person classifier: label contains "person", case-insensitive."""
    return PERSON_LABEL_SUBSTRING in _label_of(record).lower()


def aspect_ratio(record: Any) -> float:
    width, height = _dimensions_of(record)
    return width / height


def compute_safety_signals(objects: Optional[Iterable[Any]]) -> SafetySignals:
    """
    Compute safety signals for one frame's detected objects.

    Args:
        objects: Detected objects (DetectedObject or vision API dicts with
            "object" and "rectangle"); None is treated as empty

    Returns:
        SafetySignals with people_count, fall_risk and the voice_stress placeholder
    """
    persons: List[Any] = [obj for obj in (objects or []) if is_person(obj)]

    fall_risk = False
    for person in persons:
        if aspect_ratio(person) > FALL_ASPECT_RATIO_THRESHOLD:
            fall_risk = True
            break

    return SafetySignals(
        people_count=len(persons),
        fall_risk=fall_risk,
        # Extension point: replace with an audio-derived signal once available
        voice_stress=VOICE_STRESS_PLACEHOLDER,
    )
