# Standard library imports
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# Local application imports
from ..constants import (
    FALLBACK_ACTION,
    FALLBACK_REASON,
    VOICE_STRESS_PLACEHOLDER,
    DecisionStatus,
)


@dataclass(frozen=True)
class SafetySignals:
    """
    Safety indicators derived locally from one vision result.
    
    voice_stress is a fixed placeholder until audio sensing exists; it is
    never computed from input.
    """
    people_count: int
    fall_risk: bool
    voice_stress: bool = VOICE_STRESS_PLACEHOLDER
    
    def __post_init__(self) -> None:
        """Business validations"""
        if self.people_count < 0:
            raise ValueError("People count cannot be negative")
    
    def public_payload(self) -> Dict[str, bool]:
        """Signals exposed to callers (peopleCount is reported at the top level instead)."""
        return {
            "fallRisk": self.fall_risk,
            "voiceStress": self.voice_stress,
        }


@dataclass
class AiDecision:
    """
    Structured decision parsed from the language model completion.
    
    The model is asked for status/reason/action; whatever object it returns is
    relayed, so unknown keys are kept in extra and missing keys stay None.
    raw_response is only set on the parse-failure fallback.
    """
    status: Optional[Any] = None
    reason: Optional[Any] = None
    action: Optional[Any] = None
    raw_response: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    
    @classmethod
    def from_model_json(cls, data: Dict[str, Any]) -> "AiDecision":
        known = {"status", "reason", "action"}
        return cls(
            status=data.get("status"),
            reason=data.get("reason"),
            action=data.get("action"),
            extra={key: value for key, value in data.items() if key not in known},
        )
    
    @classmethod
    def fallback(cls, raw_text: str) -> "AiDecision":
        """Degraded decision used when the completion is not a JSON object."""
        return cls(
            status=DecisionStatus.WARNING,
            reason=FALLBACK_REASON,
            action=FALLBACK_ACTION,
            raw_response=raw_text,
        )
    
    @property
    def is_fallback(self) -> bool:
        return self.raw_response is not None
    
    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "status": self.status,
            "reason": self.reason,
            "action": self.action,
        }
        payload.update(self.extra)
        if self.raw_response is not None:
            payload["rawResponse"] = self.raw_response
        return payload
