"""
Language model prompting for room safety decisions.

Builds the scene description and chat messages sent to the model and parses
its JSON reply into an AiDecision.
"""

import json
import logging
import math
from typing import Dict, List, Sequence

from ..domain.constants import DecisionStatus
from ..domain.models import AiDecision

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = "You are a concise safety reasoning assistant."

# Sampling parameters: low randomness, short answers
DECISION_TEMPERATURE = 0.2
DECISION_MAX_TOKENS = 300


def _reject_non_standard_constant(name: str) -> None:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"JSON number out of range: {text}")
    return value


def build_scene_description(caption: str, people_count: int, tags: Sequence[str]) -> str:
    """Three-line scene summary: caption, people count, comma-joined tags."""
    return (
        f"Caption: {caption}\n"
        f"People detected: {people_count}\n"
        f"Tags: {', '.join(tags)}"
    )


def build_user_prompt(scene_description: str) -> str:
    return f"""
You are a safety assistant monitoring a room using camera snapshots.

Here is the machine vision description of the scene:

{scene_description}

Decide:
- status: "NORMAL", "WARNING", or "EMERGENCY"
- reason: 1–2 short sentences
- action: one short sentence telling the app what to do next.

Return ONLY valid JSON:
{{"status":"NORMAL","reason":"...","action":"..."}}
"""


def build_chat_messages(scene_description: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(scene_description)},
    ]


def parse_ai_decision(content: str) -> AiDecision:
    """
    Parse the model completion as a JSON object.
    
    Anything that is not a strict JSON object (plain text, a fenced block, an
    array, NaN/Infinity literals or numbers overflowing to infinity) yields the
    WARNING fallback carrying the raw text. Never raises.
    
    Args:
        content: Completion text from the language model
        
    Returns:
        AiDecision parsed from the completion, or the fallback decision
    """
    try:
        data = json.loads(content, parse_constant=_reject_non_standard_constant, parse_float=_finite_float)
    except (TypeError, ValueError):
        data = None
    
    if not isinstance(data, dict):
        logger.warning("Language model reply is not a JSON object; using fallback decision")
        return AiDecision.fallback(content if isinstance(content, str) else str(content))
    
    decision = AiDecision.from_model_json(data)
    if not isinstance(decision.status, str) or decision.status not in DecisionStatus.ALL:
        logger.warning(f"Language model returned unexpected status: {decision.status!r}")
    return decision
