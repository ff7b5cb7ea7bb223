"""Local analysis steps: safety signal heuristics and language-model prompting."""

from .safety_signals import compute_safety_signals, is_person
from .prompts import (
    SYSTEM_PROMPT,
    build_chat_messages,
    build_scene_description,
    build_user_prompt,
    parse_ai_decision,
)

__all__ = [
    "compute_safety_signals",
    "is_person",
    "SYSTEM_PROMPT",
    "build_chat_messages",
    "build_scene_description",
    "build_user_prompt",
    "parse_ai_decision",
]
