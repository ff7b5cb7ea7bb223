"""
Heuristic policy constants for room safety signals.

These are fixed policy values, not calibrated parameters; changing them
changes the service's observable behavior.
"""

# -----------------------------------------------------------------------------
# Person classification
# -----------------------------------------------------------------------------
# Case-insensitive substring match on the detected object label.
# Matches "person", "Person", "person sitting"; does NOT match "human", "man", "woman".
PERSON_LABEL_SUBSTRING = "person"

# -----------------------------------------------------------------------------
# Fall heuristic
# -----------------------------------------------------------------------------
# width / height above this => person is horizontal (lying down)
FALL_ASPECT_RATIO_THRESHOLD = 1.35
# Rectangle defaults when a dimension is absent or zero
DEFAULT_RECT_WIDTH = 0.0
DEFAULT_RECT_HEIGHT = 1.0

# -----------------------------------------------------------------------------
# Voice stress
# -----------------------------------------------------------------------------
# No audio sensing yet; every analysis reports this value.
VOICE_STRESS_PLACEHOLDER = False
