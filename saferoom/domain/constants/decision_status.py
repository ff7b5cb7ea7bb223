"""Constants for AI decision statuses and the fallback decision"""


class DecisionStatus:
    """Status values the language model is asked to choose from"""
    NORMAL = "NORMAL"
    WARNING = "WARNING"
    EMERGENCY = "EMERGENCY"
    
    ALL = frozenset({NORMAL, WARNING, EMERGENCY})


# Substituted when the model completion is not a JSON object
FALLBACK_REASON = "Could not parse model JSON response."
FALLBACK_ACTION = "Show warning and log for review."
