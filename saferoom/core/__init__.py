from .config import AZURE_OPENAI_API_VERSION, Settings, get_settings
from .exceptions import InvalidInputError, UpstreamServiceError
from .logging_config import setup_logging

__all__ = [
    "AZURE_OPENAI_API_VERSION",
    "Settings",
    "get_settings",
    "InvalidInputError",
    "UpstreamServiceError",
    "setup_logging",
]
