# Standard library imports
import os
from typing import Final, Optional


# Azure OpenAI REST API version (not environment-sourced)
AZURE_OPENAI_API_VERSION: Final[str] = "2024-12-01-preview"


def _optional_float(name: str) -> Optional[float]:
    """Read an optional float environment variable (unset or blank -> None)."""
    value = os.getenv(name, "").strip()
    if not value:
        return None
    return float(value)


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    Upstream URLs and keys default to empty strings; a missing value is not
    rejected here and surfaces as an upstream failure on first use.
    """
    
    def __init__(self) -> None:
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "5000"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        
        # Azure Computer Vision Configuration
        self.azure_vision_endpoint: Final[str] = os.getenv("AZURE_VISION_ENDPOINT", "").rstrip("/")
        self.azure_vision_key: Final[str] = os.getenv("AZURE_VISION_KEY", "")
        
        # Azure OpenAI Configuration
        self.azure_openai_endpoint: Final[str] = os.getenv("AZURE_OPENAI_ENDPOINT", "").rstrip("/")
        self.azure_openai_key: Final[str] = os.getenv("AZURE_OPENAI_KEY", "")
        self.azure_openai_deployment: Final[str] = os.getenv("AZURE_OPENAI_DEPLOYMENT", "")
        self.azure_openai_api_version: Final[str] = AZURE_OPENAI_API_VERSION
        
        # Outbound HTTP (None = no timeout)
        self.upstream_timeout_seconds: Final[Optional[float]] = _optional_float(
            "UPSTREAM_TIMEOUT_SECONDS"
        )
    
    def missing_upstream_settings(self) -> list[str]:
        """Names of upstream environment variables that are not set."""
        required = {
            "AZURE_VISION_ENDPOINT": self.azure_vision_endpoint,
            "AZURE_VISION_KEY": self.azure_vision_key,
            "AZURE_OPENAI_ENDPOINT": self.azure_openai_endpoint,
            "AZURE_OPENAI_KEY": self.azure_openai_key,
            "AZURE_OPENAI_DEPLOYMENT": self.azure_openai_deployment,
        }
        return [name for name, value in required.items() if not value]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
