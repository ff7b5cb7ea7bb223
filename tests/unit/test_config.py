"""
Unit tests for saferoom.core.config
"""
import os
from unittest.mock import patch

import pytest
from saferoom.core.config import AZURE_OPENAI_API_VERSION, Settings


class TestSettings:
    """Tests for Settings"""

    def test_reads_environment(self, mock_env):
        settings = Settings()
        assert settings.port == 5050
        assert settings.azure_vision_endpoint == "https://vision.test"
        assert settings.azure_vision_key == "test_vision_key"
        assert settings.azure_openai_deployment == "gpt-test"
        assert settings.missing_upstream_settings() == []

    def test_api_version_is_pinned(self, mock_env):
        with patch.dict(os.environ, {"AZURE_OPENAI_API_VERSION": "2099-01-01"}):
            assert Settings().azure_openai_api_version == AZURE_OPENAI_API_VERSION == "2024-12-01-preview"

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
        assert settings.port == 5000
        assert settings.upstream_timeout_seconds is None
        assert settings.log_level == "INFO"
        assert set(settings.missing_upstream_settings()) == {
            "AZURE_VISION_ENDPOINT",
            "AZURE_VISION_KEY",
            "AZURE_OPENAI_ENDPOINT",
            "AZURE_OPENAI_KEY",
            "AZURE_OPENAI_DEPLOYMENT",
        }

    def test_trailing_slash_stripped(self):
        with patch.dict(os.environ, {"AZURE_VISION_ENDPOINT": "https://vision.test/"}):
            assert Settings().azure_vision_endpoint == "https://vision.test"

    def test_timeout_parsed(self):
        with patch.dict(os.environ, {"UPSTREAM_TIMEOUT_SECONDS": "12.5"}):
            assert Settings().upstream_timeout_seconds == pytest.approx(12.5)
