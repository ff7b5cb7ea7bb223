"""
Unit tests for saferoom.infrastructure.http_client_factory
"""
import pytest
from saferoom.infrastructure import http_client_factory
from saferoom.infrastructure.external.azure_vision_client import AzureVisionClient


class TestSharedHttpClient:
    """Tests for the shared pooled client"""

    @pytest.mark.asyncio
    async def test_reused_until_closed(self):
        first = http_client_factory.get_shared_http_client()
        assert http_client_factory.get_shared_http_client() is first

        await http_client_factory.close_shared_http_client()
        assert first.is_closed
        second = http_client_factory.get_shared_http_client()
        assert second is not first
        await http_client_factory.close_shared_http_client()

    @pytest.mark.asyncio
    async def test_close_without_client_is_noop(self):
        await http_client_factory.close_shared_http_client()
        await http_client_factory.close_shared_http_client()

    @pytest.mark.asyncio
    async def test_clients_default_to_shared_pool(self):
        client = AzureVisionClient(endpoint="https://vision.test", api_key="k")
        assert client.http_client is http_client_factory.get_shared_http_client()
        await http_client_factory.close_shared_http_client()

    @pytest.mark.asyncio
    async def test_timeout_follows_settings(self, mock_env):
        import os
        from unittest.mock import patch

        from saferoom.core.config import Settings

        with patch.dict(os.environ, {"UPSTREAM_TIMEOUT_SECONDS": "7.5"}):
            client = http_client_factory.build_http_client(Settings())
        assert client.timeout.read == 7.5
        await client.aclose()

        with patch.dict(os.environ, {"UPSTREAM_TIMEOUT_SECONDS": ""}):
            client = http_client_factory.build_http_client(Settings())
        assert client.timeout.read is None
        await client.aclose()
