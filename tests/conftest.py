"""
Shared pytest fixtures for Smart Safe Room backend tests.
"""
import json
import os
from unittest.mock import patch

import httpx
import pytest


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "AZURE_VISION_ENDPOINT": "https://vision.test",
        "AZURE_VISION_KEY": "test_vision_key",
        "AZURE_OPENAI_ENDPOINT": "https://openai.test",
        "AZURE_OPENAI_KEY": "test_openai_key",
        "AZURE_OPENAI_DEPLOYMENT": "gpt-test",
        "PORT": "5050",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def lying_person_analysis():
    """Vision analyze body: one person lying on the floor."""
    return {
        "description": {
            "tags": ["person", "floor"],
            "captions": [{"text": "A person lying on the floor", "confidence": 0.87}],
        },
        "tags": [
            {"name": "floor", "confidence": 0.98},
            {"name": "indoor", "confidence": 0.95},
        ],
        "objects": [
            {
                "rectangle": {"x": 10, "y": 220, "w": 200, "h": 80},
                "object": "person",
                "confidence": 0.81,
            }
        ],
        "requestId": "req-1",
        "metadata": {"width": 640, "height": 480, "format": "Jpeg"},
    }


def completion_body(content):
    """Chat completions body with a single choice."""
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
    }


@pytest.fixture
def make_completion():
    return completion_body


@pytest.fixture
def emergency_completion():
    return completion_body(
        json.dumps(
            {
                "status": "EMERGENCY",
                "reason": "A person appears to be lying on the floor.",
                "action": "Alert the caregiver immediately.",
            }
        )
    )


@pytest.fixture
def recording_transport():
    """
    Build an httpx.MockTransport that records requests and answers by host.

    Usage: transport, requests = recording_transport({"vision.test": handler, ...})
    """
    def _build(handlers):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            route = handlers.get(request.url.host)
            if route is None:
                raise httpx.ConnectError(f"No route to {request.url}", request=request)
            return route(request)

        return httpx.MockTransport(handler), requests

    return _build
