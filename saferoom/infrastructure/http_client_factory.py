"""Process-wide httpx client shared by the Azure upstream clients."""
import httpx
import logging
from typing import Optional

from ..core.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Created on first upstream call, dropped at application shutdown
_shared_client: Optional[httpx.AsyncClient] = None


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """
    Build the pooled client used for vision and chat completion calls.

    The request timeout is UPSTREAM_TIMEOUT_SECONDS; None disables it, so
    a stalled Azure endpoint holds the request open.
    """
    return httpx.AsyncClient(
        timeout=settings.upstream_timeout_seconds,
        limits=httpx.Limits(
            max_keepalive_connections=20,
            max_connections=100,
            keepalive_expiry=30.0,
        ),
        http2=True,
    )


def get_shared_http_client() -> httpx.AsyncClient:
    """Return the shared upstream client, creating it from current settings if needed."""
    global _shared_client

    if _shared_client is None:
        _shared_client = build_http_client(get_settings())
        logger.info("Created shared HTTP client for Azure upstream calls")

    return _shared_client


async def close_shared_http_client() -> None:
    """Release pooled upstream connections; safe to call when no client exists."""
    global _shared_client

    if _shared_client is not None:
        client, _shared_client = _shared_client, None
        await client.aclose()
        logger.info("Closed shared HTTP client")
