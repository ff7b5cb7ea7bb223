# Standard library imports
import logging
from typing import Any, Optional

# External package imports
import httpx

# Local application imports
from ...core.exceptions import UpstreamServiceError
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


def response_details(response: httpx.Response) -> Any:
    """Upstream error payload: parsed JSON body when possible, raw text otherwise."""
    try:
        return response.json()
    except ValueError:
        return response.text


class BaseUpstreamClient:
    """
    Base class for Azure upstream clients.
    
    Provides the shared HTTP client and a POST helper that turns transport
    errors and non-2xx responses into UpstreamServiceError. No retries.
    """
    
    service_name = "upstream"
    
    def __init__(self, http_client: Optional[httpx.AsyncClient] = None) -> None:
        """
        Initialize base upstream client.
        
        Args:
            http_client: Client to send requests with. If None, the shared
                pooled client is used (resolved lazily on first request).
        """
        self._http_client = http_client
    
    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            return get_shared_http_client()
        return self._http_client
    
    async def _post(self, url: str, **kwargs: Any) -> httpx.Response:
        """
        POST to the upstream and return the successful response.
        
        Raises:
            UpstreamServiceError: On transport failure or non-2xx status
        """
        try:
            response = await self.http_client.post(url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            logger.debug(
                f"HTTP error from {self.service_name} API: "
                f"{e.response.status_code} - {e.response.text}"
            )
            raise UpstreamServiceError(
                f"{self.service_name} API returned {e.response.status_code}",
                service=self.service_name,
                details=response_details(e.response),
                status_code=e.response.status_code,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            message = str(e) or type(e).__name__
            logger.debug(f"Transport error calling {self.service_name} API: {message}")
            raise UpstreamServiceError(
                f"{self.service_name} API request failed",
                service=self.service_name,
                details=message,
            ) from e
