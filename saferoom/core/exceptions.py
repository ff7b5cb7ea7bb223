"""Exceptions raised by the room analysis path and mapped to HTTP responses by the API layer."""
from typing import Any, Optional


class InvalidInputError(ValueError):
    """Request payload is missing or unusable (HTTP 400). No upstream call is made."""


class UpstreamServiceError(Exception):
    """
    An external API call failed (transport error or non-2xx response).

    Attributes:
        service: Which upstream failed ("vision" or "language-model")
        details: Diagnostic payload returned by the upstream (parsed JSON body
            when available, raw text otherwise) or the transport error message
        status_code: Upstream HTTP status, None for transport errors
    """

    def __init__(
        self,
        message: str,
        service: str,
        details: Any = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.service = service
        self.details = details if details is not None else message
        self.status_code = status_code
