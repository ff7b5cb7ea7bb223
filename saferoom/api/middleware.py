"""ASGI middleware for the public API."""
# Standard library imports
import logging

# External package imports
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class _BodyTooLarge(Exception):
    pass


class BodySizeLimitMiddleware:
    """
    Reject request bodies above max_body_bytes with 413 {"error": ...}.

    The declared Content-Length is checked up front; the bytes actually
    received are counted as well, so chunked uploads without a length header
    are cut off once they pass the limit instead of being buffered whole.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    def _too_large_response(self) -> JSONResponse:
        return JSONResponse(status_code=413, content={"error": "Request body too large"})

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = dict(scope.get("headers") or []).get(b"content-length", b"")
        if content_length.isdigit() and int(content_length) > self.max_body_bytes:
            await self._too_large_response()(scope, receive, send)
            return

        received = 0
        exceeded = False
        response_started = False

        async def limited_receive() -> Message:
            nonlocal received, exceeded
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    exceeded = True
                    raise _BodyTooLarge()
            return message

        async def guarded_send(message: Message) -> None:
            nonlocal response_started
            if exceeded:
                # Whatever the app answers after a failed body read becomes the 413
                if not response_started and message["type"] == "http.response.start":
                    response_started = True
                    await self._too_large_response()(scope, receive, send)
                return
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, guarded_send)
        except _BodyTooLarge:
            pass

        if exceeded:
            logger.warning(f"Rejected request body over {self.max_body_bytes} bytes on {scope.get('path')}")
            if not response_started:
                response_started = True
                await self._too_large_response()(scope, receive, send)
