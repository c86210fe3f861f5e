"""Request ID middleware: per-request correlation id plus one access log line."""
import logging
import re
import time
from uuid import uuid4

from app.utils.logging import current_request_id

logger = logging.getLogger("app.access")

# Incoming ids are echoed back into headers and logs
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9_.-]{1,64}$")
_SKIP_PATHS = {"/health", "/metrics"}


class RequestIdMiddleware:
    """ASGI middleware that generates/propagates X-Request-ID and logs timing."""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        incoming = headers.get(b"x-request-id", b"").decode("latin-1")
        request_id = incoming if _VALID_REQUEST_ID.match(incoming) else uuid4().hex[:12]

        token = current_request_id.set(request_id)
        start = time.monotonic()
        status_code = 500

        async def send_with_request_id(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                response_headers = list(message.get("headers", []))
                response_headers.append((b"x-request-id", request_id.encode()))
                message["headers"] = response_headers
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            path = scope.get("path", "")
            if path not in _SKIP_PATHS:
                duration_ms = round((time.monotonic() - start) * 1000, 1)
                logger.info(
                    "%s %s %d",
                    scope.get("method", "-"),
                    path,
                    status_code,
                    extra={
                        "method": scope.get("method"),
                        "path": path,
                        "status_code": status_code,
                        "duration_ms": duration_ms,
                    },
                )
            current_request_id.reset(token)
