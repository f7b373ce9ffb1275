"""ASGI middleware that logs every API request with a redacted body summary."""
import json
import logging
import time
import uuid

from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger("impact_report.requests")

SENSITIVE_KEYS = ("password", "token", "accessToken", "secret")


def _is_auth_path(path: str) -> bool:
    return path.startswith("/api/auth/") or "/login" in path


class RequestLoggerMiddleware:
    """ASGI middleware to log API requests: method, path, status, timing and body."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())
        start_time = time.time()

        method = scope["method"]
        path = scope["path"]
        headers_dict = dict(scope.get("headers", []))
        content_type = headers_dict.get(b"content-type", b"").decode("latin1")
        query_string = scope.get("query_string", b"").decode("latin1")

        body_parts = []

        async def receive_with_caching():
            message = await receive()
            if message["type"] == "http.request":
                body = message.get("body", b"")
                if body:
                    body_parts.append(body)
            return message

        status_code = 500
        response_size = 0

        async def send_with_capturing(message):
            nonlocal status_code, response_size
            if message["type"] == "http.response.start":
                status_code = message["status"]
            elif message["type"] == "http.response.body":
                response_size += len(message.get("body", b""))
            await send(message)

        try:
            await self.app(scope, receive_with_caching, send_with_capturing)
        finally:
            # Skip health checks to reduce noise
            if path != "/health":
                response_time_ms = int((time.time() - start_time) * 1000)
                body_summary = None
                if body_parts and method in ("POST", "PUT", "PATCH") and not _is_auth_path(path):
                    body_summary = self._summarize_body(b"".join(body_parts), content_type)

                logger.info(
                    f"{method} {path}{'?' + query_string if query_string else ''} -> {status_code} "
                    f"({response_time_ms}ms, {response_size}B, request_id={request_id})"
                    + (f" body={body_summary}" if body_summary is not None else "")
                )

    @staticmethod
    def _summarize_body(raw: bytes, content_type: str):
        """Return the JSON body with sensitive values redacted, or None."""
        if "application/json" not in content_type:
            return None
        try:
            body = json.loads(raw.decode())
        except (UnicodeDecodeError, ValueError):
            return None
        if isinstance(body, dict):
            for key in SENSITIVE_KEYS:
                if key in body:
                    body[key] = "***REDACTED***"
        return body
