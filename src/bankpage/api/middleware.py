"""Pure ASGI middleware for correlation IDs and request logging."""

import asyncio
import time
from urllib.parse import parse_qs

import structlog
from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from bankpage.api.pagination import CURSOR_PARAM
from bankpage.common.logging import set_correlation_id

logger = structlog.get_logger()

CORRELATION_HEADER = "X-Correlation-ID"
# Longer (or empty) incoming IDs are replaced rather than echoed into logs
MAX_CORRELATION_ID_LENGTH = 64


class CorrelationIdMiddleware:
    """Tags every pager request with an ID sent back in ``CORRELATION_HEADER``.

    The caller's ID is reused when it is 1 to ``MAX_CORRELATION_ID_LENGTH``
    characters long; otherwise a fresh one is minted so that page lookups
    logged by the store can still be tied to the response.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        incoming_cid: str | None = None
        for header_name, header_value in scope.get("headers", []):
            if header_name == b"x-correlation-id":
                incoming_cid = header_value.decode("latin-1").strip()
                break
        if incoming_cid is not None and not 0 < len(incoming_cid) <= MAX_CORRELATION_ID_LENGTH:
            incoming_cid = None

        cid = set_correlation_id(incoming_cid)

        async def send_with_cid(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                headers.append(CORRELATION_HEADER, cid)
            await send(message)

        await self.app(scope, receive, send_with_cid)


class RequestLoggingMiddleware:
    """Logs method, path, paging cursor, status code and latency for each request.

    A request whose task is cancelled (client went away mid-query) is logged
    as ``http_request_cancelled`` and the cancellation is re-raised. An
    exception escaping the app is logged as a 500 before it propagates.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        status_code: int = 0

        async def send_with_status(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        fields = {"method": scope["method"], "path": scope["path"]}
        cursor = _cursor_from_scope(scope)
        if cursor is not None:
            fields["cursor"] = cursor

        try:
            await self.app(scope, receive, send_with_status)
        except asyncio.CancelledError:
            logger.warning("http_request_cancelled", latency_ms=_elapsed_ms(start), **fields)
            raise
        except Exception:
            logger.error("http_request", status_code=500, latency_ms=_elapsed_ms(start), **fields)
            raise

        logger.info("http_request", status_code=status_code, latency_ms=_elapsed_ms(start), **fields)


def _cursor_from_scope(scope: Scope) -> str | None:
    query = scope.get("query_string", b"").decode("latin-1")
    values = parse_qs(query).get(CURSOR_PARAM)
    return values[0] if values else None


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 1)
