import asyncio
import logging

from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0


class RequestTimeoutMiddleware:
    """Bound every HTTP request by a deadline.

    The downstream app runs as its own task so that ``asyncio.wait_for`` can
    cancel it, together with any storage call it is awaiting, once the
    deadline passes. The deadline is read from ``app.state.request_timeout_seconds``.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        timeout = getattr(
            scope["app"].state, "request_timeout_seconds", DEFAULT_REQUEST_TIMEOUT_SECONDS
        )
        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(self.app(scope, receive, send_wrapper), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "%s %s timed out after %.2fs", scope["method"], scope["path"], timeout
            )
            if response_started:
                raise
            response = JSONResponse(status_code=504, content={"detail": "Request timed out"})
            await response(scope, receive, send)
