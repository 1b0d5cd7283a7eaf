from __future__ import annotations

from fastapi import FastAPI, Request
from starlette.responses import PlainTextResponse


class ViewerError(Exception):
    """Failure that maps onto a complete plain-text HTTP response."""

    status_code: int = 500
    message: str = "Internal error"

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class BadRequest(ViewerError):
    status_code = 400
    message = "Invalid or missing CID"


class UpstreamError(ViewerError):
    """Gateway answered with a non-success status; the status is passed through."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to fetch IPFS data: {reason}", status_code=status_code)


class InternalError(ViewerError):
    status_code = 500
    message = "Internal error fetching IPFS data"


async def _viewer_error_handler(request: Request, exc: ViewerError) -> PlainTextResponse:  # noqa: ARG001
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def add_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ViewerError, _viewer_error_handler)  # type: ignore[arg-type]
