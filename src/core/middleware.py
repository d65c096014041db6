"""
Custom middleware for the FastAPI application.
"""
import time
import logging
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

# Set up logging
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64

def _request_id_for(request: Request) -> str:
    """
    Reuse a caller-supplied request id (e.g. from a proxy) when it is sane,
    otherwise mint one.
    """
    incoming = request.headers.get(REQUEST_ID_HEADER, "")
    if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH and incoming.isprintable():
        return incoming
    return uuid.uuid4().hex

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per request with its id, status and duration.

    Bodies and headers are never logged: registration and login bodies carry
    plain text passwords and the Authorization header carries bearer tokens.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = _request_id_for(request)
        request.state.request_id = request_id
        route = f"{request.method} {request.url.path}"
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"[{request_id}] {route} raised {type(e).__name__} "
                f"after {time.perf_counter() - started:.4f}s"
            )
            raise

        elapsed = time.perf_counter() - started
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"

        log = logger.warning if response.status_code >= 500 else logger.info
        log(f"[{request_id}] {route} -> {response.status_code} in {elapsed:.4f}s")
        return response


def setup_middlewares(app):
    """
    Set up all custom middlewares for the application.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(RequestLoggingMiddleware)
