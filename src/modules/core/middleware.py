import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class CorrelationIdMiddleware:
    """Tag every request with a correlation ID.

    The ID comes from the incoming X-Request-ID header or is a fresh
    UUID4.  It is bound into the structlog context for the lifetime of
    the request, so every log line emitted while handling it carries
    ``correlation_id``, and it is echoed back in the response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        path = request.get_full_path()
        logger.info("request.started", method=request.method, path=path)
        start = time.monotonic()

        try:
            response = self.get_response(request)
            logger.info(
                "request.finished",
                method=request.method,
                path=path,
                status_code=response.status_code,
                duration_ms=round((time.monotonic() - start) * 1000, 2),
            )
            response[REQUEST_ID_HEADER] = cid
            return response
        finally:
            structlog.contextvars.clear_contextvars()
