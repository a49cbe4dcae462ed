"""Request middleware."""

import logging
import time

from fastapi import Request
from loguru import logger as loguru_logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ..utils.uuid import generate_uuid_v7
from .metrics import RequestMetrics, route_template

logger = logging.getLogger(__name__)

CORRELATION_ID_HEADER = "x-correlation-id"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Assigns each request a correlation id and echoes it on the response.

    The id comes from the ``x-correlation-id`` header when present. It is
    stored on ``request.state`` for handlers and bound to loguru records
    emitted while the request is served.
    """

    def __init__(self, app, header_name: str = CORRELATION_ID_HEADER):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(self.header_name) or generate_uuid_v7()
        request.state.correlation_id = correlation_id

        start = time.perf_counter()
        with loguru_logger.contextualize(correlation_id=correlation_id):
            response = await call_next(request)

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"in {duration_ms:.1f}ms (correlation_id={correlation_id})"
        )
        response.headers[self.header_name] = correlation_id
        return response


class RequestMetricsMiddleware(BaseHTTPMiddleware):
    """Counts every request in ``http_requests_total``.

    Unhandled errors are counted as 500 before they propagate to the
    server error handler.
    """

    def __init__(self, app, metrics: RequestMetrics):
        super().__init__(app)
        self.metrics = metrics

    async def dispatch(self, request: Request, call_next) -> Response:
        route = route_template(request)
        try:
            response = await call_next(request)
        except Exception:
            self.metrics.track_http_request(request.method, route, 500)
            raise

        self.metrics.track_http_request(request.method, route, response.status_code)
        return response
