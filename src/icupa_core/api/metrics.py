"""
Prometheus metrics for the HTTP adapter.

Each application owns its ``CollectorRegistry`` so several apps (tests,
workers) can live in one process without duplicate registrations.
"""

from typing import Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    GCCollector,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)
from starlette.requests import Request
from starlette.routing import Match

UNMATCHED_ROUTE = "<unmatched>"


class RequestMetrics:
    """Request counter plus the default process collectors.

    Tracks:
    - ``http_requests_total`` by method, route template and status
    - process, platform and GC metrics
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()

        ProcessCollector(registry=self.registry)
        PlatformCollector(registry=self.registry)
        GCCollector(registry=self.registry)

        self.http_requests_total = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["method", "route", "status"],
            registry=self.registry,
        )

    def track_http_request(self, method: str, route: str, status_code: int) -> None:
        self.http_requests_total.labels(
            method=method,
            route=route,
            status=str(status_code),
        ).inc()

    def render(self) -> bytes:
        """Exposition text for a scrape."""
        return generate_latest(self.registry)


def route_template(request: Request) -> str:
    """Path template of the route serving ``request``.

    Templates (``/v1/users/{entity_id}``) keep label cardinality bounded.
    A path matched only with another method (405) keeps its template;
    requests no route matches share one label.
    """
    partial = None
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", UNMATCHED_ROUTE)
        if match == Match.PARTIAL and partial is None:
            partial = getattr(route, "path", None)
    return partial or UNMATCHED_ROUTE
