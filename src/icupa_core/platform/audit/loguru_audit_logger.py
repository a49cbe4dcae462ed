"""Loguru-backed audit logger."""

import json
import logging
from typing import Any, Dict, Optional

from loguru import logger as loguru_logger

# Separate channel for failures of the audit logger itself
diagnostics = logging.getLogger("icupa_core.platform.audit.diagnostics")


class LoguruAuditLogger:
    """Audit logger writing domain events as structured loguru records.

    Records are bound with ``audit=True`` so a dedicated sink can filter on
    ``record["extra"]["audit"]``. ``record`` never raises.
    """

    def __init__(self, sink_logger: Optional[Any] = None, service: str = "icupa-api"):
        """Initialize audit logger.

        Args:
            sink_logger: Loguru logger to write through, defaults to the
                global loguru logger
            service: Service name attached to every record
        """
        self.service = service
        self._logger = (sink_logger or loguru_logger).bind(audit=True, service=service)

    def record(self, event: str, payload: Dict[str, Any]) -> None:
        """Record a domain event."""
        try:
            serialized = json.dumps(payload, default=str, sort_keys=True)
            self._logger.bind(event=event, payload=serialized).info(f"audit {event} {serialized}")
        except Exception as e:
            diagnostics.error(f"Failed to record audit event '{event}': {e}")
