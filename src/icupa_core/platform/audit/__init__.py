"""Audit logger implementations."""

from .loguru_audit_logger import LoguruAuditLogger

__all__ = ["LoguruAuditLogger"]
