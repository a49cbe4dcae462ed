"""Tenants services."""

from .tenant_use_cases import TenantUseCases

__all__ = ["TenantUseCases"]
