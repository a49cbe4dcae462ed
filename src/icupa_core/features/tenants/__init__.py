"""Tenants feature."""

from .entities import Tenant
from .services import TenantUseCases

__all__ = ["Tenant", "TenantUseCases"]
