"""Tenant use-cases."""

from ....platform.use_cases import DomainUseCases
from ..entities.tenant import Tenant


class TenantUseCases(DomainUseCases[Tenant]):
    """Tenant registration; tenant records carry no extra rules."""
