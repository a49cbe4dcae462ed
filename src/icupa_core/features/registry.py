"""Module registry: composition root for the domain use-cases.

Collaborators are resolved from settings once, here, and injected into
every module. Callers may pass any of them explicitly, which is how tests
and alternative deployments swap implementations.
"""

import logging
from dataclasses import dataclass, fields
from typing import Dict, Iterator, Mapping, Optional, Tuple, Type

from ..config.settings import IcupaSettings, get_settings
from ..core.entities.base import EntityModel
from ..core.protocols import AuditLogger, Authenticator, EntityRepository, RateLimiter
from ..platform.audit import LoguruAuditLogger
from ..platform.persistence import build_repositories
from ..platform.providers import Providers, build_providers
from ..platform.rate_limiting import build_rate_limiter
from ..platform.use_cases import DomainUseCases, create_use_cases
from .ai_agents import AiAgent, AiAgentUseCases
from .auth import AuthSession, AuthUseCases, RepositoryAuthenticator
from .bookings import Booking, BookingUseCases
from .files import FileRecord, FileUseCases
from .inventory import InventoryItem, InventoryUseCases
from .listings import Listing, ListingUseCases
from .messaging import Message, MessageUseCases
from .notifications import Notification, NotificationUseCases
from .orders import Order, OrderUseCases
from .payments import Payment, PaymentUseCases
from .search import SearchDocument, SearchUseCases
from .tenants import Tenant, TenantUseCases
from .users import User, UserUseCases

logger = logging.getLogger(__name__)

ENTITY_SCHEMAS: Dict[str, Type[EntityModel]] = {
    "auth": AuthSession,
    "users": User,
    "tenants": Tenant,
    "listings": Listing,
    "inventory": InventoryItem,
    "orders": Order,
    "bookings": Booking,
    "payments": Payment,
    "search": SearchDocument,
    "messaging": Message,
    "notifications": Notification,
    "files": FileRecord,
    "ai_agents": AiAgent,
}


@dataclass
class ModuleRegistry:
    """All domain modules of one process."""
    auth: AuthUseCases
    users: UserUseCases
    tenants: TenantUseCases
    listings: ListingUseCases
    inventory: InventoryUseCases
    orders: OrderUseCases
    bookings: BookingUseCases
    payments: PaymentUseCases
    search: SearchUseCases
    messaging: MessageUseCases
    notifications: NotificationUseCases
    files: FileUseCases
    ai_agents: AiAgentUseCases

    def modules(self) -> Iterator[Tuple[str, DomainUseCases]]:
        """Iterate ``(route_name, use_cases)``; route names use hyphens."""
        for item in fields(self):
            yield item.name.replace("_", "-"), getattr(self, item.name)


def build_module_registry(
    settings: Optional[IcupaSettings] = None,
    repositories: Optional[Mapping[str, EntityRepository]] = None,
    providers: Optional[Providers] = None,
    audit_logger: Optional[AuditLogger] = None,
    rate_limiter: Optional[RateLimiter] = None,
    authenticator: Optional[Authenticator] = None,
) -> ModuleRegistry:
    """Wire every domain module.

    Args:
        settings: Application settings, defaults to ``get_settings()``
        repositories: Repository per module name (keys of
            ``ENTITY_SCHEMAS``); missing entries are built from settings
        providers: Payment, search and messaging providers
        audit_logger: Audit logger shared by all modules
        rate_limiter: Rate limiter shared by all modules
        authenticator: Credential verifier for login, defaults to
            ``RepositoryAuthenticator`` over the user repository

    Raises:
        ConfigurationError: If a collaborator cannot be resolved from settings
    """
    settings = settings or get_settings()

    resolved = dict(repositories or {})
    missing = {name: schema for name, schema in ENTITY_SCHEMAS.items() if name not in resolved}
    if missing:
        resolved.update(build_repositories(settings, missing))

    providers = providers or build_providers(settings)
    audit_logger = audit_logger or LoguruAuditLogger()
    rate_limiter = rate_limiter or build_rate_limiter(settings)
    authenticator = authenticator or RepositoryAuthenticator(resolved["users"])
    strict = not settings.is_best_effort_side_effects

    def base(name: str):
        return create_use_cases(ENTITY_SCHEMAS[name], resolved[name], audit_logger, rate_limiter)

    registry = ModuleRegistry(
        auth=AuthUseCases(base("auth"), authenticator, settings.session_ttl_seconds),
        users=UserUseCases(base("users")),
        tenants=TenantUseCases(base("tenants")),
        listings=ListingUseCases(base("listings"), providers.search, strict),
        inventory=InventoryUseCases(base("inventory")),
        orders=OrderUseCases(base("orders"), providers.payment),
        bookings=BookingUseCases(base("bookings"), providers.messaging, strict),
        payments=PaymentUseCases(base("payments")),
        search=SearchUseCases(base("search"), providers.search, strict),
        messaging=MessageUseCases(base("messaging"), providers.messaging, strict),
        notifications=NotificationUseCases(base("notifications")),
        files=FileUseCases(base("files"), settings.allowed_file_mime_prefixes),
        ai_agents=AiAgentUseCases(base("ai_agents"), settings.allowed_ai_models),
    )
    logger.info(
        f"Module registry ready: {len(ENTITY_SCHEMAS)} modules, "
        f"side effects {'strict' if strict else 'best effort'}"
    )
    return registry
