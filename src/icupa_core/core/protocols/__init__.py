"""Port contracts consumed by the use-case layer."""

from .entity_repository import EntityRepository, FieldLookupRepository
from .audit_logger import AuditLogger
from .rate_limiter import RateLimiter
from .payment_provider import PaymentProvider
from .search_provider import SearchProvider
from .messaging_provider import MessagingProvider
from .authenticator import Authenticator

__all__ = [
    "EntityRepository",
    "FieldLookupRepository",
    "AuditLogger",
    "RateLimiter",
    "PaymentProvider",
    "SearchProvider",
    "MessagingProvider",
    "Authenticator",
]
