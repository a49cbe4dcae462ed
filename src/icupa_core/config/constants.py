"""Constants shared across icupa-core."""

from enum import Enum


class Environment(str, Enum):
    """Deployment environments."""
    DEVELOPMENT = "development"
    TEST = "test"
    STAGING = "staging"
    PRODUCTION = "production"


class RepositoryBackend(str, Enum):
    """Entity repository implementations."""
    MEMORY = "memory"
    POSTGRES = "postgres"


class RateLimitBackend(str, Enum):
    """Rate limiter implementations."""
    MEMORY = "memory"
    REDIS = "redis"


class SideEffectPolicy(str, Enum):
    """How search and messaging side-effect failures are handled."""
    STRICT = "strict"
    BEST_EFFORT = "best_effort"


class OrderStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    CANCELLED = "cancelled"


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    REFUNDED = "refunded"


DEFAULT_RATE_LIMIT_REQUESTS = 100
DEFAULT_RATE_LIMIT_WINDOW_SECONDS = 60

DEFAULT_ALLOWED_AI_MODELS = (
    "gpt-4o",
    "gpt-4o-mini",
    "gpt-4.1",
    "gpt-4.1-mini",
    "o3-mini",
)

# Entries ending in "/" match a whole top-level type, others match exactly
DEFAULT_ALLOWED_FILE_MIME_PREFIXES = (
    "image/",
    "application/pdf",
    "video/",
)

LISTINGS_SEARCH_INDEX = "listings"
BOOKING_CONFIRMATION_MESSAGE = "Booking confirmed"
