"""
Settings for icupa-core services.

Values come from environment variables (or a ``.env`` file) and are
resolved once at startup into concrete collaborators.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..__version__ import __version__
from .constants import (
    Environment,
    RepositoryBackend,
    RateLimitBackend,
    SideEffectPolicy,
    DEFAULT_RATE_LIMIT_REQUESTS,
    DEFAULT_RATE_LIMIT_WINDOW_SECONDS,
    DEFAULT_ALLOWED_AI_MODELS,
    DEFAULT_ALLOWED_FILE_MIME_PREFIXES,
)


class IcupaSettings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Core Application Settings
    app_name: str = "ICUPA API"
    app_version: str = __version__
    environment: Environment = Environment.DEVELOPMENT
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # HTTP Adapter
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    metrics_enabled: bool = True

    # Logging Configuration
    log_level: str = "INFO"
    log_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    log_file: Optional[str] = None
    log_rotation: str = "10 MB"
    log_retention: str = "7 days"

    # Persistence
    repository_backend: RepositoryBackend = RepositoryBackend.MEMORY
    database_url: Optional[SecretStr] = None
    database_schema: str = "public"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10

    # Rate Limiting Configuration
    rate_limit_backend: RateLimitBackend = RateLimitBackend.MEMORY
    rate_limit_requests: int = Field(default=DEFAULT_RATE_LIMIT_REQUESTS, gt=0)
    rate_limit_window_seconds: int = Field(default=DEFAULT_RATE_LIMIT_WINDOW_SECONDS, gt=0)
    redis_url: Optional[str] = None

    # Providers
    payment_provider: str = "mock"
    stripe_api_key: Optional[SecretStr] = None
    stripe_api_base: str = "https://api.stripe.com/v1"

    search_provider: str = "mock"
    search_url: Optional[str] = None
    search_api_key: Optional[SecretStr] = None

    messaging_provider: str = "mock"
    whatsapp_api_base: str = "https://graph.facebook.com/v19.0"
    whatsapp_phone_number_id: Optional[str] = None
    whatsapp_access_token: Optional[SecretStr] = None

    provider_timeout_seconds: float = Field(default=10.0, gt=0)
    side_effect_policy: SideEffectPolicy = SideEffectPolicy.STRICT

    # Domain rules
    allowed_ai_models: List[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_AI_MODELS))
    allowed_file_mime_prefixes: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_FILE_MIME_PREFIXES)
    )
    session_ttl_seconds: int = Field(default=3600, gt=0)

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_best_effort_side_effects(self) -> bool:
        """Check if search and messaging failures should be contained."""
        return self.side_effect_policy == SideEffectPolicy.BEST_EFFORT


@lru_cache()
def get_settings() -> IcupaSettings:
    """Get cached settings instance."""
    return IcupaSettings()
