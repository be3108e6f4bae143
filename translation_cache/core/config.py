"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Store and registry selections are validated at load
time so a misconfigured deployment fails before touching Redis.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_STORES = ("redis", "memory")
SUPPORTED_REGISTRY_MODES = ("store", "native")


class Settings(BaseSettings):
    """Settings loaded from environment and .env.

    All settings have defaults; combinations are checked in
    validate_cache_backend.
    """

    # App
    app_name: str = "translation-cache"
    debug: bool = False

    # Translation cache
    translation_cache_enabled: bool = True
    translation_cache_store: str = "redis"
    translation_cache_prefix: str = "translation"
    # "store": registry kept as a plain no-TTL entry (works on any store).
    # "native": Redis set with SADD/SREM, atomic across processes.
    translation_cache_registry_mode: str = "store"

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    redis_socket_timeout: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_cache_backend(self) -> "Settings":
        """Validate store, registry mode and prefix.

        - Store: 'redis' or 'memory'.
        - Registry mode: 'store' or 'native'; 'native' requires the redis store.
        """
        store = self.translation_cache_store.lower()
        if store not in SUPPORTED_STORES:
            raise ValueError(
                f"translation_cache_store must be one of {SUPPORTED_STORES}, got: {self.translation_cache_store!r}"
            )
        mode = self.translation_cache_registry_mode.lower()
        if mode not in SUPPORTED_REGISTRY_MODES:
            raise ValueError(
                f"translation_cache_registry_mode must be one of {SUPPORTED_REGISTRY_MODES}, "
                f"got: {self.translation_cache_registry_mode!r}"
            )
        if mode == "native" and store != "redis":
            raise ValueError(
                "translation_cache_registry_mode 'native' requires translation_cache_store 'redis'"
            )
        if not self.translation_cache_prefix:
            raise ValueError("TRANSLATION_CACHE_PREFIX must not be empty")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
