"""Domain layer: exceptions shared by every other layer.

No dependencies on infrastructure.
"""

from translation_cache.domain.exceptions import (
    InvalidArgumentError,
    RegistryConfigurationError,
    StoreUnavailableError,
    TranslationCacheException,
)

__all__ = [
    "InvalidArgumentError",
    "RegistryConfigurationError",
    "StoreUnavailableError",
    "TranslationCacheException",
]
