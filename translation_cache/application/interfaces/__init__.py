"""Application interfaces (ports).

No runtime imports from translation_cache.infrastructure.
"""

from translation_cache.application.interfaces.repositories import (
    ITranslationCacheRepository,
)

__all__ = ["ITranslationCacheRepository"]
