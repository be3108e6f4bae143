"""Application layer: interfaces, DTOs and use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces.
"""

from translation_cache.application.interfaces import ITranslationCacheRepository
from translation_cache.application.use_cases import FlushTranslationCache

__all__ = ["FlushTranslationCache", "ITranslationCacheRepository"]
