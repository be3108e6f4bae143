"""Application use cases: one entry point per workflow."""

from translation_cache.application.use_cases.flush_cache import FlushTranslationCache

__all__ = ["FlushTranslationCache"]
