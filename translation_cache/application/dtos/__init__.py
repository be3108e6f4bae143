"""Application DTOs."""

from translation_cache.application.dtos.flush import FlushResult, FlushScope

__all__ = ["FlushResult", "FlushScope"]
