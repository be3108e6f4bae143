"""DTOs for translation cache flushing."""

from dataclasses import dataclass
from enum import Enum


class FlushScope(str, Enum):
    """What a flush request cleared."""

    DISABLED = "disabled"
    ENTRY = "entry"
    ALL = "all"


@dataclass(frozen=True)
class FlushResult:
    """Outcome of FlushTranslationCache.execute, with the message to show the operator."""

    scope: FlushScope
    message: str
    keys_cleared: int = 0
