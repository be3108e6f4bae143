"""Domain exceptions for the translation cache.

Two failure classes surface to callers: malformed input (raised before
any store interaction) and an unavailable backing store (raised by the
store adapters and propagated unchanged by the repository).
"""

from typing import Any


class TranslationCacheException(Exception):
    """Base exception for all translation cache errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, key).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(TranslationCacheException):
    """Raised when a locale, group, namespace, prefix or TTL is malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional argument name.

        Args:
            message: Description of the validation failure.
            field: Optional argument that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "INVALID_ARGUMENT", details)


class StoreUnavailableError(TranslationCacheException):
    """Raised when the backing key-value store fails to answer."""

    def __init__(self, operation: str, key: str | None = None, reason: str = "") -> None:
        """Initialize with the failed store operation.

        Args:
            operation: Store operation that failed (get, put, forever, forget...).
            key: Key involved, if any.
            reason: Underlying error text.
        """
        message = f"Cache store unavailable during {operation}"
        if key:
            message = f"{message} ({key})"
        details: dict[str, Any] = {"operation": operation}
        if key:
            details["key"] = key
        if reason:
            details["reason"] = reason
        super().__init__(message, "STORE_UNAVAILABLE", details)


class RegistryConfigurationError(TranslationCacheException):
    """Raised when a registry cannot be built for the configured store."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "REGISTRY_CONFIGURATION")
