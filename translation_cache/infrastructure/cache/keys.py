"""Cache key builders. Single place for key format (DRY).

Translation keys are "<prefix>_<md5(locale:group:namespace)>". Components
must not contain CACHE_KEY_SEP, otherwise two different triples could
hash the same material (e.g. "a:b" + "c" and "a" + "b:c").
"""

import hashlib

from translation_cache.core.constants import (
    CACHE_KEY_SEP,
    CACHE_PREFIX_SEP,
    REGISTRY_SUFFIX,
)
from translation_cache.domain.exceptions import InvalidArgumentError


def validate_component(value: str, name: str) -> None:
    """Raise InvalidArgumentError if value is empty or contains the separator.

    Args:
        value: locale, group or namespace.
        name: Name of the component (for error message).

    Raises:
        InvalidArgumentError: If value is not a non-empty string or contains CACHE_KEY_SEP.
    """
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(
            f"Cache key component {name!r} must be a non-empty string", field=name
        )
    if CACHE_KEY_SEP in value:
        raise InvalidArgumentError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}",
            field=name,
        )


def validate_prefix(prefix: str) -> None:
    """Raise InvalidArgumentError if the cache prefix is empty."""
    if not isinstance(prefix, str) or not prefix:
        raise InvalidArgumentError("Cache prefix must be a non-empty string", field="prefix")


def translation_key(prefix: str, locale: str, group: str, namespace: str) -> str:
    """Cache key for one (locale, group, namespace) translation entry."""
    validate_prefix(prefix)
    for value, name in ((locale, "locale"), (group, "group"), (namespace, "namespace")):
        validate_component(value, name)
    material = CACHE_KEY_SEP.join((locale, group, namespace))
    digest = hashlib.md5(material.encode("utf-8")).hexdigest()
    return f"{prefix}{CACHE_PREFIX_SEP}{digest}"


def registry_key(prefix: str) -> str:
    """Address of the registry entry for the given prefix."""
    validate_prefix(prefix)
    return f"{prefix}{REGISTRY_SUFFIX}"
