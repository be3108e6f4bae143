"""Core constants: cache key structure and shared literal values.

Single source of truth for translation cache key format (DRY). Used by
infrastructure.cache.keys and the flush command.
"""

# Joins the configured prefix and the hashed triple: "<prefix>_<md5>"
CACHE_PREFIX_SEP = "_"

# Delimiter between locale, group and namespace inside the hashed material
CACHE_KEY_SEP = ":"

# Registry address is "<prefix>_registry"
REGISTRY_SUFFIX = "_registry"

# Namespace used when none is given (matches every namespace-less group)
WILDCARD_NAMESPACE = "*"

SECONDS_PER_MINUTE = 60
