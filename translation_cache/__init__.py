"""Registry-backed translation cache over a flat key-value store."""

__version__ = "1.0.0"
