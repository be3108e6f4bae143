"""Infrastructure: concrete stores, registry and repository."""
