"""Flush the translation cache (all entries or one locale/group/namespace).

Usage:
    uv run python -m scripts.flush_translation_cache [--locale L] [--group G] [--namespace N]
A single entry is flushed only when both --locale and --group are given;
otherwise every registered translation key is flushed. --namespace
defaults to "*". Does nothing when TRANSLATION_CACHE_ENABLED is false.
"""

import argparse
import asyncio
import sys

from translation_cache.application.use_cases.flush_cache import FlushTranslationCache
from translation_cache.core.config import get_settings
from translation_cache.domain.exceptions import TranslationCacheException
from translation_cache.infrastructure.cache.factory import TranslationCacheFactory
from translation_cache.infrastructure.cache.redis_store import RedisCacheStore
from translation_cache.shared.telemetry.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the flush command."""
    parser = argparse.ArgumentParser(
        prog="flush_translation_cache",
        description="Flush the translation cache (all or specific entries).",
    )
    parser.add_argument("--locale", help="Flush cache for a specific locale")
    parser.add_argument("--group", help="Flush cache for a specific group")
    parser.add_argument(
        "--namespace",
        default="*",
        help="Flush cache for a specific namespace (default: *)",
    )
    return parser


async def main(argv: list[str] | None = None) -> int:
    """Run the flush and return the process exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging()

    if not settings.translation_cache_enabled:
        print("The translation cache is disabled.")
        return 0

    store = TranslationCacheFactory.create_store(settings)
    try:
        if isinstance(store, RedisCacheStore):
            await store.connect()
        repository = TranslationCacheFactory.create_repository(store, settings)
        result = await FlushTranslationCache(repository, cache_enabled=True).execute(
            locale=args.locale,
            group=args.group,
            namespace=args.namespace,
        )
    except TranslationCacheException as e:
        print(f"Flush failed: {e.message}", file=sys.stderr)
        return 1
    finally:
        if isinstance(store, RedisCacheStore):
            await store.disconnect()

    print(result.message)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
