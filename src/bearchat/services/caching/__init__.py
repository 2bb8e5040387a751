"""Caching services - persistent translation cache."""

from bearchat.services.caching.translation_cache import (
    CacheEntry,
    TranslationCache,
    make_cache_key,
)

__all__ = [
    "CacheEntry",
    "TranslationCache",
    "make_cache_key",
]
