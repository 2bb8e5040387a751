"""Services layer - business logic and external integrations."""

from bearchat.services.settings_manager import (
    Settings,
    SettingsManager,
    decode_credential,
    encode_credential,
)
from bearchat.services.debouncer import Debouncer

# Translation services
from bearchat.services.translation import (
    ChatCompletionTranslationService,
    TranslationResult,
    TranslationService,
)

# Caching services
from bearchat.services.caching import CacheEntry, TranslationCache, make_cache_key

from bearchat.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
    "Settings",
    "SettingsManager",
    "encode_credential",
    "decode_credential",
    "Debouncer",
    "TranslationService",
    "TranslationResult",
    "ChatCompletionTranslationService",
    "CacheEntry",
    "TranslationCache",
    "make_cache_key",
    "TranslationWorker",
    "WorkerSignals",
]
