"""
BearChat - speak in one language, read the translation in another.

This package provides a desktop application with:
- Debounced live translation of recognized (or typed) text
- A persistent translation cache with expiration and eviction
- A retrying client for OpenAI-compatible chat-completion endpoints
"""

__version__ = "0.1.0"

from bearchat.core import Language, TranslationConfig, TranslationRequest
from bearchat.exceptions import BearChatError, ConfigurationError, StorageError

__all__ = [
    "Language",
    "TranslationConfig",
    "TranslationRequest",
    "BearChatError",
    "ConfigurationError",
    "StorageError",
]
