"""Domain layer - Pure value types for translation requests and settings."""

from .language import Language
from .translation_config import TranslationConfig
from .translation_request import TranslationRequest

__all__ = ["Language", "TranslationConfig", "TranslationRequest"]
