"""Translation services - abstract interface and chat-completion implementation."""

from bearchat.services.translation.translation_service import TranslationService, TranslationResult
from bearchat.services.translation.chat_completion_translation_service import (
    ChatCompletionTranslationService,
)

__all__ = [
    "TranslationService",
    "TranslationResult",
    "ChatCompletionTranslationService",
]
