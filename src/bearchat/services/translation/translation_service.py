"""Translation Service - interface for remote translation engines."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from bearchat.core import TranslationRequest


@dataclass
class TranslationResult:
    """Result of a translation request."""

    text: str
    model: str
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None


class TranslationService(ABC):
    """
    Abstract service translating text between two supported languages.

    Implementations never raise from `translate`; every failure is reported
    through `TranslationResult.error`.
    """

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Configured model, used to tell cache entries of different engines apart."""
        pass

    @abstractmethod
    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate `request.text` from `request.from_lang` to `request.to_lang`.

        Args:
            request: Text and language pair.

        Returns:
            TranslationResult with text or error message.
        """
        pass
