from dataclasses import dataclass

from .language import Language


@dataclass(frozen=True)
class TranslationRequest:
    """One whole-utterance translation request. `text` is kept untrimmed."""

    text: str
    from_lang: Language
    to_lang: Language

    @property
    def is_blank(self) -> bool:
        """True for empty or whitespace-only text."""
        return not self.text.strip()
