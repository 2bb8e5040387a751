"""Supported languages."""

from enum import Enum


class Language(str, Enum):
    """Closed set of languages the translator accepts, keyed by ISO 639-1 code."""

    ZH = "zh"
    EN = "en"
    JA = "ja"
    KO = "ko"
    TH = "th"
    VI = "vi"

    @property
    def display_name(self) -> str:
        """Human-readable English name used in translation instructions."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """
        Look up a language by code, case-insensitively.

        Raises:
            ValueError: If the code is not supported.
        """
        try:
            return cls(code.strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported language code: {code!r}") from None

    def __str__(self) -> str:
        return self.value


_DISPLAY_NAMES = {
    Language.ZH: "Chinese",
    Language.EN: "English",
    Language.JA: "Japanese",
    Language.KO: "Korean",
    Language.TH: "Thai",
    Language.VI: "Vietnamese",
}
