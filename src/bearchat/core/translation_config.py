"""Translation endpoint configuration."""

from dataclasses import dataclass

import httpx

from bearchat.exceptions import ConfigurationError


@dataclass(frozen=True)
class TranslationConfig:
    """
    Connection settings for a chat-completion endpoint.

    Immutable for the lifetime of a translation service; swap configuration by
    building a new service. `base_url` and `model_name` are validated on
    construction. An empty `api_key` is allowed here and reported by the
    service at call time.
    """

    api_key: str
    base_url: str
    model_name: str

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.model_name or not self.model_name.strip():
            raise ConfigurationError("Model name must not be empty")

        try:
            url = httpx.URL(self.base_url)
        except (httpx.InvalidURL, TypeError) as e:
            raise ConfigurationError(f"Invalid base URL {self.base_url!r}: {e}") from e

        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError(
                f"Base URL must be an absolute http(s) URL, got {self.base_url!r}"
            )

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    @property
    def completions_url(self) -> str:
        """Full URL of the chat-completions endpoint."""
        return f"{self.base_url.rstrip('/')}/chat/completions"

    def __repr__(self) -> str:
        # Never leak the credential into logs or tracebacks
        masked = "***" if self.has_api_key else "''"
        return (
            f"TranslationConfig(api_key={masked}, base_url={self.base_url!r}, "
            f"model_name={self.model_name!r})"
        )
