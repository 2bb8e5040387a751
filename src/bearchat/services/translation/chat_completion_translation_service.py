"""Chat Completion Translation Service - OpenAI-compatible `/chat/completions` client."""

import logging
import time
from typing import Callable, Optional

import httpx

from bearchat.core import Language, TranslationConfig, TranslationRequest
from bearchat.services.translation.translation_service import TranslationResult, TranslationService

logger = logging.getLogger(__name__)

RETRY_COUNT = 2
RETRY_DELAY = 1.0  # seconds


class ChatCompletionTranslationService(TranslationService):
    """
    Translation service for any OpenAI-compatible chat-completion endpoint.

    Every failure (transport error, non-2xx status, unexpected body) is
    retried after a fixed delay, up to `retry_count` extra attempts. The
    service is stateless apart from its configuration; one instance can be
    shared by concurrent workers.
    """

    TEMPERATURE = 0.3
    MAX_TOKENS = 1000

    SYSTEM_PROMPT = """You are a professional translation assistant. Translate the following {source} text into {target}.
The translation must be accurate, natural and idiomatic, keeping the tone and style of the original.
Only output the translation, without any explanation or other content."""

    def __init__(
        self,
        config: TranslationConfig,
        http_client: Optional[httpx.Client] = None,
        retry_count: int = RETRY_COUNT,
        retry_delay: float = RETRY_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the service.

        Args:
            config: Endpoint, credential and model.
            http_client: Client used for requests. Defaults to a new httpx.Client
                with no timeout; completions can take well over httpx's 5 s default.
            retry_count: Extra attempts after the first failure.
            retry_delay: Seconds to wait between attempts.
            sleep: Blocking wait used between attempts (injectable for tests).
        """
        self._config = config
        self._client = http_client or httpx.Client(timeout=None)
        self._retry_count = retry_count
        self._retry_delay = retry_delay
        self._sleep = sleep

    @property
    def model_name(self) -> str:
        return self._config.model_name

    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate text with the configured model.

        Returns:
            TranslationResult with translated text, or an empty text and the
            last failure message once all attempts are used up.
        """
        if not self._config.has_api_key:
            return TranslationResult(
                text="",
                model=self.model_name,
                error="API key not configured. Add it in settings or set BEARCHAT_API_KEY.",
            )

        if request.is_blank:
            return TranslationResult(text="", model=self.model_name)

        attempts = self._retry_count + 1
        last_error = "Translation service error"

        for attempt in range(1, attempts + 1):
            try:
                text = self._request_completion(request)
                if attempt > 1:
                    logger.info("Translation succeeded on attempt %d/%d", attempt, attempts)
                return TranslationResult(text=text, model=self.model_name)
            except (httpx.HTTPError, _CompletionError) as e:
                last_error = str(e) or type(e).__name__
                logger.warning(
                    "Translation attempt %d/%d failed: %s", attempt, attempts, last_error
                )

            if attempt < attempts:
                self._sleep(self._retry_delay)

        return TranslationResult(text="", model=self.model_name, error=last_error)

    def close(self) -> None:
        """Release pooled connections."""
        self._client.close()

    def build_system_prompt(self, from_lang: Language, to_lang: Language) -> str:
        """Instruction naming both languages and asking for the bare translation."""
        return self.SYSTEM_PROMPT.format(
            source=from_lang.display_name,
            target=to_lang.display_name,
        )

    def _request_completion(self, request: TranslationRequest) -> str:
        payload = {
            "model": self.model_name,
            "messages": [
                {
                    "role": "system",
                    "content": self.build_system_prompt(request.from_lang, request.to_lang),
                },
                {"role": "user", "content": request.text},
            ],
            "temperature": self.TEMPERATURE,
            "max_tokens": self.MAX_TOKENS,
        }
        logger.debug(
            "POST %s model=%s chars=%d", self._config.completions_url, self.model_name, len(request.text)
        )

        response = self._client.post(
            self._config.completions_url,
            json=payload,
            headers={"Authorization": f"Bearer {self._config.api_key}"},
        )

        if not response.is_success:
            body = response.text.strip()
            raise _CompletionError(body or f"HTTP {response.status_code}")

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise _CompletionError(f"Unexpected response from translation API: {e!r}") from e

        if not isinstance(content, str):
            raise _CompletionError("Unexpected response from translation API: missing content")

        return content.strip()


class _CompletionError(Exception):
    """Non-success status or malformed body from the completion endpoint."""
