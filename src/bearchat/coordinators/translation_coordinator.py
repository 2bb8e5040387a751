"""Translation Coordinator - Debounced cache-then-network translation of live input."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from bearchat.core import Language, TranslationRequest
from bearchat.services import (
    Debouncer,
    TranslationCache,
    TranslationResult,
    TranslationService,
)
from bearchat.services.api_workers import TranslationWorker
from bearchat.services.debouncer import DEFAULT_DEBOUNCE_MS

logger = logging.getLogger(__name__)


class _TranslationRequest(QObject):
    """Holds the context of one in-flight request and routes its results back."""

    def __init__(
        self,
        request: TranslationRequest,
        model: str,
        generation: int,
        parent: "TranslationCoordinator",
    ):
        super().__init__()
        self.request = request
        self.model = model
        self.generation = generation
        self.parent_ref = parent

    @Slot(object)
    def on_translation_result(self, result):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_result(
                    result, self.request, self.model, self.generation
                )
            except RuntimeError:
                # Coordinator might be destroyed, ignore
                pass

    @Slot(str)
    def on_translation_error(self, error: str):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_error(error, self.generation)
            except RuntimeError:
                pass

    @Slot()
    def on_finished(self):
        coordinator = self.parent_ref
        if coordinator:
            coordinator._release_request(self.generation)


class TranslationCoordinator(QObject):
    """
    Orchestrates live translation of the source text.

    Responsibilities:
    - Debounce source text changes so only settled input is translated.
    - Serve repeated requests from the translation cache.
    - Run cache misses through the translation service off the UI thread.
    - Publish only the result of the most recent input event.

    Every debounced input mints a new generation. A result is published only
    if its generation is still current when it arrives, so a slow response to
    older input never replaces the translation of newer input.
    """

    translation_started = Signal()
    translation_completed = Signal(str)
    translation_failed = Signal(str)
    translating_changed = Signal(bool)

    def __init__(
        self,
        translation_cache: TranslationCache,
        translation_service: Optional[TranslationService],
        source_language: Language = Language.ZH,
        target_language: Language = Language.JA,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.translation_cache = translation_cache
        self.translation_service = translation_service
        self.source_language = source_language
        self.target_language = target_language

        # Thread pool for async API calls
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.translated_text = ""
        self.error: Optional[str] = None
        self.is_translating = False
        self._source_text = ""

        self._generation_counter = 0
        self._current_generation: Optional[int] = None

        # Keep helpers alive while their workers run in background threads
        self._request_helpers: dict[int, _TranslationRequest] = {}

        self._debouncer = Debouncer(debounce_ms, parent=self)
        self._debouncer.triggered.connect(self.translate_now)

    @property
    def current_generation(self) -> Optional[int]:
        return self._current_generation

    @property
    def source_text(self) -> str:
        return self._source_text

    def on_source_text_changed(self, text: str) -> None:
        """Called on every change of the recognized text; translation is debounced."""
        self._source_text = text
        self._debouncer.push(text)

    def set_languages(self, source_language: Language, target_language: Language) -> None:
        """Switch the language pair and re-translate the current text."""
        if (source_language, target_language) == (self.source_language, self.target_language):
            return
        self.source_language = source_language
        self.target_language = target_language
        self._debouncer.push(self._source_text)

    def set_translation_service(self, translation_service: Optional[TranslationService]) -> None:
        """Replace the service, e.g. after the user saved new settings."""
        self.translation_service = translation_service

    def clear_cache(self) -> None:
        self.translation_cache.clear()

    def flush_pending_input(self) -> None:
        """Translate pending input now instead of waiting for the quiet window."""
        self._debouncer.flush()

    @Slot(object)
    def translate_now(self, text: str) -> int:
        """
        Resolve a translation for `text` immediately (cache, then network).

        Returns:
            The generation minted for this input.
        """
        self._generation_counter += 1
        generation = self._generation_counter
        self._current_generation = generation

        request = TranslationRequest(
            text=text,
            from_lang=self.source_language,
            to_lang=self.target_language,
        )

        if request.is_blank:
            self._publish_result("")
            return generation

        if self.translation_service is None:
            self._publish_error("Translation service not initialized. Configure the API settings.")
            return generation

        model = self.translation_service.model_name
        cached = self.translation_cache.get(
            request.text,
            request.from_lang,
            request.to_lang,
            model,
        )
        if cached:
            logger.debug("Cache hit for generation %d", generation)
            self._publish_result(cached)
            return generation

        self.error = None
        self._set_translating(True)
        self.translation_started.emit()

        worker = TranslationWorker(
            translation_service=self.translation_service,
            request=request,
        )

        request_helper = _TranslationRequest(request, model, generation, self)
        self._request_helpers[generation] = request_helper

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)
        worker.signals.finished.connect(request_helper.on_finished)

        self.thread_pool.start(worker)
        return generation

    def shutdown(self) -> None:
        """Cancel pending debounced input and drop any in-flight results."""
        self._debouncer.cancel()
        self._current_generation = None
        self._set_translating(False)

    def _handle_translation_result(
        self,
        result: TranslationResult,
        request: TranslationRequest,
        model: str,
        generation: int,
    ) -> None:
        """Handle a worker result (runs in main thread)."""
        if generation != self._current_generation:
            logger.debug(
                "Ignoring stale translation result (generation %d, current %s)",
                generation,
                self._current_generation,
            )
            return

        if result.is_error:
            self._publish_error(result.error or "Unknown error")
            return

        if result.text:
            self.translation_cache.set(
                request.text,
                request.from_lang,
                request.to_lang,
                result.text,
                model,
            )

        self._publish_result(result.text)

    def _handle_translation_error(self, error: str, generation: int) -> None:
        if generation != self._current_generation:
            logger.debug("Ignoring stale translation error (generation %d)", generation)
            return
        self._publish_error(error)

    def _release_request(self, generation: int) -> None:
        self._request_helpers.pop(generation, None)

    def _publish_result(self, text: str) -> None:
        self.translated_text = text
        self.error = None
        self._set_translating(False)
        self.translation_completed.emit(text)

    def _publish_error(self, error: str) -> None:
        logger.info("Translation failed: %s", error)
        self.error = error
        self._set_translating(False)
        self.translation_failed.emit(error)

    def _set_translating(self, value: bool) -> None:
        if self.is_translating != value:
            self.is_translating = value
            self.translating_changed.emit(value)
