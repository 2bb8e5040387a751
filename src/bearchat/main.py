"""Main entry point for the BearChat application."""

import logging
import os
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from bearchat.coordinators import TranslationCoordinator
from bearchat.core import Language
from bearchat.exceptions import ConfigurationError
from bearchat.io import SqliteKeyValueStore
from bearchat.logging_config import setup_logging
from bearchat.services import ChatCompletionTranslationService, SettingsManager, TranslationCache
from bearchat.ui import MainWindow

logger = logging.getLogger(__name__)


def default_store_path() -> Path:
    return Path(os.getenv("BEARCHAT_HOME", Path.home() / ".bearchat")) / "store.db"


def initial_languages() -> tuple[Language, Language]:
    """Read the startup language pair from the environment, falling back to Chinese to Japanese."""
    try:
        return (
            Language.from_code(os.getenv("BEARCHAT_SOURCE_LANGUAGE", Language.ZH.value)),
            Language.from_code(os.getenv("BEARCHAT_TARGET_LANGUAGE", Language.JA.value)),
        )
    except ValueError as e:
        logger.warning("Using default languages: %s", e)
        return Language.ZH, Language.JA


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    setup_logging(os.getenv("BEARCHAT_LOG_LEVEL", "INFO"))

    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("BearChat")
    app.setOrganizationName("BearChat")

    # 2. Initialize Infrastructure
    store = SqliteKeyValueStore(default_store_path())
    settings_manager = SettingsManager(store)
    translation_cache = TranslationCache(store)

    translation_service = None
    startup_error = None
    try:
        translation_service = ChatCompletionTranslationService(
            settings_manager.load_translation_config()
        )
    except ConfigurationError as e:
        startup_error = str(e)
        logger.warning("Translation disabled: %s", e)

    # 3. Construct UI
    main_window = MainWindow(*initial_languages())
    source_language, target_language = main_window.selected_languages()

    # 4. Instantiate Coordinator (Dependency Injection)
    coordinator = TranslationCoordinator(
        translation_cache=translation_cache,
        translation_service=translation_service,
        source_language=source_language,
        target_language=target_language,
    )

    # 5. Signal Wiring
    main_window.source_text_changed.connect(coordinator.on_source_text_changed)
    main_window.languages_changed.connect(coordinator.set_languages)
    main_window.clear_cache_requested.connect(coordinator.clear_cache)
    main_window.translate_now_requested.connect(coordinator.flush_pending_input)
    coordinator.translation_completed.connect(main_window.show_translation)
    coordinator.translation_failed.connect(main_window.show_translation_error)
    coordinator.translating_changed.connect(main_window.set_translating)
    app.aboutToQuit.connect(coordinator.shutdown)

    # 6. Show UI and start event loop
    main_window.show()
    if startup_error:
        main_window.show_error(startup_error)

    exit_code = app.exec()
    if translation_service is not None:
        translation_service.close()
    store.close()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
