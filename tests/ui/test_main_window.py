"""Tests for MainWindow signal wiring (offscreen)."""

from unittest.mock import MagicMock

import pytest

from bearchat.core import Language
from bearchat.ui import MainWindow


@pytest.fixture
def window(qt_app):
    window = MainWindow(source_language=Language.ZH, target_language=Language.JA)
    yield window
    window.close()


def test_selected_languages(window):
    assert window.selected_languages() == (Language.ZH, Language.JA)


def test_typing_emits_source_text(window):
    spy = MagicMock()
    window.source_text_changed.connect(spy)

    window.source_edit.setPlainText("你好")

    spy.assert_called_with("你好")


def test_swap_emits_languages_once(window):
    spy = MagicMock()
    window.languages_changed.connect(spy)

    window.swap_button.click()

    spy.assert_called_once_with(Language.JA, Language.ZH)
    assert window.selected_languages() == (Language.JA, Language.ZH)


def test_translating_indicator(window):
    window.set_translating(True)
    assert window.status_label.text() == "Translating…"

    window.show_translation("こんにちは")
    assert window.translation_label.text() == "こんにちは"
    assert window.status_label.text() == ""


def test_translate_now_action_emits(window):
    spy = MagicMock()
    window.translate_now_requested.connect(spy)

    window.translate_action.trigger()

    spy.assert_called_once()
