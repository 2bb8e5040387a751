"""Unit tests for TranslationWorker."""

from unittest.mock import MagicMock

from bearchat.core import Language, TranslationRequest
from bearchat.services import TranslationResult, TranslationWorker


def make_request():
    return TranslationRequest(text="你好", from_lang=Language.ZH, to_lang=Language.EN)


def test_worker_emits_result_and_finished(qt_app):
    service = MagicMock()
    service.translate.return_value = TranslationResult(text="Hello", model="m")
    worker = TranslationWorker(translation_service=service, request=make_request())

    result_spy = MagicMock()
    finished_spy = MagicMock()
    worker.signals.translation_result.connect(result_spy)
    worker.signals.finished.connect(finished_spy)

    worker.run()

    service.translate.assert_called_once_with(make_request())
    result_spy.assert_called_once()
    assert result_spy.call_args.args[0].text == "Hello"
    finished_spy.assert_called_once()


def test_worker_reports_unexpected_exception(qt_app):
    service = MagicMock()
    service.translate.side_effect = RuntimeError("boom")
    worker = TranslationWorker(translation_service=service, request=make_request())

    error_spy = MagicMock()
    finished_spy = MagicMock()
    worker.signals.error.connect(error_spy)
    worker.signals.finished.connect(finished_spy)

    worker.run()

    error_spy.assert_called_once_with("Unexpected translation error: boom")
    finished_spy.assert_called_once()
