"""Unit tests for the QTimer-based Debouncer."""

from unittest.mock import MagicMock

import pytest
from PySide6.QtTest import QTest

from bearchat.services import Debouncer


@pytest.fixture
def debouncer(qt_app):
    debouncer = Debouncer(interval_ms=100)
    yield debouncer
    debouncer.cancel()


@pytest.fixture
def spy(debouncer):
    spy = MagicMock()
    debouncer.triggered.connect(spy)
    return spy


class TestDebouncer:

    def test_default_interval(self, qt_app):
        assert Debouncer().interval_ms == 300

    def test_rapid_changes_emit_once_with_last_value(self, debouncer, spy):
        debouncer.push("a")
        debouncer.push("ab")
        debouncer.push("abc")
        spy.assert_not_called()

        QTest.qWait(400)

        spy.assert_called_once_with("abc")
        assert not debouncer.is_pending()

    def test_each_push_restarts_the_window(self, debouncer, spy):
        debouncer.push("a")
        QTest.qWait(60)
        debouncer.push("b")
        QTest.qWait(60)
        # 120 ms since "a", but only 60 ms of quiet
        spy.assert_not_called()

        QTest.qWait(300)
        spy.assert_called_once_with("b")

    def test_separate_bursts_emit_separately(self, debouncer, spy):
        debouncer.push("first")
        QTest.qWait(300)
        debouncer.push("second")
        QTest.qWait(300)

        assert [c.args[0] for c in spy.call_args_list] == ["first", "second"]

    def test_cancel_prevents_emission(self, debouncer, spy):
        debouncer.push("a")
        assert debouncer.is_pending()

        debouncer.cancel()
        QTest.qWait(300)

        spy.assert_not_called()
        assert not debouncer.is_pending()

    def test_flush_emits_immediately(self, debouncer, spy):
        debouncer.push("now")
        debouncer.flush()
        spy.assert_called_once_with("now")

        QTest.qWait(300)
        spy.assert_called_once()

    def test_flush_without_pending_value_does_nothing(self, debouncer, spy):
        debouncer.flush()
        spy.assert_not_called()
