"""Tests for PasswordWidget state and actions."""

import threading
from unittest.mock import Mock, patch

import pyperclip
import pytest

from passgen import GeneratorConfig
from passgen.widget import COPIED_RESET_SECONDS, PasswordWidget


@pytest.fixture
def clipboard():
    return Mock()


@pytest.fixture
def widget(clipboard):
    return PasswordWidget(clipboard=clipboard)


# ── Regeneration ───────────────────────────────────────────────────────────


class TestRegeneration:
    def test_initial_password(self, widget):
        assert len(widget.password) == 12
        assert widget.strength["score"] >= 0
        assert widget.history == []
        assert widget.copied is False

    def test_set_length_regenerates(self, widget):
        widget.set_length(30)
        assert widget.config.length == 30
        assert len(widget.password) == 30

    def test_set_length_is_clamped(self, widget):
        widget.set_length(3)
        assert len(widget.password) == 6

    def test_toggle_flips_class(self, widget):
        widget.toggle("symbols")
        assert widget.config.symbols is False
        assert all(c.isalnum() for c in widget.password)
        widget.toggle("symbols")
        assert widget.config.symbols is True

    def test_toggle_unknown_class_raises(self, widget):
        with pytest.raises(ValueError, match="Unknown character class"):
            widget.toggle("emoji")

    def test_strength_matches_password(self, widget):
        with patch("passgen.secrets.choice", side_effect=lambda seq: seq[0]):
            widget.update(length=8)
        assert widget.password == "AAAAAAAA"
        assert widget.strength["score"] == 2
        assert widget.strength["label"] == "Weak"

    def test_custom_config(self, clipboard):
        config = GeneratorConfig(length=20, uppercase=False, lowercase=False, symbols=False)
        w = PasswordWidget(config, clipboard=clipboard)
        assert len(w.password) == 20
        assert w.password.isdigit()


# ── Observers ──────────────────────────────────────────────────────────────


class TestObservers:
    def test_config_change_notifies(self, widget):
        seen = []
        widget.subscribe(lambda w: seen.append(w.password))
        widget.set_length(16)
        widget.toggle("digits")
        assert len(seen) == 2
        assert seen[-1] == widget.password

    def test_unsubscribe(self, widget):
        listener = Mock()
        unsubscribe = widget.subscribe(listener)
        widget.regenerate()
        unsubscribe()
        widget.regenerate()
        assert listener.call_count == 1

    def test_duplicate_save_does_not_notify(self, widget):
        widget.save()
        listener = Mock()
        widget.subscribe(listener)
        widget.save()
        listener.assert_not_called()


# ── Copy ───────────────────────────────────────────────────────────────────


class TestCopy:
    @patch("passgen.widget.threading.Timer")
    def test_copy_writes_clipboard_and_schedules_reset(self, mock_timer, widget, clipboard):
        widget.copy()
        clipboard.assert_called_once_with(widget.password)
        assert widget.copied is True
        mock_timer.assert_called_once_with(COPIED_RESET_SECONDS, widget._reset_copied)
        mock_timer.return_value.start.assert_called_once()

        # Firing the timer callback clears the flag
        mock_timer.call_args[0][1]()
        assert widget.copied is False

    @patch("passgen.widget.threading.Timer")
    def test_repeated_copy_schedules_independent_timers(self, mock_timer, widget):
        widget.copy()
        widget.copy()
        assert mock_timer.call_count == 2
        mock_timer.return_value.cancel.assert_not_called()

    def test_copied_flag_resets_after_delay(self, clipboard):
        w = PasswordWidget(clipboard=clipboard, reset_delay=0.01)
        reset = threading.Event()
        w.subscribe(lambda widget: None if widget.copied else reset.set())
        w.copy()
        assert reset.wait(timeout=2)
        assert w.copied is False

    @patch("passgen.widget.threading.Timer")
    def test_clipboard_failure_propagates(self, mock_timer, clipboard):
        clipboard.side_effect = pyperclip.PyperclipException("no clipboard")
        w = PasswordWidget(clipboard=clipboard)
        with pytest.raises(pyperclip.PyperclipException, match="no clipboard"):
            w.copy()
        assert w.copied is False
        mock_timer.assert_not_called()

    @patch("passgen.widget.threading.Timer")
    @patch("passgen.widget.pyperclip.copy")
    def test_default_clipboard_is_pyperclip(self, mock_copy, _timer):
        w = PasswordWidget()
        w.copy()
        mock_copy.assert_called_once_with(w.password)


# ── History ────────────────────────────────────────────────────────────────


class TestHistory:
    def test_save_twice_keeps_one_entry(self, widget):
        widget.save()
        widget.save()
        assert widget.history == [widget.password]

    def test_six_saves_keep_last_five(self, widget):
        for pwd in ["one111", "two222", "three3", "four44", "five55", "six666"]:
            widget.password = pwd
            widget.save()
        assert widget.history == ["six666", "five55", "four44", "three3", "two222"]

    def test_regeneration_keeps_history(self, widget):
        widget.save()
        saved = widget.password
        widget.set_length(40)
        assert widget.history == [saved]

    @patch("passgen.widget.threading.Timer")
    def test_select_history_restores_and_copies(self, _timer, widget, clipboard):
        widget.password = "Aa1!aaaa1234"
        widget.save()
        widget.regenerate()
        config = widget.config

        widget.select_history(0)

        assert widget.password == "Aa1!aaaa1234"
        assert widget.strength["label"] == "Good"
        assert widget.config == config
        clipboard.assert_called_once_with("Aa1!aaaa1234")
        assert widget.copied is True

    def test_select_history_out_of_range(self, widget):
        with pytest.raises(ValueError, match="No history entry"):
            widget.select_history(0)

    @patch("passgen.widget.threading.Timer")
    def test_select_history_clipboard_failure_keeps_password(self, mock_timer, widget, clipboard):
        widget.password = "Aa1!aaaa1234"
        widget.save()
        current = widget.regenerate()
        strength = widget.strength
        listener = Mock()
        widget.subscribe(listener)
        clipboard.side_effect = pyperclip.PyperclipException("no clipboard")

        with pytest.raises(pyperclip.PyperclipException):
            widget.select_history(0)

        assert widget.password == current
        assert widget.strength == strength
        assert widget.copied is False
        listener.assert_not_called()
        mock_timer.assert_not_called()
