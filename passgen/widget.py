"""Password widget state, independent of any rendering toolkit.

The widget keeps the generator config, the current password and its strength,
the saved history and the transient "copied" flag.  Front ends render from it
and call its actions; observers registered with :meth:`PasswordWidget.subscribe`
are told after every change.
"""

import logging
import threading
from typing import Callable

import pyperclip

from passgen import (
    CHAR_CLASSES,
    GeneratorConfig,
    generate_password,
    push_history,
    score_strength,
)

logger = logging.getLogger(__name__)

COPIED_RESET_SECONDS = 2.0

Listener = Callable[["PasswordWidget"], None]


class PasswordWidget:
    """UI state for one password generator: config, password, strength, history.

    Config changes regenerate synchronously.  *clipboard* writes text to the
    clipboard (``pyperclip.copy`` by default); *reset_delay* is how long the
    "copied" flag stays up after a copy.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        clipboard: Callable[[str], None] | None = None,
        reset_delay: float = COPIED_RESET_SECONDS,
    ):
        self.config = config or GeneratorConfig()
        self.password = ""
        self.strength = score_strength("")
        self.history: list[str] = []
        self.copied = False

        self._clipboard = clipboard or pyperclip.copy
        self._reset_delay = reset_delay
        self._listeners: list[Listener] = []

        self.regenerate()

    # ── Observers ──────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* with the widget after every state change.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ── Configuration ──────────────────────────────────────────────────

    def update(self, **changes) -> None:
        """Change config fields and regenerate the password."""
        self.config = self.config.replace(**changes)
        self.regenerate()

    def set_length(self, length: int) -> None:
        """Set the password length (clamped to 6-100) and regenerate."""
        self.update(length=length)

    def toggle(self, char_class: str) -> None:
        """Switch one character class on or off and regenerate.

        Raises :class:`ValueError` for names outside ``CHAR_CLASSES``.
        """
        if char_class not in CHAR_CLASSES:
            raise ValueError(f"Unknown character class: {char_class!r}")
        self.update(**{char_class: not getattr(self.config, char_class)})

    # ── Actions ────────────────────────────────────────────────────────

    def regenerate(self) -> str:
        """Draw a new password for the current config, score it, and return it."""
        self.password = generate_password(self.config)
        self.strength = score_strength(self.password)
        logger.debug(
            "Generated %d-character password from %s (%s)",
            self.config.length,
            ", ".join(self.config.enabled_classes()) or "fallback alphabet",
            self.strength["label"],
        )
        self._notify()
        return self.password

    def copy(self) -> None:
        """Copy the current password and raise the "copied" flag.

        The flag drops again after the reset delay.  Pending resets are never
        cancelled, so copying twice schedules two of them.  Clipboard errors
        propagate and leave the flag untouched.
        """
        self._write_clipboard(self.password)
        self._mark_copied()

    def _write_clipboard(self, text: str) -> None:
        try:
            self._clipboard(text)
        except pyperclip.PyperclipException as exc:
            logger.warning("Clipboard write failed: %s", exc)
            raise

    def _mark_copied(self) -> None:
        self.copied = True
        self._notify()

        timer = threading.Timer(self._reset_delay, self._reset_copied)
        timer.daemon = True
        timer.start()

    def _reset_copied(self) -> None:
        self.copied = False
        self._notify()

    def save(self) -> None:
        """Save the current password to the history."""
        history = push_history(self.history, self.password)
        if history != self.history:
            self.history = history
            logger.debug("History now holds %d password(s)", len(history))
            self._notify()

    def select_history(self, index: int) -> None:
        """Copy a saved password and make it current again.

        The clipboard is written first; if that fails the current password
        stays as it was.
        """
        if not 0 <= index < len(self.history):
            raise ValueError(f"No history entry at index {index}")
        entry = self.history[index]
        self._write_clipboard(entry)

        self.password = entry
        self.strength = score_strength(entry)
        self._mark_copied()
