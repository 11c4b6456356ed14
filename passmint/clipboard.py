"""Clipboard copy with a transient "copied" indicator."""

import logging
import threading
from typing import Callable

import pyperclip

from passmint import NoPassword

logger = logging.getLogger(__name__)

COPY_REVERT_SECONDS = 2.0


class CopyFeedback:
    """A "copied" flag that reverts on its own after *revert_after* seconds.

    *on_change* is called with the new state whenever it flips, so a UI can
    swap its copy/check icons.  Only the most recently scheduled revert
    takes effect.
    """

    def __init__(
        self,
        revert_after: float = COPY_REVERT_SECONDS,
        on_change: Callable[[bool], None] | None = None,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        self.revert_after = revert_after
        self.copied = False
        self._on_change = on_change
        self._timer_factory = timer_factory
        self._timer = None
        self._generation = 0
        self._lock = threading.RLock()

    def show(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._set(True)
            self._timer = self._timer_factory(self.revert_after, self._expire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._set(False)

    def _expire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
            self._set(False)

    def _cancel_timer(self) -> None:
        # Invalidates any revert already in flight on the timer thread.
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _set(self, copied: bool) -> None:
        if copied == self.copied:
            return
        self.copied = copied
        if self._on_change:
            self._on_change(copied)


def copy_password(text, feedback: CopyFeedback | None = None) -> bool:
    """Copy *text* to the system clipboard.

    Outcome texts and empty strings are never copied.  A clipboard failure
    is logged and reported as ``False``; it is not retried.
    """
    if not text or isinstance(text, NoPassword) or text in {o.value for o in NoPassword}:
        return False

    try:
        pyperclip.copy(str(text))
    except pyperclip.PyperclipException as exc:
        logger.error("Copy failed: %s", exc)
        return False

    if feedback is not None:
        feedback.show()
    return True
