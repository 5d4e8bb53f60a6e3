"""
passcraft.notification
Clipboard copy and the transient notification shown afterwards.

The notification keeps at most one pending dismissal. Showing a new message
cancels the old timer first, so an earlier timer can never clear a newer message.
"""

import logging
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)

COPIED_MESSAGE = "Password copied to clipboard!"
COPY_FAILED_MESSAGE = "Could not copy to clipboard: {reason}"
NOTHING_TO_COPY_MESSAGE = "Generate a password first."


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


def copy_to_clipboard(password: str, write: Callable[[str], Any]) -> str:
    """
    Write `password` with the platform clipboard primitive `write` and
    return the notification text. Clipboard failures are reported in the
    returned text instead of being raised.
    """
    if not password:
        return NOTHING_TO_COPY_MESSAGE
    try:
        write(password)
    except Exception as e:
        logger.warning("clipboard write failed: %s", e)
        return COPY_FAILED_MESSAGE.format(reason=e)
    return COPIED_MESSAGE


class Notifier:
    def __init__(
        self,
        scheduler: Scheduler,
        timeout_ms: int = 1000,
        on_change: Optional[Callable[[Optional[str]], None]] = None,
    ):
        self.scheduler = scheduler
        self.timeout_ms = timeout_ms
        self.on_change = on_change
        self._message: Optional[str] = None
        self._pending: Optional[TimerHandle] = None

    @property
    def message(self) -> Optional[str]:
        return self._message

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def show(self, message: str) -> None:
        self._cancel_pending()
        self._set(message)
        self._pending = self.scheduler.call_later(self.timeout_ms, self._dismiss)

    def clear(self) -> None:
        self._cancel_pending()
        self._set(None)

    def close(self) -> None:
        # teardown: drop the timer but leave the message alone
        self._cancel_pending()

    def _dismiss(self) -> None:
        self._pending = None
        self._set(None)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _set(self, message: Optional[str]) -> None:
        if message == self._message:
            return
        self._message = message
        if self.on_change is not None:
            self.on_change(message)
