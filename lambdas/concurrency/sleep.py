"""
Cancellation-aware blocking waits.

A launched task that needs to pause calls ``interruptible_sleep``. Instead of
raising when the task is cancelled mid-wait, the call returns
``SleepOutcome.CANCELLED`` and the task decides what to do next.
"""

from __future__ import annotations

import enum
import threading
from typing import Optional

from lambdas.utils.logging import get_logger

log = get_logger(__name__)


class SleepOutcome(str, enum.Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class CancellationToken:
    """A one-shot cancellation flag that blocking waits can observe."""

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until cancelled or ``timeout`` elapses; True if cancelled."""
        return self._event.wait(timeout)


class _UncancellableToken(CancellationToken):
    """Shared token for threads no launcher started; it cannot be cancelled."""

    __slots__ = ()

    def cancel(self) -> None:
        raise RuntimeError("only tasks started by a launcher can be cancelled")


_NEVER_CANCELLED = _UncancellableToken()
_current = threading.local()


def current_token() -> CancellationToken:
    """
    Token of the task running on this thread.

    Threads that were not started by a launcher share a token whose
    ``cancel`` raises.
    """
    return getattr(_current, "token", _NEVER_CANCELLED)


def bind_token(token: Optional[CancellationToken]) -> None:
    """Attach ``token`` to the calling thread (None detaches it)."""
    if token is None:
        _current.__dict__.pop("token", None)
    else:
        _current.token = token


def interruptible_sleep(
    seconds: float, token: Optional[CancellationToken] = None
) -> SleepOutcome:
    """
    Sleep for ``seconds`` unless ``token`` (default: the current task's) is
    cancelled first.
    """
    if seconds < 0:
        raise ValueError(f"sleep length must be non-negative, got {seconds}")
    token = token or current_token()
    if token.wait(seconds):
        log.debug("[SLEEP CANCELLED]", extra={"seconds": seconds})
        return SleepOutcome.CANCELLED
    return SleepOutcome.COMPLETED


__all__ = [
    "SleepOutcome",
    "CancellationToken",
    "current_token",
    "bind_token",
    "interruptible_sleep",
]
