"""
Line writers shared by the demos and the tasks they launch.

Every demo writes whole lines through a ``LineWriter``. Launched tasks keep
writing after the demo that started them has returned, so writers serialize
lines with a lock: concurrent tasks may interleave lines, never characters.
"""

from __future__ import annotations

import threading
from typing import List, Protocol, runtime_checkable

import typer


@runtime_checkable
class LineWriter(Protocol):
    """Anything that accepts one line of output (without trailing newline)."""

    def __call__(self, line: str = "") -> None: ...


class StdoutWriter:
    """Thread-safe writer echoing lines to stdout."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def __call__(self, line: str = "") -> None:
        with self._lock:
            typer.echo(line)


class CollectingWriter:
    """
    Thread-safe writer keeping lines in memory.

    ``wait_for_lines`` lets callers block until background tasks have written
    the expected amount of output.
    """

    def __init__(self) -> None:
        self._lines: List[str] = []
        self._changed = threading.Condition()

    def __call__(self, line: str = "") -> None:
        with self._changed:
            self._lines.append(str(line))
            self._changed.notify_all()

    @property
    def lines(self) -> List[str]:
        with self._changed:
            return list(self._lines)

    def __len__(self) -> int:
        with self._changed:
            return len(self._lines)

    def clear(self) -> None:
        with self._changed:
            self._lines.clear()

    def wait_for_lines(self, count: int, timeout: float | None = None) -> bool:
        """Block until at least ``count`` lines were written; False on timeout."""
        with self._changed:
            return self._changed.wait_for(lambda: len(self._lines) >= count, timeout=timeout)


class CountingWriter:
    """
    Forward lines to another writer, counting those written from the thread
    that created it.

    Lines from background tasks are forwarded but not counted, so the count
    does not depend on how the tasks get scheduled.
    """

    def __init__(self, target: LineWriter) -> None:
        self._target = target
        self._owner = threading.get_ident()
        self.count = 0

    def __call__(self, line: str = "") -> None:
        if threading.get_ident() == self._owner:
            self.count += 1
        self._target(line)


__all__ = ["LineWriter", "StdoutWriter", "CollectingWriter", "CountingWriter"]
