"""
Fire-and-forget background tasks with an optional handle.

``TaskLauncher.launch`` starts a zero-argument callable on its own thread and
returns at once. Callers that only want the side effects ignore the returned
``TaskHandle``; whoever owns the launcher can still cancel, wait for and
inspect every task it started.

Errors raised by a task body are logged and stored on its handle. They never
reach the thread that launched the task.
"""

from __future__ import annotations

import itertools
import threading
import time
from typing import Any, Callable, List, Optional

from lambdas.concurrency.sleep import CancellationToken, bind_token
from lambdas.utils.logging import get_logger

log = get_logger(__name__)

Task = Callable[[], Any]


class TaskHandle:
    """
    Handle on one launched task.

    Attributes
    ----------
    name : str
        Thread name the task runs under.
    error : BaseException | None
        Exception that escaped the task body, if any.
    """

    def __init__(self, name: str, token: CancellationToken) -> None:
        self.name = name
        self.error: Optional[BaseException] = None
        self._token = token
        self._finished = threading.Event()

    def __repr__(self) -> str:
        state = "done" if self.done() else "running"
        return f"TaskHandle(name={self.name!r}, state={state}, cancelled={self.cancelled})"

    @property
    def token(self) -> CancellationToken:
        return self._token

    @property
    def cancelled(self) -> bool:
        return self._token.cancelled

    @property
    def failed(self) -> bool:
        return self.error is not None

    def cancel(self) -> None:
        """Ask the task to stop; only cancellation-aware waits observe this."""
        self._token.cancel()

    def done(self) -> bool:
        return self._finished.is_set()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the task to finish; True if it did within ``timeout``."""
        return self._finished.wait(timeout)


class TaskLauncher:
    """
    Starts tasks on dedicated threads and keeps their handles.

    Parameters
    ----------
    daemon : bool
        Whether task threads are daemonic. Non-daemon threads keep the process
        alive until they finish; daemon threads are abandoned at exit.
    name_prefix : str
        Prefix for generated thread names.
    """

    def __init__(self, daemon: bool = False, name_prefix: str = "task") -> None:
        self.daemon = daemon
        self.name_prefix = name_prefix
        self._counter = itertools.count(1)
        self._handles: List[TaskHandle] = []
        self._lock = threading.Lock()
        self._closed = False

    def __enter__(self) -> "TaskLauncher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(cancel=exc_type is not None)

    @property
    def handles(self) -> List[TaskHandle]:
        with self._lock:
            return list(self._handles)

    @property
    def closed(self) -> bool:
        return self._closed

    def pending(self) -> List[TaskHandle]:
        return [handle for handle in self.handles if not handle.done()]

    def launch(self, task: Task, *, name: Optional[str] = None) -> TaskHandle:
        """
        Start ``task`` on a new thread and return without waiting for it.

        Raises
        ------
        TypeError
            If ``task`` is not callable.
        RuntimeError
            If the launcher has been shut down.
        """
        if not callable(task):
            raise TypeError(f"task must be callable, got {type(task).__name__}")

        with self._lock:
            if self._closed:
                raise RuntimeError("launcher is shut down; no new tasks accepted")
            thread_name = name or f"{self.name_prefix}-{next(self._counter)}"
            handle = TaskHandle(thread_name, CancellationToken())
            self._handles.append(handle)

        thread = threading.Thread(
            target=self._run,
            args=(task, handle),
            name=thread_name,
            daemon=self.daemon,
        )
        thread.start()
        log.debug(f"[TASK LAUNCHED] {thread_name}", extra={"task": thread_name})
        return handle

    @staticmethod
    def _run(task: Task, handle: TaskHandle) -> None:
        bind_token(handle.token)
        start = time.perf_counter()
        try:
            task()
            log.debug(
                f"[TASK DONE] {handle.name}",
                extra={"task": handle.name, "duration": time.perf_counter() - start},
            )
        except Exception as exc:  # noqa: BLE001 - task errors stay on the task thread
            handle.error = exc
            log.exception(f"[TASK FAILED] {handle.name}", extra={"task": handle.name})
        finally:
            bind_token(None)
            handle._finished.set()

    def cancel_all(self) -> int:
        """Cancel every unfinished task; returns how many were signalled."""
        pending = self.pending()
        for handle in pending:
            handle.cancel()
        if pending:
            log.info(
                f"[TASKS CANCELLED] {len(pending)} pending",
                extra={"tasks": [handle.name for handle in pending]},
            )
        return len(pending)

    def wait_all(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for every launched task, sharing one ``timeout`` across them.

        Returns True if all finished in time.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        for handle in self.handles:
            remaining = None if deadline is None else max(deadline - time.monotonic(), 0.0)
            if not handle.join(remaining):
                log.warning(
                    f"[TASK WAIT TIMEOUT] {handle.name}",
                    extra={"task": handle.name, "timeout": timeout},
                )
                return False
        return True

    def shutdown(self, cancel: bool = False, timeout: Optional[float] = None) -> bool:
        """Stop accepting tasks, optionally cancel the rest, then wait for them."""
        with self._lock:
            self._closed = True
        if cancel:
            self.cancel_all()
        return self.wait_all(timeout)


__all__ = ["Task", "TaskHandle", "TaskLauncher"]
