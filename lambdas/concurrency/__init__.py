"""
Concurrency package for the Lambdas Tour.

Centralizes background task concerns: launching, value capture and
cancellation-aware waiting. Demos use it to fire tasks and forget them;
the CLI uses the same handles to wind tasks down at exit.
"""

from lambdas.concurrency.capture import Snapshot, capture, capturing
from lambdas.concurrency.launcher import Task, TaskHandle, TaskLauncher
from lambdas.concurrency.sleep import (
    CancellationToken,
    SleepOutcome,
    current_token,
    interruptible_sleep,
)

__all__ = [
    "Snapshot",
    "capture",
    "capturing",
    "Task",
    "TaskHandle",
    "TaskLauncher",
    "CancellationToken",
    "SleepOutcome",
    "current_token",
    "interruptible_sleep",
]
