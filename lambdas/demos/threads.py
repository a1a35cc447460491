"""
Thread demos: fire-and-forget tasks built from lambdas and closures.

Neither demo keeps the handles the launcher returns. Their output appears
whenever the task threads get scheduled, usually after the demo returned.
"""

from __future__ import annotations

from lambdas.concurrency.capture import Snapshot, capturing
from lambdas.concurrency.sleep import SleepOutcome, interruptible_sleep
from lambdas.demos.abstract import AbstractDemo, DemoContext, DemoResult
from lambdas.utils.logging import get_logger

log = get_logger(__name__)


class RunnableDemo(AbstractDemo):
    """Launch a one-line task from a lambda and a multi-line task from a def."""

    name: str = "runnable"
    description: str = "Start threads from a lambda and from a nested function."

    def run(self, context: DemoContext) -> DemoResult:
        out = context.out

        context.launcher.launch(lambda: out("Hello from a runnable via lambdas."))

        def three_lines() -> None:
            out("Line 1")
            out("Line 2")
            out("Line 3")

        context.launcher.launch(three_lines)

        return DemoResult(tasks_launched=2, notes="Tasks print asynchronously.")


class CapturedValueDemo(AbstractDemo):
    """
    A task printing a captured number after a delay.

    The number travels in a frozen snapshot, so neither the task nor the code
    that created it can change what the task eventually prints. If the task is
    cancelled during its delay it logs the interruption and prints anyway.
    """

    name: str = "captured_value"
    description: str = "Task closes over a read-only snapshot and prints it after a delay."

    def run(self, context: DemoContext) -> DemoResult:
        out = context.out
        number = context.settings.captured_number
        delay = context.settings.capture_delay_seconds

        def print_value(snapshot: Snapshot) -> None:
            if interruptible_sleep(snapshot.delay) is SleepOutcome.CANCELLED:
                log.warning(
                    "[TASK INTERRUPTED] captured value printed early",
                    extra={"delay": snapshot.delay},
                )
            out(str(snapshot.number))

        context.launcher.launch(
            capturing(print_value, number=number, delay=delay),
            name="captured-value",
        )

        return DemoResult(
            tasks_launched=1,
            notes=f"Prints {number} after {delay:g}s.",
            extra={"captured": number, "delay_seconds": delay},
        )


__all__ = ["RunnableDemo", "CapturedValueDemo"]
