from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lambdas.concurrency.launcher import TaskHandle
from lambdas.demos.abstract import DemoResult


def _stderr_console() -> Console:
    # stdout belongs to demo output
    return Console(stderr=True)


def print_catalogue(demos: Iterable[Tuple[str, str]], console: Optional[Console] = None) -> None:
    """Render the demo catalogue, in run order, as a rich table."""
    console = console or Console()

    table = Table(title="Lambdas Tour", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Demo", style="cyan", no_wrap=True)
    table.add_column("Description")

    for position, (name, description) in enumerate(demos, start=1):
        table.add_row(str(position), name, description)

    console.print(table)


def print_summary(
    results: Sequence[DemoResult],
    tasks: Sequence[TaskHandle] = (),
    console: Optional[Console] = None,
) -> None:
    """
    Render per-demo results as a rich table, followed by the state of the
    background tasks the run launched.
    """
    console = console or _stderr_console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    table = Table(title="Demo Run Summary", box=box.ROUNDED)
    table.add_column("Demo", style="cyan", no_wrap=True)
    table.add_column("Lines\n[dim](sync only)[/dim]", justify="right", style="magenta")
    table.add_column("Tasks", justify="right", style="blue")
    table.add_column("Duration (ms)", justify="right", style="green")
    table.add_column("CPU %", justify="right", style="red")
    table.add_column("RSS (MB)", justify="right", style="yellow")
    table.add_column("Status")

    for res in results:
        duration_ms = (res.get("duration_seconds") or 0.0) * 1000
        cpu = res.get("cpu_percent")
        rss_bytes = res.get("rss_bytes")
        error = res.get("error")
        table.add_row(
            res.get("demo", "Unknown"),
            str(res.get("lines", 0)),
            str(res.get("tasks_launched", 0)),
            f"{duration_ms:.2f}",
            f"{cpu:.1f}" if cpu is not None else "N/A",
            f"{rss_bytes / (1024 * 1024):.2f}" if rss_bytes else "N/A",
            f"[red]{escape(error)}[/red]" if error else "[green]ok[/green]",
        )

    console.print(table)

    if tasks:
        console.print(_task_line(tasks))


def _task_line(tasks: Sequence[TaskHandle]) -> str:
    finished: List[TaskHandle] = [task for task in tasks if task.done()]
    failed = [task for task in finished if task.failed]
    cancelled = [task for task in tasks if task.cancelled]
    parts = [f"{len(finished)}/{len(tasks)} finished"]
    if cancelled:
        parts.append(f"[yellow]{len(cancelled)} cancelled[/yellow]")
    if failed:
        parts.append(f"[red]{len(failed)} failed[/red]")
    return "Background tasks: " + ", ".join(parts)
