from __future__ import annotations

import sys
from typing import List, Optional

import typer

from lambdas.concurrency.launcher import TaskLauncher
from lambdas.config import get_settings
from lambdas.demos.abstract import DemoContext
from lambdas.orchestrator import describe_demos, run_demos
from lambdas.reporter import print_catalogue, print_summary
from lambdas.utils.logging import configure_logging, get_logger

log = get_logger(__name__)

app = typer.Typer(help="Lambdas Tour CLI: closures, callbacks and background tasks.")


def _run(demos: Optional[List[str]], summary: bool, detach: bool) -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    launcher = TaskLauncher(daemon=detach or settings.daemon_tasks)
    context = DemoContext.from_settings(settings, launcher=launcher)

    try:
        results = run_demos(demos or None, context=context)
        finished = detach or launcher.shutdown(timeout=settings.task_join_timeout_seconds)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    except KeyboardInterrupt:
        launcher.cancel_all()
        if not detach:
            launcher.wait_all(timeout=settings.task_join_timeout_seconds)
        typer.echo("Cancelled by user.", err=True)
        raise typer.Exit(code=130)

    if not finished:
        log.warning(
            "[TASKS TIMED OUT] cancelling remaining background tasks",
            extra={"timeout": settings.task_join_timeout_seconds},
        )
        launcher.cancel_all()

    if summary:
        print_summary(results, launcher.handles)


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context) -> None:
    """
    Run every demo when no command is given.
    """
    if ctx.invoked_subcommand is None:
        _run(demos=None, summary=False, detach=False)


@app.command()
def run(
    demo: Optional[List[str]] = typer.Option(
        None,
        "--demo",
        "-d",
        help="Demo to run; repeat for several (default: all, in catalogue order).",
    ),
    summary: bool = typer.Option(
        False,
        "--summary",
        help="Render a per-demo summary table on stderr after the run.",
    ),
    detach: bool = typer.Option(
        False,
        "--detach",
        help="Do not wait for background tasks; they are abandoned at exit.",
    ),
) -> None:
    """
    Run one or more demos, then wait for the tasks they launched.
    """
    _run(demos=demo, summary=summary, detach=detach)


@app.command("list")
def list_demos() -> None:
    """
    Show the demo catalogue in run order.
    """
    print_catalogue(describe_demos())


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    seed = settings.random_seed if settings.random_seed is not None else "random"
    typer.echo(
        f"env={settings.app_env} log_level={settings.log_level} | "
        f"captured={settings.captured_number} delay={settings.capture_delay_seconds:g}s | "
        f"supplier bound={settings.supplier_bound} samples={settings.supplier_samples} seed={seed} | "
        f"daemon_tasks={settings.daemon_tasks} join_timeout={settings.task_join_timeout_seconds:g}s"
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
