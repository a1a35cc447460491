"""End-to-end runs through the typer app."""

from __future__ import annotations

import logging
from typing import Generator

import pytest
from typer.testing import CliRunner

from lambdas import main as main_module
from lambdas.concurrency.launcher import TaskHandle
from lambdas.concurrency.sleep import interruptible_sleep
from lambdas.main import app

pytestmark = pytest.mark.integration

FAST_ENV = {
    "CAPTURE_DELAY_SECONDS": "0.01",
    "RANDOM_SEED": "7",
    "SUPPLIER_SAMPLES": "3",
    "SUPPLIER_BOUND": "10",
    "LOG_LEVEL": "WARNING",
    "TASK_JOIN_TIMEOUT_SECONDS": "5",
}

EXPECTED_IN_ORDER = [
    "Alex Crystal",
    "Bob Diamond",
    "Clive Ruby",
    "Jimmy Quartz",
    "ANDYBROWN",
    "ANDYBROWN",
    "Employees over 30 : ",
    "Employees under 30 : ",
    "Employees over 18 : ",
    "CRYSTAL",
    "BOB DIAMOND 12",
    "15",
]


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """The CLI reconfigures root logging onto the runner's streams."""
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _stdout_lines(result) -> list[str]:
    return result.stdout.splitlines()


def test_no_arguments_runs_every_demo(runner: CliRunner) -> None:
    result = runner.invoke(app, [], env=FAST_ENV)

    assert result.exit_code == 0, result.output
    lines = _stdout_lines(result)
    positions = [lines.index(expected) for expected in EXPECTED_IN_ORDER]
    assert positions == sorted(positions)
    # background tasks finished before the command returned
    assert "65" in lines
    assert "Hello from a runnable via lambdas." in lines
    assert {"Line 1", "Line 2", "Line 3"} <= set(lines)
    assert "Hello, World!" in lines


def test_run_selected_demo(runner: CliRunner) -> None:
    result = runner.invoke(app, ["run", "-d", "sort_by_name", "-d", "unary_operator"], env=FAST_ENV)

    assert result.exit_code == 0, result.output
    assert _stdout_lines(result) == [
        "Alex Crystal",
        "Bob Diamond",
        "Clive Ruby",
        "Jimmy Quartz",
        "15",
    ]


def test_run_captured_value_waits_for_task(runner: CliRunner) -> None:
    result = runner.invoke(
        app, ["run", "--demo", "captured_value"], env={**FAST_ENV, "CAPTURED_NUMBER": "99"}
    )

    assert result.exit_code == 0, result.output
    assert _stdout_lines(result) == ["99"]


def test_unknown_demo_exits_with_usage_code(runner: CliRunner) -> None:
    result = runner.invoke(app, ["run", "--demo", "nope"], env=FAST_ENV)

    assert result.exit_code == 2
    assert "Unknown demo 'nope'" in result.output


def test_summary_goes_to_stderr(runner: CliRunner) -> None:
    result = runner.invoke(app, ["run", "-d", "runnable", "--summary"], env=FAST_ENV)

    assert result.exit_code == 0, result.output
    assert "Demo Run Summary" not in result.stdout
    assert "Demo Run Summary" in result.output


def test_list_shows_catalogue(runner: CliRunner) -> None:
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "sort_by_name" in result.stdout
    assert "consumer_chain" in result.stdout


def test_info_shows_effective_settings(runner: CliRunner) -> None:
    result = runner.invoke(app, ["info"], env=FAST_ENV)

    assert result.exit_code == 0
    assert "captured=65" in result.stdout
    assert "seed=7" in result.stdout


def test_interrupt_during_demos_cancels_launched_tasks(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    launched: list[TaskHandle] = []

    def interrupted_run(demo_names, *, context):
        launched.append(context.launcher.launch(lambda: interruptible_sleep(60.0)))
        raise KeyboardInterrupt

    monkeypatch.setattr(main_module, "run_demos", interrupted_run)

    result = runner.invoke(app, [], env=FAST_ENV)

    assert result.exit_code == 130
    assert "Cancelled by user." in result.output
    assert launched[0].cancelled
    assert launched[0].done()
