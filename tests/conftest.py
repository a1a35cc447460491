"""
Pytest configuration for the Lambdas Tour.

Provides fixtures for:
- Settings with short delays and a fixed random seed
- An in-memory line writer
- A task launcher that is always wound down after the test
- A demo context wired from the above
"""

from __future__ import annotations

import random
from typing import Generator

import pytest

from lambdas.concurrency.launcher import TaskLauncher
from lambdas.config import Settings, get_settings
from lambdas.demos.abstract import DemoContext
from lambdas.domain.models import Employee, sample_employees
from lambdas.utils.output import CollectingWriter

TEST_SEED = 1234
TEST_DELAY_SECONDS = 0.05
TEST_SUPPLIER_SAMPLES = 5


@pytest.fixture(autouse=True)
def _fresh_settings_cache() -> Generator[None, None, None]:
    """Keep cached settings from leaking env overrides between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        log_level="DEBUG",
        captured_number=65,
        capture_delay_seconds=TEST_DELAY_SECONDS,
        supplier_bound=1000,
        supplier_samples=TEST_SUPPLIER_SAMPLES,
        random_seed=TEST_SEED,
        daemon_tasks=True,
        task_join_timeout_seconds=5.0,
    )


@pytest.fixture
def writer() -> CollectingWriter:
    return CollectingWriter()


@pytest.fixture
def launcher() -> Generator[TaskLauncher, None, None]:
    """
    Daemon-thread launcher; leftover tasks are cancelled and awaited on teardown.
    """
    launcher = TaskLauncher(daemon=True, name_prefix="test-task")
    yield launcher
    launcher.shutdown(cancel=True, timeout=5.0)


@pytest.fixture
def employees() -> list[Employee]:
    return sample_employees()


@pytest.fixture
def context(
    test_settings: Settings,
    writer: CollectingWriter,
    launcher: TaskLauncher,
    employees: list[Employee],
) -> DemoContext:
    return DemoContext(
        out=writer,
        employees=employees,
        launcher=launcher,
        settings=test_settings,
        rng=random.Random(TEST_SEED),
    )
