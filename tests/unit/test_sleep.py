from __future__ import annotations

import threading
import time

import pytest

from lambdas.concurrency.sleep import (
    CancellationToken,
    SleepOutcome,
    bind_token,
    current_token,
    interruptible_sleep,
)

LONG_SLEEP = 10.0


def test_sleep_completes() -> None:
    start = time.perf_counter()
    assert interruptible_sleep(0.02) is SleepOutcome.COMPLETED
    assert time.perf_counter() - start >= 0.02


def test_zero_sleep_completes() -> None:
    assert interruptible_sleep(0) is SleepOutcome.COMPLETED


def test_cancelled_token_returns_immediately() -> None:
    token = CancellationToken()
    token.cancel()
    start = time.perf_counter()
    assert interruptible_sleep(LONG_SLEEP, token) is SleepOutcome.CANCELLED
    assert time.perf_counter() - start < 1.0


def test_cancel_from_other_thread_wakes_sleeper() -> None:
    token = CancellationToken()
    threading.Timer(0.05, token.cancel).start()
    assert interruptible_sleep(LONG_SLEEP, token) is SleepOutcome.CANCELLED
    assert token.cancelled


def test_negative_sleep_rejected() -> None:
    with pytest.raises(ValueError):
        interruptible_sleep(-1)


def test_default_token_is_never_cancelled() -> None:
    assert current_token().cancelled is False


def test_bound_token_is_used_by_default() -> None:
    token = CancellationToken()
    token.cancel()
    bind_token(token)
    try:
        assert current_token() is token
        assert interruptible_sleep(LONG_SLEEP) is SleepOutcome.CANCELLED
    finally:
        bind_token(None)
    assert current_token() is not token


def test_default_token_cannot_be_cancelled() -> None:
    with pytest.raises(RuntimeError):
        current_token().cancel()
    assert current_token().cancelled is False


def test_other_threads_unaffected_by_cancel_attempt() -> None:
    outcomes: list[SleepOutcome] = []
    with pytest.raises(RuntimeError):
        current_token().cancel()

    worker = threading.Thread(target=lambda: outcomes.append(interruptible_sleep(0.02)))
    worker.start()
    worker.join(5.0)

    assert outcomes == [SleepOutcome.COMPLETED]
    assert interruptible_sleep(0.02) is SleepOutcome.COMPLETED
