"""
Timing utilities for the Lambdas Tour.

This module provides a context manager that measures:
- Wall-clock time (perf_counter)
- CPU usage of the process (psutil)
- Resident memory after the block (psutil)

Usage examples:
    from lambdas.utils.profiler import timed_block

    with timed_block("sort_by_name") as stats:
        demo.run(context)

    print(stats.duration_seconds, stats.cpu_percent)
"""

from __future__ import annotations

import contextlib
import time
from dataclasses import dataclass, field
from typing import Generator, Optional

import psutil


@dataclass
class TimingStats:
    """
    Container for timing measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    cpu_percent: Optional[float] = field(default=None)
    rss_bytes: Optional[int] = field(default=None)


@contextlib.contextmanager
def timed_block(label: str) -> Generator[TimingStats, None, None]:
    """
    Context manager timing a block of code.

    The CPU percent is the process-wide figure psutil reports between the
    priming call on entry and the reading on exit, so launched background
    threads running at the same time are included.
    """
    stats = TimingStats(label=label)
    process = psutil.Process()
    # cpu_percent needs a priming call
    process.cpu_percent(interval=None)

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts
        try:
            stats.cpu_percent = process.cpu_percent(interval=None)
            stats.rss_bytes = process.memory_info().rss
        except psutil.Error:
            stats.cpu_percent = None
            stats.rss_bytes = None


__all__ = ["TimingStats", "timed_block"]
