"""
Utilities package for the Lambdas Tour.

Exports shared helpers for logging, timing and line output.
Keep this package lightweight and free of demo-specific logic.
"""

from lambdas.utils.logging import configure_logging, get_logger
from lambdas.utils.output import CollectingWriter, LineWriter, StdoutWriter
from lambdas.utils.profiler import TimingStats, timed_block

__all__ = [
    "configure_logging",
    "get_logger",
    "CollectingWriter",
    "LineWriter",
    "StdoutWriter",
    "TimingStats",
    "timed_block",
]
