"""
Lambdas Tour - runnable catalogue of closure, callback and thread idioms.

This package demonstrates, one small snippet at a time:

- Sorting records with comparator functions and lambdas
- Filtering with predicates, and combining predicates
- Suppliers, functions, two-argument functions and unary operators
- Composing functions and chaining consumers
- Fire-and-forget background tasks that capture read-only snapshots

The reusable pieces (callback wrappers, comparators, the task launcher,
capture snapshots and cancellation-aware sleep) live in `lambdas.functional`
and `lambdas.concurrency`; the snippets themselves live in `lambdas.demos`.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from lambdas.concurrency import (
    CancellationToken,
    SleepOutcome,
    Snapshot,
    TaskHandle,
    TaskLauncher,
    capture,
    capturing,
    interruptible_sleep,
)
from lambdas.config import Settings, get_settings
from lambdas.demos.abstract import AbstractDemo, Demo, DemoContext, DemoResult
from lambdas.domain import Employee, sample_employees
from lambdas.functional import (
    BiFunction,
    Consumer,
    Function,
    Predicate,
    Supplier,
    UnaryOperator,
    compare_by_name,
    compose,
    print_employees_by_age,
    sort_in_place,
)
from lambdas.orchestrator import available_demos, describe_demos, run_demos
from lambdas.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Employee",
    "sample_employees",
    # Functional primitives
    "BiFunction",
    "Consumer",
    "Function",
    "Predicate",
    "Supplier",
    "UnaryOperator",
    "compare_by_name",
    "compose",
    "print_employees_by_age",
    "sort_in_place",
    # Background tasks
    "CancellationToken",
    "SleepOutcome",
    "Snapshot",
    "TaskHandle",
    "TaskLauncher",
    "capture",
    "capturing",
    "interruptible_sleep",
    # Demos and runner
    "AbstractDemo",
    "Demo",
    "DemoContext",
    "DemoResult",
    "available_demos",
    "describe_demos",
    "run_demos",
    # Logging
    "configure_logging",
    "get_logger",
]
