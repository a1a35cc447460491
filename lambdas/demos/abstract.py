"""
Demo interfaces, the shared run context and the result contract.

Concrete demos implement the Demo protocol (or subclass AbstractDemo) and
return a DemoResult so the runner and the reporter can treat them uniformly.
"""

from __future__ import annotations

import abc
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, TypedDict, runtime_checkable

from lambdas.concurrency.launcher import TaskLauncher
from lambdas.config import Settings, get_settings
from lambdas.domain.models import Employee, sample_employees
from lambdas.utils.output import LineWriter, StdoutWriter


class DemoResult(TypedDict, total=False):
    """
    Outcome of one demo run.

    Fields are optional; the runner fills in timing, line counts and errors.
    ``lines`` counts what the demo wrote before returning; output from the
    background tasks it launched arrives later and is not included.
    """

    demo: str
    lines: int
    duration_seconds: float
    cpu_percent: Optional[float]
    rss_bytes: Optional[int]
    tasks_launched: int
    error: Optional[str]
    notes: Optional[str]
    extra: Dict[str, Any]


@dataclass
class DemoContext:
    """
    Everything a demo may touch.

    ``employees`` is the one piece of state shared across demos: the sort demo
    reorders it in place and later demos read the new order.
    """

    out: LineWriter = field(default_factory=StdoutWriter)
    employees: List[Employee] = field(default_factory=sample_employees)
    launcher: TaskLauncher = field(default_factory=TaskLauncher)
    settings: Settings = field(default_factory=get_settings)
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        out: Optional[LineWriter] = None,
        launcher: Optional[TaskLauncher] = None,
    ) -> "DemoContext":
        settings = settings or get_settings()
        return cls(
            out=out or StdoutWriter(),
            launcher=launcher or TaskLauncher(daemon=settings.daemon_tasks),
            settings=settings,
            rng=random.Random(settings.random_seed),
        )


@runtime_checkable
class Demo(Protocol):
    """
    Common interface all demos implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the idiom shown.
    """

    name: str
    description: str

    def run(self, context: DemoContext) -> DemoResult:
        """
        Run the demo, writing its output through ``context.out``.

        Returns
        -------
        DemoResult
            Optional notes; the runner adds timing and counts.
        """
        ...


class AbstractDemo(abc.ABC):
    """
    Optional ABC helper for class-based demos.

    Subclasses set `name` and `description` and implement `run`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def run(self, context: DemoContext) -> DemoResult:  # pragma: no cover - interface only
        """Run the demo and return its result."""
        raise NotImplementedError


__all__ = [
    "DemoResult",
    "DemoContext",
    "Demo",
    "AbstractDemo",
]
