"""
Runner executing demos in catalogue order, timing each one.

Usage (example from CLI):
    from lambdas.orchestrator import run_demos

    results = run_demos(demo_names=["sort_by_name", "predicates"])
    print(results)

Background tasks launched by demos keep running after ``run_demos`` returns;
the caller owns ``context.launcher`` and decides whether to wait for them.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Tuple

from lambdas.config import Settings
from lambdas.demos.abstract import Demo, DemoContext, DemoResult
from lambdas.demos.functions import (
    BiFunctionDemo,
    ChainedFunctionDemo,
    ConsumerChainDemo,
    FunctionsDemo,
    UnaryOperatorDemo,
)
from lambdas.demos.iteration import ForEachDemo
from lambdas.demos.predicates import AgePredicatesDemo, IntPredicatesDemo
from lambdas.demos.sorting import SortByNameDemo
from lambdas.demos.string_ops import UpperConcatDemo
from lambdas.demos.suppliers import RandomSupplierDemo
from lambdas.demos.threads import CapturedValueDemo, RunnableDemo
from lambdas.utils.logging import get_logger
from lambdas.utils.output import CountingWriter
from lambdas.utils.profiler import TimingStats, timed_block

log = get_logger(__name__)


def _round_float(value: float, decimals: int = 4) -> float:
    """Round a float to specified decimal places for human-readable output."""
    return round(value, decimals)


def _demo_factories() -> Dict[str, Callable[[], Demo]]:
    """Registry of available demos, in run order."""
    return {
        "runnable": lambda: RunnableDemo(),
        "sort_by_name": lambda: SortByNameDemo(),
        "upper_concat": lambda: UpperConcatDemo(),
        "captured_value": lambda: CapturedValueDemo(),
        "for_each": lambda: ForEachDemo(),
        "predicates": lambda: AgePredicatesDemo(),
        "int_predicates": lambda: IntPredicatesDemo(),
        "suppliers": lambda: RandomSupplierDemo(),
        "functions": lambda: FunctionsDemo(),
        "chained_function": lambda: ChainedFunctionDemo(),
        "bi_function": lambda: BiFunctionDemo(),
        "unary_operator": lambda: UnaryOperatorDemo(),
        "consumer_chain": lambda: ConsumerChainDemo(),
    }


def available_demos() -> List[str]:
    """List available demo names in run order."""
    return list(_demo_factories().keys())


def describe_demos() -> List[Tuple[str, str]]:
    """(name, description) for every demo, in run order."""
    return [(name, factory().description) for name, factory in _demo_factories().items()]


def _resolve_demo(name: str) -> Demo:
    factories = _demo_factories()
    if name not in factories:
        raise ValueError(f"Unknown demo '{name}'. Available: {', '.join(factories)}")
    return factories[name]()


def _resolve_names(demo_names: Optional[Iterable[str]]) -> List[str]:
    names = list(demo_names) if demo_names is not None else ["all"]
    if not names or names == ["all"]:
        return available_demos()
    # Fail before anything runs
    for name in names:
        _resolve_demo(name)
    return names


def _timed_run(demo: Demo, context: DemoContext) -> DemoResult:
    log.info(f"[DEMO START] {demo.name}", extra={"demo": demo.name})
    writer = CountingWriter(context.out)
    demo_context = DemoContext(
        out=writer,
        employees=context.employees,
        launcher=context.launcher,
        settings=context.settings,
        rng=context.rng,
    )
    tasks_before = len(context.launcher.handles)

    with timed_block(demo.name) as stats:
        try:
            result = demo.run(demo_context)
            log.info(f"[DEMO SUCCESS] {demo.name}", extra={"demo": demo.name})
        except Exception as exc:  # noqa: BLE001 - intentional broad catch to record failures
            log.exception(f"[DEMO FAILED] {demo.name}", extra={"demo": demo.name})
            result = DemoResult(error=f"{type(exc).__name__}: {exc}")

    result.setdefault("tasks_launched", len(context.launcher.handles) - tasks_before)
    return _merge_result(demo.name, result, stats, writer.count)


def _merge_result(name: str, result: DemoResult, stats: TimingStats, lines: int) -> DemoResult:
    """Merge a demo result with timing stats, rounding floats for readability."""
    merged = DemoResult(**result)
    merged["demo"] = name
    merged["lines"] = lines
    merged["duration_seconds"] = _round_float(stats.duration_seconds)
    merged["cpu_percent"] = _round_float(stats.cpu_percent, 1) if stats.cpu_percent else None
    merged["rss_bytes"] = stats.rss_bytes
    merged.setdefault("tasks_launched", 0)
    merged.setdefault("error", None)
    return merged


def run_demos(
    demo_names: Optional[Iterable[str]] = None,
    *,
    context: Optional[DemoContext] = None,
    settings: Optional[Settings] = None,
) -> List[DemoResult]:
    """
    Run demos one after another against a shared context.

    Parameters
    ----------
    demo_names : iterable[str] | None
        Demos to run, in the given order. None or ["all"] runs the catalogue.
    context : DemoContext | None
        Shared roster, writer and launcher. Built from settings when omitted.
    settings : Settings | None
        Used only when ``context`` is omitted.

    Returns
    -------
    List[DemoResult]
        One result per demo. A failing demo is logged and recorded with an
        ``error``; the following demos still run.

    Raises
    ------
    ValueError
        If a demo name is unknown (raised before any demo runs).
    """
    names = _resolve_names(demo_names)
    context = context or DemoContext.from_settings(settings)

    results: List[DemoResult] = []
    for position, name in enumerate(names, start=1):
        log.debug(
            f"[DEMO {position}/{len(names)}] {name}",
            extra={"demo": name, "position": position, "total": len(names)},
        )
        results.append(_timed_run(_resolve_demo(name), context))

    failed = [result["demo"] for result in results if result.get("error")]
    log.info(
        f"[RUN COMPLETE] {len(names)} demo(s), {len(failed)} failed",
        extra={"demos": names, "failed": failed},
    )
    return results


__all__ = [
    "available_demos",
    "describe_demos",
    "run_demos",
]
