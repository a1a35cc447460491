"""
Read-only snapshots of values a background task closes over.

A task may run long after it was created and on another thread, so it must
not see later changes to the variables it references. ``capture`` copies the
values once and freezes them; assigning to a snapshot attribute raises.
"""

from __future__ import annotations

import copy
from typing import Any, Callable, TypeVar

from pydantic import BaseModel

R = TypeVar("R")


class Snapshot(BaseModel):
    """Frozen bag of captured values, read as attributes."""

    model_config = {
        "frozen": True,
        "extra": "allow",
        "arbitrary_types_allowed": True,
    }

    def as_dict(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

    def __getitem__(self, name: str) -> Any:
        try:
            return (self.model_extra or {})[name]
        except KeyError:
            raise KeyError(f"nothing captured under {name!r}") from None


def capture(**values: Any) -> Snapshot:
    """
    Snapshot ``values`` by deep copy.

    Mutable containers are copied too, so later changes to the originals do
    not reach the task.

    Raises
    ------
    ValueError
        If a name would be shadowed by a model attribute (``copy``, ``json``,
        ``dict``, ...) or starts with an underscore.
    """
    reserved = sorted(name for name in values if name.startswith("_") or hasattr(Snapshot, name))
    if reserved:
        raise ValueError(f"cannot capture under reserved name(s): {', '.join(reserved)}")
    return Snapshot(**{name: copy.deepcopy(value) for name, value in values.items()})


def capturing(body: Callable[[Snapshot], R], **values: Any) -> Callable[[], R]:
    """
    Build a zero-argument task running ``body`` against a snapshot of
    ``values`` taken now.
    """
    snapshot = capture(**values)

    def task() -> R:
        return body(snapshot)

    task.__name__ = getattr(body, "__name__", "captured_task")
    task.__qualname__ = getattr(body, "__qualname__", task.__name__)
    return task


__all__ = ["Snapshot", "capture", "capturing"]
