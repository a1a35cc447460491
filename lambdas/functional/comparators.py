"""
Three-way comparators and in-place sorting.

A comparator takes two values and returns a negative number, zero or a
positive number when the first sorts before, equal to or after the second.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, MutableSequence, TypeVar

from lambdas.domain.models import Employee

T = TypeVar("T")

Comparator = Callable[[T, T], int]


def three_way(left: Any, right: Any) -> int:
    """-1, 0 or 1 following the natural ordering of ``left`` and ``right``."""
    return (left > right) - (left < right)


def compare_by_name(first: Employee, second: Employee) -> int:
    """Case-sensitive lexicographic comparison of employee names."""
    return three_way(first.name, second.name)


def comparing(key: Callable[[T], Any]) -> Comparator[T]:
    """Build a comparator ordering values by ``key(value)``."""

    def compare(first: T, second: T) -> int:
        return three_way(key(first), key(second))

    return compare


def reversed_order(comparator: Comparator[T]) -> Comparator[T]:
    """Comparator imposing the reverse of ``comparator``."""

    def compare(first: T, second: T) -> int:
        return comparator(second, first)

    return compare


def sort_in_place(items: MutableSequence[T], comparator: Comparator[T]) -> None:
    """
    Reorder ``items`` in place so that ``comparator`` holds pairwise.

    The sort is stable: items comparing equal keep their relative order.
    Lists use ``list.sort``; other mutable sequences are sorted through a
    temporary list and written back slot by slot.
    """
    key = cmp_to_key(comparator)
    if isinstance(items, list):
        items.sort(key=key)
        return
    ordered = sorted(items, key=key)
    for index, item in enumerate(ordered):
        items[index] = item


__all__ = [
    "Comparator",
    "three_way",
    "compare_by_name",
    "comparing",
    "reversed_order",
    "sort_in_place",
]
