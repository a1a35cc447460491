"""
Predicate-driven printing of employee records.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, TypeVar

from lambdas.domain.models import Employee
from lambdas.utils.output import LineWriter

T = TypeVar("T")

SEPARATOR = "----------------------------"


def matching(items: Iterable[T], condition: Callable[[T], bool]) -> Iterator[T]:
    """Yield the items for which ``condition`` is true, in input order."""
    for item in items:
        if condition(item):
            yield item


def print_employees_by_age(
    employees: Iterable[Employee],
    age_text: str,
    age_condition: Callable[[Employee], bool],
    out: LineWriter,
) -> int:
    """
    Write ``age_text``, a separator, then name, age and a blank line for every
    employee satisfying ``age_condition``.

    The source sequence is only read. Returns the number of employees printed.
    """
    out(age_text)
    out(SEPARATOR)
    printed = 0
    for employee in matching(employees, age_condition):
        out(employee.name)
        out(str(employee.age))
        out()
        printed += 1
    return printed


__all__ = ["SEPARATOR", "matching", "print_employees_by_age"]
