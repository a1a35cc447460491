"""
Name getters and string operations used by the function demos.
"""

from __future__ import annotations

from typing import Callable, Protocol

from lambdas.domain.models import Employee
from lambdas.utils.output import LineWriter


def after_first_space(text: str) -> str:
    """Text following the first space; the whole text when there is none."""
    return text[text.find(" ") + 1 :]


def before_first_space(text: str) -> str:
    """Text preceding the first space; the whole text when there is none."""
    return text.split(" ", 1)[0]


def last_name(employee: Employee) -> str:
    return after_first_space(employee.name)


def first_name(employee: Employee) -> str:
    return before_first_space(employee.name)


def upper_case_name(employee: Employee) -> str:
    return employee.name.upper()


def append_age(name: str, employee: Employee) -> str:
    return f"{name} {employee.age}"


def get_a_name(getter: Callable[[Employee], str], employee: Employee, out: LineWriter) -> str:
    """Apply ``getter`` to ``employee``, write the result and return it."""
    name = getter(employee)
    out(name)
    return name


class UpperConcat(Protocol):
    """Combine two strings into one upper-cased string."""

    def __call__(self, s1: str, s2: str) -> str: ...


def upper_concat(s1: str, s2: str) -> str:
    return s1.upper() + s2.upper()


def do_string_operation(operation: UpperConcat, s1: str, s2: str) -> str:
    return operation(s1, s2)


__all__ = [
    "after_first_space",
    "before_first_space",
    "last_name",
    "first_name",
    "upper_case_name",
    "append_age",
    "get_a_name",
    "UpperConcat",
    "upper_concat",
    "do_string_operation",
]
