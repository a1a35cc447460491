from __future__ import annotations

from lambdas.domain.models import Employee, sample_employees
from lambdas.functional.filtering import SEPARATOR, matching, print_employees_by_age
from lambdas.utils.output import CollectingWriter

OVER_30_LABEL = "Employees over 30 : "


def test_over_30_prints_matches_in_input_order() -> None:
    writer = CollectingWriter()
    employees = sample_employees()  # ages 44, 12, 33, 27

    printed = print_employees_by_age(employees, OVER_30_LABEL, lambda e: e.age > 30, writer)

    assert printed == 2
    assert writer.lines == [
        OVER_30_LABEL,
        SEPARATOR,
        "Jimmy Quartz",
        "44",
        "",
        "Clive Ruby",
        "33",
        "",
    ]


def test_every_match_printed_exactly_once() -> None:
    writer = CollectingWriter()
    employees = [Employee(name=f"E{age}", age=age) for age in (31, 5, 31, 90, 30)]

    print_employees_by_age(employees, "label", lambda e: e.age > 30, writer)

    printed_names = writer.lines[2::3]
    assert printed_names == ["E31", "E31", "E90"]


def test_no_match_prints_only_header() -> None:
    writer = CollectingWriter()
    printed = print_employees_by_age(sample_employees(), "none", lambda e: False, writer)
    assert printed == 0
    assert writer.lines == ["none", SEPARATOR]


def test_source_sequence_untouched() -> None:
    employees = sample_employees()
    before = [employee.model_dump() for employee in employees]
    print_employees_by_age(employees, "x", lambda e: e.age > 18, CollectingWriter())
    assert [employee.model_dump() for employee in employees] == before


def test_matching_is_lazy_and_ordered() -> None:
    evens = matching(range(10), lambda i: i % 2 == 0)
    assert next(evens) == 0
    assert list(evens) == [2, 4, 6, 8]
