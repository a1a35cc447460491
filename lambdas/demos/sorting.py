"""
Sorting demo: the roster ordered by name with two comparator spellings.
"""

from __future__ import annotations

from lambdas.demos.abstract import AbstractDemo, DemoContext, DemoResult
from lambdas.functional.comparators import compare_by_name, sort_in_place, three_way


class SortByNameDemo(AbstractDemo):
    """
    Sort the shared roster in place, first with a named comparator function,
    then with an equivalent lambda, and print the names.

    Later demos see the roster in this order.
    """

    name: str = "sort_by_name"
    description: str = "Sort employees by name with a comparator function, then a lambda."

    def run(self, context: DemoContext) -> DemoResult:
        employees = context.employees

        sort_in_place(employees, compare_by_name)

        sort_in_place(
            employees,
            lambda employee1, employee2: three_way(employee1.name, employee2.name),
        )

        for employee in employees:
            context.out(employee.name)

        return DemoResult(extra={"order": [employee.name for employee in employees]})


__all__ = ["SortByNameDemo"]
