"""
Iteration demo: a per-element lambda over the roster.
"""

from __future__ import annotations

from lambdas.demos.abstract import AbstractDemo, DemoContext, DemoResult
from lambdas.domain.models import Employee
from lambdas.functional.interfaces import Consumer

RULE = "-" * 39


class ForEachDemo(AbstractDemo):
    name: str = "for_each"
    description: str = "Print every employee's name and age through a per-element callback."

    def run(self, context: DemoContext) -> DemoResult:
        out = context.out
        out(RULE)

        def show(employee: Employee) -> None:
            out(employee.name)
            out(str(employee.age))

        print_employee = Consumer(show)
        for employee in context.employees:
            print_employee(employee)

        return DemoResult()


__all__ = ["ForEachDemo", "RULE"]
