"""
Predicate demos: filtering the roster, and combining integer tests.
"""

from __future__ import annotations

from lambdas.demos.abstract import AbstractDemo, DemoContext, DemoResult
from lambdas.functional.filtering import print_employees_by_age
from lambdas.functional.interfaces import Predicate


class AgePredicatesDemo(AbstractDemo):
    """Print the employees over 30, under 30 and over 18."""

    name: str = "predicates"
    description: str = "Filter employees by age with predicate lambdas."

    def run(self, context: DemoContext) -> DemoResult:
        employees = context.employees
        out = context.out

        counts = {
            "over_30": print_employees_by_age(
                employees, "Employees over 30 : ", lambda employee: employee.age > 30, out
            ),
            "under_30": print_employees_by_age(
                employees, "Employees under 30 : ", lambda employee: employee.age < 30, out
            ),
            "over_18": print_employees_by_age(
                employees, "Employees over 18 : ", lambda employee: employee.age > 18, out
            ),
        }
        return DemoResult(extra=counts)


class IntPredicatesDemo(AbstractDemo):
    """Test integers against single and chained predicates."""

    name: str = "int_predicates"
    description: str = "Evaluate integer predicates alone and chained with and_."

    def run(self, context: DemoContext) -> DemoResult:
        greater_than_15 = Predicate(lambda i: i > 15)
        less_than_100 = Predicate(lambda i: i < 100)

        context.out(str(greater_than_15.test(20)))
        context.out(str(less_than_100.test(99)))
        context.out(str(greater_than_15.and_(less_than_100).test(44)))

        return DemoResult()


__all__ = ["AgePredicatesDemo", "IntPredicatesDemo"]
