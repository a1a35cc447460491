"""
Function demos: value-returning lambdas, composition, two-argument functions,
unary operators and consumer chains.

All of them read the roster in the order the sort demo left it.
"""

from __future__ import annotations

from lambdas.demos.abstract import AbstractDemo, DemoContext, DemoResult
from lambdas.domain.models import Employee
from lambdas.functional.interfaces import BiFunction, Consumer, Function, UnaryOperator
from lambdas.functional.names import (
    after_first_space,
    append_age,
    first_name,
    get_a_name,
    last_name,
    upper_case_name,
)


class FunctionsDemo(AbstractDemo):
    """Apply name getters directly and through a helper that takes the getter."""

    name: str = "functions"
    description: str = "Store lambdas returning values and pass them to a helper."

    def run(self, context: DemoContext) -> DemoResult:
        employee = context.employees[0]
        out = context.out

        get_last_name: Function[Employee, str] = Function(last_name)
        out(get_last_name.apply(employee))

        get_first_name: Function[Employee, str] = Function(first_name)
        out(get_first_name.apply(employee))

        get_a_name(get_first_name, employee, out)
        get_a_name(get_last_name, employee, out)

        return DemoResult()


class ChainedFunctionDemo(AbstractDemo):
    name: str = "chained_function"
    description: str = "Upper-case a name, then keep what follows the first space."

    def run(self, context: DemoContext) -> DemoResult:
        upper_case: Function[Employee, str] = Function(upper_case_name)
        chained = upper_case.and_then(after_first_space)
        context.out(chained.apply(context.employees[0]))
        return DemoResult()


class BiFunctionDemo(AbstractDemo):
    name: str = "bi_function"
    description: str = "Combine an upper-cased name and an employee into one string."

    def run(self, context: DemoContext) -> DemoResult:
        employee = context.employees[1]
        upper_case: Function[Employee, str] = Function(upper_case_name)
        add_age: BiFunction[str, Employee, str] = BiFunction(append_age)

        upper_name = upper_case.apply(employee)
        context.out(add_age.apply(upper_name, employee))
        return DemoResult()


class UnaryOperatorDemo(AbstractDemo):
    name: str = "unary_operator"
    description: str = "Increment an integer with a same-type operator."

    def run(self, context: DemoContext) -> DemoResult:
        inc_by_5: UnaryOperator[int] = UnaryOperator(lambda i: i + 5)
        context.out(str(inc_by_5.apply(10)))
        return DemoResult()


class ConsumerChainDemo(AbstractDemo):
    """
    Chain an upper-casing consumer with a printing consumer.

    Consumers drop return values, so the printer receives the original text
    and the upper-cased copy is lost.
    """

    name: str = "consumer_chain"
    description: str = "Chain consumers; the first one's result is discarded."

    def run(self, context: DemoContext) -> DemoResult:
        c1: Consumer[str] = Consumer(lambda s: s.upper())
        c2: Consumer[str] = Consumer(context.out)
        c1.and_then(c2).accept("Hello, World!")
        return DemoResult(notes="The upper-cased value never reaches the printer.")


__all__ = [
    "FunctionsDemo",
    "ChainedFunctionDemo",
    "BiFunctionDemo",
    "UnaryOperatorDemo",
    "ConsumerChainDemo",
]
