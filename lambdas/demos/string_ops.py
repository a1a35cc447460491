"""
String operation demo: one capability, two implementations.
"""

from __future__ import annotations

from lambdas.demos.abstract import AbstractDemo, DemoContext, DemoResult
from lambdas.functional.names import UpperConcat, do_string_operation, upper_concat


class UpperConcatDemo(AbstractDemo):
    """Pass a named function, then a stored lambda, where an UpperConcat is expected."""

    name: str = "upper_concat"
    description: str = "Implement a single-method capability with a function and with a lambda."

    def run(self, context: DemoContext) -> DemoResult:
        modded_name = do_string_operation(upper_concat, "Andy", "Brown")
        context.out(modded_name)

        uc: UpperConcat = lambda s1, s2: s1.upper() + s2.upper()  # noqa: E731
        context.out(do_string_operation(uc, "Andy", "Brown"))

        return DemoResult()


__all__ = ["UpperConcatDemo"]
