"""
Supplier demo: a lambda producing a fresh random number on every call.
"""

from __future__ import annotations

from lambdas.demos.abstract import AbstractDemo, DemoContext, DemoResult
from lambdas.functional.interfaces import Supplier


class RandomSupplierDemo(AbstractDemo):
    name: str = "suppliers"
    description: str = "Draw random integers from a supplier lambda."

    def run(self, context: DemoContext) -> DemoResult:
        rng = context.rng
        bound = context.settings.supplier_bound
        random_supplier = Supplier(lambda: rng.randrange(bound))

        values = []
        for _ in range(context.settings.supplier_samples):
            value = random_supplier.get()
            values.append(value)
            context.out(str(value))

        return DemoResult(extra={"bound": bound, "values": values})


__all__ = ["RandomSupplierDemo"]
