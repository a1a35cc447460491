"""
Demos package for the Lambdas Tour.

Re-exports the interfaces and every concrete demo so downstream code can
import from `lambdas.demos` directly.
"""

from lambdas.demos.abstract import AbstractDemo, Demo, DemoContext, DemoResult
from lambdas.demos.functions import (
    BiFunctionDemo,
    ChainedFunctionDemo,
    ConsumerChainDemo,
    FunctionsDemo,
    UnaryOperatorDemo,
)
from lambdas.demos.iteration import ForEachDemo
from lambdas.demos.predicates import AgePredicatesDemo, IntPredicatesDemo
from lambdas.demos.sorting import SortByNameDemo
from lambdas.demos.string_ops import UpperConcatDemo
from lambdas.demos.suppliers import RandomSupplierDemo
from lambdas.demos.threads import CapturedValueDemo, RunnableDemo

__all__ = [
    # Abstracts
    "AbstractDemo",
    "Demo",
    "DemoContext",
    "DemoResult",
    # Concrete demos
    "AgePredicatesDemo",
    "BiFunctionDemo",
    "CapturedValueDemo",
    "ChainedFunctionDemo",
    "ConsumerChainDemo",
    "ForEachDemo",
    "FunctionsDemo",
    "IntPredicatesDemo",
    "RandomSupplierDemo",
    "RunnableDemo",
    "SortByNameDemo",
    "UnaryOperatorDemo",
    "UpperConcatDemo",
]
