"""
Functional primitives for the Lambdas Tour.

Callback wrappers with their combinators, comparators, predicate-driven
printing and the name helpers the demos pass around as values. Everything
here is stateless; output goes through the writer a caller passes in.
"""

from lambdas.functional.comparators import (
    Comparator,
    compare_by_name,
    comparing,
    reversed_order,
    sort_in_place,
    three_way,
)
from lambdas.functional.filtering import SEPARATOR, matching, print_employees_by_age
from lambdas.functional.interfaces import (
    BiFunction,
    Consumer,
    Function,
    Predicate,
    Supplier,
    UnaryOperator,
    compose,
)
from lambdas.functional.names import (
    UpperConcat,
    after_first_space,
    append_age,
    before_first_space,
    do_string_operation,
    first_name,
    get_a_name,
    last_name,
    upper_case_name,
    upper_concat,
)

__all__ = [
    # Callback shapes
    "BiFunction",
    "Consumer",
    "Function",
    "Predicate",
    "Supplier",
    "UnaryOperator",
    "compose",
    # Sorting
    "Comparator",
    "compare_by_name",
    "comparing",
    "reversed_order",
    "sort_in_place",
    "three_way",
    # Filtering
    "SEPARATOR",
    "matching",
    "print_employees_by_age",
    # Names
    "UpperConcat",
    "after_first_space",
    "append_age",
    "before_first_space",
    "do_string_operation",
    "first_name",
    "get_a_name",
    "last_name",
    "upper_case_name",
    "upper_concat",
]
