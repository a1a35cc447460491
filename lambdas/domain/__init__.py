"""
Domain package for the Lambdas Tour.

Exports the record type the demos sort, filter and transform.
Keep this package focused on data definitions.
"""

from lambdas.domain.models import SAMPLE_ROSTER, Employee, sample_employees

__all__ = [
    "Employee",
    "SAMPLE_ROSTER",
    "sample_employees",
]
