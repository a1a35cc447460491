"""
Domain models for the Lambdas Tour.

Defines the ``Employee`` record shared by the sorting, filtering and function
demos, and the sample roster they operate on.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class Employee(BaseModel):
    """
    A named person with an age.

    Mutable in place: fields are read and assigned as plain attributes.
    Assignments are type-checked, but the age is deliberately not range
    checked (negative ages are accepted).
    """

    name: str = Field(..., description="Full name, first and last separated by a space.")
    age: int = Field(..., description="Age in years; not validated.")

    model_config = {
        "frozen": False,
        "validate_assignment": True,
        "strict": True,
    }

    def __str__(self) -> str:
        return f"{self.name} ({self.age})"


SAMPLE_ROSTER = (
    ("Jimmy Quartz", 44),
    ("Bob Diamond", 12),
    ("Clive Ruby", 33),
    ("Alex Crystal", 27),
)


def sample_employees() -> List[Employee]:
    """Fresh list of the four sample employees, in insertion order."""
    return [Employee(name=name, age=age) for name, age in SAMPLE_ROSTER]


__all__ = ["Employee", "SAMPLE_ROSTER", "sample_employees"]
