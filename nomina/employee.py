"""Employee records and the helpers that compare and display them."""

from __future__ import annotations

import re
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

HEADER_FIELDS = ("ID", "NOMBRE", "HORAS TRABAJADAS", "SUELDO")


def _atoi(text: str) -> int:
    """Read the integer at the start of ``text``; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class Employee:
    """One employee on the payroll."""

    id: int = 0
    name: str = ""
    hours_worked: int = 0
    salary: int = 0

    @classmethod
    def from_strings(
        cls, id_text: str, name: str, hours_text: str, salary_text: str
    ) -> "Employee":
        """Build an employee from text fields, reading numbers leniently."""
        return cls(
            id=_atoi(id_text),
            name=name,
            hours_worked=_atoi(hours_text),
            salary=_atoi(salary_text),
        )


def compare_by_name(first: Employee, second: Employee) -> int:
    """Three-way comparison of two employees by name: -1, 0 or 1."""
    return (first.name > second.name) - (first.name < second.name)


def format_header() -> str:
    """Return the column titles of the employee listing."""
    return "%4s %7s %7s %4s" % HEADER_FIELDS


def format_row(employee: Employee) -> str:
    """Return one line of the employee listing."""
    return "%4d  %7s %7d %4d" % (
        employee.id,
        employee.name,
        employee.hours_worked,
        employee.salary,
    )