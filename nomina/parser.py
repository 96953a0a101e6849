"""Reading employee records from the text and binary data files."""

from __future__ import annotations

import re
import struct
from typing import BinaryIO, List, TextIO

from nomina.employee import Employee

NAME_SIZE = 128
_RECORD = struct.Struct(f"<i{NAME_SIZE}sii")
RECORD_SIZE = _RECORD.size

_TEXT_ROW = re.compile(r"([^,]+),\s*([^,]+),\s*([^,]+),\s*([^\n]+)\n?\s*")


def parse_text(stream: TextIO) -> List[Employee]:
    """Read comma separated rows ``id,name,hours,salary`` until one fails to match."""
    text = stream.read()
    employees: List[Employee] = []
    position = 0
    while position < len(text):
        match = _TEXT_ROW.match(text, position)
        if match is None:
            break
        id_text, name, hours_text, salary_text = match.groups()
        employees.append(Employee.from_strings(id_text, name, hours_text, salary_text))
        position = match.end()
    return employees


def pack_employee(employee: Employee) -> bytes:
    """Encode ``employee`` as one fixed-size binary record."""
    raw_name = employee.name.encode("utf-8")[: NAME_SIZE - 1]
    raw_name = raw_name.decode("utf-8", errors="ignore").encode("utf-8")
    return _RECORD.pack(
        employee.id, raw_name, employee.hours_worked, employee.salary
    )


def unpack_employee(record: bytes) -> Employee:
    """Decode one binary record produced by :func:`pack_employee`."""
    if len(record) != RECORD_SIZE:
        raise ValueError(f"record must be {RECORD_SIZE} bytes, got {len(record)}")
    employee_id, raw_name, hours, salary = _RECORD.unpack(record)
    name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return Employee(id=employee_id, name=name, hours_worked=hours, salary=salary)


def parse_binary(stream: BinaryIO) -> List[Employee]:
    """Read whole binary records until the stream ends; a short tail is ignored."""
    employees: List[Employee] = []
    while True:
        record = stream.read(RECORD_SIZE)
        if len(record) < RECORD_SIZE:
            break
        employees.append(unpack_employee(record))
    return employees