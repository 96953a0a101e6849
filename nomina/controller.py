"""Operations behind the employee menu: loading, editing, listing and saving."""

from __future__ import annotations

import re
from itertools import islice
from typing import Iterable, Optional, TextIO

from nomina.employee import Employee, compare_by_name, format_row
from nomina.inputs import Prompter
from nomina.linkedlist import ASCENDING, LinkedList
from nomina.parser import pack_employee, parse_binary, parse_text

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_EDIT_MENU = (
    "1. Editar nombre: \n"
    "2. Editar sueldo: \n"
    "3. Editar horas trabajadas: \n"
    "4. Editar todos los elementos: \n"
    "Ingrese una opcion: "
)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _store(employees: LinkedList, loaded: Iterable[Employee]) -> int:
    count = 0
    for employee in loaded:
        employees.append(employee)
        count += 1
    return count


def load_from_text(path: str, employees: LinkedList, id_path: str) -> int:
    """Append the employees of the text file at ``path`` to ``employees``.

    The id of the last row read is recorded in ``id_path``. Returns the
    number of employees loaded; raises ``OSError`` if the file cannot be read.
    """
    with open(path, encoding="utf-8") as stream:
        loaded = parse_text(stream)
    _store(employees, loaded)
    if loaded:
        write_last_id(id_path, str(loaded[-1].id))
    return len(loaded)


def load_from_binary(path: str, employees: LinkedList, id_path: str) -> int:
    """Append the employees of the binary file at ``path`` to ``employees``.

    The id of the last record read is recorded in ``id_path``.
    """
    with open(path, "rb") as stream:
        loaded = parse_binary(stream)
    _store(employees, loaded)
    if loaded:
        write_last_id(id_path, str(loaded[-1].id))
    return len(loaded)


def add_employee(
    employees: LinkedList, last_id: str, prompter: Prompter
) -> Employee:
    """Ask for a new employee, give it the id after ``last_id`` and append it."""
    new_id = str(_leading_int(last_id) + 1)
    name = prompter.get_string(f"Su id asignada fue: {new_id}\nIngrese el nombre: ")
    hours = prompter.get_string("Ingrese las horas trabajadas: ")
    salary = prompter.get_string("Ingrese el sueldo: ")
    employee = Employee.from_strings(new_id, name, hours, salary)
    employees.append(employee)
    return employee


def _ask_index(
    employees: LinkedList, prompter: Prompter, message: str, retry: str
) -> int:
    if employees.is_empty():
        raise IndexError("there are no employees")
    index = prompter.get_int(message)
    while not 0 <= index < len(employees):
        index = prompter.get_int(retry)
    return index


def edit_employee(employees: LinkedList, prompter: Prompter) -> bool:
    """Ask for a position and change the chosen fields of that employee.

    A salary or hour count of 0 leaves the current value in place. Returns
    whether a known edit option was chosen.
    """
    index = _ask_index(
        employees,
        prompter,
        "Ingrese el id a editar: ",
        "ERROR. Ingrese el id a editar: ",
    )
    employee = employees[index]
    option = prompter.get_int(_EDIT_MENU)
    if option in (1, 4):
        employee.name = prompter.get_string("Ingrese el nuevo nombre: ")
    if option in (2, 4):
        salary = prompter.get_int("Ingresar el nuevo sueldo:")
        if salary:
            employee.salary = salary
    if option in (3, 4):
        hours = prompter.get_int("Ingrese la nueva cantidad de horas: ")
        if hours:
            employee.hours_worked = hours
    return option in (1, 2, 3, 4)


def remove_employee(employees: LinkedList, prompter: Prompter) -> Optional[Employee]:
    """Ask for a position and, once confirmed with 1, remove that employee.

    Returns the removed employee, or ``None`` when the removal is cancelled.
    """
    index = _ask_index(
        employees,
        prompter,
        "Ingrese el id del empleado: ",
        "ERROR.Ingrese el id del empleado: ",
    )
    answer = prompter.get_int("Ingrese 1 para procedeer a la eliminacion: ")
    if answer != 1:
        return None
    return employees.pop(index)


def list_employees(employees: LinkedList, out: TextIO) -> int:
    """Write one row per employee to ``out`` and return how many were written.

    The first entry holds the data file's header row and is not listed.
    """
    count = 0
    for employee in islice(employees, 1, None):
        out.write(format_row(employee) + "\n")
        count += 1
    return count


def sort_employees(employees: LinkedList) -> None:
    """Sort the employees by name in ascending order."""
    employees.sort(compare_by_name, ASCENDING)


def save_as_text(path: str, employees: LinkedList) -> int:
    """Write every employee as ``id,name,hours,salary`` lines; return the count."""
    count = 0
    with open(path, "w", encoding="utf-8") as stream:
        for employee in employees:
            stream.write(
                f"{employee.id},{employee.name},"
                f"{employee.hours_worked},{employee.salary}\n"
            )
            count += 1
    return count


def save_as_binary(path: str, employees: LinkedList) -> int:
    """Write every employee as a fixed-size binary record; return the count."""
    count = 0
    with open(path, "wb") as stream:
        for employee in employees:
            stream.write(pack_employee(employee))
            count += 1
    return count


def write_last_id(path: str, last_id: str) -> None:
    """Record ``last_id`` as the whole content of the file at ``path``."""
    with open(path, "w", encoding="utf-8") as stream:
        stream.write(last_id)


def read_last_id(path: str) -> str:
    """Return the first word stored in the file at ``path``."""
    with open(path, encoding="utf-8") as stream:
        words = stream.read().split()
    if not words:
        raise ValueError(f"{path} holds no id")
    return words[0]