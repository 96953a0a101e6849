"""Interactive menu for managing the employee payroll."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TextIO

from nomina import controller
from nomina.inputs import Prompter
from nomina.linkedlist import LinkedList

MENU = (
    "1. Cargar los datos de los empleados desde el archivo data.csv (modo texto) \n"
    "2. Cargar los datos de los empleados desde el archivo data.csv (modo binario) \n"
    "3. Alta de empleado \n"
    "4. Modificar datos de empleado \n"
    "5. Baja de empleado \n"
    "6. Listar empleados \n"
    "7. Ordenar empleados \n"
    "8. Guardar los datos de los empleados en el archivo data.csv (modo texto) \n"
    "9. Guardar los datos de los empleados en el archivo data.csv (modo binario) \n"
    "10. Salir \n"
)

EXIT_OPTION = 10
NOT_LOADED = "Se necesita cargar datos (opcion 1 o 2)\n"
ALREADY_LOADED = "...Los datos ya han sido cargados...\n"
LOADED = "\n...Datos cargados con exito!... \n"
OPEN_ERROR = "Error al abrir el archivo.\n"
SAVED = "Se han guardado los datos con exito!\n"


@dataclass
class _Session:
    data_path: str
    binary_path: str
    id_path: str
    out: TextIO
    employees: LinkedList = field(default_factory=LinkedList)
    loaded: bool = False
    last_id: str = "0"

    def load(self, loader: Callable[[str, LinkedList, str], int], path: str) -> None:
        if self.loaded:
            self.out.write(ALREADY_LOADED)
            return
        try:
            loader(path, self.employees, self.id_path)
        except OSError:
            self.out.write(OPEN_ERROR)
            return
        self.out.write(LOADED)
        self.loaded = True
        try:
            self.last_id = controller.read_last_id(self.id_path)
        except (OSError, ValueError):
            pass

    def add(self, prompter: Prompter) -> None:
        employee = controller.add_employee(self.employees, self.last_id, prompter)
        self.last_id = str(employee.id)
        self.out.write(
            "\nSe aconseja realizar lo necesario y guardar antes de cargar "
            "nuevamente un empleado...\n"
        )

    def edit(self, prompter: Prompter) -> None:
        controller.list_employees(self.employees, self.out)
        controller.edit_employee(self.employees, prompter)

    def remove(self, prompter: Prompter) -> None:
        controller.list_employees(self.employees, self.out)
        if controller.remove_employee(self.employees, prompter) is None:
            self.out.write("La eliminacion se ha cancelado con exito!\n")
        else:
            self.out.write("Se ha elminado con exito\n")

    def sort(self) -> None:
        self.out.write("\nEspere un momento...\n")
        controller.sort_employees(self.employees)
        controller.list_employees(self.employees, self.out)

    def save(self, saver: Callable[[str, LinkedList], int], path: str) -> None:
        try:
            saver(path, self.employees)
        except OSError:
            self.out.write(OPEN_ERROR)
            return
        self.out.write(SAVED)

    def run(self, option: int, prompter: Prompter) -> None:
        if option == 1:
            self.load(controller.load_from_text, self.data_path)
            return
        if option == 2:
            self.load(controller.load_from_binary, self.binary_path)
            return
        if not 3 <= option <= 9:
            return
        if not self.loaded:
            self.out.write(NOT_LOADED)
            return
        if option == 3:
            self.add(prompter)
        elif option == 4:
            self.edit(prompter)
        elif option == 5:
            self.remove(prompter)
        elif option == 6:
            controller.list_employees(self.employees, self.out)
        elif option == 7:
            self.sort()
        elif option == 8:
            self.save(controller.save_as_text, self.data_path)
        else:
            self.save(controller.save_as_binary, self.binary_path)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="nomina", description="Manage the employee payroll."
    )
    parser.add_argument("--data", default="data.csv", help="text data file")
    parser.add_argument("--binary", default="databin.bin", help="binary data file")
    parser.add_argument(
        "--id-file", default="createId.txt", help="file holding the last id used"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the menu until the user exits or input ends."""
    args = _parse_args(argv)
    out = sys.stdout
    prompter = Prompter(sys.stdin, out)
    session = _Session(args.data, args.binary, args.id_file, out)
    while True:
        out.write(MENU)
        try:
            option = prompter.get_int("Elija una opcion: ")
            if option == EXIT_OPTION:
                return 0
            session.run(option, prompter)
        except EOFError:
            return 0
        except ValueError as error:
            out.write(f"Entrada invalida: {error}\n")
            prompter = Prompter(sys.stdin, out)
        except IndexError as error:
            out.write(f"No hay empleados: {error}\n")


if __name__ == "__main__":
    sys.exit(main())