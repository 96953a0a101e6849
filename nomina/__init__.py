"""A payroll register of employee records kept in a linked list, with text and binary storage and an interactive menu."""

__version__ = "0.1.0"