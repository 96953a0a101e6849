[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "nomina"
version = "0.1.0"
description = "A small payroll register: load, edit, sort and save employee records in CSV or binary form."
requires-python = ">=3.10"
dependencies = []
keywords = ["payroll", "employees", "csv", "linked list", "register"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nomina = "nomina.cli:main"

[tool.setuptools]
packages = ["nomina"]

[tool.pytest.ini_options]
addopts = "-ra"
