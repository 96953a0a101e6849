import io

import pytest

from nomina.employee import Employee
from nomina.parser import (
    RECORD_SIZE,
    pack_employee,
    parse_binary,
    parse_text,
    unpack_employee,
)


def test_parse_text_reads_rows_in_order():
    stream = io.StringIO("1,Ana,40,1000\n2,Bob,10,500\n")
    assert parse_text(stream) == [
        Employee(1, "Ana", 40, 1000),
        Employee(2, "Bob", 10, 500),
    ]


def test_parse_text_keeps_header_row_as_zeroed_employee():
    stream = io.StringIO("id,nombre,horasTrabajadas,sueldo\n3,Eva,20,700\n")
    employees = parse_text(stream)
    assert employees[0] == Employee(0, "nombre", 0, 0)
    assert employees[1] == Employee(3, "Eva", 20, 700)


def test_parse_text_skips_blank_lines_and_spaces_after_commas():
    stream = io.StringIO("1, Ana, 40, 1000\n\n\n2,Bob,10,500")
    employees = parse_text(stream)
    assert [e.name for e in employees] == ["Ana", "Bob"]
    assert [e.salary for e in employees] == [1000, 500]


def test_parse_text_stops_at_malformed_row():
    stream = io.StringIO("1,Ana,40,1000\n,,,\n2,Bob,10,500\n")
    assert parse_text(stream) == [Employee(1, "Ana", 40, 1000)]


def test_parse_text_empty_stream():
    assert parse_text(io.StringIO("")) == []


def test_pack_unpack_round_trip():
    employee = Employee(42, "José Pérez", 160, 90000)
    record = pack_employee(employee)
    assert len(record) == RECORD_SIZE
    assert unpack_employee(record) == employee


def test_pack_layout_starts_with_little_endian_id():
    record = pack_employee(Employee(7, "Ana", 1, 2))
    assert record[:4] == b"\x07\x00\x00\x00"
    assert record[4:8] == b"Ana\x00"


def test_pack_truncates_long_names():
    record = pack_employee(Employee(1, "x" * 300, 1, 1))
    assert unpack_employee(record).name == "x" * 127


def test_unpack_rejects_wrong_size():
    with pytest.raises(ValueError):
        unpack_employee(b"\x00" * (RECORD_SIZE - 1))


def test_parse_binary_round_trip_ignores_partial_tail():
    employees = [Employee(1, "Ana", 40, 1000), Employee(2, "Bob", 10, 500)]
    data = b"".join(pack_employee(e) for e in employees) + b"\x01\x02\x03"
    assert parse_binary(io.BytesIO(data)) == employees


def test_parse_binary_empty_stream():
    assert parse_binary(io.BytesIO(b"")) == []