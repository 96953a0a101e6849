import io

import pytest

from nomina.inputs import Prompter


def make(text):
    out = io.StringIO()
    return Prompter(io.StringIO(text), out), out


def test_get_int_shows_prompt_and_reads_value():
    prompter, out = make("42\n")
    assert prompter.get_int("Elija una opcion: ") == 42
    assert out.getvalue() == "Elija una opcion: "


def test_get_int_reads_tokens_on_one_line():
    prompter, _ = make("3 -4\n")
    assert prompter.get_int("a") == 3
    assert prompter.get_int("b") == -4


def test_get_int_skips_blank_lines():
    prompter, _ = make("\n\n  17\n")
    assert prompter.get_int("x") == 17


def test_get_int_rejects_non_number():
    prompter, _ = make("abc\n")
    with pytest.raises(ValueError):
        prompter.get_int("x")


def test_get_int_at_end_of_input():
    prompter, _ = make("")
    with pytest.raises(EOFError):
        prompter.get_int("x")


def test_get_float_reads_value():
    prompter, _ = make("3.5\n")
    assert prompter.get_float("x") == 3.5


def test_get_string_after_int_reads_next_line():
    prompter, out = make("5\nJuan Perez\n")
    assert prompter.get_int("id: ") == 5
    assert prompter.get_string("nombre: ") == "Juan Perez"
    assert out.getvalue() == "id: nombre: "


def test_get_string_strips_line_ending():
    prompter, _ = make("Ana\r\n")
    assert prompter.get_string("x") == "Ana"


def test_get_string_at_end_of_input():
    prompter, _ = make("")
    with pytest.raises(EOFError):
        prompter.get_string("x")


def test_get_char_reads_first_character():
    prompter, _ = make("xyz\n")
    assert prompter.get_char("x") == "x"


def test_get_char_then_int_discards_nothing_of_next_line():
    prompter, _ = make("s\n9\n")
    assert prompter.get_char("c") == "s"
    assert prompter.get_int("n") == 9