# nomina

An interactive payroll register for the terminal. The package also holds
the small library the register uses: a singly linked list, an employee
record, readers and writers for the text and binary data files, a console
prompter and the menu actions.

## Installing

```
pip install .
```

## Running

```
nomina
```

By default the register uses these files in the current directory. Each
one can be changed with an option:

| File           | Option      | Contents                                          |
|----------------|-------------|---------------------------------------------------|
| `data.csv`     | `--data`    | employees as text, one per line: `id,name,hours,salary` |
| `databin.bin`  | `--binary`  | the same employees as fixed-size binary records   |
| `createId.txt` | `--id-file` | the last id handed out, used to number new employees |

The register shows this menu until you choose option 10 or input ends:

1. Load employees from the text file
2. Load employees from the binary file
3. Add an employee. Its id is the last id plus one. The last id is read from
   the id file after loading, and is 0 if that file cannot be read.
4. Edit an employee's name, salary, hours or all three. A salary or hour
   count of 0 leaves the current value in place.
5. Remove an employee. You confirm by typing 1.
6. List employees
7. Sort employees by name in ascending order and list them
8. Save employees to the text file
9. Save employees to the binary file
10. Quit

Loading records the id of the last employee read in the id file. Data can
be loaded only once per session. A load that fails because the file cannot
be opened does not count. Options 3 to 9 ask you to load data first.

Options 4 and 5 ask for the employee's position in the list, counting from
0. They do not ask for the employee's id. The listing always skips the
first entry, because `data.csv` normally begins with a header line. When
the register expects a number and gets something else, it prints
`Entrada invalida` and shows the menu again.

## Using the library

### `nomina.linkedlist`

`LinkedList(iterable=())` behaves like a Python sequence. It supports
`len()`, iteration, `lst[i]`, `lst[i] = x`, `del lst[i]` and `in`, as well
as the methods `append`, `insert`, `pop(index)`, `clear` and `index`.

Indexes must be in range. Negative indexes raise `IndexError`; they do not
count from the end. `index` raises `ValueError` for a missing element.

It also has these methods:

- `is_empty()`
- `contains_all(other)`
- `sublist(start, stop)`: a new list. If `stop <= start` the list is empty.
  If `start < 0` or `stop > len`, it raises `IndexError`.
- `clone()`: a shallow copy.
- `sort(compare, order)`: sorts in place with a three-way comparison
  function. `order` is `ASCENDING` (1) or `DESCENDING` (0). Any other order
  raises `ValueError`, and a `compare` that cannot be called raises
  `TypeError`.

```python
from nomina.linkedlist import LinkedList, ASCENDING
from nomina.employee import Employee, compare_by_name

staff = LinkedList()
staff.append(Employee.from_strings("1", "Zoe", "40", "1200"))
staff.append(Employee.from_strings("2", "Ana", "35", "1100"))
staff.sort(compare_by_name, ASCENDING)
```

### `nomina.employee`

- `Employee` is a dataclass with the fields `id`, `name`, `hours_worked`
  and `salary`.
- `Employee.from_strings(id_text, name, hours_text, salary_text)` reads the
  integer at the start of each numeric field, or 0 if there is none.
- `compare_by_name(first, second)` returns -1, 0 or 1.
- `format_header()` and `format_row(employee)` produce the lines of the
  listing.

### `nomina.parser`

- `parse_text(stream)` reads `id,name,hours,salary` rows. It stops at the
  first row that does not match.
- `parse_binary(stream)` reads whole records and ignores a short tail.
- `pack_employee(employee)` and `unpack_employee(record)` convert one
  record. A record is `RECORD_SIZE` (140) bytes: a little-endian 32-bit id,
  a 128-byte NUL-padded UTF-8 name, then 32-bit hours and salary.

### `nomina.inputs`

`Prompter(stdin=None, stdout=None)` writes prompts and reads answers. It
uses the standard streams when none are given. It has these methods:
`get_int`, `get_float`, `get_string` and `get_char`. Bad numbers raise
`ValueError`, and the end of input raises `EOFError`.

### `nomina.controller`

The menu actions:

- Loading: `load_from_text` and `load_from_binary`
- Changing the list: `add_employee`, `edit_employee` and `remove_employee`
- Listing and sorting: `list_employees` and `sort_employees`
- Saving: `save_as_text` and `save_as_binary`
- The id file: `write_last_id` and `read_last_id`

## Tests

```
pip install .[test]
pytest
```