# abonements

A small tool for keeping a list of club memberships. Each entry has a
holder's name, a tier (`Gold`, `Silver` or `Platinum`) and an expiry date
written as `YYYY-MM-DD`. The list is kept in a plain CSV file.

## Installation

```
pip install .
```

## Command line

The `abonements` command works on a CSV file and has three subcommands:

```
abonements list FILE
abonements add FILE NAME TYPE DATE
abonements remove FILE ROW
```

- `list` prints a tab-separated table of the file's entries with a row
  number in front of each, starting from 1.
- `add` checks the new entry and appends it to the file. If the file does
  not exist, or holds no valid entries, a new list is started.
- `remove` deletes the entry with the given row number, as shown by `list`.

An entry is checked before it is added: all three fields must be filled in,
the tier must be `Gold`, `Silver` or `Platinum`, and the date must have the
form `YYYY-MM-DD` with a month from 01 to 12 and a day from 01 to 31. The
date is not otherwise checked against the calendar.

On a failed check, a file that cannot be read or written, a file with no
valid entries (for `list` and `remove`), or a row number that does not
exist, the command prints a message to standard error and exits with
status 1. On success it exits with status 0.

## Library use

```python
from abonements.model import AbonementModel, LoadError
from abonements.validation import validate_entry, ValidationError

model = AbonementModel()
try:
    model.add_abonement(validate_entry("Alice", "Gold", "2025-06-30"))
except ValidationError as exc:
    print("rejected:", exc)
model.save_to_file("members.csv")

other = AbonementModel()
try:
    count = other.load_from_file("members.csv")
except LoadError as exc:
    print("could not load:", exc)

for entry in other:
    print(entry.name, entry.kind, entry.end_date, entry.to_csv())
```

- `abonements.abonement.Abonement` is a dataclass with the fields `name`,
  `kind` and `end_date`. `to_csv()` joins them with commas without quoting;
  `Abonement.from_csv(line)` splits a line on commas and gives an empty
  entry unless there are exactly three fields.
- `abonements.validation.validate_entry(name, type_, date)` applies the
  checks described above and returns an `Abonement`, or raises
  `ValidationError` (a `ValueError`).
- `abonements.model.AbonementModel` is an ordered, editable three-column
  table. It supports `len()` and iteration, and has `row_count()`,
  `column_count()`, `data(row, column)`, `set_data(row, column, value)`,
  `header_data(section)`, `add_abonement()`, `remove_abonement(row)`
  (an out-of-range row is ignored), `all_abonements()` and
  `set_abonements()`. `data` and `set_data` raise `IndexError` for a row
  that does not exist.
- `abonements.model.split_csv_line(line)` splits a line on commas outside
  double quotes.

## CSV format

The file has one entry per line: `name,type,end_date`, written as UTF-8.
When a name or a tier contains a comma, it is written in double quotes and
any quotes inside it are doubled.

When a file is loaded, blank lines are skipped; a line wrapped entirely in
double quotes loses those outer quotes; commas inside quotes do not split
fields, and the quote characters themselves are not kept; each field is
stripped of surrounding whitespace. Lines that do not give exactly three
fields are logged as warnings and skipped. `load_from_file` returns the
number of entries loaded. If no line is valid it raises `LoadError` and
leaves the table as it was.

## What it does not do

There is no graphical window or on-screen table: entries are managed only
through the subcommands above or from Python. Cells cannot be edited from
the command line; use `set_data` for that.