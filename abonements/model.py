"""A table of subscriptions with CSV persistence."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import astuple
from os import PathLike

from abonements.abonement import Abonement

log = logging.getLogger(__name__)

COLUMNS = ("name", "kind", "end_date")
HEADERS = ("Имя", "Тип", "Срок действия")


class LoadError(Exception):
    """Raised when a file holds no valid subscription records."""


def split_csv_line(line: str) -> list[str]:
    """Split a line on commas that are outside double quotes.

    Quote characters only toggle the quoted state and are dropped.
    """
    parts: list[str] = []
    current: list[str] = []
    inside_quotes = False
    for char in line:
        if char == '"':
            inside_quotes = not inside_quotes
        elif char == "," and not inside_quotes:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return parts


def _quote(field: str) -> str:
    if "," in field:
        return '"' + field.replace('"', '""') + '"'
    return field


class AbonementModel:
    """An ordered, editable table of subscriptions with three columns."""

    def __init__(self, abonements: Iterable[Abonement] = ()) -> None:
        self._abonements: list[Abonement] = list(abonements)

    def __len__(self) -> int:
        return len(self._abonements)

    def __iter__(self) -> Iterator[Abonement]:
        return iter(self._abonements)

    def row_count(self) -> int:
        return len(self._abonements)

    def column_count(self) -> int:
        return len(COLUMNS)

    def _check_row(self, row: int) -> int:
        if not 0 <= row < len(self._abonements):
            raise IndexError(f"row {row} is out of range")
        return row

    def data(self, row: int, column: int) -> str | None:
        """Return the cell text, or None for a column the table does not have."""
        abonement = self._abonements[self._check_row(row)]
        if 0 <= column < len(COLUMNS):
            return astuple(abonement)[column]
        return None

    def header_data(self, section: int) -> str | None:
        """Return the title of a column, or None for an unknown section."""
        if 0 <= section < len(HEADERS):
            return HEADERS[section]
        return None

    def set_data(self, row: int, column: int, value: object) -> None:
        """Replace one cell; a column the table does not have is ignored."""
        abonement = self._abonements[self._check_row(row)]
        if 0 <= column < len(COLUMNS):
            setattr(abonement, COLUMNS[column], str(value))

    def add_abonement(self, abonement: Abonement) -> None:
        self._abonements.append(abonement)

    def remove_abonement(self, row: int) -> None:
        """Remove the given row; a row out of range is ignored."""
        if 0 <= row < len(self._abonements):
            del self._abonements[row]

    def all_abonements(self) -> list[Abonement]:
        return list(self._abonements)

    def set_abonements(self, abonements: Iterable[Abonement]) -> None:
        self._abonements = list(abonements)

    def save_to_file(self, path: str | PathLike[str]) -> None:
        """Write all records as CSV; names and types holding commas are quoted."""
        with open(path, "w", encoding="utf-8") as stream:
            for abonement in self._abonements:
                fields = (_quote(abonement.name), _quote(abonement.kind), abonement.end_date)
                stream.write(",".join(fields) + "\n")

    def load_from_file(self, path: str | PathLike[str]) -> int:
        """Replace the table with the records in a CSV file and return their count.

        Blank lines are skipped and malformed lines are logged and skipped.
        Raises LoadError, leaving the table unchanged, if no line is valid.
        """
        loaded: list[Abonement] = []
        with open(path, encoding="utf-8") as stream:
            for number, raw in enumerate(stream, start=1):
                line = raw.strip()
                if not line:
                    continue
                if line.startswith('"') and line.endswith('"'):
                    line = line[1:-1]
                parts = split_csv_line(line)
                if len(parts) != 3:
                    log.warning("Неверный формат в строке %d: %s", number, line)
                    continue
                name, kind, end_date = (part.strip() for part in parts)
                loaded.append(Abonement(name, kind, end_date))
        if not loaded:
            raise LoadError("Файл не содержит допустимых записей.")
        self.set_abonements(loaded)
        return len(loaded)