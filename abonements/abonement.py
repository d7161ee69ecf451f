"""A single subscription record and its one-line CSV form."""

from __future__ import annotations

from dataclasses import dataclass

FIELD_SEPARATOR = ","


@dataclass
class Abonement:
    """One subscription: the holder's name, the subscription type and its end date."""

    name: str = ""
    kind: str = ""
    end_date: str = ""

    def to_csv(self) -> str:
        """Join the three fields with commas, without any quoting."""
        return FIELD_SEPARATOR.join((self.name, self.kind, self.end_date))

    @classmethod
    def from_csv(cls, line: str) -> Abonement:
        """Build a record from a comma-separated line.

        A line that does not split into exactly three fields gives an empty record.
        """
        parts = line.split(FIELD_SEPARATOR)
        if len(parts) != 3:
            return cls()
        name, kind, end_date = parts
        return cls(name, kind, end_date)