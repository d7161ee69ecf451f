"""Command line for keeping a list of subscriptions in a CSV file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from abonements.model import AbonementModel, LoadError
from abonements.validation import VALID_TYPES, ValidationError, validate_entry

LOAD_FAILED = "Ошибка при загрузке файла"
SAVE_FAILED = "Ошибка при сохранении файла"
NO_ROW = "Сначала выберите строку для удаления"


class _CommandError(Exception):
    pass


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="abonements", description="Keep subscriptions in a CSV file.")
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("list", help="show the subscriptions in a file")
    show.add_argument("file", type=Path)

    add = commands.add_parser("add", help="add a subscription to a file")
    add.add_argument("file", type=Path)
    add.add_argument("name")
    add.add_argument("type", help="one of " + ", ".join(VALID_TYPES))
    add.add_argument("date", help="end date as YYYY-MM-DD")

    remove = commands.add_parser("remove", help="remove a subscription by its row number")
    remove.add_argument("file", type=Path)
    remove.add_argument("row", type=int, help="row number as shown by list, from 1")
    return parser


def _load(path: Path) -> AbonementModel:
    model = AbonementModel()
    try:
        model.load_from_file(path)
    except (OSError, LoadError) as exc:
        raise _CommandError(LOAD_FAILED) from exc
    return model


def _save(model: AbonementModel, path: Path) -> None:
    try:
        model.save_to_file(path)
    except OSError as exc:
        raise _CommandError(SAVE_FAILED) from exc


def _list(args: argparse.Namespace) -> None:
    model = _load(args.file)
    headers = [model.header_data(column) for column in range(model.column_count())]
    print("\t".join(["#", *headers]))
    for number, abonement in enumerate(model, start=1):
        print("\t".join([str(number), abonement.name, abonement.kind, abonement.end_date]))


def _add(args: argparse.Namespace) -> None:
    abonement = validate_entry(args.name, args.type, args.date)
    model = AbonementModel()
    if args.file.exists():
        try:
            model.load_from_file(args.file)
        except LoadError:
            pass
        except OSError as exc:
            raise _CommandError(LOAD_FAILED) from exc
    model.add_abonement(abonement)
    _save(model, args.file)


def _remove(args: argparse.Namespace) -> None:
    model = _load(args.file)
    if not 1 <= args.row <= len(model):
        raise _CommandError(NO_ROW)
    model.remove_abonement(args.row - 1)
    _save(model, args.file)


_COMMANDS = {"list": _list, "add": _add, "remove": _remove}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        _COMMANDS[args.command](args)
    except (ValidationError, _CommandError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())