"""Checks applied to a new subscription before it enters the table."""

from __future__ import annotations

import re

from abonements.abonement import Abonement

VALID_TYPES = ("Gold", "Silver", "Platinum")

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class ValidationError(ValueError):
    """Raised when an entered subscription is incomplete or malformed."""


def validate_entry(name: str, type_: str, date: str) -> Abonement:
    """Check the entered fields and return the subscription they describe."""
    if not name or not type_ or not date:
        raise ValidationError("Пожалуйста, заполните все поля.")
    if type_ not in VALID_TYPES:
        raise ValidationError("Тип должен быть Gold, Silver или Platinum.")
    if not _DATE_PATTERN.fullmatch(date):
        raise ValidationError("Дата должна быть в формате ГГГГ-ММ-ДД.")

    _, month, day = (int(part) for part in date.split("-"))
    if not 1 <= month <= 12:
        raise ValidationError("Месяц должен быть от 01 до 12.")
    if not 1 <= day <= 31:
        raise ValidationError("День должен быть от 01 до 31.")
    return Abonement(name, type_, date)