"""Checksum rules: Luhn for payment card numbers, mod-97 for IBANs."""

from __future__ import annotations

import re
import string
from collections.abc import Mapping
from typing import Any

from fieldcheck.models.results import FailureRecord
from fieldcheck.validation.rules.base import CheckRoutine, as_text, fail, is_blank

_NON_DIGITS = re.compile(r"[^0-9]")

# Country code, check digits, then blocks of four with optional single spaces
_IBAN_PATTERN = re.compile(r"[A-Z]{2}\d{2} ?[A-Z\d]{4}(?: ?\d{4})+ ?\d{1,4}", re.ASCII)

# A=10 ... Z=35
_IBAN_LETTER_VALUES = {letter: str(i) for i, letter in enumerate(string.ascii_uppercase, 10)}


def luhn_valid(number: str) -> bool:
    """Luhn checksum over the digits of ``number``; no digits means invalid."""
    digits = _NON_DIGITS.sub("", number)
    if not digits:
        return False

    parity = len(digits) % 2
    total = 0
    for i, char in enumerate(digits):
        digit = int(char)
        if i % 2 == parity:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def iban_valid(iban: str) -> bool:
    """Structure check plus the ISO 13616 mod-97 checksum."""
    if not _IBAN_PATTERN.fullmatch(iban):
        return False
    compact = iban.replace(" ", "")
    rotated = compact[4:] + compact[:4]
    numeric = "".join(_IBAN_LETTER_VALUES.get(char, char) for char in rotated)
    return int(numeric) % 97 == 1


def check_valid_cc(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must pass the Luhn check; separators such as spaces are ignored."""
    if is_blank(record, field):
        return None
    value = record[field]
    text = as_text(value)
    if text is not None and luhn_valid(text):
        return None
    return fail(field, value, "valid_cc", param)


def check_iban(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must be an upper-case IBAN with a valid mod-97 checksum."""
    if is_blank(record, field):
        return None
    value = record[field]
    if isinstance(value, str) and iban_valid(value):
        return None
    return fail(field, value, "iban", param)


def get_checksum_rules() -> dict[str, CheckRoutine]:
    """Return checksum rule routines keyed by rule name."""
    return {
        "valid_cc": check_valid_cc,
        "iban": check_iban,
    }
