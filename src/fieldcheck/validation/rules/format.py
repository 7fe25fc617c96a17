"""Format rules: numbers, email, URL, IP, GUID, JSON, phone, regex and dates.

Format recognition is delegated to the standard parsers wherever one
exists (``ipaddress``, ``json``, ``urllib.parse``, ``datetime``) and to
``email_validator`` for addresses. Numbers use the locale-independent
grammar in ``fieldcheck.parsing.params``.
"""

from __future__ import annotations

import ipaddress
import json
import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any
from urllib.parse import urlparse

from email_validator import EmailNotValidError, validate_email

from fieldcheck.models.results import FailureRecord
from fieldcheck.parsing.params import (
    compile_pattern,
    parse_int_param,
    parse_numeric,
    require_param,
)
from fieldcheck.validation.rules.base import CheckRoutine, as_text, fail, is_blank

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INTEGER_PATTERN = re.compile(r"[+-]?(?:0|[1-9][0-9]*)")

_URL_SCHEME = re.compile(r"[a-zA-Z][a-zA-Z0-9+.\-]*")
# Schemes that are valid without a host part
_HOSTLESS_SCHEMES = frozenset({"mailto", "news", "file"})

_HEX_GUID = r"[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}"
_GUID_PATTERN = re.compile(rf"\{{{_HEX_GUID}\}}|{_HEX_GUID}")

# 555-555-5555, 5555425555, 555 555 5555, 1(519) 555-4444, 1 (519) 555-4422, 1-555-555-5555
_PHONE_PATTERN = re.compile(
    r"(\d[\s\-.]?)?[(\[\s\-.]{0,2}?\d{3}[)\]\s\-.]{0,2}?\d{3}[\s\-.]?\d{4}",
    re.IGNORECASE | re.ASCII,
)

DEFAULT_DATE_FORMATS: tuple[str, ...] = ("%Y-%m-%d", "%Y-%m-%d %H:%M:%S")


def _today() -> date:
    return date.today()


def check_numeric(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must be a number or a numeric string (``"-1.5e3"`` passes)."""
    if is_blank(record, field):
        return None
    value = record[field]
    if parse_numeric(value) is not None:
        return None
    return fail(field, value, "numeric", param)


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not value.is_integer():
            return False
        number = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _INTEGER_PATTERN.fullmatch(text):
            return False
        number = int(text)
    else:
        return False
    return _INT64_MIN <= number <= _INT64_MAX


def check_integer(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must be a signed 64-bit integer without leading zeros."""
    if is_blank(record, field):
        return None
    value = record[field]
    if _is_integer(value):
        return None
    return fail(field, value, "integer", param)


def check_float(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must be a finite number; integers and numeric strings count.

    Recognition is the same as ``numeric``. The rule exists under its own
    name so failures report ``float`` and pick up the float message.
    """
    if is_blank(record, field):
        return None
    value = record[field]
    if parse_numeric(value) is not None:
        return None
    return fail(field, value, "float", param)


def check_valid_email(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must be a syntactically valid email address (no DNS lookup)."""
    if is_blank(record, field):
        return None
    value = record[field]
    if isinstance(value, str):
        try:
            validate_email(value, check_deliverability=False)
            return None
        except EmailNotValidError:
            pass
    return fail(field, value, "valid_email", param)


def _is_url(text: str) -> bool:
    if any(ch.isspace() for ch in text):
        return False
    try:
        parsed = urlparse(text)
        hostname = parsed.hostname
    except ValueError:
        return False
    if not _URL_SCHEME.fullmatch(parsed.scheme):
        return False
    if parsed.scheme.lower() in _HOSTLESS_SCHEMES:
        return bool(parsed.netloc or parsed.path)
    return bool(hostname)


def check_valid_url(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must be an absolute URL with a scheme and a host."""
    if is_blank(record, field):
        return None
    value = record[field]
    if isinstance(value, str) and _is_url(value):
        return None
    return fail(field, value, "valid_url", param)


def _ip_rule(rule: str, version: int | None) -> CheckRoutine:
    def check(
        field: str, record: Mapping[str, Any], param: str | None = None
    ) -> FailureRecord | None:
        if is_blank(record, field):
            return None
        value = record[field]
        if isinstance(value, str):
            try:
                address = ipaddress.ip_address(value)
            except ValueError:
                address = None
            if address is not None and (version is None or address.version == version):
                return None
        return fail(field, value, rule, param)

    family = "IPv4 or IPv6" if version is None else f"IPv{version}"
    check.__name__ = f"check_{rule}"
    check.__doc__ = f"Value must be a valid {family} address."
    return check


check_valid_ip = _ip_rule("valid_ip", None)
check_valid_ipv4 = _ip_rule("valid_ipv4", 4)
check_valid_ipv6 = _ip_rule("valid_ipv6", 6)


def check_guidv4(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must be a GUID in 8-4-4-4-12 hex form, optionally wrapped in braces."""
    if is_blank(record, field):
        return None
    value = record[field]
    if isinstance(value, str) and _GUID_PATTERN.fullmatch(value):
        return None
    return fail(field, value, "guidv4", param)


def check_valid_json_string(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must be a string holding a JSON object."""
    if is_blank(record, field):
        return None
    value = record[field]
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            decoded = None
        if isinstance(decoded, dict):
            return None
    return fail(field, value, "valid_json_string", param)


def check_phone_number(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must look like a ten digit phone number with an optional country digit."""
    if is_blank(record, field):
        return None
    value = record[field]
    text = as_text(value)
    if text is not None and _PHONE_PATTERN.fullmatch(text):
        return None
    return fail(field, value, "phone_number", param)


def check_regex(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must match the parameter pattern (search semantics).

    Usage: ``regex,/^[a-z]+$/i`` or ``regex,^[a-z]+$``
    """
    if is_blank(record, field):
        return None
    pattern = compile_pattern(require_param("regex", param))
    value = record[field]
    text = as_text(value)
    if text is not None and pattern.search(text):
        return None
    return fail(field, value, "regex", param)


def _round_trips(text: str, fmt: str) -> bool:
    try:
        parsed = datetime.strptime(text, fmt)
    except ValueError:
        return False
    return parsed.strftime(fmt) == text


def check_date(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must be a date in ISO form, or in the given strftime format.

    Usage: ``date`` (``2024-02-29`` or ``2024-02-29 13:45:00``) or
    ``date,%d/%m/%Y``. With a format, the value must survive a
    parse/format round trip unchanged, so ``1/2/2024`` fails ``%d/%m/%Y``.
    """
    if is_blank(record, field):
        return None
    value = record[field]
    formats = (param,) if param else DEFAULT_DATE_FORMATS
    if isinstance(value, str) and any(_round_trips(value, fmt) for fmt in formats):
        return None
    return fail(field, value, "date", param)


def _parse_birth_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None


def age_on(birth: date, today: date) -> int:
    """Whole years between ``birth`` and ``today``."""
    years = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        years -= 1
    return years


def check_min_age(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Birth date value must make the person at least N whole years old today.

    Usage: ``min_age,18``. Someone turning 18 today passes.
    """
    if is_blank(record, field):
        return None
    minimum = parse_int_param("min_age", param)
    value = record[field]
    birth = _parse_birth_date(value)
    if birth is not None and age_on(birth, _today()) >= minimum:
        return None
    return fail(field, value, "min_age", param)


def get_format_rules() -> dict[str, CheckRoutine]:
    """Return format rule routines keyed by rule name."""
    return {
        "numeric": check_numeric,
        "integer": check_integer,
        "float": check_float,
        "valid_email": check_valid_email,
        "valid_url": check_valid_url,
        "valid_ip": check_valid_ip,
        "valid_ipv4": check_valid_ipv4,
        "valid_ipv6": check_valid_ipv6,
        "guidv4": check_guidv4,
        "valid_json_string": check_valid_json_string,
        "phone_number": check_phone_number,
        "regex": check_regex,
        "date": check_date,
        "min_age": check_min_age,
    }
