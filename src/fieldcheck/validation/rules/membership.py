"""Membership rules: allow-lists, deny-lists, boolean tokens and prefixes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fieldcheck.models.results import FailureRecord
from fieldcheck.parsing.params import (
    parse_quoted_tokens,
    parse_semicolon_list,
    require_param,
)
from fieldcheck.validation.rules.base import CheckRoutine, as_text, fail, is_blank

# Accepted by ``boolean``; matched on type and value, so True != "true" != 1.
_BOOLEAN_TOKENS: tuple[Any, ...] = (
    "1",
    "true",
    True,
    1,
    "0",
    "false",
    False,
    0,
    "yes",
    "no",
    "on",
    "off",
)


def _normalized(value: Any) -> str | None:
    text = as_text(value)
    return text.strip().lower() if text is not None else None


def check_contains(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must be one of the parameter tokens, ignoring case.

    Usage: ``contains,'new york' 'los angeles'`` or ``contains,red green blue``
    """
    if is_blank(record, field):
        return None
    value = record[field]
    tokens = parse_quoted_tokens(require_param("contains", param))
    if _normalized(value) in tokens:
        return None
    return fail(field, value, "contains", tokens)


def check_contains_list(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must be in a ``;``-separated list, ignoring case.

    Usage: ``contains_list,visa;mastercard;amex``
    """
    if is_blank(record, field):
        return None
    value = record[field]
    tokens = parse_semicolon_list(require_param("contains_list", param))
    if _normalized(value) in tokens:
        return None
    return fail(field, value, "contains_list", tokens)


def check_doesnt_contain_list(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must not be in a ``;``-separated list, ignoring case.

    Usage: ``doesnt_contain_list,admin;root``
    """
    if is_blank(record, field):
        return None
    value = record[field]
    tokens = parse_semicolon_list(require_param("doesnt_contain_list", param))
    normalized = _normalized(value)
    if normalized is not None and normalized not in tokens:
        return None
    return fail(field, value, "doesnt_contain_list", tokens)


def check_boolean(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must be a recognised boolean token (strict type and value match)."""
    if is_blank(record, field):
        return None
    value = record[field]
    for token in _BOOLEAN_TOKENS:
        if type(value) is type(token) and value == token:
            return None
    return fail(field, value, "boolean", param)


def check_starts(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must begin with the literal parameter text.

    Usage: ``starts,ZA``
    """
    if is_blank(record, field):
        return None
    prefix = require_param("starts", param)
    value = record[field]
    text = as_text(value)
    if text is not None and text.startswith(prefix):
        return None
    return fail(field, value, "starts", param)


def get_membership_rules() -> dict[str, CheckRoutine]:
    """Return membership rule routines keyed by rule name."""
    return {
        "contains": check_contains,
        "contains_list": check_contains_list,
        "doesnt_contain_list": check_doesnt_contain_list,
        "boolean": check_boolean,
        "starts": check_starts,
    }
