"""Small parameter grammars used by individual check routines.

Each rule owns the interpretation of its raw parameter text. The helpers
here keep those grammars in one place so they can be tested on their own:

- ``require_param``: the rule needs a parameter at all
- ``parse_int_param``: ``max_len,240`` -> 240
- ``parse_quoted_tokens``: ``contains,'new york' 'boston'`` -> ["new york", "boston"]
- ``parse_semicolon_list``: ``contains_list,a;b;c`` -> ["a", "b", "c"]
- ``parse_numeric``: locale-independent number recognition -> Decimal
- ``compile_pattern``: ``regex,/^[a-z]+$/i`` -> compiled pattern

Helpers raise ValueError (or re.error) for a malformed parameter; the
engine reports that as a RoutineFault because the rule definition, not
the input data, is broken.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import Any

# Optional surrounding whitespace, sign, digits with optional fraction, exponent.
# Locale independent: '.' is the only decimal separator and only ASCII digits count.
_NUMERIC_PATTERN = re.compile(
    r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$", re.ASCII
)

_QUOTED_TOKEN = re.compile(r"'(.+?)'")

# Delimiters accepted for "/pattern/flags" parameters
_PATTERN_DELIMITERS = frozenset("/#~%@!;`")
_PATTERN_FLAGS: dict[str, re.RegexFlag] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": re.UNICODE,
}


def require_param(rule: str, param: str | None) -> str:
    """Return ``param`` or raise if the rule was declared without one."""
    if param is None:
        msg = f"rule '{rule}' requires a parameter"
        raise ValueError(msg)
    return param


def parse_int_param(rule: str, param: str | None) -> int:
    """Parse an integer parameter such as the ``240`` in ``max_len,240``."""
    text = require_param(rule, param).strip()
    try:
        return int(text)
    except ValueError:
        msg = f"rule '{rule}' expects an integer parameter, got {param!r}"
        raise ValueError(msg) from None


def parse_quoted_tokens(param: str | None) -> list[str]:
    """Split a ``contains`` parameter into lower-cased tokens.

    Single-quoted groups win when present (``'new york' 'boston'``);
    otherwise the text is split on single spaces.
    """
    text = (param or "").lower().strip()
    quoted = _QUOTED_TOKEN.findall(text)
    if quoted:
        return quoted
    return text.split(" ")


def parse_semicolon_list(param: str | None) -> list[str]:
    """Split ``a;b;c`` into lower-cased, trimmed, non-empty tokens."""
    text = (param or "").lower().strip()
    return [token.strip() for token in text.split(";") if token.strip()]


def is_numeric(value: Any) -> bool:
    """True for ints, floats and numeric strings; booleans are not numeric."""
    return parse_numeric(value) is not None


def parse_numeric(value: Any) -> Decimal | None:
    """Recognize a locale-independent numeric value.

    Returns:
        The value as a Decimal, or None when it is not numeric.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return Decimal(str(value))
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if not isinstance(value, str) or not _NUMERIC_PATTERN.match(value):
        return None
    try:
        return Decimal(value.strip())
    except InvalidOperation:
        return None


@lru_cache(maxsize=256)
def compile_pattern(param: str) -> re.Pattern[str]:
    """Compile a ``regex`` rule parameter.

    Accepts either a bare pattern or a delimited pattern with
    trailing flags (``/^[a-z]+$/i``). Raises re.error on a broken pattern.
    """
    if len(param) >= 2 and param[0] in _PATTERN_DELIMITERS:
        delimiter = param[0]
        end = param.rfind(delimiter)
        flags_text = param[end + 1 :]
        if end > 0 and all(flag in _PATTERN_FLAGS for flag in flags_text):
            flags = re.RegexFlag(0)
            for flag in flags_text:
                flags |= _PATTERN_FLAGS[flag]
            return re.compile(param[1:end], flags)
    return re.compile(param)
