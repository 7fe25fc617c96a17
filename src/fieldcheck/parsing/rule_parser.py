"""Parser for the rule declaration mini-language.

Grammar (one declaration per field):

    <rule>[,<param>](|<rule>[,<param>])*

Rules are separated by unescaped ``|``. Within a rule the name ends at the
first ``,`` and everything after it is the raw parameter, commas included,
so ``regex,/^a{1,3}$/`` keeps its pattern intact. Write ``\\|`` to put a
literal pipe into a parameter. Names are not trimmed and not checked
against the registry here; resolution happens in the engine.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from fieldcheck.errors import MalformedRuleError
from fieldcheck.models.rules import RuleInvocation, RuleSet

_RULE_SEPARATOR = re.compile(r"(?<!\\)\|")
_ESCAPED_PIPE = "\\|"


def parse_rule(text: str) -> RuleInvocation:
    """Parse a single ``name[,param]`` entry.

    The parameter is taken verbatim; ``\\|`` is only an escape inside a
    pipe-separated declaration (see ``parse_rules``).

    Raises:
        MalformedRuleError: If the rule name is empty.
    """
    name, sep, param = text.partition(",")
    if not name:
        raise MalformedRuleError(text, "empty rule name")
    return RuleInvocation(
        name=name,
        raw_param=param if sep else None,
    )


def parse_rules(declaration: str) -> list[RuleInvocation]:
    """Parse a field's full rule declaration into ordered invocations.

    Args:
        declaration: e.g. ``"required|max_len,240|regex,/^[a-z]+$/"``.

    Returns:
        RuleInvocations in declaration order; ``[]`` for an empty string.

    Raises:
        MalformedRuleError: If any rule between separators has no name.
    """
    if declaration == "":
        return []

    invocations: list[RuleInvocation] = []
    for part in _RULE_SEPARATOR.split(declaration):
        if part == "":
            raise MalformedRuleError(declaration, "empty rule between '|' separators")
        try:
            invocations.append(parse_rule(part.replace(_ESCAPED_PIPE, "|")))
        except MalformedRuleError as exc:
            raise MalformedRuleError(declaration, exc.reason) from exc
    return invocations


def _parse_entries(field: str, entries: Iterable[object]) -> list[RuleInvocation]:
    invocations: list[RuleInvocation] = []
    for entry in entries:
        if isinstance(entry, RuleInvocation):
            invocations.append(entry)
        elif isinstance(entry, str):
            invocations.append(parse_rule(entry))
        else:
            raise MalformedRuleError(
                repr(entry), f"unsupported rule entry type for field '{field}'"
            )
    return invocations


def parse_ruleset(declarations: Mapping[str, object]) -> RuleSet:
    """Parse a mapping of field name to rule declaration.

    Each declaration may be a pipe-separated string, a list of single-rule
    strings (``["required", "max_len,5"]``), or a list of RuleInvocations.
    Field order is preserved.

    Raises:
        MalformedRuleError: On any malformed declaration.
    """
    ruleset: RuleSet = {}
    for field, declaration in declarations.items():
        if isinstance(declaration, str):
            ruleset[field] = parse_rules(declaration)
        elif isinstance(declaration, (list, tuple)):
            ruleset[field] = _parse_entries(field, declaration)
        else:
            raise MalformedRuleError(
                repr(declaration),
                f"declaration for field '{field}' must be a string or a list",
            )
    return ruleset
