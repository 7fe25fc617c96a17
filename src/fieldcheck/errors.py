"""Exception hierarchy for fieldcheck.

Invalid input data is never raised: it is reported as FailureRecord data.
These exceptions signal problems with the rule configuration itself or
with a check routine, and always abort the current evaluation.
"""

from __future__ import annotations


class FieldCheckError(Exception):
    """Base class for all fieldcheck faults."""


class ConfigurationError(FieldCheckError):
    """Raised when a rule set cannot be evaluated as declared."""


class UnknownRuleError(ConfigurationError):
    """Raised when a rule name has no registered check routine."""

    def __init__(self, rule: str, field: str | None = None) -> None:
        self.rule = rule
        self.field = field
        where = f" (field '{field}')" if field is not None else ""
        super().__init__(f"Unknown validation rule '{rule}'{where}")


class MalformedRuleError(ConfigurationError):
    """Raised when a rule declaration does not follow the rule grammar."""

    def __init__(self, declaration: str, reason: str) -> None:
        self.declaration = declaration
        self.reason = reason
        super().__init__(f"Malformed rule declaration {declaration!r}: {reason}")


class RoutineFault(FieldCheckError):
    """Raised when a check routine itself fails, e.g. on a broken regex parameter.

    Carries the field and rule being evaluated; the original exception is
    available as ``cause`` and as ``__cause__``.
    """

    def __init__(self, field: str, rule: str, cause: BaseException) -> None:
        self.field = field
        self.rule = rule
        self.cause = cause
        super().__init__(
            f"Rule '{rule}' raised {type(cause).__name__} on field '{field}': {cause}"
        )
