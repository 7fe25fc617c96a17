"""Rule-based validation of flat records.

Provides the rule registry, the evaluation engine, the message catalog
and batch reporting. Check routines live in ``fieldcheck.validation.rules``
grouped by category (presence, membership, limits, characters, format,
checksum, consistency, files).
"""

from fieldcheck.errors import (
    ConfigurationError,
    FieldCheckError,
    MalformedRuleError,
    RoutineFault,
    UnknownRuleError,
)
from fieldcheck.validation.engine import ValidationEngine
from fieldcheck.validation.messages import MessageCatalog, available_locales
from fieldcheck.validation.registry import RuleRegistry
from fieldcheck.validation.report import ValidationReport
from fieldcheck.validation.rules import CheckRoutine, get_builtin_rules

__all__ = [
    "CheckRoutine",
    "ConfigurationError",
    "FieldCheckError",
    "MalformedRuleError",
    "MessageCatalog",
    "RoutineFault",
    "RuleRegistry",
    "UnknownRuleError",
    "ValidationEngine",
    "ValidationReport",
    "available_locales",
    "get_builtin_rules",
]
