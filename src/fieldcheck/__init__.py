"""fieldcheck: declarative rule-based validation for flat records.

Quick start:
    from fieldcheck import ValidationEngine

    engine = ValidationEngine()
    result = engine.evaluate(
        {"username": "ada", "email": "ada@example.com"},
        {"username": "required|alpha_numeric|max_len,20", "email": "required|valid_email"},
    )
    if not result.is_valid:
        print(engine.render(result.failures))
"""

__version__ = "0.1.0"

from fieldcheck.models import (
    FailureRecord,
    RuleInvocation,
    RuleSet,
    UploadDescriptor,
    ValidationResult,
)
from fieldcheck.parsing import parse_rules, parse_ruleset
from fieldcheck.validation import (
    ConfigurationError,
    FieldCheckError,
    MalformedRuleError,
    MessageCatalog,
    RoutineFault,
    RuleRegistry,
    UnknownRuleError,
    ValidationEngine,
    ValidationReport,
)

__all__ = [
    "ConfigurationError",
    "FailureRecord",
    "FieldCheckError",
    "MalformedRuleError",
    "MessageCatalog",
    "RoutineFault",
    "RuleInvocation",
    "RuleRegistry",
    "RuleSet",
    "UnknownRuleError",
    "UploadDescriptor",
    "ValidationEngine",
    "ValidationReport",
    "ValidationResult",
    "__version__",
    "parse_rules",
    "parse_ruleset",
]
