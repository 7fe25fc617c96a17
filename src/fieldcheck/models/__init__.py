"""Pydantic data models for fieldcheck.

Re-exports for convenient imports:
    from fieldcheck.models import FailureRecord, RuleInvocation, ValidationResult
"""

from fieldcheck.models.results import FailureRecord, ValidationResult
from fieldcheck.models.rules import (
    UPLOAD_ERR_NO_FILE,
    RuleInvocation,
    RuleSet,
    UploadDescriptor,
    as_upload,
)

__all__ = [
    "UPLOAD_ERR_NO_FILE",
    "FailureRecord",
    "RuleInvocation",
    "RuleSet",
    "UploadDescriptor",
    "ValidationResult",
    "as_upload",
]
