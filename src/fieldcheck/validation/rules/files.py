"""File upload rules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fieldcheck.models.results import FailureRecord
from fieldcheck.models.rules import UploadDescriptor, as_upload
from fieldcheck.parsing.params import parse_semicolon_list, require_param
from fieldcheck.validation.rules.base import CheckRoutine, fail, is_blank


def check_extension(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Uploaded filename must carry one of the allowed extensions, ignoring case.

    Usage: ``extension,png;jpg;gif``. A plain string value is treated as the
    filename itself. Uploads that report "no file sent" are skipped; pair
    with ``required_file`` to demand one.
    """
    if is_blank(record, field):
        return None
    allowed = parse_semicolon_list(require_param("extension", param))
    value = record[field]

    if isinstance(value, str):
        upload: UploadDescriptor | None = UploadDescriptor(name=value)
    else:
        upload = as_upload(value)
    if upload is not None and not upload.has_file:
        return None

    if upload is not None and upload.extension in allowed:
        return None
    return fail(field, value, "extension", allowed)


def get_file_rules() -> dict[str, CheckRoutine]:
    """Return upload rule routines keyed by rule name."""
    return {
        "extension": check_extension,
    }
