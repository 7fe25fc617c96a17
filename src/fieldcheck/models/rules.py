"""Rule declaration and record value models.

RuleInvocation is the parsed form of one entry in a rule declaration
(``"max_len,240"`` -> name ``max_len``, raw_param ``"240"``). A RuleSet
maps each field name to its ordered invocations. UploadDescriptor is the
file-upload shaped value that ``required_file`` and ``extension`` inspect.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Upload error code for "no file was uploaded"
UPLOAD_ERR_NO_FILE = 4


class RuleInvocation(BaseModel):
    """One rule applied to one field, with its unparsed parameter text."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Rule name as written in the declaration")
    raw_param: str | None = Field(
        default=None,
        description="Everything after the first comma, or None when no comma was given",
    )

    def to_declaration(self) -> str:
        """Render back to the ``name[,param]`` form."""
        if self.raw_param is None:
            return self.name
        return f"{self.name},{self.raw_param}"


RuleSet = dict[str, list[RuleInvocation]]


class UploadDescriptor(BaseModel):
    """File upload value: original filename, error code, size and storage path.

    Mirrors the per-file entry of a multipart form upload. ``error`` is the
    upload status code, where 0 is success and 4 means no file was sent.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Client-side filename")
    error: int = Field(default=0, description="Upload error code (0 = OK, 4 = no file)")
    size: int = Field(default=0, description="Size in bytes")
    type: str | None = Field(default=None, description="Client-reported MIME type")
    tmp_name: str | None = Field(default=None, description="Server-side temporary path")

    @property
    def has_file(self) -> bool:
        """True unless the upload reported that no file was sent."""
        return self.error != UPLOAD_ERR_NO_FILE

    @property
    def extension(self) -> str | None:
        """Lower-cased filename extension without the dot, or None."""
        base = self.name.rsplit("/", 1)[-1]
        if "." not in base:
            return None
        ext = base.rsplit(".", 1)[1]
        return ext.lower() or None


def as_upload(value: Any) -> UploadDescriptor | None:
    """Coerce a record value into an UploadDescriptor when it has that shape.

    Accepts an UploadDescriptor as-is, or a mapping carrying at least
    ``name`` and ``error`` keys. Anything else returns None.
    """
    if isinstance(value, UploadDescriptor):
        return value
    if isinstance(value, Mapping) and "name" in value and "error" in value:
        try:
            return UploadDescriptor.model_validate(dict(value))
        except ValueError:
            return None
    return None
