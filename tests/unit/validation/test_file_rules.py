"""Tests for the extension upload rule and the UploadDescriptor model."""

from __future__ import annotations

from typing import Any

import pytest

from fieldcheck.models.rules import UploadDescriptor, as_upload
from fieldcheck.validation.rules.files import check_extension, get_file_rules


def _make_upload(name: str = "avatar.PNG", error: int = 0) -> dict[str, Any]:
    return {"name": name, "error": error, "size": 2048, "type": "image/png", "tmp_name": "/tmp/x"}


class TestUploadDescriptor:
    def test_extension_is_lowercased(self) -> None:
        assert UploadDescriptor(name="Photo.JPG").extension == "jpg"

    def test_no_extension(self) -> None:
        assert UploadDescriptor(name="README").extension is None
        assert UploadDescriptor(name="archive.").extension is None

    def test_has_file(self) -> None:
        assert UploadDescriptor(name="a.txt").has_file
        assert not UploadDescriptor(name="", error=4).has_file

    def test_as_upload_from_mapping(self) -> None:
        upload = as_upload(_make_upload())
        assert upload is not None
        assert upload.size == 2048

    @pytest.mark.parametrize("value", ["a.txt", {"name": "a.txt"}, {"name": 1, "error": "x"}, 5])
    def test_as_upload_rejects_other_shapes(self, value: Any) -> None:
        assert as_upload(value) is None


class TestExtension:
    def test_allowed_extension_passes(self) -> None:
        record = {"avatar": _make_upload("me.PNG")}
        assert check_extension("avatar", record, "png;jpg;gif") is None

    def test_disallowed_extension_fails(self) -> None:
        record = {"avatar": _make_upload("me.exe")}
        failure = check_extension("avatar", record, "png;jpg")
        assert failure is not None
        assert failure.param == ["png", "jpg"]

    def test_plain_filename(self) -> None:
        assert check_extension("doc", {"doc": "report.pdf"}, "pdf") is None
        assert check_extension("doc", {"doc": "report"}, "pdf") is not None

    def test_no_file_sent_is_skipped(self) -> None:
        record = {"avatar": _make_upload("", error=4)}
        assert check_extension("avatar", record, "png") is None

    def test_absent_is_skipped(self) -> None:
        assert check_extension("avatar", {}, "png") is None

    def test_non_upload_value_fails(self) -> None:
        assert check_extension("avatar", {"avatar": 42}, "png") is not None

    def test_registry(self) -> None:
        assert get_file_rules() == {"extension": check_extension}
