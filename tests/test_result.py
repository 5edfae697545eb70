"""Tests for release result parsing."""

import io
import json

import pytest

from releasemenu.result import (
    ImageRef,
    Result,
    ResultFormatError,
    UpdateStatus,
    load_result,
)

SAMPLE = {
    "default:deployment/web": {
        "Status": "success",
        "Error": "",
        "PerContainer": [
            {"Container": "web", "Current": "registry/web:2.3", "Target": "registry/web:2.4"},
        ],
    },
    "default:deployment/api": {"Status": "failed", "Error": "image not found"},
}


class TestImageRef:
    def test_parse_tag(self):
        ref = ImageRef.parse("registry/web:2.4")
        assert ref.name == "registry/web"
        assert ref.tag == "2.4"

    def test_registry_port_is_not_a_tag(self):
        ref = ImageRef.parse("registry:5000/org/web")
        assert ref.name == "registry:5000/org/web"
        assert ref.tag == ""

    def test_port_and_tag(self):
        ref = ImageRef.parse("registry:5000/org/web:1.0")
        assert ref.tag == "1.0"
        assert str(ref) == "registry:5000/org/web:1.0"


class TestUpdateStatus:
    def test_renders_as_value(self):
        assert str(UpdateStatus.SKIPPED) == "skipped"
        assert f"{UpdateStatus.IGNORED}" == "ignored"

    def test_parse_is_case_insensitive(self):
        assert UpdateStatus.parse("Success") == UpdateStatus.SUCCESS

    def test_succeeded_is_success(self):
        assert UpdateStatus.parse("succeeded") == UpdateStatus.SUCCESS
        result = Result.from_dict({"ns:deployment/a": {"Status": "Succeeded"}})
        assert result["ns:deployment/a"].status == UpdateStatus.SUCCESS

    def test_unknown_status(self):
        assert UpdateStatus.parse("pending") == UpdateStatus.UNKNOWN


class TestResult:
    def test_from_dict(self):
        result = Result.from_dict(SAMPLE)
        web = result["default:deployment/web"]
        assert web.status == UpdateStatus.SUCCESS
        assert web.per_container[0].container == "web"
        assert web.per_container[0].target.tag == "2.4"
        assert result["default:deployment/api"].error == "image not found"
        assert result["default:deployment/api"].per_container == []

    def test_lower_case_keys(self):
        result = Result.from_dict({
            "ns:deployment/a": {
                "status": "skipped",
                "error": "locked",
                "per_container": [{"container": "a", "current": "a:1", "target": "a:2"}],
            },
        })
        item = result["ns:deployment/a"]
        assert item.status == UpdateStatus.SKIPPED
        assert item.error == "locked"
        assert item.per_container[0].current.tag == "1"

    def test_service_ids_sorted(self):
        result = Result.from_dict(SAMPLE)
        assert result.service_ids() == ["default:deployment/api", "default:deployment/web"]

    def test_read_only(self):
        result = Result.from_dict(SAMPLE)
        with pytest.raises(TypeError):
            result["x"] = None

    def test_not_an_object(self):
        with pytest.raises(ResultFormatError):
            Result.from_dict([1, 2, 3])

    def test_missing_target(self):
        with pytest.raises(ResultFormatError):
            Result.from_dict({
                "ns:deployment/a": {
                    "Status": "success",
                    "PerContainer": [{"Container": "a", "Current": "a:1"}],
                },
            })

    def test_format_error_is_value_error(self):
        assert issubclass(ResultFormatError, ValueError)


class TestLoadResult:
    def test_load_from_file(self, tmp_path):
        path = tmp_path / "result.json"
        path.write_text(json.dumps(SAMPLE))
        assert len(load_result(path)) == 2

    def test_load_from_stream(self):
        assert len(load_result(io.StringIO(json.dumps(SAMPLE)))) == 2

    def test_invalid_json(self):
        with pytest.raises(ResultFormatError):
            load_result(io.StringIO("{not json"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_result(tmp_path / "missing.json")
