"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from isoperiod.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult.success("parse", {"period": "P1D"})
        assert result.ok is True
        assert result.op == "parse"
        assert result.data == {"period": "P1D"}
        assert result.warnings == []
        assert result.error is None

    def test_failure_construction(self) -> None:
        result = ServiceResult.failure("parse", "TRAILING_TEXT", "bad", {"input": "P1X"})
        assert result.ok is False
        assert result.data == {}
        assert result.error is not None
        assert result.error.code == "TRAILING_TEXT"
        assert result.error.detail == {"input": "P1X"}

    def test_with_warnings(self) -> None:
        result = ServiceResult.success("parse", {}, ["fraction truncated"])
        assert result.warnings == ["fraction truncated"]

    def test_json_serialization(self) -> None:
        result = ServiceResult.success("parse", {"period": "PT1.5S"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "parse"
        assert parsed["data"]["period"] == "PT1.5S"
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = ServiceResult.success("parse", {})
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_detail_defaults_empty(self) -> None:
        assert ServiceError(code="X", message="m").detail == {}
