"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from commdomain.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="show", data={"name": "chat"})
        assert result.ok is True
        assert result.op == "show"
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="UNKNOWN_DOMAIN", message="Unrecognized domain: 5")
        result = ServiceResult(ok=False, op="show", error=error)
        assert result.error is not None
        assert result.error.code == "UNKNOWN_DOMAIN"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="list_domains", data={"count": 5})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["count"] == 5

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
