"""Tests for config section models — defaults and sparse overrides."""

import pytest
from pydantic import ValidationError

from commdomain.config.models import OutputConfig, VerifyConfig
from commdomain.config.settings import CommDomainSettings


class TestSections:
    def test_output_defaults(self) -> None:
        cfg = OutputConfig()
        assert cfg.json_output is False
        assert cfg.quiet is False
        assert cfg.width == 100

    def test_verify_defaults(self) -> None:
        assert VerifyConfig().strict is False

    def test_sparse_override(self) -> None:
        cfg = OutputConfig.model_validate({"quiet": True})
        assert cfg.quiet is True
        assert cfg.width == 100

    def test_width_lower_bound(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(width=10)

    def test_no_domains_section(self) -> None:
        """Domains are fixed in code; settings carry no domain table."""
        assert "domains" not in CommDomainSettings.model_fields
