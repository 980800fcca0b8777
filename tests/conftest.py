"""Shared pytest fixtures for commdomain tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from commdomain.services.registry import RegistryService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> RegistryService:
    return RegistryService()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no ``COMMDOMAIN_*`` env vars.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so a stray
    commdomain.toml above the checkout can't leak into CLI tests.
    """
    monkeypatch.chdir(tmp_path)
    for name in [n for n in os.environ if n.startswith("COMMDOMAIN_")]:
        monkeypatch.delenv(name)
