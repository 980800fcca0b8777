"""Tests for the list CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from commdomain.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestListCommand:
    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        for name in ("connection", "server", "game", "chat", "info"):
            assert name in result.output
        assert "5 domains" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "list"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [item["code"] for item in data["data"]["items"]] == [1, 2, 3, 4, 250]

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--quiet", "list"])
        assert result.output.split() == ["connection", "server", "game", "chat", "info"]
