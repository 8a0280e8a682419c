"""Tests for the serve command (uvicorn is patched out)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner
from fastapi import FastAPI

from storefront.cli import cli


@pytest.mark.usefixtures("_isolated_root")
class TestServe:
    def test_uses_server_defaults(self, cli_runner: CliRunner) -> None:
        with patch("uvicorn.run") as run:
            result = cli_runner.invoke(cli, ["serve"])
        assert result.exit_code == 0, result.output
        app = run.call_args.args[0]
        assert isinstance(app, FastAPI)
        assert run.call_args.kwargs["host"] == "127.0.0.1"
        assert run.call_args.kwargs["port"] == 8080

    def test_flags_override_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "storefront.toml").write_text('[server]\nhost = "0.0.0.0"\nport = 9000\n')
        with patch("uvicorn.run") as run:
            result = cli_runner.invoke(cli, ["serve", "--port", "9100"])
        assert result.exit_code == 0, result.output
        assert run.call_args.kwargs["host"] == "0.0.0.0"
        assert run.call_args.kwargs["port"] == 9100
