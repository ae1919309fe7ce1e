"""Shared pytest fixtures for hr-id tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from hr_id.config.settings import CONFIG_ENV_VAR, HrIdSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir with no HR_ID_* env leaking in."""
    prefix = HrIdSettings.model_config["env_prefix"]
    for field in HrIdSettings.model_fields:
        monkeypatch.delenv(f"{prefix}{field.upper()}", raising=False)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
