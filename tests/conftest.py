# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from pre_commit_action.process import CommandRunner
from tests.helpers.fakes import ScriptedExecutor


@pytest.fixture(autouse=True)
def _outside_actions(monkeypatch: pytest.MonkeyPatch) -> None:
    """Render plain log output regardless of the host CI environment."""

    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)


@pytest.fixture
def executor() -> ScriptedExecutor:
    """Return a fresh scripted executor."""

    return ScriptedExecutor()


@pytest.fixture
def commands(executor: ScriptedExecutor) -> CommandRunner:
    """Return a command runner backed by the scripted executor."""

    return CommandRunner(executor=executor)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a minimal pre-commit configuration and return its path."""

    path = tmp_path / ".pre-commit-config.yaml"
    path.write_text(
        "repos:\n- repo: https://github.com/pre-commit/pre-commit-hooks\n  rev: v4.6.0\n"
        "  hooks:\n  - id: trailing-whitespace\n",
        encoding="utf-8",
    )
    return path
