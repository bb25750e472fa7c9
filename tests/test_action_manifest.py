# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the composite action manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from pre_commit_action.constants import DEFAULT_CACHE_STORE

MANIFEST = Path(__file__).resolve().parents[1] / "action.yml"


@pytest.fixture
def steps() -> list[dict[str, Any]]:
    data = yaml.safe_load(MANIFEST.read_text(encoding="utf-8"))
    return data["runs"]["steps"]


def _cache_step(steps: list[dict[str, Any]]) -> int:
    for index, step in enumerate(steps):
        if str(step.get("uses", "")).startswith("actions/cache@"):
            return index
    raise AssertionError("action.yml has no actions/cache step")


def test_cache_store_is_persisted_between_runs(steps: list[dict[str, Any]]) -> None:
    step = steps[_cache_step(steps)]
    store = "~/" + DEFAULT_CACHE_STORE.relative_to(Path.home()).as_posix()
    assert step["with"]["path"] == store
    assert step["with"]["key"].startswith("pre-commit-action-")
    assert "hashFiles(inputs.config)" in step["with"]["key"]
    assert step["with"]["restore-keys"].strip() == "pre-commit-action-${{ runner.os }}-"


def test_cache_is_restored_before_the_action_runs(steps: list[dict[str, Any]]) -> None:
    run_index = next(index for index, step in enumerate(steps) if step.get("run") == "pre-commit-action")
    assert _cache_step(steps) < run_index
    assert set(steps[run_index]["env"]) == {"INPUT_CONFIG", "INPUT_TOKEN", "INPUT_EXTRA_ARGS"}
