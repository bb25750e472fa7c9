# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run pre-commit in CI, cache its environments, and push fixes to pull requests."""

from __future__ import annotations

from .config import ActionInputs, build_inputs, parse_extra_args
from .context import EventPayload, PullRequest, load_event
from .errors import ActionError, CacheServiceError, ConfigError, InterpreterError
from .runner import RunResult, run_action

__all__ = [
    "ActionError",
    "ActionInputs",
    "CacheServiceError",
    "ConfigError",
    "EventPayload",
    "InterpreterError",
    "PullRequest",
    "RunResult",
    "build_inputs",
    "load_event",
    "parse_extra_args",
    "run_action",
]
