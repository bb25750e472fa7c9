# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fixed names, identities, and paths used across the action."""

from __future__ import annotations

from pathlib import Path
from typing import Final

LINT_TOOL: Final[str] = "pre-commit"
DEFAULT_CONFIG: Final[str] = ".pre-commit-config.yaml"

# Bump the numeric suffix whenever the layout of the cached directory changes.
CACHE_KEY_PREFIX: Final[str] = "pre-commit-2"
CACHE_KEY_MAX_LENGTH: Final[int] = 512
CACHE_DIR_ENV: Final[str] = "PRE_COMMIT_ACTION_CACHE_DIR"
DEFAULT_CACHE_STORE: Final[Path] = Path.home() / ".cache" / "pre-commit-action" / "store"

INTERPRETER: Final[str] = "python"
INTERPRETER_PROBE: Final[str] = 'import sys;print(sys.executable+"\\n"+sys.version)'

COMMIT_USER_NAME: Final[str] = "pre-commit"
COMMIT_USER_EMAIL: Final[str] = "pre-commit@example.com"
COMMIT_MESSAGE: Final[str] = "pre-commit fixes"
TOKEN_USER: Final[str] = "x-access-token"


def lint_cache_dir() -> Path:
    """Return the directory where pre-commit keeps its hook environments."""

    return Path.home() / ".cache" / "pre-commit"


__all__ = [
    "CACHE_DIR_ENV",
    "CACHE_KEY_MAX_LENGTH",
    "CACHE_KEY_PREFIX",
    "COMMIT_MESSAGE",
    "COMMIT_USER_EMAIL",
    "COMMIT_USER_NAME",
    "DEFAULT_CACHE_STORE",
    "DEFAULT_CONFIG",
    "INTERPRETER",
    "INTERPRETER_PROBE",
    "LINT_TOOL",
    "TOKEN_USER",
    "lint_cache_dir",
]
