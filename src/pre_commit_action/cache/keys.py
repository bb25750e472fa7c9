# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Content-addressed cache key derivation."""

from __future__ import annotations

import hashlib
from pathlib import Path

from ..constants import CACHE_KEY_PREFIX, INTERPRETER, INTERPRETER_PROBE
from ..errors import ConfigError, InterpreterError
from ..process import CommandRunner


def hash_bytes(content: bytes) -> str:
    """Return the hex-encoded SHA-256 digest of ``content``."""

    return hashlib.sha256(content).hexdigest()


def hash_string(content: str) -> str:
    """Return the hex-encoded SHA-256 digest of ``content`` encoded as UTF-8."""

    return hash_bytes(content.encode("utf-8"))


def hash_file(path: Path) -> str:
    """Return the SHA-256 digest of the file at ``path``.

    Args:
        path: File whose contents are hashed.

    Returns:
        str: Hex-encoded digest of the file contents.

    Raises:
        ConfigError: If the file cannot be read.
    """

    try:
        content = path.read_bytes()
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file {path}: {exc}") from exc
    return hash_bytes(content)


def interpreter_identity(runner: CommandRunner) -> str:
    """Return the executable path and version string of the active interpreter.

    Args:
        runner: Command runner used to invoke the interpreter.

    Returns:
        str: Interpreter stdout, ``sys.executable`` and ``sys.version`` on separate lines.

    Raises:
        InterpreterError: If the interpreter is missing or exits with a non-zero status.
    """

    try:
        completed = runner.exec(
            [INTERPRETER, "-c", INTERPRETER_PROBE],
            tolerate_failure=True,
            capture_output=True,
            quiet=True,
        )
    except FileNotFoundError as exc:
        raise InterpreterError(f"python version check failed: {exc}") from exc
    if completed.returncode != 0:
        detail = (completed.stderr or "").strip()
        suffix = f": {detail}" if detail else ""
        raise InterpreterError(f"python version check failed{suffix}")
    return completed.stdout or ""


def compute_cache_key(identity: str, config_path: Path, *, prefix: str = CACHE_KEY_PREFIX) -> str:
    """Combine the interpreter identity and configuration contents into a cache key.

    Args:
        identity: Interpreter identity string from :func:`interpreter_identity`.
        config_path: Configuration file whose contents select the hook environments.
        prefix: Schema-versioned prefix of the key.

    Returns:
        str: Key of the form ``<prefix>-<identity digest>-<config digest>``.
    """

    return f"{prefix}-{hash_string(identity)}-{hash_file(config_path)}"


__all__ = [
    "compute_cache_key",
    "hash_bytes",
    "hash_file",
    "hash_string",
    "interpreter_identity",
]
