# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Test doubles for external commands and the cache service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from subprocess import CompletedProcess

from pre_commit_action.errors import CacheServiceError
from pre_commit_action.process import CommandOptions, SubprocessExecutionError

PYTHON_IDENTITY = "/opt/hostedtoolcache/Python/3.12.4/x64/bin/python\n3.12.4 (main, Jun  7 2024)\n"


class ScriptedExecutor:
    """Stand-in for ``run_command`` that replays scripted exit codes."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.options: list[CommandOptions] = []
        self._scripts: list[tuple[tuple[str, ...], list[tuple[int, str]]]] = []
        self.script(["python"], (0, PYTHON_IDENTITY))

    def script(self, prefix: Sequence[str], *results: int | tuple[int, str]) -> None:
        """Queue results for commands starting with ``prefix``; the last one repeats."""

        queue = [(item, "") if isinstance(item, int) else item for item in results]
        self._scripts.insert(0, (tuple(prefix), queue))

    def __call__(self, args: Sequence[str], *, options: CommandOptions) -> CompletedProcess[str]:
        command = list(args)
        self.calls.append(command)
        self.options.append(options)
        returncode, stdout = self._next(command)
        if options.check and returncode != 0:
            raise SubprocessExecutionError(command, returncode, stdout, "")
        return CompletedProcess(args=command, returncode=returncode, stdout=stdout, stderr="")

    def _next(self, command: list[str]) -> tuple[int, str]:
        for prefix, queue in self._scripts:
            if tuple(command[: len(prefix)]) == prefix:
                return queue.pop(0) if len(queue) > 1 else queue[0]
        return 0, ""

    def matching(self, *prefix: str) -> list[list[str]]:
        """Return recorded commands that start with ``prefix``."""

        return [call for call in self.calls if tuple(call[: len(prefix)]) == prefix]


class RecordingCache:
    """In-memory cache service recording every request."""

    def __init__(self, *, hit: bool = False, broken: bool = False) -> None:
        self.hit = hit
        self.broken = broken
        self.restores: list[tuple[list[Path], str]] = []
        self.saves: list[tuple[list[Path], str]] = []

    def restore(self, paths: Sequence[Path], key: str) -> bool:
        self.restores.append((list(paths), key))
        if self.broken:
            raise CacheServiceError("cache service unavailable")
        return self.hit

    def save(self, paths: Sequence[Path], key: str) -> None:
        self.saves.append((list(paths), key))
        if self.broken:
            raise CacheServiceError("cache service unavailable")
