# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Top-level orchestration of a single action run."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from pathlib import Path

from .cache import CacheService, compute_cache_key, interpreter_identity
from .config import ActionInputs
from .constants import LINT_TOOL, lint_cache_dir
from .context import EventPayload
from .errors import CacheServiceError
from .git import has_changes, push_fixes
from .installs import install_lint_tool
from .logging import info, ok, warn
from .process import CommandRunner


@dataclass(frozen=True, slots=True)
class RunResult:
    """Outcome of an action run that finished without a fatal error."""

    cache_key: str
    cache_restored: bool
    lint_returncode: int
    pushed: bool = False


def _restore_cache(cache: CacheService, paths: Sequence[Path], key: str, *, use_emoji: bool) -> bool:
    """Restore the hook environments, downgrading any failure to a miss."""

    try:
        restored = cache.restore(paths, key)
    except (CacheServiceError, OSError) as exc:
        warn(f"Failed to restore: {exc}", use_emoji=use_emoji)
        return False
    if restored:
        info(f"Cache restored from key: {key}", use_emoji=use_emoji)
    else:
        info(f"Cache not found for input keys: {key}", use_emoji=use_emoji)
    return restored


def _save_cache(cache: CacheService, paths: Sequence[Path], key: str, *, use_emoji: bool) -> None:
    """Save the hook environments, downgrading any failure to a warning."""

    try:
        cache.save(paths, key)
    except (CacheServiceError, OSError) as exc:
        warn(f"Failed to save: {exc}", use_emoji=use_emoji)
        return
    info(f"Cache saved with key: {key}", use_emoji=use_emoji)


def run_action(
    inputs: ActionInputs,
    event: EventPayload,
    *,
    cache: CacheService,
    commands: CommandRunner | None = None,
    cache_paths: Sequence[Path] | None = None,
    use_emoji: bool = True,
) -> RunResult:
    """Install and run pre-commit, then push auto-fixes when allowed.

    The first lint run tolerates failure only when fixes can be pushed
    (a token was supplied and the event is a pull request). In that case the
    lint tool is run a second time, strictly, before anything is committed,
    because pushes made with the workflow token do not trigger new runs.

    Args:
        inputs: Validated action inputs.
        event: Payload of the triggering event.
        cache: Cache service holding pre-commit's hook environments.
        commands: Runner used for every external command.
        cache_paths: Directories to cache; defaults to pre-commit's cache directory.
        use_emoji: Toggle emoji in log output.

    Returns:
        RunResult: Summary of the run.

    Raises:
        ActionError: On invalid configuration or interpreter introspection failure.
        SubprocessExecutionError: When a strict external command fails.
    """

    token = inputs.token_value
    secrets = (token,) if token else ()
    if commands is None:
        runner = CommandRunner(secrets=secrets)
    else:
        runner = replace(commands, secrets=(*commands.secrets, *secrets))

    install_lint_tool(runner)

    lint_args = [LINT_TOOL, *inputs.lint_args()]
    pull_request = event.pull_request
    push = token is not None and pull_request is not None

    paths = list(cache_paths) if cache_paths is not None else [lint_cache_dir()]
    key = compute_cache_key(interpreter_identity(runner), inputs.config)
    restored = _restore_cache(cache, paths, key, use_emoji=use_emoji)

    returncode = runner.returncode(lint_args, tolerate_failure=push)
    if not restored:
        _save_cache(cache, paths, key, use_emoji=use_emoji)

    result = RunResult(cache_key=key, cache_restored=restored, lint_returncode=returncode)
    if returncode == 0 or token is None or pull_request is None:
        return result

    runner.exec(lint_args)
    if not has_changes(runner):
        info("No changes to push after re-running pre-commit", use_emoji=use_emoji)
        return result

    push_fixes(runner, pull_request, token)
    ok(f"Pushed fixes to {pull_request.branch}", use_emoji=use_emoji)
    return RunResult(cache_key=key, cache_restored=restored, lint_returncode=returncode, pushed=True)


__all__ = ["RunResult", "run_action"]
