# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git operations used to publish auto-fixes to a pull request branch."""

from __future__ import annotations

import re
from typing import Final

from .constants import COMMIT_MESSAGE, COMMIT_USER_EMAIL, COMMIT_USER_NAME, TOKEN_USER
from .context import PullRequest
from .logging import group
from .process import CommandRunner

GIT: Final[str] = "git"
_HTTPS_PREFIX: Final[re.Pattern[str]] = re.compile(r"^https://")


def add_token(url: str, token: str) -> str:
    """Embed ``token`` into an HTTPS clone URL as basic-auth credentials.

    Args:
        url: Clone URL of the pull request head repository.
        token: Credential with write access to that repository.

    Returns:
        str: ``https://x-access-token:<token>@...``; non-HTTPS URLs are returned unchanged.
    """

    return _HTTPS_PREFIX.sub(lambda _: f"https://{TOKEN_USER}:{token}@", url, count=1)


def has_changes(runner: CommandRunner) -> bool:
    """Return ``True`` when the working tree differs from the last commit."""

    return runner.returncode([GIT, "diff", "--quiet"], tolerate_failure=True) != 0


def push_fixes(runner: CommandRunner, pull_request: PullRequest, token: str) -> None:
    """Commit every tracked change and push it to the pull request branch.

    Args:
        runner: Command runner; any git failure raises.
        pull_request: Pull request whose head branch receives the commit.
        token: Credential injected into the push URL.

    Raises:
        SubprocessExecutionError: If any git command fails.
        ConfigError: If the pull request has no head repository.
    """

    url = add_token(pull_request.clone_url, token)
    with group("push fixes"):
        runner.exec([GIT, "config", "user.name", COMMIT_USER_NAME])
        runner.exec([GIT, "config", "user.email", COMMIT_USER_EMAIL])
        runner.exec([GIT, "checkout", "HEAD", "-B", pull_request.branch])
        runner.exec([GIT, "commit", "-am", COMMIT_MESSAGE])
        runner.exec([GIT, "push", url, "HEAD"])


__all__ = ["GIT", "add_token", "has_changes", "push_fixes"]
