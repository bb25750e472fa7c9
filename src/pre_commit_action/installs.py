# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Installer helpers for the lint tool."""

from __future__ import annotations

from typing import Final

from .constants import LINT_TOOL
from .logging import group
from .process import CommandRunner

PIP: Final[str] = "pip"


def install_lint_tool(runner: CommandRunner, *, package: str = LINT_TOOL) -> None:
    """Install ``package`` with pip and list the resulting environment.

    The freeze listing is purely diagnostic; it lands in the job log so tool
    versions can be traced after the fact.

    Args:
        runner: Command runner used for the pip invocations.
        package: Distribution name to install.

    Raises:
        SubprocessExecutionError: If either pip invocation fails.
        FileNotFoundError: If ``pip`` is not on ``PATH``.
    """

    with group(f"install {package}"):
        runner.exec([PIP, "install", package])
        runner.exec([PIP, "freeze", "--local"])


__all__ = ["PIP", "install_lint_tool"]
