# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shlex
import shutil

# Bandit: subprocess usage is intentional; this is a controlled wrapper around
# external tool execution, normalising arguments and disabling ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

from .logging import echo_command

REDACTED: Final[str] = "***"


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Immutable command execution options."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    check: bool = True
    capture_output: bool = False
    text: bool = True


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        """Initialise the error with captured subprocess metadata.

        Args:
            command: Normalised command sequence that was executed.
            returncode: Exit status reported by the subprocess.
            stdout: Captured standard output stream.
            stderr: Captured standard error stream.
        """
        detail = f" stderr: {stderr}" if stderr else ""
        super().__init__(f"The process '{command[0]}' failed with exit code {returncode}.{detail}")
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    def redacted(self, secrets: Sequence[str]) -> SubprocessExecutionError:
        """Return a copy of the error with ``secrets`` masked in every field.

        Args:
            secrets: Secret values that must never reach the job log.

        Returns:
            SubprocessExecutionError: Error carrying masked command and output.
        """

        return SubprocessExecutionError(
            [redact(part, secrets) for part in self.command],
            self.returncode,
            redact(self.stdout, secrets) if self.stdout is not None else None,
            redact(self.stderr, secrets) if self.stderr is not None else None,
        )


CommandExecutor = Callable[..., CompletedProcess[str]]


def redact(text: str, secrets: Sequence[str]) -> str:
    """Replace each non-empty secret in ``text`` with a placeholder."""

    for secret in secrets:
        if secret:
            text = text.replace(secret, REDACTED)
    return text


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Normalise the subprocess argument sequence.

    Args:
        args: Raw command arguments supplied by the caller.

    Returns:
        list[str]: Validated argument list suitable for subprocess execution.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Unable to locate executable file: {head}"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    options: CommandOptions | None = None,
) -> CompletedProcess[str]:
    """Execute ``args`` after normalising the executable path.

    Args:
        args: Command and argument sequence to execute.
        options: Options configuring execution semantics.

    Returns:
        CompletedProcess: Subprocess execution metadata.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
        SubprocessExecutionError: When ``check`` is true and the process exits
            with a non-zero status.
    """

    normalized = _normalize_args(args)
    resolved_options = options or CommandOptions()

    # Bandit: commands are assembled from fixed tool names plus tokenised
    # arguments; no shell expansion takes place.
    completed: CompletedProcess[str] = subprocess.run(  # nosec B603
        normalized,
        cwd=str(resolved_options.cwd) if resolved_options.cwd is not None else None,
        env=dict(resolved_options.env) if resolved_options.env is not None else None,
        check=False,
        capture_output=resolved_options.capture_output,
        text=resolved_options.text,
    )

    if resolved_options.check and completed.returncode != 0:
        raise SubprocessExecutionError(
            [args[0], *normalized[1:]],
            completed.returncode,
            completed.stdout if isinstance(completed.stdout, str) else None,
            completed.stderr if isinstance(completed.stderr, str) else None,
        )

    return completed


@dataclass(slots=True)
class CommandRunner:
    """Echo and execute external commands on behalf of the action.

    Every command is echoed to the job log (with secrets masked) before it
    runs. Whether a non-zero exit status is fatal is decided per call through
    ``tolerate_failure``.
    """

    executor: CommandExecutor = run_command
    secrets: tuple[str, ...] = ()
    cwd: Path | None = None
    base_options: CommandOptions = field(default_factory=CommandOptions)

    def exec(
        self,
        args: Sequence[str],
        *,
        tolerate_failure: bool = False,
        capture_output: bool = False,
        quiet: bool = False,
    ) -> CompletedProcess[str]:
        """Run ``args`` and return the completed process.

        Args:
            args: Command and argument sequence to execute.
            tolerate_failure: When ``True`` a non-zero exit status is returned
                to the caller instead of raised.
            capture_output: Capture stdout/stderr instead of streaming them.
            quiet: Skip echoing the command line.

        Returns:
            CompletedProcess: Result of the executed command.

        Raises:
            SubprocessExecutionError: When the command fails and failure is
                not tolerated. Secrets are masked in the raised error.
        """

        if not quiet:
            echo_command(redact(shlex.join(args), self.secrets))
        options = replace(
            self.base_options,
            cwd=self.cwd if self.cwd is not None else self.base_options.cwd,
            check=not tolerate_failure,
            capture_output=capture_output,
        )
        try:
            return self.executor(list(args), options=options)
        except SubprocessExecutionError as exc:
            raise exc.redacted(self.secrets) from None

    def returncode(self, args: Sequence[str], *, tolerate_failure: bool = False) -> int:
        """Run ``args`` and return only its exit status."""

        return self.exec(args, tolerate_failure=tolerate_failure).returncode


__all__ = [
    "CommandExecutor",
    "CommandOptions",
    "CommandRunner",
    "REDACTED",
    "SubprocessExecutionError",
    "redact",
    "run_command",
]
