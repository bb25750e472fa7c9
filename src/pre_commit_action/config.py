# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Action inputs and the argument list handed to the lint tool."""

from __future__ import annotations

import shlex
from pathlib import Path

from pydantic import BaseModel, ConfigDict, SecretStr, ValidationError, field_validator

from .constants import DEFAULT_CONFIG
from .errors import ConfigError


def parse_extra_args(raw: str) -> list[str]:
    """Split a shell-style argument string into tokens.

    Quoted segments are kept together as single tokens, so
    ``"--foo 'bar baz'"`` yields ``["--foo", "bar baz"]``.

    Args:
        raw: Argument string supplied by the workflow.

    Returns:
        list[str]: Tokens in their original order; empty for a blank string.

    Raises:
        ConfigError: If the string contains unbalanced quotes.
    """

    try:
        return shlex.split(raw)
    except ValueError as exc:
        raise ConfigError(f"Unable to parse extra_args {raw!r}: {exc}") from exc


class ActionInputs(BaseModel):
    """Inputs supplied to a single action run."""

    model_config = ConfigDict(frozen=True)

    config: Path = Path(DEFAULT_CONFIG)
    token: SecretStr | None = None
    extra_args: str = ""

    @field_validator("token", mode="before")
    @classmethod
    def _blank_token_is_absent(cls, value: object) -> object:
        """Treat an empty token input as no token at all."""

        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("extra_args")
    @classmethod
    def _extra_args_parse(cls, value: str) -> str:
        try:
            shlex.split(value)
        except ValueError as exc:
            raise ValueError(f"unable to parse extra_args: {exc}") from exc
        return value

    @property
    def token_value(self) -> str | None:
        """Return the raw credential, or ``None`` when none was supplied."""

        return self.token.get_secret_value() if self.token is not None else None

    def lint_args(self) -> list[str]:
        """Return the ``pre-commit`` argument list for this run."""

        return [
            "run",
            "--show-diff-on-failure",
            "--color=always",
            f"--config={self.config}",
            *parse_extra_args(self.extra_args),
        ]


def build_inputs(*, config: Path | str, token: str | None, extra_args: str | None) -> ActionInputs:
    """Validate raw input values and return an :class:`ActionInputs` instance.

    Args:
        config: Path to the pre-commit configuration file.
        token: Optional credential used to push fixes.
        extra_args: Optional shell-style string appended to the lint command.

    Returns:
        ActionInputs: Validated inputs.

    Raises:
        ConfigError: If any value fails validation.
    """

    try:
        return ActionInputs(config=Path(config), token=token, extra_args=extra_args or "")
    except ValidationError as exc:
        raise ConfigError(f"Invalid action inputs: {exc}") from exc


__all__ = ["ActionInputs", "build_inputs", "parse_extra_args"]
