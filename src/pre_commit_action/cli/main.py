# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for the action."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..cache import LocalCacheService
from ..config import build_inputs
from ..constants import CACHE_DIR_ENV, DEFAULT_CONFIG
from ..context import EVENT_PATH_ENV, load_event
from ..errors import ActionError
from ..logging import annotate_error, fail
from ..process import SubprocessExecutionError
from ..runner import run_action

app = typer.Typer(
    help="Run pre-commit, cache its environments, and push auto-fixes to pull requests.",
    add_completion=False,
)


@app.command()
def main(
    config: Annotated[
        Path,
        typer.Option("--config", envvar="INPUT_CONFIG", help="Path to the pre-commit configuration file."),
    ] = Path(DEFAULT_CONFIG),
    token: Annotated[
        str | None,
        typer.Option(
            "--token",
            envvar="INPUT_TOKEN",
            help="Credential used to push fixes to the pull request branch.",
            show_default=False,
        ),
    ] = None,
    extra_args: Annotated[
        str,
        typer.Option("--extra-args", envvar="INPUT_EXTRA_ARGS", help="Extra arguments appended to `pre-commit run`."),
    ] = "",
    event_path: Annotated[
        Path | None,
        typer.Option("--event-path", envvar=EVENT_PATH_ENV, help="JSON payload of the triggering event."),
    ] = None,
    cache_dir: Annotated[
        Path | None,
        typer.Option("--cache-dir", envvar=CACHE_DIR_ENV, help="Directory holding cache archives."),
    ] = None,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in CLI output.")] = True,
) -> None:
    """Run pre-commit against the working tree.

    Exits with status 1 and surfaces the error message when any fatal step fails.
    """

    try:
        inputs = build_inputs(config=config, token=token, extra_args=extra_args)
        event = load_event(event_path)
        run_action(
            inputs,
            event,
            cache=LocalCacheService.from_environment(cache_dir),
            use_emoji=emoji,
        )
    except (ActionError, SubprocessExecutionError, FileNotFoundError) as exc:
        message = str(exc)
        fail(message, use_emoji=emoji)
        annotate_error(message)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
