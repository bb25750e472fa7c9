# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from rich.rule import Rule
from rich.text import Text

from .console import color_supported, get_console_manager, in_github_actions


def emoji(symbol: str, enable: bool) -> str:
    """Select an emoji symbol based on the caller's preference.

    Args:
        symbol: Emoji text to include in the output.
        enable: Flag indicating whether emoji output is desired.

    Returns:
        str: Emoji symbol when enabled, otherwise an empty string.
    """

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding terminal detection.
    """

    color_enabled = color_supported() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def _print_raw(line: str) -> None:
    """Print a workflow command verbatim, bypassing styling."""

    get_console_manager().get(color=False, emoji=False).print(Text(line))


def section(title: str, *, use_color: bool) -> None:
    """Render a section header to delineate console output blocks.

    Args:
        title: Section title displayed to the user.
        use_color: Flag indicating whether ANSI colour support is desired.
    """

    console = get_console_manager().get(color=use_color, emoji=True)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(f"\n--- {title} ---")


@contextmanager
def group(title: str) -> Iterator[None]:
    """Fold the output produced inside the block under ``title``.

    Inside a GitHub Actions job this emits ``::group::`` markers so the log
    viewer collapses the block; elsewhere it renders a plain section header.

    Args:
        title: Heading shown for the folded block.

    Yields:
        None: Control returns to the caller for the duration of the group.
    """

    if not in_github_actions():
        section(title, use_color=color_supported())
        yield
        return
    _print_raw(f"::group::{title}")
    try:
        yield
    finally:
        _print_raw("::endgroup::")


def echo_command(command_line: str) -> None:
    """Echo an external command line before it is executed."""

    _print_raw(f"[command]{command_line}")


def annotate_error(msg: str) -> None:
    """Emit an ``::error::`` workflow command when running under Actions."""

    if in_github_actions():
        _print_raw(f"::error::{msg}")


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding terminal detection.
    """

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding terminal detection.
    """

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding terminal detection.
    """

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding terminal detection.
    """

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


__all__ = [
    "annotate_error",
    "echo_command",
    "emoji",
    "fail",
    "group",
    "info",
    "ok",
    "section",
    "warn",
]
