# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Models for the event payload that triggered the workflow run."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigError

EVENT_PATH_ENV: Final[str] = "GITHUB_EVENT_PATH"


class _PayloadModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class Repository(_PayloadModel):
    """Repository hosting the pull request head branch."""

    clone_url: str


class HeadRef(_PayloadModel):
    """Source side of a pull request."""

    ref: str
    # GitHub reports ``null`` once the head fork has been deleted.
    repo: Repository | None = None


class PullRequest(_PayloadModel):
    """Subset of the pull request payload the action relies on."""

    head: HeadRef

    @property
    def branch(self) -> str:
        """Return the pull request source branch name."""

        return self.head.ref

    @property
    def clone_url(self) -> str:
        """Return the HTTPS clone URL of the head repository.

        Raises:
            ConfigError: If the payload carries no head repository.
        """

        if self.head.repo is None:
            raise ConfigError("Pull request head repository is unavailable; cannot push fixes")
        return self.head.repo.clone_url


class EventPayload(_PayloadModel):
    """Webhook payload of the triggering event."""

    pull_request: PullRequest | None = None


def load_event(path: Path | None) -> EventPayload:
    """Read and validate the event payload stored at ``path``.

    A missing path or file yields an empty payload, which is what a run
    triggered outside a pull request looks like.

    Args:
        path: Location of the JSON payload, usually taken from ``GITHUB_EVENT_PATH``.

    Returns:
        EventPayload: Parsed payload.

    Raises:
        ConfigError: If the file is not valid JSON or the pull request data is incomplete.
    """

    if path is None or not path.is_file():
        return EventPayload()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Unable to read event payload {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Event payload {path} is not a JSON object")
    try:
        return EventPayload.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Malformed pull request data in {path}: {exc}") from exc


__all__ = [
    "EVENT_PATH_ENV",
    "EventPayload",
    "HeadRef",
    "PullRequest",
    "Repository",
    "load_event",
]
