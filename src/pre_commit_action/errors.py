# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by the action."""

from __future__ import annotations


class ActionError(RuntimeError):
    """Base class for failures that abort the run."""


class ConfigError(ActionError):
    """Raised when action inputs or the triggering event are invalid."""


class InterpreterError(ActionError):
    """Raised when the active Python interpreter cannot be introspected."""


class CacheServiceError(ActionError):
    """Raised when the cache service cannot restore or save an entry."""


class CacheValidationError(CacheServiceError):
    """Raised when a cache key or path set is rejected before any I/O."""


class CacheEntryExistsError(CacheServiceError):
    """Raised when saving under a key that already holds an entry."""


__all__ = [
    "ActionError",
    "CacheEntryExistsError",
    "CacheServiceError",
    "CacheValidationError",
    "ConfigError",
    "InterpreterError",
]
