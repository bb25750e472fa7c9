# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line interface for the action."""

from __future__ import annotations

from .main import app

__all__ = ["app"]
