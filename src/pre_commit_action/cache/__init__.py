# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Cache key derivation and cache service implementations."""

from __future__ import annotations

from .keys import compute_cache_key, hash_file, hash_string, interpreter_identity
from .service import CacheService, LocalCacheService, validate_key

__all__ = [
    "CacheService",
    "LocalCacheService",
    "compute_cache_key",
    "hash_file",
    "hash_string",
    "interpreter_identity",
    "validate_key",
]
