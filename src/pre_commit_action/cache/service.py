# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Cache service contract and a filesystem-backed implementation."""

from __future__ import annotations

import os
import tarfile
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from ..constants import CACHE_DIR_ENV, CACHE_KEY_MAX_LENGTH, DEFAULT_CACHE_STORE
from ..errors import CacheEntryExistsError, CacheServiceError, CacheValidationError
from .keys import hash_string

ARCHIVE_SUFFIX: Final[str] = ".tar.gz"


@runtime_checkable
class CacheService(Protocol):
    """Store and retrieve directory snapshots keyed by a cache key."""

    def restore(self, paths: Sequence[Path], key: str) -> bool:
        """Restore ``paths`` from the entry stored under ``key``.

        Args:
            paths: Directories to restore.
            key: Cache key identifying the entry.

        Returns:
            bool: ``True`` when an entry was found and restored.
        """
        ...

    def save(self, paths: Sequence[Path], key: str) -> None:
        """Store ``paths`` under ``key``.

        Args:
            paths: Directories to store.
            key: Cache key identifying the entry.
        """
        ...


def validate_key(key: str) -> None:
    """Reject keys the cache service cannot store.

    Args:
        key: Candidate cache key.

    Raises:
        CacheValidationError: If the key is empty, too long, or contains a comma.
    """

    if not key:
        raise CacheValidationError("Cache key must not be empty")
    if len(key) > CACHE_KEY_MAX_LENGTH:
        raise CacheValidationError(
            f"Key Validation Error: {key} cannot be larger than {CACHE_KEY_MAX_LENGTH} characters."
        )
    if "," in key:
        raise CacheValidationError(f"Key Validation Error: {key} cannot contain commas.")


class LocalCacheService:
    """Keep one gzip tarball per key inside a store directory.

    Archive members are recorded relative to ``anchor`` (the user's home
    directory by default) so a restore places them back at the same absolute
    locations. Entries are immutable once written.
    """

    def __init__(self, store_dir: Path, *, anchor: Path | None = None) -> None:
        """Create a service rooted at ``store_dir``.

        Args:
            store_dir: Directory holding cache archives.
            anchor: Directory that cached paths must live under.
        """

        self._store_dir = store_dir
        self._anchor = (anchor or Path.home()).resolve()

    @classmethod
    def from_environment(cls, store_dir: Path | None = None) -> LocalCacheService:
        """Build a service using ``store_dir`` or the configured default location."""

        if store_dir is None:
            configured = os.environ.get(CACHE_DIR_ENV)
            store_dir = Path(configured) if configured else DEFAULT_CACHE_STORE
        return cls(store_dir)

    @property
    def store_dir(self) -> Path:
        """Return the directory that holds cache archives."""

        return self._store_dir

    def archive_path(self, key: str) -> Path:
        """Return the archive location used for ``key``."""

        return self._store_dir / f"{hash_string(key)}{ARCHIVE_SUFFIX}"

    def restore(self, paths: Sequence[Path], key: str) -> bool:
        """Extract the entries for ``paths`` stored under ``key`` back onto the filesystem.

        Args:
            paths: Directories expected in the archive.
            key: Cache key identifying the entry.

        Returns:
            bool: ``True`` when an entry existed and was extracted.

        Raises:
            CacheValidationError: If the key or paths are invalid.
            CacheServiceError: If the archive cannot be read or extracted.
        """

        validate_key(key)
        names = self._relative_names(paths)
        archive = self.archive_path(key)
        if not archive.is_file():
            return False
        try:
            with tarfile.open(archive, "r:gz") as tar:
                members = [member for member in tar.getmembers() if _is_within(member.name, names)]
                tar.extractall(self._anchor, members=members, filter="tar")
        except (OSError, tarfile.TarError) as exc:
            raise CacheServiceError(f"Failed to restore cache entry {key}: {exc}") from exc
        return True

    def save(self, paths: Sequence[Path], key: str) -> None:
        """Archive ``paths`` under ``key``.

        Args:
            paths: Directories to archive.
            key: Cache key identifying the entry.

        Raises:
            CacheValidationError: If the key or paths are invalid, or none of the paths exist.
            CacheEntryExistsError: If an entry is already stored under ``key``.
            CacheServiceError: If the archive cannot be written.
        """

        validate_key(key)
        names = self._relative_names(paths)
        existing = [(path, name) for path, name in zip(paths, names) if path.exists()]
        if not existing:
            raise CacheValidationError(
                "Path Validation Error: Path(s) specified in the action for caching do(es) not exist, "
                "hence no cache is being saved."
            )
        archive = self.archive_path(key)
        if archive.exists():
            raise CacheEntryExistsError(f"Unable to reserve cache with key {key}, another entry already exists.")

        try:
            self._store_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._store_dir, suffix=".tmp")
            os.close(fd)
            tmp_path = Path(tmp_name)
            try:
                with tarfile.open(tmp_path, "w:gz") as tar:
                    for path, name in existing:
                        tar.add(path, arcname=name)
                os.replace(tmp_path, archive)
            finally:
                tmp_path.unlink(missing_ok=True)
        except (OSError, tarfile.TarError) as exc:
            raise CacheServiceError(f"Failed to save cache entry {key}: {exc}") from exc

    def _relative_names(self, paths: Sequence[Path]) -> list[str]:
        """Return archive member names for ``paths``.

        Raises:
            CacheValidationError: If no paths are given or any lies outside the anchor.
        """

        if not paths:
            raise CacheValidationError("Path Validation Error: at least one directory or file path is required")
        names: list[str] = []
        for path in paths:
            resolved = path.expanduser().resolve()
            try:
                names.append(resolved.relative_to(self._anchor).as_posix())
            except ValueError as exc:
                raise CacheValidationError(f"Cache path {path} is outside {self._anchor}") from exc
        return names


def _is_within(member: str, names: Sequence[str]) -> bool:
    """Return whether archive ``member`` is one of ``names`` or lies beneath one."""

    return any(member == name or member.startswith(f"{name}/") for name in names)


__all__ = ["ARCHIVE_SUFFIX", "CacheService", "LocalCacheService", "validate_key"]
