"""Namespaced key-value preference stores.

A store holds flat string preferences for one (component, namespace) pair.
``batch_write`` is all-or-nothing from the caller's point of view, and
``lock`` serializes check-then-write sequences across callers.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from typing import TYPE_CHECKING, Protocol

import tomlkit
from filelock import FileLock
from tomlkit.exceptions import TOMLKitError

from quickresponse.atomic import atomic_write

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_LOCK_TIMEOUT_SECONDS = 10.0


class StoreCorruptedError(Exception):
    """Raised when a preference file cannot be parsed or holds non-string values."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Corrupted preference store {path}: {reason}")
        self.path = path
        self.reason = reason


class ReadOnlyStoreError(Exception):
    """Raised when writing to a store opened read-only."""


class PreferenceStore(Protocol):
    """Key-value store consumed by the migration."""

    def contains(self, key: str) -> bool: ...

    def get_string(self, key: str, default: str | None = None) -> str | None: ...

    def batch_write(self, values: Mapping[str, str]) -> None: ...

    def lock(self) -> contextlib.AbstractContextManager[None]: ...

    def snapshot(self) -> dict[str, str]: ...


class InMemoryPreferenceStore:
    """Process-local store, used for embedding and in tests."""

    def __init__(self, values: Mapping[str, str] | None = None, *, read_only: bool = False) -> None:
        self._values: dict[str, str] = dict(values or {})
        self._lock = threading.RLock()
        self.read_only = read_only
        self.commits = 0

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._values

    def get_string(self, key: str, default: str | None = None) -> str | None:
        with self._lock:
            return self._values.get(key, default)

    def batch_write(self, values: Mapping[str, str]) -> None:
        if self.read_only:
            raise ReadOnlyStoreError("In-memory store is read-only")
        with self._lock:
            # Copy-then-swap keeps readers from seeing a partial batch.
            updated = dict(self._values)
            updated.update(values)
            self._values = updated
            self.commits += 1

    @contextlib.contextmanager
    def lock(self) -> Iterator[None]:
        with self._lock:
            yield

    def snapshot(self) -> dict[str, str]:
        with self._lock:
            return dict(self._values)


class TomlPreferenceStore:
    """Store persisted as a flat TOML table.

    Every batch rewrites the whole file through :func:`atomic_write`, so a
    failed commit leaves the previous contents in place. Comments and key
    order in hand-edited files are preserved by round-tripping with tomlkit.
    """

    def __init__(
        self,
        path: Path,
        *,
        read_only: bool = False,
        lock_timeout: float = DEFAULT_LOCK_TIMEOUT_SECONDS,
    ) -> None:
        self.path = path
        self.read_only = read_only
        self._file_lock = FileLock(str(path.with_name(f"{path.name}.lock")), timeout=lock_timeout)

    def __repr__(self) -> str:
        return f"TomlPreferenceStore({str(self.path)!r}, read_only={self.read_only})"

    def _load_document(self) -> tomlkit.TOMLDocument:
        if not self.path.exists():
            return tomlkit.document()
        try:
            return tomlkit.parse(self.path.read_text(encoding="utf-8"))
        except TOMLKitError as exc:
            raise StoreCorruptedError(self.path, str(exc)) from exc

    def _read(self) -> dict[str, str]:
        values: dict[str, str] = {}
        for key, value in self._load_document().unwrap().items():
            if not isinstance(value, str):
                raise StoreCorruptedError(
                    self.path, f"{key} holds {type(value).__name__}, expected string"
                )
            values[key] = value
        return values

    def contains(self, key: str) -> bool:
        return key in self._read()

    def get_string(self, key: str, default: str | None = None) -> str | None:
        return self._read().get(key, default)

    def batch_write(self, values: Mapping[str, str]) -> None:
        if self.read_only:
            raise ReadOnlyStoreError(f"{self.path} was opened read-only")
        with self.lock():
            doc = self._load_document()
            for key, value in values.items():
                doc[key] = value
            atomic_write(self.path, tomlkit.dumps(doc))
        logger.debug("Committed %d preference(s) to %s", len(values), self.path)

    @contextlib.contextmanager
    def lock(self) -> Iterator[None]:
        """Hold the cross-process lock for this file (reentrant within a thread)."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self._file_lock:
            yield

    def snapshot(self) -> dict[str, str]:
        return self._read()
