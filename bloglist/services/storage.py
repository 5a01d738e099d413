"""Document storage for blogs and users.

Records are plain JSON-compatible dicts keyed by a generated ``id``.  The
in-memory store is the default; ``JsonFileStore`` additionally rewrites a
JSON file after every mutation so data survives restarts.
"""

import asyncio
import json
import logging
import os
import tempfile
import uuid
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from bloglist.config import get_settings
from bloglist.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

BLOGS_FILE = "blogs.json"
USERS_FILE = "users.json"

# Lazy singletons, live for the process lifetime
_blog_store: "RecordStore | None" = None
_user_store: "RecordStore | None" = None


class RecordStore(ABC):
    """Storage contract used by the request handlers.

    Missing ids raise ``NotFoundError``; unique-field violations raise
    ``ValidationError`` with kind ``DuplicateKey``.  The store is the
    authoritative enforcement point for uniqueness.
    """

    name: str

    @abstractmethod
    async def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        """Store *record* under a new id and return the stored copy."""

    @abstractmethod
    async def find_all(self) -> list[dict[str, Any]]:
        """Return every record in insertion order."""

    @abstractmethod
    async def find_by_id(self, record_id: str) -> dict[str, Any]: ...

    @abstractmethod
    async def find_one(self, **criteria: Any) -> dict[str, Any] | None:
        """Return the first record whose fields equal *criteria*, or None."""

    @abstractmethod
    async def update_partial(
        self, record_id: str, patch: dict[str, Any]
    ) -> dict[str, Any]: ...

    @abstractmethod
    async def delete_by_id(self, record_id: str) -> None: ...

    @abstractmethod
    async def count(self) -> int: ...

    @abstractmethod
    async def clear(self) -> None: ...

    def check(self) -> bool:
        """Lightweight connectivity check for the health endpoint."""
        return True


class InMemoryStore(RecordStore):
    """Ordered dict of records; writes are serialized by an asyncio lock.

    Mutations build a new dict and hand it to ``_commit``, so a failed
    commit leaves the visible records untouched.

    Usage::

        users = InMemoryStore("users", unique=("username",))
        stored = await users.insert({"username": "root"})
        await users.find_by_id(stored["id"])
    """

    def __init__(self, name: str, unique: Iterable[str] = ()) -> None:
        self.name = name
        self.unique = tuple(unique)
        self._records: dict[str, dict[str, Any]] = {}
        self._lock = asyncio.Lock()

    def _check_unique(self, record: dict[str, Any], exclude_id: str | None) -> None:
        for field in self.unique:
            if field not in record:
                continue
            for other_id, other in self._records.items():
                if other_id != exclude_id and other.get(field) == record[field]:
                    logger.warning(
                        "Duplicate %s in %s: %r", field, self.name, record[field]
                    )
                    raise ValidationError.duplicate(field, record[field])

    def _get(self, record_id: str) -> dict[str, Any]:
        record = self._records.get(record_id)
        if record is None:
            raise NotFoundError(self.name, record_id)
        return record

    async def _commit(self, records: dict[str, dict[str, Any]]) -> None:
        """Make *records* the current state. Called with the lock held."""
        self._records = records

    async def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        async with self._lock:
            self._check_unique(record, exclude_id=None)
            record_id = uuid.uuid4().hex
            stored = {**record, "id": record_id}
            await self._commit({**self._records, record_id: stored})
        logger.debug("Inserted %s %s", self.name, record_id)
        return dict(stored)

    async def find_all(self) -> list[dict[str, Any]]:
        return [dict(r) for r in self._records.values()]

    async def find_by_id(self, record_id: str) -> dict[str, Any]:
        return dict(self._get(record_id))

    async def find_one(self, **criteria: Any) -> dict[str, Any] | None:
        for record in self._records.values():
            if all(record.get(k) == v for k, v in criteria.items()):
                return dict(record)
        return None

    async def update_partial(
        self, record_id: str, patch: dict[str, Any]
    ) -> dict[str, Any]:
        patch = {k: v for k, v in patch.items() if k != "id"}
        async with self._lock:
            current = self._get(record_id)
            self._check_unique(patch, exclude_id=record_id)
            updated = {**current, **patch}
            await self._commit({**self._records, record_id: updated})
        return dict(updated)

    async def delete_by_id(self, record_id: str) -> None:
        async with self._lock:
            self._get(record_id)
            records = dict(self._records)
            del records[record_id]
            await self._commit(records)

    async def count(self) -> int:
        return len(self._records)

    async def clear(self) -> None:
        async with self._lock:
            await self._commit({})


class JsonFileStore(InMemoryStore):
    """``InMemoryStore`` mirrored to a JSON file (a list of records).

    The file is written before the in-memory state changes; if the write
    fails the store keeps its previous records.
    """

    def __init__(self, path: str | Path, name: str, unique: Iterable[str] = ()) -> None:
        super().__init__(name, unique)
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if self.path.exists():
            data = json.loads(self.path.read_text(encoding="utf-8"))
            self._records = {r["id"]: r for r in data}
            logger.info("Loaded %d %s from %s", len(self._records), name, self.path)

    def _write(self, records: dict[str, dict[str, Any]]) -> None:
        # Write to a sibling temp file, then swap it in
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(list(records.values()), fh, indent=2)
            os.replace(tmp, self.path)
        except OSError:
            logger.error("Could not write %s to %s", self.name, self.path)
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
        logger.debug("Flushed %d %s to %s", len(records), self.name, self.path)

    async def _commit(self, records: dict[str, dict[str, Any]]) -> None:
        # File I/O stays off the event loop
        await asyncio.to_thread(self._write, records)
        self._records = records

    def check(self) -> bool:
        directory = self.path.parent
        return directory.is_dir() and os.access(directory, os.W_OK)


def create_store(filename: str, name: str, unique: Iterable[str] = ()) -> RecordStore:
    """Build a store honoring ``settings.data_dir`` (empty = in memory)."""
    data_dir = get_settings().data_dir
    if data_dir:
        return JsonFileStore(Path(data_dir) / filename, name, unique)
    return InMemoryStore(name, unique)


def get_blog_store() -> RecordStore:
    """Return the shared blog store (lazy singleton)."""
    global _blog_store
    if _blog_store is None:
        _blog_store = create_store(BLOGS_FILE, "blogs")
    return _blog_store


def get_user_store() -> RecordStore:
    """Return the shared user store (lazy singleton)."""
    global _user_store
    if _user_store is None:
        _user_store = create_store(USERS_FILE, "users", unique=("username",))
    return _user_store
