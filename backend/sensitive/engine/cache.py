"""Snapshot cache backends for built tries.

A backend stores one snapshot per key so several dictionaries can share it.
``get`` returns None on a miss, ``put`` and ``clear`` report success as a bool.
The engine turns a False into a CacheError.
"""

import hashlib
import importlib
import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy import create_engine, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from sensitive.engine.errors import CacheError, ConfigurationError
from sensitive.engine.trie import TrieStore
from sensitive.models.base import Base
from sensitive.models.snapshot import TrieSnapshotRecord

logger = logging.getLogger(__name__)


class SnapshotCache(ABC):
    """Key-scoped store for trie snapshots.

    Any class exposing callable ``get``, ``put`` and ``clear`` counts as one.
    """

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is SnapshotCache:
            if all(callable(getattr(subclass, name, None)) for name in ("get", "put", "clear")):
                return True
        return NotImplemented

    @abstractmethod
    def get(self, key: str) -> dict | None:
        ...

    @abstractmethod
    def put(self, key: str, snapshot: dict) -> bool:
        ...

    @abstractmethod
    def clear(self, key: str) -> bool:
        ...


class MemorySnapshotCache(SnapshotCache):
    """Process-local cache. Stores the JSON text so readers never share nodes."""

    def __init__(self):
        self._entries: dict[str, str] = {}

    def get(self, key: str) -> dict | None:
        raw = self._entries.get(key)
        return json.loads(raw) if raw is not None else None

    def put(self, key: str, snapshot: dict) -> bool:
        self._entries[key] = json.dumps(snapshot, ensure_ascii=False)
        return True

    def clear(self, key: str) -> bool:
        self._entries.pop(key, None)
        return True


class FileSnapshotCache(SnapshotCache):
    """One JSON file per key under a directory."""

    def __init__(self, directory: str | os.PathLike = ".sensitive_cache"):
        self.directory = os.fspath(directory)

    def path_for(self, key: str) -> str:
        digest = hashlib.md5(key.encode("utf-8")).hexdigest()
        return os.path.join(self.directory, f"{digest}.json")

    def get(self, key: str) -> Any:
        path = self.path_for(key)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            return None
        except (json.JSONDecodeError, UnicodeDecodeError):
            # Undecodable content is treated like a malformed snapshot.
            logger.warning(f"Snapshot file {path} is not valid JSON, ignoring it")
            return None
        except OSError as exc:
            raise CacheError(f"read snapshot [{path}] failed: {exc}") from exc

    def put(self, key: str, snapshot: dict) -> bool:
        path = self.path_for(key)
        tmp_path = f"{path}.tmp"
        try:
            os.makedirs(self.directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(snapshot, f, ensure_ascii=False)
            os.replace(tmp_path, path)
        except OSError:
            logger.exception(f"Failed to write snapshot {path}")
            return False
        return True

    def clear(self, key: str) -> bool:
        path = self.path_for(key)
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError:
            logger.exception(f"Failed to remove snapshot {path}")
            return False
        return True


class DatabaseSnapshotCache(SnapshotCache):
    """Snapshots stored in the ``trie_snapshots`` table via SQLAlchemy."""

    def __init__(self, database_url: str = "sqlite:///./sensitive.db"):
        self.engine = create_engine(database_url)
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        try:
            Base.metadata.create_all(self.engine, tables=[TrieSnapshotRecord.__table__])
        except SQLAlchemyError as exc:
            raise CacheError(f"snapshot table setup failed: {exc}") from exc

    def get(self, key: str) -> Any:
        try:
            with self.session_factory() as db:
                result = db.execute(select(TrieSnapshotRecord.payload).where(TrieSnapshotRecord.key == key))
                return result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise CacheError(f"read snapshot [{key}] failed: {exc}") from exc

    def put(self, key: str, snapshot: dict) -> bool:
        try:
            with self.session_factory() as db:
                record = db.get(TrieSnapshotRecord, key)
                if record is None:
                    record = TrieSnapshotRecord(key=key)
                    db.add(record)
                record.payload = snapshot
                record.word_count = TrieStore(snapshot).count_words()
                db.commit()
        except SQLAlchemyError:
            logger.exception(f"Failed to store snapshot {key}")
            return False
        return True

    def clear(self, key: str) -> bool:
        try:
            with self.session_factory() as db:
                db.execute(delete(TrieSnapshotRecord).where(TrieSnapshotRecord.key == key))
                db.commit()
        except SQLAlchemyError:
            logger.exception(f"Failed to clear snapshot {key}")
            return False
        return True


_ALIASES: dict[str, type[SnapshotCache]] = {
    "memory": MemorySnapshotCache,
    "file": FileSnapshotCache,
    "database": DatabaseSnapshotCache,
}


def resolve_cache_class(name: str) -> type[SnapshotCache]:
    """Map an alias or a dotted ``module.Class`` / ``module:Class`` path to a backend class."""
    if name in _ALIASES:
        return _ALIASES[name]

    module_name, sep, attr = name.replace(":", ".").rpartition(".")
    if not sep or not module_name:
        raise ConfigurationError(f"cache class [{name}] not exists")
    try:
        module = importlib.import_module(module_name)
        cls = getattr(module, attr)
    except (ImportError, AttributeError) as exc:
        raise ConfigurationError(f"cache class [{name}] not exists") from exc

    if not isinstance(cls, type) or not issubclass(cls, SnapshotCache):
        raise ConfigurationError(f"cache class [{name}] does not implement SnapshotCache")
    return cls


def create_cache(name: str, cache_dir: str = ".sensitive_cache", database_url: str = "sqlite:///./sensitive.db") -> SnapshotCache:
    """Instantiate a configured backend, passing the options the built-ins need."""
    cls = resolve_cache_class(name)
    if issubclass(cls, FileSnapshotCache):
        return cls(cache_dir)
    if issubclass(cls, DatabaseSnapshotCache):
        return cls(database_url)
    return cls()
