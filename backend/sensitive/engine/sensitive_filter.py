"""Sensitive word engine: trie lifecycle, snapshot cache bridge and scanning."""

import hashlib
import logging
import threading
from typing import Iterable, Iterator

from pydantic import BaseModel, ValidationError, field_validator

from sensitive.engine.cache import SnapshotCache, create_cache
from sensitive.engine.errors import CacheError, ConfigurationError
from sensitive.engine.projector import any_match, replacement_map, substitute
from sensitive.engine.scanner import Match, Scanner
from sensitive.engine.trie import TrieBuilder, TrieStore
from sensitive.engine.word_source import FileWordSource, WordSource, source_from_config

logger = logging.getLogger(__name__)

DEFAULT_CACHE_KEY = hashlib.md5(f"{__name__}.SensitiveFilter".encode("utf-8")).hexdigest()


class FilterConfig(BaseModel):
    """Engine options. Immutable once the engine is constructed."""

    replace_code: str = "*"
    disturbs: tuple[str, ...] = ()
    words: tuple[str, ...] = ()
    word_file: str | None = None
    cache: bool = False
    cache_key: str | None = None

    model_config = {"frozen": True}

    @field_validator("replace_code")
    @classmethod
    def validate_replace_code(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("replace_code must be a single character")
        return v

    @classmethod
    def from_settings(cls, settings) -> "FilterConfig":
        try:
            return cls(
                replace_code=settings.replace_code,
                disturbs=tuple(settings.disturbs),
                words=tuple(settings.words),
                word_file=settings.word_file,
                cache=settings.cache,
                cache_key=settings.cache_key,
            )
        except ValidationError as exc:
            raise ConfigurationError(f"invalid filter settings: {exc}") from exc


class SensitiveFilter:
    """Checks and redacts sensitive words using a DFA built from a word list.

    The trie is replaced wholesale on every rebuild; scans that already
    started keep reading the store they captured.
    """

    def __init__(
        self,
        config: FilterConfig | None = None,
        word_source: WordSource | None = None,
        cache: SnapshotCache | None = None,
    ):
        self.config = config or FilterConfig()
        self.word_source = word_source or source_from_config(self.config.words, self.config.word_file)
        self.cache_key = self.config.cache_key or DEFAULT_CACHE_KEY
        self._rebuild_lock = threading.Lock()
        self._store = TrieStore()

        self.cache: SnapshotCache | None = None
        if self.config.cache:
            if cache is None:
                raise ConfigurationError("cache is enabled but no cache backend was given")
            if not isinstance(cache, SnapshotCache):
                raise ConfigurationError(f"cache {type(cache).__name__} does not implement SnapshotCache")
            self.cache = cache

            if self._adopt_snapshot():
                return

        self.reset_trie()

    @classmethod
    def from_settings(cls, settings) -> "SensitiveFilter":
        config = FilterConfig.from_settings(settings)
        cache = None
        if config.cache:
            cache = create_cache(settings.cache_class, cache_dir=settings.cache_dir, database_url=settings.database_url)
        return cls(config, cache=cache)

    @property
    def store(self) -> TrieStore:
        return self._store

    def _adopt_snapshot(self) -> bool:
        snapshot = self.cache.get(self.cache_key)
        if not snapshot:
            logger.info(f"No trie snapshot cached under {self.cache_key}, building from source")
            return False
        try:
            store = TrieStore.from_snapshot(snapshot)
        except ValueError as exc:
            logger.warning(f"Ignoring malformed trie snapshot {self.cache_key}: {exc}")
            return False
        self._store = store
        logger.info(f"Adopted cached trie snapshot {self.cache_key} ({store.count_words()} words)")
        return True

    def _publish(self, store: TrieStore) -> None:
        # Single reference assignment; readers see the old or the new store, never a mix.
        self._store = store

    # Building

    def build(self, words: Iterable[str]) -> "SensitiveFilter":
        """Replace the trie with one built from ``words`` only."""
        with self._rebuild_lock:
            store = TrieBuilder().build_all(words)
            self._publish(store)
        return self

    def add_words(self, words: Iterable[str]) -> "SensitiveFilter":
        """Insert more words on top of the current trie."""
        with self._rebuild_lock:
            store = TrieBuilder(self._store.copy()).build_all(words)
            self._publish(store)
        return self

    def add_words_from_file(self, path: str) -> "SensitiveFilter":
        return self.add_words(FileWordSource(path).provide())

    def empty_trie(self) -> "SensitiveFilter":
        with self._rebuild_lock:
            self._publish(TrieStore())
        return self

    def reset_trie(self) -> "SensitiveFilter":
        """Rebuild from the word source and persist the result when caching is on."""
        with self._rebuild_lock:
            store = TrieBuilder().build_all(self.word_source.provide())
            self._publish(store)
        logger.info(f"Built trie with {store.count_words()} words")
        self.save_snapshot()
        return self

    # Snapshot cache

    def save_snapshot(self) -> bool:
        """Persist the current trie. Returns False when caching is disabled."""
        if self.cache is None:
            return False
        if self.cache.put(self.cache_key, self._store.to_snapshot()):
            logger.info(f"Saved trie snapshot {self.cache_key}")
            return True
        raise CacheError("save cache failed")

    def clear_snapshot(self) -> bool:
        """Remove the persisted snapshot; the in-memory trie is kept."""
        if self.cache is None:
            return False
        if self.cache.clear(self.cache_key):
            logger.info(f"Cleared trie snapshot {self.cache_key}")
            return True
        raise CacheError("clear cache failed")

    # Matching

    def matches(self, text: str) -> Iterator[Match]:
        scanner = Scanner(self._store.root, self.config.replace_code, self.config.disturbs)
        return scanner.scan(text)

    def search(self, text: str, with_replacements: bool = False) -> Iterator:
        """Lazily yield matched substrings, or (substring, replacement) pairs."""
        matches = self.matches(text)
        if with_replacements:
            return ((m.text, m.replacement) for m in matches)
        return (m.text for m in matches)

    def check(self, text: str) -> bool:
        return any_match(self.matches(text))

    def filter(self, text: str) -> str:
        mapping = replacement_map(self.search(text, with_replacements=True))
        return substitute(text, mapping)
