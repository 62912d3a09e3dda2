"""Tests for the snapshot cache bridge, cache backends and engine lifecycle errors."""

import json
from datetime import datetime

import pytest

from sensitive.engine.cache import (
    DatabaseSnapshotCache,
    FileSnapshotCache,
    MemorySnapshotCache,
    SnapshotCache,
    create_cache,
    resolve_cache_class,
)
from sensitive.engine.errors import CacheError, ConfigurationError, WordSourceError
from sensitive.engine.sensitive_filter import DEFAULT_CACHE_KEY, FilterConfig, SensitiveFilter
from sensitive.engine.trie import TrieBuilder
from sensitive.engine.word_source import FileWordSource, ListWordSource
from sensitive.models import TrieSnapshotRecord


class DuckCache:
    """Conforms by capability only, without subclassing SnapshotCache."""

    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def put(self, key, snapshot):
        self.data[key] = snapshot
        return True

    def clear(self, key):
        self.data.pop(key, None)
        return True


class FailingCache(MemorySnapshotCache):
    def put(self, key, snapshot):
        return False

    def clear(self, key):
        return False


def cached_config(**options) -> FilterConfig:
    return FilterConfig(cache=True, **options)


def test_build_persists_snapshot(memory_cache):
    engine = SensitiveFilter(cached_config(words=("bad",)), cache=memory_cache)

    snapshot = memory_cache.get(engine.cache_key)
    assert snapshot == {"b": {"a": {"d": None}}}
    assert engine.cache_key == DEFAULT_CACHE_KEY


def test_engine_restored_from_snapshot_matches_original(memory_cache, words_file, sample_texts):
    original = SensitiveFilter(cached_config(word_file=str(words_file)), cache=memory_cache)

    # The word file is gone: the second engine can only come from the snapshot.
    words_file.unlink()
    restored = SensitiveFilter(cached_config(word_file=str(words_file)), cache=memory_cache)

    assert restored.store.root == original.store.root
    for text in sample_texts:
        assert restored.filter(text) == original.filter(text)
        assert restored.check(text) == original.check(text)


def test_cache_key_scopes_dictionaries(memory_cache):
    SensitiveFilter(cached_config(words=("bad",), cache_key="one"), cache=memory_cache)
    SensitiveFilter(cached_config(words=("evil",), cache_key="two"), cache=memory_cache)

    one = SensitiveFilter(cached_config(cache_key="one"), cache=memory_cache)
    two = SensitiveFilter(cached_config(cache_key="two"), cache=memory_cache)

    assert one.check("bad") and not one.check("evil")
    assert two.check("evil") and not two.check("bad")


def test_malformed_snapshot_triggers_rebuild(memory_cache):
    memory_cache.put("k", {"b": 5})

    engine = SensitiveFilter(cached_config(words=("bad",), cache_key="k"), cache=memory_cache)

    assert engine.check("bad") is True
    assert memory_cache.get("k") == {"b": {"a": {"d": None}}}


def test_empty_snapshot_triggers_rebuild(memory_cache):
    memory_cache.put("k", {})

    engine = SensitiveFilter(cached_config(words=("bad",), cache_key="k"), cache=memory_cache)

    assert engine.check("bad") is True
    assert memory_cache.get("k") == {"b": {"a": {"d": None}}}


def test_disabled_cache_is_never_touched(memory_cache):
    engine = SensitiveFilter(FilterConfig(words=("bad",)), cache=memory_cache)

    assert engine.cache is None
    assert engine.save_snapshot() is False
    assert engine.clear_snapshot() is False
    assert memory_cache.get(engine.cache_key) is None


def test_write_failure_is_fatal():
    with pytest.raises(CacheError, match="save cache failed"):
        SensitiveFilter(cached_config(words=("bad",)), cache=FailingCache())


def test_clear_failure_raises():
    cache = FailingCache()
    cache._entries["k"] = json.dumps({"b": {"a": {"d": None}}})
    engine = SensitiveFilter(cached_config(cache_key="k"), cache=cache)

    with pytest.raises(CacheError, match="clear cache failed"):
        engine.clear_snapshot()


def test_clear_snapshot_keeps_memory_trie(memory_cache):
    engine = SensitiveFilter(cached_config(words=("bad",)), cache=memory_cache)

    assert engine.clear_snapshot() is True
    assert memory_cache.get(engine.cache_key) is None
    assert engine.check("bad") is True


def test_save_snapshot_after_add_words(memory_cache):
    engine = SensitiveFilter(cached_config(words=("bad",)), cache=memory_cache)
    engine.add_words(["evil"])

    assert engine.save_snapshot() is True
    restored = SensitiveFilter(cached_config(), cache=memory_cache)
    assert restored.check("evil") is True


def test_enabled_cache_requires_backend():
    with pytest.raises(ConfigurationError):
        SensitiveFilter(cached_config(words=("bad",)))


def test_non_conforming_backend_is_rejected():
    with pytest.raises(ConfigurationError):
        SensitiveFilter(cached_config(words=("bad",)), cache={"not": "a cache"})


def test_duck_typed_backend_is_accepted():
    cache = DuckCache()

    assert isinstance(cache, SnapshotCache)
    engine = SensitiveFilter(cached_config(words=("bad",)), cache=cache)
    assert cache.data[engine.cache_key] == {"b": {"a": {"d": None}}}


def test_missing_word_file_raises():
    with pytest.raises(WordSourceError, match="not exists"):
        SensitiveFilter(FilterConfig(word_file="/nonexistent/words.txt"))


def test_failed_reset_keeps_previous_trie(bad_filter):
    bad_filter.word_source = FileWordSource("/nonexistent/words.txt")

    with pytest.raises(WordSourceError):
        bad_filter.reset_trie()
    assert bad_filter.check("bad") is True


def test_reset_reads_current_source(bad_filter):
    bad_filter.word_source = ListWordSource(["evil"])
    bad_filter.reset_trie()

    assert bad_filter.check("evil") is True
    assert bad_filter.check("bad") is False


def test_rebuild_does_not_disturb_running_scan(bad_filter):
    running = bad_filter.matches("bad and bad")
    assert next(running).text == "bad"

    bad_filter.build(["other"])

    assert [m.text for m in running] == ["bad"]
    assert bad_filter.check("bad") is False


def test_add_words_publishes_a_new_store(bad_filter):
    before = bad_filter.store
    bad_filter.add_words(["evil"])

    assert before.count_words() == 1
    assert bad_filter.store.count_words() == 2
    assert bad_filter.check("evil") and bad_filter.check("bad")


def test_add_words_from_file_and_empty(bad_filter, words_file):
    bad_filter.add_words_from_file(str(words_file))

    assert bad_filter.check("so evil") is True
    assert bad_filter.check("red then blue") is True

    bad_filter.empty_trie()
    assert bad_filter.check("bad") is False


def test_words_and_file_are_combined(words_file):
    engine = SensitiveFilter(FilterConfig(words=("inline",), word_file=str(words_file)))

    assert engine.check("inline") is True
    assert engine.check("g.o.o.d") is True
    assert engine.check("# banned words") is False


def test_invalid_mask_is_rejected():
    with pytest.raises(ValueError):
        FilterConfig(replace_code="**")


class TestFileSnapshotCache:
    def test_roundtrip(self, tmp_path):
        cache = FileSnapshotCache(tmp_path / "cache")
        snapshot = TrieBuilder().build_all(["bad", "red+blue", "坏蛋"]).to_snapshot()

        assert cache.get("k") is None
        assert cache.put("k", snapshot) is True
        assert cache.get("k") == snapshot
        assert cache.clear("k") is True
        assert cache.get("k") is None
        assert cache.clear("k") is True

    def test_undecodable_file_is_a_miss(self, tmp_path):
        cache = FileSnapshotCache(tmp_path)
        with open(cache.path_for("k"), "w", encoding="utf-8") as f:
            f.write("{not json")

        assert cache.get("k") is None

    def test_unwritable_directory_reports_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        cache = FileSnapshotCache(blocker)

        assert cache.put("k", {}) is False

    def test_engine_with_file_backend(self, tmp_path):
        cache = FileSnapshotCache(tmp_path)
        SensitiveFilter(cached_config(words=("bad",)), cache=cache)

        restored = SensitiveFilter(cached_config(), cache=FileSnapshotCache(tmp_path))
        assert restored.filter("so bad") == "so ***"


class TestDatabaseSnapshotCache:
    @pytest.fixture
    def cache(self, tmp_path) -> DatabaseSnapshotCache:
        return DatabaseSnapshotCache(f"sqlite:///{tmp_path / 'snapshots.db'}")

    def test_roundtrip(self, cache):
        snapshot = TrieBuilder().build_all(["bad", "red+blue"]).to_snapshot()

        assert cache.get("k") is None
        assert cache.put("k", snapshot) is True
        assert cache.get("k") == snapshot

    def test_put_overwrites(self, cache):
        cache.put("k", {"a": None})
        cache.put("k", {"b": None})

        assert cache.get("k") == {"b": None}

    def test_record_tracks_word_count_and_timestamp(self, cache):
        cache.put("k", TrieBuilder().build_all(["bad", "evil"]).to_snapshot())

        with cache.session_factory() as db:
            record = db.get(TrieSnapshotRecord, "k")

        assert record.word_count == 2
        assert isinstance(record.updated_at, datetime)

    def test_clear(self, cache):
        cache.put("k", {"a": None})

        assert cache.clear("k") is True
        assert cache.get("k") is None

    def test_engine_with_database_backend(self, cache, sample_texts, words_file):
        original = SensitiveFilter(cached_config(word_file=str(words_file)), cache=cache)
        restored = SensitiveFilter(cached_config(), cache=cache)

        for text in sample_texts:
            assert restored.filter(text) == original.filter(text)


class TestResolveCacheClass:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("memory", MemorySnapshotCache),
            ("file", FileSnapshotCache),
            ("database", DatabaseSnapshotCache),
            ("sensitive.engine.cache.MemorySnapshotCache", MemorySnapshotCache),
            ("sensitive.engine.cache:FileSnapshotCache", FileSnapshotCache),
        ],
    )
    def test_known_names(self, name, expected):
        assert resolve_cache_class(name) is expected

    @pytest.mark.parametrize(
        "name",
        ["redis", "no.such.module.Cache", "sensitive.engine.cache.NoSuchCache", "collections.OrderedDict", "os.path"],
    )
    def test_unknown_or_non_conforming(self, name):
        with pytest.raises(ConfigurationError):
            resolve_cache_class(name)

    def test_create_cache_passes_options(self, tmp_path):
        cache = create_cache("file", cache_dir=str(tmp_path))

        assert isinstance(cache, FileSnapshotCache)
        assert cache.directory == str(tmp_path)
