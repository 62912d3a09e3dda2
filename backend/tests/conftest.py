"""Shared test fixtures and configuration."""

from pathlib import Path

import pytest

from sensitive.engine.cache import MemorySnapshotCache
from sensitive.engine.sensitive_filter import FilterConfig, SensitiveFilter


@pytest.fixture
def make_filter():
    """Factory building an engine from an inline word list."""

    def _make(words, **options) -> SensitiveFilter:
        cache = options.pop("cache_backend", None)
        config = FilterConfig(words=tuple(words), **options)
        return SensitiveFilter(config, cache=cache)

    return _make


@pytest.fixture
def bad_filter(make_filter) -> SensitiveFilter:
    """Engine whose dictionary is just "bad"."""
    return make_filter(["bad"])


@pytest.fixture
def memory_cache() -> MemorySnapshotCache:
    return MemorySnapshotCache()


@pytest.fixture
def words_file(tmp_path) -> Path:
    """A word list file with comments, quoting and blank lines."""
    path = tmp_path / "words.txt"
    path.write_text(
        "# banned words\n"
        "bad\n"
        "\n"
        "  'evil'  \n"
        "g o o d\n"
        "red+blue\n"
        "機器\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_texts() -> list[str]:
    """Texts exercising plain, obfuscated, chained and clean input."""
    return [
        "",
        "nothing to see here",
        "this is bad",
        "b a d and bad",
        "b-a-d!",
        "so evil",
        "good grief",
        "red and then blue",
        "blue before red",
        "机器人",
        "機器人",
    ]
