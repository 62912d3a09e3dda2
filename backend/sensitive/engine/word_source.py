"""Providers of raw word-list entries."""

import logging
import os
from abc import ABC, abstractmethod
from typing import Iterable, Iterator

from sensitive.engine.errors import WordSourceError

logger = logging.getLogger(__name__)


class WordSource(ABC):
    """Anything that can hand the builder a sequence of raw word strings."""

    @abstractmethod
    def provide(self) -> Iterable[str]:
        """Return raw entries. Cleaning and comment skipping happen in the builder."""
        ...


class ListWordSource(WordSource):
    def __init__(self, words: Iterable[str] = ()):
        self.words = list(words)

    def provide(self) -> Iterable[str]:
        return list(self.words)


class FileWordSource(WordSource):
    """Newline-separated word file, read lazily line by line."""

    def __init__(self, path: str | os.PathLike, encoding: str = "utf-8"):
        self.path = os.fspath(path)
        self.encoding = encoding

    def provide(self) -> Iterator[str]:
        if not os.path.isfile(self.path):
            raise WordSourceError(f"file [{self.path}] not exists")
        try:
            handle = open(self.path, "r", encoding=self.encoding)
        except OSError as exc:
            raise WordSourceError(f"read file [{self.path}] failed: {exc}") from exc
        logger.info(f"Reading words from {self.path}")
        return self._lines(handle)

    def _lines(self, handle) -> Iterator[str]:
        with handle:
            try:
                yield from handle
            except (OSError, UnicodeDecodeError) as exc:
                raise WordSourceError(f"read file [{self.path}] failed: {exc}") from exc


class ChainedWordSource(WordSource):
    """Concatenates several sources in order."""

    def __init__(self, *sources: WordSource):
        self.sources = list(sources)

    def provide(self) -> Iterator[str]:
        # Resolve every source up front so a missing file fails before any insert.
        provided = [source.provide() for source in self.sources]
        for words in provided:
            yield from words


def source_from_config(words: Iterable[str] = (), word_file: str | None = None) -> WordSource:
    """Inline words first, then the word file, as the settings describe them."""
    sources: list[WordSource] = [ListWordSource(words)]
    if word_file:
        sources.append(FileWordSource(word_file))
    return ChainedWordSource(*sources)
