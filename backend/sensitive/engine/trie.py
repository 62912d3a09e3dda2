"""Character trie built from a sensitive word list."""

from __future__ import annotations

import copy
import logging
from typing import Any, Iterable

from sensitive.engine.normalizer import canonical_text

logger = logging.getLogger(__name__)

# Edge value meaning "a registered word ends here". Any dict is a Continue edge.
TERMINAL = None

# Reserved key whose child holds the second half of a compound rule.
CHAIN_MARKER = "+"

COMMENT_PREFIX = "#"

_TRIM_CHARS = " \t\n\r\0\x0b'\"`"
_EMBEDDED = str.maketrans("", "", " \t\0\x0b")

TrieNode = dict[str, Any]


def clean_word(raw: str) -> str:
    """Trim and strip a raw word-list entry. Returns "" for discarded entries."""
    word = raw.strip(_TRIM_CHARS).translate(_EMBEDDED)
    if not word or word.startswith(COMMENT_PREFIX):
        return ""
    return word


class TrieStore:
    """Nested mapping from canonical character to Continue (dict) or TERMINAL."""

    __slots__ = ("root",)

    def __init__(self, root: TrieNode | None = None):
        self.root: TrieNode = root if root is not None else {}

    def __len__(self) -> int:
        return self.count_words()

    def __bool__(self) -> bool:
        return bool(self.root)

    def count_words(self) -> int:
        """Number of Terminal edges reachable from the root."""
        total = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            for child in node.values():
                if child is TERMINAL:
                    total += 1
                else:
                    stack.append(child)
        return total

    def copy(self) -> TrieStore:
        return TrieStore(copy.deepcopy(self.root))

    def to_snapshot(self) -> TrieNode:
        """Serializable capture of the trie (TERMINAL is None, i.e. JSON null)."""
        return copy.deepcopy(self.root)

    @classmethod
    def from_snapshot(cls, snapshot: Any) -> TrieStore:
        """Adopt a snapshot. Raises ValueError if it is not a well-formed trie."""
        if not isinstance(snapshot, dict):
            raise ValueError(f"snapshot root must be a mapping, got {type(snapshot).__name__}")
        stack = [snapshot]
        while stack:
            node = stack.pop()
            for key, child in node.items():
                if not isinstance(key, str) or len(key) != 1:
                    raise ValueError(f"invalid trie edge {key!r}")
                if child is TERMINAL:
                    continue
                if not isinstance(child, dict):
                    raise ValueError(f"invalid child for edge {key!r}: {type(child).__name__}")
                stack.append(child)
        return cls(copy.deepcopy(snapshot))


class TrieBuilder:
    """Inserts cleaned, normalized words into a TrieStore."""

    def __init__(self, store: TrieStore | None = None):
        self.store = store if store is not None else TrieStore()

    def insert(self, raw: str) -> bool:
        """Insert one word. Returns False when the entry was discarded.

        A Terminal edge on the path is turned into Continue when a longer word
        passes through it. An existing edge at the last character is never
        touched, so a prefix of an existing path stays unmatchable.
        """
        word = clean_word(raw)
        if not word:
            return False
        word = canonical_text(word)

        node = self.store.root
        last = len(word) - 1
        for index, ch in enumerate(word):
            if index == last:
                if ch not in node:
                    node[ch] = TERMINAL
                break
            child = node.get(ch)
            if not isinstance(child, dict):
                child = {}
                node[ch] = child
            node = child
        return True

    def build_all(self, words: Iterable[str]) -> TrieStore:
        inserted = 0
        for raw in words:
            if self.insert(raw):
                inserted += 1
        logger.debug(f"Inserted {inserted} words into trie")
        return self.store
