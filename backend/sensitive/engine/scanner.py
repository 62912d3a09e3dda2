"""DFA scan of text against a sensitive word trie.

The scanner walks the text from every start position. Characters are looked
up in their canonical form; characters with no edge may still be consumed as
filler ("disturb" characters) once part of a word has matched, and a node with
a chain edge may hand the rest of the text to the second half of a compound
rule.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from sensitive.engine.normalizer import canonical
from sensitive.engine.trie import CHAIN_MARKER, TERMINAL, TrieNode

# Anything outside CJK unified/compatibility ideographs, ASCII digits and letters.
DISTURB_PATTERN = re.compile(r"[^\u4e00-\u9fa5\uf900-\ufa2d0-9A-Za-z]")


@dataclass(frozen=True, slots=True)
class Match:
    """One hit: offsets are in characters of the original text."""

    start: int
    length: int
    text: str
    replacement: str

    @property
    def end(self) -> int:
        return self.start + self.length


class Scanner:
    """Stateless matcher bound to one trie root and masking policy."""

    def __init__(self, root: TrieNode, mask: str = "*", disturbs: Iterable[str] = ()):
        self.root = root
        self.mask = mask
        self.disturbs = tuple(d for d in disturbs if d)

    def is_disturb(self, ch: str) -> bool:
        if DISTURB_PATTERN.match(ch):
            return True
        return any(needle in ch for needle in self.disturbs)

    def scan(self, text: str) -> Iterator[Match]:
        """Lazily yield matches in left-to-right order."""
        return self._walk(text, self.root, 0, chained=False)

    def scan_chain(self, text: str, node: TrieNode, start: int) -> Iterator[Match]:
        """Search forward from ``start`` for the second half of a compound rule."""
        return self._walk(text, node, start, chained=True)

    def _walk(self, text: str, root: TrieNode, start: int, chained: bool) -> Iterator[Match]:
        length = len(text)
        i = start
        while i < length:
            consumed = 0
            node = root
            replacement: list[str] = []
            chain_tried = False
            j = i
            while j < length:
                raw = text[j]
                ch = canonical(raw)

                if ch not in node:
                    if not consumed:
                        break

                    chain = node.get(CHAIN_MARKER)
                    if not chain_tried and raw != CHAIN_MARKER and isinstance(chain, dict):
                        chain_tried = True
                        tail = self.scan_chain(text, chain, j)
                        first = next(tail, None)
                        if first is not None:
                            yield Match(i, consumed, text[i:i + consumed], "".join(replacement))
                            yield first
                            yield from tail
                            break

                    if self.is_disturb(raw):
                        consumed += 1
                        replacement.append(raw)
                        j += 1
                        continue
                    break

                consumed += 1
                replacement.append(self.mask)
                child = node[ch]
                if child is TERMINAL:
                    yield Match(i, consumed, text[i:i + consumed], "".join(replacement))
                    if chained:
                        # A compound rule contributes one second-half match.
                        return
                    i += consumed - 1
                    break
                node = child
                j += 1
            i += 1
