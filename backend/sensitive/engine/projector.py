"""Turn a match stream into a verdict or a redacted string."""

import re
from typing import Iterable, Iterator

from sensitive.engine.scanner import Match


def any_match(matches: Iterator[Match]) -> bool:
    """True if the stream yields anything. Pulls at most one element."""
    return next(matches, None) is not None


def replacement_map(pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Map each distinct matched substring to its first-seen replacement."""
    mapping: dict[str, str] = {}
    for found, replacement in pairs:
        mapping.setdefault(found, replacement)
    return mapping


def substitute(text: str, mapping: dict[str, str]) -> str:
    """Replace every key in one pass, longest key first at each position."""
    if not mapping:
        return text
    keys = sorted(mapping, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(k) for k in keys))
    return pattern.sub(lambda m: mapping[m.group(0)], text)
