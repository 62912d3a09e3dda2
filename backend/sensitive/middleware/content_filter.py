"""Sensitive-word content filter for user supplied text."""

from sensitive.engine.registry import get_sensitive_filter
from sensitive.engine.sensitive_filter import SensitiveFilter

MAX_REPORTED_WORDS = 5


class ContentFilter:
    """Moderation verdicts on top of the shared sensitive word engine."""

    def __init__(self, engine: SensitiveFilter | None = None):
        self._engine = engine

    @property
    def engine(self) -> SensitiveFilter:
        return self._engine or get_sensitive_filter()

    def check_content(self, text: str) -> tuple[bool, str | None]:
        """Check text against the sensitive word list.

        Returns:
            (True, None) if safe, (False, reason) if violation found.
        """
        found: list[str] = []
        for word in self.engine.search(text):
            if word not in found:
                found.append(word)
            if len(found) >= MAX_REPORTED_WORDS:
                break
        if not found:
            return True, None
        return False, f"Sensitive words: {', '.join(found)}"
