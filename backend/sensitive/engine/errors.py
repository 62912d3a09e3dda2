"""Error types raised by the sensitive word engine."""


class SensitiveError(Exception):
    """Base class for engine errors."""


class ConfigurationError(SensitiveError):
    """An invalid option or a non-conforming cache backend was configured."""


class CacheError(SensitiveError):
    """A snapshot cache read, write or clear reported failure."""


class WordSourceError(SensitiveError):
    """The configured word source could not be read."""
