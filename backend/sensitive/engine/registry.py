"""Process-wide engine instance shared by the HTTP layer and the CLI."""

import logging
import threading

from sensitive.config import Settings, settings
from sensitive.engine.sensitive_filter import SensitiveFilter

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_instance: SensitiveFilter | None = None


def get_sensitive_filter() -> SensitiveFilter:
    """Build the engine on first use from the loaded settings."""
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = SensitiveFilter.from_settings(settings)
                logger.info("Sensitive filter initialized")
    return _instance


def set_sensitive_filter(instance: SensitiveFilter | None) -> None:
    """Install a prebuilt engine (or None to rebuild lazily from settings)."""
    global _instance
    with _lock:
        _instance = instance


def configure(new_settings: Settings) -> SensitiveFilter:
    instance = SensitiveFilter.from_settings(new_settings)
    set_sensitive_filter(instance)
    return instance
