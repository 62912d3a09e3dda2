from pathlib import Path

from pydantic_settings import BaseSettings

# Resolve .env from project root (one level above backend/)
_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    # Matching
    replace_code: str = "*"
    disturbs: list[str] = []

    # Word source
    words: list[str] = []
    word_file: str | None = None

    # Snapshot cache
    cache: bool = False
    cache_class: str = "file"
    cache_key: str | None = None
    cache_dir: str = ".sensitive_cache"
    database_url: str = "sqlite:///./sensitive.db"

    # Admin endpoints (empty token disables them)
    admin_token: str = ""

    # HTTP
    cors_origins: str = "http://localhost:3000"
    max_body_bytes: int = 10240
    filter_rate_limit: str = "60/minute"

    model_config = {"env_file": str(_ENV_FILE), "env_prefix": "SENSITIVE_", "extra": "ignore"}


settings = Settings()
