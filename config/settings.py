"""
config/settings.py
──────────────────
Engine configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Languages
    DEFAULT_LANG: str = os.getenv("DEFAULT_LANG", "es")

    # Remote cache
    CACHE_TTL_HOURS: float = float(os.getenv("CACHE_TTL_HOURS", "24"))
    CACHE_STORAGE_KEY: str = os.getenv("CACHE_STORAGE_KEY", "i18n_cache_storage")

    # Durable storage (SQLite path, ":memory:" for a process-local store)
    STORAGE_PATH: str = os.getenv("STORAGE_PATH", "lingobind_cache.db")

    # Markup attribute contract
    KEY_ATTRIBUTE: str = os.getenv("KEY_ATTRIBUTE", "data-i18n-key")
    LANG_ATTRIBUTE: str = os.getenv("LANG_ATTRIBUTE", "data-i18n-lang")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


settings = Settings()
