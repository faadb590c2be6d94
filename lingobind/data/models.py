"""
lingobind/data/models.py
────────────────────────
Pydantic v2 models for cache entries, diagnostics and engine options.
"""

from pydantic import BaseModel, Field

MS_PER_HOUR = 3600 * 1000


class CacheEntry(BaseModel):
    payload: dict
    created_at: int = Field(ge=0)  # epoch milliseconds
    url: str
    ttl_hours: float = Field(gt=0)

    def is_expired(self, now_ms: int) -> bool:
        return now_ms - self.created_at > self.ttl_hours * MS_PER_HOUR


class CacheInfo(BaseModel):
    created_at: int
    ttl_hours: float
    is_expired: bool


class I18nStats(BaseModel):
    element_count: int = 0
    languages: list[str] = Field(default_factory=list)
    total_keys: int = 0
    current_language: str
    default_language: str


class InitOptions(BaseModel):
    default_language: str | None = None
    remote_url: str | None = None
    cache_ttl_hours: float | None = Field(default=None, gt=0)
