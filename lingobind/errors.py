"""
lingobind/errors.py
───────────────────
Exception hierarchy.

A missing translation is never an error: lookups fall back to the key.
Only programmer mistakes (bad keys) and remote-load failures reach callers;
storage problems are recovered inside the cache layer.
"""
from __future__ import annotations


class LingobindError(Exception):
    """Base class for every error raised by this package."""


class InvalidKeyError(LingobindError, TypeError):
    """A translation key was ``None`` or not a string."""

    def __init__(self, key: object):
        super().__init__(f"Translation key must be a string, got {type(key).__name__}")
        self.key = key


class HttpFailureError(LingobindError):
    """The remote endpoint answered with a non-success status."""

    def __init__(self, url: str, status_code: int, reason: str):
        super().__init__(f"Failed to download translations: {status_code} {reason}")
        self.url = url
        self.status_code = status_code
        self.reason = reason


class InvalidPayloadError(LingobindError, ValueError):
    """A remote document parsed as JSON but its top level is not an object."""

    def __init__(self, url: str, payload: object):
        super().__init__(
            f"Expected a JSON object of languages from {url}, got {type(payload).__name__}"
        )
        self.url = url


class InvalidTtlError(LingobindError, ValueError):
    """A cache lifetime was zero or negative."""

    def __init__(self, ttl_hours: float):
        super().__init__(f"Cache TTL must be a positive number of hours, got {ttl_hours}")
        self.ttl_hours = ttl_hours


class StorageError(LingobindError):
    """The durable key/value medium could not be read or written."""
