"""On-disk cache for index pages and cover images."""

from .cache_store import CacheStore

__all__ = ["CacheStore"]
