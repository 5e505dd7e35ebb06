"""Lookup cache owned by a string resolver."""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Optional

from uistrings.i18n.models import Entry
from uistrings.logging import get_module_logger

logger = get_module_logger()


@dataclass(frozen=True)
class CachedLookup:
    """Memoized result of a default-option lookup.

    Attributes:
        namespace: Namespace the entry was found in (None for no match).
        value: The matched entry, or the raw key for no match.
        is_literal_fallback: True when nothing matched and the raw key
            should be returned as-is.
        language: Code of the language the entry was found in.
    """

    namespace: Optional[str]
    value: Entry
    is_literal_fallback: bool = False
    language: Optional[str] = None


class LookupCache:
    """In-memory mapping of raw string ids to cached lookups.

    Entries never expire; the whole cache is invalidated with clear().
    When max_size is set the oldest entry is evicted first.

    Not thread-safe: share an instance across threads only under the host
    application's own locking.

    Attributes:
        max_size: Maximum number of entries, or None for unbounded.
    """

    def __init__(self, max_size: Optional[int] = None):
        if max_size is not None and max_size < 1:
            raise ValueError("max_size must be a positive integer")
        self.max_size = max_size
        self._entries: "OrderedDict[str, CachedLookup]" = OrderedDict()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[CachedLookup]:
        """Get the cached lookup for a raw key.

        Returns:
            CachedLookup or None if the key is not cached.
        """
        cached = self._entries.get(key)
        if cached is None:
            self._misses += 1
        else:
            self._hits += 1
        return cached

    def set(self, key: str, lookup: CachedLookup) -> None:
        """Cache a lookup for a raw key."""
        self._entries[key] = lookup
        if self.max_size is not None:
            while len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("evicted_cached_lookup", key=evicted)

    def clear(self) -> None:
        """Clear all cached entries."""
        count = len(self._entries)
        self._entries.clear()
        logger.debug("cleared_lookup_cache", entry_count=count)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with size, max_size, hits and misses.
        """
        return {
            "size": len(self._entries),
            "max_size": self.max_size,
            "hits": self._hits,
            "misses": self._misses,
        }

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
