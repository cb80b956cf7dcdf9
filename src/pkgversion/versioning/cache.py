"""Thread-safe cache of resolved versions keyed by namespace path."""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from ..constants import Constants
from .models import Version


class VersionCache:
    """Lock-striped namespace -> Version map.

    Keys are spread over a fixed number of stripes, each a plain dict guarded
    by its own lock, so lookups for unrelated namespaces rarely contend.
    Entries are never evicted; ``clear`` exists for test isolation and must not
    run while other threads are resolving.
    """

    def __init__(self, stripes: Optional[int] = None):
        """Initialize the cache.

        Args:
            stripes: Number of lock stripes. Defaults to ``Constants.CACHE_STRIPES``.
        """
        count = stripes if stripes is not None else Constants.CACHE_STRIPES
        if count < 1:
            raise ValueError(f"stripes must be positive, got {count}")
        self._locks: List[threading.Lock] = [threading.Lock() for _ in range(count)]
        self._maps: List[Dict[str, Version]] = [{} for _ in range(count)]

    def _stripe(self, namespace: str) -> int:
        return hash(namespace) % len(self._locks)

    def get(self, namespace: str) -> Optional[Version]:
        """Return the cached version for ``namespace`` or None."""
        i = self._stripe(namespace)
        with self._locks[i]:
            return self._maps[i].get(namespace)

    def put_if_absent(self, namespace: str, version: Version) -> Version:
        """Store ``version`` unless the namespace is already cached.

        Returns:
            The value now cached for ``namespace``: ``version`` if it was
            stored, otherwise the value a concurrent resolution stored first.
        """
        i = self._stripe(namespace)
        with self._locks[i]:
            return self._maps[i].setdefault(namespace, version)

    def clear(self) -> None:
        """Remove every entry."""
        for lock, stripe in zip(self._locks, self._maps):
            with lock:
                stripe.clear()

    def __contains__(self, namespace: object) -> bool:
        if not isinstance(namespace, str):
            return False
        return self.get(namespace) is not None

    def __len__(self) -> int:
        total = 0
        for lock, stripe in zip(self._locks, self._maps):
            with lock:
                total += len(stripe)
        return total

    @property
    def stripes(self) -> int:
        return len(self._locks)
