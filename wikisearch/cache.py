# wikisearch/cache.py: keeps built indexes around between queries.
# An index is reused until the fingerprint of the corpus files changes.

import threading
from collections import OrderedDict

from wikisearch.paths import CACHE_CAPACITY


class IndexCache:
    """
    Fingerprint -> Index cache shared by request handlers.

    get_or_build(fingerprint, build) returns the cached Index for an
    unchanged corpus and calls build() otherwise. Builds run under the lock
    so two concurrent misses don't build the same corpus twice. Past
    `capacity` fingerprints the least recently used index is dropped.
    """

    def __init__(self, capacity=CACHE_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._indexes = OrderedDict()  # fingerprint -> Index, oldest use first
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get_or_build(self, fingerprint, build):
        with self._lock:
            if fingerprint in self._indexes:
                self._indexes.move_to_end(fingerprint)
                self.hits += 1
                return self._indexes[fingerprint]
            self.misses += 1
            # a failing build raises before anything is cached
            index = build()
            if len(self._indexes) >= self.capacity:
                stale, _ = self._indexes.popitem(last=False)
                print(f"[Cache] Evicted index {stale[:10]}")
            self._indexes[fingerprint] = index
            print(f"[Cache] Stored index {fingerprint[:10]} ({len(self._indexes)}/{self.capacity})")
            return index

    def clear(self):
        with self._lock:
            self._indexes.clear()

    def __contains__(self, fingerprint):
        return fingerprint in self._indexes

    def __len__(self):
        return len(self._indexes)
