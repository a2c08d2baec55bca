"""Optional memoization in front of the analysis entry points."""

import hashlib
import logging
import threading
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Any

logger = logging.getLogger(__name__)


class MemoCache(ABC):
    """Key/value store used to memoize analysis results."""

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the cached value, or None when absent."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store a value under key."""


class InMemoryCache(MemoCache):
    """Bounded LRU cache held in process memory."""

    def __init__(self, max_entries: int = 256):
        self.max_entries = max_entries
        self._entries: OrderedDict[str, Any] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Any | None:
        with self._lock:
            if key not in self._entries:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return self._entries[key]

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted cache entry {evicted}")

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def compute_hash(content: str) -> str:
    """SHA256 hash of content."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def make_cache_key(operation: str, texts: list[str], **params: Any) -> str:
    """Key derived from the operation, the input texts and the parameters."""
    params_part = ",".join(f"{k}={params[k]!r}" for k in sorted(params))
    return f"{operation}_{compute_hash(chr(0).join(texts))}_{compute_hash(params_part)[:16]}"
