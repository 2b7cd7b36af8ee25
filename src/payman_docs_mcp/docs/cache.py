"""In-memory document cache with per-entry expiration."""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..config import DEFAULT_CACHE_TTL


@dataclass(frozen=True)
class CacheEntry:
	"""A fetched document body and the time it was fetched."""
	content: str
	fetched_at: float


class DocumentCache:
	"""
	Maps document paths to fetched bodies.

	Freshness is re-checked on every lookup against ``clock``; stale entries
	stay in place until overwritten by the next successful fetch.

	Usage:
		cache = DocumentCache(ttl=3600)
		cache.put("/overview/quickstart", body, cache.now())
		cache.get("/overview/quickstart")
	"""

	def __init__(
		self,
		ttl: float = DEFAULT_CACHE_TTL,
		clock: Callable[[], float] = time.monotonic,
	):
		self.ttl = ttl
		self._clock = clock
		self._entries: dict[str, CacheEntry] = {}

	def now(self) -> float:
		return self._clock()

	def is_fresh(self, entry: CacheEntry) -> bool:
		return self.now() - entry.fetched_at < self.ttl

	def get(self, path: str) -> Optional[str]:
		"""Return cached content for ``path``, or None if missing or stale."""
		entry = self._entries.get(path)
		if entry is None or not self.is_fresh(entry):
			return None
		return entry.content

	def put(self, path: str, content: str, timestamp: float) -> None:
		"""Store ``content`` for ``path``, replacing any existing entry."""
		self._entries[path] = CacheEntry(content=content, fetched_at=timestamp)

	def fresh_count(self) -> int:
		return sum(1 for entry in self._entries.values() if self.is_fresh(entry))

	def __len__(self) -> int:
		return len(self._entries)

	def __contains__(self, path: object) -> bool:
		return path in self._entries
