import asyncio
import hashlib
import re
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from config import logger
from models import AnalysisResult

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class CacheEntry:
    content_hash: str
    input_type: str
    result: AnalysisResult
    expires_at: float


class AnalysisCache:
    """Expiring results keyed by a hash of (input type, normalised content)."""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = asyncio.Lock()

    @staticmethod
    def content_hash(input_type: str, content: str) -> str:
        normalized = _WHITESPACE.sub(" ", content.strip())
        return hashlib.sha256(f"{input_type}:{normalized}".encode("utf-8")).hexdigest()

    async def get(self, input_type: str, content: str) -> Optional[AnalysisResult]:
        key = self.content_hash(input_type, content)
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._entries[key]
                return None
            return entry.result

    async def put(self, input_type: str, content: str, result: AnalysisResult) -> CacheEntry:
        key = self.content_hash(input_type, content)
        now = self._clock()
        entry = CacheEntry(
            content_hash=key,
            input_type=input_type,
            result=result,
            expires_at=now + self.ttl_seconds,
        )
        async with self._lock:
            purged = self._drop_expired(now)
            self._entries[key] = entry
        if purged:
            logger.info("Purged %d expired analysis cache entries", purged)
        return entry

    async def purge_expired(self) -> int:
        async with self._lock:
            purged = self._drop_expired(self._clock())
        if purged:
            logger.info("Purged %d expired analysis cache entries", purged)
        return purged

    def _drop_expired(self, now: float) -> int:
        """Remove entries expired at now. Caller holds the lock."""
        expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)
