"""In-memory, content-addressed cache of validation results."""

import logging
import string
import threading
import time
from typing import Callable

from models.responses import ValidationResult

logger = logging.getLogger(__name__)

HASH_PREFIX_CHARS = 100
_BASE36 = string.digits + string.ascii_lowercase


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return sign + "".join(reversed(digits))


def content_hash(text: str) -> str:
    """Cheap non-cryptographic fingerprint of the first 100 characters.

    Folds UTF-16 code units through ``h = (h << 5) - h + unit`` with 32-bit
    signed wraparound and renders the result in base 36. Collisions are
    possible; the key trades quality for speed.
    """
    units = text.encode("utf-16-le")[: HASH_PREFIX_CHARS * 2]
    h = 0
    for i in range(0, len(units), 2):
        code = units[i] | (units[i + 1] << 8)
        h = _to_int32((h << 5) - h + code)
    return _base36(h)


def cache_key(resume_text: str, job_description: str) -> str:
    return content_hash(resume_text) + content_hash(job_description)


class CacheEntry:
    __slots__ = ("result", "stored_at")

    def __init__(self, result: ValidationResult, stored_at: float):
        self.result = result
        self.stored_at = stored_at


class ValidationCache:
    """TTL cache guarded by a single lock.

    Stale entries are treated as misses on read and removed by
    ``evict_expired``, which the validator calls after every fresh run.
    """

    def __init__(self, ttl_seconds: float = 3600.0, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def _expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.stored_at >= self.ttl_seconds

    def get(self, resume_text: str, job_description: str) -> ValidationResult | None:
        key = cache_key(resume_text, job_description)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._expired(entry, self._clock()):
                logger.debug("Cache entry %s expired", key)
                return None
            return entry.result

    def put(self, resume_text: str, job_description: str, result: ValidationResult) -> None:
        key = cache_key(resume_text, job_description)
        with self._lock:
            self._entries[key] = CacheEntry(result, self._clock())

    def evict_expired(self) -> int:
        with self._lock:
            now = self._clock()
            stale = [k for k, entry in self._entries.items() if self._expired(entry, now)]
            for key in stale:
                del self._entries[key]
        if stale:
            logger.debug("Evicted %d expired cache entries", len(stale))
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
