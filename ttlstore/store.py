from __future__ import annotations

import logging
from bisect import bisect_left, insort
from collections.abc import Iterable
from dataclasses import dataclass

from ttlstore.clock import Clock, SystemClock
from ttlstore.schemas import MAX_TTL_SECONDS, EntrySpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    value: str
    # None means the entry never expires.
    expires_at: float | None

    def is_live(self, now: float) -> bool:
        return self.expires_at is None or now < self.expires_at


def _check_ttl(ttl: int) -> int:
    if isinstance(ttl, bool) or not isinstance(ttl, int):
        raise ValueError(f"ttl must be an integer number of seconds, got {ttl!r}")
    if not (0 <= ttl <= MAX_TTL_SECONDS):
        raise ValueError(f"ttl must be in [0, {MAX_TTL_SECONDS}], got {ttl}")
    return ttl


class TTLStore:
    """In-memory key-value store with per-entry TTL.

    Expiration is evaluated lazily: reads compare an entry's expiry against
    ``clock.now()`` and never mutate the store. Expired entries stay in place
    until ``remove`` or ``remove_one_expired_entry`` takes them out.

    A TTL of 0 means the entry never expires.
    """

    def __init__(
        self,
        entries: Iterable[tuple[str, str, int] | EntrySpec] = (),
        *,
        clock: Clock | None = None,
    ) -> None:
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._data: dict[str, _Entry] = {}
        # Kept sorted for range scans; mirrors the keys of _data.
        self._sorted_keys: list[str] = []

        for item in entries:
            key, value, ttl = item.as_triple() if isinstance(item, EntrySpec) else item
            self.set(key, value, ttl)
        logger.debug("ttl store created with %d entries", len(self._data))

    @property
    def clock(self) -> Clock:
        return self._clock

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(entries={len(self._data)})"

    def set(self, key: str, value: str, ttl: int = 0) -> None:
        ttl = _check_ttl(ttl)
        expires_at = None if ttl == 0 else self._clock.now() + ttl
        if key not in self._data:
            insort(self._sorted_keys, key)
        self._data[key] = _Entry(value=value, expires_at=expires_at)

    def remove(self, key: str) -> bool:
        if self._data.pop(key, None) is None:
            return False
        self._drop_sorted_key(key)
        return True

    def get(self, key: str, default: str | None = None) -> str | None:
        entry = self._data.get(key)
        if entry is None or not entry.is_live(self._clock.now()):
            return default
        return entry.value

    def get_many_sorted(self, start_key: str, count: int) -> list[tuple[str, str]]:
        """Return up to ``count`` live pairs in key order, starting at the first key >= ``start_key``.

        Expired entries are skipped and do not count towards ``count``.
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"count must be a non-negative integer, got {count!r}")
        if count == 0:
            return []

        now = self._clock.now()
        out: list[tuple[str, str]] = []
        for i in range(bisect_left(self._sorted_keys, start_key), len(self._sorted_keys)):
            key = self._sorted_keys[i]
            entry = self._data[key]
            if not entry.is_live(now):
                continue
            out.append((key, entry.value))
            if len(out) >= count:
                break
        return out

    def remove_one_expired_entry(self) -> tuple[str, str] | None:
        """Remove and return the first expired entry in iteration order, if any.

        Which expired entry is picked is unspecified; callers that need to
        drain everything call this repeatedly until it returns None.
        """
        now = self._clock.now()
        victim: str | None = None
        for key, entry in self._data.items():
            if not entry.is_live(now):
                victim = key
                break
        if victim is None:
            return None

        entry = self._data.pop(victim)
        self._drop_sorted_key(victim)
        logger.debug("reclaimed expired key %r", victim)
        return (victim, entry.value)

    def _drop_sorted_key(self, key: str) -> None:
        i = bisect_left(self._sorted_keys, key)
        if i < len(self._sorted_keys) and self._sorted_keys[i] == key:
            del self._sorted_keys[i]
