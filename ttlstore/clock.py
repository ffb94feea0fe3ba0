from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Read-only time source the store evaluates expirations against.

    ``now()`` returns seconds in a domain that is consistent across calls and
    never goes backwards. The store only reads it; advancing it is the
    embedder's business.
    """

    def now(self) -> float: ...


class SystemClock:
    def now(self) -> float:
        return time.monotonic()


class WallClock:
    def now(self) -> float:
        return time.time()


_CLOCKS: dict[str, Callable[[], Clock]] = {
    "monotonic": SystemClock,
    "wall": WallClock,
}


def resolve_clock(name: str) -> Clock:
    key = (name or "").strip().lower()
    cls = _CLOCKS.get(key)
    if cls is None:
        raise ValueError(f"unknown clock: {name!r} (expected one of {sorted(_CLOCKS)})")
    return cls()
