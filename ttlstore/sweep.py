from __future__ import annotations

import logging

from ttlstore.store import TTLStore

logger = logging.getLogger(__name__)


def sweep_expired(store: TTLStore, *, limit: int | None = None) -> list[tuple[str, str]]:
    """Reclaim expired entries one at a time until none remain or ``limit`` is hit.

    Runs synchronously in the caller; nothing here schedules itself.
    """
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 0):
        raise ValueError(f"limit must be None or a non-negative integer, got {limit!r}")

    reclaimed: list[tuple[str, str]] = []
    while limit is None or len(reclaimed) < limit:
        pair = store.remove_one_expired_entry()
        if pair is None:
            break
        reclaimed.append(pair)

    logger.debug("sweep reclaimed %d expired entries (%d left)", len(reclaimed), len(store))
    return reclaimed
