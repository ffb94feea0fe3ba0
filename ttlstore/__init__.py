from __future__ import annotations

from ttlstore.clock import Clock, SystemClock, WallClock, resolve_clock
from ttlstore.config import StoreSettings, load_settings
from ttlstore.schemas import MAX_TTL_SECONDS, EntrySpec
from ttlstore.seed import load_seed, open_store
from ttlstore.store import TTLStore
from ttlstore.sweep import sweep_expired

__all__ = [
    "__version__",
    # Store
    "TTLStore",
    "sweep_expired",
    # Clocks
    "Clock",
    "SystemClock",
    "WallClock",
    "resolve_clock",
    # Input
    "EntrySpec",
    "MAX_TTL_SECONDS",
    "load_seed",
    "open_store",
    # Config
    "StoreSettings",
    "load_settings",
]

__version__ = "0.1.0"
