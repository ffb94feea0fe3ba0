from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ttlstore.clock import Clock, resolve_clock
from ttlstore.config import StoreSettings, load_settings
from ttlstore.schemas import EntrySpec
from ttlstore.store import TTLStore

logger = logging.getLogger(__name__)


def _build_entry(key: Any, value: Any, ttl: Any) -> EntrySpec:
    if key is None:
        raise ValueError("seed entry key is required")
    if value is None:
        raise ValueError(f"seed entry {key!r} needs a value")
    return EntrySpec(key=str(key), value=str(value), ttl=ttl)


def _parse_entry(raw: Any) -> EntrySpec:
    if isinstance(raw, dict):
        return _build_entry(raw.get("key"), raw.get("value"), raw.get("ttl"))
    if isinstance(raw, list):
        if len(raw) not in (2, 3):
            raise ValueError("seed list entries must be [key, value] or [key, value, ttl]")
        return _build_entry(raw[0], raw[1], raw[2] if len(raw) == 3 else 0)
    raise ValueError("seed entries must be mappings or lists")


def load_seed(path: Path) -> list[EntrySpec]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return []
    if isinstance(data, dict):
        if "entries" not in data:
            raise ValueError("seed mapping needs an 'entries' list")
        data = data["entries"]
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError("seed mapping needs an 'entries' list")
    if not isinstance(data, list):
        raise ValueError("seed must be a YAML list or a mapping with an 'entries' list")

    entries = [_parse_entry(raw) for raw in data]
    logger.debug("loaded %d seed entries from %s", len(entries), path)
    return entries


def open_store(*, settings: StoreSettings | None = None, clock: Clock | None = None) -> TTLStore:
    settings = settings or load_settings()
    if clock is None:
        clock = resolve_clock(settings.clock)
    entries = load_seed(settings.seed_path) if settings.seed_path is not None else []
    return TTLStore(entries, clock=clock)
