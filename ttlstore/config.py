from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


def env_file() -> Path | None:
    """Locate the dotenv file holding TTLSTORE_* settings.

    TTLSTORE_ENV_FILE wins when set; otherwise the nearest `.env` above the
    working directory is used, if there is one.
    """
    explicit = (os.getenv("TTLSTORE_ENV_FILE") or "").strip()
    if explicit:
        path = Path(explicit).expanduser()
        if not path.is_file():
            raise ValueError(f"TTLSTORE_ENV_FILE does not exist: {explicit}")
        return path
    found = find_dotenv(usecwd=True)
    return Path(found) if found else None


def load_env() -> None:
    path = env_file()
    if path is not None:
        # Variables already in the process environment are not overridden.
        load_dotenv(path, override=False)


@dataclass(frozen=True)
class StoreSettings:
    clock: str = "monotonic"
    seed_path: Path | None = None


def load_settings() -> StoreSettings:
    load_env()
    seed_raw = (os.getenv("TTLSTORE_SEED_PATH") or "").strip()
    return StoreSettings(
        clock=(os.getenv("TTLSTORE_CLOCK") or "monotonic").strip().lower(),
        seed_path=Path(seed_raw).expanduser() if seed_raw else None,
    )
