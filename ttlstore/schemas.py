from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Construction input carries TTLs as unsigned 32-bit seconds.
MAX_TTL_SECONDS = 2**32 - 1


class EntrySpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    value: str
    ttl: int = Field(default=0, ge=0, le=MAX_TTL_SECONDS)

    @field_validator("ttl", mode="before")
    @classmethod
    def _coerce_ttl(cls, v: Any) -> Any:
        if v is None:
            return 0
        if isinstance(v, bool):
            raise ValueError("ttl must be an integer number of seconds")
        if isinstance(v, float):
            if not math.isfinite(v) or not v.is_integer():
                raise ValueError("ttl must be a whole number of seconds")
            return int(v)
        if isinstance(v, str):
            s = v.strip()
            if not s.lstrip("-").isdigit():
                raise ValueError("ttl must be an integer number of seconds")
            return int(s)
        return v

    def as_triple(self) -> tuple[str, str, int]:
        return (self.key, self.value, self.ttl)
