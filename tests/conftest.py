from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

START = 1000.0


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@dataclass
class ManualClock:
    """Clock that only moves when a test moves it."""

    current: float = START

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds

    def at(self, offset: float) -> None:
        self.current = START + offset


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock()
