from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from ttlstore import EntrySpec, StoreSettings, TTLStore, WallClock, load_seed, open_store


class TestEntrySpec:
    def test_defaults_to_no_expiry(self) -> None:
        assert EntrySpec(key="k", value="v").as_triple() == ("k", "v", 0)

    def test_coerces_integral_inputs(self) -> None:
        assert EntrySpec(key="k", value="v", ttl="30").ttl == 30
        assert EntrySpec(key="k", value="v", ttl=30.0).ttl == 30
        assert EntrySpec(key="k", value="v", ttl=None).ttl == 0

    @pytest.mark.parametrize("ttl", [-1, "-1", 1.5, True, "soon", 2**32])
    def test_rejects_bad_ttl(self, ttl) -> None:
        with pytest.raises(ValidationError):
            EntrySpec(key="k", value="v", ttl=ttl)


def test_load_seed_mapping_and_list_forms(tmp_path: Path) -> None:
    path = tmp_path / "seed.yaml"
    path.write_text(
        "entries:\n"
        "  - {key: a, value: '1', ttl: 5}\n"
        "  - [b, '2', 100]\n"
        "  - [c, '3']\n"
        "  - {key: 7, value: 8}\n",
        encoding="utf-8",
    )
    entries = load_seed(path)
    assert [e.as_triple() for e in entries] == [
        ("a", "1", 5),
        ("b", "2", 100),
        ("c", "3", 0),
        ("7", "8", 0),
    ]


def test_load_seed_top_level_list(tmp_path: Path) -> None:
    path = tmp_path / "seed.yaml"
    path.write_text("- [x, y, 0]\n", encoding="utf-8")
    assert [e.as_triple() for e in load_seed(path)] == [("x", "y", 0)]


def test_load_seed_empty_document(tmp_path: Path) -> None:
    path = tmp_path / "seed.yaml"
    path.write_text("", encoding="utf-8")
    assert load_seed(path) == []


def test_load_seed_empty_entries_list(tmp_path: Path) -> None:
    path = tmp_path / "seed.yaml"
    path.write_text("entries:\n", encoding="utf-8")
    assert load_seed(path) == []


@pytest.mark.parametrize(
    "text",
    [
        "just a string\n",
        "- [only-key]\n",
        "- [a, b, 1, extra]\n",
        "- {key: a}\n",
        "- 42\n",
        "- [a, b, -3]\n",
        "entry:\n  - [a, '1', 5]\n",
        "entries: {}\n",
        "entries: [a, b]\n",
        "{foo: bar}\n",
        "- {key: null, value: x}\n",
        "- {key: a, value: null}\n",
        "- [~, x]\n",
    ],
)
def test_load_seed_rejects_malformed(tmp_path: Path, text: str) -> None:
    path = tmp_path / "seed.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ValueError):
        load_seed(path)


def test_open_store_applies_seed(tmp_path: Path, clock) -> None:
    path = tmp_path / "seed.yaml"
    path.write_text("- [a, '1', 5]\n- [b, '2', 100]\n- [a, '3', 0]\n", encoding="utf-8")
    store = open_store(settings=StoreSettings(seed_path=path), clock=clock)
    assert isinstance(store, TTLStore)
    clock.advance(6)
    assert store.get("a") == "3"
    assert store.get("b") == "2"


def test_open_store_resolves_configured_clock() -> None:
    store = open_store(settings=StoreSettings(clock="wall"))
    assert isinstance(store.clock, WallClock)
    assert len(store) == 0
