# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from contact_desk.config import Settings


def test_defaults_when_env_is_empty(monkeypatch) -> None:
    for key in (
        "DESK_PAGE_SIZE",
        "DESK_SEARCH_DEBOUNCE_MS",
        "DESK_FAILURE_RATE",
        "DESK_LATENCY_SCALE",
        "DESK_SEED_CONTACTS",
        "DESK_RANDOM_SEED",
        "DESK_DATA_DIR",
    ):
        monkeypatch.delenv(key, raising=False)

    s = Settings.from_env()

    assert s.page_size == 10
    assert s.search_debounce_ms == 300
    assert s.failure_rate == 0.10
    assert s.latency_scale == 1.0
    assert s.seed_contacts == 10000
    assert s.random_seed is None
    assert s.data_dir == Path(".local/contact_desk")


def test_overrides_and_invalid_values(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("DESK_PAGE_SIZE", "25")
    monkeypatch.setenv("DESK_SEARCH_DEBOUNCE_MS", "oops")
    monkeypatch.setenv("DESK_FAILURE_RATE", "3")
    monkeypatch.setenv("DESK_LATENCY_SCALE", "0")
    monkeypatch.setenv("DESK_RANDOM_SEED", "7")
    monkeypatch.setenv("DESK_DATA_DIR", str(tmp_path))

    s = Settings.from_env()

    assert s.page_size == 25
    assert s.search_debounce_ms == 300
    assert s.failure_rate == 1.0
    assert s.latency_scale == 0.0
    assert s.random_seed == 7
    assert s.data_dir == tmp_path
