# src/contact_desk/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every knob has a working default, so the app runs with no environment at all.
- Invalid numeric values fall back to the default instead of crashing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "DESK"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Contact list view ----
    page_size: int
    search_debounce_ms: int

    # ---- Simulated backend ----
    failure_rate: float
    latency_scale: float
    seed_contacts: int
    random_seed: int | None

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "contact-desk") or "contact-desk"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/contact_desk"))

        page_size = max(1, _env_int(_k("PAGE_SIZE"), 10))
        search_debounce_ms = max(0, _env_int(_k("SEARCH_DEBOUNCE_MS"), 300))

        # Probability, clamped into [0, 1].
        failure_rate = min(1.0, max(0.0, _env_float(_k("FAILURE_RATE"), 0.10)))
        latency_scale = max(0.0, _env_float(_k("LATENCY_SCALE"), 1.0))
        seed_contacts = max(0, _env_int(_k("SEED_CONTACTS"), 10000))
        random_seed = _env_optional_int(_k("RANDOM_SEED"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            page_size=page_size,
            search_debounce_ms=search_debounce_ms,
            failure_rate=failure_rate,
            latency_scale=latency_scale,
            seed_contacts=seed_contacts,
            random_seed=random_seed,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
