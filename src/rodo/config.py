# src/rodo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a sensible default; nothing is required.
- Paths resolve to a per-user data directory unless overridden.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "RODO"
DB_FILE_NAME = "rodo.sqlite"
LOG_FILE_NAME = "rodo.log"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def default_data_dir() -> Path:
    """Per-user data directory: $XDG_DATA_HOME/rodo, else ~/.local/share/rodo."""
    xdg = os.getenv("XDG_DATA_HOME")
    if xdg and xdg.strip():
        return Path(xdg).expanduser() / "rodo"
    return Path.home() / ".local" / "share" / "rodo"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Output ----
    color: bool

    # ---- Local data paths ----
    data_dir: Path
    db_path: Path
    log_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "rodo")
        # Console level only; the log file always gets DEBUG.
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        color = _env_bool(_k("COLOR"), "NO_COLOR" not in os.environ)

        data_dir = _env_path(_k("DATA_DIR"), default_data_dir())
        db_path = _env_path(_k("DB_PATH"), data_dir / DB_FILE_NAME)
        log_path = _env_path(_k("LOG_PATH"), data_dir / LOG_FILE_NAME)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            color=color,
            data_dir=data_dir,
            db_path=db_path,
            log_path=log_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def database_file_path(settings: Settings | None = None) -> Path:
    """Path of the SQLite file; its parent directory is created if missing."""
    settings = settings or get_settings()
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)
    return settings.db_path
