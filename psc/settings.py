from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_FILE = "Permissions.PSC"


def _env_str(name: str, default: str) -> str:
    return (os.getenv(name, "") or "").strip() or default


def _env_log_level(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip().upper()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    # Source document
    config_file: str
    encoding: str

    # Logging
    log_level: int


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """
    Load CLI settings from env.

    Recommended vars:
    - PSC_FILE=Permissions.PSC
    - PSC_ENCODING=utf-8
    - PSC_LOG_LEVEL=WARNING
    """
    return Settings(
        config_file=_env_str("PSC_FILE", DEFAULT_FILE),
        encoding=_env_str("PSC_ENCODING", "utf-8"),
        log_level=_env_log_level("PSC_LOG_LEVEL", logging.WARNING),
    )
