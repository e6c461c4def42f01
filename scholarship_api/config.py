"""
Environment-driven settings for the scholarship service.

Values come from the process environment, optionally populated from a
``.env`` file in the project root.  Invalid numeric values are logged and
replaced with their defaults instead of aborting startup.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

_ENV_PATH = Path(__file__).parent.parent / ".env"


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: int = 0
    log_file: Optional[str] = None
    seed_scholarships: bool = True


def _read_int(name: str, default: int, minimum: int, maximum: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid {name} value: {raw}. Error: {e}. Using default: {default}")
        return default
    if value < minimum or value > maximum:
        logger.warning(
            f"{name} value {value} is outside [{minimum}, {maximum}]. Using default: {default}"
        )
        return default
    return value


def _read_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_settings() -> Settings:
    if _ENV_PATH.exists():
        load_dotenv(_ENV_PATH, encoding="utf-8-sig")

    raw_level = os.getenv("LOG_LEVEL", "0")
    try:
        log_level = int(raw_level)
    except ValueError:
        log_level = 0

    return Settings(
        host=os.getenv("HOST", DEFAULT_HOST),
        port=_read_int("PORT", DEFAULT_PORT, 1, 65535),
        log_level=log_level,
        log_file=os.getenv("LOG_FILE") or None,
        seed_scholarships=_read_bool("SEED_SCHOLARSHIPS", True),
    )
