from __future__ import annotations

import logging
from pathlib import Path

import uvicorn

from .config import Settings, load_settings
from .index import app

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    level_map = {
        0: logging.CRITICAL + 1,
        1: logging.INFO,
        2: logging.DEBUG,
    }
    level = level_map.get(settings.log_level, logging.ERROR)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.touch()
        handler = logging.FileHandler(log_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)
    handler.setLevel(level)
    root_logger.addHandler(handler)


def main() -> None:
    settings = load_settings()
    setup_logging(settings)
    logger.info(f"Starting scholarship API on {settings.host}:{settings.port}")
    # uvicorn exits the process if the port cannot be bound
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
