from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _parse_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    raw = raw.strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if value <= 0:
        return default
    return value


def shared_templates_dir(root_dir: Path) -> Path:
    env_path = os.getenv("SPARKY_SHARED_TEMPLATES")
    if env_path:
        return Path(env_path)
    return root_dir / "universe" / "templates"


def server_host() -> str:
    return os.getenv("SPARKY_HOST", "").strip() or "0.0.0.0"


def server_port() -> int:
    return _parse_int(os.getenv("SPARKY_PORT"), 8080)


def stats_max_items() -> int:
    return _parse_int(os.getenv("SPARKY_STATS_MAX_ITEMS"), 10000)


def log_level() -> int:
    name = os.getenv("SPARKY_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.INFO


def configure_logging(level: int | None = None) -> None:
    logging.basicConfig(level=level if level is not None else log_level(), format=LOG_FORMAT)
    logging.getLogger("multipart").setLevel(logging.WARNING)
