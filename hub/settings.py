from __future__ import annotations

import os
from pathlib import Path
from typing import Any

DEFAULT_MAX_INPUT_CHARS = 10_000
DEFAULT_BASE = 10


def _flag(name: str, default: str = "off") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value in {"1", "true", "yes", "on"}


def _parse_int(raw: str | None, default: int | None) -> int | None:
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
        return None
    return value


def log_level() -> str:
    return os.getenv("RADIX_HUB_LOG_LEVEL", "INFO").strip().upper() or "INFO"


def log_json() -> bool:
    return _flag("RADIX_HUB_LOG_JSON", "on")


def max_input_chars() -> int | None:
    return _parse_int(os.getenv("RADIX_HUB_MAX_INPUT_CHARS"), DEFAULT_MAX_INPUT_CHARS)


def default_base(minimum: int, maximum: int) -> int:
    value = _parse_int(os.getenv("RADIX_HUB_DEFAULT_BASE"), DEFAULT_BASE)
    if value is None:
        return DEFAULT_BASE
    return min(max(value, minimum), maximum)


def shared_templates_dir(root_dir: Path) -> Path:
    env_path = os.getenv("RADIX_HUB_SHARED_TEMPLATES")
    if env_path:
        return Path(env_path)
    return root_dir / "hub" / "templates"


def configure_templates(templates: Any) -> None:
    templates.env.auto_reload = True
    templates.env.cache = {}
    templates.env.trim_blocks = True
    templates.env.lstrip_blocks = True
