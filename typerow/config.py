from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

log = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).resolve().parent / "typerow.config.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def sys_platform() -> str:
    # os.uname exists on Unix only
    try:
        return os.uname().sysname.lower()
    except AttributeError:
        return os.name.lower()


def default_data_dir() -> Path:
    """
    Per-user directory for the log file:
    - macOS: ~/Library/Application Support/typerow
    - Linux: $XDG_DATA_HOME/typerow or ~/.local/share/typerow
    """
    home = Path.home()
    if sys_platform() == "darwin":
        return home / "Library" / "Application Support" / "typerow"
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / "typerow"
    return home / ".local" / "share" / "typerow"


def load_config(path: Optional[Path] = None) -> Dict[str, object]:
    path = CONFIG_PATH if path is None else Path(path)
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        log.warning("ignoring config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        log.warning("ignoring config %s: expected a JSON object", path)
        return {}
    return data


def _positive_int(config: Dict[str, object], key: str, default: int) -> int:
    value = config.get(key, default)
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        log.warning("config %s=%r is not a number, using %d", key, value, default)
        return default
    if number <= 0:
        log.warning("config %s=%r must be positive, using %d", key, value, default)
        return default
    return number


@dataclass
class Settings:
    duration_sec: int = 60
    row_char_budget: int = 60
    tick_ms: int = 50
    words_file: Optional[Path] = None
    log_level: str = "WARNING"

    @classmethod
    def from_config(cls, config: Dict[str, object]) -> "Settings":
        defaults = cls()
        words_file = config.get("words_file")
        level = str(config.get("log_level", defaults.log_level)).upper()
        if level not in LOG_LEVELS:
            log.warning("config log_level=%r is unknown, using %s", level, defaults.log_level)
            level = defaults.log_level
        return cls(
            duration_sec=_positive_int(config, "duration_sec", defaults.duration_sec),
            row_char_budget=_positive_int(config, "row_char_budget", defaults.row_char_budget),
            tick_ms=_positive_int(config, "tick_ms", defaults.tick_ms),
            words_file=Path(str(words_file)).expanduser() if words_file else None,
            log_level=level,
        )
