# app/config.py
from __future__ import annotations
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional
import json
import logging

from typetrainer.app.errors import ConfigError

logger = logging.getLogger(__name__)

MODES = ("words", "sentences")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_CONFIG_FILE = Path("typetrainer.json")


@dataclass(frozen=True)
class Settings:
    words_per_block: int = 40
    max_input_length: int = 1000
    mode: str = "words"
    word_bank_file: Optional[str] = None
    log_file: str = "typetrainer.log"
    log_level: str = "WARNING"
    max_rounds: Optional[int] = None
    seed: Optional[int] = None


def _positive_int(key: str, value: Any, allow_zero: bool = False) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    if value < 0 or (value == 0 and not allow_zero):
        raise ConfigError(f"'{key}' out of range: {value}")
    return value


def validate(settings: Settings) -> Settings:
    _positive_int("words_per_block", settings.words_per_block, allow_zero=True)
    _positive_int("max_input_length", settings.max_input_length)
    if settings.mode not in MODES:
        raise ConfigError(f"'mode' must be one of {', '.join(MODES)}, got {settings.mode!r}")
    if str(settings.log_level).upper() not in LOG_LEVELS:
        raise ConfigError(f"unknown log level {settings.log_level!r}")
    if settings.max_rounds is not None:
        _positive_int("max_rounds", settings.max_rounds)
    if settings.seed is not None and (isinstance(settings.seed, bool) or not isinstance(settings.seed, int)):
        raise ConfigError(f"'seed' must be an integer, got {settings.seed!r}")
    for key in ("word_bank_file", "log_file"):
        value = getattr(settings, key)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"'{key}' must be a string, got {value!r}")
    return settings


def _settings_from_dict(d: Dict[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    unknown = set(d) - known
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
    return validate(Settings(**{k: v for k, v in d.items() if k in known}))


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings from a JSON file. A missing file means defaults."""
    path = Path(path) if path is not None else DEFAULT_CONFIG_FILE
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")
    return _settings_from_dict(data)


def with_overrides(settings: Settings, **overrides: Any) -> Settings:
    """Apply command-line values; None means 'not given'."""
    given = {k: v for k, v in overrides.items() if v is not None}
    return validate(replace(settings, **given))
