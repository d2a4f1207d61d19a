import os
from dataclasses import dataclass
from functools import lru_cache

from labelverify.errors import ConfigError

_TRUTHY = {"1", "true", "yes", "y", "on"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_json: bool
    # Longest extracted text the HTTP surface accepts.
    max_text_length: int


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def load_settings() -> Settings:
    level = os.getenv("LABELVERIFY_LOG_LEVEL", "INFO").upper().strip()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"LABELVERIFY_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {level!r}")

    json_raw = os.getenv("LABELVERIFY_LOG_JSON", "false").lower().strip()

    return Settings(
        log_level=level,
        log_json=json_raw in _TRUTHY,
        max_text_length=_get_int("LABELVERIFY_MAX_TEXT_LENGTH", 20000),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
