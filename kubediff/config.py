"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from kubediff.models.config import KubeDiffConfig, LogConfig
from kubediff.observability.logging import setup_logging
from kubediff.selector.parser import set_cache_size


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"KUBEDIFF_{key}", default)


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    raw = _env(key, str(default))
    try:
        val = int(raw)
    except ValueError:
        raise ValueError(f"Invalid integer for KUBEDIFF_{key}: {raw!r}") from None
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_log_format(value: str) -> str:
    valid = {"json", "console"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log format: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> KubeDiffConfig:
    """Load configuration from KUBEDIFF_* environment variables."""
    return KubeDiffConfig(
        selector_cache_size=_env_int("SELECTOR_CACHE_SIZE", 256, min_val=0, max_val=4096),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
            format=_validate_log_format(_env("LOG_FORMAT", "json")),
        ),
    )


def configure(config: KubeDiffConfig | None = None) -> KubeDiffConfig:
    """Apply *config* (or the environment's) to logging and the selector cache."""
    config = config or load_config()
    setup_logging(config.log.level, fmt=config.log.format)
    set_cache_size(config.selector_cache_size)
    return config
