from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Defaults
DEFAULT_SYMBOL_TABLE_SIZE = 100
DEFAULT_SYMBOL_TABLE_SCALE = 2
DEFAULT_MAX_ERROR = 1000
DEFAULT_MAX_DEPTH = 200
DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int, minimum: int = 1) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", var, raw, default)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%d: must be >= %d, using %d", var, value, minimum, default)
        return default
    return value


@dataclass
class Settings:
    """Tunable limits of an interpreter instance."""

    symbol_table_size: int = DEFAULT_SYMBOL_TABLE_SIZE
    symbol_table_scale: int = DEFAULT_SYMBOL_TABLE_SCALE
    max_error: int = DEFAULT_MAX_ERROR
    max_depth: int = DEFAULT_MAX_DEPTH
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            symbol_table_size=int_from_env("PICO_SYMBOL_TABLE_SIZE", DEFAULT_SYMBOL_TABLE_SIZE),
            symbol_table_scale=int_from_env("PICO_SYMBOL_TABLE_SCALE", DEFAULT_SYMBOL_TABLE_SCALE, minimum=2),
            max_error=int_from_env("PICO_MAX_ERROR", DEFAULT_MAX_ERROR),
            max_depth=int_from_env("PICO_MAX_DEPTH", DEFAULT_MAX_DEPTH),
            log_level=os.environ.get("PICO_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
