from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any


@dataclass(frozen=True)
class StatementConfig:
    currency_symbol: str = "$"
    minor_unit_factor: int = 100
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.minor_unit_factor <= 0:
            raise ValueError("minor_unit_factor must be positive")


_ENV_PREFIX = "THEATER_"


def _to_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _to_level(value: Any, default: str) -> str:
    name = str(value).strip().upper() if value is not None else ""
    return name if name in logging.getLevelNamesMapping() else default


def load_config() -> StatementConfig:
    """Настройки по умолчанию, переопределённые переменными THEATER_*"""
    defaults = StatementConfig()
    return StatementConfig(
        currency_symbol=os.getenv(f"{_ENV_PREFIX}CURRENCY_SYMBOL", defaults.currency_symbol),
        minor_unit_factor=_to_int(
            os.getenv(f"{_ENV_PREFIX}MINOR_UNIT_FACTOR"), defaults.minor_unit_factor
        ),
        log_level=_to_level(os.getenv(f"{_ENV_PREFIX}LOG_LEVEL"), defaults.log_level),
    )


@lru_cache(maxsize=1)
def get_config() -> StatementConfig:
    return load_config()


def refresh_config() -> StatementConfig:
    get_config.cache_clear()
    return get_config()
