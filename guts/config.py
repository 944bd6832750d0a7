from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Settings:
    """Process-wide protocol settings loaded from environment, framework-free."""

    borrow_checks: bool
    log_level: str

    @staticmethod
    def from_env() -> Settings:
        prefix = "GUTS_"
        raw_checks = os.getenv(f"{prefix}BORROW_CHECKS", "1").strip().lower()
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "WARNING").strip() or "WARNING"
        return Settings(
            borrow_checks=raw_checks not in _FALSE_VALUES,
            log_level=log_level.upper(),
        )


@lru_cache
def get_settings() -> Settings:
    """Settings for this process; call ``get_settings.cache_clear()`` to reload."""
    return Settings.from_env()
