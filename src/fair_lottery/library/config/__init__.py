"""Configuration models and utilities for lottery runs."""

from fair_lottery.library.config.models import (
    DEFAULT_MAX_ASSIGNMENTS,
    LotteryConfig,
    config_from_mapping,
    load_config,
)

__all__ = [
    "DEFAULT_MAX_ASSIGNMENTS",
    "LotteryConfig",
    "config_from_mapping",
    "load_config",
]
