"""Pydantic models for lottery configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
import yaml
from pydantic import BaseModel, Field, field_validator

from fair_lottery.library.exceptions import ConfigurationError

DEFAULT_MAX_ASSIGNMENTS = 1_000_000


class LotteryConfig(BaseModel):
    """Settings for a lottery run."""

    algorithm: str = Field(
        "uniform-random-per-item",
        description="Algorithm identifier or alias (normalised to its canonical id)",
    )
    seed: int | None = Field(
        None, ge=0, description="Seed for the random source (None draws fresh entropy)"
    )
    max_assignments: int | None = Field(
        DEFAULT_MAX_ASSIGNMENTS,
        gt=0,
        description="Largest search space the optimizing algorithms may enumerate",
    )

    model_config = {"extra": "forbid"}

    @field_validator("algorithm")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        """Validate the algorithm against the registry."""
        # Imported here: the registry pulls in the lottery package, which needs this module
        from fair_lottery.library.lottery.registry import resolve_algorithm

        return resolve_algorithm(v)

    def make_rng(self) -> np.random.Generator:
        """Random source for one run."""
        return np.random.default_rng(self.seed)


def load_config(path: Path | str) -> LotteryConfig:
    """
    Load a lottery configuration from a YAML file.

    The settings may sit at the top level of the file or under a
    ``lottery:`` section, so the same file can also hold the people and items.

    Raises
    ------
    ConfigurationError
        If the file does not exist or does not hold a mapping
    pydantic.ValidationError
        If a setting has an invalid value or a ``lottery`` section has an
        unknown key
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Lottery config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Lottery config file {path} must contain a mapping, "
            f"got {type(data).__name__}."
        )
    return config_from_mapping(data)


def config_from_mapping(data: dict[str, Any]) -> LotteryConfig:
    """
    Build a config from a mapping.

    A ``lottery`` section is used as-is, so unknown keys in it are rejected.
    Without one, the recognised settings are picked from the top level.
    """
    if "lottery" in data:
        section = data["lottery"] or {}
        if not isinstance(section, dict):
            raise ConfigurationError(
                f"'lottery' section must be a mapping, got {type(section).__name__}."
            )
        return LotteryConfig(**section)

    return LotteryConfig(
        **{k: v for k, v in data.items() if k in LotteryConfig.model_fields}
    )
