"""
Preparation of raw input for lottery runs.

"""

from .inputs import (
    build_lottery_inputs,
    can_run_lottery,
    claim_items,
    clean_names,
    prepare_items,
    prepare_people,
)

__all__ = [
    "build_lottery_inputs",
    "can_run_lottery",
    "claim_items",
    "clean_names",
    "prepare_items",
    "prepare_people",
]
