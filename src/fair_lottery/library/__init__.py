"""
Main components for the fair-lottery library.

Nothing is exported from this module, users should import from specific submodules:
- fair_lottery.library.lottery (data model, strategies, algorithm registry, manager)
- fair_lottery.library.preprocessing (cleaning raw input)
- fair_lottery.library.utils (fairness metrics)
- fair_lottery.library.validation (validation functions)
"""

from __future__ import annotations
