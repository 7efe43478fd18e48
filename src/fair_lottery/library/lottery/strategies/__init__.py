"""
Strategies for turning candidate sets into a single assignment.

"""

from __future__ import annotations

from .optimizing import optimizing_assignment
from .random_per_item import random_assignment

__all__ = [
    "optimizing_assignment",
    "random_assignment",
]
