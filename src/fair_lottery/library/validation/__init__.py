"""
Validation for the fair-lottery library.

"""

from .inputs import validate_lottery_inputs, validate_names
from .outputs import validate_assignment, validate_unique_picks

__all__ = [
    # Input validation
    "validate_lottery_inputs",
    "validate_names",
    # Output validation
    "validate_assignment",
    "validate_unique_picks",
]
