"""
Utility functions for the fair-lottery library.

"""

from fair_lottery.library.utils.functions import filter_function_parameters
from fair_lottery.library.utils.math import fairness_score, gini_coefficient

__all__ = ["fairness_score", "filter_function_parameters", "gini_coefficient"]
