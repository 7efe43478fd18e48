"""
Item lottery engine for the fair-lottery library.

"""

from .candidates import CandidateSet, build_candidate_sets
from .enumeration import count_assignments, enumerate_assignments
from .manager import LotteryManager, run_assignment
from .models import Assignment, Item, Person, Pick
from .registry import (
    get_algorithm_functions,
    get_function,
    get_scoring_order,
    is_optimizing_algorithm,
    resolve_algorithm,
)
from .results import AssignmentResult
from .scoring import get_scoring_functions, minimize_gini, minimize_pickups

__all__ = [
    "Assignment",
    "AssignmentResult",
    "CandidateSet",
    "Item",
    "LotteryManager",
    "Person",
    "Pick",
    "build_candidate_sets",
    "count_assignments",
    "enumerate_assignments",
    "get_algorithm_functions",
    "get_function",
    "get_scoring_functions",
    "get_scoring_order",
    "is_optimizing_algorithm",
    "minimize_gini",
    "minimize_pickups",
    "resolve_algorithm",
    "run_assignment",
]
