"""
Exceptions that are used throughout the fair-lottery library.

"""

from __future__ import annotations


class FairLotteryError(Exception):
    """Base exception for fair-lottery library."""

    pass


class ConfigurationError(FairLotteryError):
    """Raised when configuration is invalid or missing."""

    pass


class ValidationError(FairLotteryError):
    """Base exception for validation errors."""

    pass


class InputValidationError(ValidationError):
    """
    Raised when input validation fails.

    Input validation covers the item and person records handed to the engine:
    names must be non-empty and unique within a run.
    """

    pass


class AssignmentError(FairLotteryError):
    """Raised when an assignment run cannot be completed."""

    pass


class EnumerationLimitError(AssignmentError):
    """
    Raised when the number of feasible assignments exceeds the configured bound.

    The check happens before enumeration starts, so no work is wasted on a run
    that would be refused anyway.
    """

    def __init__(self, message: str, n_assignments: int, max_assignments: int):
        super().__init__(message)
        self.n_assignments = n_assignments
        self.max_assignments = max_assignments


class InternalConsistencyError(FairLotteryError):
    """
    Raised when the engine breaks one of its own contracts.

    These errors indicate a bug in the library rather than bad input and
    are not meant to be recovered from.
    """

    pass


class UnknownAssigneeError(InternalConsistencyError):
    """Raised when a scored assignment names someone who is not in the run."""

    def __init__(self, assignee: str):
        super().__init__(
            f"Unknown assignee '{assignee}' found while scoring an assignment. "
            "Every assignee must be drawn from the people taking part in the run."
        )
        self.assignee = assignee
