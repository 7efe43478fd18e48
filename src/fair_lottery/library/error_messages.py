"""
Error message templates for lottery runs.

Messages follow WHAT/CAUSE/FIX structure.
"""

from __future__ import annotations

from difflib import get_close_matches

ERROR_MESSAGES = {
    "empty_name": """
Empty {record_type} name at position {position}.

WHAT HAPPENED:
  A {record_type} was passed to the lottery with a blank name.

LIKELY CAUSE:
  Raw form input was passed straight to the engine without filtering.

HOW TO FIX:
  Clean the input before running the lottery:
  >>> from fair_lottery.library.preprocessing import build_lottery_inputs
  >>> items, people = build_lottery_inputs(raw)
""",
    "duplicate_names": """
Duplicate {record_type} names found.

WHAT HAPPENED:
  Each {record_type} must have a unique name within a run.
  Duplicates: {duplicates}

LIKELY CAUSE:
  The same {record_type} was entered twice, or names differ only in
  surrounding whitespace.

HOW TO FIX:
  Remove the duplicates, or let the input preparation helpers do it:
  >>> from fair_lottery.library.preprocessing import prepare_people
  >>> names = prepare_people(names)
""",
    "unknown_algorithm": """
Algorithm '{algorithm}' not recognized.

WHAT HAPPENED:
  The requested assignment algorithm is not registered.

LIKELY CAUSE:
  Possible typo in the algorithm name.

HOW TO FIX:
  {suggestion}

  Valid algorithms:
  - 'uniform-random-per-item': each item goes to a random interested person
  - 'fairness-only': spread items as evenly as possible (lowest Gini)
  - 'consolidation-then-fairness': fewest distinct winners, then lowest Gini
""",
    "unknown_scoring_function": """
Scoring function '{name}' not recognized.

WHAT HAPPENED:
  The requested scoring function is not registered.

LIKELY CAUSE:
  Possible typo in the scoring function name.

HOW TO FIX:
  {suggestion}
""",
    "enumeration_limit_exceeded": """
Too many possible assignments to search ({n_assignments:,}).

WHAT HAPPENED:
  The optimizing algorithms look at every feasible assignment.
  This run has {n_assignments:,} of them, above the limit of {max_assignments:,}.

LIKELY CAUSE:
  Many items have several interested people; the number of assignments is
  the product of the number of interested people per item.

HOW TO FIX:
  1. Use the 'uniform-random-per-item' algorithm, which does not enumerate
  2. Or reduce the number of items or interests per item
  3. Or raise the bound:
     >>> manager = LotteryManager(LotteryConfig(max_assignments={n_assignments}))
""",
    "negative_values": """
Negative values found in {dataset_name}.

WHAT HAPPENED:
  The Gini coefficient is only defined for non-negative values.
  Found {count} negative value(s).

LIKELY CAUSE:
  Values were computed as differences rather than counts.

HOW TO FIX:
  Pass per-person counts, including zeros for people who received nothing.
""",
}


def format_error(key: str, **kwargs) -> str:
    """
    Format an error message with the given parameters.

    Parameters
    ----------
    key
        The error message key from ERROR_MESSAGES
    **kwargs
        Parameters to format into the message template

    Returns
    -------
    str
        The formatted error message
    """
    template = ERROR_MESSAGES.get(key)
    if template is None:
        return f"Unknown error: {key}"
    return template.format(**kwargs).strip()


def suggest_similar(
    value: str, valid_options: list[str], max_suggestions: int = 3
) -> str:
    """
    Suggest similar valid options for typos.

    Parameters
    ----------
    value
        The invalid value that was provided
    valid_options
        List of valid options to match against
    max_suggestions
        Maximum number of suggestions to return (default: 3)

    Returns
    -------
    str
        A formatted suggestion message
    """
    matches = get_close_matches(value, valid_options, n=max_suggestions, cutoff=0.6)
    if matches:
        return f"Did you mean: {', '.join(matches)}?"
    return f"Valid options: {', '.join(valid_options)}"
