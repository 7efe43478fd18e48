"""
Run a lottery from a YAML file.

"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as SettingsValidationError

from fair_lottery.library.config import LotteryConfig, config_from_mapping
from fair_lottery.library.exceptions import ConfigurationError, FairLotteryError
from fair_lottery.library.lottery import AssignmentResult, LotteryManager
from fair_lottery.library.preprocessing import build_lottery_inputs

logger = logging.getLogger(__name__)


def load_lottery_file(path: Path | str) -> dict[str, Any]:
    """
    Read a lottery description from YAML.

    The file holds ``people`` and ``items`` lists and, optionally, a
    ``lottery`` section with the run settings::

        lottery:
          algorithm: fairness-only
          seed: 7
        people:
          - name: Ann
            interests: [Lamp]
          - Bob
        items:
          - Lamp
          - name: Rug
            people: [Bob]
          - name: Chair
            mandatory_assignee: Ann

    Raises
    ------
    ConfigurationError
        If the file does not exist or does not hold a mapping
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Lottery file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Lottery file {path} must contain a mapping with 'people' and 'items', "
            f"got {type(data).__name__}."
        )
    return data


def run_lottery(
    input_path: Path | str,
    config: LotteryConfig | None = None,
    **overrides: Any,
) -> AssignmentResult:
    """
    Run a lottery described by a YAML file.

    Parameters
    ----------
    input_path : Path | str
        YAML file with people, items and optional ``lottery`` settings
    config : LotteryConfig, optional
        Settings to use instead of the ones in the file
    **overrides : Any
        Individual settings (``algorithm``, ``seed``, ``max_assignments``)
        that take precedence over ``config``; None values are ignored

    Returns
    -------
    AssignmentResult
        The outcome of the run
    """
    data = load_lottery_file(input_path)
    if config is None:
        config = config_from_mapping({"lottery": data.get("lottery") or {}})

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        config = LotteryConfig(**{**config.model_dump(), **overrides})

    items, people = build_lottery_inputs(data)
    logger.debug("Loaded %d item(s) and %d people from %s", len(items), len(people), input_path)
    return LotteryManager(config).run_assignment(items, people)


def format_results(result: AssignmentResult) -> str:
    """Render the picks as an Item/Winner table."""
    if not len(result):
        return "No items could be assigned."
    table = result.to_dataframe().rename(columns={"item": "Item", "assignee": "Winner"})
    return table.to_string(index=False)


def main() -> None:
    """
    Command-line interface for running a lottery.

    Usage
    -----
    From command line::

        fair-lottery --input lottery.yaml
        fair-lottery --input lottery.yaml --algorithm fairness-only --seed 7
        fair-lottery --input lottery.yaml --config settings.yaml --verbose
    """
    import argparse

    from fair_lottery.library.config import load_config
    from fair_lottery.library.lottery import get_algorithm_functions

    parser = argparse.ArgumentParser(
        description="Assign items to interested people by lottery"
    )
    parser.add_argument("--input", required=True, help="Lottery YAML file")
    parser.add_argument(
        "--algorithm",
        help=f"Algorithm to use ({', '.join(get_algorithm_functions())})",
    )
    parser.add_argument("--seed", type=int, help="Seed for reproducible draws")
    parser.add_argument(
        "--max-assignments",
        type=int,
        help="Largest search space the optimizing algorithms may enumerate",
    )
    parser.add_argument("--config", help="Settings YAML file (overrides --input's)")
    parser.add_argument(
        "--verbose", action="store_true", help="Log the search in detail"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else None
        result = run_lottery(
            args.input,
            config=config,
            algorithm=args.algorithm,
            seed=args.seed,
            max_assignments=args.max_assignments,
        )
    except (FairLotteryError, SettingsValidationError) as e:
        sep_line = "=" * 80
        print(f"\n{sep_line}", file=sys.stderr)
        print("LOTTERY FAILED", file=sys.stderr)
        print(sep_line, file=sys.stderr)
        print(f"\nInput: {args.input}", file=sys.stderr)
        print("\nError Details:", file=sys.stderr)
        print(str(e), file=sys.stderr)
        print(f"\n{sep_line}", file=sys.stderr)
        sys.exit(1)

    print(format_results(result))
    if result.infeasible_items:
        print(f"\nNot assigned: {', '.join(result.infeasible_items)}")


if __name__ == "__main__":
    main()
