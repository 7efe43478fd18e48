"""
Common fixtures for pytest unit and integration tests for the fair-lottery library.

"""

from __future__ import annotations

import numpy as np
import pytest

from fair_lottery.library.lottery import Item, Person

# Seed shared by tests that need reproducible draws
STANDARD_SEED = 20240601


def make_people(interests: dict[str, list[str]]) -> list[Person]:
    """Build people from a name -> interested items mapping."""
    return [Person(name, frozenset(items)) for name, items in interests.items()]


@pytest.fixture
def rng():
    """Seeded random source."""
    return np.random.default_rng(STANDARD_SEED)


@pytest.fixture
def mixed_items():
    """
    Three items: A wanted by three people, B claimed by P1, C wanted by nobody.
    """
    return [Item("A"), Item("B", mandatory_assignee="P1"), Item("C")]


@pytest.fixture
def mixed_people():
    """People for ``mixed_items``; P2 also wants B, which P1 has claimed."""
    return make_people({"P1": ["A"], "P2": ["A", "B"], "P3": ["A"]})


@pytest.fixture
def consolidation_items():
    """X wanted only by P1, Y wanted by P1 and P2."""
    return [Item("X"), Item("Y")]


@pytest.fixture
def consolidation_people():
    """People for ``consolidation_items``."""
    return make_people({"P1": ["X", "Y"], "P2": ["Y"]})


@pytest.fixture
def lottery_yaml(tmp_path):
    """A lottery file mixing person-side and item-side interest."""
    p = tmp_path / "lottery.yaml"
    p.write_text(
        """\
lottery:
  algorithm: fairness-only
  seed: 7
people:
  - name: Ann
    interests: [Lamp]
  - Bob
  - ""
  - Ann
items:
  - Lamp
  - name: Rug
    people: [Bob, Zoe]
  - name: Chair
    mandatory_assignee: Ann
  - name: Vase
    mandatory_assignee: Zoe
  - ""
""",
        encoding="utf-8",
    )
    return p
