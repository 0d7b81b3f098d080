"""
Pytest configuration and fixtures for arbor tests.
"""

from typing import Any

import pytest

from arbor.tree import Tree


@pytest.fixture
def company_records() -> list[dict[str, Any]]:
    """Flat records for a small company hierarchy.

    - 1 Microsoft
      - 5 Google
        - 6 IBM
    - 3 Adobe
    - 4 Apple
    """
    return [
        {"id": 1, "parent": 0, "data": "Microsoft"},
        {"id": 3, "parent": 0, "data": "Adobe"},
        {"id": 4, "parent": 0, "data": "Apple"},
        {"id": 5, "parent": 1, "data": "Google"},
        {"id": 6, "parent": 5, "data": "IBM"},
    ]


@pytest.fixture
def company_tree(company_records: list[dict[str, Any]]) -> Tree:
    """Tree built from ``company_records`` with the default root id."""
    return Tree(company_records)


@pytest.fixture
def wide_tree() -> Tree:
    """Tree with two branches, used for sibling and ordering checks.

    - a
      - a1
      - a2
        - a2x
      - a3
    - b
      - b1
    """
    return Tree(
        [
            {"id": "a", "parent": None},
            {"id": "a1", "parent": "a"},
            {"id": "b", "parent": None},
            {"id": "a2", "parent": "a"},
            {"id": "b1", "parent": "b"},
            {"id": "a3", "parent": "a"},
            {"id": "a2x", "parent": "a2"},
        ],
        root_id="root",
    )
