"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Four tiers: 10-key flat, 100-key nested, a 200-record array whose records
carry a renamed key, and a 1000-line invalid pair for the plain-text
fallback.  Each tier is handed to ``compare()`` as raw JSON text.
"""

from __future__ import annotations

import json
from typing import Any

import pytest


def _dump(left: Any, right: Any) -> tuple[str, str]:
    return json.dumps(left, indent=2), json.dumps(right, indent=2)


def _make_flat(num_keys: int) -> tuple[str, str]:
    """Generate a flat pair where every third value differs."""
    left = {f"field_{i}": f"value_{i}" for i in range(num_keys)}
    right = {
        f"field_{i}": f"value_{i}" if i % 3 else f"other_{i}" for i in range(num_keys)
    }
    return _dump(left, right)


def _make_nested_100() -> tuple[str, str]:
    """Generate a 100-key nested pair.

    Structure: 10 sections x 9 leaf keys, plus the section keys.  The right
    side renames one leaf per section and appends to a list.
    """
    left: dict[str, Any] = {}
    right: dict[str, Any] = {}
    for i in range(10):
        sub_l: dict[str, Any] = {f"field_{i}_{j}": j for j in range(8)}
        sub_r: dict[str, Any] = {f"field_{i}_{j}": j for j in range(8)}
        sub_l["address"] = {"city": f"city_{i}", "zip": i}
        sub_r["adress"] = {"city": f"city_{i}", "zip": i + 1}
        sub_l["tags"] = ["a", "b"]
        sub_r["tags"] = ["a", "b", "c"]
        left[f"section_{i}"] = sub_l
        right[f"section_{i}"] = sub_r
    return _dump(left, right)


def _make_records(num_records: int) -> tuple[str, str]:
    """Generate an array of records; every record renames email -> emial.

    The same key pair is scored in every record, which is what the score
    cache is for.
    """
    left = [
        {"id": i, "email": f"user{i}@example.com", "active": True}
        for i in range(num_records)
    ]
    right = [
        {"id": i, "emial": f"user{i}@example.com", "active": i % 2 == 0}
        for i in range(num_records)
    ]
    return _dump(left, right)


def _make_invalid_lines(num_lines: int) -> tuple[str, str]:
    """Generate a pair of invalid texts differing on every tenth line."""
    left = "\n".join(f"line {i}," for i in range(num_lines))
    right = "\n".join(
        f"line {i}," if i % 10 else f"line {i}!" for i in range(num_lines)
    )
    return "{" + left, "{" + right


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10key() -> tuple[str, str]:
    """10-key flat pair."""
    return _make_flat(10)


@pytest.fixture
def pair_100key() -> tuple[str, str]:
    """100-key nested pair with renames and array growth."""
    return _make_nested_100()


@pytest.fixture
def pair_records() -> tuple[str, str]:
    """200-record array pair with a rename in every record."""
    return _make_records(200)


@pytest.fixture
def pair_invalid() -> tuple[str, str]:
    """1000-line invalid pair for the plain-text fallback."""
    return _make_invalid_lines(1000)
