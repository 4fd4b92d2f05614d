"""Rename matcher: greedy pairing of removed and added keys of one object.

Given the keys an object has only on the left and only on the right, builds
the left x right similarity matrix and walks the left keys in order.  Each
left key takes the unclaimed right key with the highest score (the first
such key on ties) when that score reaches the threshold; the right key is
then claimed and unavailable to later left keys.

The assignment is greedy and depends on left-key order.  It is not an
optimal bipartite matching: documents are small, and first-match-wins keeps
the result predictable for a reader looking at the rendered panes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from json_pane_diff.protocols import SimilarityScorer

__all__ = ["RenameMatch", "match_renames"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RenameMatch:
    """Outcome of one object's rename matching.

    Attributes:
        mapping: Left-only key -> right-only key for each accepted rename,
            in left-key order.
        unmatched_left: Left-only keys left as removals.
        unmatched_right: Right-only keys left as additions.
    """

    mapping: dict[str, str]
    unmatched_left: tuple[str, ...]
    unmatched_right: tuple[str, ...]


def match_renames(
    left_only: Sequence[str],
    right_only: Sequence[str],
    scorer: SimilarityScorer,
    threshold: float = 0.70,
) -> RenameMatch:
    """Pair left-only keys with similarly named right-only keys.

    Args:
        left_only: Keys present only in the left object, in document order.
        right_only: Keys present only in the right object, in document order.
        scorer: Key-name similarity scorer.
        threshold: Minimum score for a pair to count as a rename.

    Returns:
        A ``RenameMatch``.  An empty mapping is a normal outcome.
    """
    left_keys = list(left_only)
    right_keys = list(right_only)
    if not left_keys or not right_keys:
        return RenameMatch({}, tuple(left_keys), tuple(right_keys))

    scores = np.empty((len(left_keys), len(right_keys)), dtype=float)
    for i, lk in enumerate(left_keys):
        for j, rk in enumerate(right_keys):
            scores[i, j] = scorer.similarity(lk, rk)

    claimed = np.zeros(len(right_keys), dtype=bool)
    mapping: dict[str, str] = {}

    for i, lk in enumerate(left_keys):
        if claimed.all():
            break
        row = np.where(claimed, -np.inf, scores[i])
        best = int(np.argmax(row))  # argmax returns the first maximum
        if row[best] >= threshold:
            mapping[lk] = right_keys[best]
            claimed[best] = True
            logger.debug(
                "Key %r matched as rename of %r (score %.3f)",
                right_keys[best],
                lk,
                row[best],
            )

    return RenameMatch(
        mapping=mapping,
        unmatched_left=tuple(k for k in left_keys if k not in mapping),
        unmatched_right=tuple(
            k for j, k in enumerate(right_keys) if not claimed[j]
        ),
    )
