"""Normalized edit-distance similarity between two key names.

Similarity is defined as::

    1.0 - distance(a, b) / max(len(a), len(b))

with two empty strings scoring 1.0.  Keys are compared exactly as written;
no case or separator normalization is applied, so the score and the rename
threshold keep a direct meaning in edit operations.

The distance is Levenshtein's (unit insert/delete/substitute) extended with
the optimal-string-alignment rule that swapping two adjacent characters is a
single edit.  Without that rule the most common typo, ``"email"`` ->
``"emial"``, costs two edits and scores 0.6.  Pass ``transpositions=False``
for the classic distance.
"""

from __future__ import annotations

import numpy as np

__all__ = ["EditDistanceScorer", "edit_distance", "similarity"]


def edit_distance(a: str, b: str, *, transpositions: bool = True) -> int:
    """Compute the edit distance between two strings.

    Fills the full ``(len(a) + 1) x (len(b) + 1)`` dynamic-programming table.
    Key names are short, so no banded or rolling-row optimization is needed.

    Args:
        a: First string.
        b: Second string.
        transpositions: Count swapping two adjacent characters as one edit.

    Returns:
        The minimum number of single-character edits turning ``a`` into ``b``.
    """
    if a == b:
        return 0

    table = np.zeros((len(a) + 1, len(b) + 1), dtype=np.intp)
    table[:, 0] = np.arange(len(a) + 1)
    table[0, :] = np.arange(len(b) + 1)

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            best = min(
                table[i - 1, j] + 1,
                table[i, j - 1] + 1,
                table[i - 1, j - 1] + cost,
            )
            if (
                transpositions
                and i > 1
                and j > 1
                and a[i - 1] == b[j - 2]
                and a[i - 2] == b[j - 1]
            ):
                best = min(best, table[i - 2, j - 2] + 1)
            table[i, j] = best

    return int(table[len(a), len(b)])


def similarity(a: str, b: str, *, transpositions: bool = True) -> float:
    """Return the normalized similarity of ``a`` and ``b`` in [0.0, 1.0].

    1.0 means identical (including two empty strings); 0.0 means every
    character of the longer string had to be edited.
    """
    if not a and not b:
        return 1.0
    distance = edit_distance(a, b, transpositions=transpositions)
    return 1.0 - distance / max(len(a), len(b))


class EditDistanceScorer:
    """Default key-similarity scorer.

    Satisfies the ``SimilarityScorer`` Protocol structurally.

    Example::

        scorer = EditDistanceScorer()
        scorer.similarity("email", "emial")   # 0.8
        scorer.similarity("a", "zzzzzzzz")    # 0.0

        EditDistanceScorer(transpositions=False).similarity("email", "emial")  # 0.6
    """

    def __init__(self, transpositions: bool = True) -> None:
        self._transpositions = transpositions

    def similarity(self, a: str, b: str) -> float:
        return similarity(a, b, transpositions=self._transpositions)
