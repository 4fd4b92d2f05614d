"""ScoreCache: LRU-backed caching proxy for any SimilarityScorer.

Wraps any SimilarityScorer-conformant object and memoizes key-pair scores in
memory.  Documents built from arrays of similar records repeat the same
left-only/right-only key pairs in every element, so each pair is scored
once per comparator.  LRU eviction occurs silently when ``max_size`` is
exceeded.

Each ``ScoreCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state.

Example::

    from json_pane_diff.algorithm.similarity import EditDistanceScorer
    from json_pane_diff.cache import ScoreCache

    cache = ScoreCache(EditDistanceScorer(), max_size=512)
    cache.similarity("email", "emial")   # computed
    cache.similarity("email", "emial")   # served from memory
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from json_pane_diff.protocols import SimilarityScorer


class ScoreCache:
    """LRU-backed caching proxy around any SimilarityScorer.

    Satisfies the ``SimilarityScorer`` Protocol structurally.

    Args:
        scorer: Any object with a ``similarity(a, b) -> float`` method.
        max_size: Maximum number of key pairs held in memory.  Defaults
            to 512.
    """

    def __init__(self, scorer: SimilarityScorer, max_size: int = 512) -> None:
        self._scorer: Any = scorer
        self._cache: LRUCache[tuple[str, str], float] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def similarity(self, a: str, b: str) -> float:
        """Return the wrapped scorer's similarity, computing each pair once."""
        pair = (a, b)
        score = self._cache.get(pair)
        if score is None:
            score = float(self._scorer.similarity(a, b))
            self._cache[pair] = score
        return score
