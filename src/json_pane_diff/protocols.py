"""SimilarityScorer Protocol: the extension point for key-rename scoring.

Defines the structural interface every key-similarity scorer must satisfy.
Users can plug in custom scorers without inheriting from any base class;
any class with a conformant ``similarity`` method passes ``isinstance``
checks.

Example::

    from json_pane_diff.protocols import SimilarityScorer

    class CaseInsensitiveScorer:
        def similarity(self, a: str, b: str) -> float:
            return 1.0 if a.lower() == b.lower() else 0.0

    assert isinstance(CaseInsensitiveScorer(), SimilarityScorer)  # True
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SimilarityScorer(Protocol):
    """Structural protocol for key-similarity scorers.

    The ``similarity`` method must:
    - Return a float in [0.0, 1.0], 1.0 meaning identical names.
    - Be pure: the same pair always yields the same score.  The comparator
      memoizes scores per instance and relies on this.
    """

    def similarity(self, a: str, b: str) -> float: ...
