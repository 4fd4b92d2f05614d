"""Document parser: raw text to JsonNode tree, or a displayable failure.

Parsing never raises for text input.  Failures come back as a
``ParseOutcome`` whose ``error`` holds the decoder's own message, because
that message is shown to the end user as-is.

Two kinds of grammatical JSON are still refused as PARSE_ERROR:

- Documents nested deeper than ``MAX_DEPTH`` containers.  The differ and the
  renderer recurse once per level, and the limit keeps them well inside the
  interpreter's recursion limit.
- Numbers that overflow a float, such as ``1e400``.  Python decodes them to
  ``inf``, which has no JSON spelling, so the document could be neither
  rendered nor formatted back to JSON.  Both sides fall back to the
  plain-text line comparison instead.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_pane_diff.tree.builder import TreeBuilder
from json_pane_diff.tree.nodes import JsonNode

__all__ = [
    "DEPTH_EXCEEDED_MESSAGE",
    "EMPTY_INPUT_MESSAGE",
    "MAX_DEPTH",
    "ParseFailureKind",
    "ParseOutcome",
    "parse_document",
]

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "JSON is empty."
DEPTH_EXCEEDED_MESSAGE = "Maximum nesting depth exceeded"

MAX_DEPTH = 128

_builder = TreeBuilder()


class ParseFailureKind(StrEnum):
    """Why a document could not be parsed.

    - EMPTY_INPUT: the text is empty or whitespace only.
    - PARSE_ERROR: the text is not valid JSON, or is nested too deeply.
    """

    EMPTY_INPUT = auto()
    PARSE_ERROR = auto()


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Result of ``parse_document``.

    Exactly one of ``node`` and ``error`` is set.

    Attributes:
        node:          The parsed tree on success.
        error:         Human-readable failure message.
        failure_kind:  Failure category; None on success.
    """

    node: JsonNode | None = None
    error: str | None = None
    failure_kind: ParseFailureKind | None = None

    @property
    def ok(self) -> bool:
        return self.node is not None


def _reject_constant(name: str) -> float:
    # Python's decoder accepts NaN/Infinity by default; strict JSON does not.
    raise ValueError(f"Invalid JSON constant: {name}")


def _nesting_depth(value: Any) -> int:
    """Number of containers on the deepest path; 0 for a scalar."""
    deepest = 0
    stack = [(value, 1)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, dict):
            children = current.values()
        elif isinstance(current, list):
            children = current
        else:
            continue
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in children)
    return deepest


def _too_deep() -> ParseOutcome:
    return ParseOutcome(
        error=DEPTH_EXCEEDED_MESSAGE, failure_kind=ParseFailureKind.PARSE_ERROR
    )


def parse_document(text: str) -> ParseOutcome:
    """Parse ``text`` as a JSON document.

    Args:
        text: Raw document text.

    Returns:
        A ``ParseOutcome`` holding either the JsonNode tree or the failure.
    """
    if not text.strip():
        return ParseOutcome(
            error=EMPTY_INPUT_MESSAGE, failure_kind=ParseFailureKind.EMPTY_INPUT
        )

    try:
        value = json.loads(text, parse_constant=_reject_constant)
        if _nesting_depth(value) > MAX_DEPTH:
            logger.debug("Document nesting exceeds %d levels", MAX_DEPTH)
            return _too_deep()
        node = _builder.build(value)
    except ValueError as exc:  # JSONDecodeError, rejected constants, overflow
        logger.debug("Document is not valid JSON: %s", exc)
        return ParseOutcome(error=str(exc), failure_kind=ParseFailureKind.PARSE_ERROR)
    except RecursionError:
        logger.debug("Document nesting exceeds the decoder's recursion limit")
        return _too_deep()

    return ParseOutcome(node=node)
