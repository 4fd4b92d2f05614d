"""Result dataclasses returned by compare() and format_documents().

This module provides the rich result types handed back to the presentation
layer, which renders ``left_lines``/``right_lines`` verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from json_pane_diff.algorithm.changes import ChangeRecord
from json_pane_diff.render.records import LineClass, LineRecord

__all__ = ["ComparisonMode", "ComparisonResult", "FormatResult", "ParseErrors"]


class ComparisonMode(StrEnum):
    """How a comparison was carried out.

    - STRUCTURAL: both sides parsed; tree diff with path-tagged lines.
    - PLAIN_TEXT: at least one side failed to parse; positional line diff.
    """

    STRUCTURAL = auto()
    PLAIN_TEXT = auto()


@dataclass(frozen=True, slots=True)
class ParseErrors:
    """Parse failure messages per side; None where the side parsed."""

    left: str | None = None
    right: str | None = None

    def __bool__(self) -> bool:
        return self.left is not None or self.right is not None

    def describe(self) -> str:
        """Join the present messages for display, left first.

        Example: ``"Left JSON: Expecting value: line 1 column 1 (char 0)"``.
        """
        parts = []
        if self.left is not None:
            parts.append(f"Left JSON: {self.left}")
        if self.right is not None:
            parts.append(f"Right JSON: {self.right}")
        return " | ".join(parts)


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Rich result of a compare() call.

    Attributes:
        mode: STRUCTURAL when both documents parsed, PLAIN_TEXT otherwise.
        changes: Ordered change records.  Always empty in PLAIN_TEXT mode.
        left_lines: Display lines of the left pane.
        right_lines: Display lines of the right pane.
        parse_errors: Parse failure messages; empty in STRUCTURAL mode.
        computation_time_ms: Wall-clock duration of the comparison in
            milliseconds.
    """

    mode: ComparisonMode
    changes: tuple[ChangeRecord, ...]
    left_lines: tuple[LineRecord, ...]
    right_lines: tuple[LineRecord, ...]
    parse_errors: ParseErrors
    computation_time_ms: float

    @property
    def has_differences(self) -> bool:
        """True when any change was found or any line is highlighted."""
        if self.changes:
            return True
        return any(
            line.classification != LineClass.NONE
            for line in (*self.left_lines, *self.right_lines)
        )

    @property
    def error_text(self) -> str:
        """Both sides' parse errors joined for display; "" when none."""
        return self.parse_errors.describe()


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Result of a format_documents() call.

    Attributes:
        left: Pretty-printed left text, or the input unchanged if it did not
            parse.
        right: Same for the right text.
        parse_errors: Messages for the sides that did not parse.
    """

    left: str
    right: str
    parse_errors: ParseErrors
