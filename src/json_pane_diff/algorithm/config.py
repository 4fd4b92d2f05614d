"""DiffConfig: immutable parameters for structural differencing and rendering."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DiffConfig"]


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for a comparison.

    Attributes:
        rename_threshold: Minimum key-name similarity in (0, 1] for a removed
            key and an added key of the same object to be reported as one
            rename.  Default 0.70.
        detect_renames: When False, every key present on one side only is
            reported as a plain removal or addition.  Default True.
        indent: Spaces per nesting level in rendered and formatted output.
            Must be >= 1.  Default 2.
    """

    rename_threshold: float = 0.70
    detect_renames: bool = True
    indent: int = 2

    def __post_init__(self) -> None:
        if not 0.0 < self.rename_threshold <= 1.0:
            msg = f"rename_threshold must be in (0, 1], got {self.rename_threshold}"
            raise ValueError(msg)
        if self.indent < 1:
            msg = f"indent must be >= 1, got {self.indent}"
            raise ValueError(msg)
