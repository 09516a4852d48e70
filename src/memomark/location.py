"""Source location tracking for blocks and view descriptors.

Every block remembers which raw source lines produced it. The zero-based
line index is what interaction handlers (checklist toggles) send back.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source line range of a block.

    Line numbers are 1-indexed like editor gutters; ``line_index`` gives
    the 0-based form used by the checklist side channel.

    Attributes:
        lineno: First source line (1-indexed)
        col_offset: Column where block content starts (1-indexed)
        end_lineno: Last source line for multi-line blocks (optional)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=1)
            >>> loc.line_index
            2
            >>> str(SourceLocation(1, 1, source_file="memo.md"))
            'memo.md:1:1'

    """

    lineno: int
    col_offset: int = 1
    end_lineno: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "memo.md:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def line_index(self) -> int:
        """Zero-based index of the first source line."""
        return self.lineno - 1

    @property
    def end_line_index(self) -> int:
        """Zero-based index of the last source line."""
        return (self.end_lineno or self.lineno) - 1

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end.

        Args:
            end: Ending location

        Returns:
            New SourceLocation with this start and end's last line
        """
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            end_lineno=end.end_lineno or end.lineno,
            source_file=self.source_file,
        )

    @classmethod
    def for_line(cls, line_index: int, *, source_file: str | None = None) -> SourceLocation:
        """Create the location of a single zero-based source line."""
        return cls(lineno=line_index + 1, source_file=source_file)

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Use for nodes created synthetically or when location is unavailable.
        """
        return cls(lineno=0, col_offset=0)
