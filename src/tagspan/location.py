"""Source location tracking for error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token or node in the content string.

    All positions are 1-indexed (lineno and col_offset start at 1);
    offsets are 0-indexed positions in the content buffer.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in content
        end_offset: Absolute end offset in content
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column offset (optional)
        source_file: Path or message id of the content (optional)

    Examples:
            >>> loc = SourceLocation(lineno=1, col_offset=8)
            >>> str(loc)
            '1:8'

            >>> loc = SourceLocation(1, 8, source_file="greeting")
            >>> str(loc)
            'greeting:1:8'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "greeting:1:5" or "1:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end.

        Args:
            end: Ending location

        Returns:
            New SourceLocation with this start and end's end positions
        """
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.end_lineno or end.lineno,
            end_col_offset=end.end_col_offset or end.col_offset,
            source_file=self.source_file,
        )
