"""Token and TokenType definitions for the tagspan lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a type, value, and source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Most tokens never have their location read unless an error is reported.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tagspan.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    EOF = auto()

    # Character data
    TEXT = auto()  # Text run with entities decoded
    CDATA = auto()  # <![CDATA[...]]>

    # Elements
    START_TAG = auto()  # <name attr="v">
    END_TAG = auto()  # </name>
    EMPTY_TAG = auto()  # <name/>

    # Recognized and discarded by the parser
    COMMENT = auto()  # <!-- ... -->
    PROCESSING_INSTRUCTION = auto()  # <? ... ?>
    DECLARATION = auto()  # <!DOCTYPE ...>


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Decoded text for TEXT/CDATA, inner text for comments,
            the raw markup for tags
        name: Tag name as written (tags only)
        attributes: (name, value) pairs in source order (tags only)
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _end_lineno: End line number
        _end_col: End column offset
        _source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    name: str = ""
    attributes: tuple[tuple[str, str], ...] = ()
    _end_lineno: int | None = None
    _end_col: int | None = None
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from tagspan.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col
