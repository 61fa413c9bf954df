"""Extract text from resolved spans.

Two views are offered:

- extract_text: what is visible, in order
- semantics_text: what assistive technology reads, in order; a span's
  semantics label replaces its visible text

Example:
    >>> spans = resolve_spans('<b>Next</b> <span aria-label="and then">></span>')
    >>> extract_text(spans)
    'Next >'
    >>> semantics_text(spans)
    'Next and then'
"""

from collections.abc import Iterable

from tagspan.spans import InlineSpan


def extract_text(spans: Iterable[InlineSpan]) -> str:
    """Concatenate the visible text of spans."""
    return "".join(span.plain_text for span in spans)


def semantics_text(spans: Iterable[InlineSpan]) -> str:
    """Concatenate the reading-order text of spans."""
    return "".join(span.reading_text for span in spans)


__all__ = ["extract_text", "semantics_text"]
