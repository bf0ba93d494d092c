"""Source snippet cleanup and length capping."""

from __future__ import annotations

import re

# Appended whenever cap_text shortens its input
ELLIPSIS = "..."

# Cut at a space only if it lies past this fraction of the budget
WORD_BOUNDARY_RATIO = 0.8

_BLANK_RUN = re.compile(r"\n{3,}")


def sanitize_source(raw: str) -> str:
    """Normalize whitespace in a raw source snippet.

    Unifies CRLF line endings, strips trailing whitespace from every line,
    collapses runs of blank lines to a single blank line and trims the
    result. Leading indentation is kept. Applying it twice gives the same
    result as applying it once.
    """
    unified = raw.replace("\r\n", "\n")
    # Per-line trimming first: whitespace-only lines become empty before
    # blank runs are collapsed.
    trimmed = "\n".join(line.rstrip() for line in unified.split("\n"))
    return _BLANK_RUN.sub("\n\n", trimmed).strip()


def cap_text(text: str, budget: int) -> str:
    """Truncate text to a character budget, preferring a word boundary.

    Text that already fits is returned unchanged. Otherwise the text is cut
    at the last space inside the budget when that space is past 80% of it,
    or hard-cut at the budget when it is not, and ELLIPSIS is appended.
    A non-positive budget yields ELLIPSIS alone.

    Args:
        text: Text to cap
        budget: Maximum characters kept before the ellipsis

    Returns:
        Text of at most ``budget + len(ELLIPSIS)`` characters
    """
    if len(text) <= budget:
        return text

    # Negative slice bounds would count from the end
    head = text[: max(budget, 0)]
    boundary = head.rfind(" ")

    if boundary > budget * WORD_BOUNDARY_RATIO:
        return head[:boundary] + ELLIPSIS
    return head + ELLIPSIS


__all__ = [
    "ELLIPSIS",
    "WORD_BOUNDARY_RATIO",
    "sanitize_source",
    "cap_text",
]
