"""Parsing of "Title (Year)" lookup strings."""

import re
from typing import Tuple

from .exceptions import QueryParseError

_YEAR_PATTERN = re.compile(r"\s*[+-]?\d+\s*")


def parse_name_year(text: str) -> Tuple[str, int]:
    """Split a lookup string into a bare title and a release year.

    The year is read from the last parenthesised group. The title is
    everything before its opening parenthesis, minus the separating
    character. An empty group means no year was supplied.

    Args:
        text: Free text such as ``"Alien (1979)"`` or ``"Alien"``.

    Returns:
        Tuple of (title, year), where year is 0 when none was given.

    Raises:
        QueryParseError: If the parenthesised group is not an integer.

    Examples:
        >>> parse_name_year("Alien (1979)")
        ('Alien', 1979)
        >>> parse_name_year("Alien")
        ('Alien', 0)
    """
    close = text.rfind(")")
    if close < 0:
        return text, 0

    open_ = text.rfind("(", 0, close)
    if open_ < 0:
        return text, 0

    year_text = text[open_ + 1 : close]
    title = text[: max(open_ - 1, 0)]

    if year_text == "":
        return title, 0

    if not _YEAR_PATTERN.fullmatch(year_text):
        raise QueryParseError(f"Invalid year '{year_text}' in query '{text}'")

    return title, int(year_text)


def format_name_year(title: str, year: int = 0) -> str:
    """Build the ``"Title (Year)"`` literal used for suggestion lookups.

    Args:
        title: Movie title.
        year: Release year, 0 when unknown.

    Returns:
        ``title`` alone when the year is unknown.
    """
    if not year:
        return title
    return f"{title} ({year})"
