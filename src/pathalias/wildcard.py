#!/usr/bin/env python3
"""Single-wildcard alias pattern matching.

Alias grammars such as tsconfig ``paths`` allow at most one ``*`` per pattern,
so a bounded prefix/suffix check is all that is needed.

Example:
    >>> match_star("lib/*", "lib/mylib")
    'mylib'
    >>> match_star("*.css", "theme.css")
    'theme'
    >>> match_star("lib/*", "lib/") is None
    True
"""

from typing import Optional

WILDCARD = "*"


def match_star(pattern: str, search: str) -> Optional[str]:
    """Match a pattern with a single star against search.

    The star must match at least one character to be considered a match.

    Args:
        pattern: Alias pattern, for example ``"foo*"``.
        search: Requested module name, for example ``"fooawesomebar"``.

    Returns:
        The part of search that the star matches, or None if no match.
    """
    if len(search) < len(pattern):
        return None
    if pattern == WILDCARD:
        return search

    star = pattern.find(WILDCARD)
    if star == -1:
        return None

    prefix = pattern[:star]
    suffix = pattern[star + 1 :]
    if not search.startswith(prefix) or not search.endswith(suffix):
        return None

    return search[star : len(search) - len(suffix)]
