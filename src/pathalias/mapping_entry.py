#!/usr/bin/env python3
"""Mapping Entries - Build the priority-ordered alias table.

Takes the ``paths`` object of a tsconfig/jsconfig (already parsed by the
caller) and turns it into absolute MappingEntry objects sorted so that the
most specific pattern is tried first.

Example:
    >>> entries = get_absolute_mapping_entries(
    ...     "/root", {"*": ["location/*"], "lib/*": ["location/*"]}, add_match_all=True
    ... )
    >>> [e.pattern for e in entries]
    ['lib/*', '*']
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Mapping, Sequence, Tuple

from .wildcard import WILDCARD

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MappingEntry:
    """A single alias pattern and its physical path templates.

    Attributes:
        pattern: Alias pattern with at most one wildcard (e.g., "@/*").
        paths: Absolute path templates, tried in order.
    """

    pattern: str
    paths: Tuple[str, ...]


def get_prefix_length(pattern: str) -> int:
    """Length of the literal part before the wildcard (0 without one)."""
    star = pattern.find(WILDCARD)
    return star if star != -1 else 0


def sort_by_longest_prefix(patterns: Sequence[str]) -> List[str]:
    """Order patterns by descending prefix length, keeping declaration order on ties."""
    return sorted(patterns, key=get_prefix_length, reverse=True)


def get_absolute_mapping_entries(
    absolute_base_url: str,
    paths: Mapping[str, Sequence[str]],
    add_match_all: bool,
) -> List[MappingEntry]:
    """Convert a paths mapping into absolute, priority-sorted entries.

    Args:
        absolute_base_url: Absolute directory that path templates are relative to.
        paths: Alias pattern -> list of path templates.
        add_match_all: Append a catch-all ``"*"`` entry rooted at the base url
            when the mapping has none.

    Returns:
        MappingEntry list, most specific pattern first.
    """
    entries = []
    for pattern in sort_by_longest_prefix(list(paths)):
        resolved = tuple(
            os.path.abspath(os.path.join(absolute_base_url, template))
            for template in paths[pattern]
        )
        entries.append(MappingEntry(pattern=pattern, paths=resolved))

    if WILDCARD not in paths and add_match_all:
        match_all = absolute_base_url.rstrip("/") + "/" + WILDCARD
        entries.append(MappingEntry(pattern=WILDCARD, paths=(match_all,)))

    logger.debug("Built %d mapping entries from %s", len(entries), absolute_base_url)
    return entries
