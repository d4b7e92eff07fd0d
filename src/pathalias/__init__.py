"""pathalias - tsconfig-style path alias resolution.

This package turns a requested module name into the ordered list of physical
locations a module loader should probe, using a ``paths`` alias table, a set
of recognized extensions and optional module suffixes (e.g. ``.ios``).

Components:
    - match_star: Single-wildcard alias pattern matching
    - get_paths_to_try: Ordered candidate generation for a request
    - get_stripped_path: Map an existing candidate back to a logical path
    - PathMatcher: Probe candidates through injected filesystem callables

Quick Start:
    >>> from pathalias import PathMatcher
    >>> matcher = PathMatcher("/my/project", {"@/*": ["src/*"]})
    >>> matcher.match("@/utils", read_json=load_json, file_exists=os.path.isfile,
    ...               extensions=[".ts", ".tsx"])
    '/my/project/src/utils'

The library performs no I/O itself: disk access is always supplied by the
caller.
"""

from .mapping_entry import MappingEntry, get_absolute_mapping_entries
from .match_path import (
    PathMatcher,
    create_match_path,
    find_first_existing_path,
    match_from_absolute_paths,
)
from .try_path import (
    TrialKind,
    TrialPath,
    get_paths_to_try,
    get_stripped_path,
    get_try_paths,
    remove_extension,
)
from .wildcard import match_star

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Candidate generation
    "TrialKind",
    "TrialPath",
    "get_paths_to_try",
    "get_try_paths",
    "get_stripped_path",
    "remove_extension",
    "match_star",
    # Alias table
    "MappingEntry",
    "get_absolute_mapping_entries",
    # Probing
    "PathMatcher",
    "create_match_path",
    "find_first_existing_path",
    "match_from_absolute_paths",
]
