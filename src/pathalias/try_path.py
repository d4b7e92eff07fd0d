#!/usr/bin/env python3
"""Trial Paths - Ordered filesystem candidates for an aliased module request.

This module turns a requested module name into the list of physical locations
a probe should check, in priority order, and maps a confirmed location back to
the logical path the caller should report.

For every physical path stem the candidates are, in order:
    1. The stem itself (suffix variants first)
    2. The stem's package.json (main-field indirection)
    3. The stem completed with each extension (suffix variants first)
    4. ``stem/index`` completed with each extension (suffix variants first)

Example:
    >>> entries = [MappingEntry("lib/*", ("/root/location/*",))]
    >>> trials = get_paths_to_try([".ts"], entries, "lib/mylib")
    >>> [t.path for t in trials]
    ['/root/location/mylib', '/root/location/mylib/package.json',
     '/root/location/mylib.ts', '/root/location/mylib/index.ts']
    >>> get_stripped_path(trials[-1])
    '/root/location/mylib'
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Union

from .mapping_entry import MappingEntry
from .wildcard import WILDCARD, match_star


class TrialKind(Enum):
    """What a trial path points at, used to invert it into a logical path."""

    FILE = "file"  # Exact request, no completion
    PACKAGE = "package"  # package.json of a directory
    EXTENSION = "extension"  # Request completed with an extension
    INDEX = "index"  # Directory completed with index + extension


@dataclass(frozen=True)
class TrialPath:
    """One filesystem location to probe.

    Attributes:
        kind: Which tier produced the candidate.
        path: Physical path to check for existence.
        is_module_suffix: Whether the path carries a configured module suffix.
    """

    kind: TrialKind
    path: str
    is_module_suffix: bool = False


class HasPath(Protocol):
    """Parent context exposing the directory of the importing module."""

    path: str


RequestedModuleParent = Union[str, HasPath, None]


def _parent_directory(parent: RequestedModuleParent) -> Optional[str]:
    """Normalize the parent context into a directory string."""
    if parent is None or isinstance(parent, str):
        return parent
    return getattr(parent, "path", None)


def _join(*parts: str) -> str:
    return os.path.normpath(os.path.join(*parts))


def get_paths_to_try(
    extensions: Sequence[str],
    absolute_path_mappings: Sequence[MappingEntry],
    requested_module: str,
    requested_module_parent: RequestedModuleParent = None,
    module_suffixes: Optional[Sequence[str]] = None,
) -> Optional[List[TrialPath]]:
    """Build the ordered list of physical paths to try for a request.

    Relative requests never go through the mapping table. When module
    suffixes are configured and the parent directory is known, they are
    expanded in place so suffixed variants can still be found.

    Args:
        extensions: Recognized extensions in priority order.
        absolute_path_mappings: Alias table, already sorted by priority.
        requested_module: The module name being imported.
        requested_module_parent: Directory of the importer, as a string or an
            object with a ``path`` attribute.
        module_suffixes: Filename suffixes such as ``".ios"``, in priority order.

    Returns:
        Trial paths in probing order, or None when default resolution should
        be used instead.
    """
    suffixes = [s for s in (module_suffixes or []) if s]
    is_mappable = bool(
        absolute_path_mappings and requested_module and not requested_module.startswith(".")
    )

    if suffixes and not is_mappable:
        parent_path = _parent_directory(requested_module_parent)
        if parent_path:
            physical_path = os.path.abspath(os.path.join(parent_path, requested_module))
            return get_try_paths(physical_path, extensions, suffixes, only_module_suffixes=True)

    if not is_mappable:
        return None

    paths_to_try: List[TrialPath] = []
    for entry in absolute_path_mappings:
        if entry.pattern == requested_module:
            star_match = ""
        else:
            star_match = match_star(entry.pattern, requested_module)
        if star_match is None:
            continue

        for physical_path_pattern in entry.paths:
            physical_path = physical_path_pattern.replace(WILDCARD, star_match, 1)
            paths_to_try.extend(get_try_paths(physical_path, extensions, suffixes))

    return paths_to_try or None


def get_try_paths(
    physical_path: str,
    extensions: Sequence[str],
    module_suffixes: Sequence[str],
    only_module_suffixes: bool = False,
) -> List[TrialPath]:
    """Expand one physical path stem into all of its candidates.

    Args:
        physical_path: Absolute path stem produced by alias substitution.
        extensions: Recognized extensions in priority order.
        module_suffixes: Non-empty module suffixes in priority order.
        only_module_suffixes: Skip the package.json candidate.

    Returns:
        Candidates ordered file, package, extension, index.
    """
    trials = [TrialPath(TrialKind.FILE, physical_path + m, True) for m in module_suffixes]
    trials.append(TrialPath(TrialKind.FILE, physical_path))

    if not only_module_suffixes:
        trials.append(TrialPath(TrialKind.PACKAGE, _join(physical_path, "package.json")))

    trials.extend(_completions(TrialKind.EXTENSION, physical_path, extensions, module_suffixes))

    index_path = _join(physical_path, "index")
    trials.extend(_completions(TrialKind.INDEX, index_path, extensions, module_suffixes))

    return trials


def _completions(
    kind: TrialKind, base: str, extensions: Sequence[str], module_suffixes: Sequence[str]
) -> List[TrialPath]:
    # Every suffixed completion precedes every unsuffixed one
    trials = [
        TrialPath(kind, base + m + e, True) for m in module_suffixes for e in extensions
    ]
    trials.extend(TrialPath(kind, base + e) for e in extensions)
    return trials


def remove_extension(path: str) -> str:
    """Drop everything from the last dot of path onwards."""
    dot = path.rfind(".")
    return path[:dot] if dot != -1 else path


def get_stripped_path(try_path: TrialPath) -> str:
    """Compute the logical path to report for a trial that exists.

    Suffixed index hits keep the suffix (``index.bar``) while plain index
    hits collapse to their directory.

    Raises:
        ValueError: If the trial kind is not a known TrialKind.
    """
    kind = try_path.kind
    if kind is TrialKind.INDEX:
        if try_path.is_module_suffix:
            return remove_extension(try_path.path)
        return os.path.dirname(try_path.path)
    if kind is TrialKind.FILE or kind is TrialKind.PACKAGE:
        return try_path.path
    if kind is TrialKind.EXTENSION:
        return remove_extension(try_path.path)
    raise ValueError(f"Unknown trial kind: {kind!r}")
