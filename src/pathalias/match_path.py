#!/usr/bin/env python3
"""Path Matcher - Resolve aliased module requests against a probe.

This module walks the trial paths produced by ``get_paths_to_try`` and asks
injected collaborators whether each candidate exists. The library itself never
touches disk: callers supply ``file_exists`` and ``read_json``, which makes the
same matcher usable against a real filesystem, a virtual one, or a test fake.

Resolution Order (per mapping entry, per path template):
    1. Exact file
    2. package.json main fields
    3. File with extension
    4. Directory index file

Example:
    >>> matcher = PathMatcher("/root", {"lib/*": ["location/*"]})
    >>> files = {"/root/location/mylib/index.ts"}
    >>> matcher.match(
    ...     "lib/mylib",
    ...     read_json=lambda path: None,
    ...     file_exists=files.__contains__,
    ...     extensions=[".ts"],
    ... )
    '/root/location/mylib'
"""

import logging
import os
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from .mapping_entry import MappingEntry, get_absolute_mapping_entries
from .try_path import (
    RequestedModuleParent,
    TrialKind,
    TrialPath,
    get_paths_to_try,
    get_stripped_path,
)

logger = logging.getLogger(__name__)

ReadJson = Callable[[str], Optional[Mapping[str, Any]]]
FileExists = Callable[[str], bool]
MainField = Union[str, Sequence[str]]


def match_from_absolute_paths(
    absolute_path_mappings: Sequence[MappingEntry],
    requested_module: str,
    read_json: ReadJson,
    file_exists: FileExists,
    extensions: Sequence[str],
    main_fields: Optional[Sequence[MainField]] = None,
    module_suffixes: Optional[Sequence[str]] = None,
    requested_module_parent: RequestedModuleParent = None,
) -> Optional[str]:
    """Resolve a request against an already sorted mapping table.

    Returns:
        The logical path of the first existing candidate, or None.
    """
    try_paths = get_paths_to_try(
        extensions,
        absolute_path_mappings,
        requested_module,
        requested_module_parent,
        module_suffixes,
    )
    if try_paths is None:
        logger.debug("No alias applies to %r", requested_module)
        return None

    return find_first_existing_path(try_paths, read_json, file_exists, main_fields)


def find_first_existing_path(
    try_paths: Sequence[TrialPath],
    read_json: ReadJson,
    file_exists: FileExists,
    main_fields: Optional[Sequence[MainField]] = None,
) -> Optional[str]:
    """Probe trial paths in order and return the first hit.

    Args:
        try_paths: Candidates in priority order.
        read_json: Returns the parsed manifest at a path, or None if missing.
        file_exists: Returns whether a file exists at a path.
        main_fields: package.json fields to follow, in priority order.

    Returns:
        Logical path for file/extension/index hits, or the main file path for
        package hits. None if nothing exists.

    Raises:
        ValueError: If a trial has an unknown kind.
    """
    if main_fields is None:
        main_fields = PathMatcher.DEFAULT_MAIN_FIELDS

    for try_path in try_paths:
        if try_path.kind in (TrialKind.FILE, TrialKind.EXTENSION, TrialKind.INDEX):
            if file_exists(try_path.path):
                logger.debug("Matched %s candidate %s", try_path.kind.value, try_path.path)
                return get_stripped_path(try_path)
        elif try_path.kind is TrialKind.PACKAGE:
            package_json = read_json(try_path.path)
            if package_json:
                main_file = find_first_existing_main_field_mapped_file(
                    package_json, try_path.path, main_fields, file_exists
                )
                if main_file:
                    logger.debug("Matched main field of %s -> %s", try_path.path, main_file)
                    return main_file
        else:
            raise ValueError(f"Unknown trial kind: {try_path.kind!r}")

    return None


def _select_field(package_json: Mapping[str, Any], selector: MainField) -> Any:
    if isinstance(selector, str):
        return package_json.get(selector)

    value: Any = package_json
    for key in selector:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def find_first_existing_main_field_mapped_file(
    package_json: Mapping[str, Any],
    package_json_path: str,
    main_fields: Sequence[MainField],
    file_exists: FileExists,
) -> Optional[str]:
    """Return the first main-field target that exists next to the manifest.

    A field selector is either a key (``"main"``) or a key path into nested
    objects (``["esnext", "main"]``). Non-string values such as object-form
    ``browser`` maps are skipped.
    """
    package_dir = os.path.dirname(package_json_path)
    for selector in main_fields:
        candidate = _select_field(package_json, selector)
        if not candidate or not isinstance(candidate, str):
            continue

        candidate_path = os.path.normpath(os.path.join(package_dir, candidate))
        if file_exists(candidate_path):
            return candidate_path

    return None


class PathMatcher:
    """Resolve module requests through a tsconfig-style ``paths`` table.

    The mapping table is built and sorted once at construction; each call to
    ``match`` then only generates and probes candidates.

    Attributes:
        absolute_base_url: Directory that path templates are relative to.
        mapping_entries: Priority-sorted MappingEntry list.
        main_fields: package.json fields to follow, in priority order.
        module_suffixes: Filename suffixes tried before the plain name.

    Example:
        >>> matcher = PathMatcher("/root", {"@/*": ["src/*"]}, main_fields=["module", "main"])
        >>> matcher.match("@/utils", read_json=load, file_exists=os.path.isfile)
    """

    # Node's require.extensions defaults
    DEFAULT_EXTENSIONS = [".js", ".json", ".node"]

    DEFAULT_MAIN_FIELDS = ["main"]

    def __init__(
        self,
        absolute_base_url: str,
        paths: Mapping[str, Sequence[str]],
        main_fields: Optional[Sequence[MainField]] = None,
        add_match_all: bool = True,
        module_suffixes: Optional[Sequence[str]] = None,
    ):
        """Initialize the matcher.

        Args:
            absolute_base_url: Absolute base directory for path templates.
            paths: Alias pattern -> list of path templates.
            main_fields: package.json fields to follow (default ``["main"]``).
            add_match_all: Add a ``"*"`` entry rooted at the base url.
            module_suffixes: Suffixes such as ``[".ios", ""]``.

        Raises:
            ValueError: If absolute_base_url is not absolute.
        """
        if not os.path.isabs(absolute_base_url):
            raise ValueError(f"Base url must be absolute: {absolute_base_url}")

        self.absolute_base_url = absolute_base_url
        self.mapping_entries: List[MappingEntry] = get_absolute_mapping_entries(
            absolute_base_url, paths, add_match_all
        )
        self.main_fields = list(main_fields) if main_fields else list(self.DEFAULT_MAIN_FIELDS)
        self.module_suffixes = list(module_suffixes or [])

    def match(
        self,
        requested_module: str,
        read_json: ReadJson,
        file_exists: FileExists,
        extensions: Optional[Sequence[str]] = None,
        requested_module_parent: RequestedModuleParent = None,
    ) -> Optional[str]:
        """Resolve requested_module to a physical path.

        Args:
            requested_module: The module name being imported.
            read_json: Returns the parsed manifest at a path, or None.
            file_exists: Returns whether a file exists at a path.
            extensions: Recognized extensions (default ``DEFAULT_EXTENSIONS``).
            requested_module_parent: Directory of the importer.

        Returns:
            Resolved path, or None to fall back to default resolution.
        """
        return match_from_absolute_paths(
            self.mapping_entries,
            requested_module,
            read_json,
            file_exists,
            extensions if extensions is not None else self.DEFAULT_EXTENSIONS,
            self.main_fields,
            self.module_suffixes,
            requested_module_parent,
        )


def create_match_path(
    absolute_base_url: str,
    paths: Mapping[str, Sequence[str]],
    main_fields: Optional[Sequence[MainField]] = None,
    add_match_all: bool = True,
    module_suffixes: Optional[Sequence[str]] = None,
) -> Callable[..., Optional[str]]:
    """Create a match function bound to one alias configuration.

    Convenience wrapper for callers that only need the callable.

    Example:
        >>> match_path = create_match_path("/root", {"lib/*": ["location/*"]})
        >>> match_path("lib/mylib", read_json, file_exists, [".ts"])
    """
    return PathMatcher(
        absolute_base_url, paths, main_fields, add_match_all, module_suffixes
    ).match
