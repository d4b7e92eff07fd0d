#!/usr/bin/env python3
"""Tests for building the alias mapping table."""

from pathalias.mapping_entry import (
    MappingEntry,
    get_absolute_mapping_entries,
    get_prefix_length,
    sort_by_longest_prefix,
)


class TestPrefixSorting:
    """Tests for pattern priority ordering."""

    def test_prefix_length(self):
        """Test prefix length for wildcard and exact patterns."""
        assert get_prefix_length("lib/*") == 4
        assert get_prefix_length("*") == 0
        assert get_prefix_length("lib/foo") == 0

    def test_longest_prefix_first(self):
        """Test that more specific patterns sort first."""
        assert sort_by_longest_prefix(["*", "pre/fix/*", "longest/pre/fix/*"]) == [
            "longest/pre/fix/*",
            "pre/fix/*",
            "*",
        ]

    def test_ties_keep_declaration_order(self):
        """Test that equal prefixes keep their original order."""
        assert sort_by_longest_prefix(["b/*", "a/*", "c"]) == ["b/*", "a/*", "c"]


class TestGetAbsoluteMappingEntries:
    """Tests for get_absolute_mapping_entries."""

    def test_resolves_templates(self):
        """Test that templates become absolute paths."""
        entries = get_absolute_mapping_entries(
            "/absolute/base/url", {"lib/*": ["foo/*", "./bar/*"]}, add_match_all=False
        )
        assert entries == [
            MappingEntry("lib/*", ("/absolute/base/url/foo/*", "/absolute/base/url/bar/*")),
        ]

    def test_adds_match_all(self):
        """Test that a catch-all entry is appended last."""
        entries = get_absolute_mapping_entries("/root/", {"lib/*": ["location/*"]}, True)
        assert [e.pattern for e in entries] == ["lib/*", "*"]
        assert entries[-1].paths == ("/root/*",)

    def test_match_all_not_duplicated(self):
        """Test that an explicit star pattern suppresses the catch-all."""
        entries = get_absolute_mapping_entries("/root", {"*": ["location/*"]}, True)
        assert entries == [MappingEntry("*", ("/root/location/*",))]

    def test_match_all_disabled(self):
        """Test that no catch-all is added when disabled."""
        assert get_absolute_mapping_entries("/root", {}, False) == []

    def test_sorted_by_prefix(self):
        """Test that entries come out most specific first."""
        entries = get_absolute_mapping_entries(
            "/root", {"*": ["location/*"], "lib/*": ["location/*"]}, True
        )
        assert [e.pattern for e in entries] == ["lib/*", "*"]
