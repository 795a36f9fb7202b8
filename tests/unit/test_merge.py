"""
Unit tests for the structural deep merge.
"""

import copy

from shadcn_oklch.core.merge import deep_merge


class TestDeepMerge:
    """Tests for deep_merge."""

    def test_keys_from_both_sides_survive(self):
        """Test that keys present on only one side are kept."""
        result = deep_merge({"light": {"a": "1"}}, {"light": {"b": "2"}})
        assert result == {"light": {"a": "1", "b": "2"}}

    def test_later_source_wins(self):
        """Test that override values replace base values."""
        result = deep_merge({"light": {"a": "1"}}, {"light": {"a": "2"}})
        assert result["light"]["a"] == "2"

    def test_new_top_level_keys_added(self):
        """Test that themes only in the override are added."""
        result = deep_merge({"light": {"a": "1"}}, {"sepia": {"a": "3"}})
        assert list(result) == ["light", "sepia"]

    def test_no_sources_returns_copy(self):
        """Test that merging nothing returns an equal but new dict."""
        base = {"a": {"b": 1}}
        result = deep_merge(base)
        assert result == base
        assert result is not base

    def test_multiple_sources_left_to_right(self):
        """Test that each source overrides everything before it."""
        result = deep_merge({"x": 1}, {"x": 2, "y": 1}, {"x": 3})
        assert result == {"x": 3, "y": 1}

    def test_associative(self):
        """Test merge(merge(a, b), c) == merge(a, b, c)."""
        a = {"light": {"bg": "white", "fg": "black"}, "dark": {"bg": "black"}}
        b = {"light": {"fg": "grey"}, "dark": {"fg": "white"}}
        c = {"light": {"bg": "ivory"}, "sepia": {"bg": "tan"}}
        assert deep_merge(deep_merge(a, b), c) == deep_merge(a, b, c)

    def test_inputs_not_mutated(self):
        """Test that neither target nor sources change."""
        a = {"light": {"bg": "white"}, "list": [1, 2]}
        b = {"light": {"fg": "black"}, "list": [3]}
        a_before, b_before = copy.deepcopy(a), copy.deepcopy(b)

        deep_merge(a, b)

        assert a == a_before
        assert b == b_before

    def test_merged_nested_mapping_is_new(self):
        """Test that recursively merged levels are fresh dicts."""
        a = {"light": {"bg": "white"}}
        result = deep_merge(a, {"light": {"fg": "black"}})
        assert result["light"] is not a["light"]

    def test_lists_replace_not_concatenate(self):
        """Test that arrays are treated as leaves."""
        result = deep_merge({"stops": [1, 2, 3]}, {"stops": [9]})
        assert result == {"stops": [9]}

    def test_scalar_replaces_mapping(self):
        """Test that a scalar override replaces a nested mapping."""
        result = deep_merge({"light": {"bg": "white"}}, {"light": "none"})
        assert result == {"light": "none"}

    def test_mapping_replaces_scalar(self):
        """Test that a mapping override replaces a scalar."""
        result = deep_merge({"light": None}, {"light": {"bg": "white"}})
        assert result == {"light": {"bg": "white"}}

    def test_none_overrides(self):
        """Test that an explicit None in a source overwrites."""
        result = deep_merge({"a": {"b": 1}}, {"a": None})
        assert result == {"a": None}

    def test_accepts_read_only_mappings(self):
        """Test merging onto MappingProxyType defaults."""
        from types import MappingProxyType

        base = MappingProxyType({"light": MappingProxyType({"bg": "white"})})
        result = deep_merge(base, {"light": {"fg": "black"}})
        assert result == {"light": {"bg": "white", "fg": "black"}}
        assert isinstance(result, dict)
