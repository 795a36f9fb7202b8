"""
Unit tests for map_entries and the KEEP sentinel.
"""

from shadcn_oklch.core.mapping import KEEP, map_entries


class TestMapEntries:
    """Tests for map_entries."""

    def test_identity_without_transforms(self):
        """Test that no transforms copies the mapping."""
        source = {"a": 1, "b": 2}
        result = map_entries(source)
        assert result == source
        assert result is not source

    def test_key_transform(self):
        """Test transforming keys only."""
        result = map_entries({"a": 1}, key_fn=lambda value, key, index, entries: f"--{key}")
        assert result == {"--a": 1}

    def test_value_transform(self):
        """Test transforming values only."""
        result = map_entries({"a": 1, "b": 2}, value_fn=lambda value, *_: value * 10)
        assert result == {"a": 10, "b": 20}

    def test_callbacks_receive_index_and_entries(self):
        """Test the (value, key, index, entries) callback signature."""
        seen = []

        def record(value, key, index, entries):
            seen.append((value, key, index, list(entries)))
            return KEEP

        map_entries({"a": 1, "b": 2}, value_fn=record)
        assert seen == [
            (1, "a", 0, [("a", 1), ("b", 2)]),
            (2, "b", 1, [("a", 1), ("b", 2)]),
        ]

    def test_preserves_order(self):
        """Test that output order follows input order."""
        result = map_entries({"z": 1, "a": 2, "m": 3}, key_fn=lambda v, key, *_: key.upper())
        assert list(result) == ["Z", "A", "M"]

    def test_keep_sentinel_keeps_original(self):
        """Test that returning KEEP leaves key and value unchanged."""
        result = map_entries(
            {"a": 1},
            key_fn=lambda *_: KEEP,
            value_fn=lambda *_: KEEP,
        )
        assert result == {"a": 1}

    def test_falsy_results_are_real_results(self):
        """Test that "", 0, False and None replace the original value."""
        source = {"a": "x", "b": 5, "c": True, "d": "y"}
        replacements = {"a": "", "b": 0, "c": False, "d": None}
        result = map_entries(source, value_fn=lambda value, key, *_: replacements[key])
        assert result == {"a": "", "b": 0, "c": False, "d": None}

    def test_empty_string_key_is_used(self):
        """Test that an empty-string key is not treated as 'no change'."""
        result = map_entries({"a": 1}, key_fn=lambda *_: "")
        assert result == {"": 1}

    def test_colliding_keys_later_wins(self):
        """Test that when two keys map to one, the later entry wins."""
        result = map_entries({"a": 1, "b": 2}, key_fn=lambda *_: "same")
        assert result == {"same": 2}

    def test_input_not_mutated(self):
        """Test that the source mapping is unchanged."""
        source = {"a": 1}
        map_entries(source, key_fn=lambda *_: "b", value_fn=lambda *_: 2)
        assert source == {"a": 1}

    def test_keep_repr(self):
        assert repr(KEEP) == "KEEP"
