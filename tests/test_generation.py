"""Tests for generation.py, the Hypothesis adapter.

Python 3.13+.
"""

from __future__ import annotations

from itertools import islice

import pytest
from hypothesis import given
from hypothesis import strategies as st

from punt import generation


class TestBuilders:
    @given(generation.exact_list_of(st.integers(), 3))
    def test_exact_list_length(self, drawn: list[int]) -> None:
        assert len(drawn) == 3

    @given(generation.pair_of(st.integers(), st.text()))
    def test_pair_is_two_element_list(self, drawn: list[object]) -> None:
        assert isinstance(drawn, list)
        assert isinstance(drawn[0], int)
        assert isinstance(drawn[1], str)

    @given(generation.map_of({"a": st.integers(), "b": st.none()}))
    def test_map_of_has_every_key(self, drawn: dict[str, object]) -> None:
        assert set(drawn) == {"a", "b"}

    @given(
        generation.merged_maps([
            st.fixed_dictionaries({"a": st.integers()}),
            st.fixed_dictionaries({"b": st.text()}),
            st.just("not a map"),
        ])
    )
    def test_merged_maps_unions_mappings(self, drawn: dict[str, object]) -> None:
        assert set(drawn) == {"a", "b"}

    @given(
        generation.merged_maps([
            st.fixed_dictionaries({"user": st.fixed_dictionaries({"name": st.text()})}),
            st.fixed_dictionaries({"user": st.fixed_dictionaries({"age": st.integers()})}),
        ])
    )
    def test_merged_maps_merges_nested_maps(self, drawn: dict[str, dict[str, object]]) -> None:
        assert set(drawn["user"]) == {"name", "age"}

    def test_merge_does_not_mutate_draws(self) -> None:
        first = {"user": {"name": "a"}}
        second = {"user": {"age": 1}}

        merged = generation._merge((first, second))

        assert merged == {"user": {"name": "a", "age": 1}}
        assert first == {"user": {"name": "a"}}

    def test_merge_later_scalar_wins(self) -> None:
        assert generation._merge(({"a": {"b": 1}}, {"a": 2})) == {"a": 2}

    @given(generation.list_of(st.integers()))
    def test_list_of_is_bounded(self, drawn: list[int]) -> None:
        assert len(drawn) <= generation.MAX_GENERATED_LIST_SIZE

    @given(generation.string_like())
    def test_string_like_is_printable(self, drawn: str) -> None:
        assert all(ord(char) >= 0x20 and not 0x7F <= ord(char) <= 0x9F for char in drawn)


class TestDrawing:
    def test_iterate_is_unbounded(self) -> None:
        assert list(islice(generation.iterate(generation.constant(1)), 50)) == [1] * 50

    def test_sample_size(self) -> None:
        assert len(generation.sample(generation.boolean_like(), 7)) == 7

    def test_negative_sample_size(self) -> None:
        with pytest.raises(ValueError, match="must be >= 0"):
            generation.sample(generation.null_like(), -3)
