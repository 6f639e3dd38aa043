"""Tests for combinators/primitives.py leaf parsers.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

import punt
from punt import Custom, Err, Ok, Reason, Simple
from punt.core.values import InputKind
from tests.strategies import any_input, inputs_not_of_kind, inputs_of_kind


class TestString:
    def test_accepts_string(self) -> None:
        assert punt.string().parse("abc") == Ok("abc")

    @pytest.mark.parametrize("raw", [3.4, 3, None, True, ["a"], {"a": "b"}])
    def test_rejects_non_string(self, raw: object) -> None:
        assert punt.string().parse(raw) == Err(Simple(Reason.NOT_A_STRING))

    @given(inputs_not_of_kind(InputKind.STRING))
    def test_rejects_every_other_kind(self, raw: object) -> None:
        assert punt.string().parse(raw) == Err(Simple(Reason.NOT_A_STRING))

    def test_generator_override(self) -> None:
        digits = st.text(alphabet="0123456789", min_size=1)
        parser = punt.string(digits)

        assert parser.generator is digits
        assert all(raw.isdigit() for raw in punt.sample(parser, 5))


class TestInteger:
    def test_accepts_integer(self) -> None:
        assert punt.integer().parse(123) == Ok(123)

    @pytest.mark.parametrize("raw", [3.4, "foo", True, False, None])
    def test_rejects_non_integer(self, raw: object) -> None:
        assert punt.integer().parse(raw) == Err(Simple(Reason.NOT_AN_INTEGER))

    def test_generator_override(self) -> None:
        small = st.integers(min_value=0, max_value=9)
        parser = punt.integer(small)

        assert all(0 <= raw <= 9 for raw in punt.sample(parser, 5))


class TestFloat:
    def test_accepts_float(self) -> None:
        assert punt.float().parse(1.3) == Ok(1.3)

    @pytest.mark.parametrize("raw", [3, "foo", True])
    def test_rejects_non_float(self, raw: object) -> None:
        assert punt.float().parse(raw) == Err(Simple(Reason.NOT_A_FLOAT))


class TestNumber:
    @pytest.mark.parametrize("raw", [123, 1.3, 0, -0.5])
    def test_accepts_int_and_float(self, raw: object) -> None:
        assert punt.number().parse(raw) == Ok(raw)

    @pytest.mark.parametrize("raw", ["foo", True, None, [1]])
    def test_rejects_non_number(self, raw: object) -> None:
        assert punt.number().parse(raw) == Err(Simple(Reason.NOT_A_NUMBER))


class TestBoolean:
    @pytest.mark.parametrize("raw", [True, False])
    def test_accepts_bool(self, raw: bool) -> None:
        assert punt.boolean().parse(raw) == Ok(raw)

    @pytest.mark.parametrize("raw", ["foo", 0, 1, None])
    def test_rejects_non_bool(self, raw: object) -> None:
        assert punt.boolean().parse(raw) == Err(Simple(Reason.NOT_A_BOOLEAN))


class TestNull:
    def test_accepts_none(self) -> None:
        assert punt.null().parse(None) == Ok(None)

    @pytest.mark.parametrize("raw", ["foo", 0, False, [], {}])
    def test_rejects_non_null(self, raw: object) -> None:
        assert punt.null().parse(raw) == Err(Simple(Reason.NOT_A_NULL))


class TestValue:
    @given(any_input())
    def test_returns_input_unchanged(self, raw: object) -> None:
        outcome = punt.value().parse(raw)

        assert outcome.is_ok()
        assert outcome.unwrap() is raw

    def test_accepts_non_json_values(self) -> None:
        marker = object()

        assert punt.value().parse(marker) == Ok(marker)


class TestSucceedAndFail:
    @given(any_input())
    def test_succeed_ignores_input(self, raw: object) -> None:
        assert punt.succeed("fixed").parse(raw) == Ok("fixed")

    @given(any_input())
    def test_fail_ignores_input(self, raw: object) -> None:
        assert punt.fail("reason").parse(raw) == Err(Custom("reason"))

    def test_fail_has_no_generator(self) -> None:
        assert punt.fail("reason").generator is None

    def test_succeed_generates_constant(self) -> None:
        assert punt.sample(punt.succeed("a"), 3) == ["a", "a", "a"]


class TestReferentialTransparency:
    @given(st.sampled_from(list(InputKind)[:-1]), st.data())
    def test_primitives_are_repeatable(self, kind: InputKind, data: st.DataObject) -> None:
        """PROPERTY: parse(p, x) twice yields equal results."""
        raw = data.draw(inputs_of_kind(kind))
        for parser in (
            punt.string(),
            punt.integer(),
            punt.float(),
            punt.number(),
            punt.boolean(),
            punt.null(),
        ):
            assert parser.parse(raw) == parser.parse(raw)
