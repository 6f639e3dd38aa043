"""Tests for combinators/control.py: map, and_then, one_of, predicate.

Python 3.13+.
"""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

import punt
from punt import (
    Alternatives,
    Custom,
    Err,
    MissingField,
    Ok,
    ParserDefinitionError,
    PredicateFailure,
    Reason,
    ResultContractError,
    Simple,
)
from punt.diagnostics import DiagnosticCode


def _to_int(text: str) -> Ok[int] | Err:
    if text.lstrip("-").isdigit():
        return Ok(int(text))
    return Err(Custom(f"not numeric: {text}"))


def _as_tuple(results: list[object]) -> Ok[tuple[object, ...]]:
    return Ok(tuple(results))


# ============================================================================
# MAP (single parser)
# ============================================================================


class TestMapSingle:
    def test_map_string_to_int(self) -> None:
        assert punt.map(punt.string(), _to_int).parse("123") == Ok(123)

    def test_transform_may_fail(self) -> None:
        assert punt.map(punt.string(), _to_int).parse("abc") == Err(Custom("not numeric: abc"))

    def test_inner_failure_skips_transform(self) -> None:
        calls: list[object] = []

        def record(value: object) -> Ok[object]:
            calls.append(value)
            return Ok(value)

        outcome = punt.map(punt.string(), record).parse(5)

        assert outcome == Err(Simple(Reason.NOT_A_STRING))
        assert calls == []

    def test_no_generator_by_default(self) -> None:
        assert punt.map(punt.string(), _to_int).generator is None

    def test_explicit_generator(self) -> None:
        numerals = st.integers().map(str)
        parser = punt.map(punt.string(), _to_int, numerals)

        assert parser.generator is numerals
        assert all(parser.parse(raw).is_ok() for raw in punt.sample(parser, 5))

    def test_map_result_alias(self) -> None:
        assert punt.map_result(punt.string(), _to_int).parse("7") == Ok(7)

    def test_transform_must_return_result(self) -> None:
        parser = punt.map(punt.string(), len)  # type: ignore[arg-type]

        with pytest.raises(ResultContractError) as exc_info:
            parser.parse("abc")

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.TRANSFORM_NOT_A_RESULT


# ============================================================================
# MAP (fan-out)
# ============================================================================


class TestMapFanOut:
    def test_map_decoders(self) -> None:
        parser = punt.map(_as_tuple, [punt.index(0, punt.integer()), punt.index(1, punt.integer())])

        assert parser.parse([3, 4]) == Ok((3, 4))

    def test_every_decoder_sees_original_input(self) -> None:
        raw = {"a": 1, "b": 2}
        parser = punt.map(
            _as_tuple,
            [punt.get("a", punt.integer()), punt.value(), punt.get("b", punt.integer())],
        )

        assert parser.parse(raw) == Ok((1, raw, 2))

    def test_short_circuits_on_first_failure(self) -> None:
        calls: list[object] = []

        def combine(results: list[object]) -> Ok[object]:
            calls.append(results)
            return Ok(results)

        parser = punt.map(
            combine,
            [punt.get("a", punt.integer()), punt.fail("second"), punt.fail("third")],
        )

        assert parser.parse({"a": 1}) == Err(Custom("second"))
        assert calls == []

    def test_combine_may_fail(self) -> None:
        parser = punt.map(lambda _: Err(Custom("rejected")), [punt.value()])

        assert parser.parse(1) == Err(Custom("rejected"))

    def test_empty_decoders(self) -> None:
        assert punt.map(_as_tuple, []).parse("anything") == Ok(())

    def test_map_all_alias(self) -> None:
        parser = punt.map_all(_as_tuple, [punt.succeed(1), punt.succeed(2)])

        assert parser.parse(None) == Ok((1, 2))

    def test_no_generator_by_default(self) -> None:
        assert punt.map(_as_tuple, [punt.integer()]).generator is None

    def test_explicit_generator(self) -> None:
        pairs = st.tuples(st.integers(), st.integers()).map(list)
        decoders = [punt.index(0, punt.integer()), punt.index(1, punt.integer())]
        parser = punt.map(_as_tuple, decoders, pairs)

        assert parser.generator is pairs
        assert all(parser.parse(raw).is_ok() for raw in punt.sample(parser, 5))

    def test_map_all_generator(self) -> None:
        assert punt.map_all(_as_tuple, [punt.succeed(1)], st.none()).has_generator

    def test_combine_must_be_callable(self) -> None:
        with pytest.raises(ParserDefinitionError):
            punt.map("combine", [punt.value()])  # type: ignore[call-overload]


# ============================================================================
# AND_THEN
# ============================================================================


def _versioned() -> punt.Parser[object]:
    def select(version: int) -> punt.Parser[object]:
        match version:
            case 3:
                return punt.get("data", punt.pair_of(punt.integer(), punt.integer()))
            case 4:
                return punt.get(
                    "data",
                    punt.of_map({
                        "a": punt.get("a", punt.integer()),
                        "b": punt.get("b", punt.integer()),
                    }),
                )
            case _:
                return punt.fail(f"unsupported version {version}")

    return punt.and_then(punt.get("version", punt.integer()), select)


class TestAndThen:
    def test_version_three(self) -> None:
        assert _versioned().parse({"version": 3, "data": [1, 2]}) == Ok((1, 2))

    def test_version_four(self) -> None:
        raw = {"version": 4, "data": {"a": 3, "b": 4}}

        assert _versioned().parse(raw) == Ok({"a": 3, "b": 4})

    def test_with_fan_out_map(self) -> None:
        def select(version: int) -> punt.Parser[object]:
            if version == 3:
                return punt.get("data", punt.pair_of(punt.integer(), punt.integer()))
            return punt.get(
                "data",
                punt.map(_as_tuple, [punt.get("a", punt.integer()), punt.get("b", punt.integer())]),
            )

        parser = punt.and_then(punt.get("version", punt.integer()), select)

        assert parser.parse({"version": 3, "data": [1, 2]}) == Ok((1, 2))
        assert parser.parse({"version": 4, "data": {"a": 3, "b": 4}}) == Ok((3, 4))

    def test_selected_parser_sees_original_input(self) -> None:
        """The input is rewound: the selected parser gets the whole input."""
        raw = {"version": 1, "payload": "x"}
        parser = punt.and_then(punt.get("version", punt.integer()), lambda _: punt.value())

        assert parser.parse(raw) == Ok(raw)

    def test_discriminator_failure_propagates(self) -> None:
        outcome = _versioned().parse({"data": [1, 2]})

        assert outcome == Err(MissingField("version", {"data": [1, 2]}))

    def test_selected_parser_failure_propagates(self) -> None:
        assert _versioned().parse({"version": 9}) == Err(Custom("unsupported version 9"))

    def test_selector_not_called_on_failure(self) -> None:
        calls: list[object] = []

        def select(value: object) -> punt.Parser[object]:
            calls.append(value)
            return punt.value()

        punt.and_then(punt.integer(), select).parse("x")

        assert calls == []

    def test_selector_must_return_parser(self) -> None:
        parser = punt.and_then(punt.integer(), lambda n: n)  # type: ignore[arg-type,return-value]

        with pytest.raises(ResultContractError) as exc_info:
            parser.parse(1)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SELECTOR_NOT_A_PARSER

    def test_logs_selection(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="punt.combinators.control"):
            _versioned().parse({"version": 3, "data": [1, 2]})

        assert "and_then selected 'get' parser" in caplog.text

    def test_has_no_generator(self) -> None:
        assert _versioned().generator is None


# ============================================================================
# ONE_OF
# ============================================================================


class TestOneOf:
    def test_first_alternative(self) -> None:
        assert punt.one_of([punt.null(), punt.integer()]).parse(None) == Ok(None)

    def test_second_alternative(self) -> None:
        assert punt.one_of([punt.null(), punt.integer()]).parse(123) == Ok(123)

    def test_first_success_wins(self) -> None:
        parser = punt.one_of([punt.succeed("first"), punt.succeed("second")])

        assert parser.parse(0) == Ok("first")

    def test_accumulates_every_error_in_order(self) -> None:
        decoders = [punt.null(), punt.integer()]

        outcome = punt.one_of(decoders).parse("x")

        assert isinstance(outcome, Err)
        error = outcome.error
        assert isinstance(error, Alternatives)
        assert error.input == "x"
        assert error.errors == (Simple(Reason.NOT_A_NULL), Simple(Reason.NOT_AN_INTEGER))
        assert error.decoders == tuple(decoders)

    def test_alternatives_equality_ignores_decoders(self) -> None:
        outcome = punt.one_of([punt.fail("a"), punt.fail("b")]).parse(1)

        assert outcome == Err(Alternatives(1, (Custom("a"), Custom("b"))))

    def test_stops_after_first_success(self) -> None:
        calls: list[object] = []

        def record(raw: object) -> Ok[object]:
            calls.append(raw)
            return Ok(raw)

        punt.one_of([punt.integer(), punt.build(record)]).parse(1)

        assert calls == []

    def test_empty_decoders_rejected(self) -> None:
        with pytest.raises(ParserDefinitionError) as exc_info:
            punt.one_of([])

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.EMPTY_ALTERNATIVES

    def test_generator_skips_decoders_without_one(self) -> None:
        parser = punt.one_of([punt.predicate(bool), punt.integer()])

        assert parser.has_generator
        assert all(isinstance(raw, int) for raw in punt.sample(parser, 5))

    def test_no_generator_when_no_decoder_has_one(self) -> None:
        assert punt.one_of([punt.fail(1), punt.fail(2)]).generator is None

    @given(st.lists(st.text(max_size=3), min_size=1, max_size=5))
    def test_error_count_matches_decoder_count(self, reasons: list[str]) -> None:
        """PROPERTY: when all fail, one error per decoder, in order."""
        outcome = punt.one_of([punt.fail(reason) for reason in reasons]).parse(None)

        assert isinstance(outcome, Err)
        assert isinstance(outcome.error, Alternatives)
        assert outcome.error.errors == tuple(Custom(reason) for reason in reasons)


# ============================================================================
# PREDICATE
# ============================================================================


class TestPredicate:
    def test_holds(self) -> None:
        assert punt.predicate(lambda x: x == 123).parse(123) == Ok(123)

    def test_fails_with_default_context(self) -> None:
        outcome = punt.predicate(lambda x: x != 123).parse(123)

        assert outcome == Err(PredicateFailure(123, ()))

    def test_fails_with_context(self) -> None:
        outcome = punt.predicate(lambda x: x > 0, "positive").parse(-1)

        assert outcome == Err(PredicateFailure(-1, "positive"))

    @pytest.mark.parametrize("truthy", [1, "yes", [0], object()])
    def test_only_exact_true_accepts(self, truthy: object) -> None:
        outcome = punt.predicate(lambda _: truthy).parse("x")

        assert outcome == Err(PredicateFailure("x", ()))

    def test_has_no_generator(self) -> None:
        assert punt.predicate(bool).generator is None

    def test_composes_with_get(self) -> None:
        parser = punt.get("age", punt.predicate(lambda n: isinstance(n, int) and n >= 0, "age"))

        assert parser.parse({"age": 4}) == Ok(4)
        assert parser.parse({"age": -4}) == Err(PredicateFailure(-4, "age"))
