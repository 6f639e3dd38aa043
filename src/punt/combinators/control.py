"""Transformation and control-flow combinators.

map - chain a possibly-failing transform (single parser), or combine several
      views of one input (fan-out form)
and_then - choose the next parser from a result, then rewind to the
           original input and run it
one_of - ordered alternation, the only combinator that accumulates errors
predicate - accept the input iff a check returns exactly True

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, overload

from punt import generation
from punt.core.parser import Parser, build, require_callable, require_parser
from punt.core.result import Err, Ok, ParseResult, is_parse_result
from punt.diagnostics.errors import ParserDefinitionError, ResultContractError
from punt.diagnostics.failures import Alternatives, PredicateFailure
from punt.diagnostics.templates import ErrorTemplate

__all__ = [
    "and_then",
    "map",
    "map_all",
    "map_result",
    "one_of",
    "predicate",
]

logger = logging.getLogger(__name__)


def _checked[U](combinator: str, outcome: object) -> ParseResult[U]:
    if not is_parse_result(outcome):
        raise ResultContractError(ErrorTemplate.transform_not_a_result(combinator, outcome))
    return outcome


# ============================================================================
# MAP
# ============================================================================


def map_result[T, U](
    parser: Parser[T],
    transform: Callable[[T], ParseResult[U]],
    generator: generation.Strategy | None = None,
) -> Parser[U]:
    """Run ``parser``, then feed its value to ``transform``.

    ``transform`` returns its own Ok/Err, so it may reject a value the inner
    parser accepted. Failures of ``parser`` propagate unchanged.

    No generator is derived, since ``transform`` may reject what the inner
    generator draws; pass ``generator`` to supply one.

    Example:
        >>> to_int = map_result(string(), lambda s: Ok(int(s)) if s.isdigit() else Err(Custom(s)))
        >>> to_int.parse("123")
        Ok(value=123)

    Raises:
        ResultContractError: At parse time, if transform returns neither Ok nor Err
    """
    require_parser("map", parser)
    require_callable("map", transform)
    inner = parser.parse_fn

    def parse_fn(raw: object) -> ParseResult[U]:
        outcome = inner(raw)
        if isinstance(outcome, Err):
            return outcome
        return _checked("map", transform(outcome.value))

    return build(parse_fn, generator, name="map")


def map_all[U](
    combine: Callable[[list[Any]], ParseResult[U]],
    decoders: Sequence[Parser[Any]],
    generator: generation.Strategy | None = None,
) -> Parser[U]:
    """Run every decoder against the same input, then combine the results.

    Decoders run in order; the first failure is returned unchanged and the
    remaining decoders are not run. On success ``combine`` receives the
    results as a list in decoder order and its Ok/Err is returned as-is.

    As with map_result(), no generator is derived; pass ``generator`` to
    supply one.

    Example:
        >>> both = map_all(lambda xs: Ok(tuple(xs)), [index(0, integer()), index(1, integer())])
        >>> both.parse([3, 4])
        Ok(value=(3, 4))
    """
    require_callable("map", combine)
    parse_fns = tuple(require_parser("map", decoder).parse_fn for decoder in decoders)

    def parse_fn(raw: object) -> ParseResult[U]:
        results: list[Any] = []
        for decode in parse_fns:
            outcome = decode(raw)
            if isinstance(outcome, Err):
                return outcome
            results.append(outcome.value)
        return _checked("map", combine(results))

    return build(parse_fn, generator, name="map")


@overload
def map[T, U](  # noqa: A001
    parser: Parser[T],
    transform: Callable[[T], ParseResult[U]],
    generator: generation.Strategy | None = None,
) -> Parser[U]: ...


@overload
def map[U](  # noqa: A001
    parser: Callable[[list[Any]], ParseResult[U]],
    transform: Sequence[Parser[Any]],
    generator: generation.Strategy | None = None,
) -> Parser[U]: ...


def map(  # noqa: A001
    parser: Any,
    transform: Any,
    generator: generation.Strategy | None = None,
) -> Parser[Any]:
    """Dispatch to the single-parser or fan-out form of map.

    ``map(parser, transform)`` is map_result(); ``map(combine, decoders)``
    is map_all().
    """
    if isinstance(parser, Parser):
        return map_result(parser, transform, generator)
    return map_all(parser, transform, generator)


# ============================================================================
# SEQUENCING AND BRANCHING
# ============================================================================


def and_then[T, U](parser: Parser[T], select: Callable[[T], Parser[U]]) -> Parser[U]:
    """Pick the next parser from ``parser``'s result and run it on the original input.

    The input is rewound, not threaded: the selected parser sees the whole
    input ``parser`` saw, not ``parser``'s result. This is what makes
    discriminator-driven parsing work:

        >>> by_version = get("version", integer()).and_then(
        ...     lambda v: get("data", pair_of(integer(), integer())) if v == 3 else fail(v)
        ... )
        >>> by_version.parse({"version": 3, "data": [1, 2]})
        Ok(value=(1, 2))

    No generator: the accepted language depends on runtime values.

    Raises:
        ResultContractError: At parse time, if select returns a non-Parser
    """
    require_parser("and_then", parser)
    require_callable("and_then", select)
    inner = parser.parse_fn

    def parse_fn(raw: object) -> ParseResult[U]:
        outcome = inner(raw)
        if isinstance(outcome, Err):
            return outcome
        chosen = select(outcome.value)
        if not isinstance(chosen, Parser):
            raise ResultContractError(ErrorTemplate.selector_not_a_parser(chosen))
        logger.debug("and_then selected '%s' parser for %r", chosen.name, outcome.value)
        return chosen.parse_fn(raw)

    return build(parse_fn, name="and_then")


def one_of(decoders: Sequence[Parser[Any]]) -> Parser[Any]:
    """Try each decoder in order and return the first success.

    When every decoder fails, all of their errors are reported, in decoder
    order, as ``Alternatives(input, errors, decoders)``.

    Generator: a random choice among the decoders that have one.

    Example:
        >>> one_of([null(), integer()]).parse(123)
        Ok(value=123)

    Raises:
        ParserDefinitionError: If decoders is empty
    """
    alternatives = tuple(require_parser("one_of", decoder) for decoder in decoders)
    if not alternatives:
        raise ParserDefinitionError(ErrorTemplate.empty_alternatives())

    def parse_fn(raw: object) -> ParseResult[Any]:
        errors = []
        for decoder in alternatives:
            outcome = decoder.parse_fn(raw)
            if isinstance(outcome, Ok):
                return outcome
            errors.append(outcome.error)
        logger.debug("one_of exhausted %d alternative(s)", len(errors))
        return Err(Alternatives(raw, tuple(errors), alternatives))

    strategies = [decoder.generator for decoder in alternatives if decoder.generator is not None]
    generator = generation.one_of(strategies) if strategies else None
    return build(parse_fn, generator, name="one_of")


def predicate(check: Callable[[Any], object], context: object = ()) -> Parser[Any]:
    """Accept the input unchanged iff ``check(input) is True``.

    Truthy non-bool results (1, "yes", [0]) are rejections. No generator.

    Example:
        >>> predicate(lambda x: x == 123).parse(123)
        Ok(value=123)
        >>> predicate(lambda x: x != 123, "not 123").parse(123)
        Err(error=PredicateFailure(input=123, context='not 123'))
    """
    require_callable("predicate", check)

    def parse_fn(raw: object) -> ParseResult[Any]:
        if check(raw) is True:
            return Ok(raw)
        return Err(PredicateFailure(raw, context))

    return build(parse_fn, name="predicate")
