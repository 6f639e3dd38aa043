"""Structural combinators.

Field extraction (get, get_or_missing, get_in), collection parsers
(list_of, singleton_of, pair_of, index) and object builders (of_map,
of_struct, new).

Error policy:
    Every combinator here short-circuits: the first failing field, element
    or path step is reported and nothing after it is evaluated. Element
    failures inside collections are wrapped in NestedFailure together with
    the element that triggered them.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import Any

from punt import generation
from punt.core.parser import Parser, build, require_callable, require_parser
from punt.core.result import Err, Ok, ParseResult
from punt.core.values import InputKind, classify
from punt.diagnostics.codes import Reason
from punt.diagnostics.errors import ParserDefinitionError
from punt.diagnostics.failures import MissingField, NestedFailure, Simple
from punt.diagnostics.templates import ErrorTemplate

__all__ = [
    "get",
    "get_in",
    "get_or_missing",
    "index",
    "list_of",
    "new",
    "of_map",
    "of_struct",
    "pair_of",
    "singleton_of",
]

logger = logging.getLogger(__name__)

_NOT_A_MAP = Err(Simple(Reason.NOT_A_MAP))
_NOT_A_LIST = Err(Simple(Reason.NOT_A_LIST))
_NOT_ENUMERABLE = Err(Simple(Reason.NOT_ENUMERABLE))
_NOT_A_SINGLETON = Err(Simple(Reason.NOT_A_SINGLETON))
_NOT_A_PAIR = Err(Simple(Reason.NOT_A_PAIR))

# Marks an absent key without colliding with a stored None.
_MISSING = object()


# ============================================================================
# FIELD EXTRACTION
# ============================================================================


def get[T](key: Hashable, parser: Parser[T]) -> Parser[T]:
    """Parse the value stored under ``key`` in a map.

    Errors:
        Simple("not a map") if the input is not a map
        MissingField(key, input) if the key is absent
        the inner parser's error, unchanged, if the value is rejected

    Example:
        >>> get("name", string()).parse({"name": "foo"})
        Ok(value='foo')
        >>> get("name", string()).parse({"bar": "foo"})
        Err(error=MissingField(field='name', input={'bar': 'foo'}))
    """
    require_parser("get", parser)
    inner = parser.parse_fn

    def parse_fn(raw: object) -> ParseResult[T]:
        if classify(raw) is not InputKind.MAP:
            return _NOT_A_MAP
        found = raw.get(key, _MISSING)  # type: ignore[attr-defined]
        if found is _MISSING:
            return Err(MissingField(key, raw))
        return inner(found)

    generator = None
    if parser.generator is not None:
        generator = generation.map_of({key: parser.generator})
    return build(parse_fn, generator, name="get")


def get_or_missing[T, D](key: Hashable, default: D, parser: Parser[T]) -> Parser[T | D]:
    """Like get(), but an absent key yields ``Ok(default)``.

    The default is returned as-is; it is never run through ``parser``.

    Example:
        >>> get_or_missing("name", "anon", string()).parse({})
        Ok(value='anon')
    """
    require_parser("get_or_missing", parser)
    inner = parser.parse_fn
    fallback = Ok(default)

    def parse_fn(raw: object) -> ParseResult[T | D]:
        if classify(raw) is not InputKind.MAP:
            return _NOT_A_MAP
        found = raw.get(key, _MISSING)  # type: ignore[attr-defined]
        if found is _MISSING:
            return fallback
        return inner(found)

    generator = None
    if parser.generator is not None:
        generator = generation.one_of([
            generation.map_of({key: parser.generator}),
            generation.constant({}),
        ])
    return build(parse_fn, generator, name="get_or_missing")


def get_in[T](path: Sequence[Hashable], parser: Parser[T]) -> Parser[T]:
    """Walk ``path`` through nested maps and parse the value at its end.

    The walk stops at the first key that is absent, reporting
    ``MissingField(key, current_map)`` for the map that lacked it.

    Example:
        >>> get_in(["a", "b"], number()).parse({"a": {"b": 123}})
        Ok(value=123)

    Raises:
        ParserDefinitionError: If path is empty
    """
    require_parser("get_in", parser)
    keys = tuple(path)
    if not keys:
        raise ParserDefinitionError(ErrorTemplate.empty_path())
    inner = parser.parse_fn

    def parse_fn(raw: object) -> ParseResult[T]:
        current = raw
        for key in keys:
            if classify(current) is not InputKind.MAP:
                return _NOT_A_MAP
            found = current.get(key, _MISSING)  # type: ignore[attr-defined]
            if found is _MISSING:
                return Err(MissingField(key, current))
            current = found
        return inner(current)

    generator = None
    if parser.generator is not None:
        generator = parser.generator
        for key in reversed(keys):
            generator = generation.map_of({key: generator})
    return build(parse_fn, generator, name="get_in")


# ============================================================================
# COLLECTIONS
# ============================================================================


def list_of[T](
    parser: Parser[T],
    generator: generation.Strategy | None = None,
) -> Parser[list[T]]:
    """Parse every element of a list with ``parser``, preserving order.

    Stops at the first rejected element and reports
    ``NestedFailure(element, details)``; later elements are never parsed.

    Args:
        parser: Element parser
        generator: Override the default list generator

    Example:
        >>> list_of(string()).parse(["foo", "bar"])
        Ok(value=['foo', 'bar'])
        >>> list_of(string()).parse(["foo", 1])
        Err(error=NestedFailure(failed_element=1, details=Simple(reason=...)))
    """
    require_parser("list_of", parser)
    inner = parser.parse_fn

    def parse_fn(raw: object) -> ParseResult[list[T]]:
        if classify(raw) is not InputKind.LIST:
            return _NOT_A_LIST
        parsed: list[T] = []
        for element in raw:  # type: ignore[attr-defined]
            outcome = inner(element)
            if isinstance(outcome, Err):
                return Err(NestedFailure(element, outcome.error))
            parsed.append(outcome.value)
        return Ok(parsed)

    if generator is None and parser.generator is not None:
        generator = generation.list_of(parser.generator)
    return build(parse_fn, generator, name="list_of")


def singleton_of[T](parser: Parser[T]) -> Parser[T]:
    """Accept a list of exactly one element and parse that element.

    Empty lists, longer lists and non-lists all fail with
    ``Simple("not a singleton")``.
    """
    require_parser("singleton_of", parser)
    inner = parser.parse_fn

    def parse_fn(raw: object) -> ParseResult[T]:
        if classify(raw) is not InputKind.LIST or len(raw) != 1:  # type: ignore[arg-type]
            return _NOT_A_SINGLETON
        element = raw[0]  # type: ignore[index]
        outcome = inner(element)
        if isinstance(outcome, Err):
            return Err(NestedFailure(element, outcome.error))
        return outcome

    generator = None
    if parser.generator is not None:
        generator = generation.exact_list_of(parser.generator, 1)
    return build(parse_fn, generator, name="singleton_of")


def pair_of[A, B](first: Parser[A], second: Parser[B]) -> Parser[tuple[A, B]]:
    """Accept a two-element tuple or list and parse each position.

    The NestedFailure reports the element that was actually rejected.

    Example:
        >>> pair_of(string(), string()).parse(["foo", "bar"])
        Ok(value=('foo', 'bar'))
    """
    require_parser("pair_of", first)
    require_parser("pair_of", second)
    parse_first = first.parse_fn
    parse_second = second.parse_fn

    def parse_fn(raw: object) -> ParseResult[tuple[A, B]]:
        if classify(raw) is not InputKind.LIST or len(raw) != 2:  # type: ignore[arg-type]
            return _NOT_A_PAIR
        left, right = raw  # type: ignore[misc]
        left_outcome = parse_first(left)
        if isinstance(left_outcome, Err):
            return Err(NestedFailure(left, left_outcome.error))
        right_outcome = parse_second(right)
        if isinstance(right_outcome, Err):
            return Err(NestedFailure(right, right_outcome.error))
        return Ok((left_outcome.value, right_outcome.value))

    generator = None
    if first.generator is not None and second.generator is not None:
        generator = generation.pair_of(first.generator, second.generator)
    return build(parse_fn, generator, name="pair_of")


def index[T](position: int, parser: Parser[T]) -> Parser[T]:
    """Parse the element at ``position`` of a list.

    An out-of-range position hands ``None`` to ``parser``, so
    ``index(5, null())`` accepts short lists and ``index(5, integer())``
    rejects them with the integer parser's own error.

    Example:
        >>> index(2, number()).parse([1, 2, 3])
        Ok(value=3)
        >>> index(10, number()).parse([1, 2, 3])
        Err(error=Simple(reason=<Reason.NOT_A_NUMBER: 'not a number'>))

    Raises:
        ParserDefinitionError: If position is negative
    """
    require_parser("index", parser)
    if position < 0:
        raise ParserDefinitionError(ErrorTemplate.negative_index(position))
    inner = parser.parse_fn

    def parse_fn(raw: object) -> ParseResult[T]:
        if classify(raw) is not InputKind.LIST:
            return _NOT_ENUMERABLE
        element = raw[position] if position < len(raw) else None  # type: ignore[index,arg-type]
        return inner(element)

    generator = None
    if parser.generator is not None:
        generator = generation.exact_list_of(parser.generator, position + 1)
    return build(parse_fn, generator, name="index")


# ============================================================================
# OBJECT BUILDERS
# ============================================================================


def new(
    fields: Mapping[Hashable, Parser[Any]],
    raw: object,
    constructor: Callable[..., Any] | None = None,
) -> ParseResult[Any]:
    """Run every field parser against the same input and collect the results.

    Fields are evaluated in mapping order; the first failure is returned
    unchanged and later fields are not evaluated.

    Args:
        fields: Output key -> parser. Each parser extracts its own slice of
            the input, typically with get()
        raw: The input every field parser sees
        constructor: Called as ``constructor(**results)`` instead of
            returning a dict

    Example:
        >>> new({"a": get("b", string())}, {"b": "foo"})
        Ok(value={'a': 'foo'})
    """
    results: dict[Hashable, Any] = {}
    for key, field_parser in fields.items():
        outcome = field_parser.parse_fn(raw)
        if isinstance(outcome, Err):
            return outcome
        results[key] = outcome.value
    if constructor is not None:
        return Ok(constructor(**results))
    return Ok(results)


def _fields_generator(
    fields: Mapping[Hashable, Parser[Any]],
) -> generation.Strategy | None:
    """Merge each field's generated input into one input.

    All fields read the same input, so a sound sample is the union of what
    each field needs. Missing when any field has no generator.
    """
    strategies = [field_parser.generator for field_parser in fields.values()]
    if any(strategy is None for strategy in strategies):
        logger.debug("Object builder has a field without a generator; no generator derived")
        return None
    return generation.merged_maps(strategies)  # type: ignore[arg-type]


def of_map(fields: Mapping[Hashable, Parser[Any]]) -> Parser[dict[Hashable, Any]]:
    """Build a dict from field parsers that all read the same input.

    Example:
        >>> of_map({"a": get("b", string())}).parse({"b": "foo"})
        Ok(value={'a': 'foo'})
    """
    frozen = _frozen_fields("of_map", fields)

    def parse_fn(raw: object) -> ParseResult[dict[Hashable, Any]]:
        return new(frozen, raw)

    return build(parse_fn, _fields_generator(frozen), name="of_map")


def of_struct[T](
    fields: Mapping[str, Parser[Any]],
    constructor: Callable[..., T],
) -> Parser[T]:
    """Like of_map(), but pass the results to ``constructor`` as keywords.

    Example:
        >>> @dataclass
        ... class User:
        ...     name: str
        >>> of_struct({"name": get("login", string())}, User).parse({"login": "ada"})
        Ok(value=User(name='ada'))
    """
    frozen = _frozen_fields("of_struct", fields)
    require_callable("of_struct", constructor)

    def parse_fn(raw: object) -> ParseResult[T]:
        return new(frozen, raw, constructor)

    return build(parse_fn, _fields_generator(frozen), name="of_struct")


def _frozen_fields(
    combinator: str,
    fields: Mapping[Hashable, Parser[Any]],
) -> dict[Hashable, Parser[Any]]:
    """Copy the field mapping so later caller mutation cannot change the parser."""
    return {key: require_parser(combinator, field_parser) for key, field_parser in fields.items()}
