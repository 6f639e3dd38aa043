"""Primitive leaf parsers.

Each kind-checking parser dispatches through classify() and either returns
the input unchanged or fails with ``Simple(<reason>)``. value(), succeed()
and fail() ignore the input's kind entirely.

Names mirror the value kinds they accept, so float() and the others shadow
builtins inside this module on purpose; import the module, not its names,
when that matters.

Python 3.13+.
"""

from __future__ import annotations

from typing import Any

from punt import generation
from punt.core.parser import Parser, build
from punt.core.result import Err, Ok, ParseResult
from punt.core.values import InputKind, classify
from punt.diagnostics.codes import Reason
from punt.diagnostics.failures import Custom, Simple

__all__ = [
    "boolean",
    "fail",
    "float",
    "integer",
    "null",
    "number",
    "string",
    "succeed",
    "value",
]


def _kind_check(
    accepted: frozenset[InputKind],
    reason: Reason,
    generator: generation.Strategy,
    name: str,
) -> Parser[Any]:
    """Build a parser accepting exactly the given input kinds."""
    rejection = Err(Simple(reason))

    def parse_fn(value: object) -> ParseResult[Any]:
        if classify(value) in accepted:
            return Ok(value)
        return rejection

    return build(parse_fn, generator, name=name)


def string(generator: generation.Strategy | None = None) -> Parser[str]:
    """Accept a str.

    Args:
        generator: Override the default printable-string generator, e.g. to
            narrow the alphabet

    Example:
        >>> string().parse("foo")
        Ok(value='foo')
        >>> string().parse(3)
        Err(error=Simple(reason=<Reason.NOT_A_STRING: 'not a string'>))
    """
    return _kind_check(
        frozenset({InputKind.STRING}),
        Reason.NOT_A_STRING,
        generator if generator is not None else generation.string_like(),
        "string",
    )


def integer(generator: generation.Strategy | None = None) -> Parser[int]:
    """Accept an int (never a bool).

    Args:
        generator: Override the default unbounded-integer generator, e.g. to
            narrow the range
    """
    return _kind_check(
        frozenset({InputKind.INTEGER}),
        Reason.NOT_AN_INTEGER,
        generator if generator is not None else generation.integer_like(),
        "integer",
    )


def float() -> Parser[float]:  # noqa: A001
    """Accept a float. Integers are rejected; use number() for either."""
    return _kind_check(
        frozenset({InputKind.FLOAT}),
        Reason.NOT_A_FLOAT,
        generation.float_like(),
        "float",
    )


def number() -> Parser[int | float]:
    """Accept an int or a float (never a bool)."""
    return _kind_check(
        frozenset({InputKind.INTEGER, InputKind.FLOAT}),
        Reason.NOT_A_NUMBER,
        generation.one_of([generation.integer_like(), generation.float_like()]),
        "number",
    )


def boolean() -> Parser[bool]:
    return _kind_check(
        frozenset({InputKind.BOOLEAN}),
        Reason.NOT_A_BOOLEAN,
        generation.boolean_like(),
        "boolean",
    )


def null() -> Parser[None]:
    return _kind_check(
        frozenset({InputKind.NULL}),
        Reason.NOT_A_NULL,
        generation.null_like(),
        "null",
    )


def value() -> Parser[Any]:
    """Accept anything, returning the input unchanged.

    Escape hatch for parts of a document that are passed through as-is.
    """

    def parse_fn(raw: object) -> ParseResult[Any]:
        return Ok(raw)

    return build(parse_fn, generation.any_value(), name="value")


def succeed[T](result: T) -> Parser[T]:
    """Ignore the input and succeed with ``result``."""
    outcome = Ok(result)

    def parse_fn(_raw: object) -> ParseResult[T]:
        return outcome

    return build(parse_fn, generation.constant(result), name="succeed")


def fail(reason: object) -> Parser[Any]:
    """Ignore the input and fail with ``Custom(reason)``. No generator."""
    outcome = Err(Custom(reason))

    def parse_fn(_raw: object) -> ParseResult[Any]:
        return outcome

    return build(parse_fn, name="fail")
