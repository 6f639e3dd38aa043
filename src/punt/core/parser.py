"""The Parser value and its universal constructor.

A Parser pairs a parse function with an optional Hypothesis strategy that
generates inputs the parse function accepts. Every combinator in
punt.combinators is expressed through build().

Invariant (round-trip soundness): for every parser with a generator, every
value drawn from the generator is accepted by the parser. Combinators
preserve this by deriving their generator only from their children's
generators, and by leaving the generator unset where no sound one exists.

Thread Safety:
    Parser is a frozen dataclass holding only callables and strategies; it
    has no mutable state and may be shared freely across threads.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from punt import generation
from punt.constants import DEFAULT_SAMPLE_SIZE
from punt.diagnostics.errors import NoGeneratorError, ParserDefinitionError
from punt.diagnostics.templates import ErrorTemplate

from .result import ParseResult

__all__ = [
    "Parser",
    "build",
    "generate",
    "parse",
    "require_callable",
    "require_parser",
    "sample",
    "strategy_of",
    "to_parser",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Parser[T]:
    """Immutable parser/generator pair.

    Attributes:
        parse_fn: Function from raw input to ParseResult
        generator: Strategy drawing inputs parse_fn accepts, or None
        name: Name of the combinator that built this parser (diagnostics only)

    Example:
        >>> p = get("name", string())
        >>> p.parse({"name": "ada"})
        Ok(value='ada')
        >>> p.map(lambda s: Ok(s.upper())).parse({"name": "ada"})
        Ok(value='ADA')
    """

    parse_fn: Callable[[Any], ParseResult[T]]
    generator: generation.Strategy | None = field(default=None, compare=False)
    name: str = field(default="build", compare=False)

    @property
    def has_generator(self) -> bool:
        return self.generator is not None

    def parse(self, value: object) -> ParseResult[T]:
        """Run this parser against ``value``."""
        return self.parse_fn(value)

    def generate(self) -> Iterator[Any]:
        """Lazy, unbounded iterator of inputs this parser accepts."""
        return generate(self)

    def map[U](
        self,
        transform: Callable[[T], ParseResult[U]],
        generator: generation.Strategy | None = None,
    ) -> Parser[U]:
        """Chain a possibly-failing transform onto this parser's result."""
        from punt.combinators.control import map_result  # noqa: PLC0415 - circular

        return map_result(self, transform, generator)

    def and_then[U](self, select: Callable[[T], Parser[U]]) -> Parser[U]:
        """Select the next parser from this result and run it on the original input."""
        from punt.combinators.control import and_then  # noqa: PLC0415 - circular

        return and_then(self, select)

    def __or__(self, other: object) -> Parser[Any]:
        """``a | b`` is ``one_of([a, b])``."""
        from punt.combinators.control import one_of  # noqa: PLC0415 - circular

        if not isinstance(other, Parser):
            return NotImplemented
        return one_of([self, other])


def build[T](
    parse_fn: Callable[[Any], ParseResult[T]],
    generator: generation.Strategy | None = None,
    *,
    name: str = "build",
) -> Parser[T]:
    """Universal Parser constructor.

    Args:
        parse_fn: Function from raw input to Ok/Err
        generator: Optional strategy whose draws parse_fn accepts
        name: Combinator name recorded for diagnostics

    Returns:
        New Parser

    Raises:
        ParserDefinitionError: If parse_fn is not callable
    """
    require_callable(name, parse_fn)
    return Parser(parse_fn=parse_fn, generator=generator, name=name)


def to_parser[T](parse_fn: Callable[[Any], ParseResult[T]]) -> Parser[T]:
    """Wrap a plain parse function into a Parser without a generator."""
    return build(parse_fn, name="to_parser")


def parse[T](parser: Parser[T], value: object) -> ParseResult[T]:
    """Run ``parser`` against ``value``."""
    return parser.parse_fn(value)


def strategy_of(parser: Parser[Any]) -> generation.Strategy:
    """Return the Hypothesis strategy behind ``parser``.

    Use it directly with ``@given`` to drive property tests from a parser.

    Raises:
        NoGeneratorError: If the parser has no generator
    """
    if parser.generator is None:
        logger.warning("Generation requested from parser '%s' without a generator", parser.name)
        raise NoGeneratorError(ErrorTemplate.no_generator(parser.name))
    return parser.generator


def generate(parser: Parser[Any]) -> Iterator[Any]:
    """Lazy, unbounded iterator of inputs ``parser`` accepts.

    Each call returns an independent iterator, so callers never share a
    cursor.

    Raises:
        NoGeneratorError: If the parser has no generator
    """
    return generation.iterate(strategy_of(parser))


def sample(parser: Parser[Any], n: int = DEFAULT_SAMPLE_SIZE) -> list[Any]:
    """Draw ``n`` inputs ``parser`` accepts.

    Raises:
        NoGeneratorError: If the parser has no generator
    """
    return generation.sample(strategy_of(parser), n)


def require_parser(combinator: str, candidate: object) -> Parser[Any]:
    """Check that a combinator argument is a Parser.

    Raises:
        ParserDefinitionError: If it is not
    """
    if not isinstance(candidate, Parser):
        raise ParserDefinitionError(ErrorTemplate.not_a_parser(combinator, candidate))
    return candidate


def require_callable(combinator: str, candidate: object) -> None:
    """Check that a combinator argument is callable.

    Raises:
        ParserDefinitionError: If it is not
    """
    if not callable(candidate):
        raise ParserDefinitionError(ErrorTemplate.not_callable(combinator, candidate))
