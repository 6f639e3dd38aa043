"""Core types shared by every combinator.

Exports:
    Parser, build, to_parser, parse, generate, sample, strategy_of
    Ok, Err, ParseResult
    InputKind, classify

Python 3.13+.
"""

from .parser import (
    Parser,
    build,
    generate,
    parse,
    require_callable,
    require_parser,
    sample,
    strategy_of,
    to_parser,
)
from .result import Err, Ok, ParseResult, is_parse_result
from .values import InputKind, classify

__all__ = [
    "Err",
    "InputKind",
    "Ok",
    "ParseResult",
    "Parser",
    "build",
    "classify",
    "generate",
    "is_parse_result",
    "parse",
    "require_callable",
    "require_parser",
    "sample",
    "strategy_of",
    "to_parser",
]
