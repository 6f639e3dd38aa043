"""punt - parser/generator combinators for decoded data.

Validate and decode already-parsed data (the dicts, lists and scalars
produced by json.loads, yaml.safe_load or a config loader) with composable
parsers. Every parser returns Ok(value) or Err(ParseError); rejected inputs
are data, never exceptions. Most parsers also carry a Hypothesis strategy
generating inputs they accept, so a schema doubles as a property-test
fixture.

Public API:
    Parser, build, to_parser - the parser value and its constructors
    parse, generate, sample, strategy_of - evaluation and generation
    Ok, Err, ParseResult - results
    string, integer, float, number, boolean, null, value, succeed, fail
    get, get_or_missing, get_in, list_of, singleton_of, pair_of, index
    of_map, of_struct, new
    map, map_result, map_all, and_then, one_of, predicate

ParseError variants:
    Simple, MissingField, NestedFailure, PredicateFailure, Alternatives, Custom

Exceptions (caller errors only):
    PuntError - Base exception class
    NoGeneratorError - generate() on a parser without a generator
    ParserDefinitionError - invalid combinator arguments
    ResultContractError - a callback returned the wrong kind of value
    UnwrapError - unwrap() on Err / unwrap_err() on Ok

Submodules:
    punt.diagnostics - error values, reason codes and ErrorFormatter
    punt.generation - Hypothesis adapter used for generators
    punt.core.values - InputKind and classify()
"""

from .combinators import (
    and_then,
    boolean,
    fail,
    float,
    get,
    get_in,
    get_or_missing,
    index,
    integer,
    list_of,
    map,
    map_all,
    map_result,
    new,
    null,
    number,
    of_map,
    of_struct,
    one_of,
    pair_of,
    predicate,
    singleton_of,
    string,
    succeed,
    value,
)
from .core import (
    Err,
    InputKind,
    Ok,
    ParseResult,
    Parser,
    build,
    classify,
    generate,
    parse,
    sample,
    strategy_of,
    to_parser,
)
from .diagnostics import (
    Alternatives,
    Custom,
    MissingField,
    NestedFailure,
    NoGeneratorError,
    ParseError,
    ParserDefinitionError,
    PredicateFailure,
    PuntError,
    Reason,
    ResultContractError,
    Simple,
    UnwrapError,
    format_error,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("punt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Alternatives",
    "Custom",
    "Err",
    "InputKind",
    "MissingField",
    "NestedFailure",
    "NoGeneratorError",
    "Ok",
    "ParseError",
    "ParseResult",
    "Parser",
    "ParserDefinitionError",
    "PredicateFailure",
    "PuntError",
    "Reason",
    "ResultContractError",
    "Simple",
    "UnwrapError",
    "__version__",
    "and_then",
    "boolean",
    "build",
    "classify",
    "fail",
    "float",
    "format_error",
    "generate",
    "get",
    "get_in",
    "get_or_missing",
    "index",
    "integer",
    "list_of",
    "map",
    "map_all",
    "map_result",
    "new",
    "null",
    "number",
    "of_map",
    "of_struct",
    "one_of",
    "pair_of",
    "parse",
    "predicate",
    "sample",
    "singleton_of",
    "strategy_of",
    "string",
    "succeed",
    "to_parser",
    "value",
]
