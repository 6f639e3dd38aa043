"""Parser combinators.

Submodules:
    primitives - string, integer, float, number, boolean, null, value,
                 succeed, fail
    structural - get, get_or_missing, get_in, list_of, singleton_of,
                 pair_of, index, of_map, of_struct, new
    control - map, map_result, map_all, and_then, one_of, predicate

Python 3.13+.
"""

from .control import and_then, map, map_all, map_result, one_of, predicate
from .primitives import boolean, fail, float, integer, null, number, string, succeed, value
from .structural import (
    get,
    get_in,
    get_or_missing,
    index,
    list_of,
    new,
    of_map,
    of_struct,
    pair_of,
    singleton_of,
)

__all__ = [
    "and_then",
    "boolean",
    "fail",
    "float",
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
    "predicate",
    "singleton_of",
    "string",
    "succeed",
    "value",
]
