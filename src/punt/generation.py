"""Value generation adapter over Hypothesis.

The combinator core treats value generation as an opaque capability. This
module is the only place that talks to Hypothesis: every generator attached
to a Parser is a ``SearchStrategy`` built by one of the functions below, and
sampling goes through sample() / iterate().

Builders:
    constant, one_of, list_of, exact_list_of, map_of, merged_maps, pair_of,
    string_like, integer_like, float_like, boolean_like, null_like, any_value

Drawing:
    sample(strategy, n) - list of n draws
    iterate(strategy) - lazy, unbounded iterator of draws

Python 3.13+.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Hashable, Iterator, Mapping, Sequence
from typing import Any

from hypothesis import strategies as st
from hypothesis.errors import NonInteractiveExampleWarning

from punt.constants import DEFAULT_SAMPLE_SIZE, MAX_GENERATED_DEPTH, MAX_GENERATED_LIST_SIZE

__all__ = [
    "Strategy",
    "any_value",
    "boolean_like",
    "constant",
    "exact_list_of",
    "float_like",
    "integer_like",
    "iterate",
    "list_of",
    "map_of",
    "merged_maps",
    "null_like",
    "one_of",
    "pair_of",
    "sample",
    "string_like",
]

logger = logging.getLogger(__name__)

type Strategy = st.SearchStrategy[Any]

# Printable text: no control characters, no lone surrogates.
_PRINTABLE = st.characters(exclude_categories=("Cc", "Cs"))

_SCALARS: Strategy = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(_PRINTABLE),
)


# ============================================================================
# BUILDERS
# ============================================================================


def constant(value: object) -> Strategy:
    """Always produce ``value``."""
    return st.just(value)


def one_of(strategies: Sequence[Strategy]) -> Strategy:
    """Pick uniformly among ``strategies`` for each draw."""
    return st.one_of(*strategies)


def list_of(
    strategy: Strategy,
    *,
    min_size: int = 0,
    max_size: int = MAX_GENERATED_LIST_SIZE,
) -> Strategy:
    """Lists of arbitrary length whose elements come from ``strategy``."""
    return st.lists(strategy, min_size=min_size, max_size=max_size)


def exact_list_of(strategy: Strategy, length: int) -> Strategy:
    """Lists of exactly ``length`` elements drawn from ``strategy``."""
    return st.lists(strategy, min_size=length, max_size=length)


def pair_of(first: Strategy, second: Strategy) -> Strategy:
    """Two-element lists ``[first, second]``."""
    return st.tuples(first, second).map(list)


def map_of(fields: Mapping[Hashable, Strategy]) -> Strategy:
    """Fixed-shape dicts: every key present, each value from its own strategy."""
    return st.fixed_dictionaries(dict(fields))


def merged_maps(strategies: Sequence[Strategy]) -> Strategy:
    """Draw one value per strategy and deep-merge the dicts among them.

    Maps found under the same key are merged recursively, so fields that
    read different parts of one nested object all find their part. On any
    other key collision the later strategy wins. Draws that are not mappings
    contribute nothing to the merged dict.
    """
    return st.tuples(*strategies).map(_merge)


def _merge(parts: tuple[Any, ...]) -> dict[Any, Any]:
    merged: dict[Any, Any] = {}
    for part in parts:
        if isinstance(part, Mapping):
            _merge_into(merged, part)
    return merged


def _merge_into(target: dict[Any, Any], source: Mapping[Any, Any]) -> dict[Any, Any]:
    # target only ever holds dicts built here, so draws are never mutated.
    for key, item in source.items():
        current = target.get(key)
        if isinstance(item, Mapping):
            base = current if isinstance(current, dict) else {}
            target[key] = _merge_into(base, item)
        else:
            target[key] = item
    return target


def string_like() -> Strategy:
    """Printable unicode strings."""
    return st.text(_PRINTABLE)


def integer_like() -> Strategy:
    """Unbounded integers."""
    return st.integers()


def float_like() -> Strategy:
    """Floats, excluding NaN so that drawn values compare equal to themselves."""
    return st.floats(allow_nan=False)


def boolean_like() -> Strategy:
    return st.booleans()


def null_like() -> Strategy:
    return st.none()


def any_value(max_depth: int = MAX_GENERATED_DEPTH) -> Strategy:
    """Arbitrary JSON-like values: scalars, lists and string-keyed dicts."""

    def extend(children: Strategy) -> Strategy:
        return st.one_of(
            st.lists(children, max_size=MAX_GENERATED_LIST_SIZE),
            st.dictionaries(st.text(_PRINTABLE), children, max_size=MAX_GENERATED_LIST_SIZE),
        )

    return st.recursive(_SCALARS, extend, max_leaves=max(1, max_depth) * MAX_GENERATED_LIST_SIZE)


# ============================================================================
# DRAWING
# ============================================================================


def _draw(strategy: Strategy) -> Any:
    # example() is the documented way to draw outside a @given test; it warns
    # because it is not meant for tests, which is exactly our use here.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", NonInteractiveExampleWarning)
        return strategy.example()


def iterate(strategy: Strategy) -> Iterator[Any]:
    """Lazy, unbounded iterator of draws from ``strategy``.

    Each call returns an independent iterator.
    """
    while True:
        yield _draw(strategy)


def sample(strategy: Strategy, n: int = DEFAULT_SAMPLE_SIZE) -> list[Any]:
    """Draw ``n`` values from ``strategy``.

    Args:
        strategy: Strategy to draw from
        n: Number of values (must be >= 0)

    Returns:
        List of ``n`` draws

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        msg = f"Sample size must be >= 0, got {n}"
        raise ValueError(msg)
    logger.debug("Sampling %d value(s) from %r", n, strategy)
    return [_draw(strategy) for _ in range(n)]
