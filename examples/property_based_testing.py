"""Property-Based Testing Examples for punt.

A punt parser doubles as a Hypothesis strategy: strategy_of(parser) draws
inputs the parser accepts. This example uses that to test code that consumes
decoded documents, without hand-writing fixtures.

Learn more about property-based testing:
- Hypothesis documentation: https://hypothesis.readthedocs.io/

Run this example:
    python examples/property_based_testing.py

Python 3.13+.
"""

# pylint: disable=no-value-for-parameter
# Justification: Hypothesis's @given decorator injects test parameters at runtime.

from __future__ import annotations

from hypothesis import given, settings

import punt
from punt import strategy_of

ORDER = punt.of_map({
    "id": punt.get("id", punt.integer()),
    "lines": punt.get(
        "lines",
        punt.list_of(punt.pair_of(punt.string(), punt.integer())),
    ),
    "note": punt.get_or_missing("note", None, punt.one_of([punt.null(), punt.string()])),
})


def total_quantity(order: dict[str, object]) -> int:
    """Code under test: sum the quantities of an order's lines."""
    lines = order["lines"]
    assert isinstance(lines, list)
    return sum(quantity for _, quantity in lines)


def example_1_parser_as_fixture() -> None:
    """Property: every generated raw order decodes, and totals are consistent."""
    print("=" * 70)
    print("Example 1: Parser as fixture generator")
    print("=" * 70)

    @given(strategy_of(ORDER))
    @settings(max_examples=100)
    def test_total_matches_raw_lines(raw: dict[str, object]) -> None:
        order = ORDER.parse(raw).unwrap()
        raw_lines = raw["lines"]
        assert isinstance(raw_lines, list)
        assert total_quantity(order) == sum(line[1] for line in raw_lines)

    test_total_matches_raw_lines()
    print("[PASS] 100 generated orders decoded and totalled")
    print()


def example_2_sample() -> None:
    """sample() draws fixtures outside of a test."""
    print("=" * 70)
    print("Example 2: Sampling")
    print("=" * 70)

    for raw in punt.sample(ORDER, 3):
        print(raw)
    print()


if __name__ == "__main__":
    example_1_parser_as_fixture()
    example_2_sample()
