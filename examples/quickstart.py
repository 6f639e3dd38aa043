"""Quickstart Examples for punt.

Decoding a versioned configuration document with field extraction, lists,
alternation and discriminator-driven parsing.

Run this example:
    python examples/quickstart.py

Python 3.13+.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from hypothesis import strategies as st

import punt
from punt import Custom, Err, Ok, format_error


@dataclass(frozen=True)
class Endpoint:
    host: str
    port: int
    tags: list[str]


def _port(number: int) -> Ok[int] | Err:
    if 0 < number < 65536:
        return Ok(number)
    return Err(Custom(f"port out of range: {number}"))


ENDPOINT = punt.of_struct(
    {
        "host": punt.get("host", punt.string()),
        "port": punt.get(
            "port", punt.integer().map(_port, st.integers(min_value=1, max_value=65535))
        ),
        "tags": punt.get_or_missing("tags", [], punt.list_of(punt.string())),
    },
    Endpoint,
)


def _by_version(version: int) -> punt.Parser[object]:
    match version:
        case 1:
            return punt.get("endpoint", ENDPOINT)
        case 2:
            return punt.get("endpoints", punt.list_of(ENDPOINT))
        case _:
            return punt.fail(f"unsupported version {version}")


CONFIG = punt.get("version", punt.integer()).and_then(_by_version)


def example_1_decode_documents() -> None:
    """Decode two document versions and one invalid document."""
    print("=" * 70)
    print("Example 1: Versioned documents")
    print("=" * 70)

    documents = [
        '{"version": 1, "endpoint": {"host": "a.example", "port": 443}}',
        '{"version": 2, "endpoints": [{"host": "b", "port": 80, "tags": ["edge"]}]}',
        '{"version": 2, "endpoints": [{"host": "c", "port": 99999}]}',
    ]

    for source in documents:
        outcome = CONFIG.parse(json.loads(source))
        match outcome:
            case Ok(value=decoded):
                print(f"OK   {decoded}")
            case Err(error=error):
                print(f"ERR  {format_error(error)}")
    print()


def example_2_alternatives() -> None:
    """one_of reports every branch's failure."""
    print("=" * 70)
    print("Example 2: Alternatives")
    print("=" * 70)

    id_or_name = punt.integer() | punt.string()
    print(format_error(id_or_name.parse([1, 2]).unwrap_err()))
    print()


def example_3_fixtures() -> None:
    """Every parser with a generator produces inputs it accepts."""
    print("=" * 70)
    print("Example 3: Generated fixtures")
    print("=" * 70)

    for raw in punt.sample(ENDPOINT, 3):
        print(raw, "->", ENDPOINT.parse(raw))
    print()


if __name__ == "__main__":
    example_1_decode_documents()
    example_2_alternatives()
    example_3_fixtures()
