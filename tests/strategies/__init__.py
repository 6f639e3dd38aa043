"""Hypothesis strategies for punt property-based testing.

Usage:
    from tests.strategies import any_input, inputs_not_of_kind
"""

from .inputs import any_input, inputs_not_of_kind, inputs_of_kind, json_like, map_keys

__all__ = [
    "any_input",
    "inputs_not_of_kind",
    "inputs_of_kind",
    "json_like",
    "map_keys",
]
