"""Shared constants for punt.

Centralized defaults used across the core, the generation adapter and the
diagnostics formatter. Placing them here avoids circular imports and gives
one place to look when tuning behavior.

Constants are grouped by domain:
- Generation: bounds for Hypothesis-backed generators and sampling
- Formatting: limits applied when rendering ParseError trees

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Generation
    "DEFAULT_SAMPLE_SIZE",
    "MAX_GENERATED_LIST_SIZE",
    "MAX_GENERATED_DEPTH",
    # Formatting
    "MAX_FORMAT_DEPTH",
    "MAX_CONTENT_LENGTH",
]

# ============================================================================
# GENERATION
# ============================================================================

# Number of values drawn by sample() when the caller does not ask for a count.
DEFAULT_SAMPLE_SIZE: int = 10

# Upper bound on the length of lists produced by default list generators.
# Hypothesis shrinks towards short lists anyway; the bound keeps nested
# compositions such as list_of(list_of(value())) from producing huge samples.
MAX_GENERATED_LIST_SIZE: int = 10

# Nesting bound for the recursive "any value" generator behind value().
MAX_GENERATED_DEPTH: int = 3

# ============================================================================
# FORMATTING
# ============================================================================

# Deepest ParseError nesting the formatter descends into before eliding.
MAX_FORMAT_DEPTH: int = 50

# Maximum repr length of an offending input when sanitizing formatter output.
MAX_CONTENT_LENGTH: int = 100
