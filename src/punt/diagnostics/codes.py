"""Reason codes, error kinds and caller-error diagnostics.

Defines the symbolic tags carried by Simple parse errors, the discriminator
for each ParseError variant, and the structured Diagnostic attached to
caller-error exceptions.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorKind",
    "Reason",
]


class Reason(StrEnum):
    """Symbolic reasons carried by ``Simple`` parse errors.

    Inherits from ``StrEnum`` so that ``Reason.NOT_A_STRING == "not a string"``
    holds and serialized errors contain plain strings.
    """

    NOT_A_STRING = "not a string"
    NOT_AN_INTEGER = "not an integer"
    NOT_A_FLOAT = "not a float"
    NOT_A_NUMBER = "not a number"
    NOT_A_BOOLEAN = "not a boolean"
    NOT_A_NULL = "not a null"
    NOT_A_LIST = "not a list"
    NOT_A_MAP = "not a map"
    NOT_ENUMERABLE = "not enumerable"
    NOT_A_SINGLETON = "not a singleton"
    NOT_A_PAIR = "not a pair"


class ErrorKind(StrEnum):
    """Discriminator naming each ParseError variant.

    Used by the formatter and by ``to_dict()`` so that consumers can switch
    on a stable string instead of a Python class name.
    """

    SIMPLE = "simple"
    MISSING_FIELD = "missing_field"
    NESTED_FAILURE = "nested_failure"
    PREDICATE_FAILURE = "predicate_failure"
    ALTERNATIVES = "alternatives"
    CUSTOM = "custom"


class DiagnosticCode(Enum):
    """Caller-error codes with unique identifiers.

    These describe misuse of the library (programming-contract violations),
    never a rejected input. Rejected inputs are ParseError values.

    Organized by category:
        1000-1999: Definition errors (malformed combinator arguments)
        2000-2999: Evaluation contract errors (bad user callbacks)
        3000-3999: Generation errors
        4000-4999: Result access errors
    """

    # Definition errors (1000-1999)
    NOT_A_PARSER = 1001
    NOT_CALLABLE = 1002
    NEGATIVE_INDEX = 1003
    EMPTY_PATH = 1004
    EMPTY_ALTERNATIVES = 1005

    # Evaluation contract errors (2000-2999)
    TRANSFORM_NOT_A_RESULT = 2001
    SELECTOR_NOT_A_PARSER = 2002

    # Generation errors (3000-3999)
    NO_GENERATOR = 3001

    # Result access errors (4000-4999)
    UNWRAP_ERR = 4001
    UNWRAP_OK = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic for a caller error.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        combinator: Name of the combinator involved, if any
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    combinator: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[NO_GENERATOR]: Parser built by 'predicate' has no generator
              = combinator: predicate
              = help: Pass generator=... or compose with parsers that define one

        Returns:
            Formatted error message
        """
        parts = [f"error[{self.code.name}]: {self.message}"]
        if self.combinator:
            parts.append(f"  = combinator: {self.combinator}")
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        return "\n".join(parts)
