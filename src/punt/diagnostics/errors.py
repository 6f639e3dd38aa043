"""Caller-error exception hierarchy.

Rejected inputs are never exceptions: they are ParseError values returned
inside Err. The exceptions here signal misuse of the library itself, such
as asking a parser without a generator for samples.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "NoGeneratorError",
    "ParserDefinitionError",
    "PuntError",
    "ResultContractError",
    "UnwrapError",
]


class PuntError(Exception):
    """Base exception for all punt caller errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PuntError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ParserDefinitionError(PuntError, ValueError):
    """A combinator was built with invalid arguments.

    Examples:
    - Negative position passed to index()
    - Empty key path passed to get_in()
    - A child that is not a Parser
    """


class ResultContractError(PuntError, TypeError):
    """A user callback broke its return-type contract.

    Raised when a map() transform returns something other than Ok/Err, or an
    and_then() selector returns something other than a Parser.
    """


class NoGeneratorError(PuntError, LookupError):
    """Generation was requested from a parser that has no generator.

    Not every combinator defines an accepted-value distribution (predicate,
    fail, and_then). Drawing from one is a programming error.
    """


class UnwrapError(PuntError):
    """unwrap() on Err, or unwrap_err() on Ok."""
