"""Parse results.

ParseResult[T] is ``Ok[T] | Err``: the only channel through which a parser
reports its outcome. Err always carries a ParseError value.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeIs

from punt.diagnostics.errors import UnwrapError
from punt.diagnostics.failures import ParseError
from punt.diagnostics.templates import ErrorTemplate

__all__ = [
    "Err",
    "Ok",
    "ParseResult",
    "is_parse_result",
]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful parse.

    Attributes:
        value: The validated (and possibly transformed) value
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: object) -> T:
        return self.value

    def unwrap_err(self) -> ParseError:
        raise UnwrapError(ErrorTemplate.unwrap_ok(self.value))


@dataclass(frozen=True, slots=True)
class Err:
    """Failed parse.

    Attributes:
        error: Why the input was rejected
    """

    error: ParseError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raise UnwrapError; an Err has no value."""
        raise UnwrapError(ErrorTemplate.unwrap_err(self.error))

    def unwrap_or[D](self, default: D) -> D:
        return default

    def unwrap_err(self) -> ParseError:
        return self.error


type ParseResult[T] = Ok[T] | Err


def is_parse_result(value: object) -> TypeIs[Ok[Any] | Err]:
    """Type guard: check that a callback returned Ok or Err."""
    return isinstance(value, Ok | Err)
