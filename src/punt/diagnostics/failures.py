"""ParseError variants.

A ParseError is a tagged union of immutable dataclasses. Every combinator
reports exactly one of these shapes inside an Err; none of them is an
exception and none of them wraps one.

Variants:
    Simple - bare symbolic reason (wrong input kind, wrong arity)
    MissingField - required key absent from a map
    NestedFailure - a sub-parser failed on one element of a collection
    PredicateFailure - predicate() returned something other than True
    Alternatives - every branch of one_of() failed
    Custom - caller-supplied failure value (fail(), transforms, selectors)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .codes import ErrorKind, Reason

if TYPE_CHECKING:
    from punt.core.parser import Parser

__all__ = [
    "Alternatives",
    "Custom",
    "MissingField",
    "NestedFailure",
    "ParseError",
    "PredicateFailure",
    "Simple",
]


@dataclass(frozen=True, slots=True)
class Simple:
    """Bare symbolic failure.

    Attributes:
        reason: Why the input was rejected, e.g. ``Reason.NOT_A_STRING``
    """

    reason: Reason

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.SIMPLE

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "reason": str(self.reason)}


@dataclass(frozen=True, slots=True)
class MissingField:
    """A required key was absent from a map-like input.

    Attributes:
        field: The key that was looked up
        input: The map it was looked up in
    """

    field: Hashable
    input: Any

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.MISSING_FIELD

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "field": _plain(self.field),
            "input": _plain(self.input),
        }


@dataclass(frozen=True, slots=True)
class NestedFailure:
    """A sub-parser rejected one element of a list, singleton or pair.

    Attributes:
        failed_element: The element the sub-parser was applied to
        details: The sub-parser's own error, unchanged
    """

    failed_element: Any
    details: ParseError

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.NESTED_FAILURE

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "failed_element": _plain(self.failed_element),
            "details": self.details.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class PredicateFailure:
    """predicate() did not return exactly ``True``.

    Attributes:
        input: The rejected input
        context: Caller-supplied context describing the predicate
    """

    input: Any
    context: Any = ()

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.PREDICATE_FAILURE

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "input": _plain(self.input),
            "context": _plain(self.context),
        }


@dataclass(frozen=True, slots=True)
class Alternatives:
    """Every decoder passed to one_of() failed.

    The only ParseError that aggregates: ``errors`` holds one entry per
    decoder, in decoder order.

    Attributes:
        input: The input every decoder rejected
        errors: Each decoder's error, in decoder order
        decoders: The decoders that were tried (excluded from equality)
    """

    input: Any
    errors: tuple[ParseError, ...]
    decoders: tuple[Parser[Any], ...] = field(default=(), compare=False, repr=False)

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.ALTERNATIVES

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "input": _plain(self.input),
            "errors": [error.to_dict() for error in self.errors],
        }


@dataclass(frozen=True, slots=True)
class Custom:
    """Arbitrary caller-supplied failure value.

    Attributes:
        reason: Whatever the caller passed to fail() or returned from a transform
    """

    reason: Any

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.CUSTOM

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "reason": _plain(self.reason)}


def _plain(value: Any) -> Any:
    """Make input data JSON-ready: map keys json cannot encode become their repr.

    Tuples become lists. Leaf values are left alone; json's ``default`` hook
    handles those.
    """
    match value:
        case Mapping():
            return {
                key if key is None or isinstance(key, str | int | float) else repr(key): _plain(item)
                for key, item in value.items()
            }
        case list() | tuple():
            return [_plain(item) for item in value]
        case _:
            return value


type ParseError = Simple | MissingField | NestedFailure | PredicateFailure | Alternatives | Custom
