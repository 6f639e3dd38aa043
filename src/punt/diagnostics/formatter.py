"""ParseError formatting service.

Renders ParseError trees as human-readable or machine-readable output.
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from punt.constants import MAX_CONTENT_LENGTH, MAX_FORMAT_DEPTH

from .failures import (
    Alternatives,
    Custom,
    MissingField,
    NestedFailure,
    ParseError,
    PredicateFailure,
    Simple,
)

__all__ = [
    "ErrorFormatter",
    "OutputFormat",
    "format_error",
]


class OutputFormat(StrEnum):
    """Output format options for ParseError formatting."""

    TEXT = "text"  # Indented tree (default)
    SIMPLE = "simple"  # Single line, outermost error only
    JSON = "json"  # JSON document for tooling integration


@dataclass(frozen=True, slots=True)
class ErrorFormatter:
    """ParseError formatting service.

    Attributes:
        output_format: Output style (text, simple, json)
        sanitize: Truncate input reprs to prevent information leakage
        max_content_length: Maximum repr length when sanitizing
        max_depth: Nesting depth after which TEXT output is elided

    Example:
        >>> error = NestedFailure(123, Simple(Reason.NOT_A_STRING))
        >>> print(ErrorFormatter().format(error))
        element 123 failed:
          not a string

        >>> print(ErrorFormatter(output_format=OutputFormat.SIMPLE).format(error))
        nested_failure: element 123 failed: not a string
    """

    output_format: OutputFormat = OutputFormat.TEXT
    sanitize: bool = False
    max_content_length: int = MAX_CONTENT_LENGTH
    max_depth: int = MAX_FORMAT_DEPTH

    def format(self, error: ParseError) -> str:
        """Format a single ParseError.

        Args:
            error: ParseError to format

        Returns:
            Formatted error string
        """
        match self.output_format:
            case OutputFormat.TEXT:
                return "\n".join(self._tree_lines(error, 0))
            case OutputFormat.SIMPLE:
                return f"{error.kind}: {self._summary(error)}"
            case OutputFormat.JSON:
                return json.dumps(error.to_dict(), ensure_ascii=False, default=repr)

    def _tree_lines(self, error: ParseError, depth: int) -> list[str]:
        indent = "  " * depth
        if depth >= self.max_depth:
            return [f"{indent}..."]

        match error:
            case NestedFailure(failed_element=element, details=details):
                head = f"{indent}element {self._show(element)} failed:"
                return [head, *self._tree_lines(details, depth + 1)]
            case Alternatives(input=value, errors=errors):
                head = f"{indent}all {len(errors)} alternatives failed for {self._show(value)}:"
                lines = [head]
                for position, sub in enumerate(errors):
                    lines.append(f"{indent}  [{position}]")
                    lines.extend(self._tree_lines(sub, depth + 2))
                return lines
            case _:
                return [f"{indent}{self._summary(error)}"]

    def _summary(self, error: ParseError) -> str:
        """One-line description of an error, recursing through nested details."""
        match error:
            case Simple(reason=reason):
                return str(reason)
            case MissingField(field=name, input=value):
                return f"missing field {name!r} in {self._show(value)}"
            case NestedFailure(failed_element=element, details=details):
                return f"element {self._show(element)} failed: {self._summary(details)}"
            case PredicateFailure(input=value, context=context):
                suffix = f" ({context!r})" if context else ""
                return f"predicate failed for {self._show(value)}{suffix}"
            case Alternatives(input=value, errors=errors):
                return f"all {len(errors)} alternatives failed for {self._show(value)}"
            case Custom(reason=reason):
                return f"{reason}"

    def _show(self, value: object) -> str:
        text = repr(value)
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text


def format_error(error: ParseError, output_format: OutputFormat = OutputFormat.TEXT) -> str:
    """Format a ParseError with default formatter settings."""
    return ErrorFormatter(output_format=output_format).format(error)
