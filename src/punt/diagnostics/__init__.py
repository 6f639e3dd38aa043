"""Diagnostic system for punt.

Two separate channels live here:

- ParseError values (Simple, MissingField, NestedFailure, PredicateFailure,
  Alternatives, Custom): plain data describing why an input was rejected.
  Returned inside Err, never raised.
- PuntError exceptions: raised for caller errors such as drawing samples from
  a parser that has no generator.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorKind, Reason
from .errors import (
    NoGeneratorError,
    ParserDefinitionError,
    PuntError,
    ResultContractError,
    UnwrapError,
)
from .failures import (
    Alternatives,
    Custom,
    MissingField,
    NestedFailure,
    ParseError,
    PredicateFailure,
    Simple,
)
from .formatter import ErrorFormatter, OutputFormat, format_error
from .templates import ErrorTemplate

__all__ = [
    "Alternatives",
    "Custom",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorFormatter",
    "ErrorKind",
    "ErrorTemplate",
    "MissingField",
    "NestedFailure",
    "NoGeneratorError",
    "OutputFormat",
    "ParseError",
    "ParserDefinitionError",
    "PredicateFailure",
    "PuntError",
    "Reason",
    "ResultContractError",
    "Simple",
    "UnwrapError",
    "format_error",
]
