"""Error message templates.

Centralized message templates for caller-error diagnostics.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized caller-error message templates.

    All exception messages are created here, keeping exception constructors
    free of f-strings and giving tests one place to compare against.
    """

    @staticmethod
    def not_a_parser(combinator: str, received: object) -> Diagnostic:
        """A combinator received something that is not a Parser.

        Args:
            combinator: Name of the combinator being built
            received: The offending argument

        Returns:
            Diagnostic for NOT_A_PARSER
        """
        msg = f"'{combinator}' expected a Parser, got {type(received).__name__}"
        return Diagnostic(
            code=DiagnosticCode.NOT_A_PARSER,
            message=msg,
            hint="Build child parsers with punt combinators such as string() or get()",
            combinator=combinator,
        )

    @staticmethod
    def not_callable(combinator: str, received: object) -> Diagnostic:
        """A combinator received a non-callable where a function is required."""
        msg = f"'{combinator}' expected a callable, got {type(received).__name__}"
        return Diagnostic(
            code=DiagnosticCode.NOT_CALLABLE,
            message=msg,
            combinator=combinator,
        )

    @staticmethod
    def negative_index(position: int) -> Diagnostic:
        """index() was given a negative position."""
        msg = f"Index must be >= 0, got {position}"
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_INDEX,
            message=msg,
            hint="Positions are counted from the start of the list",
            combinator="index",
        )

    @staticmethod
    def empty_path() -> Diagnostic:
        """get_in() was given an empty key path."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_PATH,
            message="Key path must contain at least one key",
            hint="Apply the inner parser directly when no keys are needed",
            combinator="get_in",
        )

    @staticmethod
    def empty_alternatives() -> Diagnostic:
        """one_of() was given no decoders."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_ALTERNATIVES,
            message="one_of requires at least one decoder",
            hint="Use fail(reason) for a parser that rejects everything",
            combinator="one_of",
        )

    @staticmethod
    def transform_not_a_result(combinator: str, received: object) -> Diagnostic:
        """A map transform returned something other than Ok or Err.

        Args:
            combinator: Name of the combinator whose callback misbehaved
            received: The value the callback returned

        Returns:
            Diagnostic for TRANSFORM_NOT_A_RESULT
        """
        msg = (
            f"Transform passed to '{combinator}' must return Ok or Err, "
            f"got {type(received).__name__}"
        )
        return Diagnostic(
            code=DiagnosticCode.TRANSFORM_NOT_A_RESULT,
            message=msg,
            hint="Wrap the transformed value in Ok(...) or report Err(Custom(...))",
            combinator=combinator,
        )

    @staticmethod
    def selector_not_a_parser(received: object) -> Diagnostic:
        """An and_then selector returned something other than a Parser."""
        msg = f"Selector passed to 'and_then' must return a Parser, got {type(received).__name__}"
        return Diagnostic(
            code=DiagnosticCode.SELECTOR_NOT_A_PARSER,
            message=msg,
            hint="Return fail(reason) from the selector to reject a discriminator value",
            combinator="and_then",
        )

    @staticmethod
    def no_generator(combinator: str) -> Diagnostic:
        """generate() was called on a parser without a generator.

        Args:
            combinator: Name of the combinator that built the parser

        Returns:
            Diagnostic for NO_GENERATOR
        """
        msg = f"Parser built by '{combinator}' has no generator"
        return Diagnostic(
            code=DiagnosticCode.NO_GENERATOR,
            message=msg,
            hint="Pass generator=... or compose with parsers that define one",
            combinator=combinator,
        )

    @staticmethod
    def unwrap_err(error: object) -> Diagnostic:
        """unwrap() was called on an Err."""
        msg = f"Called unwrap() on Err: {error!r}"
        return Diagnostic(
            code=DiagnosticCode.UNWRAP_ERR,
            message=msg,
            hint="Check is_ok() first or use unwrap_or(default)",
        )

    @staticmethod
    def unwrap_ok(value: object) -> Diagnostic:
        """unwrap_err() was called on an Ok."""
        msg = f"Called unwrap_err() on Ok: {value!r}"
        return Diagnostic(
            code=DiagnosticCode.UNWRAP_OK,
            message=msg,
        )
