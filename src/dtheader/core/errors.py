"""
dtheader.core.errors - Render parse failures for people.
"""

from typing import Sequence

from dtheader.core.models import ParseError


class HeaderParseError(ValueError):
    """Raised by the fail-fast entry point; .error holds the ParseError."""

    def __init__(self, error: ParseError):
        super().__init__(render_parse_error(error))
        self.error = error


def render_expected(expected: Sequence[str]) -> str:
    """A single alternative verbatim, otherwise a tab-indented "one of" list."""
    if len(expected) == 1:
        return expected[0]
    return "one of\n\t" + "\n\t".join(expected)


def render_parse_error(error: ParseError) -> str:
    """
    Format a ParseError as "At LINE:COLUMN : Expected ...".

    Args:
        error: The failure to render

    Returns:
        The diagnostic message
    """
    return f"At {error.line}:{error.column} : Expected {render_expected(error.expected)}"
