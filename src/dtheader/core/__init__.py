"""
dtheader.core - Header grammar, version table and data models
"""

from dtheader.core.errors import HeaderParseError, render_expected, render_parse_error
from dtheader.core.header import (
    parse_header,
    parse_header_or_fail,
    parse_typescript_version_line,
    validate,
)
from dtheader.core.models import Author, Header, Label, ParseError

__all__ = [
    "Author",
    "Header",
    "HeaderParseError",
    "Label",
    "ParseError",
    "parse_header",
    "parse_header_or_fail",
    "parse_typescript_version_line",
    "render_expected",
    "render_parse_error",
    "validate",
]
