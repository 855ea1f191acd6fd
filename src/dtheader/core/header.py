"""
dtheader.core.header - Parse the comment header of a declaration file.

Example header:

    // Type definitions for foo 1.2
    // Project: https://github.com/foo/foo, https://foo.com
    // Definitions by: My Self <https://github.com/me>, Some Other Guy <https://github.com/otherguy>
    // Definitions: https://github.com/DefinitelyTyped/DefinitelyTyped
    // TypeScript Version: 2.1

Only the header is parsed; the rest of the file is ignored.
"""

from typing import Optional, Union

from dtheader.core import versions
from dtheader.core.combinators import (
    Parser,
    everything,
    fail,
    regex,
    seq_map,
    string,
    succeed,
)
from dtheader.core.contributors import contributors_parser, project_parser
from dtheader.core.errors import HeaderParseError
from dtheader.core.label import label_parser
from dtheader.core.models import Header, ParseError

# Assumed when a header has no "TypeScript Version" line.
# Kept equal to versions.LOWEST by hand.
DEFAULT_TYPESCRIPT_VERSION = "2.8"

NON_NPM_MARKER = "non-npm package "


def _check_typescript_version(token: str) -> Parser:
    if versions.is_typescript_version(token):
        return succeed(token)
    return fail(f"TypeScript {token} is not yet supported.")


_declared_version = regex(r"// (?:Minimum )?TypeScript Version: ([0-9]\.[0-9])", 1)

_typescript_version_line = _declared_version.chain(_check_typescript_version)

# A missing line falls back to the default; a present but unknown version fails.
_typescript_version = (
    regex(r"\r?\n")
    .then(_declared_version)
    .fallback(None)
    .chain(
        lambda token: succeed(DEFAULT_TYPESCRIPT_VERSION)
        if token is None
        else _check_typescript_version(token)
    )
)

# The URL is not checked.
_definitions = regex(r"\r?\n// Definitions: [^\r\n]+")


def _assemble(prefix, label, _project, projects, _by, contributors, _defs, ts_version, _rest):
    return Header(
        non_npm=prefix.endswith(NON_NPM_MARKER),
        library_name=label.name,
        library_major_version=label.major,
        library_minor_version=label.minor,
        typescript_version=ts_version,
        projects=projects,
        contributors=contributors,
    )


def header_parser(strict: bool) -> Parser:
    """Grammar for the full header in the given mode."""
    return seq_map(
        regex(r"// Type definitions for (non-npm package )?"),
        label_parser(strict),
        string("// Project: "),
        project_parser,
        regex(r"\r?\n// Definitions by: "),
        contributors_parser(strict),
        _definitions,
        _typescript_version,
        everything,
        _assemble,
    )


_parsers = {True: header_parser(True), False: header_parser(False)}


def parse_header(text: str, strict: bool) -> Union[Header, ParseError]:
    """
    Parse the header at the start of text.

    Args:
        text: Contents of a declaration file
        strict: Reject constructs that are only tolerated in older headers

    Returns:
        The Header, or a ParseError describing the furthest failure
    """
    return _parsers[strict].parse(text)


def parse_header_or_fail(text: str) -> Header:
    """
    Leniently parse the header, raising on failure.

    Raises:
        HeaderParseError: If the header does not parse
    """
    header = parse_header(text, strict=False)
    if isinstance(header, ParseError):
        raise HeaderParseError(header)
    return header


def validate(text: str) -> Optional[ParseError]:
    """Strictly parse the header; return the failure, or None if it is valid."""
    header = parse_header(text, strict=True)
    return header if isinstance(header, ParseError) else None


def parse_typescript_version_line(line: str) -> str:
    """
    Parse a lone "// TypeScript Version: D.D" line.

    Raises:
        ValueError: If the line is malformed or names an unknown version
    """
    result = _typescript_version_line.parse(line)
    if isinstance(result, ParseError):
        raise ValueError(f"Could not parse version: line is '{line}'")
    return result
