"""
dtheader.core.label - Split "// Type definitions for NAME VERSION" into parts.

The library name may itself contain digits, dots and spaces, so the
version is matched from the end of the line and whatever precedes it is
the name. Accepted version suffixes:

- MAJOR.MINOR
- MAJOR.MINORv or vMAJOR.MINOR (lenient only)
- MAJOR.MINOR.PATCH (lenient only)
- either component may be "x", which reads as 0
"""

import re
from typing import Optional

from dtheader.core.combinators import Parser, Reply, failure, success
from dtheader.core.models import Label

LABEL_EXPECTED = "foo MAJOR.MINOR"

_COMPONENT = r"[0-9]+|x"

# The lazy name leaves the longest possible version suffix to the anchored tail.
_LABEL_PATTERN = re.compile(
    r"(?P<name>.+?) "
    r"(?P<leading_v>v)?"
    rf"(?P<first>{_COMPONENT})\.(?P<second>{_COMPONENT})"
    r"(?:\.(?P<third>[0-9]+))?"
    r"(?P<trailing_v>v)?$"
)

_LINE_END = re.compile(r"\r|\n")


class LabelError(Exception):
    """A label line was rejected; message is the optional rule annotation."""

    def __init__(self, message: Optional[str]):
        super().__init__(_expected(message))
        self.message = message


def _parse_int(text: str) -> int:
    if text == "x":
        return 0
    try:
        return int(text, 10)
    except ValueError:
        raise ValueError(f"Error in parse_int({text!r})") from None


def _expected(message: Optional[str] = None) -> str:
    if message is None:
        return LABEL_EXPECTED
    return f"{LABEL_EXPECTED} ({message})"


def split_label(line: str, strict: bool) -> Label:
    """
    Split a label line (without its terminator) into name and version.

    Args:
        line: Text after "Type definitions for "
        strict: Reject suffixes only tolerated for older headers

    Returns:
        The parsed Label

    Raises:
        LabelError: If the line is empty or violates a strict-mode rule
    """
    match = _LABEL_PATTERN.match(line)
    if match is None:
        if not line:
            raise LabelError(None)
        if strict:
            raise LabelError("needs MAJOR.MINOR")
        return Label(name=line, major=0, minor=0)

    if match.group("third") is not None:
        if strict:
            raise LabelError("patch version not allowed")
        # Older headers: the last component is reported as major.
        major, minor = match.group("third"), match.group("second")
    else:
        major, minor = match.group("first"), match.group("second")

    if strict and (match.group("leading_v") or match.group("trailing_v")):
        raise LabelError("'v' not allowed")

    return Label(name=match.group("name"), major=_parse_int(major), minor=_parse_int(minor))


def label_parser(strict: bool) -> Parser:
    """Parser for the label line and its line terminator."""

    def run(text: str, index: int) -> Reply:
        found = _LINE_END.search(text, index)
        if found is None:
            return failure(index, _expected("EOF"))
        end_index = found.start()
        # Step past "\r\n" or "\n".
        end = end_index + 2 if text[end_index] == "\r" else end_index + 1
        try:
            label = split_label(text[index:end_index], strict)
        except LabelError as e:
            return failure(index, str(e))
        return success(end, label)

    return Parser(run)
