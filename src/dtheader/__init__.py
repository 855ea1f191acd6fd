"""
dtheader - Parse and validate DefinitelyTyped declaration headers

Reads the "// Type definitions for ..." comment block at the top of an
index.d.ts and turns it into a Header record, in a lenient mode for
extraction or a strict mode for linting.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dtheader")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__author__ = "dtheader contributors"
__license__ = "MIT"

from dtheader.core import (
    Author,
    Header,
    HeaderParseError,
    ParseError,
    parse_header,
    parse_header_or_fail,
    parse_typescript_version_line,
    render_expected,
    render_parse_error,
    validate,
)
from dtheader.utilities.types_versions import make_types_versions_for_package_json

__all__ = [
    "__version__",
    "Author",
    "Header",
    "HeaderParseError",
    "ParseError",
    "make_types_versions_for_package_json",
    "parse_header",
    "parse_header_or_fail",
    "parse_typescript_version_line",
    "render_expected",
    "render_parse_error",
    "validate",
]
