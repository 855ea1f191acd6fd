"""Tests for dtheader.core.errors - rendering failures."""

from dtheader.core.errors import HeaderParseError, render_expected, render_parse_error
from dtheader.core.models import ParseError


class TestRenderExpected:
    """Tests for render_expected."""

    def test_single(self):
        assert render_expected(["foo MAJOR.MINOR"]) == "foo MAJOR.MINOR"

    def test_many(self):
        assert render_expected(["'a'", "'b'"]) == "one of\n\t'a'\n\t'b'"


class TestRenderParseError:
    """Tests for render_parse_error and HeaderParseError."""

    def test_render(self):
        error = ParseError(index=30, line=2, column=5, expected=("TypeScript 4.0 is not yet supported.",))
        assert render_parse_error(error) == "At 2:5 : Expected TypeScript 4.0 is not yet supported."

    def test_render_alternatives(self):
        error = ParseError(index=0, line=1, column=1, expected=("'a'", "'b'"))
        assert render_parse_error(error) == "At 1:1 : Expected one of\n\t'a'\n\t'b'"

    def test_exception_carries_error(self):
        error = ParseError(index=0, line=1, column=1, expected=("'a'",))
        exc = HeaderParseError(error)
        assert exc.error is error
        assert str(exc) == "At 1:1 : Expected 'a'"

    def test_to_dict(self):
        error = ParseError(index=3, line=1, column=4, expected=("'a'",))
        assert error.to_dict() == {"index": 3, "line": 1, "column": 4, "expected": ["'a'"]}
