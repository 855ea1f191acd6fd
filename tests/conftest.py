"""Shared fixtures for dtheader tests."""

import pytest

FOO_HEADER = (
    "// Type definitions for foo 1.2\n"
    "// Project: https://github.com/foo/foo, https://foo.com\n"
    "// Definitions by: My Self <https://github.com/me>, Some Other Guy <https://github.com/otherguy>\n"
    "// Definitions: https://github.com/DefinitelyTyped/DefinitelyTyped\n"
    "// TypeScript Version: 3.1\n"
    "\n"
    "export function foo(): void;\n"
)


def make_header(
    label="foo 1.2",
    project="https://github.com/foo/foo",
    contributors="My Self <https://github.com/me>",
    typescript=None,
    newline="\n",
    non_npm=False,
):
    """Build header text from parts; typescript=None omits that line."""
    prefix = "// Type definitions for non-npm package " if non_npm else "// Type definitions for "
    lines = [
        f"{prefix}{label}",
        f"// Project: {project}",
        f"// Definitions by: {contributors}",
        "// Definitions: https://github.com/DefinitelyTyped/DefinitelyTyped",
    ]
    if typescript is not None:
        lines.append(f"// TypeScript Version: {typescript}")
    return newline.join(lines) + newline


@pytest.fixture
def foo_header():
    """A complete, strictly valid header followed by declarations."""
    return FOO_HEADER


@pytest.fixture
def types_dir(tmp_path):
    """A types/ tree with one valid and one invalid package."""
    types = tmp_path / "types"
    (types / "foo").mkdir(parents=True)
    (types / "foo" / "index.d.ts").write_text(FOO_HEADER, encoding="utf-8")
    (types / "bar").mkdir()
    (types / "bar" / "index.d.ts").write_text(
        make_header(label="bar 1.2.3"), encoding="utf-8"
    )
    return types


@pytest.fixture
def header_text():
    """The make_header builder."""
    return make_header
