"""
dtheader.core.models - Data models for parsed declaration headers.

Provides frozen dataclasses for the header record, its contributors,
and positioned parse failures.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Author:
    """
    A contributor listed under "Definitions by:".

    Attributes:
        name: Display name
        url: Profile or home page URL
        github_username: Set only when url is exactly https://github.com/<user>
    """

    name: str
    url: str
    github_username: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "url": self.url,
            "githubUsername": self.github_username,
        }


@dataclass(frozen=True)
class Label:
    """Library name and version from the first header line."""

    name: str
    major: int
    minor: int


@dataclass(frozen=True)
class Header:
    """
    Metadata parsed from the comment block at the top of an index.d.ts.

    Attributes:
        non_npm: True for "Type definitions for non-npm package ..."
        library_name: Name taken from the first line
        library_major_version: Major version (0 when absent in lenient mode)
        library_minor_version: Minor version (0 when absent in lenient mode)
        typescript_version: Minimum TypeScript version, declared or defaulted
        projects: Project URLs, in order
        contributors: Contributors, in order
    """

    non_npm: bool
    library_name: str
    library_major_version: int
    library_minor_version: int
    typescript_version: str
    projects: Tuple[str, ...] = field(default_factory=tuple)
    contributors: Tuple[Author, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the published camelCase field names."""
        return {
            "nonNpm": self.non_npm,
            "libraryName": self.library_name,
            "libraryMajorVersion": self.library_major_version,
            "libraryMinorVersion": self.library_minor_version,
            "typeScriptVersion": self.typescript_version,
            "projects": list(self.projects),
            "contributors": [c.to_dict() for c in self.contributors],
        }


@dataclass(frozen=True)
class ParseError:
    """
    Where and why a header failed to parse.

    Attributes:
        index: Character offset of the failure
        line: 1-based line number
        column: 1-based column number
        expected: Descriptions of what could have matched at index
    """

    index: int
    line: int
    column: int
    expected: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "line": self.line,
            "column": self.column,
            "expected": list(self.expected),
        }
