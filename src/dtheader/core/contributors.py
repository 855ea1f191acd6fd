"""
dtheader.core.contributors - Project URL and contributor list parsers.

Both lists accept any of these layouts:

    // Project: https://foo.com
    //          https://bar.com

    // Project: https://foo.com,
    //          https://bar.com

    // Project: https://foo.com, https://bar.com

A continuation line needs at least two spaces after "//" so it cannot be
confused with the "// Definitions by:" line that follows.
"""

import re
from typing import Optional

from dtheader.core.combinators import Parser, regex, sep_by1, seq_map
from dtheader.core.models import Author

GITHUB_PROFILE = "https://github.com/"

SEPARATOR = regex(r"(, )|(,?\r?\n//\s\s+)")

_GITHUB_USERNAME = re.compile(r"https://github\.com/([a-zA-Z0-9\-]+)")


def github_username(url: str) -> Optional[str]:
    """Username when url is exactly a GitHub profile URL, else None."""
    match = _GITHUB_USERNAME.fullmatch(url)
    return None if match is None else match.group(1)


project_parser: Parser = sep_by1(regex(r"[^,\r\n]+"), SEPARATOR).map(tuple)


def _strict_contributor() -> Parser:
    return seq_map(
        regex(r"([^<]+) ", 1),
        regex(r"<https://github\.com/([a-zA-Z0-9\-]+)>", 1),
        lambda name, username: Author(
            name=name, url=f"{GITHUB_PROFILE}{username}", github_username=username
        ),
    )


def _lenient_contributor() -> Parser:
    # Any URL, and trailing spaces, are tolerated.
    return seq_map(
        regex(r"([^<]+) ", 1),
        regex(r"<([^>]+)> *", 1),
        lambda name, url: Author(name=name, url=url, github_username=github_username(url)),
    )


def contributors_parser(strict: bool) -> Parser:
    """One or more "NAME <URL>" entries."""
    contributor = _strict_contributor() if strict else _lenient_contributor()
    return sep_by1(contributor, SEPARATOR).map(tuple)
