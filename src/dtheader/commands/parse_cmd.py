"""
dtheader.commands.parse_cmd - Print the header parsed from each file.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List

from dtheader.commands.validate import load_configuration, wants_json
from dtheader.core.errors import render_parse_error
from dtheader.core.header import parse_header
from dtheader.core.models import Header, ParseError


def run(args: argparse.Namespace) -> int:
    """
    Run the parse command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 if every file parsed, 1 otherwise)
    """
    config = load_configuration(args)
    if config is None:
        return 1

    if args.strict is None:
        strict = config.get("header", {}).get("strict", False)
    else:
        strict = args.strict

    results: List[Dict] = []
    failed = 0
    for path in args.files:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read {path}: {e}", file=sys.stderr)
            failed += 1
            continue

        header = parse_header(text, strict=strict)
        if isinstance(header, ParseError):
            failed += 1
            print(f"{path}: {render_parse_error(header)}", file=sys.stderr)
            results.append({"file": str(path), "error": header.to_dict()})
        else:
            results.append({"file": str(path), "header": header.to_dict()})
            if not wants_json(args, config):
                print(format_header(path, header))

    if wants_json(args, config):
        print(json.dumps(results, indent=2))

    return 1 if failed else 0


def format_header(path: Path, header: Header) -> str:
    """Human-readable summary of a header."""
    lines = [
        str(path),
        f"  Library:      {header.library_name} "
        f"{header.library_major_version}.{header.library_minor_version}",
        f"  Non-npm:      {'yes' if header.non_npm else 'no'}",
        f"  TypeScript:   {header.typescript_version}",
        "  Projects:",
    ]
    lines.extend(f"    {project}" for project in header.projects)
    lines.append("  Contributors:")
    for author in header.contributors:
        suffix = f" (@{author.github_username})" if author.github_username else ""
        lines.append(f"    {author.name} <{author.url}>{suffix}")
    return "\n".join(lines)
