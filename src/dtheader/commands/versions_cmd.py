"""
dtheader.commands.versions_cmd - Query the TypeScript version table.

Registry functions assert on unknown versions, so arguments are checked
here first and reported as ordinary errors.
"""

import argparse
import json
import sys
from typing import Any, Tuple

from dtheader.core import versions
from dtheader.utilities.types_versions import make_types_versions_for_package_json


def run(args: argparse.Namespace) -> int:
    """
    Run the versions command.

    With no query option, lists every known version and its status.

    Returns:
        Exit code (0 on success, 1 for an unknown version)
    """
    if args.check:
        known = versions.is_typescript_version(args.check)
        result: Any = {
            "version": args.check,
            "known": known,
            "supported": versions.is_supported(args.check),
        }
        _emit(args, result, _describe_check(args.check))
        return 0 if known else 1

    if args.range:
        if not _require(args.range, versions.SUPPORTED):
            return 1
        result = list(versions.version_range(args.range))
        return _emit(args, result, "\n".join(result))

    if args.previous:
        if not _require(args.previous, versions.SUPPORTED):
            return 1
        result = versions.previous(args.previous)
        return _emit(args, result, result or "(none)")

    if args.tags:
        if not _require(args.tags, versions.SUPPORTED):
            return 1
        result = list(versions.tags_to_update(args.tags))
        return _emit(args, result, "\n".join(result))

    if args.redirectable:
        if not _require(args.redirectable, versions.ALL):
            return 1
        result = versions.is_redirectable(args.redirectable)
        return _emit(args, result, "yes" if result else "no")

    if args.types_versions:
        if not _require(args.types_versions, versions.SUPPORTED):
            return 1
        result = make_types_versions_for_package_json(versions.version_range(args.types_versions))
        return _emit(args, result, json.dumps(result, indent=2))

    table = [
        {"version": v, "supported": versions.is_supported(v)} for v in versions.ALL
    ]
    text = "\n".join(
        f"{row['version']}  {'supported' if row['supported'] else 'unsupported'}" for row in table
    )
    text += f"\n\nlowest: {versions.LOWEST}\nlatest: {versions.LATEST}"
    return _emit(args, {"versions": table, "lowest": versions.LOWEST, "latest": versions.LATEST}, text)


def _require(version: str, allowed: Tuple[str, ...]) -> bool:
    if version in allowed:
        return True
    kind = "supported" if allowed is versions.SUPPORTED else "known"
    print(f"Error: {version} is not a {kind} TypeScript version", file=sys.stderr)
    return False


def _describe_check(version: str) -> str:
    if versions.is_supported(version):
        return f"{version} is supported"
    if versions.is_typescript_version(version):
        return f"{version} is known but no longer supported"
    return f"{version} is not a known TypeScript version"


def _emit(args: argparse.Namespace, result: Any, text: str) -> int:
    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print(text)
    return 0
