"""
dtheader.commands.validate - Strictly validate declaration headers.

Finds every file matching the configured patterns and reports the
first header problem in each.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from dtheader.config import find_config_file, load_config, load_default_config
from dtheader.core.errors import render_parse_error
from dtheader.core.header import parse_header
from dtheader.core.models import ParseError


def run(args: argparse.Namespace) -> int:
    """
    Run the validate command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 if every header is valid, 1 otherwise)
    """
    config = load_configuration(args)
    if config is None:
        return 1

    files_config = config.get("files", {})
    files = find_header_files(
        args.paths or [Path.cwd()],
        patterns=files_config.get("patterns", []),
        skip=files_config.get("skip", []),
    )
    if not files:
        print("No declaration files found.", file=sys.stderr)
        return 1

    strict = config.get("validate", {}).get("strict", True)
    results = []
    for path in files:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            results.append({"file": str(path), "valid": False, "message": f"Cannot read: {e}"})
            continue
        header = parse_header(text, strict=strict)
        if isinstance(header, ParseError):
            results.append(
                {
                    "file": str(path),
                    "valid": False,
                    "message": render_parse_error(header),
                    "error": header.to_dict(),
                }
            )
        else:
            results.append({"file": str(path), "valid": True})

    invalid = [r for r in results if not r["valid"]]

    if wants_json(args, config):
        print(json.dumps(results, indent=2))
    else:
        for result in invalid:
            print(f"{result['file']}: {result['message']}")
        if not args.quiet:
            if invalid:
                print(f"❌ {len(invalid)}/{len(results)} headers invalid")
            else:
                print(f"✓ {len(results)} headers valid")

    return 1 if invalid else 0


def find_header_files(paths: List[Path], patterns: List[str], skip: List[str]) -> List[Path]:
    """
    Expand paths into the declaration files to check.

    Files given directly are always included; directories are searched
    recursively for names matching patterns.

    Args:
        paths: Files or directories
        patterns: Glob patterns for file names (e.g. "index.d.ts")
        skip: Directory names to ignore while searching

    Returns:
        Sorted, de-duplicated list of files
    """
    found = set()
    for path in paths:
        path = Path(path)
        if path.is_file():
            found.add(path)
            continue
        if not path.is_dir():
            continue
        for pattern in patterns:
            for candidate in path.rglob(pattern):
                relative = candidate.relative_to(path)
                if any(part in skip for part in relative.parts[:-1]):
                    continue
                if candidate.is_file():
                    found.add(candidate)
    return sorted(found)


def load_configuration(args: argparse.Namespace) -> Optional[Dict]:
    """Load configuration from file or use defaults."""
    if getattr(args, "config", None):
        config_path = args.config
    else:
        config_path = find_config_file(Path.cwd())

    try:
        if config_path and config_path.exists():
            return load_config(config_path)
        return load_default_config()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return None


def wants_json(args: argparse.Namespace, config: Dict) -> bool:
    """JSON when -j was given or the config asks for it."""
    return bool(getattr(args, "json", False)) or config.get("output", {}).get("format") == "json"
