"""
dtheader.cli - Command-line interface.

Main entry point for the dtheader CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dtheader import __version__
from dtheader.commands import parse_cmd, validate, versions_cmd


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dtheader",
        description="Parse and validate DefinitelyTyped declaration headers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dtheader parse types/foo/index.d.ts        # Show the parsed header
  dtheader parse --strict index.d.ts -j      # Strict parse, JSON output
  dtheader validate types/                   # Lint every index.d.ts under types/
  dtheader versions                          # List known TypeScript versions
  dtheader versions --tags 3.1               # dist-tags to move when 3.1 ships

Configuration:
  .dtheader.toml in the current directory or any parent, or --config PATH.
  Any key can be overridden with DTHEADER_<SECTION>_<KEY>.

For detailed command help: dtheader <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"dtheader {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse headers and print the result",
    )
    parse_parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Declaration files to parse",
        metavar="FILE",
    )
    mode = parse_parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--strict",
        dest="strict",
        action="store_const",
        const=True,
        default=None,
        help="Use the strict rules (as validate does)",
    )
    mode.add_argument(
        "--lenient",
        dest="strict",
        action="store_const",
        const=False,
        help="Use the lenient rules (default)",
    )
    parse_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output JSON",
    )

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Strictly validate every declaration header",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dtheader validate                  # Check index.d.ts files under the current directory
  dtheader validate types/foo        # Check one package
  dtheader validate -j               # Output JSON for tooling
""",
    )
    validate_parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Files or directories (default: current directory)",
        metavar="PATH",
    )
    validate_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output JSON",
    )

    # versions command
    versions_parser = subparsers.add_parser(
        "versions",
        help="Query the TypeScript version table",
    )
    query = versions_parser.add_mutually_exclusive_group()
    query.add_argument(
        "--check",
        help="Report whether VERSION is known and supported",
        metavar="VERSION",
    )
    query.add_argument(
        "--range",
        help="Supported versions from MIN onwards",
        metavar="MIN",
    )
    query.add_argument(
        "--previous",
        help="Supported version before VERSION",
        metavar="VERSION",
    )
    query.add_argument(
        "--tags",
        help="dist-tags to repoint when VERSION is published",
        metavar="VERSION",
    )
    query.add_argument(
        "--redirectable",
        help="Whether VERSION supports typesVersions redirects",
        metavar="VERSION",
    )
    query.add_argument(
        "--types-versions",
        help="package.json typesVersions for supported versions from MIN onwards",
        metavar="MIN",
    )
    versions_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output JSON",
    )

    # version command
    subparsers.add_parser(
        "version",
        help="Show version",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install dtheader[completion]
    # Then activate: eval "$(register-python-argcomplete dtheader)"
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "parse":
            return parse_cmd.run(args)
        elif args.command == "validate":
            return validate.run(args)
        elif args.command == "versions":
            return versions_cmd.run(args)
        elif args.command == "version":
            print(f"dtheader {__version__}")
            return 0
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
