"""nsloader CLI — inspect how identifiers resolve against a prefix table.

Entry point registered as ``nsloader`` in ``pyproject.toml``::

    [project.scripts]
    nsloader = "nsloader.cli:main"
"""

import argparse
import sys


def _add_table_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("identifier", help="Fully-qualified identifier (e.g. Plugin.Models.User)")
    parser.add_argument(
        "--map",
        dest="mappings",
        action="append",
        default=[],
        metavar="PREFIX=DIR",
        help="Register a base directory for a namespace prefix (repeatable)",
    )
    parser.add_argument("--delimiter", default=None, help="Namespace delimiter (default: .)")
    parser.add_argument("--extension", default=None, help="Source file extension (default: .py)")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``nsloader`` command."""
    parser = argparse.ArgumentParser(
        prog="nsloader",
        description="nsloader — namespace-to-directory loading for plugins.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- nsloader resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Print the file an identifier resolves to")
    _add_table_arguments(resolve_parser)
    resolve_parser.add_argument(
        "--load",
        action="store_true",
        help="Execute the resolved file as a Python module",
    )

    # -- nsloader candidates ----------------------------------------------
    candidates_parser = subparsers.add_parser(
        "candidates", help="List every path tried for an identifier, in order"
    )
    _add_table_arguments(candidates_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "resolve":
        from nsloader.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "candidates":
        from nsloader.cli._resolve import run_candidates

        run_candidates(args)
