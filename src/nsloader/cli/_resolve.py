"""``nsloader resolve`` and ``nsloader candidates`` commands.

Both build a ``PrefixResolver`` from repeated ``--map PREFIX=DIR``
options. ``resolve`` exits with code 1 when nothing matches.
"""

import argparse
import sys

from nsloader.config import ResolverConfig
from nsloader.errors import ConfigurationError, LoadError
from nsloader.loaders import ModuleFileLoader, PathLoader
from nsloader.resolver import PrefixResolver


def parse_mapping(value: str) -> tuple[str, str]:
    """Split a ``PREFIX=DIR`` option value.

    Raises:
        ConfigurationError: If the value has no ``=`` or an empty directory.
    """
    prefix, sep, base_dir = value.partition("=")
    if not sep or not base_dir:
        msg = f"Invalid mapping {value!r}, expected PREFIX=DIR"
        raise ConfigurationError(msg)
    return prefix, base_dir


def build_resolver(args: argparse.Namespace, *, load: bool = False) -> PrefixResolver:
    """Build a resolver from parsed CLI arguments."""
    overrides: dict[str, str] = {}
    if args.delimiter is not None:
        overrides["delimiter"] = args.delimiter
    if args.extension is not None:
        overrides["extension"] = args.extension
    config = ResolverConfig(**overrides)

    loader = ModuleFileLoader(config.delimiter) if load else PathLoader()
    resolver = PrefixResolver(config, loader=loader)
    for value in args.mappings:
        resolver.register(*parse_mapping(value))
    return resolver


def _build_or_exit(args: argparse.Namespace, *, load: bool = False) -> PrefixResolver:
    try:
        return build_resolver(args, load=load)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def run_resolve(args: argparse.Namespace) -> None:
    """Print the resolved path, or exit 1 if the identifier is not found."""
    resolver = _build_or_exit(args, load=args.load)
    try:
        result = resolver.resolve(args.identifier)
    except LoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not result.found:
        print(f"Not found: {args.identifier}", file=sys.stderr)
        raise SystemExit(1)
    print(result.path)


def run_candidates(args: argparse.Namespace) -> None:
    """Print every candidate path in lookup order."""
    resolver = _build_or_exit(args)
    for path in resolver.candidates(args.identifier):
        print(path)
