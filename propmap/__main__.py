"""Interface for ``python -m propmap``."""

from __future__ import annotations

import logging
from argparse import ArgumentParser
from typing import TYPE_CHECKING

from ._version import version
from .errors import InvalidPropertyNameError
from .mapping import SourceKind, mapper_for
from .names import PropertyName


if TYPE_CHECKING:
    from argparse import Namespace
    from collections.abc import Sequence


__all__ = ["main"]

logger = logging.getLogger(__name__)


def _map_name(parser: ArgumentParser, args: Namespace) -> int:
    try:
        name = PropertyName.of(args.name)
    except InvalidPropertyNameError as exc:
        parser.error(str(exc))

    for mapping in mapper_for(args.source).map_name(name):
        print(mapping.source_name)
    return 0


def _map_source_name(_parser: ArgumentParser, args: Namespace) -> int:
    mappings = mapper_for(args.source).map_source_name(args.source_name)
    if not mappings:
        logger.debug("no property name for source name %r", args.source_name)
        return 1
    for mapping in mappings:
        print(mapping.name)
    return 0


def _check_ancestor(parser: ArgumentParser, args: Namespace) -> int:
    try:
        name = PropertyName.of(args.name)
        candidate = PropertyName.of(args.candidate)
    except InvalidPropertyNameError as exc:
        parser.error(str(exc))

    result = mapper_for(args.source).is_ancestor_of(name, candidate)
    logger.debug("%s ancestor of %s using %s: %s", name, candidate, args.source.value, result)
    print("true" if result else "false")
    return 0 if result else 1


def main(args: Sequence[str] | None = None) -> int:
    """Argument parser for the CLI."""
    parser = ArgumentParser(prog="propmap")
    _ = parser.add_argument("-V", "--version", action="version", version=version)
    _ = parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    _ = parser.add_argument(
        "--source",
        type=SourceKind,
        choices=list(SourceKind),
        default=SourceKind.SYSTEM_ENVIRONMENT,
        metavar="{" + ",".join(kind.value for kind in SourceKind) + "}",
        help="naming convention of the property source (default: system-environment)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    name_parser = commands.add_parser("name", help="list source names for a property name")
    _ = name_parser.add_argument("name")
    name_parser.set_defaults(handler=_map_name)

    source_parser = commands.add_parser("source", help="show the property name for a source name")
    _ = source_parser.add_argument("source_name")
    source_parser.set_defaults(handler=_map_source_name)

    ancestor_parser = commands.add_parser("ancestor", help="test whether NAME is an ancestor of CANDIDATE")
    _ = ancestor_parser.add_argument("name")
    _ = ancestor_parser.add_argument("candidate")
    ancestor_parser.set_defaults(handler=_check_ancestor)

    parsed = parser.parse_args(args)
    logging.basicConfig(level=logging.DEBUG if parsed.verbose else logging.WARNING)
    return parsed.handler(parser, parsed)


if __name__ == "__main__":
    raise SystemExit(main())
