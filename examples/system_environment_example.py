"""Minimal example mapping property names against the current environment."""

import os

from propmap import PropertyName, SourceKind, mapper_for


def main() -> None:
    """Show flat names for a few property names and which variables are set."""
    mapper = mapper_for(SourceKind.SYSTEM_ENVIRONMENT)
    for text in ("server.port", "server.command-line-args", "servers[0].host"):
        name = PropertyName.of(text)
        for mapping in mapper.map_name(name):
            print(f"{name} -> {mapping.source_name} (set: {mapping.source_name in os.environ})")

    for key in sorted(os.environ):
        for mapping in mapper.map_source_name(key):
            print(f"{key} -> {mapping.name}")


if __name__ == "__main__":
    main()
