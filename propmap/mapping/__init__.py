"""Property mappers and their selection by source kind."""

from __future__ import annotations

import enum

from .default import DEFAULT, DefaultPropertyMapper
from .protocol import NO_MAPPINGS, PropertyMapper, PropertyMapping
from .system_environment import SYSTEM_ENVIRONMENT, SystemEnvironmentPropertyMapper


class SourceKind(enum.Enum):
    """Naming convention used by a property source."""

    DEFAULT = "default"
    SYSTEM_ENVIRONMENT = "system-environment"


_MAPPERS: dict[SourceKind, tuple[PropertyMapper, ...]] = {
    SourceKind.DEFAULT: (DEFAULT,),
    SourceKind.SYSTEM_ENVIRONMENT: (DEFAULT, SYSTEM_ENVIRONMENT),
}


def mappers_for(kind: SourceKind) -> tuple[PropertyMapper, ...]:
    """Return the mappers to try for a source of ``kind``, in order."""
    return _MAPPERS[kind]


def mapper_for(kind: SourceKind) -> PropertyMapper:
    """Return the mapper specific to ``kind``."""
    return _MAPPERS[kind][-1]


__all__ = [
    "DEFAULT",
    "NO_MAPPINGS",
    "SYSTEM_ENVIRONMENT",
    "DefaultPropertyMapper",
    "PropertyMapper",
    "PropertyMapping",
    "SourceKind",
    "SystemEnvironmentPropertyMapper",
    "mapper_for",
    "mappers_for",
]
