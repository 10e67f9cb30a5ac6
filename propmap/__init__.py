"""propmap - map configuration property names to environment variable names and back"""

from ._version import version as __version__
from .errors import InvalidPropertyNameError, PropmapError
from .mapping import (
    NO_MAPPINGS,
    DefaultPropertyMapper,
    PropertyMapper,
    PropertyMapping,
    SourceKind,
    SystemEnvironmentPropertyMapper,
    mapper_for,
    mappers_for,
)
from .names import Form, PropertyName


__all__ = [
    "NO_MAPPINGS",
    "DefaultPropertyMapper",
    "Form",
    "InvalidPropertyNameError",
    "PropertyMapper",
    "PropertyMapping",
    "PropertyName",
    "PropmapError",
    "SourceKind",
    "SystemEnvironmentPropertyMapper",
    "__version__",
    "mapper_for",
    "mappers_for",
]
