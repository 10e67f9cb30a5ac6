"""Property mapper for sources already keyed by canonical names."""

from __future__ import annotations

from typing import ClassVar, override

from propmap.names import PropertyName

from .protocol import NO_MAPPINGS, PropertyMapper, PropertyMapping


class DefaultPropertyMapper(PropertyMapper):
    """Identity mapping, ``server.port`` is looked up as ``server.port``."""

    INSTANCE: ClassVar[DefaultPropertyMapper]

    __slots__ = ()

    @override
    def map_name(self, name: PropertyName) -> tuple[PropertyMapping, ...]:
        """Return the canonical text of ``name`` as its only source name."""
        return (PropertyMapping(str(name), name),)

    @override
    def map_source_name(self, source_name: str) -> tuple[PropertyMapping, ...]:
        """Return the property name for canonical text, or ``NO_MAPPINGS`` when it is invalid."""
        name = PropertyName.of_if_valid(source_name)
        if name is None or name.is_empty():
            return NO_MAPPINGS
        return (PropertyMapping(source_name, name),)

    @override
    def is_ancestor_of(self, name: PropertyName, candidate: PropertyName) -> bool:
        """Return True when ``name`` is a plain ancestor of ``candidate``."""
        return name.is_ancestor_of(candidate)

    @override
    def __repr__(self) -> str:
        return "DefaultPropertyMapper()"


DefaultPropertyMapper.INSTANCE = DefaultPropertyMapper()
DEFAULT = DefaultPropertyMapper.INSTANCE
