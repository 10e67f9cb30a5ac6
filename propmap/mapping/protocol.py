"""Property mapper interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final


if TYPE_CHECKING:
    from propmap.names import PropertyName


@dataclass(frozen=True, slots=True)
class PropertyMapping:
    """A source name paired with the property name it represents."""

    source_name: str
    name: PropertyName

    def is_applicable(self, name: PropertyName) -> bool:
        """Return True when this mapping refers to ``name``."""
        return self.name == name


NO_MAPPINGS: Final[tuple[PropertyMapping, ...]] = ()


class PropertyMapper(ABC):
    """Strategy translating between property names and a source's own keys."""

    __slots__ = ()

    @abstractmethod
    def map_name(self, name: PropertyName) -> tuple[PropertyMapping, ...]:
        """Return the source names that may hold ``name``, most preferred first."""

    @abstractmethod
    def map_source_name(self, source_name: str) -> tuple[PropertyMapping, ...]:
        """Return the property name a source key represents, or ``NO_MAPPINGS``."""

    @abstractmethod
    def is_ancestor_of(self, name: PropertyName, candidate: PropertyName) -> bool:
        """Return True when ``name`` is an ancestor of ``candidate`` for this source."""
