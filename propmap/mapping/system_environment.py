"""Property mapper for environment-variable style sources.

Names are mapped by converting to lower case and splitting on ``_``, so
``SERVER_PORT`` becomes ``server.port``. Numeric elements become indexes,
``HOST_0`` maps to ``host[0]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, override

from propmap.errors import InvalidPropertyNameError
from propmap.names import Form, PropertyName, ascii_lower, ascii_upper, is_number

from .protocol import NO_MAPPINGS, PropertyMapper, PropertyMapping


if TYPE_CHECKING:
    from collections.abc import Iterable


class SystemEnvironmentPropertyMapper(PropertyMapper):
    """Map ``server.command-line-args`` to ``SERVER_COMMANDLINEARGS`` and back.

    Every name has a modern flat form built from uniform elements and a legacy
    form that keeps dashes as extra ``_`` separators. Both are offered when
    they differ, modern first.
    """

    INSTANCE: ClassVar[SystemEnvironmentPropertyMapper]

    __slots__ = ()

    @override
    def map_name(self, name: PropertyName) -> tuple[PropertyMapping, ...]:
        """Return the modern and, when different, legacy variable names for ``name``."""
        modern = _flat_name(name)
        legacy = _legacy_name(name, "_", uppercase=True)
        if modern == legacy:
            return (PropertyMapping(modern, name),)
        return (PropertyMapping(modern, name), PropertyMapping(legacy, name))

    @override
    def map_source_name(self, source_name: str) -> tuple[PropertyMapping, ...]:
        """Return the property name for a variable such as ``SERVERS_0_HOST``."""
        try:
            name = PropertyName.adapt(source_name, "_", _process_element_value)
        except InvalidPropertyNameError:
            return NO_MAPPINGS
        if name.is_empty():
            return NO_MAPPINGS
        return (PropertyMapping(source_name, name),)

    @override
    def is_ancestor_of(self, name: PropertyName, candidate: PropertyName) -> bool:
        """Return True for plain ancestors and for ancestors through dashed elements."""
        return name.is_ancestor_of(candidate) or _is_legacy_ancestor_of(name, candidate)

    @override
    def __repr__(self) -> str:
        return "SystemEnvironmentPropertyMapper()"


def _flat_name(name: PropertyName) -> str:
    return "_".join(ascii_upper(element) for element in name.elements(Form.UNIFORM))


def _legacy_name(name: PropertyName, join: str, *, uppercase: bool) -> str:
    return join.join(_legacy_elements(name.elements(Form.ORIGINAL), join, uppercase=uppercase))


def _legacy_elements(elements: Iterable[str], join: str, *, uppercase: bool) -> Iterable[str]:
    for element in elements:
        converted = element.replace("-", join)
        yield ascii_upper(converted) if uppercase else converted


def _is_legacy_ancestor_of(name: PropertyName, candidate: PropertyName) -> bool:
    # a failed re-parse only rules out the legacy interpretation
    legacy = PropertyName.of_if_valid(_legacy_name(name, ".", uppercase=False))
    return legacy is not None and legacy.is_ancestor_of(candidate)


def _process_element_value(value: str) -> str:
    result = ascii_lower(value)
    return f"[{result}]" if is_number(result) else result


SystemEnvironmentPropertyMapper.INSTANCE = SystemEnvironmentPropertyMapper()
SYSTEM_ENVIRONMENT = SystemEnvironmentPropertyMapper.INSTANCE
