"""Hierarchical property names such as ``server.port`` or ``servers[0].host``."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from propmap.errors import InvalidPropertyNameError


if TYPE_CHECKING:
    from collections.abc import Callable


_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_ALNUM = frozenset(string.ascii_lowercase + string.digits)
_DIGITS = frozenset(string.digits)


def ascii_lower(value: str) -> str:
    """Lower-case ASCII letters only, leaving every other character untouched."""
    return value.translate(_LOWER)


def ascii_upper(value: str) -> str:
    """Upper-case ASCII letters only, leaving every other character untouched."""
    return value.translate(_UPPER)


def is_number(value: str) -> bool:
    """Return True when ``value`` is made only of ASCII decimal digits."""
    return bool(value) and all(ch in _DIGITS for ch in value)


class Form(enum.Enum):
    """Rendering used when reading a single element of a name."""

    ORIGINAL = "original"
    DASHED = "dashed"
    UNIFORM = "uniform"


class ElementType(enum.Enum):
    """Kind of a single name element, decided by its characters."""

    UNIFORM = "uniform"
    DASHED = "dashed"
    NON_UNIFORM = "non-uniform"
    INDEXED = "indexed"
    NUMERICALLY_INDEXED = "numerically-indexed"

    @property
    def indexed(self) -> bool:
        """Return True for bracketed elements."""
        return self in {ElementType.INDEXED, ElementType.NUMERICALLY_INDEXED}


@dataclass(frozen=True, slots=True, eq=False)
class _Element:
    value: str
    type: ElementType

    @classmethod
    def named(cls, value: str) -> _Element:
        if all(ch in _ALNUM for ch in value):
            return cls(value, ElementType.UNIFORM)
        if value[0] != "-" and all(ch in _ALNUM or ch == "-" for ch in value):
            return cls(value, ElementType.DASHED)
        return cls(value, ElementType.NON_UNIFORM)

    @classmethod
    def indexed(cls, value: str) -> _Element:
        kind = ElementType.NUMERICALLY_INDEXED if is_number(value) else ElementType.INDEXED
        return cls(value, kind)

    def render(self, form: Form) -> str:
        if form is Form.ORIGINAL or self.type.indexed or self.type is ElementType.UNIFORM:
            return self.value
        lowered = ascii_lower(self.value)
        if form is Form.UNIFORM:
            return "".join(ch for ch in lowered if ch in _ALNUM)
        return "".join(ch for ch in lowered if ch in _ALNUM or ch == "-").strip("-")

    def key(self) -> tuple[bool, str]:
        # indexed elements never compare equal to named ones
        if self.type.indexed:
            return (True, self.value)
        return (False, self.render(Form.UNIFORM))


def _invalid_characters(value: str) -> tuple[str, ...]:
    invalid: dict[str, None] = {}
    for index, ch in enumerate(value):
        if ch in _ALNUM or (ch == "-" and index != 0):
            continue
        invalid[ch] = None
    return tuple(invalid)


def _parse_canonical(name: str) -> tuple[_Element, ...]:
    if not name:
        return ()

    elements: list[_Element] = []
    length = len(name)
    position = 0
    while True:
        if name[position] == "[":
            end = name.find("]", position + 1)
            if end == -1:
                raise InvalidPropertyNameError(name, reason="unclosed index bracket")
            content = name[position + 1 : end]
            if not content:
                raise InvalidPropertyNameError(name, reason="empty index")
            elements.append(_Element.indexed(content))
            position = end + 1
        else:
            end = position
            while end < length and name[end] not in ".[":
                end += 1
            value = name[position:end]
            if not value:
                raise InvalidPropertyNameError(name, reason="empty element")
            invalid = _invalid_characters(value)
            if invalid:
                raise InvalidPropertyNameError(name, invalid)
            elements.append(_Element.named(value))
            position = end

        if position == length:
            return tuple(elements)
        if name[position] == ".":
            position += 1
            if position == length or name[position] in ".[":
                raise InvalidPropertyNameError(name, reason="empty element")
        elif name[position] != "[":
            raise InvalidPropertyNameError(name, (name[position],))


def _adapt_element(source: str, value: str, processor: Callable[[str], str] | None) -> _Element | None:
    if processor is not None:
        value = processor(value)
    if not value:
        return None
    if len(value) > 2 and value[0] == "[" and value[-1] == "]" and not any(ch in "[]" for ch in value[1:-1]):
        return _Element.indexed(value[1:-1])
    invalid = tuple(dict.fromkeys(ch for ch in value if ch in ".[]"))
    if invalid:
        raise InvalidPropertyNameError(source, invalid, reason="element must resolve to a single element")
    return _Element.named(value)


def _parse_adapted(name: str, separator: str, processor: Callable[[str], str] | None) -> tuple[_Element, ...]:
    elements: list[_Element] = []
    length = len(name)
    position = 0
    while position < length:
        if name[position] == "[":
            end = name.find("]", position + 1)
            if end == -1:
                raise InvalidPropertyNameError(name, reason="unclosed index bracket")
            content = name[position + 1 : end]
            # processed bracket content is re-read like any other element
            if processor is not None:
                element = _adapt_element(name, content, processor)
            else:
                element = _Element.indexed(content) if content else None
            if element is not None:
                elements.append(element)
            position = end + 1
            continue

        end = position
        while end < length and name[end] != separator and name[end] != "[":
            end += 1
        element = _adapt_element(name, name[position:end], processor)
        if element is not None:
            elements.append(element)
        position = end + 1 if end < length and name[end] == separator else end
    return tuple(elements)


class PropertyName:
    """Immutable dotted/indexed configuration property name.

    Names are made of elements. ``servers[0].host`` has three: the named
    element ``servers``, the numerically indexed element ``0`` and the named
    element ``host``. Each element can be read back in any :class:`Form`.
    """

    EMPTY: ClassVar[PropertyName]

    __slots__ = ("_elements",)

    def __init__(self, elements: tuple[_Element, ...] = ()) -> None:
        super().__init__()
        self._elements = elements

    @classmethod
    def of(cls, name: str | None) -> PropertyName:
        """Parse canonical text such as ``foo.bar-baz[0]``.

        Raises
        ------
        InvalidPropertyNameError
            When the text is not a valid canonical name.
        """
        elements = _parse_canonical(name or "")
        return cls(elements) if elements else cls.EMPTY

    @classmethod
    def of_if_valid(cls, name: str | None) -> PropertyName | None:
        """Parse canonical text, returning None instead of raising."""
        try:
            return cls.of(name)
        except InvalidPropertyNameError:
            return None

    @classmethod
    def is_valid(cls, name: str | None) -> bool:
        """Return True when ``name`` is valid canonical text."""
        return cls.of_if_valid(name) is not None

    @classmethod
    def adapt(cls, name: str, separator: str, processor: Callable[[str], str] | None = None) -> PropertyName:
        """Build a name from a flat string split on ``separator``.

        Parameters
        ----------
        name
            Source text, for example an environment variable key.
        separator
            Single character that delimits elements in ``name``.
        processor
            Optional per-element rewrite applied before the element is parsed.
            It must return text describing a single element, either a plain
            value or ``[index]``.
        """
        if len(separator) != 1:
            msg = "separator must be a single character"
            raise ValueError(msg)
        if separator in "[]":
            msg = "separator must not be a bracket"
            raise ValueError(msg)
        elements = _parse_adapted(name, separator, processor)
        return cls(elements) if elements else cls.EMPTY

    def __len__(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        """Return True when the name has no elements."""
        return not self._elements

    def get_element(self, index: int, form: Form = Form.ORIGINAL) -> str:
        """Return the element at ``index`` rendered in ``form``."""
        return self._elements[index].render(form)

    def elements(self, form: Form = Form.ORIGINAL) -> tuple[str, ...]:
        """Return every element rendered in ``form``."""
        return tuple(element.render(form) for element in self._elements)

    def last_element(self, form: Form = Form.ORIGINAL) -> str:
        if not self._elements:
            return ""
        return self._elements[-1].render(form)

    def is_indexed(self, index: int) -> bool:
        """Return True when the element at ``index`` was written in brackets."""
        return self._elements[index].type.indexed

    def is_numeric_index(self, index: int) -> bool:
        """Return True when the element at ``index`` is a bracketed number."""
        return self._elements[index].type is ElementType.NUMERICALLY_INDEXED

    def append(self, suffix: str | None) -> PropertyName:
        """Return a new name with the canonical ``suffix`` appended."""
        if not suffix:
            return self
        return PropertyName(self._elements + _parse_canonical(suffix))

    def chop(self, size: int) -> PropertyName:
        """Return a new name holding only the first ``size`` elements."""
        if size < 0:
            msg = "size must not be negative"
            raise ValueError(msg)
        if size >= len(self._elements):
            return self
        return PropertyName(self._elements[:size]) if size else PropertyName.EMPTY

    @property
    def parent(self) -> PropertyName:
        return self.chop(len(self._elements) - 1) if self._elements else PropertyName.EMPTY

    def is_parent_of(self, name: PropertyName) -> bool:
        return len(self) == len(name) - 1 and self._is_prefix_of(name)

    def is_ancestor_of(self, name: PropertyName) -> bool:
        """Return True when this name is a strict element prefix of ``name``."""
        return len(self) < len(name) and self._is_prefix_of(name)

    def _is_prefix_of(self, name: PropertyName) -> bool:
        return all(
            mine.key() == theirs.key() for mine, theirs in zip(self._elements, name._elements, strict=False)
        )

    def _keys(self) -> tuple[tuple[bool, str], ...]:
        return tuple(element.key() for element in self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyName):
            return NotImplemented
        return self._keys() == other._keys()

    def __hash__(self) -> int:
        return hash(self._keys())

    def __str__(self) -> str:
        parts: list[str] = []
        for element in self._elements:
            if element.type.indexed:
                parts.append(f"[{element.value}]")
                continue
            if parts:
                parts.append(".")
            parts.append(element.render(Form.DASHED))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"PropertyName({str(self)!r})"


PropertyName.EMPTY = PropertyName()
