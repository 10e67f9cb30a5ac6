"""Exception types raised by propmap."""

from __future__ import annotations


class PropmapError(Exception):
    """Base class for all propmap errors."""


class InvalidPropertyNameError(PropmapError, ValueError):
    """Raised when text cannot be parsed into a property name."""

    def __init__(self, name: str, invalid_characters: tuple[str, ...] = (), reason: str | None = None) -> None:
        self.name = name
        self.invalid_characters = invalid_characters
        msg = f"invalid property name: {name!r}"
        if invalid_characters:
            msg += f" (invalid characters: {', '.join(repr(ch) for ch in invalid_characters)})"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
