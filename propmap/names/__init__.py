"""Hierarchical property names and their renderings."""

from .name import ElementType, Form, PropertyName, ascii_lower, ascii_upper, is_number


__all__ = ["ElementType", "Form", "PropertyName", "ascii_lower", "ascii_upper", "is_number"]
