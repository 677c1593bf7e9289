"""Attribute column storage for vertex and edge data."""

from .columns import (
    AttributeColumn,
    ColumnSet,
    TypedValue,
    ValueKind,
    format_value,
    kind_of_dtype,
    kind_of_value,
)

__all__ = [
    "AttributeColumn",
    "ColumnSet",
    "TypedValue",
    "ValueKind",
    "format_value",
    "kind_of_dtype",
    "kind_of_value",
]
