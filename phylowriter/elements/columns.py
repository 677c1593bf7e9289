from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np


class ValueKind(Enum):
    """Runtime kind of a value read from an attribute column."""

    SHORT = "short"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    INT = "int"
    BOOLEAN = "bit"
    CHAR = "char"
    SIGNED_CHAR = "signed char"
    UNSIGNED_CHAR = "unsigned char"
    UNSIGNED_SHORT = "unsigned short"
    UNSIGNED_INT = "unsigned int"
    UNSIGNED_LONG = "unsigned long"
    UNSIGNED_INT64 = "unsigned __int64"
    ID_TYPE = "idtype"
    INT64 = "__int64"
    STRING = "string"
    OBJECT = "object"


# Fixed-width numpy dtypes; the platform "long" aliases collapse onto these.
_DTYPE_KINDS: Dict[np.dtype, ValueKind] = {
    np.dtype(np.int8): ValueKind.SIGNED_CHAR,
    np.dtype(np.uint8): ValueKind.UNSIGNED_CHAR,
    np.dtype(np.int16): ValueKind.SHORT,
    np.dtype(np.uint16): ValueKind.UNSIGNED_SHORT,
    np.dtype(np.int32): ValueKind.INT,
    np.dtype(np.uint32): ValueKind.UNSIGNED_INT,
    np.dtype(np.int64): ValueKind.INT64,
    np.dtype(np.uint64): ValueKind.UNSIGNED_INT64,
    np.dtype(np.float32): ValueKind.FLOAT,
    np.dtype(np.float64): ValueKind.DOUBLE,
    np.dtype(np.bool_): ValueKind.BOOLEAN,
}


def kind_of_dtype(dtype: np.dtype) -> ValueKind:
    """Return the value kind stored by a numpy dtype."""
    dtype = np.dtype(dtype)
    if dtype.kind in ("U", "S"):
        return ValueKind.STRING
    return _DTYPE_KINDS.get(dtype, ValueKind.OBJECT)


def kind_of_value(value: Any) -> ValueKind:
    """Discover the kind of a single Python or numpy scalar."""
    # bool must be tested before int, it is a subclass
    if value is None or isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (bool, np.bool_)):
        return ValueKind.BOOLEAN
    if isinstance(value, np.generic):
        return kind_of_dtype(value.dtype)
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, float):
        return ValueKind.DOUBLE
    return ValueKind.OBJECT


def _to_python(value: Any) -> Any:
    # Narrow floats stay numpy scalars so they print at their own precision
    if isinstance(value, np.floating) and not isinstance(value, float):
        return value
    if isinstance(value, np.generic):
        return value.item()
    return value


def format_value(value: Any) -> str:
    """String form of a column value as it appears in character data."""
    if isinstance(value, np.floating):
        # Shortest repr for the scalar's own width: float32(0.1) -> "0.1"
        return str(value)
    value = _to_python(value)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, (tuple, list)):
        return " ".join(format_value(component) for component in value)
    return str(value)


@dataclass(frozen=True)
class TypedValue:
    """A column value tagged with the kind it was read as."""

    kind: ValueKind
    value: Any

    def is_empty(self) -> bool:
        return self.value is None or self.to_string() == ""

    def to_string(self) -> str:
        return format_value(self.value)


class AttributeColumn:
    """
    A named, typed sequence of values, one per vertex or one per edge.

    Values stored as a numpy array take their kind from the array dtype; 2-D
    arrays are multi-component (one row per tuple). Any other sequence is a
    variant column whose kind is discovered for each value when it is read,
    unless an explicit ``kind`` is given.

    Side metadata (``authority``, ``applies_to``, ``unit``, ``type``...) is a
    plain string mapping.
    """

    __slots__ = ("name", "_data", "_kind", "_metadata")

    name: str
    _data: Union[np.ndarray, List[Any]]
    _kind: Optional[ValueKind]
    _metadata: Dict[str, str]

    def __init__(
        self,
        name: str,
        values: Union[np.ndarray, Sequence[Any]],
        kind: Optional[ValueKind] = None,
        metadata: Optional[Dict[str, str]] = None,
    ):
        self.name = name
        if isinstance(values, np.ndarray):
            data: Union[np.ndarray, List[Any]] = values
        else:
            items = list(values)
            if (
                items
                and all(isinstance(item, (tuple, list)) for item in items)
                and len({len(item) for item in items}) == 1
            ):
                data = np.asarray(items)
            else:
                data = items
        if isinstance(data, np.ndarray) and data.ndim > 2:
            raise ValueError(
                f"Column '{name}' must be 1-D or 2-D, got shape {data.shape}"
            )
        self._data = data
        if kind is None and isinstance(data, np.ndarray):
            kind = kind_of_dtype(data.dtype)
        self._kind = kind
        self._metadata = dict(metadata) if metadata else {}

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        kind = self._kind.value if self._kind is not None else "variant"
        return f"AttributeColumn('{self.name}', {kind}, n={len(self)})"

    @property
    def kind(self) -> Optional[ValueKind]:
        """Declared kind, or None for a variant column."""
        return self._kind

    @property
    def number_of_components(self) -> int:
        if isinstance(self._data, np.ndarray) and self._data.ndim == 2:
            return int(self._data.shape[1])
        return 1

    def value_at(self, index: int) -> TypedValue:
        raw = self._data[index]
        if isinstance(raw, np.ndarray):
            value: Any = tuple(_to_python(component) for component in raw)
        else:
            value = _to_python(raw)
        kind = self._kind if self._kind is not None else kind_of_value(raw)
        return TypedValue(kind, value)

    def component(self, index: int, component: int) -> TypedValue:
        if self.number_of_components == 1:
            if component != 0:
                raise IndexError(
                    f"Column '{self.name}' has a single component, asked for {component}"
                )
            return self.value_at(index)
        raw = self._data[index, component]  # type: ignore[index]
        kind = self._kind if self._kind is not None else kind_of_value(raw)
        return TypedValue(kind, _to_python(raw))

    def metadata(self, key: str) -> Optional[str]:
        return self._metadata.get(key)

    def set_metadata(self, key: str, value: str) -> None:
        self._metadata[key] = value

    def metadata_items(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self._metadata.items())


class ColumnSet:
    """Ordered collection of attribute columns addressed by name."""

    def __init__(self, columns: Optional[Sequence[AttributeColumn]] = None):
        self._columns: Dict[str, AttributeColumn] = {}
        for column in columns or ():
            self.add(column)

    def add(self, column: AttributeColumn) -> AttributeColumn:
        """Add a column; a column with the same name is replaced in place."""
        self._columns[column.name] = column
        return column

    def get(self, name: str) -> Optional[AttributeColumn]:
        return self._columns.get(name)

    def remove(self, name: str) -> None:
        del self._columns[name]

    def names(self) -> Tuple[str, ...]:
        return tuple(self._columns)

    def __contains__(self, name: object) -> bool:
        return name in self._columns

    def __iter__(self) -> Iterator[AttributeColumn]:
        return iter(list(self._columns.values()))

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        return f"ColumnSet({list(self._columns)})"
