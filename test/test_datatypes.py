import numpy as np
import pytest

from phylowriter.datatypes import DEFAULT_DATATYPE, map_datatype
from phylowriter.elements.columns import AttributeColumn, ValueKind


@pytest.mark.parametrize(
    "kind, expected",
    [
        (ValueKind.SHORT, "xsd:short"),
        (ValueKind.LONG, "xsd:long"),
        (ValueKind.FLOAT, "xsd:float"),
        (ValueKind.DOUBLE, "xsd:double"),
        (ValueKind.INT, "xsd:integer"),
        (ValueKind.BOOLEAN, "xsd:boolean"),
        (ValueKind.CHAR, "xsd:byte"),
        (ValueKind.SIGNED_CHAR, "xsd:byte"),
        (ValueKind.UNSIGNED_CHAR, "xsd:unsignedByte"),
        (ValueKind.UNSIGNED_SHORT, "xsd:unsignedShort"),
        (ValueKind.UNSIGNED_INT, "xsd:unsignedInt"),
        (ValueKind.UNSIGNED_LONG, "xsd:unsignedLong"),
        (ValueKind.UNSIGNED_INT64, "xsd:unsignedLong"),
        (ValueKind.ID_TYPE, "xsd:unsignedLong"),
        (ValueKind.INT64, "xsd:long"),
        (ValueKind.STRING, "xsd:string"),
        (ValueKind.OBJECT, "xsd:string"),
    ],
)
def test_map_datatype_table(kind, expected):
    assert map_datatype(kind) == expected


def test_every_kind_has_a_datatype():
    for kind in ValueKind:
        assert map_datatype(kind).startswith("xsd:")


def test_unknown_kind_defaults_to_string():
    assert map_datatype(None) == DEFAULT_DATATYPE  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "values, expected",
    [
        (np.array([1], dtype=np.int8), "xsd:byte"),
        (np.array([1], dtype=np.uint8), "xsd:unsignedByte"),
        (np.array([1], dtype=np.int16), "xsd:short"),
        (np.array([1], dtype=np.uint16), "xsd:unsignedShort"),
        (np.array([1], dtype=np.int32), "xsd:integer"),
        (np.array([1], dtype=np.uint32), "xsd:unsignedInt"),
        (np.array([1], dtype=np.int64), "xsd:long"),
        (np.array([1], dtype=np.uint64), "xsd:unsignedLong"),
        (np.array([1.0], dtype=np.float32), "xsd:float"),
        (np.array([1.0], dtype=np.float64), "xsd:double"),
        (np.array([True]), "xsd:boolean"),
        (np.array(["a"]), "xsd:string"),
        ([7], "xsd:integer"),
        ([7.5], "xsd:double"),
        ([False], "xsd:boolean"),
        (["text"], "xsd:string"),
    ],
)
def test_column_values_map_to_datatype(values, expected):
    column = AttributeColumn("trait", values)
    assert map_datatype(column.value_at(0).kind) == expected
