from typing import Dict

from phylowriter.elements.columns import ValueKind

DEFAULT_DATATYPE = "xsd:string"

XSD_DATATYPES: Dict[ValueKind, str] = {
    ValueKind.SHORT: "xsd:short",
    ValueKind.LONG: "xsd:long",
    ValueKind.FLOAT: "xsd:float",
    ValueKind.DOUBLE: "xsd:double",
    ValueKind.INT: "xsd:integer",
    ValueKind.BOOLEAN: "xsd:boolean",
    ValueKind.CHAR: "xsd:byte",
    ValueKind.SIGNED_CHAR: "xsd:byte",
    ValueKind.UNSIGNED_CHAR: "xsd:unsignedByte",
    ValueKind.UNSIGNED_SHORT: "xsd:unsignedShort",
    ValueKind.UNSIGNED_INT: "xsd:unsignedInt",
    ValueKind.UNSIGNED_LONG: "xsd:unsignedLong",
    ValueKind.UNSIGNED_INT64: "xsd:unsignedLong",
    ValueKind.ID_TYPE: "xsd:unsignedLong",
    ValueKind.INT64: "xsd:long",
}


def map_datatype(kind: ValueKind) -> str:
    """Return the XML schema datatype tag for a column value kind.

    Kinds without an entry (strings, arbitrary objects) map to ``xsd:string``.
    """
    return XSD_DATATYPES.get(kind, DEFAULT_DATATYPE)
