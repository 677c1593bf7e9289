from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from xml.etree.ElementTree import Element

from phylowriter.constants import (
    DEFAULT_APPLIES_TO,
    DEFAULT_AUTHORITY,
    PROPERTY_PREFIX,
)
from phylowriter.datatypes import map_datatype
from phylowriter.elements.columns import AttributeColumn
from phylowriter.tracker import EmissionTracker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyDescriptor:
    """Everything needed to write one PhyloXML ``property`` element."""

    ref: str
    applies_to: str
    datatype: str
    value: str
    unit: Optional[str] = None

    def to_element(self) -> Element:
        element = Element("property")
        element.set("datatype", self.datatype)
        element.set("ref", self.ref)
        element.set("applies_to", self.applies_to)
        if self.unit:
            element.set("unit", self.unit)
        element.text = self.value
        return element


def property_name(column_name: str) -> str:
    """
    Strip everything up to and including the first ``property.`` in a column name.

    >>> property_name("phylogeny.property.habitat")
    'habitat'
    >>> property_name("habitat")
    'habitat'
    """
    start = column_name.find(PROPERTY_PREFIX)
    if start == -1:
        return column_name
    return column_name[start + len(PROPERTY_PREFIX) :]


def resolve_property(
    column: AttributeColumn,
    vertex: Optional[int],
    tracker: EmissionTracker,
) -> Optional[PropertyDescriptor]:
    """
    Compute the property descriptor of ``column`` at ``vertex``.

    A ``vertex`` of None asks for a tree-level property: the value at index 0
    stands for the whole tree and the column is marked in ``tracker`` so that
    no clade repeats it. Node-level resolution only reads.

    Returns None when the column holds no value at the read index.
    """
    authority = column.metadata("authority") or DEFAULT_AUTHORITY
    applies_to = column.metadata("applies_to") or DEFAULT_APPLIES_TO
    unit = column.metadata("unit") or None
    ref = f"{authority}:{property_name(column.name)}"

    index = vertex
    if index is None:
        index = 0
        tracker.mark(column.name)

    if len(column) == 0:
        return None
    typed = column.value_at(index)
    if typed.value is None:
        logger.debug("No value for '%s' at vertex %d", column.name, index)
        return None

    return PropertyDescriptor(
        ref=ref,
        applies_to=applies_to,
        datatype=map_datatype(typed.kind),
        value=typed.to_string(),
        unit=unit,
    )
