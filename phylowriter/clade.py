"""
Clade construction.

Each vertex of the input tree becomes one ``clade`` element nested in its
parent's clade. Structural children (name, confidence, color) and the
``branch_length`` attribute come from an ordered list of rules, every other
unconsumed vertex column is written as a ``property`` element.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple
from xml.etree.ElementTree import Element, SubElement

import numpy as np

from phylowriter.constants import COLOR_COLUMN, CONFIDENCE_COLUMN
from phylowriter.context import SerializationContext
from phylowriter.elements.columns import AttributeColumn, format_value
from phylowriter.properties import resolve_property

logger = logging.getLogger(__name__)


class CladeRule:
    """A structural clade element fed by a single column."""

    def select(self, context: SerializationContext) -> Optional[AttributeColumn]:
        raise NotImplementedError

    def emit(
        self,
        context: SerializationContext,
        column: AttributeColumn,
        vertex: int,
        clade: Element,
    ) -> bool:
        """Write this rule's output for ``vertex``; return True if ``column`` is consumed."""
        raise NotImplementedError

    def apply(self, context: SerializationContext, vertex: int, clade: Element) -> None:
        column = self.select(context)
        if column is None:
            return
        if self.emit(context, column, vertex, clade):
            context.tracker.mark(column.name)


class BranchLengthRule(CladeRule):
    """``branch_length`` attribute from the weight of the edge into the vertex."""

    def select(self, context: SerializationContext) -> Optional[AttributeColumn]:
        return context.weight_column

    def emit(self, context, column, vertex, clade) -> bool:
        parent = context.tree.parent(vertex)
        if parent is None:
            return True
        edge = context.tree.edge_between(parent, vertex)
        if edge is None:
            return True

        typed = column.value_at(edge)
        if typed.is_empty():
            return True
        try:
            weight = float(typed.value)
        except (TypeError, ValueError):
            logger.warning(
                "Dropping non-numeric branch length %r on edge %d",
                typed.value,
                edge,
            )
            return True
        # Floats print at their stored width, everything else as a double
        if isinstance(typed.value, np.floating):
            clade.set("branch_length", format_value(typed.value))
        else:
            clade.set("branch_length", format_value(weight))
        return True


class NameRule(CladeRule):
    def select(self, context: SerializationContext) -> Optional[AttributeColumn]:
        return context.name_column

    def emit(self, context, column, vertex, clade) -> bool:
        name = column.value_at(vertex)
        if not name.is_empty():
            SubElement(clade, "name").text = name.to_string()
        return True


class ConfidenceRule(CladeRule):
    def select(self, context: SerializationContext) -> Optional[AttributeColumn]:
        return context.tree.vertex_data.get(CONFIDENCE_COLUMN)

    def emit(self, context, column, vertex, clade) -> bool:
        confidence = column.value_at(vertex)
        if not confidence.is_empty():
            element = SubElement(clade, "confidence")
            confidence_type = column.metadata("type")
            if confidence_type:
                element.set("type", confidence_type)
            element.text = confidence.to_string()
        return True


class ColorRule(CladeRule):
    """Nested red/green/blue elements from a 3-component column."""

    CHANNELS = ("red", "green", "blue")

    def select(self, context: SerializationContext) -> Optional[AttributeColumn]:
        return context.tree.vertex_data.get(COLOR_COLUMN)

    def emit(self, context, column, vertex, clade) -> bool:
        if column.number_of_components != len(self.CHANNELS):
            logger.debug(
                "Column '%s' has %d components; not written as a color",
                column.name,
                column.number_of_components,
            )
            return False

        color = SubElement(clade, "color")
        for component, channel in enumerate(self.CHANNELS):
            SubElement(color, channel).text = column.component(vertex, component).to_string()
        return True


CLADE_RULES: Tuple[CladeRule, ...] = (
    BranchLengthRule(),
    NameRule(),
    ConfidenceRule(),
    ColorRule(),
)


def write_clade_properties(
    context: SerializationContext, vertex: int, clade: Element
) -> None:
    """Append a ``property`` element for every vertex column not yet consumed."""
    for column in context.tree.vertex_data:
        if context.is_structural(column) or column.name in context.tracker:
            continue
        descriptor = resolve_property(column, vertex, context.tracker)
        if descriptor is not None:
            clade.append(descriptor.to_element())


def build_clade(
    context: SerializationContext,
    vertex: int,
    parent_element: Element,
    rules: Sequence[CladeRule] = CLADE_RULES,
) -> Element:
    """
    Build the clade element of ``vertex`` and its whole subtree under ``parent_element``.

    Depth-first over an explicit stack of (vertex, parent element) pairs, so
    tree depth is not bounded by the interpreter's recursion limit. Children
    are visited in the tree's child order.

    Returns:
        The clade element created for ``vertex``
    """
    top: Optional[Element] = None
    stack: List[Tuple[int, Element]] = [(vertex, parent_element)]

    while stack:
        current, parent = stack.pop()
        clade = SubElement(parent, "clade")
        if top is None:
            top = clade

        for rule in rules:
            rule.apply(context, current, clade)
        write_clade_properties(context, current, clade)

        # Reverse to maintain order
        for child in reversed(context.tree.children(current)):
            stack.append((child, clade))

    assert top is not None
    return top
