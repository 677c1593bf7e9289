"""
PhyloXML document assembly.

A pass runs in three strictly ordered phases: the ``phyloxml`` envelope is
opened, the ``phylogeny`` element is assembled (tree-level elements and
properties first, then the clade tree) and printed, and the envelope is
closed. Every stream write is checked; a failing write aborts the pass with
``OutputWriteError`` and leaves whatever was already written in place.
"""

from __future__ import annotations

import io
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Optional, TextIO, Union
from xml.etree.ElementTree import Element, SubElement, indent, tostring

from phylowriter.clade import build_clade
from phylowriter.config import WriterConfig
from phylowriter.constants import (
    DEFAULT_FILE_EXTENSION,
    ENVELOPE_CLOSE,
    ENVELOPE_OPEN,
    TREE_LEVEL_ELEMENTS,
    TREE_LEVEL_PREFIX,
    TREE_PROPERTY_PREFIX,
)
from phylowriter.context import SerializationContext
from phylowriter.exceptions import OutputWriteError
from phylowriter.properties import resolve_property
from phylowriter.tree import AttributedTree

logger = logging.getLogger(__name__)


def write_tree_level_element(
    context: SerializationContext,
    phylogeny: Element,
    element_name: str,
    attribute_name: Optional[str] = None,
) -> None:
    """Write ``phylogeny.<element_name>`` (value at index 0) as a child of ``phylogeny``."""
    column_name = TREE_LEVEL_PREFIX + element_name
    column = context.tree.vertex_data.get(column_name)
    if column is None or len(column) == 0:
        return

    element = SubElement(phylogeny, element_name)
    element.text = column.value_at(0).to_string()
    if attribute_name:
        attribute_value = column.metadata(attribute_name)
        if attribute_value:
            element.set(attribute_name, attribute_value)

    context.tracker.mark(column_name)


def write_tree_level_properties(
    context: SerializationContext, phylogeny: Element
) -> None:
    for column in context.tree.vertex_data:
        if not column.name.startswith(TREE_PROPERTY_PREFIX):
            continue
        if column.name in context.tracker:
            continue
        descriptor = resolve_property(column, None, context.tracker)
        if descriptor is not None:
            phylogeny.append(descriptor.to_element())


def build_phylogeny(context: SerializationContext) -> Element:
    """Assemble the complete ``phylogeny`` element for the context's tree."""
    root = context.tree.root
    if root is None:
        raise ValueError("Cannot write a tree without a root vertex")

    phylogeny = Element("phylogeny")
    phylogeny.set("rooted", "true")

    for element_name, attribute_name in TREE_LEVEL_ELEMENTS:
        write_tree_level_element(context, phylogeny, element_name, attribute_name)
    write_tree_level_properties(context, phylogeny)

    build_clade(context, root, phylogeny)
    return phylogeny


def _write(stream: TextIO, text: str, stage: str) -> None:
    try:
        stream.write(text)
        stream.flush()
    except (OSError, ValueError) as e:
        OutputWriteError.raise_write_failure(stage, e)


class PhyloXMLTreeWriter:
    """
    Writes an AttributedTree as a PhyloXML document.

    The edge column named by ``config.edge_weight_column`` supplies branch
    lengths and the vertex column named by ``config.node_name_column`` supplies
    clade names. Vertex columns named ``confidence`` and ``color`` become the
    matching clade elements, ``phylogeny.name``, ``phylogeny.description``,
    ``phylogeny.confidence`` and ``phylogeny.property.*`` describe the whole
    tree, and any other vertex column is written as ``property`` elements.
    """

    default_file_extension = DEFAULT_FILE_EXTENSION

    def __init__(self, config: Optional[WriterConfig] = None, **overrides: Any):
        config = config or WriterConfig()
        self.config = replace(config, **overrides) if overrides else config

    def __repr__(self) -> str:
        return (
            f"PhyloXMLTreeWriter(edge_weight_column={self.config.edge_weight_column!r}, "
            f"node_name_column={self.config.node_name_column!r})"
        )

    def ignore_column(self, name: str) -> None:
        """Never write the vertex column ``name`` as a generic property."""
        if name not in self.config.ignored_columns:
            self.config = replace(
                self.config, ignored_columns=self.config.ignored_columns + (name,)
            )

    def write(self, tree: AttributedTree, stream: TextIO) -> None:
        """
        Write ``tree`` to a text stream.

        Raises:
            ValueError: If the tree has no root (nothing is written)
            OutputWriteError: If the stream rejects a write
        """
        if tree.root is None:
            raise ValueError("Cannot write a tree without a root vertex")

        context = SerializationContext.for_tree(tree, self.config)
        logger.debug("Writing PhyloXML for %r", tree)

        _write(stream, ENVELOPE_OPEN, "envelope open")

        phylogeny = build_phylogeny(context)
        indent(phylogeny, space=self.config.indent, level=1)
        body = self.config.indent + tostring(phylogeny, encoding="unicode") + "\n"
        _write(stream, body, "body")

        _write(stream, ENVELOPE_CLOSE, "envelope close")
        logger.debug("Wrote PhyloXML; consumed columns: %s", list(context.tracker))

    def write_string(self, tree: AttributedTree) -> str:
        buffer = io.StringIO()
        self.write(tree, buffer)
        return buffer.getvalue()

    def write_file(self, tree: AttributedTree, path: Union[str, Path]) -> Path:
        """Write ``tree`` to ``path`` as UTF-8; a path without suffix gets ``.xml``."""
        path = Path(path)
        if not path.suffix:
            path = path.with_suffix(f".{self.default_file_extension}")
        with open(path, mode="w", encoding="utf-8") as f:
            self.write(tree, f)
        return path


def write_phyloxml(
    tree: AttributedTree,
    target: Union[TextIO, str, Path],
    config: Optional[WriterConfig] = None,
    **overrides: Any,
) -> None:
    """Write ``tree`` to an open text stream or a file path."""
    writer = PhyloXMLTreeWriter(config, **overrides)
    if isinstance(target, (str, Path)):
        writer.write_file(tree, target)
    else:
        writer.write(tree, target)
