from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from phylowriter.tree import AttributedTree

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """Pointer-based tree node produced by the Newick parser."""

    children: List["Node"] = field(default_factory=list)
    name: str = ""
    length: Optional[float] = None
    values: Dict[str, Any] = field(default_factory=dict)
    parent: Optional["Node"] = field(default=None, repr=False)

    def append_child(self, node: "Node") -> None:
        node.parent = self
        self.children.append(node)

    def __repr__(self) -> str:
        return f"Node('{self.name}')"

    def is_leaf(self) -> bool:
        return not self.children

    def traverse(self) -> List["Node"]:
        """Return the nodes of this subtree in pre-order."""
        nodes: List[Node] = []
        stack: List[Node] = [self]
        while stack:
            current = stack.pop()
            nodes.append(current)
            stack.extend(reversed(current.children))
        return nodes

    def get_leaves(self) -> List["Node"]:
        return [node for node in self.traverse() if node.is_leaf()]

    def to_attributed_tree(
        self,
        name_column: str = "node name",
        weight_column: str = "weight",
        default_length: Optional[float] = None,
    ) -> AttributedTree:
        return to_attributed_tree(
            self,
            name_column=name_column,
            weight_column=weight_column,
            default_length=default_length,
        )


def to_attributed_tree(
    root: Node,
    name_column: str = "node name",
    weight_column: str = "weight",
    default_length: Optional[float] = None,
) -> AttributedTree:
    """
    Convert a pointer-based tree into an AttributedTree.

    Vertices are numbered in pre-order. Node names become the ``name_column``
    vertex column, branch lengths the ``weight_column`` edge column, and every
    metadata key a variant vertex column holding None where a node lacks it.
    The root's own length has no edge to live on and is dropped. A node
    without a length gets ``default_length``; left at None, the edge holds no
    weight and the clade is written without a branch length.
    """
    tree = AttributedTree()
    names: List[str] = []
    weights: List[Optional[float]] = []
    values: List[Dict[str, Any]] = []
    keys: Dict[str, None] = {}

    # Stack of tuples (node, parent_vertex)
    stack: List[Tuple[Node, Optional[int]]] = [(root, None)]
    while stack:
        node, parent_vertex = stack.pop()

        if parent_vertex is None:
            tree.add_root()
        else:
            tree.add_child(parent_vertex)
            weights.append(
                float(node.length) if node.length is not None else default_length
            )
        vertex = tree.number_of_vertices - 1

        names.append(node.name or "")
        values.append(node.values)
        for key in node.values:
            keys.setdefault(key, None)

        for child in reversed(node.children):  # Reverse to maintain order
            stack.append((child, vertex))

    tree.add_vertex_column(name_column, names)
    tree.add_edge_column(weight_column, weights)
    for key in keys:
        if key == name_column:
            logger.warning(
                "Metadata key '%s' collides with the name column and is skipped", key
            )
            continue
        tree.add_vertex_column(key, [node_values.get(key) for node_values in values])
    return tree
