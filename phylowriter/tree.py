from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from phylowriter.elements.columns import AttributeColumn, ColumnSet, ValueKind


class AttributedTree:
    """
    Rooted, ordered tree with per-vertex and per-edge attribute columns.

    Vertices and edges are plain integers handed out in creation order. Every
    non-root vertex has exactly one incoming edge, created together with it by
    ``add_child``. Children keep their insertion order.
    """

    __slots__ = (
        "_parents",
        "_children",
        "_edge_ids",
        "_edge_endpoints",
        "vertex_data",
        "edge_data",
    )

    _parents: List[Optional[int]]
    _children: List[List[int]]
    _edge_ids: Dict[Tuple[int, int], int]
    _edge_endpoints: List[Tuple[int, int]]
    vertex_data: ColumnSet
    edge_data: ColumnSet

    def __init__(self) -> None:
        self._parents = []
        self._children = []
        self._edge_ids = {}
        self._edge_endpoints = []
        self.vertex_data = ColumnSet()
        self.edge_data = ColumnSet()

    def __repr__(self) -> str:
        return (
            f"AttributedTree(vertices={self.number_of_vertices}, "
            f"vertex_data={self.vertex_data.names()}, "
            f"edge_data={self.edge_data.names()})"
        )

    # ------------------------------------------------------------------------
    # Topology
    # ------------------------------------------------------------------------

    @property
    def number_of_vertices(self) -> int:
        return len(self._parents)

    @property
    def number_of_edges(self) -> int:
        return len(self._edge_endpoints)

    @property
    def root(self) -> Optional[int]:
        return 0 if self._parents else None

    def add_root(self) -> int:
        if self._parents:
            raise ValueError("Tree already has a root vertex")
        self._parents.append(None)
        self._children.append([])
        return 0

    def add_child(self, parent: int) -> int:
        """Create a new vertex below ``parent`` and the edge leading to it."""
        self._check_vertex(parent)
        child = len(self._parents)
        self._parents.append(parent)
        self._children.append([])
        self._children[parent].append(child)
        self._edge_ids[(parent, child)] = len(self._edge_endpoints)
        self._edge_endpoints.append((parent, child))
        return child

    def parent(self, vertex: int) -> Optional[int]:
        self._check_vertex(vertex)
        return self._parents[vertex]

    def children(self, vertex: int) -> Tuple[int, ...]:
        self._check_vertex(vertex)
        return tuple(self._children[vertex])

    def is_leaf(self, vertex: int) -> bool:
        return not self.children(vertex)

    def edge_between(self, parent: int, child: int) -> Optional[int]:
        return self._edge_ids.get((parent, child))

    def edge_endpoints(self, edge: int) -> Tuple[int, int]:
        return self._edge_endpoints[edge]

    def traverse(self) -> List[int]:
        """
        Return all vertices in pre-order.
        Iterative, so very deep trees do not hit the recursion limit.
        """
        if self.root is None:
            return []
        vertices: List[int] = []
        stack: List[int] = [self.root]
        while stack:
            current = stack.pop()
            vertices.append(current)
            # Reverse keeps left-to-right visit order
            stack.extend(reversed(self._children[current]))
        return vertices

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._parents):
            raise IndexError(f"Unknown vertex {vertex}")

    # ------------------------------------------------------------------------
    # Attribute columns
    # ------------------------------------------------------------------------

    def add_vertex_column(
        self,
        name: str,
        values: Union[np.ndarray, Sequence[Any]],
        kind: Optional[ValueKind] = None,
        metadata: Optional[Dict[str, str]] = None,
    ) -> AttributeColumn:
        column = AttributeColumn(name, values, kind=kind, metadata=metadata)
        if len(column) != self.number_of_vertices:
            raise ValueError(
                f"Vertex column '{name}' has {len(column)} values, "
                f"tree has {self.number_of_vertices} vertices"
            )
        return self.vertex_data.add(column)

    def add_edge_column(
        self,
        name: str,
        values: Union[np.ndarray, Sequence[Any]],
        kind: Optional[ValueKind] = None,
        metadata: Optional[Dict[str, str]] = None,
    ) -> AttributeColumn:
        column = AttributeColumn(name, values, kind=kind, metadata=metadata)
        if len(column) != self.number_of_edges:
            raise ValueError(
                f"Edge column '{name}' has {len(column)} values, "
                f"tree has {self.number_of_edges} edges"
            )
        return self.edge_data.add(column)
