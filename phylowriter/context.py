from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from phylowriter.config import WriterConfig
from phylowriter.elements.columns import AttributeColumn
from phylowriter.tracker import EmissionTracker
from phylowriter.tree import AttributedTree

logger = logging.getLogger(__name__)


@dataclass
class SerializationContext:
    """
    Mutable state of one serialization pass.

    Passed explicitly through tree-level emission and clade construction, so
    independent passes never share a tracker.
    """

    tree: AttributedTree
    config: WriterConfig = field(default_factory=WriterConfig)
    tracker: EmissionTracker = field(default_factory=EmissionTracker)
    name_column: Optional[AttributeColumn] = None
    weight_column: Optional[AttributeColumn] = None

    @classmethod
    def for_tree(
        cls, tree: AttributedTree, config: Optional[WriterConfig] = None
    ) -> SerializationContext:
        """Start a pass: resolve the configured columns and seed a fresh tracker."""
        config = config or WriterConfig()
        weight_column = tree.edge_data.get(config.edge_weight_column)
        name_column = tree.vertex_data.get(config.node_name_column)
        if weight_column is None:
            logger.debug(
                "No edge column '%s'; branch lengths are omitted",
                config.edge_weight_column,
            )
        if name_column is None:
            logger.debug(
                "No vertex column '%s'; clade names are omitted",
                config.node_name_column,
            )
        return cls(
            tree=tree,
            config=config,
            tracker=EmissionTracker(config.ignored_columns),
            name_column=name_column,
            weight_column=weight_column,
        )

    def is_structural(self, column: AttributeColumn) -> bool:
        return column is self.name_column or column is self.weight_column
