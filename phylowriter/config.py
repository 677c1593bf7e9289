from dataclasses import dataclass
from typing import Tuple

from phylowriter.constants import (
    DEFAULT_EDGE_WEIGHT_COLUMN,
    DEFAULT_NODE_NAME_COLUMN,
)


@dataclass
class WriterConfig:
    """Configuration for PhyloXML tree writing."""

    edge_weight_column: str = DEFAULT_EDGE_WEIGHT_COLUMN
    node_name_column: str = DEFAULT_NODE_NAME_COLUMN
    # Columns never written as generic properties
    ignored_columns: Tuple[str, ...] = ()
    indent: str = "  "
