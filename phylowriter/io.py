from pathlib import Path
from typing import Any, List, Optional, Union

from phylowriter.config import WriterConfig
from phylowriter.node import Node
from phylowriter.parser.newick_parser import parse_newick
from phylowriter.tree import AttributedTree
from phylowriter.writer import PhyloXMLTreeWriter


def read_newick(path: Union[str, Path], force_list: bool = False):
    with open(path) as f:
        newick_string: str = f.read()

    tree: Node | List[Node] = parse_newick(newick_string, force_list=force_list)
    return tree


def read_attributed_trees(
    path: Union[str, Path],
    config: Optional[WriterConfig] = None,
    default_length: Optional[float] = None,
) -> List[AttributedTree]:
    """Read every tree of a Newick file as an AttributedTree named after ``config``."""
    config = config or WriterConfig()
    return [
        node.to_attributed_tree(
            name_column=config.node_name_column,
            weight_column=config.edge_weight_column,
            default_length=default_length,
        )
        for node in read_newick(path, force_list=True)
    ]


def write_phyloxml_file(
    tree: AttributedTree, path: Union[str, Path], **config: Any
) -> Path:
    return PhyloXMLTreeWriter(**config).write_file(tree, path)


def newick_to_phyloxml(
    newick: str, default_length: Optional[float] = None, **config: Any
) -> Union[str, List[str]]:
    """
    Convert a Newick string straight to PhyloXML text.

    Returns one document per tree; a single tree gives a single string.
    """
    writer = PhyloXMLTreeWriter(**config)
    trees: List[Node] = parse_newick(newick, force_list=True)  # type: ignore[assignment]
    documents = [
        writer.write_string(
            node.to_attributed_tree(
                name_column=writer.config.node_name_column,
                weight_column=writer.config.edge_weight_column,
                default_length=default_length,
            )
        )
        for node in trees
    ]
    if len(documents) == 1:
        return documents[0]
    return documents
