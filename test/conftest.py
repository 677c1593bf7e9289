import logging
import xml.etree.ElementTree as ET

import pytest

from phylowriter.tree import AttributedTree

PHYLOXML_NS = "{http://www.phyloxml.org}"


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@pytest.fixture
def three_node_tree() -> AttributedTree:
    """Root A with children B and C, weights 1.5 and 2.0, named Root/Leaf1/Leaf2."""
    tree = AttributedTree()
    a = tree.add_root()
    tree.add_child(a)
    tree.add_child(a)
    tree.add_edge_column("weight", [1.5, 2.0])
    tree.add_vertex_column("node name", ["Root", "Leaf1", "Leaf2"])
    return tree


@pytest.fixture
def parse_phyloxml():
    """Parse PhyloXML text and return the phylogeny element with namespaces stripped."""

    def _parse(text: str) -> ET.Element:
        document = ET.fromstring(text)
        assert document.tag == PHYLOXML_NS + "phyloxml"
        for element in document.iter():
            if element.tag.startswith(PHYLOXML_NS):
                element.tag = element.tag[len(PHYLOXML_NS) :]
        phylogenies = document.findall("phylogeny")
        assert len(phylogenies) == 1
        return phylogenies[0]

    return _parse
