"""Write attributed phylogenetic trees as PhyloXML documents."""

__all__ = [
    "AttributedTree",
    "AttributeColumn",
    "ColumnSet",
    "ValueKind",
    "WriterConfig",
    "PhyloXMLTreeWriter",
    "write_phyloxml",
    "OutputWriteError",
    "PhyloWriterError",
    "parse_newick",
    "newick_to_phyloxml",
]


def __getattr__(name):
    if name == "AttributedTree":
        from .tree import AttributedTree

        return AttributedTree
    if name in {"AttributeColumn", "ColumnSet", "ValueKind"}:
        from .elements import columns

        return getattr(columns, name)
    if name == "WriterConfig":
        from .config import WriterConfig

        return WriterConfig
    if name in {"PhyloXMLTreeWriter", "write_phyloxml"}:
        from . import writer

        return getattr(writer, name)
    if name in {"OutputWriteError", "PhyloWriterError"}:
        from . import exceptions

        return getattr(exceptions, name)
    if name == "parse_newick":
        from .parser import parse_newick

        return parse_newick
    if name == "newick_to_phyloxml":
        from .io import newick_to_phyloxml

        return newick_to_phyloxml
    raise AttributeError(name)
