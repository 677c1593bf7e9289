import logging
from pathlib import Path

import click

from phylowriter.config import WriterConfig
from phylowriter.constants import (
    DEFAULT_EDGE_WEIGHT_COLUMN,
    DEFAULT_NODE_NAME_COLUMN,
)
from phylowriter.exceptions import PhyloWriterError
from phylowriter.io import read_attributed_trees
from phylowriter.writer import PhyloXMLTreeWriter


def output_paths(out: str, count: int):
    """One output path per tree; ``{0}`` in ``out`` is replaced by the tree index."""
    if Path(out).is_dir():
        out = str(Path(out) / "{0}.xml")
    if count > 1 and "{0}" not in out:
        path = Path(out)
        out = str(path.with_name(f"{path.stem}_{{0}}{path.suffix}"))
    return [out.replace("{0}", str(i)) for i in range(count)]


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("out")
@click.option("--name-column", default=DEFAULT_NODE_NAME_COLUMN, show_default=True)
@click.option("--weight-column", default=DEFAULT_EDGE_WEIGHT_COLUMN, show_default=True)
@click.option(
    "--default-length",
    type=float,
    default=None,
    help="Branch length for nodes written without one; omitted if not given.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output.")
def export(path, out, name_column, weight_column, default_length, verbose):
    """Convert the Newick trees in PATH to PhyloXML documents at OUT."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = WriterConfig(
        edge_weight_column=weight_column, node_name_column=name_column
    )
    writer = PhyloXMLTreeWriter(config)

    try:
        trees = read_attributed_trees(path, config, default_length=default_length)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    for tree, target in zip(trees, output_paths(out, len(trees))):
        try:
            written = writer.write_file(tree, target)
        except (PhyloWriterError, OSError) as e:
            raise click.ClickException(str(e)) from e
        click.echo(str(written))


if __name__ == "__main__":
    export()
