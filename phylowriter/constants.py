"""Column naming conventions and fixed PhyloXML vocabulary."""

DEFAULT_EDGE_WEIGHT_COLUMN = "weight"
DEFAULT_NODE_NAME_COLUMN = "node name"
DEFAULT_FILE_EXTENSION = "xml"

# Vertex columns with a dedicated clade element
CONFIDENCE_COLUMN = "confidence"
COLOR_COLUMN = "color"

# Vertex columns describing the whole tree
TREE_LEVEL_PREFIX = "phylogeny."
TREE_PROPERTY_PREFIX = "phylogeny.property."
PROPERTY_PREFIX = "property."

# (element name, optional attribute read from column metadata)
TREE_LEVEL_ELEMENTS = (
    ("name", None),
    ("description", None),
    ("confidence", "type"),
)

DEFAULT_AUTHORITY = "VTK"
DEFAULT_APPLIES_TO = "clade"

PHYLOXML_NAMESPACE = "http://www.phyloxml.org"
PHYLOXML_VERSION = "1.10"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"

ENVELOPE_OPEN = (
    f'<phyloxml xmlns:xsi="{XSI_NAMESPACE}" xmlns="{PHYLOXML_NAMESPACE}" '
    f'xsi:schemaLocation="{PHYLOXML_NAMESPACE} '
    f'{PHYLOXML_NAMESPACE}/{PHYLOXML_VERSION}/phyloxml.xsd">\n'
)
ENVELOPE_CLOSE = "</phyloxml>\n"
