import ast
import logging

from typing import Any, Dict, List, Tuple, Union
from phylowriter.node import Node

logger = logging.getLogger(__name__)

CHARACTER_READER = "character_reader"
LENGTH_READER = "length_reader"
METADATA_READER = "metadata_reader"


# ===================================================================
# 1. METADATA PROCESSING FUNCTIONS
# ===================================================================


def split_token(token: str) -> Tuple[str, Any]:
    """
    Split a token into name and value parts.
    Handles both "name=value" and "name:value" formats for metadata.

    Args:
        token: A string token in format "name=value" or "name:value"

    Returns:
        Tuple of (name, parsed_value) where parsed_value could be string, int, or float
    """
    if "=" in token:
        name, value = token.split("=", 1)
    elif ":" in token:
        name, value = token.split(":", 1)
    else:
        return token, True

    try:
        # Handles quoted strings and numbers
        parsed_value = ast.literal_eval(value)
    except (ValueError, SyntaxError):
        parsed_value = value

    if not isinstance(parsed_value, (str, int, float, bool)):
        # Tuples, lists and the like stay as written
        parsed_value = value

    return name, parsed_value


def parse_metadata(data: str) -> Dict[str, Any]:
    """
    Parse a metadata string into a dictionary.
    Handles both regular metadata and NHX format.

    Args:
        data: String containing metadata in format "key1=value1,key2=value2"
              or NHX format "&&NHX:key1=value1:key2=value2"

    Returns:
        Dictionary mapping keys to their parsed values
    """
    data = data.strip()
    if data.startswith("&&NHX:"):
        tokens = data[6:].split(":")
    else:
        # Comma, semicolon and space separated key=value pairs
        tokens = data.replace(";", ",").replace(" ", ",").split(",")

    metadata: Dict[str, Any] = {}
    for token in tokens:
        if token.strip():
            name, value = split_token(token.strip())
            metadata[name] = value
    return metadata


def flush_meta_buffer(meta_buffer: List[str], stack: List[Node]) -> None:
    """
    Process the metadata buffer and update the current node's values.

    Args:
        meta_buffer: List of characters that form the metadata content
        stack: The current stack of nodes being processed
    """
    metadata = parse_metadata("".join(meta_buffer))
    if metadata and stack:
        stack[-1].values.update(metadata)
    meta_buffer.clear()


# ===================================================================
# 2. BUFFER PROCESSING FUNCTIONS
# ===================================================================


def flush_character_buffer(buffer: List[str], stack: List[Node]) -> None:
    """
    Process the character buffer and assign the name to the current node.

    Args:
        buffer: List of characters to join and assign as node name
        stack: The current stack of nodes being processed
    """
    if stack and buffer:
        name = "".join(buffer).strip()
        if len(name) >= 2 and name[0] == name[-1] and name[0] in "'\"":
            name = name[1:-1]
        stack[-1].name = name
    buffer.clear()


def flush_length_buffer(buffer: List[str], stack: List[Node]) -> None:
    """
    Process the length buffer and assign the branch length to the current node.

    Args:
        buffer: List of characters to join and parse as branch length
        stack: The current stack of nodes being processed

    Lengths that do not parse as a float are left unset.
    """
    if not stack:
        buffer.clear()
        return

    buffer_value = "".join(buffer).strip()
    if buffer_value:
        try:
            stack[-1].length = float(buffer_value)
        except ValueError:
            logger.warning("Ignoring unparseable branch length %r", buffer_value)
    buffer.clear()


def flush_buffer(buffer: List[str], stack: List[Node], mode: str) -> None:
    """
    Process the accumulated buffer based on the current parsing mode.

    Args:
        buffer: List of characters accumulated during parsing
        stack: The current stack of nodes being processed
        mode: Current parsing mode ("character_reader" or "length_reader")
    """
    if mode == CHARACTER_READER:
        flush_character_buffer(buffer, stack)
    elif mode == LENGTH_READER:
        flush_length_buffer(buffer, stack)


# ===================================================================
# 3. NODE STACK MANAGEMENT FUNCTIONS
# ===================================================================


def init_nodestack() -> List[Node]:
    """Initialize the node stack with a root node."""
    return [Node()]


def create_new_node(stack: List[Node]) -> None:
    """Create a new child of the node on top of the stack and push it."""
    new_node = Node()
    stack[-1].append_child(new_node)
    stack.append(new_node)


def close_node(stack: List[Node]) -> None:
    """Close the current node, never popping the root."""
    if len(stack) > 1:
        stack.pop()


# ===================================================================
# 4. CORE PARSING FUNCTIONS
# ===================================================================


def _parse_newick(tokens: str) -> List[Node]:
    """
    Return a list of top-level Node trees from the token string.

    This is the low-level parsing function that processes character by character.
    """
    trees: List[Node] = []
    buffer: List[str] = []
    meta_buffer: List[str] = []
    mode: str = CHARACTER_READER
    node_stack: List[Node] = []

    for char in tokens:
        if char in "\r\n":
            continue

        if mode == METADATA_READER:
            if char == "]":
                flush_meta_buffer(meta_buffer, node_stack)
                mode = CHARACTER_READER
            else:
                meta_buffer.append(char)
            continue

        if not node_stack:
            if char.isspace():
                continue
            node_stack = init_nodestack()

        if char == "(":
            create_new_node(node_stack)
            mode = CHARACTER_READER

        elif char == ")":
            flush_buffer(buffer, node_stack, mode)
            close_node(node_stack)
            mode = CHARACTER_READER

        elif char == ",":
            flush_buffer(buffer, node_stack, mode)
            close_node(node_stack)
            create_new_node(node_stack)
            mode = CHARACTER_READER

        elif char == ":":
            flush_buffer(buffer, node_stack, mode)
            mode = LENGTH_READER

        elif char == "[":
            flush_buffer(buffer, node_stack, mode)
            mode = METADATA_READER

        elif char == ";":
            flush_buffer(buffer, node_stack, mode)
            trees.append(node_stack[0])
            node_stack = []
            mode = CHARACTER_READER

        else:
            buffer.append(char)

    if node_stack:
        # Trailing tree without a terminating semicolon
        flush_buffer(buffer, node_stack, mode)
        trees.append(node_stack[0])

    return trees


# ===================================================================
# 5. PUBLIC API FUNCTIONS
# ===================================================================


def parse_newick(tokens: str, force_list: bool = False) -> Union[Node, List[Node]]:
    """
    Parse a Newick string into a tree or list of trees.

    Args:
        tokens: Newick format string, optionally with [key=value] or
                [&&NHX:key=value] comments
        force_list: Always return a list even for single trees

    Returns:
        Single Node or list of Nodes representing parsed tree(s)

    Raises:
        ValueError: If the string contains no tree
    """
    trees = _parse_newick(tokens)
    if not trees:
        raise ValueError("No Newick tree found in input")
    logger.debug("Parsed %d Newick tree(s)", len(trees))

    if len(trees) == 1 and not force_list:
        return trees[0]
    return trees
