"""
Utility functions for dumping tokens and trees.

This module turns lexer output and parsed trees into plain dictionaries that
can be passed to ``json.dumps``.
"""

from typing import Any, Dict, List, Sequence, assert_never

from .nodes import Comment, Document, Element, Media, Node, Text
from .token import Token


def token_to_dict(token: Token) -> Dict[str, Any]:
    """Convert a token to a dictionary."""
    return {
        "type": token.token_type.value,
        "value": token.value,
        "position": token.position,
    }


def tokens_for_output(tokens: Sequence[Token]) -> List[Dict[str, Any]]:
    """Convert a token sequence for JSON output."""
    return [token_to_dict(token) for token in tokens]


def node_to_dict(node: Node) -> Dict[str, Any]:
    """
    Convert a node and its subtree to nested dictionaries.

    Args:
        node: The node to convert

    Returns:
        Dictionary with a "type" key plus the variant's fields
    """
    match node:
        case Document(children=children):
            return {"type": "Document", "children": [node_to_dict(c) for c in children]}
        case Element():
            return {
                "type": "Element",
                "tag": node.tag,
                "attributes": dict(node.attributes),
                "selfClosing": node.self_closing,
                "children": [node_to_dict(c) for c in node.children],
            }
        case Text(content=content):
            return {"type": "Text", "value": content}
        case Comment(content=content):
            return {"type": "Comment", "value": content}
        case Media(src=src, alt=alt):
            return {"type": "Media", "src": src, "alt": alt}
        case _:
            assert_never(node)


def format_tree_for_output(document: Document) -> Dict[str, Any]:
    """
    Format a parsed document for output.

    Args:
        document: The tree to format

    Returns:
        The JSON-serializable tree
    """
    return node_to_dict(document)
