"""
Utility functions for transpiler tests.
"""

from typing import List, Optional, Tuple

from dhtml.dictionary import Vocabulary
from dhtml.lexer import tokenize
from dhtml.nodes import Document, Element, Node
from dhtml.parser import Parser
from dhtml.token import TokenType


def token_kinds(source: str) -> List[TokenType]:
    """
    Tokenize source and return only the token types.

    Args:
        source: Markup to tokenize

    Returns:
        List of token types, EOF included
    """
    return [token.token_type for token in tokenize(source)]


def token_pairs(source: str) -> List[Tuple[TokenType, str]]:
    """Tokenize source and return (type, value) pairs."""
    return [(token.token_type, token.value) for token in tokenize(source)]


def parse_source(source: str, vocabulary: Optional[Vocabulary] = None) -> Document:
    """Tokenize and parse source into a Document."""
    return Parser(tokenize(source), vocabulary).parse()


def find_elements(node: Node, tag: str) -> List[Element]:
    """
    Collect every element with the given tag, depth first.

    Args:
        node: Root of the subtree to search
        tag: Canonical tag name to find

    Returns:
        Matching elements in document order
    """
    found: List[Element] = []
    if isinstance(node, Element) and node.tag == tag:
        found.append(node)
    for child in getattr(node, "children", ()):
        found.extend(find_elements(child, tag))
    return found
