"""
Node model for the transpiled document tree.

Nodes are frozen dataclasses forming a closed sum type. Children are stored
as tuples and every node is built only after its children are complete, so a
tree is never mutated once constructed.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple, Union, assert_never


@dataclass(frozen=True)
class Document:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Element:
    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: Tuple["Node", ...] = ()
    self_closing: bool = False

    def __hash__(self) -> int:
        # Order-insensitive, matching dict equality of the attributes
        attributes = frozenset(self.attributes.items())
        return hash((self.tag, attributes, self.children, self.self_closing))


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Comment:
    content: str


@dataclass(frozen=True)
class Media:
    """An image leaf with only ``src`` and ``alt`` semantics."""

    src: str
    alt: str = ""


Node = Union[Document, Element, Text, Comment, Media]


def _render_attributes(attributes: Dict[str, str]) -> str:
    parts = []
    for name, value in attributes.items():
        # Empty values render as boolean attributes.
        if value:
            parts.append(f' {name}="{value}"')
        else:
            parts.append(f" {name}")
    return "".join(parts)


def render(node: Node) -> str:
    """
    Render a node and its subtree as HTML text.

    Attributes keep their stored order and values are written verbatim.

    Args:
        node: Any node of a well-formed tree

    Returns:
        The HTML text for the node
    """
    match node:
        case Document(children=children):
            return "".join(render(child) for child in children)
        case Element(tag=tag, attributes=attributes, self_closing=True):
            return f"<{tag}{_render_attributes(attributes)} />"
        case Element(tag=tag, attributes=attributes, children=children):
            inner = "".join(render(child) for child in children)
            return f"<{tag}{_render_attributes(attributes)}>{inner}</{tag}>"
        case Text(content=content):
            return content
        case Comment(content=content):
            return f"<!-- {content} -->"
        case Media(src=src, alt=alt):
            if alt:
                return f'<img src="{src}" alt="{alt}" />'
            return f'<img src="{src}" />'
        case _:
            assert_never(node)
