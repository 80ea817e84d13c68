"""
Token class for the German HTML lexer.
Represents a single token of the source markup.
"""

from enum import Enum
from dataclasses import dataclass


class TokenType(Enum):
    """Types of tokens that can be produced by the lexer."""

    TAG_OPEN = "tag_open"  # <
    TAG_CLOSE = "tag_close"  # >
    SELF_CLOSE = "self_close"  # />
    TAG_END = "tag_end"  # </
    TEXT = "text"  # Text content between tags
    TAG_NAME = "tag_name"  # First identifier after < or </
    ATTR_NAME = "attr_name"  # Following identifiers inside a tag
    ATTR_VALUE = "attr_value"  # Quoted or unquoted value after =
    EQUALS = "equals"  # =
    COMMENT = "comment"  # <!-- ... -->
    EOF = "eof"

    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Token:
    """
    Represents a token in the source markup.

    Tokens are immutable once produced. ``position`` is the offset (in code
    points) of the token's first character in the source text.
    """

    token_type: TokenType
    value: str
    position: int

    def __repr__(self):
        return f"Token({self.token_type.value}, {self.value!r}, pos {self.position})"

    def __str__(self):
        return f"{self.token_type.value}({self.value!r}) at position {self.position}"

    def is_type(self, *token_types: TokenType) -> bool:
        """Check if the token is of any of the specified types."""
        return self.token_type in token_types
