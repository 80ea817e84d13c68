"""
Recursive-descent parser for German HTML.

The parser consumes tokens with one token of lookahead, resolves localized
tag and attribute names through a Vocabulary, and builds a Document tree.
Grammar:

    document  := node* EOF
    node      := element | comment | text
    element   := '<' TAG_NAME attribute* ( '/>' | '>' node* '</' TAG_NAME '>' )
    attribute := ATTR_NAME ( '=' ATTR_VALUE )?
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .dictionary import DEFAULT_VOCABULARY, Vocabulary
from .errors import MismatchedClosingTag, UnexpectedEndOfInput, UnexpectedToken
from .nodes import Comment, Document, Element, Media, Node, Text
from .token import Token, TokenType

# Attribute layouts that become a Media node, in source order
MEDIA_LAYOUTS = (("src",), ("src", "alt"))


class Parser:
    """
    Parser for German HTML token streams.

    Any token that does not fit the grammar aborts parsing with a ParseError;
    no partial tree is ever returned.
    """

    def __init__(self, tokens: Iterable[Token], vocabulary: Optional[Vocabulary] = None):
        """
        Initialize the parser.

        Args:
            tokens: Token sequence terminated by an EOF token; may be a lazy
                iterator such as a Lexer
            vocabulary: Name resolution table, defaults to the German table
        """
        self.vocabulary = vocabulary or DEFAULT_VOCABULARY
        self._tokens = iter(tokens)
        self._eof = Token(TokenType.EOF, "", 0)

        # Read two tokens, so current_token and peek_token are both set
        self.current_token = self._pull()
        self.peek_token = self.current_token
        if self.current_token.token_type != TokenType.EOF:
            self.peek_token = self._pull()

    def _pull(self) -> Token:
        token = next(self._tokens, None)
        if token is None:
            return self._eof
        if token.token_type == TokenType.EOF:
            self._eof = token
        return token

    def _next_token(self) -> None:
        self.current_token = self.peek_token
        if self.current_token.token_type == TokenType.EOF:
            self.peek_token = self.current_token
        else:
            self.peek_token = self._pull()

    def _expect(
        self, token_type: TokenType, expected: str, tag: Optional[str] = None
    ) -> Token:
        token = self.current_token
        if token.token_type == token_type:
            return token
        if token.token_type == TokenType.EOF:
            raise UnexpectedEndOfInput(tag=tag, expected=expected)
        raise UnexpectedToken(token, expected)

    def _resolve_tag(self, name: str) -> str:
        resolved = self.vocabulary.resolve_tag(name)
        return resolved if resolved is not None else name

    def _resolve_attribute(self, name: str) -> str:
        resolved = self.vocabulary.resolve_attribute(name)
        return resolved if resolved is not None else name

    def parse(self) -> Document:
        """
        Parse the whole token stream.

        Returns:
            The Document holding the top-level nodes in source order

        Raises:
            ParseError: On the first token that does not fit the grammar
        """
        children: List[Node] = []
        while self.current_token.token_type != TokenType.EOF:
            node = self._parse_node()
            if node is not None:
                children.append(node)
            self._next_token()
        return Document(tuple(children))

    def _parse_node(self) -> Optional[Node]:
        token = self.current_token
        if token.token_type == TokenType.TAG_OPEN:
            return self._parse_element()
        if token.token_type == TokenType.TEXT:
            if not token.value.strip():
                return None  # Skip whitespace-only text
            return Text(token.value)
        if token.token_type == TokenType.COMMENT:
            return Comment(token.value)
        raise UnexpectedToken(token)

    def _parse_element(self) -> Node:
        self._expect(TokenType.TAG_OPEN, "'<'")
        self._next_token()

        name_token = self._expect(TokenType.TAG_NAME, "tag name")
        tag = self._resolve_tag(name_token.value)
        self._next_token()

        attributes: Dict[str, str] = {}
        while self.current_token.token_type == TokenType.ATTR_NAME:
            name, value = self._parse_attribute()
            attributes[name] = value

        if self.current_token.token_type == TokenType.SELF_CLOSE:
            return self._build_self_closing(tag, attributes)

        self._expect(TokenType.TAG_CLOSE, "'>' or '/>'")
        self._next_token()

        children: List[Node] = []
        while self.current_token.token_type not in (TokenType.TAG_END, TokenType.EOF):
            child = self._parse_node()
            if child is not None:
                children.append(child)
            self._next_token()

        if self.current_token.token_type == TokenType.EOF:
            raise UnexpectedEndOfInput(tag=tag)

        self._next_token()  # consume '</'

        closing_token = self._expect(TokenType.TAG_NAME, "closing tag name", tag=tag)
        closing_tag = self._resolve_tag(closing_token.value)
        if closing_tag != tag:
            raise MismatchedClosingTag(tag, closing_tag, closing_token.position)
        self._next_token()

        self._expect(TokenType.TAG_CLOSE, "'>'")
        return Element(tag, attributes, tuple(children))

    def _build_self_closing(self, tag: str, attributes: Dict[str, str]) -> Node:
        # Media output must equal the Element output it replaces
        if tag == "img" and tuple(attributes) in MEDIA_LAYOUTS and all(attributes.values()):
            return Media(attributes["src"], attributes.get("alt", ""))
        return Element(tag, attributes, self_closing=True)

    def _parse_attribute(self) -> Tuple[str, str]:
        name_token = self._expect(TokenType.ATTR_NAME, "attribute name")
        name = self._resolve_attribute(name_token.value)
        self._next_token()

        value = ""
        if self.current_token.token_type == TokenType.EQUALS:
            self._next_token()
            value = self._expect(TokenType.ATTR_VALUE, "attribute value").value
            self._next_token()

        return name, value
