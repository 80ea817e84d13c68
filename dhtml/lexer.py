"""
Lexer for German HTML markup.

This module turns raw source text into a flat sequence of tokens. The lexer
knows whether it is inside a tag (between ``<`` and ``>`` / ``/>``) or in text
content, and inside a tag whether the next identifier is the tag name, an
attribute name, or an unquoted attribute value.
"""

from typing import Iterator, List

from .errors import InputTooLarge, TokenTooLong, TooManyTokens
from .token import Token, TokenType

# Security limits
MAX_INPUT_SIZE = 100 * 1024  # bytes of UTF-8
MAX_TOKEN_LENGTH = 1000  # characters per token
MAX_TOKEN_COUNT = MAX_INPUT_SIZE // 10

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"


class Lexer:
    """
    Tokenizer for German HTML.

    Operates on code points (``str``), so multi-byte characters such as
    umlauts stay intact inside identifiers. Tokens are produced on demand by
    ``next_token``; iterating over the lexer yields every token up to and
    including the terminating EOF token.
    """

    def __init__(self, source: str):
        """
        Initialize the lexer.

        Args:
            source: Markup to tokenize
        """
        self.source = source
        self.position = 0
        self.inside_tag = False  # Between '<' and '>' or '/>'
        self.after_equals = False  # Next identifier is an unquoted value
        self.seen_tag_name = False  # Tag name already emitted for this tag

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.token_type == TokenType.EOF:
                return

    def _at_end(self) -> bool:
        return self.position >= len(self.source)

    def _char(self, offset: int = 0) -> str:
        index = self.position + offset
        if index >= len(self.source):
            return ""
        return self.source[index]

    def _enter_tag(self) -> None:
        self.inside_tag = True
        self.seen_tag_name = False
        self.after_equals = False

    def _exit_tag(self) -> None:
        self.inside_tag = False
        self.seen_tag_name = False
        self.after_equals = False

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self.source[self.position].isspace():
            self.position += 1

    def _read_text(self) -> Token:
        """
        Read text content up to the next '<'.

        The run is capped at MAX_TOKEN_LENGTH characters; longer text is
        split over several adjacent TEXT tokens.
        """
        start = self.position
        end = start
        limit = len(self.source)
        while end < limit and self.source[end] != "<" and end - start < MAX_TOKEN_LENGTH:
            end += 1
        self.position = end
        return Token(TokenType.TEXT, self.source[start:end].strip(), start)

    def _read_comment(self) -> Token:
        start = self.position
        body_start = start + len(COMMENT_OPEN)
        close = self.source.find(COMMENT_CLOSE, body_start)
        if close == -1:
            body = self.source[body_start:]
            self.position = len(self.source)
        else:
            body = self.source[body_start:close]
            self.position = close + len(COMMENT_CLOSE)
        return Token(TokenType.COMMENT, body.strip(), start)

    def _read_quoted(self, quote: str) -> Token:
        # An unterminated quote runs to the end of the input.
        start = self.position
        close = self.source.find(quote, start + 1)
        if close == -1:
            value = self.source[start + 1 :]
            self.position = len(self.source)
        else:
            value = self.source[start + 1 : close]
            self.position = close + 1
        self.after_equals = False
        return Token(TokenType.ATTR_VALUE, value, start)

    def _read_identifier(self) -> str:
        start = self.position
        while not self._at_end():
            char = self.source[self.position]
            if not (char.isalnum() or char in "_-"):
                break
            self.position += 1
        return self.source[start : self.position]

    def _read_unquoted_value(self) -> str:
        start = self.position
        while not self._at_end():
            char = self.source[self.position]
            if char in ">/" or char.isspace():
                break
            self.position += 1
        return self.source[start : self.position]

    def _single(self, token_type: TokenType, width: int = 1) -> Token:
        start = self.position
        self.position += width
        return Token(token_type, self.source[start : self.position], start)

    def next_token(self) -> Token:
        """
        Return the next token from the input.

        Returns:
            The next token; EOF once the input is exhausted
        """
        if not self.inside_tag and not self._at_end() and self._char() != "<":
            return self._read_text()

        self._skip_whitespace()

        if self._at_end():
            return Token(TokenType.EOF, "", len(self.source))

        char = self._char()

        if char == "<":
            if not self.inside_tag and self.source.startswith(COMMENT_OPEN, self.position):
                return self._read_comment()
            self._enter_tag()
            if self._char(1) == "/":
                return self._single(TokenType.TAG_END, 2)
            return self._single(TokenType.TAG_OPEN)

        if char == ">":
            self._exit_tag()
            return self._single(TokenType.TAG_CLOSE)

        if char == "/":
            if self._char(1) == ">":
                self._exit_tag()
                return self._single(TokenType.SELF_CLOSE, 2)
            return self._single(TokenType.UNKNOWN)

        if char == "=":
            self.after_equals = True
            return self._single(TokenType.EQUALS)

        if char in "\"'":
            return self._read_quoted(char)

        if char.isalpha():
            start = self.position
            if self.after_equals:
                self.after_equals = False
                return Token(TokenType.ATTR_VALUE, self._read_unquoted_value(), start)
            if self.seen_tag_name:
                return Token(TokenType.ATTR_NAME, self._read_identifier(), start)
            self.seen_tag_name = True
            return Token(TokenType.TAG_NAME, self._read_identifier(), start)

        return self._single(TokenType.UNKNOWN)


def tokenize(source: str) -> List[Token]:
    """
    Tokenize source markup with the security limits applied.

    Args:
        source: Markup to tokenize

    Returns:
        List of tokens, terminated by an EOF token

    Raises:
        InputTooLarge: If the UTF-8 encoded input exceeds MAX_INPUT_SIZE
        TokenTooLong: If a token is longer than MAX_TOKEN_LENGTH characters
        TooManyTokens: If more than MAX_TOKEN_COUNT tokens are produced
    """
    size = len(source.encode("utf-8", errors="surrogatepass"))
    if size > MAX_INPUT_SIZE:
        raise InputTooLarge(size, MAX_INPUT_SIZE)

    lexer = Lexer(source)
    tokens: List[Token] = []

    while True:
        token = lexer.next_token()

        if len(token.value) > MAX_TOKEN_LENGTH:
            raise TokenTooLong(len(token.value), MAX_TOKEN_LENGTH, token.position)

        tokens.append(token)

        if token.token_type == TokenType.EOF:
            break

        if len(tokens) > MAX_TOKEN_COUNT:
            raise TooManyTokens(len(tokens), MAX_TOKEN_COUNT)

    return tokens
