"""
Exceptions raised by the transpiler pipeline.

Every error is terminal for the current call: the pipeline never returns a
partial tree or partial output.
"""

from typing import Optional

from .token import Token


class TranspileError(Exception):
    """Base exception for all transpiler errors."""

    pass


# --- Lexer errors ---
class LexerError(TranspileError):
    """Raised by the guarded tokenizer entry point."""

    pass


class InputTooLarge(LexerError):
    """The input exceeds the size ceiling and was not tokenized."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"input too large: {size} bytes exceeds limit of {limit}")


class TokenTooLong(LexerError):
    """A single token exceeds the per-token length ceiling."""

    def __init__(self, length: int, limit: int, position: int):
        self.length = length
        self.limit = limit
        self.position = position
        super().__init__(
            f"token too long: {length} characters exceeds limit of {limit} "
            f"at position {position}"
        )


class TooManyTokens(LexerError):
    """The input produced more tokens than the safety bound allows."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"too many tokens: {count} exceeds safety limit of {limit}")


# --- Parser errors ---
class ParseError(TranspileError):
    """Raised when the token sequence does not match the grammar."""

    pass


class UnexpectedToken(ParseError):
    """A token of the wrong type was found where the grammar expects another."""

    def __init__(self, token: Token, expected: Optional[str] = None):
        self.token = token
        self.expected = expected
        self.position = token.position
        if expected:
            message = f"expected {expected}, got {token}"
        else:
            message = f"unexpected token: {token}"
        super().__init__(message)


class MismatchedClosingTag(ParseError):
    """A closing tag resolved to a different name than its opening tag."""

    def __init__(self, expected: str, actual: str, position: int = -1):
        self.expected = expected
        self.actual = actual
        self.position = position
        super().__init__(f"mismatched closing tag: expected {expected}, got {actual}")


class UnexpectedEndOfInput(ParseError):
    """The input ended while the parser still required more tokens."""

    def __init__(self, tag: Optional[str] = None, expected: Optional[str] = None):
        self.tag = tag
        self.expected = expected
        if tag is not None:
            message = f"unexpected end of input: missing closing tag for <{tag}>"
        elif expected:
            message = f"unexpected end of input: expected {expected}"
        else:
            message = "unexpected end of input"
        super().__init__(message)
