"""
German HTML transpiler.

This package translates markup written with German tag and attribute names
into standard HTML. It uses a two-pass approach: first tokenizing the source,
then building a tree from the tokens, which is rendered and re-indented.
"""

from .token import Token, TokenType
from .errors import (
    TranspileError,
    LexerError,
    InputTooLarge,
    TokenTooLong,
    TooManyTokens,
    ParseError,
    UnexpectedToken,
    MismatchedClosingTag,
    UnexpectedEndOfInput,
)
from .dictionary import Vocabulary, DEFAULT_VOCABULARY
from .lexer import Lexer, tokenize
from .nodes import Node, Document, Element, Text, Comment, Media, render
from .parser import Parser
from .formatter import format_html
from .transpiler import Transpiler, transpile
from .ast_utils import node_to_dict, tokens_for_output, format_tree_for_output

__version__ = "0.1.0"

__all__ = [
    'Token',
    'TokenType',
    'TranspileError',
    'LexerError',
    'InputTooLarge',
    'TokenTooLong',
    'TooManyTokens',
    'ParseError',
    'UnexpectedToken',
    'MismatchedClosingTag',
    'UnexpectedEndOfInput',
    'Vocabulary',
    'DEFAULT_VOCABULARY',
    'Lexer',
    'tokenize',
    'Node',
    'Document',
    'Element',
    'Text',
    'Comment',
    'Media',
    'render',
    'Parser',
    'format_html',
    'Transpiler',
    'transpile',
    'node_to_dict',
    'tokens_for_output',
    'format_tree_for_output',
]
