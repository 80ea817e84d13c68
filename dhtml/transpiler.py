"""
Transpiler facade: German HTML in, formatted standard HTML out.

    source -> tokenize -> Parser -> render -> format_html
"""

from typing import Dict, Optional

from .dictionary import DEFAULT_VOCABULARY, Vocabulary
from .formatter import format_html
from .lexer import tokenize
from .nodes import Document, render
from .parser import Parser


class Transpiler:
    """
    Converts German HTML to standard HTML.

    The only state is the read-only vocabulary, so one instance can serve any
    number of calls, including concurrent ones.
    """

    def __init__(self, vocabulary: Optional[Vocabulary] = None):
        self.vocabulary = vocabulary or DEFAULT_VOCABULARY

    def parse(self, source: str) -> Document:
        """
        Tokenize and parse source markup into a Document tree.

        Raises:
            LexerError: If a security limit of the tokenizer is hit
            ParseError: If the markup is not well formed
        """
        return Parser(tokenize(source), self.vocabulary).parse()

    def transpile(self, source: str) -> str:
        """
        Convert German HTML to formatted standard HTML.

        Args:
            source: German HTML markup

        Returns:
            Indented HTML text

        Raises:
            TranspileError: On any lexer or parser failure
        """
        return format_html(render(self.parse(source)))

    def supported_tags(self) -> Dict[str, str]:
        """Return a copy of the German to HTML tag mapping."""
        return dict(self.vocabulary.tags)

    def supported_attributes(self) -> Dict[str, str]:
        """Return a copy of the German to HTML attribute mapping."""
        return dict(self.vocabulary.attributes)


_default_transpiler = Transpiler()


def transpile(source: str) -> str:
    """Transpile with the default German vocabulary."""
    return _default_transpiler.transpile(source)
