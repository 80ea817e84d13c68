import unittest

from dhtml.dictionary import DEFAULT_VOCABULARY, Vocabulary
from dhtml.errors import (
    InputTooLarge,
    LexerError,
    MismatchedClosingTag,
    ParseError,
    TooManyTokens,
    TranspileError,
    UnexpectedEndOfInput,
)
from dhtml.lexer import MAX_INPUT_SIZE
from dhtml.nodes import Element
from dhtml.transpiler import Transpiler, transpile

EXAMPLE_SOURCE = """
<döner>
  <kopf>
    <titel>Hallo</titel>
  </kopf>
  <körper>
    <bereich klasse="karte" identität="haupt">
      <überschrift1>Willkommen</überschrift1>
      <absatz>Ein <stark>kurzer</stark> Text.</absatz>
      <eingabe typ="text" platzhalter="Name" erforderlich />
    </bereich>
  </körper>
</döner>
"""

EXAMPLE_OUTPUT = """<html>
  <head>
    <title>Hallo</title>
  </head>
  <body>
    <div class="karte" id="haupt">
      <h1>Willkommen</h1>
      <p>Ein<strong>kurzer</strong>Text.</p>
      <input type="text" placeholder="Name" required />
    </div>
  </body>
</html>
"""


class TestTranspile(unittest.TestCase):
    """Test cases for the end-to-end transpile call."""

    def test_full_document(self):
        self.assertEqual(transpile(EXAMPLE_SOURCE), EXAMPLE_OUTPUT)

    def test_boolean_attribute(self):
        self.assertEqual(transpile("<eingabe erforderlich />"), "<input required />\n")

    def test_every_vocabulary_tag_self_closes(self):
        for german, html in DEFAULT_VOCABULARY.tags.items():
            with self.subTest(tag=german):
                self.assertEqual(transpile(f"<{german}/>"), f"<{html} />\n")

    def test_unknown_names_pass_through(self):
        self.assertEqual(
            transpile('<foo bar="1">x</foo>'),
            '<foo bar="1">x</foo>\n',
        )

    def test_empty_element_is_split_by_formatter(self):
        self.assertEqual(transpile("<foo></foo>"), "<foo>\n</foo>\n")

    def test_third_line_of_chain_is_indented_twice(self):
        result = transpile("<bereich><bereich><bereich>x</bereich></bereich></bereich>")
        third = result.splitlines()[2]
        self.assertEqual(third, "    <div>x</div>")

    def test_image_attributes_keep_source_form(self):
        cases = {
            '<bild quelle="logo.png" alternativ="Logo" />': '<img src="logo.png" alt="Logo" />\n',
            '<bild alternativ="Logo" quelle="logo.png" />': '<img alt="Logo" src="logo.png" />\n',
            '<bild quelle="a.png" alternativ />': '<img src="a.png" alt />\n',
            '<bild quelle="a.png" alternativ="" />': '<img src="a.png" alt />\n',
            "<bild quelle />": "<img src />\n",
        }
        for source, expected in cases.items():
            with self.subTest(source=source):
                self.assertEqual(transpile(source), expected)

    def test_comment_survives(self):
        self.assertEqual(
            transpile("<bereich><!--Navigation--><absatz>x</absatz></bereich>"),
            "<div>\n  <!-- Navigation -->\n  <p>x</p>\n</div>\n",
        )

    def test_empty_input(self):
        self.assertEqual(transpile(""), "")
        self.assertEqual(transpile("   \n"), "")

    def test_retranspiling_output_is_stable(self):
        once = transpile(EXAMPLE_SOURCE)
        self.assertEqual(transpile(once), once)

        transpiler = Transpiler()
        self.assertEqual(transpiler.parse(once), transpiler.parse(EXAMPLE_SOURCE))


class TestTranspileErrors(unittest.TestCase):
    """Test cases for error propagation through the facade."""

    def test_mismatched_closing_tag(self):
        with self.assertRaises(MismatchedClosingTag) as cm:
            transpile("<bereich></spanne>")
        self.assertEqual((cm.exception.expected, cm.exception.actual), ("div", "span"))
        self.assertIsInstance(cm.exception, ParseError)

    def test_missing_closing_tag(self):
        with self.assertRaises(UnexpectedEndOfInput):
            transpile("<bereich>")

    def test_oversized_input(self):
        with self.assertRaises(InputTooLarge) as cm:
            transpile("x" * (MAX_INPUT_SIZE + 1))
        self.assertIsInstance(cm.exception, LexerError)

    def test_token_flood(self):
        with self.assertRaises(TooManyTokens):
            transpile("<a/>" * 4000)

    def test_all_errors_share_a_base(self):
        for source in ("<bereich>", "<bereich></spanne>", "<a/>" * 4000):
            with self.subTest(source=source[:20]):
                with self.assertRaises(TranspileError):
                    transpile(source)


class TestTranspiler(unittest.TestCase):
    """Test cases for the Transpiler class."""

    def test_custom_vocabulary(self):
        transpiler = Transpiler(Vocabulary({"kasten": "section"}, {"farbe": "color"}))
        self.assertEqual(
            transpiler.transpile('<kasten farbe="rot">x</kasten>'),
            '<section color="rot">x</section>\n',
        )
        # German names outside the custom table pass through
        self.assertEqual(transpiler.transpile("<bereich/>"), "<bereich />\n")

    def test_parse_returns_tree(self):
        document = Transpiler().parse("<absatz>x</absatz>")
        self.assertEqual(document.children[0].tag, "p")
        self.assertIsInstance(document.children[0], Element)

    def test_supported_names_are_copies(self):
        transpiler = Transpiler()
        tags = transpiler.supported_tags()
        attributes = transpiler.supported_attributes()
        self.assertEqual(tags["bereich"], "div")
        self.assertEqual(attributes["klasse"], "class")

        tags["bereich"] = "section"
        self.assertEqual(transpiler.transpile("<bereich/>"), "<div />\n")

    def test_instance_is_reusable(self):
        transpiler = Transpiler()
        first = transpiler.transpile(EXAMPLE_SOURCE)
        with self.assertRaises(ParseError):
            transpiler.transpile("<bereich>")
        self.assertEqual(transpiler.transpile(EXAMPLE_SOURCE), first)


if __name__ == "__main__":
    unittest.main()
