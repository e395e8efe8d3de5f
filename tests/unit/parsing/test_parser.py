"""
Test cases for the reference parser.

Tests focus on AST shape, node ranges, dialect differences and error reporting.
"""

import math
import unittest

from jsonsource.core.nodes import NodeType
from jsonsource.core.tokens import Position, TokenType
from jsonsource.parsing.parser import parse
from jsonsource.security.exceptions import ParseError
from jsonsource.utils.config import LanguageOptions, Mode, ParseConfig


def jsonc(**options):
    return ParseConfig(mode=Mode.JSONC, options=LanguageOptions(**options))


class TestDocumentShape(unittest.TestCase):
    """Test the AST built for plain JSON."""

    def test_document_wraps_body(self):
        """Test the document spans the whole text and keeps all tokens."""
        text = ' {"a": [1, "x"]} '
        document = parse(text)

        self.assertIs(document.type, NodeType.DOCUMENT)
        self.assertEqual(document.range, (0, len(text)))
        self.assertEqual(document.loc.start, Position(1, 1, 0))
        self.assertEqual(document.loc.end, Position(1, 18, 17))
        self.assertEqual(len(document.tokens), 9)

        obj = document.body
        self.assertIs(obj.type, NodeType.OBJECT)
        self.assertEqual(obj.range, (1, 16))

    def test_members_and_elements(self):
        """Test members keep source order and elements wrap values."""
        document = parse('{"b": 1, "a": [true, null]}')
        members = document.body.members

        self.assertEqual([member.name.value for member in members], ["b", "a"])
        self.assertEqual(members[0].range, (1, 7))
        self.assertIs(members[0].type, NodeType.MEMBER)

        elements = members[1].value.elements
        self.assertEqual([element.type for element in elements], [NodeType.ELEMENT] * 2)
        self.assertIs(elements[0].value.type, NodeType.BOOLEAN)
        self.assertTrue(elements[0].value.value)
        self.assertIs(elements[1].value.type, NodeType.NULL)
        self.assertEqual(elements[0].range, elements[0].value.range)

    def test_scalar_values(self):
        """Test strings and numbers are decoded."""
        document = parse('["a\\u00e9\\n", -12, 2.5e1, "\\ud83d\\ude00"]')
        values = [element.value.value for element in document.body.elements]
        self.assertEqual(values, ["aé\n", -12, 25.0, "\U0001F600"])
        self.assertIsInstance(values[1], int)

    def test_empty_containers(self):
        """Test empty objects and arrays."""
        self.assertEqual(parse("{}").body.members, [])
        self.assertEqual(parse("[ ]").body.elements, [])


class TestParseErrors(unittest.TestCase):
    """Test malformed documents are rejected with positions."""

    def test_missing_value(self):
        """Test empty input has no value."""
        with self.assertRaises(ParseError) as cm:
            parse("")
        self.assertIn("Unexpected end of input", str(cm.exception))

    def test_trailing_content(self):
        """Test a document holds one value."""
        with self.assertRaises(ParseError) as cm:
            parse("1 2")
        self.assertIn("after document body", str(cm.exception))
        self.assertEqual(cm.exception.position, Position(1, 3, 2))

    def test_unclosed_object(self):
        """Test an object must be closed."""
        with self.assertRaises(ParseError):
            parse('{"a": 1')

    def test_missing_colon(self):
        """Test members need a colon."""
        with self.assertRaises(ParseError) as cm:
            parse('{"a" 1}')
        self.assertIn("Expected ':' after key", str(cm.exception))

    def test_json5_escapes_rejected_in_json(self):
        """Test JSON5-only escapes fail in JSON."""
        with self.assertRaises(ParseError):
            parse('"\\v"')
        with self.assertRaises(ParseError):
            parse('"\\q"')


class TestDialects(unittest.TestCase):
    """Test JSONC and JSON5 parsing."""

    def test_jsonc_comments(self):
        """Test comments are skipped by the parser but kept as tokens."""
        document = parse('{/* c */ "a": 1 // d\n}', ParseConfig(mode=Mode.JSONC))
        self.assertEqual(document.body.members[0].value.value, 1)
        comments = [token for token in document.tokens if token.type.is_comment]
        self.assertEqual(
            [token.type for token in comments],
            [TokenType.BLOCK_COMMENT, TokenType.LINE_COMMENT],
        )

    def test_trailing_commas(self):
        """Test trailing commas are opt-in for JSONC and always legal in JSON5."""
        with self.assertRaises(ParseError) as cm:
            parse("[1, 2,]", jsonc())
        self.assertIn("Unexpected trailing comma", str(cm.exception))
        with self.assertRaises(ParseError):
            parse("[1,]")

        allowed = parse("[1, 2,]", jsonc(allow_trailing_commas=True))
        self.assertEqual(len(allowed.body.elements), 2)
        self.assertEqual(len(parse('{"a": 1,}', ParseConfig(mode=Mode.JSON5)).body.members), 1)

    def test_json5_values(self):
        """Test unquoted keys, single quotes, hex and special numbers."""
        text = "{key: 'it\\'s', hex: 0x10, nan: -NaN, inf: Infinity, half: .5}"
        document = parse(text, ParseConfig(mode=Mode.JSON5))
        members = document.body.members

        self.assertIs(members[0].name.type, NodeType.IDENTIFIER)
        self.assertEqual(members[0].name.name, "key")
        self.assertEqual(members[0].value.value, "it's")
        self.assertEqual(members[1].value.value, 16)
        self.assertIs(members[2].value.type, NodeType.NAN)
        self.assertEqual(members[2].value.sign, "-")
        self.assertIs(members[3].value.type, NodeType.INFINITY)
        self.assertEqual(members[3].value.sign, "")
        self.assertTrue(math.isclose(members[4].value.value, 0.5))


if __name__ == "__main__":
    unittest.main()
