"""
Test cases for the jsonsource lexer.

Tests focus on token types, exact ranges and locations, and comment tokens.
"""

import unittest

from jsonsource.core.source_code import JSONSourceCode
from jsonsource.core.tokens import Position, TokenType
from jsonsource.parsing.lexer import Lexer
from jsonsource.parsing.parser import parse
from jsonsource.security.exceptions import ParseError
from jsonsource.utils.config import Mode


class TestLexerTokens(unittest.TestCase):
    """Test token types and raw values."""

    def _types(self, text, mode=Mode.JSON):
        return [token.type for token in Lexer(text, mode).get_all_tokens()]

    def test_structural_tokens(self):
        """Test punctuators map to their own types."""
        self.assertEqual(
            self._types("{}[]:,"),
            [
                TokenType.LBRACE,
                TokenType.RBRACE,
                TokenType.LBRACKET,
                TokenType.RBRACKET,
                TokenType.COLON,
                TokenType.COMMA,
            ],
        )

    def test_literal_tokens(self):
        """Test literals keep their raw source text."""
        tokens = Lexer('"a\\n" -1.5e3 true null').get_all_tokens()
        self.assertEqual(
            [(token.type, token.value) for token in tokens],
            [
                (TokenType.STRING, '"a\\n"'),
                (TokenType.NUMBER, "-1.5e3"),
                (TokenType.BOOLEAN, "true"),
                (TokenType.NULL, "null"),
            ],
        )

    def test_ranges_and_locations(self):
        """Test tokens carry offsets and 1-based line/column positions."""
        tokens = Lexer('{\n  "k": 10\n}').get_all_tokens()
        key = tokens[1]
        number = tokens[3]

        self.assertEqual(key.range, (4, 7))
        self.assertEqual(key.loc.start, Position(2, 3, 4))
        self.assertEqual(key.loc.end, Position(2, 6, 7))
        self.assertEqual(number.range, (9, 11))
        self.assertEqual(tokens[-1].loc.start, Position(3, 1, 12))

    def test_crlf_counts_as_one_line_break(self):
        """Test CRLF advances a single line."""
        tokens = Lexer("[\r\n1]").get_all_tokens()
        self.assertEqual(tokens[1].loc.start, Position(2, 1, 3))

    def test_unexpected_character(self):
        """Test unknown characters raise ParseError with a position."""
        with self.assertRaises(ParseError) as cm:
            Lexer("[1, @]").get_all_tokens()
        self.assertIn("Unexpected character '@'", str(cm.exception))
        self.assertEqual(cm.exception.position, Position(1, 5, 4))

    def test_unterminated_string(self):
        """Test strings must close on the same line."""
        with self.assertRaises(ParseError):
            Lexer('"abc').get_all_tokens()
        with self.assertRaises(ParseError):
            Lexer('"ab\nc"').get_all_tokens()

    def test_unicode_line_separators_inside_strings(self):
        """Test U+2028 and U+2029 are string content but still count as line breaks."""
        text = '{"a": "x\u2028y", "b": "\u2029"}'
        for mode in Mode:
            with self.subTest(mode=mode.value):
                tokens = Lexer(text, mode).get_all_tokens()
                strings = [t.value for t in tokens if t.type is TokenType.STRING]
                self.assertEqual(
                    strings, ['"a"', '"x\u2028y"', '"b"', '"\u2029"']
                )
                self.assertEqual(tokens[-1].loc.start, Position(3, 2, 21))

        document = parse(text)
        self.assertEqual(document.body.members[0].value.value, "x\u2028y")
        source = JSONSourceCode(text, document)
        self.assertEqual(source.get_loc_from_index(21), Position(3, 2, 21))
        self.assertEqual(len(source.lines), 3)

    def test_identifiers_need_json5(self):
        """Test bare words other than keywords are JSON5 only."""
        with self.assertRaises(ParseError):
            Lexer("{key: 1}").get_all_tokens()
        self.assertIn(TokenType.IDENTIFIER, self._types("{key: 1}", Mode.JSON5))


class TestLexerComments(unittest.TestCase):
    """Test comment tokens."""

    def test_comments_are_tokens_in_jsonc(self):
        """Test line and block comments are emitted in order."""
        tokens = Lexer("// a\n[/* b */1]", Mode.JSONC).get_all_tokens()
        self.assertEqual(
            [(token.type, token.value) for token in tokens],
            [
                (TokenType.LINE_COMMENT, "// a"),
                (TokenType.LBRACKET, "["),
                (TokenType.BLOCK_COMMENT, "/* b */"),
                (TokenType.NUMBER, "1"),
                (TokenType.RBRACKET, "]"),
            ],
        )
        self.assertTrue(tokens[0].is_comment)
        self.assertFalse(tokens[1].is_comment)

    def test_line_comment_ends_before_newline(self):
        """Test a line comment stops at the line terminator."""
        comment = Lexer("// x\r\n1", Mode.JSONC).get_all_tokens()[0]
        self.assertEqual(comment.range, (0, 4))

    def test_multiline_block_comment_location(self):
        """Test a block comment spanning lines has distinct start and end lines."""
        comment = Lexer("/* a\n b */ 1", Mode.JSON5).get_all_tokens()[0]
        self.assertEqual(comment.loc.start.line, 1)
        self.assertEqual(comment.loc.end, Position(2, 6, 10))
        self.assertTrue(comment.loc.is_multiline)

    def test_comments_rejected_in_json(self):
        """Test plain JSON has no comments."""
        with self.assertRaises(ParseError) as cm:
            Lexer("// a\n1").get_all_tokens()
        self.assertIn("Comments are not allowed in JSON", str(cm.exception))

    def test_unterminated_block_comment(self):
        """Test an unclosed block comment fails."""
        with self.assertRaises(ParseError):
            Lexer("/* never closed", Mode.JSONC).get_all_tokens()


class TestLexerJSON5(unittest.TestCase):
    """Test JSON5 lexical extensions."""

    def _values(self, text):
        return [
            (token.type, token.value)
            for token in Lexer(text, Mode.JSON5).get_all_tokens()
        ]

    def test_single_quoted_strings(self):
        """Test single quotes delimit strings."""
        self.assertEqual(self._values("'it'"), [(TokenType.STRING, "'it'")])

    def test_numbers(self):
        """Test hex, signed and dot-leading numbers."""
        for text in ("0x1F", "+1", ".5", "5.", "-0XaB"):
            with self.subTest(text=text):
                self.assertEqual(self._values(text), [(TokenType.NUMBER, text)])

    def test_nan_and_infinity(self):
        """Test NaN and Infinity with optional signs."""
        self.assertEqual(
            self._values("[NaN, -Infinity, +NaN]"),
            [
                (TokenType.LBRACKET, "["),
                (TokenType.NAN, "NaN"),
                (TokenType.COMMA, ","),
                (TokenType.INFINITY, "-Infinity"),
                (TokenType.COMMA, ","),
                (TokenType.NAN, "+NaN"),
                (TokenType.RBRACKET, "]"),
            ],
        )


if __name__ == "__main__":
    unittest.main()
