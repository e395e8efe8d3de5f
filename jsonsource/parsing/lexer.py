"""
Lexer for jsonsource - tokenizes JSON, JSONC and JSON5 text.

Unlike a plain JSON tokenizer, every token keeps its exact offset range and
line/column location, and comments are emitted as tokens so that the
source-code model can navigate around them.
"""

import re
from collections.abc import Iterator
from typing import Optional

from ..core.tokens import Location, Position, Token, TokenType
from ..security.exceptions import ParseError
from ..utils.config import Mode

STRUCTURAL_TOKENS = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
}

JSON_WHITESPACE = " \t\n\r"
JSON5_WHITESPACE = JSON_WHITESPACE + "\v\f\xa0\ufeff\u2028\u2029"
LINE_TERMINATORS = "\n\r\u2028\u2029"
STRING_TERMINATORS = "\n\r"

JSON_NUMBER = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?")
JSON5_NUMBER = re.compile(
    r"[+-]?(?:0[xX][0-9a-fA-F]+|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)
IDENTIFIER = re.compile(r"(?:[^\W\d]|\$)[\w$]*")

KEYWORDS = {
    "true": TokenType.BOOLEAN,
    "false": TokenType.BOOLEAN,
    "null": TokenType.NULL,
}
JSON5_KEYWORDS = {
    "NaN": TokenType.NAN,
    "Infinity": TokenType.INFINITY,
}


class Lexer:
    """Lexical analyzer producing located tokens, comments included."""

    def __init__(self, text: str, mode: Mode = Mode.JSON) -> None:
        self.text = text
        self.mode = mode
        self.pos = 0
        self.line = 1
        self.column = 1
        self.whitespace = JSON5_WHITESPACE if mode is Mode.JSON5 else JSON_WHITESPACE

    def current_position(self) -> Position:
        """Get current position in the text."""
        return Position(self.line, self.column, self.pos)

    def peek(self, offset: int = 0) -> str:
        """Peek at character at given offset without consuming it."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def advance(self) -> str:
        """Advance position and return the current character."""
        if self.pos >= len(self.text):
            return ""

        char = self.text[self.pos]
        self.pos += 1

        if char == "\r" and self.peek() == "\n":
            self.column += 1
        elif char in LINE_TERMINATORS:
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def advance_by(self, count: int) -> None:
        """Advance over count characters."""
        for _ in range(count):
            self.advance()

    def skip_whitespace(self) -> None:
        """Skip whitespace characters, newlines included."""
        while self.pos < len(self.text) and self.text[self.pos] in self.whitespace:
            self.advance()

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the input text into a sequence of tokens."""
        while True:
            self.skip_whitespace()

            if self.pos >= len(self.text):
                break

            char = self.peek()
            start = self.current_position()

            # Try different token types in order
            token = self._try_comment_token(char, start)
            if token:
                yield token
                continue

            token = self._try_structural_token(char, start)
            if token:
                yield token
                continue

            token = self._try_string_token(char, start)
            if token:
                yield token
                continue

            token = self._try_number_token(char, start)
            if token:
                yield token
                continue

            token = self._try_identifier_token(char, start)
            if token:
                yield token
                continue

            raise ParseError(f"Unexpected character '{char}'", start)

    def get_all_tokens(self) -> list[Token]:
        """Get all tokens as a list."""
        return list(self.tokenize())

    def _make_token(self, token_type: TokenType, start: Position) -> Token:
        end = self.current_position()
        return Token(
            token_type,
            self.text[start.offset : end.offset],
            (start.offset, end.offset),
            Location(start, end),
        )

    def _try_comment_token(self, char: str, start: Position) -> Optional[Token]:
        """Try to create a line or block comment token."""
        if char != "/" or not self.peek(1) or self.peek(1) not in "/*":
            return None

        if not self.mode.allows_comments:
            raise ParseError(
                "Comments are not allowed in JSON",
                start,
                ["Use the jsonc or json5 mode for documents with comments"],
            )

        if self.peek(1) == "/":
            while self.pos < len(self.text) and self.peek() not in LINE_TERMINATORS:
                self.advance()
            return self._make_token(TokenType.LINE_COMMENT, start)

        end = self.text.find("*/", self.pos + 2)
        if end == -1:
            raise ParseError("Unterminated block comment", start)
        self.advance_by(end + 2 - self.pos)
        return self._make_token(TokenType.BLOCK_COMMENT, start)

    def _try_structural_token(self, char: str, start: Position) -> Optional[Token]:
        """Try to create structural tokens (braces, brackets, etc.)."""
        if char in STRUCTURAL_TOKENS:
            self.advance()
            return self._make_token(STRUCTURAL_TOKENS[char], start)
        return None

    def _try_string_token(self, char: str, start: Position) -> Optional[Token]:
        """Try to create a string token."""
        quotes = "\"'" if self.mode is Mode.JSON5 else '"'
        if char not in quotes:
            return None

        self.advance()
        while self.pos < len(self.text):
            current = self.peek()
            if current == char:
                self.advance()
                return self._make_token(TokenType.STRING, start)
            if current == "\\":
                self.advance()
                escaped = self.peek()
                if escaped in STRING_TERMINATORS and self.mode is not Mode.JSON5:
                    break
                self.advance()
                if escaped == "\r" and self.peek() == "\n":
                    self.advance()
            elif current in STRING_TERMINATORS:
                break
            else:
                self.advance()

        raise ParseError(
            "Unterminated string", start, ["Check for a missing closing quote"]
        )

    def _try_number_token(self, char: str, start: Position) -> Optional[Token]:
        """Try to create a number token, or a signed NaN/Infinity in JSON5."""
        if self.mode is Mode.JSON5:
            if char in "+-":
                token = self._try_signed_keyword(char, start)
                if token:
                    return token
            pattern = JSON5_NUMBER
        else:
            pattern = JSON_NUMBER

        if not (char.isdigit() or char in "+-."):
            return None

        match = pattern.match(self.text, self.pos)
        if not match:
            return None

        self.advance_by(match.end() - self.pos)
        return self._make_token(TokenType.NUMBER, start)

    def _try_signed_keyword(self, sign: str, start: Position) -> Optional[Token]:
        """Try to create -Infinity, +NaN and similar JSON5 tokens."""
        for word, token_type in JSON5_KEYWORDS.items():
            if self.text.startswith(word, self.pos + len(sign)):
                self.advance_by(len(sign) + len(word))
                return self._make_token(token_type, start)
        return None

    def _try_identifier_token(self, char: str, start: Position) -> Optional[Token]:
        """Try to create an identifier or keyword token."""
        match = IDENTIFIER.match(self.text, self.pos)
        if not match:
            return None

        word = match.group(0)
        token_type = KEYWORDS.get(word)
        if token_type is None and self.mode is Mode.JSON5:
            token_type = JSON5_KEYWORDS.get(word, TokenType.IDENTIFIER)
        if token_type is None:
            raise ParseError(
                f"Unexpected identifier '{word}'",
                start,
                ["Quote keys and string values", "Use the json5 mode for unquoted keys"],
            )

        self.advance_by(len(word))
        return self._make_token(token_type, start)
