"""
Parser for jsonsource - builds an AST from located tokens.
"""

from typing import Any, NoReturn, Optional, Union

from ..core.nodes import (
    ArrayNode,
    BooleanNode,
    DocumentNode,
    ElementNode,
    IdentifierNode,
    InfinityNode,
    MemberNode,
    NaNNode,
    NullNode,
    NumberNode,
    ObjectNode,
    StringNode,
    ValueNode,
)
from ..core.tokens import Location, Position, Token, TokenType
from ..security.exceptions import ParseError
from ..security.limits import LimitValidator
from ..utils.config import Mode, ParseConfig
from .lexer import Lexer

ESCAPE_MAP = {
    '"': '"',
    "'": "'",
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
}


def _span(start: Any, end: Any) -> tuple[tuple[int, int], Location]:
    """Range and location covering start through end."""
    return (start.range[0], end.range[1]), Location(start.loc.start, end.loc.end)


class Parser:
    """Recursive-descent parser producing DocumentNode trees."""

    def __init__(
        self,
        tokens: list[Token],
        text: str,
        config: Optional[ParseConfig] = None,
    ) -> None:
        self.all_tokens = tokens
        self.tokens = [token for token in tokens if not token.type.is_comment]
        self.text = text
        self.config = config or ParseConfig()
        self.pos = 0
        self.validator = LimitValidator(self.config.limits)

    def current_token(self) -> Optional[Token]:
        """Get the current code token, or None at end of input."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token:
        """Move to the next token and return the current token."""
        token = self.current_token()
        if token is None:
            self._raise_parse_error("Unexpected end of input", None)
        self.pos += 1
        return token

    def expect(self, token_type: TokenType, description: str) -> Token:
        """Consume a token of the given type or fail."""
        token = self.current_token()
        if token is None or token.type is not token_type:
            self._raise_parse_error(f"Expected {description}", token)
        return self.advance()

    def parse(self) -> DocumentNode:
        """Parse tokens into a complete document."""
        self.validator.reset()
        body = self.parse_value()

        trailing = self.current_token()
        if trailing is not None:
            self._raise_parse_error(
                f"Unexpected token '{trailing.value}' after document body",
                trailing,
                ["A document holds exactly one value"],
            )

        end = self._end_position()
        return DocumentNode(
            range=(0, len(self.text)),
            loc=Location(Position(1, 1, 0), end),
            body=body,
            tokens=list(self.all_tokens),
        )

    def parse_value(self) -> ValueNode:
        """Parse any value node."""
        token = self.current_token()
        if token is None:
            self._raise_parse_error("Unexpected end of input, expected a value", None)

        if token.type is TokenType.LBRACE:
            return self.parse_object()
        if token.type is TokenType.LBRACKET:
            return self.parse_array()

        self.advance()
        if token.type is TokenType.STRING:
            value = self._unescape_string(token)
            return StringNode(token.range, token.loc, value=value)
        if token.type is TokenType.NUMBER:
            number = self._parse_number(token.value)
            return NumberNode(token.range, token.loc, value=number)
        if token.type is TokenType.BOOLEAN:
            return BooleanNode(token.range, token.loc, value=token.value == "true")
        if token.type is TokenType.NULL:
            return NullNode(token.range, token.loc)
        if token.type is TokenType.NAN:
            return NaNNode(token.range, token.loc, sign=token.value[:-3])
        if token.type is TokenType.INFINITY:
            return InfinityNode(token.range, token.loc, sign=token.value[:-8])

        self._raise_parse_error(f"Unexpected token '{token.value}'", token)

    def parse_object(self) -> ObjectNode:
        """Parse an object and its members in source order."""
        start = self.expect(TokenType.LBRACE, "'{'")
        self.validator.enter_structure()

        members: list[MemberNode] = []
        while not self._at(TokenType.RBRACE):
            members.append(self._parse_member())
            if not self._continue_after_item(TokenType.RBRACE):
                break

        end = self.expect(TokenType.RBRACE, "'}' to close object")
        self.validator.exit_structure()
        range_, loc = _span(start, end)
        return ObjectNode(range_, loc, members=members)

    def _parse_member(self) -> MemberNode:
        token = self.current_token()
        name: Union[StringNode, IdentifierNode]
        if token is not None and token.type is TokenType.STRING:
            self.advance()
            name = StringNode(token.range, token.loc, value=self._unescape_string(token))
        elif token is not None and token.type in (
            TokenType.IDENTIFIER,
            TokenType.NAN,
            TokenType.INFINITY,
            TokenType.BOOLEAN,
            TokenType.NULL,
        ) and self.config.mode is Mode.JSON5:
            self.advance()
            name = IdentifierNode(token.range, token.loc, name=token.value)
        else:
            self._raise_parse_error(
                "Expected object key",
                token,
                ["Object keys must be strings", "Check for a trailing comma"],
            )

        self.expect(TokenType.COLON, "':' after key")
        value = self.parse_value()
        range_, loc = _span(name, value)
        return MemberNode(range_, loc, name=name, value=value)

    def parse_array(self) -> ArrayNode:
        """Parse an array and its elements in source order."""
        start = self.expect(TokenType.LBRACKET, "'['")
        self.validator.enter_structure()

        elements: list[ElementNode] = []
        while not self._at(TokenType.RBRACKET):
            value = self.parse_value()
            elements.append(ElementNode(value.range, value.loc, value=value))
            if not self._continue_after_item(TokenType.RBRACKET):
                break

        end = self.expect(TokenType.RBRACKET, "']' to close array")
        self.validator.exit_structure()
        range_, loc = _span(start, end)
        return ArrayNode(range_, loc, elements=elements)

    def _at(self, token_type: TokenType) -> bool:
        token = self.current_token()
        return token is not None and token.type is token_type

    def _continue_after_item(self, closing: TokenType) -> bool:
        """Consume a separating comma; return True when another item follows."""
        token = self.current_token()
        if token is None or token.type is not TokenType.COMMA:
            return False

        self.advance()
        if self._at(closing):
            if not self.config.allow_trailing_commas:
                self._raise_parse_error(
                    "Unexpected trailing comma",
                    token,
                    ["Remove the comma before the closing bracket"],
                )
            return False
        return True

    def _parse_number(self, raw: str) -> Union[int, float]:
        sign = -1 if raw.startswith("-") else 1
        digits = raw.lstrip("+-")
        if digits[:2].lower() == "0x":
            return sign * int(digits, 16)
        if any(char in digits for char in ".eE"):
            return sign * float(digits)
        return sign * int(digits)

    def _process_escape_sequence(
        self, s: str, i: int, token: Token
    ) -> tuple[str, int]:
        """Process a single escape sequence starting at position i."""
        next_char = s[i + 1]

        if next_char in ESCAPE_MAP:
            if next_char in "'v0" and self.config.mode is not Mode.JSON5:
                self._raise_parse_error(
                    f"Invalid escape sequence '\\{next_char}'", token
                )
            return ESCAPE_MAP[next_char], i + 2

        if next_char == "u" and i + 6 <= len(s):
            try:
                code_point = int(s[i + 2 : i + 6], 16)
            except ValueError:
                self._raise_parse_error("Invalid unicode escape sequence", token)
            return self._combine_surrogates(s, i + 6, code_point)

        if self.config.mode is Mode.JSON5:
            if next_char == "x" and i + 4 <= len(s):
                try:
                    return chr(int(s[i + 2 : i + 4], 16)), i + 4
                except ValueError:
                    self._raise_parse_error("Invalid hex escape sequence", token)
            if next_char == "\r" and s[i + 2 : i + 3] == "\n":
                return "", i + 3
            if next_char in "\n\r\u2028\u2029":
                return "", i + 2
            return next_char, i + 2

        self._raise_parse_error(f"Invalid escape sequence '\\{next_char}'", token)

    @staticmethod
    def _combine_surrogates(s: str, i: int, code_point: int) -> tuple[str, int]:
        """Join a high surrogate with a following low surrogate escape."""
        if 0xD800 <= code_point <= 0xDBFF and s[i : i + 2] == "\\u":
            try:
                low = int(s[i + 2 : i + 6], 16)
            except ValueError:
                return chr(code_point), i
            if 0xDC00 <= low <= 0xDFFF:
                combined = 0x10000 + ((code_point - 0xD800) << 10) + (low - 0xDC00)
                return chr(combined), i + 6
        return chr(code_point), i

    def _unescape_string(self, token: Token) -> str:
        """Decode a string token's raw text, quotes excluded."""
        s = token.value[1:-1]
        if "\\" not in s:
            return s

        result = []
        i = 0
        while i < len(s):
            if s[i] == "\\" and i + 1 < len(s):
                chars, i = self._process_escape_sequence(s, i, token)
                result.append(chars)
            else:
                result.append(s[i])
                i += 1

        return "".join(result)

    def _end_position(self) -> Position:
        lexer = Lexer(self.text, self.config.mode)
        lexer.advance_by(len(self.text))
        return lexer.current_position()

    def _raise_parse_error(
        self,
        message: str,
        token: Optional[Token],
        suggestions: Optional[list[str]] = None,
    ) -> NoReturn:
        position = token.loc.start if token is not None else self._end_position()
        raise ParseError(message, position, suggestions=suggestions)


def parse(text: str, config: Optional[ParseConfig] = None) -> DocumentNode:
    """Tokenize and parse text into a DocumentNode."""
    config = config or ParseConfig()
    LimitValidator(config.limits).validate_input_size(text)
    tokens = Lexer(text, config.mode).get_all_tokens()
    return Parser(tokens, text, config).parse()
