"""
Token model shared by the lexer and the source-code model.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class TokenType(Enum):
    """Token types for JSON, JSONC and JSON5 documents."""

    LBRACE = "LBrace"
    RBRACE = "RBrace"
    LBRACKET = "LBracket"
    RBRACKET = "RBracket"
    COLON = "Colon"
    COMMA = "Comma"

    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    NULL = "Null"
    NAN = "NaN"
    INFINITY = "Infinity"
    IDENTIFIER = "Identifier"

    LINE_COMMENT = "LineComment"
    BLOCK_COMMENT = "BlockComment"

    @property
    def is_comment(self) -> bool:
        """Whether tokens of this type are comments rather than code."""
        return self in _COMMENT_TYPES


_COMMENT_TYPES = frozenset({TokenType.LINE_COMMENT, TokenType.BLOCK_COMMENT})


@dataclass(frozen=True)
class Position:
    """Position in source text (1-based line and column, 0-based offset)."""

    line: int
    column: int
    offset: int = 0


@dataclass(frozen=True)
class Location:
    """Start and end positions of a token or node."""

    start: Position
    end: Position

    @property
    def is_multiline(self) -> bool:
        """Whether the location spans more than one physical line."""
        return self.start.line != self.end.line


class Token(NamedTuple):
    """Token with type, raw value, offset range and location."""

    type: TokenType
    value: str
    range: tuple[int, int]
    loc: Location

    @property
    def is_comment(self) -> bool:
        """Whether this token is a line or block comment."""
        return self.type.is_comment
