"""
Exceptions raised by jsonsource.

Malformed directive comments are never raised; they are collected as
problems. These exceptions cover malformed input to the reference parser,
resource limits, and tokens that break the source-code model's input
contract.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.tokens import Position


class JSONSourceError(Exception):
    """Base exception for jsonsource errors."""

    def __init__(
        self,
        message: str,
        position: Optional["Position"] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message
        if self.position:
            msg += f" at line {self.position.line}, column {self.position.column}"
        if self.suggestions:
            msg += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                msg += f"\n  - {suggestion}"
        return msg


class ParseError(JSONSourceError):
    """Raised when the reference parser cannot build a document."""


class SecurityError(JSONSourceError):
    """Raised when input exceeds configured parse limits."""


class UnexpectedCommentTypeError(JSONSourceError):
    """Raised when a token that is not a comment is read as one."""

    def __init__(self, token_type: object, position: Optional["Position"] = None):
        self.token_type = token_type
        super().__init__(f"Unexpected comment type '{token_type}'", position)
