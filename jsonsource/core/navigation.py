"""
Token navigation relative to nodes and tokens.
"""

from typing import Any, Optional

from .token_index import TokenIndex
from .tokens import Token


class TokenNavigator:
    """Finds the token adjacent to a node or token, optionally skipping comments."""

    def __init__(self, index: TokenIndex) -> None:
        self.index = index

    def token_before(
        self, node_or_token: Any, include_comments: bool = False
    ) -> Optional[Token]:
        """Return the token immediately before the element, or None."""
        index = self.index.index_of_start(node_or_token.range[0])
        if index is None:
            return None

        previous_index = index - 1
        if previous_index < 0:
            return None

        tokens = self.index.tokens
        token = tokens[previous_index]
        if include_comments:
            return token

        while token.type.is_comment:
            previous_index -= 1
            if previous_index < 0:
                return None
            token = tokens[previous_index]

        return token

    def token_after(
        self, node_or_token: Any, include_comments: bool = False
    ) -> Optional[Token]:
        """Return the token immediately after the element, or None."""
        index = self.index.index_of_end(node_or_token.range[1])
        if index is None:
            return None

        tokens = self.index.tokens
        next_index = index + 1
        if next_index >= len(tokens):
            return None

        token = tokens[next_index]
        if include_comments:
            return token

        while token.type.is_comment:
            next_index += 1
            if next_index >= len(tokens):
                return None
            token = tokens[next_index]

        return token
