"""
Boundary lookup tables over a token stream.
"""

from collections.abc import Sequence
from typing import Optional

from .tokens import Token


class TokenIndex:
    """
    Maps token start and end offsets to positions in the token array.

    Built in a single pass. When two tokens share an offset (only possible
    with zero-width tokens) the later token in array order owns it.
    """

    def __init__(self, tokens: Optional[Sequence[Token]] = None) -> None:
        self.tokens: Sequence[Token] = tokens if tokens is not None else ()
        self.comments: list[Token] = []
        self.starts: dict[int, int] = {}
        self.ends: dict[int, int] = {}

        for index, token in enumerate(self.tokens):
            if token.type.is_comment:
                self.comments.append(token)

            self.starts[token.range[0]] = index
            self.ends[token.range[1]] = index

    def __len__(self) -> int:
        return len(self.tokens)

    def index_of_start(self, offset: int) -> Optional[int]:
        """Index of the token starting at offset, if any."""
        return self.starts.get(offset)

    def index_of_end(self, offset: int) -> Optional[int]:
        """Index of the token ending at offset, if any."""
        return self.ends.get(offset)
