"""
Source-code model over one parsed JSON, JSONC or JSON5 document.

JSONSourceCode is what a lint engine works against: it replays a cached
traversal of the AST, answers parent and adjacent-token queries, and reads
disable directives and rule configurations out of comments. The text and AST
are never modified, so every derived structure is computed at most once.
"""

import bisect
import logging
import re
from collections.abc import Iterator
from typing import Any, Optional

from ..directives.extractor import DirectiveExtractor, filter_inline_config
from ..directives.inline_config import InlineConfigApplier
from ..directives.models import DirectiveResult, InlineConfigResult
from ..security.exceptions import UnexpectedCommentTypeError
from ..utils.config import SourceCodeConfig
from .navigation import TokenNavigator
from .nodes import DocumentNode
from .token_index import TokenIndex
from .tokens import Position, Token, TokenType
from .traversal import TraversalEngine, TraversalStep

LINE_BREAK = re.compile(r"\r\n|[\r\n\u2028\u2029]")


class JSONSourceCode:
    """Queryable, traversable view of a parsed document."""

    def __init__(
        self,
        text: str,
        ast: DocumentNode,
        config: Optional[SourceCodeConfig] = None,
    ) -> None:
        self.text = text
        self.ast = ast
        self.config = config or SourceCodeConfig()
        self.logger = self.config.logger or logging.getLogger(__name__)

        self._index = TokenIndex(getattr(ast, "tokens", None) or [])
        self._navigator = TokenNavigator(self._index)
        self._traversal = TraversalEngine(ast)
        self._inline_config_comments: Optional[list[Token]] = None
        self._lines: Optional[list[str]] = None
        self._line_starts: Optional[list[int]] = None

    # ------------------------------------------------------------------
    # Tokens and comments
    # ------------------------------------------------------------------

    @property
    def tokens(self) -> list[Token]:
        """All tokens, comments included, in source order."""
        return list(self._index.tokens)

    @property
    def comments(self) -> list[Token]:
        """Comment tokens in source order."""
        return self._index.comments

    def comment_value(self, comment: Token) -> str:
        """Text of a comment without its delimiters."""
        if comment.type is TokenType.LINE_COMMENT:
            return self.get_text(comment)[2:]

        if comment.type is TokenType.BLOCK_COMMENT:
            return self.get_text(comment)[2:-2]

        token_type = getattr(comment.type, "value", comment.type)
        raise UnexpectedCommentTypeError(token_type, comment.loc.start)

    def get_token_before(
        self, node_or_token: Any, include_comments: bool = False
    ) -> Optional[Token]:
        """Token before a node or token; comments are skipped unless included."""
        return self._navigator.token_before(node_or_token, include_comments)

    def get_token_after(
        self, node_or_token: Any, include_comments: bool = False
    ) -> Optional[Token]:
        """Token after a node or token; comments are skipped unless included."""
        return self._navigator.token_after(node_or_token, include_comments)

    # ------------------------------------------------------------------
    # Configuration comments
    # ------------------------------------------------------------------

    def get_inline_config_nodes(self) -> list[Token]:
        """Comments that carry inline configuration."""
        if self._inline_config_comments is None:
            self._inline_config_comments = filter_inline_config(
                self.comments, self.comment_value
            )
            self.logger.debug(
                "Found %d inline configuration comments",
                len(self._inline_config_comments),
            )
        return self._inline_config_comments

    def get_disable_directives(self) -> DirectiveResult:
        """Disable/enable directives along with problems in malformed ones."""
        return DirectiveExtractor(
            self.get_inline_config_nodes(), self.comment_value, logger=self.logger
        ).extract()

    def apply_inline_config(self) -> InlineConfigResult:
        """Inline rule configurations along with problems in malformed ones."""
        return InlineConfigApplier(
            self.get_inline_config_nodes(), self.comment_value, logger=self.logger
        ).apply()

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def traverse(self) -> Iterator[TraversalStep]:
        """Steps taken while walking the AST, replayed from a cache."""
        if self._traversal.is_cached:
            return self._traversal.traverse()

        steps = self._traversal.traverse()
        self.logger.debug("Computed traversal of %d steps", self._traversal.step_count)
        return steps

    def get_parent(self, node: Any) -> Optional[Any]:
        """Parent of a node reached by an earlier traversal."""
        return self._traversal.get_parent(node)

    def get_ancestors(self, node: Any) -> list[Any]:
        """Ancestors of a node, root first."""
        ancestors = []
        current = self.get_parent(node)
        while current is not None:
            ancestors.append(current)
            current = self.get_parent(current)
        ancestors.reverse()
        return ancestors

    # ------------------------------------------------------------------
    # Text and locations
    # ------------------------------------------------------------------

    @property
    def lines(self) -> list[str]:
        """Source text split into lines without their terminators."""
        if self._lines is None:
            self._lines = LINE_BREAK.split(self.text)
        return self._lines

    def get_text(
        self, node_or_token: Any = None, before: int = 0, after: int = 0
    ) -> str:
        """Source text of an element, widened by before/after characters."""
        if node_or_token is None:
            return self.text
        start, end = node_or_token.range
        return self.text[max(start - before, 0) : end + after]

    def get_loc(self, node_or_token: Any) -> Any:
        """Location of a node or token."""
        return node_or_token.loc

    def get_range(self, node_or_token: Any) -> tuple[int, int]:
        """Offset range of a node or token."""
        return node_or_token.range

    def get_loc_from_index(self, index: int) -> Position:
        """Convert a text offset into a 1-based line and column."""
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("Expected an integer index")
        if index < 0 or index > len(self.text):
            raise ValueError(
                f"Index out of range (requested index {index}, "
                f"but source text has length {len(self.text)})"
            )

        starts = self._get_line_starts()
        line_index = bisect.bisect_right(starts, index) - 1
        return Position(
            line=line_index + 1,
            column=index - starts[line_index] + 1,
            offset=index,
        )

    def get_index_from_loc(self, loc: Position) -> int:
        """Convert a 1-based line and column into a text offset."""
        line = getattr(loc, "line", None)
        column = getattr(loc, "column", None)
        if not isinstance(line, int) or not isinstance(column, int):
            raise TypeError("Expected a location with integer line and column")

        starts = self._get_line_starts()
        if line < 1 or line > len(starts):
            raise ValueError(
                f"Line number out of range (line {line} requested, "
                f"but only {len(starts)} lines present)"
            )

        line_start = starts[line - 1]
        index = line_start + column - 1
        if column < 1 or index > line_start + len(self.lines[line - 1]):
            raise ValueError(f"Column number out of range (column {column} requested)")
        return index

    def _get_line_starts(self) -> list[int]:
        if self._line_starts is None:
            self._line_starts = [0] + [
                match.end() for match in LINE_BREAK.finditer(self.text)
            ]
        return self._line_starts
