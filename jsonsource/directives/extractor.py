"""
Extraction of disable/enable directives from configuration comments.
"""

import logging
import re
from collections.abc import Iterable
from typing import Callable, Optional

from ..core.tokens import Token
from .comment_parser import ConfigCommentParser
from .models import Directive, DirectiveResult, DirectiveType, FileProblem

INLINE_CONFIG = re.compile(
    r"^\s*(?:eslint(?:-enable|-disable(?:(?:-next)?-line)?)?)(?:\s|$)"
)

DIRECTIVE_LABELS = {
    "eslint-disable": DirectiveType.DISABLE,
    "eslint-enable": DirectiveType.ENABLE,
    "eslint-disable-next-line": DirectiveType.DISABLE_NEXT_LINE,
    "eslint-disable-line": DirectiveType.DISABLE_LINE,
}

CommentValue = Callable[[Token], str]


def is_inline_config(text: str) -> bool:
    """Whether comment text starts with an inline configuration label."""
    return INLINE_CONFIG.match(text) is not None


def filter_inline_config(
    comments: Iterable[Token], comment_value: CommentValue
) -> list[Token]:
    """Keep the comments whose text carries an inline configuration label."""
    return [comment for comment in comments if is_inline_config(comment_value(comment))]


class DirectiveExtractor:
    """Turns configuration comments into directives and problems."""

    def __init__(
        self,
        comments: Iterable[Token],
        comment_value: CommentValue,
        parser: Optional[ConfigCommentParser] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.comments = comments
        self.comment_value = comment_value
        self.parser = parser or ConfigCommentParser()
        self.logger = logger or logging.getLogger(__name__)

    def extract(self) -> DirectiveResult:
        """Collect directives from every comment, reporting malformed ones."""
        result = DirectiveResult()

        for comment in self.comments:
            parsed = self.parser.parse_directive(self.comment_value(comment))
            if parsed is None:
                continue

            # The line a multi-line disable-line comment applies to is ambiguous
            if parsed.label == "eslint-disable-line" and comment.loc.is_multiline:
                problem = FileProblem(
                    message=f"{parsed.label} comment should not span multiple lines.",
                    loc=comment.loc,
                )
                self.logger.debug(
                    "Rejected directive at line %d: %s",
                    comment.loc.start.line,
                    problem.message,
                )
                result.problems.append(problem)
                continue

            directive_type = DIRECTIVE_LABELS.get(parsed.label)
            if directive_type is None:
                continue

            result.directives.append(
                Directive(
                    type=directive_type,
                    node=comment,
                    value=parsed.value,
                    justification=parsed.justification,
                )
            )

        return result
