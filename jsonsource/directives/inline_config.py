"""
Rule configuration embedded in ``eslint`` comments.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from ..core.tokens import Token
from .comment_parser import ConfigCommentParser
from .extractor import CommentValue
from .models import FileProblem, InlineConfigEntry, InlineConfigResult

CONFIG_LABEL = "eslint"


class InlineConfigApplier:
    """Parses ``/* eslint rule: severity */`` comments into rule configurations."""

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

    def apply(self) -> InlineConfigResult:
        """Collect rule configurations, reporting comments that fail to parse."""
        result = InlineConfigResult()

        for comment in self.comments:
            parsed = self.parser.parse_directive(self.comment_value(comment))
            if parsed is None or parsed.label != CONFIG_LABEL:
                continue

            parse_result = self.parser.parse_json_like_config(parsed.value)
            if parse_result.ok:
                result.configs.append(
                    InlineConfigEntry(rules=parse_result.config or {}, loc=comment.loc)
                )
                continue

            self.logger.debug(
                "Rejected rule configuration at line %d: %s",
                comment.loc.start.line,
                parse_result.error,
            )
            result.problems.append(
                FileProblem(message=parse_result.error or "", loc=comment.loc)
            )

        return result
