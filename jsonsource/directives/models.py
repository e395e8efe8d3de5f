"""
Results produced from configuration comments.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from ..core.tokens import Location, Token
from .comment_parser import ConfigCommentParser

RuleSeverity = Union[int, str]
RuleEntry = Union[RuleSeverity, list[Any]]


class DirectiveType(Enum):
    """Scopes a disable/enable directive can apply to."""

    DISABLE = "disable"
    ENABLE = "enable"
    DISABLE_NEXT_LINE = "disable-next-line"
    DISABLE_LINE = "disable-line"


@dataclass(frozen=True)
class FileProblem:
    """A problem in the file that no rule reported, such as a bad directive."""

    message: str
    loc: Location
    rule_id: Optional[str] = None


@dataclass(frozen=True)
class Directive:
    """A disable/enable directive read from a comment."""

    type: DirectiveType
    node: Token
    value: str
    justification: str = ""

    @property
    def rule_ids(self) -> list[str]:
        """Rule ids named by the directive; empty means every rule."""
        return ConfigCommentParser().parse_list_config(self.value)


@dataclass(frozen=True)
class InlineConfigEntry:
    """Rule configuration embedded in a comment."""

    rules: dict[str, RuleEntry]
    loc: Location

    @property
    def config(self) -> dict[str, dict[str, RuleEntry]]:
        """The entry as a config object with a ``rules`` key."""
        return {"rules": self.rules}


@dataclass
class DirectiveResult:
    """Directives found in a file along with problems in malformed ones."""

    problems: list[FileProblem] = field(default_factory=list)
    directives: list[Directive] = field(default_factory=list)


@dataclass
class InlineConfigResult:
    """Inline rule configurations along with problems in malformed ones."""

    problems: list[FileProblem] = field(default_factory=list)
    configs: list[InlineConfigEntry] = field(default_factory=list)
