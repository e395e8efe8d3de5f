"""
jsonsource - source-code model for linting JSON, JSONC and JSON5 documents.

jsonsource turns a parsed document into an object a rule engine can work
against: cached enter/exit traversal with parent lookup, token navigation
that skips or includes comments, and the disable directives and rule
configurations written in comments.

Quick Start:
    from jsonsource import JSONLanguage, Mode

    language = JSONLanguage(Mode.JSONC)
    text = '{"a": 1} // eslint-disable-line no-empty-keys -- legacy'
    result = language.parse(text)
    source = language.create_source_code(text, result)

    for step in source.traverse():
        ...

    directives = source.get_disable_directives().directives
"""

from .core import (
    JSONSourceCode,
    Location,
    NodeType,
    Phase,
    Position,
    Token,
    TokenIndex,
    TokenNavigator,
    TokenType,
    TraversalEngine,
    TraversalStep,
)
from .directives import (
    ConfigCommentParser,
    Directive,
    DirectiveExtractor,
    DirectiveResult,
    DirectiveType,
    FileProblem,
    InlineConfigApplier,
    InlineConfigEntry,
    InlineConfigResult,
)
from .language import JSONLanguage, ParseResult
from .parsing import Lexer, Parser, parse
from .security.exceptions import (
    JSONSourceError,
    ParseError,
    SecurityError,
    UnexpectedCommentTypeError,
)
from .utils.config import (
    LanguageOptions,
    Mode,
    ParseConfig,
    ParseLimits,
    SourceCodeConfig,
)

__version__ = "0.1.0"
__author__ = "jsonsource contributors"

__all__ = [
    # Source-code model
    "JSONSourceCode", "TokenIndex", "TokenNavigator", "TraversalEngine",
    "TraversalStep", "Phase",
    # Tokens and nodes
    "Token", "TokenType", "Position", "Location", "NodeType",
    # Configuration comments
    "ConfigCommentParser", "Directive", "DirectiveExtractor", "DirectiveResult",
    "DirectiveType", "FileProblem", "InlineConfigApplier", "InlineConfigEntry",
    "InlineConfigResult",
    # Language and parsing
    "JSONLanguage", "ParseResult", "Lexer", "Parser", "parse",
    # Configuration classes
    "LanguageOptions", "Mode", "ParseConfig", "ParseLimits", "SourceCodeConfig",
    # Exception classes
    "JSONSourceError", "ParseError", "SecurityError", "UnexpectedCommentTypeError",
]
