"""
JSON language definitions tying the reference parser to the source-code model.

A lint engine holds one JSONLanguage per dialect, parses each file with it
and wraps successful results in a JSONSourceCode.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from .core.nodes import VISITOR_KEYS, DocumentNode, NodeType
from .core.source_code import JSONSourceCode
from .parsing.parser import parse
from .security.exceptions import JSONSourceError
from .utils.config import (
    LanguageOptions,
    Mode,
    ParseConfig,
    ParseLimits,
    SourceCodeConfig,
)

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Outcome of parsing a file: an AST or the errors that prevented one."""

    ok: bool
    ast: Optional[DocumentNode] = None
    errors: list[JSONSourceError] = field(default_factory=list)


class JSONLanguage:
    """A JSON dialect as seen by a lint engine."""

    line_start = 1
    column_start = 1
    node_type_key = "type"

    def __init__(self, mode: Mode = Mode.JSON, limits: Optional[ParseLimits] = None):
        self.mode = mode
        self.limits = limits or ParseLimits()

    @property
    def visitor_keys(self) -> dict[NodeType, tuple[str, ...]]:
        """Child keys per node type, in source order."""
        return dict(VISITOR_KEYS)

    def validate_language_options(self, options: dict[str, Any]) -> None:
        """Reject language options this dialect cannot honor."""
        allow_trailing_commas = options.get("allow_trailing_commas")
        if allow_trailing_commas is not None and not isinstance(
            allow_trailing_commas, bool
        ):
            raise TypeError("allow_trailing_commas must be a boolean if provided.")

        if allow_trailing_commas and self.mode is not Mode.JSONC:
            raise ValueError("allow_trailing_commas option is only available in JSONC.")

    def parse(self, text: str, options: Optional[dict[str, Any]] = None) -> ParseResult:
        """Parse text; errors are returned in the result rather than raised."""
        options = options or {}
        self.validate_language_options(options)

        config = ParseConfig(
            mode=self.mode,
            limits=self.limits,
            options=LanguageOptions(
                allow_trailing_commas=bool(options.get("allow_trailing_commas", False))
            ),
        )

        try:
            ast = parse(text, config)
        except JSONSourceError as exc:
            logger.debug("Failed to parse %s document: %s", self.mode.value, exc.message)
            return ParseResult(ok=False, errors=[exc])

        return ParseResult(ok=True, ast=ast)

    def create_source_code(
        self,
        text: str,
        result: ParseResult,
        config: Optional[SourceCodeConfig] = None,
    ) -> JSONSourceCode:
        """Wrap a successful parse in a source-code model."""
        if not result.ok or result.ast is None:
            raise ValueError("Cannot create source code from a failed parse")
        return JSONSourceCode(text, result.ast, config)
