"""
Configuration for jsonsource parsing and source-code models.

This module defines the parse limits, language options and model settings
shared by the reference parser and the source-code model.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Mode(Enum):
    """Source dialects understood by the reference parser."""

    JSON = "json"
    JSONC = "jsonc"
    JSON5 = "json5"

    @property
    def allows_comments(self) -> bool:
        """Whether comment tokens are legal in this dialect."""
        return self is not Mode.JSON


@dataclass
class ParseLimits:
    """Security limits for parsing to prevent abuse."""

    max_input_size: int = 10 * 1024 * 1024
    max_nesting_depth: int = 100

    def __post_init__(self) -> None:
        if self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")


@dataclass
class LanguageOptions:
    """Options a lint configuration may set for JSON languages."""

    allow_trailing_commas: bool = False


@dataclass
class ParseConfig:
    """Configuration for the reference parser."""

    mode: Mode = Mode.JSON
    limits: ParseLimits = field(default_factory=ParseLimits)
    options: LanguageOptions = field(default_factory=LanguageOptions)

    @property
    def allow_trailing_commas(self) -> bool:
        """Trailing commas are always legal in JSON5 and opt-in for JSONC."""
        if self.mode is Mode.JSON5:
            return True
        return self.mode is Mode.JSONC and self.options.allow_trailing_commas


@dataclass
class SourceCodeConfig:
    """Settings for a source-code model."""

    # Logging
    logger: Optional[logging.Logger] = None
