"""
jsonsource configuration comments.

This module provides directive extraction and inline rule configuration.
"""

from .comment_parser import ConfigCommentParser, ConfigParseResult, DirectiveComment
from .extractor import DirectiveExtractor, filter_inline_config, is_inline_config
from .inline_config import InlineConfigApplier
from .models import (
    Directive,
    DirectiveResult,
    DirectiveType,
    FileProblem,
    InlineConfigEntry,
    InlineConfigResult,
)

__all__ = [
    'ConfigCommentParser', 'ConfigParseResult', 'DirectiveComment',
    'DirectiveExtractor', 'filter_inline_config', 'is_inline_config',
    'InlineConfigApplier',
    'Directive', 'DirectiveResult', 'DirectiveType', 'FileProblem',
    'InlineConfigEntry', 'InlineConfigResult'
]
