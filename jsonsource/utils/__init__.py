"""
jsonsource configuration helpers.
"""

from .config import LanguageOptions, Mode, ParseConfig, ParseLimits, SourceCodeConfig

__all__ = ['LanguageOptions', 'Mode', 'ParseConfig', 'ParseLimits', 'SourceCodeConfig']
