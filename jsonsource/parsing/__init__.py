"""
jsonsource Reference Parser.

This module tokenizes and parses JSON, JSONC and JSON5 text into the token
stream and AST consumed by the source-code model.
"""

from .lexer import Lexer
from .parser import Parser, parse

__all__ = ['Lexer', 'Parser', 'parse']
