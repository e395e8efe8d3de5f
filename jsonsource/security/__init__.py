"""
jsonsource Security and Validation System.

This module provides security limits and exception handling.
"""

from .exceptions import (
    JSONSourceError,
    ParseError,
    SecurityError,
    UnexpectedCommentTypeError,
)
from .limits import LimitValidator

__all__ = [
    'JSONSourceError', 'ParseError', 'SecurityError',
    'UnexpectedCommentTypeError', 'LimitValidator'
]
