"""
jsonsource Core Source-Code Model.

This module provides the token index, token navigation, AST traversal and
the JSONSourceCode facade that composes them.
"""

from .tokens import Location, Position, Token, TokenType
from .nodes import NodeType, VISITOR_KEYS, iter_children
from .token_index import TokenIndex
from .navigation import TokenNavigator
from .traversal import Phase, TraversalEngine, TraversalStep
from .source_code import JSONSourceCode

__all__ = [
    'Location', 'Position', 'Token', 'TokenType',
    'NodeType', 'VISITOR_KEYS', 'iter_children',
    'TokenIndex', 'TokenNavigator',
    'Phase', 'TraversalEngine', 'TraversalStep',
    'JSONSourceCode'
]
