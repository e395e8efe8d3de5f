"""
AST node types for JSON, JSONC and JSON5 documents.

Nodes compare by identity so they can key side tables such as the parent
map. Child order is defined by VISITOR_KEYS and always follows source order.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional, Union

from .tokens import Location, Token


class NodeType(Enum):
    """AST node kinds."""

    DOCUMENT = "Document"
    OBJECT = "Object"
    MEMBER = "Member"
    ARRAY = "Array"
    ELEMENT = "Element"
    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    NULL = "Null"
    NAN = "NaN"
    INFINITY = "Infinity"
    IDENTIFIER = "Identifier"


@dataclass(eq=False)
class Node:
    """Base class for AST nodes."""

    type: ClassVar[NodeType]

    range: tuple[int, int]
    loc: Location


@dataclass(eq=False)
class StringNode(Node):
    """A string literal; value is the decoded text."""

    type: ClassVar[NodeType] = NodeType.STRING
    value: str = ""


@dataclass(eq=False)
class NumberNode(Node):
    """A numeric literal."""

    type: ClassVar[NodeType] = NodeType.NUMBER
    value: Union[int, float] = 0


@dataclass(eq=False)
class BooleanNode(Node):
    """A true/false literal."""

    type: ClassVar[NodeType] = NodeType.BOOLEAN
    value: bool = False


@dataclass(eq=False)
class NullNode(Node):
    """A null literal."""

    type: ClassVar[NodeType] = NodeType.NULL


@dataclass(eq=False)
class NaNNode(Node):
    """JSON5 NaN, optionally signed."""

    type: ClassVar[NodeType] = NodeType.NAN
    sign: str = ""


@dataclass(eq=False)
class InfinityNode(Node):
    """JSON5 Infinity, optionally signed."""

    type: ClassVar[NodeType] = NodeType.INFINITY
    sign: str = ""


@dataclass(eq=False)
class IdentifierNode(Node):
    """JSON5 unquoted member name."""

    type: ClassVar[NodeType] = NodeType.IDENTIFIER
    name: str = ""


ValueNode = Union[
    "ObjectNode",
    "ArrayNode",
    StringNode,
    NumberNode,
    BooleanNode,
    NullNode,
    NaNNode,
    InfinityNode,
]


@dataclass(eq=False)
class MemberNode(Node):
    """An object member: name followed by value."""

    type: ClassVar[NodeType] = NodeType.MEMBER
    name: Optional[Union[StringNode, IdentifierNode]] = None
    value: Optional[ValueNode] = None


@dataclass(eq=False)
class ObjectNode(Node):
    """An object; members are kept in source order."""

    type: ClassVar[NodeType] = NodeType.OBJECT
    members: list[MemberNode] = field(default_factory=list)


@dataclass(eq=False)
class ElementNode(Node):
    """Wrapper around a value inside an array or document."""

    type: ClassVar[NodeType] = NodeType.ELEMENT
    value: Optional[ValueNode] = None


@dataclass(eq=False)
class ArrayNode(Node):
    """An array; elements are kept in source order."""

    type: ClassVar[NodeType] = NodeType.ARRAY
    elements: list[ElementNode] = field(default_factory=list)


@dataclass(eq=False)
class DocumentNode(Node):
    """Root of a parsed document, carrying the full token stream."""

    type: ClassVar[NodeType] = NodeType.DOCUMENT
    body: Optional[ValueNode] = None
    tokens: list[Token] = field(default_factory=list)


VISITOR_KEYS: dict[NodeType, tuple[str, ...]] = {
    NodeType.DOCUMENT: ("body",),
    NodeType.OBJECT: ("members",),
    NodeType.MEMBER: ("name", "value"),
    NodeType.ARRAY: ("elements",),
    NodeType.ELEMENT: ("value",),
}


def iter_children(node: Any) -> Iterator[Any]:
    """Yield the direct children of a node in source order."""
    node_type = getattr(node, "type", None)
    for key in VISITOR_KEYS.get(node_type, ()):  # type: ignore[arg-type]
        child = getattr(node, key, None)
        if child is None:
            continue
        if isinstance(child, list):
            yield from (item for item in child if item is not None)
        else:
            yield child
