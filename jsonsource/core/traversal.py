"""
Depth-first traversal of a document into enter/exit visit steps.

The AST never changes after the source-code model is built, so the step
sequence is computed once and replayed for every caller.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .nodes import iter_children


class Phase(Enum):
    """Visit phase of a traversal step."""

    ENTER = 1
    EXIT = 2


@dataclass(frozen=True, eq=False)
class TraversalStep:
    """One visit event for one node."""

    target: Any
    phase: Phase
    args: tuple[Any, ...] = ()

    @property
    def kind(self) -> int:
        """Numeric step kind used by rule engines (1 for node visits)."""
        return 1


class TraversalEngine:
    """Flattens an AST into a cached sequence of traversal steps."""

    def __init__(self, root: Any) -> None:
        self.root = root
        self._steps: Optional[tuple[TraversalStep, ...]] = None
        # id(child) -> parent; back-references only
        self._parents: dict[int, Any] = {}

    @property
    def is_cached(self) -> bool:
        """Whether the step sequence has been computed."""
        return self._steps is not None

    @property
    def step_count(self) -> int:
        """Number of cached steps, zero before the first traversal."""
        return len(self._steps or ())

    def traverse(self) -> Iterator[TraversalStep]:
        """Return a fresh iterator over the traversal steps."""
        if self._steps is None:
            self._steps = tuple(self._walk())
        return iter(self._steps)

    def get_parent(self, node: Any) -> Optional[Any]:
        """Parent recorded for node by a previous traversal, if any."""
        return self._parents.get(id(node))

    def _walk(self) -> Iterator[TraversalStep]:
        stack: list[tuple[Any, Any, Phase]] = [(self.root, None, Phase.ENTER)]

        while stack:
            node, parent, phase = stack.pop()

            if phase is Phase.EXIT:
                yield TraversalStep(target=node, phase=Phase.EXIT, args=(node, parent))
                continue

            if parent is not None:
                self._parents.setdefault(id(node), parent)

            yield TraversalStep(target=node, phase=Phase.ENTER, args=(node, parent))

            stack.append((node, parent, Phase.EXIT))
            children = list(iter_children(node))
            for child in reversed(children):
                stack.append((child, node, Phase.ENTER))
