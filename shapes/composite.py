from __future__ import annotations

from enum import Enum
from typing import Iterator, List
import logging

from .geometry import Shape

logger = logging.getLogger(__name__)


class MovePolicy(Enum):
    """How a composite reacts when one of its children refuses a move."""
    SEQUENTIAL = "sequential"  # stop at the first refusal, earlier children stay moved
    ATOMIC = "atomic"          # move every child or none


class CompositeShape(Shape):
    """
    Shape made of other shapes, moved and rendered as one.

    Children are moved to the same absolute position, not by a shared offset.
    Cycles (a composite containing one of its ancestors) are not detected.
    """
    def __init__(self, policy: MovePolicy = MovePolicy.SEQUENTIAL):
        self.policy = policy
        self._children: List[Shape] = []

    def add_shape(self, shape: Shape) -> None:
        if not isinstance(shape, Shape):
            raise TypeError(f"expected a Shape, got {type(shape).__name__}")
        self._children.append(shape)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Shape]:
        return iter(tuple(self._children))

    def can_move_to(self, x: int, y: int) -> bool:
        return all(child.can_move_to(x, y) for child in self._children)

    def move(self, x: int, y: int) -> bool:
        if self.policy is MovePolicy.ATOMIC:
            if not self.can_move_to(x, y):
                logger.debug("composite refused move to (%s, %s); no child moved", x, y)
                return False
        for i, child in enumerate(self._children):
            if not child.move(x, y):
                logger.debug("composite move to (%s, %s) stopped at child %d", x, y, i)
                return False
        return True

    def render(self) -> str:
        return "\n".join(child.render() for child in self._children)

    def __repr__(self) -> str:
        return f"CompositeShape(policy={self.policy.value}, children={len(self._children)})"
