from __future__ import annotations

from typing import List

from .geometry import Shape


class Editor:
    """
    Display aggregator: keeps references to shapes owned elsewhere and renders them together.
    """
    def __init__(self):
        self._shapes: List[Shape] = []

    def add_shape(self, shape: Shape) -> None:
        self._shapes.append(shape)

    def __len__(self) -> int:
        return len(self._shapes)

    def render_all(self) -> str:
        return "\n".join(s.render() for s in self._shapes)
