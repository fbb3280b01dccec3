from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .geometry import Canvas, Circle, DEFAULT_CANVAS, OutOfCanvasError, Point, Rectangle, Shape
from .messages import ENGLISH, MessageCatalog


@dataclass(frozen=True)
class Built:
    """
    Outcome of building a shape: either the shape or the reason it could not be placed.
    """
    shape: Optional[Shape] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.shape is not None


def _build(cls, *args, canvas: Canvas, catalog: MessageCatalog) -> Built:
    try:
        return Built(shape=cls(*args, canvas=canvas, catalog=catalog))
    except OutOfCanvasError as e:
        return Built(error=str(e))


def build_point(x: int, y: int, canvas: Canvas = DEFAULT_CANVAS, catalog: MessageCatalog = ENGLISH) -> Built:
    return _build(Point, x, y, canvas=canvas, catalog=catalog)


def build_circle(x: int, y: int, radius: int,
                 canvas: Canvas = DEFAULT_CANVAS, catalog: MessageCatalog = ENGLISH) -> Built:
    return _build(Circle, x, y, radius, canvas=canvas, catalog=catalog)


def build_rectangle(x: int, y: int, width: int, height: int,
                    canvas: Canvas = DEFAULT_CANVAS, catalog: MessageCatalog = ENGLISH) -> Built:
    return _build(Rectangle, x, y, width, height, canvas=canvas, catalog=catalog)
