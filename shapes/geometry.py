from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple
import logging
import numbers
import numpy as np

from .messages import ENGLISH, MessageCatalog

logger = logging.getLogger(__name__)


class OutOfCanvasError(ValueError):
    """Raised when a shape is created with geometry outside its canvas."""


def _as_int(name: str, value) -> int:
    # numpy integers register as numbers.Integral; bool is excluded on purpose
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


_INT64_MIN = int(np.iinfo(np.int64).min)
_INT64_MAX = int(np.iinfo(np.int64).max)


def _box(values) -> np.ndarray:
    # values past int64 are clamped; canvas extents stay below the clamp limit
    return np.array([min(max(int(v), _INT64_MIN), _INT64_MAX) for v in values], dtype=np.int64)


def _as_size(name: str, value) -> int:
    v = _as_int(name, value)
    if v < 0:
        raise ValueError(f"{name} must be non-negative, got {v}")
    return v


@dataclass(frozen=True)
class Canvas:
    """
    Valid drawing region [0, width] x [0, height], edges included.
    """
    width: int = 800
    height: int = 600

    def __post_init__(self):
        if _as_int("width", self.width) <= 0 or _as_int("height", self.height) <= 0:
            raise ValueError("canvas dimensions must be positive")
        if self.width >= _INT64_MAX or self.height >= _INT64_MAX:
            raise ValueError("canvas dimensions must fit in int64")

    @property
    def extent(self) -> np.ndarray:
        return np.array([self.width, self.height], dtype=np.int64)

    def fits(self, bounds: np.ndarray) -> bool:
        """
        True when the (minx, miny, maxx, maxy) box lies inside the canvas.
        """
        b = _box(np.asarray(bounds, dtype=object).reshape(4,))
        return bool(np.all(b[:2] >= 0) and np.all(b[2:] <= self.extent))


DEFAULT_CANVAS = Canvas()


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return self.x, self.y


class Shape:
    """
    Anything that can be moved to an absolute position and rendered as text.
    """
    def can_move_to(self, x: int, y: int) -> bool:
        raise NotImplementedError

    def move(self, x: int, y: int) -> bool:
        raise NotImplementedError

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


class _AnchoredShape(Shape):
    # Catalog attribute names, set by each concrete shape
    render_template: str = ""
    outside_message: str = ""

    def __init__(self, x: int, y: int, canvas: Canvas, catalog: MessageCatalog):
        self.canvas = canvas
        self.catalog = catalog
        position = Position(_as_int("x", x), _as_int("y", y))
        self._position = position
        if not canvas.fits(self.footprint(position.x, position.y)):
            raise OutOfCanvasError(getattr(catalog, self.outside_message))

    def footprint(self, x: int, y: int) -> np.ndarray:
        """
        Bounding box (minx, miny, maxx, maxy) the shape would cover anchored at (x, y).
        """
        raise NotImplementedError

    @property
    def position(self) -> Position:
        return self._position

    @property
    def x(self) -> int:
        return self._position.x

    @property
    def y(self) -> int:
        return self._position.y

    def can_move_to(self, x: int, y: int) -> bool:
        return self.canvas.fits(self.footprint(_as_int("x", x), _as_int("y", y)))

    def move(self, x: int, y: int) -> bool:
        if not self.can_move_to(x, y):
            logger.debug("%s refused move to (%s, %s)", type(self).__name__, x, y)
            return False
        self._position = Position(int(x), int(y))
        return True

    def _render_fields(self) -> dict:
        return {"x": self.x, "y": self.y}

    def render(self) -> str:
        template = getattr(self.catalog, self.render_template)
        return template.format(**self._render_fields())

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v}" for k, v in self._render_fields().items())
        return f"{type(self).__name__}({fields})"


class Point(_AnchoredShape):
    render_template = "point"
    outside_message = "point_outside"

    def __init__(self, x: int, y: int, canvas: Canvas = DEFAULT_CANVAS, catalog: MessageCatalog = ENGLISH):
        super().__init__(x, y, canvas, catalog)

    def footprint(self, x: int, y: int) -> np.ndarray:
        return _box((x, y, x, y))


class Circle(_AnchoredShape):
    """
    Disk of fixed radius centred at its anchor.
    """
    render_template = "circle"
    outside_message = "circle_outside"

    def __init__(self, x: int, y: int, radius: int,
                 canvas: Canvas = DEFAULT_CANVAS, catalog: MessageCatalog = ENGLISH):
        self._radius = _as_size("radius", radius)
        super().__init__(x, y, canvas, catalog)

    @property
    def radius(self) -> int:
        return self._radius

    def footprint(self, x: int, y: int) -> np.ndarray:
        r = self._radius
        return _box((x - r, y - r, x + r, y + r))

    def _render_fields(self) -> dict:
        return {"x": self.x, "y": self.y, "radius": self._radius}


class Rectangle(_AnchoredShape):
    """
    Axis-aligned rectangle anchored at its top-left corner.
    """
    render_template = "rectangle"
    outside_message = "rectangle_outside"

    def __init__(self, x: int, y: int, width: int, height: int,
                 canvas: Canvas = DEFAULT_CANVAS, catalog: MessageCatalog = ENGLISH):
        self._width = _as_size("width", width)
        self._height = _as_size("height", height)
        super().__init__(x, y, canvas, catalog)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def footprint(self, x: int, y: int) -> np.ndarray:
        return _box((x, y, x + self._width, y + self._height))

    def _render_fields(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self._width, "height": self._height}
