# Re-export the shape API for convenience
from .geometry import (
    Canvas,
    DEFAULT_CANVAS,
    OutOfCanvasError,
    Position,
    Shape,
    Point,
    Circle,
    Rectangle,
)
from .composite import CompositeShape, MovePolicy
from .editor import Editor
from .factory import Built, build_point, build_circle, build_rectangle
from .messages import MessageCatalog, ENGLISH, SPANISH, CATALOG_CODES, get_catalog
