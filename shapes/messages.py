from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MessageCatalog:
    """
    Every sentence shown to the user, as str.format templates.
    """
    code: str
    # ---- renders ----
    point: str
    circle: str
    rectangle: str
    # ---- construction errors ----
    point_outside: str
    circle_outside: str
    rectangle_outside: str
    # ---- prompts ----
    point_x: str
    point_y: str
    circle_x: str
    circle_y: str
    circle_radius: str
    rectangle_x: str
    rectangle_y: str
    rectangle_width: str
    rectangle_height: str
    # ---- menu loop ----
    menu: str
    new_coordinates: str
    move_x: str
    move_y: str
    moved: str
    not_moved: str
    invalid_option: str
    # ---- failures ----
    invalid_number: str
    error: str


ENGLISH = MessageCatalog(
    code="en",
    point="Drawing a Point at ({x}, {y})",
    circle="Drawing a Circle at ({x}, {y}) with radius {radius}",
    rectangle="Drawing a Rectangle at ({x}, {y}) with width {width} and height {height}",
    point_outside="The point is outside the screen.",
    circle_outside="The circle is outside the screen.",
    rectangle_outside="The rectangle is outside the screen.",
    point_x="Enter the X coordinate of the point: ",
    point_y="Enter the Y coordinate of the point: ",
    circle_x="Enter the X coordinate of the circle: ",
    circle_y="Enter the Y coordinate of the circle: ",
    circle_radius="Enter the radius of the circle: ",
    rectangle_x="Enter the X coordinate of the rectangle: ",
    rectangle_y="Enter the Y coordinate of the rectangle: ",
    rectangle_width="Enter the width of the rectangle: ",
    rectangle_height="Enter the height of the rectangle: ",
    menu="Choose what you want to do:\n1. Move the shape\n2. Exit",
    new_coordinates="Enter the new coordinates (x y):",
    move_x="Enter the X coordinate of the point: ",
    move_y="Enter the Y coordinate of the point: ",
    moved="Shape moved successfully.",
    not_moved="The shape could not be moved.",
    invalid_option="Invalid option.",
    invalid_number="Please enter a valid value for the data.",
    error="An error occurred: {message}",
)

SPANISH = MessageCatalog(
    code="es",
    point="Dibujando un Punto en ({x}, {y})",
    circle="Dibujando un Círculo en ({x}, {y}) con radio {radius}",
    rectangle="Dibujando un Rectángulo en ({x}, {y}) con ancho {width} y alto {height}",
    point_outside="El punto está fuera de la pantalla.",
    circle_outside="El círculo está fuera de la pantalla.",
    rectangle_outside="El rectángulo está fuera de la pantalla.",
    point_x="Introduce la coordenada X del punto: ",
    point_y="Introduce la coordenada Y del punto: ",
    circle_x="Introduce la coordenada X del círculo: ",
    circle_y="Introduce la coordenada Y del círculo: ",
    circle_radius="Introduce el radio del círculo: ",
    rectangle_x="Introduce la coordenada X del rectángulo: ",
    rectangle_y="Introduce la coordenada Y del rectángulo: ",
    rectangle_width="Introduce el ancho del rectángulo: ",
    rectangle_height="Introduce el alto del rectángulo: ",
    menu="Elige lo que deseas hacer:\n1. Mover el gráfico\n2. Salir",
    new_coordinates="Introduce las nuevas coordenadas (x y):",
    move_x="Introduce la coordenada X del punto: ",
    move_y="Introduce la coordenada Y del punto: ",
    moved="Gráfico movido con éxito.",
    not_moved="No se pudo mover el gráfico.",
    invalid_option="Opción no válida.",
    invalid_number="Introduzca un valor válido para el dato.",
    error="Se produjo un error: {message}",
)

CATALOGS = {c.code: c for c in (ENGLISH, SPANISH)}
CATALOG_CODES = tuple(CATALOGS)


def get_catalog(code: str) -> MessageCatalog:
    try:
        return CATALOGS[code]
    except KeyError:
        raise ValueError(f"unknown language code: {code!r}") from None
