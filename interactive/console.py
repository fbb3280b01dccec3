from __future__ import annotations

from typing import Callable, List, Optional
import logging

from shapes import (
    Built,
    CompositeShape,
    Editor,
    build_circle,
    build_point,
    build_rectangle,
)
from .session import Command, InvalidNumberError, SessionConfig, SessionState, parse_command, parse_int, step

logger = logging.getLogger(__name__)


class ConsoleSession:
    """
    Console adapter around the session state machine.

    `read` behaves like input(prompt) and `write` like print(text); both can be
    swapped for scripted versions.
    """
    def __init__(self,
                 read: Optional[Callable[[str], str]] = None,
                 write: Optional[Callable[[str], None]] = None,
                 config: Optional[SessionConfig] = None):
        self.read = read or input
        self.write = write or print
        self.config = config or SessionConfig()

    @property
    def catalog(self):
        return self.config.catalog

    def _read_int(self, prompt: str) -> int:
        return parse_int(self.read(prompt))

    def _abort(self, message: str) -> int:
        self.write(self.catalog.error.format(message=message))
        return 1

    def _build_shapes(self) -> List[Built]:
        """
        Prompt for the point, the circle and the rectangle, stopping at the first one that does not fit.
        """
        cat, canvas = self.catalog, self.config.canvas
        built: List[Built] = []
        x = self._read_int(cat.point_x)
        y = self._read_int(cat.point_y)
        built.append(build_point(x, y, canvas=canvas, catalog=cat))
        if not built[-1].ok:
            return built
        x = self._read_int(cat.circle_x)
        y = self._read_int(cat.circle_y)
        r = self._read_int(cat.circle_radius)
        built.append(build_circle(x, y, r, canvas=canvas, catalog=cat))
        if not built[-1].ok:
            return built
        x = self._read_int(cat.rectangle_x)
        y = self._read_int(cat.rectangle_y)
        w = self._read_int(cat.rectangle_width)
        h = self._read_int(cat.rectangle_height)
        built.append(build_rectangle(x, y, w, h, canvas=canvas, catalog=cat))
        return built

    def _loop(self, state: SessionState) -> None:
        cat = self.catalog
        while state.running:
            self.write(cat.menu)
            try:
                answer = self.read("")
            except EOFError:
                # closed input at the menu counts as choosing exit
                return
            command = parse_command(answer)
            target = None
            if command is Command.MOVE:
                self.write(cat.new_coordinates)
                target = (self._read_int(cat.move_x), self._read_int(cat.move_y))
            state, output = step(state, command, target)
            if output:
                self.write(output)

    def run(self) -> int:
        """
        Run one session. Returns 0 after a normal exit, 1 when the session was aborted.
        """
        try:
            built = self._build_shapes()
            if not built[-1].ok:
                return self._abort(built[-1].error)
            composite = CompositeShape(policy=self.config.policy)
            editor = Editor()
            for b in built:
                composite.add_shape(b.shape)
                editor.add_shape(b.shape)
            self.write(composite.render())
            self.write(editor.render_all())
            self._loop(SessionState(composite=composite, catalog=self.catalog))
            return 0
        except InvalidNumberError as e:
            logger.debug("aborting session: %s", e)
            self.write(self.catalog.invalid_number)
            return 1
        except EOFError:
            logger.debug("input closed, ending session")
            return 1
        except Exception as e:
            logger.debug("aborting session", exc_info=True)
            return self._abort(str(e))
