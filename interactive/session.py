from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from shapes import Canvas, CompositeShape, DEFAULT_CANVAS, ENGLISH, MessageCatalog, MovePolicy


class InvalidNumberError(ValueError):
    """Raised when console input that should be an integer is not one."""


def parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidNumberError(f"not an integer: {text!r}") from None


class Command(Enum):
    MOVE = 1
    EXIT = 2
    INVALID = 0


def parse_command(text: str) -> Command:
    """
    Map a menu answer to a command. The answer must be an integer; unknown numbers are INVALID.
    """
    n = parse_int(text)
    for cmd in (Command.MOVE, Command.EXIT):
        if cmd.value == n:
            return cmd
    return Command.INVALID


@dataclass(frozen=True)
class SessionConfig:
    canvas: Canvas = DEFAULT_CANVAS
    catalog: MessageCatalog = ENGLISH
    policy: MovePolicy = MovePolicy.SEQUENTIAL


@dataclass(frozen=True)
class SessionState:
    composite: CompositeShape
    catalog: MessageCatalog = ENGLISH
    running: bool = True


def step(state: SessionState,
         command: Command,
         target: Optional[Tuple[int, int]] = None) -> Tuple[SessionState, str]:
    """
    Apply one menu command and return (next state, text to show).

    MOVE needs a target (x, y) and moves the composite there, reporting the outcome
    and, on success, the new render. EXIT stops the session.

    The composite is moved in place and shared with the returned state, so the
    state passed in reflects the move too. Only `running` changes through a new state.
    """
    if not state.running:
        return state, ""
    cat = state.catalog
    if command is Command.MOVE:
        if target is None:
            raise ValueError("MOVE requires a target position")
        x, y = target
        if state.composite.move(x, y):
            return state, f"{cat.moved}\n{state.composite.render()}"
        return state, cat.not_moved
    if command is Command.EXIT:
        return replace(state, running=False), ""
    return state, cat.invalid_option
