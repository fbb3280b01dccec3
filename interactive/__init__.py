from .session import (
    Command,
    InvalidNumberError,
    SessionConfig,
    SessionState,
    parse_command,
    parse_int,
    step,
)
from .console import ConsoleSession
