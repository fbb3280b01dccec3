from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from interactive import ConsoleSession, SessionConfig
from shapes import Canvas, MovePolicy, get_catalog, CATALOG_CODES


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build a point, a circle and a rectangle, then move them together.")
    p.add_argument("--lang", type=str, default="en", choices=CATALOG_CODES, help="language of prompts and renders")
    p.add_argument("--width", type=int, default=800, help="canvas width (default: 800)")
    p.add_argument("--height", type=int, default=600, help="canvas height (default: 600)")
    p.add_argument("--atomic", action="store_true", help="move all shapes or none instead of stopping at the first refusal")
    p.add_argument("--verbose", action="store_true", help="log debug details to stderr")
    return p.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> SessionConfig:
    return SessionConfig(
        canvas=Canvas(width=args.width, height=args.height),
        catalog=get_catalog(args.lang),
        policy=MovePolicy.ATOMIC if args.atomic else MovePolicy.SEQUENTIAL,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return ConsoleSession(config=config_from_args(args)).run()


if __name__ == "__main__":
    sys.exit(main())
