"""Command-line entry point.

    python -m safepath
    python -m safepath --briefing examples/briefings/embassy.json --seed 7
"""

from __future__ import annotations

import argparse

from .briefing import load_briefing
from .config import Config
from .console import Console
from .logging_utils import log_info
from .mission import Mission


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Plot safe routes around placed obstacles")
    parser.add_argument("--briefing", help="JSON briefing used to seed the obstacle registry")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for nanobot placement (overrides the briefing's seed)",
    )
    parser.add_argument("--verbose", action="store_true", help="Print a line per placement/query")
    args = parser.parse_args(argv)

    try:
        Config.validate()
    except ValueError as exc:
        parser.error(str(exc))

    if args.verbose:
        log_info(Config.display())

    if args.briefing:
        try:
            mission = load_briefing(args.briefing, seed=args.seed, verbose=args.verbose)
        except (FileNotFoundError, ValueError) as exc:
            # ValueError also covers pydantic ValidationError and JSONDecodeError
            parser.error(f"could not load briefing: {exc}")
    else:
        mission = Mission(seed=args.seed, verbose=args.verbose)

    Console(mission).run()


if __name__ == "__main__":
    main()
