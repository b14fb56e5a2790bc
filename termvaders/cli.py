"""Command-line entry point that starts a game driven by typed commands."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .game import Game


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start a game reading commands from standard input."""
    parser = argparse.ArgumentParser(
        prog="termvaders",
        description="Terminal space shooter: type a, d, w to move and shoot, s to stop.",
    )
    parser.parse_args(argv)
    Game().run_manual_input(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())