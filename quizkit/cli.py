"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; it has nothing to do and says so."""
    parser = argparse.ArgumentParser(prog="quizkit", description="Quiz exercises.")
    parser.parse_args(argv)
    print("Nothing to do!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())