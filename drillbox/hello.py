"""A greeting."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

GREETING = "hello_OK!"


def greet() -> str:
    """Return the greeting."""
    return GREETING


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting."""
    parser = argparse.ArgumentParser(prog="hello", description="Print a greeting.")
    parser.parse_args(list(argv) if argv is not None else None)
    sys.stdout.write(greet() + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())