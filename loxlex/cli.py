"""Command-line entry point."""

from __future__ import annotations

import sys
from typing import List, Optional

from loxlex.errors import TokenizeError
from loxlex.scanner import tokenize


def main(argv: Optional[List[str]] = None) -> int:
    """Run ``tokenize <filename>`` and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Usage: loxlex tokenize <filename>", file=sys.stderr)
        return 0

    command, filename = args[0], args[1]
    if command != "tokenize":
        print(f"Unknown command: {command}", file=sys.stderr)
        return 0

    try:
        tokens = tokenize(filename)
    except TokenizeError as err:
        for message in err.messages:
            print(message, file=sys.stderr)
        for token in err.tokens:
            print(token)
        return err.exit_code

    for token in tokens:
        print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())