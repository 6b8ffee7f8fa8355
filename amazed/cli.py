"""Command line entry point: read a maze on stdin and print the solution."""

from __future__ import annotations

import sys

from .graph import ParseError, parse_graph
from .solver import NoPathError, solve
from .text import read_input

_USAGE = "USAGE:\n\t./amazed < [your path file]\n"


def main(argv: list[str] | None = None) -> int:
    """Run the solver on standard input and return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        if len(argv) == 1 and argv[0] == "-h":
            sys.stdout.write(_USAGE)
        return 84
    try:
        graph = parse_graph(read_input(sys.stdin), sys.stdout)
    except ParseError as error:
        if error.line is not None:
            sys.stderr.write(f"{error}\n")
        return 84
    try:
        solve(graph, sys.stdout)
    except NoPathError as error:
        sys.stderr.write(f"{error}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())