"""The maze graph and the parser for its text description."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

from .text import parse_int, split_words

_FREE = -1


class ParseError(ValueError):
    """The maze description is invalid.

    ``line`` is the index of the offending line, or None when the description
    was read through but lacks a start or an end room.
    """

    def __init__(self, line: int | None = None) -> None:
        self.line = line
        if line is None:
            message = "the maze has no start or no end room"
        else:
            message = f"an error occured on line : {line}"
        super().__init__(message)


@dataclass
class Graph:
    """Rooms of a maze, the tunnels between them and the robot count."""

    robots: int
    names: list[int]
    links: list[set[int]]
    first: int = -1
    last: int = -1

    def index_of(self, name: int) -> int | None:
        """Return the index of the room called *name*, or None."""
        try:
            return self.names.index(name)
        except ValueError:
            return None

    def neighbours(self, index: int) -> list[int]:
        """Return the indices of rooms linked to room *index*, ascending."""
        return sorted(self.links[index])


def _count_rooms(lines: Iterable[str]) -> int:
    count = 0
    for line in lines:
        if line.startswith("#"):
            continue
        if len(split_words(line, " ")) != 3:
            break
        count += 1
    return count


def _init_graph(header: str, rest: list[str], out: TextIO) -> Graph:
    robots = parse_int(header)
    if robots < 0 or (robots == 0 and header):
        raise ParseError(0)
    out.write("#number_of_robots\n" + header + "\n")
    size = _count_rooms(rest)
    graph = Graph(robots, [_FREE] * size, [set() for _ in range(size)])
    out.write("#rooms\n")
    return graph


def _place_room(graph: Graph, line: str, number: int) -> int:
    try:
        slot = graph.names.index(_FREE)
    except ValueError:
        raise ParseError(number) from None
    name = parse_int(split_words(line, " ")[0])
    graph.names[slot] = name
    return name


def _add_terminal(
    graph: Graph,
    line: str,
    number: int,
    numbered: Iterator[tuple[int, str]],
    out: TextIO,
) -> None:
    kind = line[2:]
    if kind not in ("start", "end"):
        raise ParseError(number)
    out.write(line + "\n")
    try:
        number, room = next(numbered)
    except StopIteration:
        out.write("\n")
        raise ParseError(number + 1) from None
    out.write(room + "\n")
    if len(split_words(room, " ")) != 3:
        raise ParseError(number)
    name = _place_room(graph, room, number)
    if kind == "end":
        graph.last = name
    else:
        graph.first = name


def _add_room_or_tunnel(graph: Graph, line: str, number: int, out: TextIO) -> None:
    if len(split_words(line, " ")) == 3:
        out.write(line + "\n")
        _place_room(graph, line, number)
        return
    ends = split_words(line, "-")
    if len(ends) != 2:
        raise ParseError(number)
    out.write(line + "\n")
    a, b = parse_int(ends[0]), parse_int(ends[1])
    index_a, index_b = graph.index_of(a), graph.index_of(b)
    if index_a is None or index_b is None:
        raise ParseError(number)
    if a == b:
        return
    graph.links[index_a].add(index_b)
    graph.links[index_b].add(index_a)


def parse_graph(lines: Iterable[str], out: TextIO) -> Graph:
    """Build a Graph from the lines of a maze description.

    Accepted lines are echoed to *out* under the section headers
    ``#number_of_robots``, ``#rooms`` and ``#tunnels``. Raises ParseError
    on the first bad line, or when the start or end room is missing.
    """
    lines = list(lines)
    if not lines:
        raise ParseError(0)
    numbered = enumerate(lines)
    _, header = next(numbered)
    graph = _init_graph(header, lines[1:], out)
    in_rooms = True
    for number, line in numbered:
        if in_rooms and len(split_words(line, "-")) == 2:
            out.write("#tunnels\n")
            in_rooms = False
        if line.startswith("#"):
            if line[1:2] == "#" and line[2:3] != "#":
                _add_terminal(graph, line, number, numbered, out)
            continue
        if "#" in line:
            raise ParseError(number)
        _add_room_or_tunnel(graph, line, number, out)
    if graph.first == -1 or graph.last == -1:
        raise ParseError(None)
    return graph