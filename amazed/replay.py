"""Reading back the solver's output so that a run can be replayed."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

_HEADERS = {
    "#number_of_robots": "robots",
    "#rooms": "rooms",
    "#tunnels": "tunnels",
    "#moves": "moves",
}

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_TUNNEL = re.compile(r"\s*([+-]?\d+)-\s*([+-]?\d+)")
_MOVE = re.compile(r"P\s*([+-]?\d+)-\s*([+-]?\d+)")


class ReplayError(ValueError):
    """The solver output cannot be replayed."""

    def __init__(self, message: str = "There was a problem with base amazed.") -> None:
        super().__init__(message)


@dataclass
class Sections:
    """The lines of each section of the solver output, headers removed."""

    robots: list[str] = field(default_factory=list)
    rooms: list[str] = field(default_factory=list)
    tunnels: list[str] = field(default_factory=list)
    moves: list[str] = field(default_factory=list)


@dataclass
class RoomSpec:
    """A room as described in the output: name, position and role."""

    name: int
    x: float
    y: float
    is_start: bool = False
    is_end: bool = False


def split_sections(lines: Iterable[str]) -> Sections:
    """Sort the lines of the solver output into their sections.

    Empty lines and lines before the first section header are dropped.
    """
    sections = Sections()
    current: list[str] | None = None
    for raw in lines:
        line = raw.split("\n", 1)[0]
        if line in _HEADERS:
            current = getattr(sections, _HEADERS[line])
            continue
        if not line or current is None:
            continue
        current.append(line)
    return sections


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def parse_robot_count(lines: Iterable[str]) -> int:
    """Return the robot count read from the first line, 0 if unreadable."""
    for line in lines:
        return _atoi(line)
    return 0


def _scan_room(line: str) -> tuple[int, float, float]:
    name, x, y = 0, 0.0, 0.0
    match = _INT.match(line)
    if not match:
        return name, x, y
    name = int(match.group(1))
    pos = match.end()
    match = _FLOAT.match(line, pos)
    if not match:
        return name, x, y
    x = float(match.group(1))
    match = _FLOAT.match(line, match.end())
    if match:
        y = float(match.group(1))
    return name, x, y


def parse_rooms(lines: Iterable[str]) -> list[RoomSpec]:
    """Read the rooms, marking the ones announced by ``##start`` and ``##end``."""
    rooms: list[RoomSpec] = []
    is_start = is_end = False
    for line in lines:
        if "##start" in line:
            is_start = True
            continue
        if "##end" in line:
            is_end = True
            continue
        if not line or line.startswith("#") or line.startswith("\n"):
            continue
        name, x, y = _scan_room(line)
        rooms.append(RoomSpec(name, x, y, is_start, is_end))
        is_start = is_end = False
    return rooms


def parse_tunnels(lines: Iterable[str]) -> list[tuple[int, int]]:
    """Read the tunnels as pairs of room names, skipping unreadable lines."""
    tunnels = []
    for line in lines:
        match = _TUNNEL.match(line)
        if match:
            tunnels.append((int(match.group(1)), int(match.group(2))))
    return tunnels


def parse_moves(lines: Iterable[str]) -> list[list[tuple[int, int]]]:
    """Read each turn as a list of (robot id, room name) moves."""
    turns = []
    for line in lines:
        turn = []
        for word in line.split(" "):
            match = _MOVE.match(word)
            if word and match:
                turn.append((int(match.group(1)), int(match.group(2))))
        turns.append(turn)
    return turns


def check_sections(sections: Sections) -> None:
    """Raise ReplayError unless every section has a first line other than ``error``."""
    for lines in (sections.moves, sections.rooms, sections.tunnels, sections.robots):
        if not lines or lines[0] == "error":
            raise ReplayError()