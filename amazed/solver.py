"""Distance costs over the maze and the turn-by-turn robot moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, TextIO

from .graph import Graph

_UNSEEN = -2
_DEAD_END = -1


class NoPathError(RuntimeError):
    """The end room cannot be reached from the start room."""

    def __init__(self) -> None:
        super().__init__("There is no path from beginning to end.")


@dataclass
class Room:
    """Search and traffic state of one room.

    ``cost`` is the number of tunnels to the end room, 0 for the end room
    itself, -1 for a room from which the end was not found and -2 for a room
    the search never entered.
    """

    name: int
    cost: int = _UNSEEN
    visited: bool = False
    occupied: bool = False


@dataclass
class Robot:
    """A robot and the index of the room it stands in."""

    id: int
    pos: int


class _Step(Enum):
    ARRIVED = 1
    MOVED = 0
    BLOCKED = -1


def _start_index(graph: Graph) -> int:
    start = graph.index_of(graph.first)
    if start is None:
        raise ValueError("the start room is not part of the graph")
    return start


def _relax(rooms: list[Room], parent: int, child: int) -> None:
    here, there = rooms[parent], rooms[child]
    if here.cost == _UNSEEN or there.cost < 0:
        return
    if here.cost <= 0 or there.cost + 1 < here.cost:
        here.cost = there.cost + 1


def _enter(graph: Graph, rooms: list[Room], index: int) -> bool:
    room = rooms[index]
    if room.name == graph.last:
        room.cost = 0
        return False
    room.visited = True
    if room.cost == _UNSEEN:
        room.cost = _DEAD_END
    return True


def compute_costs(graph: Graph) -> list[Room]:
    """Explore the maze from the start room and return every room's cost."""
    rooms = [Room(name) for name in graph.names]
    start = _start_index(graph)
    stack: list[tuple[int, Iterator[int]]] = []
    if _enter(graph, rooms, start):
        stack.append((start, iter(graph.neighbours(start))))
    while stack:
        index, pending = stack[-1]
        for child in pending:
            room = rooms[child]
            if room.cost > 0 or room.visited:
                continue
            if _enter(graph, rooms, child):
                stack.append((child, iter(graph.neighbours(child))))
                break
            _relax(rooms, index, child)
        else:
            stack.pop()
            rooms[index].visited = False
            if stack:
                _relax(rooms, stack[-1][0], index)
    return rooms


def _choose(graph: Graph, rooms: list[Room], pos: int) -> int | None:
    best: int | None = None
    for index in graph.neighbours(pos):
        room = rooms[index]
        if room.cost == _DEAD_END:
            continue
        if best is None:
            best = index
            continue
        current = rooms[best]
        if current.cost >= room.cost + int(room.occupied) or (
            current.occupied and room.cost < graph.robots
        ):
            best = index
    return best


def _step(graph: Graph, rooms: list[Room], robot: Robot) -> tuple[_Step, int | None]:
    if graph.names[robot.pos] == graph.last:
        return _Step.ARRIVED, None
    rooms[robot.pos].occupied = False
    target = _choose(graph, rooms, robot.pos)
    moved_to: int | None = None
    if target is not None and not rooms[target].occupied:
        robot.pos = target
        moved_to = graph.names[target]
    if graph.names[robot.pos] != graph.last:
        rooms[robot.pos].occupied = True
    if moved_to is None:
        return _Step.BLOCKED, None
    return _Step.MOVED, moved_to


def plan_moves(graph: Graph, rooms: list[Room]) -> Iterator[list[tuple[int, int]]]:
    """Yield, turn by turn, the (robot id, room name) moves until all arrive.

    Robots act in id order; a robot that cannot move ends the turn for the
    robots after it.
    """
    start = _start_index(graph)
    robots = [Robot(number, start) for number in range(1, graph.robots + 1)]
    while True:
        arrived = 0
        moves: list[tuple[int, int]] = []
        for robot in robots:
            step, moved_to = _step(graph, rooms, robot)
            if step is _Step.BLOCKED:
                break
            if moved_to is not None:
                moves.append((robot.id, moved_to))
            arrived += step.value
        if arrived == len(robots):
            return
        yield moves


def solve(graph: Graph, out: TextIO) -> None:
    """Write the ``#moves`` section that leads every robot to the end room.

    Raises NoPathError, writing nothing, when the end cannot be reached.
    """
    rooms = compute_costs(graph)
    if not any(room.cost == 0 for room in rooms):
        raise NoPathError()
    out.write("#moves\n")
    for turn in plan_moves(graph, rooms):
        out.write("".join(f"P{robot}-{name} " for robot, name in turn) + "\n")