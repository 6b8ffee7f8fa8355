"""Placing rooms on screen and animating robots along the recorded moves."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Sequence

from .replay import RoomSpec

Vector = tuple[float, float]

_ARRIVAL_DISTANCE = 5.0


def layout_rooms(
    rooms: Sequence[RoomSpec],
    width: float = 1920,
    height: float = 1080,
    margin: float = 100,
) -> list[RoomSpec]:
    """Scale room positions to fill the area inside *margin*.

    When every room shares a coordinate, that coordinate is centred.
    """
    if not rooms:
        return []
    min_x = min(room.x for room in rooms)
    max_x = max(room.x for room in rooms)
    min_y = min(room.y for room in rooms)
    max_y = max(room.y for room in rooms)

    def scale(value: float, low: float, high: float, size: float) -> float:
        if high == low:
            return size / 2
        return margin + (value - low) * ((size - 2 * margin) / (high - low))

    return [
        replace(
            room,
            x=scale(room.x, min_x, max_x, width),
            y=scale(room.y, min_y, max_y, height),
        )
        for room in rooms
    ]


@dataclass
class Bot:
    """A robot on screen: its position, velocity per frame and destination."""

    name: int
    pos: Vector
    speed: Vector = (0.0, 0.0)
    target: Vector = (0.0, 0.0)

    @property
    def moving(self) -> bool:
        """True while the robot has a non-zero speed."""
        return self.speed != (0.0, 0.0)


class Animator:
    """Moves robots frame by frame through the recorded turns."""

    def __init__(
        self,
        rooms: Sequence[RoomSpec],
        moves: Sequence[Sequence[tuple[int, int]]],
        robots: int,
        base_speed: float = 0.02,
        pause: float = 0.3,
    ) -> None:
        self.rooms = list(rooms)
        self.moves = [list(turn) for turn in moves]
        self.base_speed = base_speed
        self.pause = pause
        self.current_turn = 0
        self.paused = False
        self.hard_paused = False
        self._processing = False
        self._initialized = False
        self._clock = 0.0
        start = next((room for room in self.rooms if room.is_start), None)
        if start is None:
            self.bots: list[Bot] = []
        else:
            self.bots = [
                Bot(number, (start.x, start.y), target=(start.x, start.y))
                for number in range(1, robots + 1)
            ]

    @property
    def finished(self) -> bool:
        """True once every turn has been played."""
        return self.current_turn >= len(self.moves)

    def toggle_pause(self) -> bool:
        """Switch the user pause on or off and return the new state."""
        self.hard_paused = not self.hard_paused
        return self.hard_paused

    def update(self, elapsed: float) -> None:
        """Advance the animation by one frame, *elapsed* seconds after the last."""
        self._clock += elapsed
        if self.finished or self.hard_paused:
            return
        if self.paused:
            if self._clock >= self.pause:
                self.paused = False
                self._clock = 0.0
            return
        if not self._processing:
            self._start_turn(self.moves[self.current_turn])
        if self._step_bots():
            self._processing = False
            self._initialized = False
            self.current_turn += 1
            self.paused = True
            self._clock = 0.0

    def _start_turn(self, turn: Sequence[tuple[int, int]]) -> None:
        for bot in self.bots:
            bot.speed = (0.0, 0.0)
            bot.target = bot.pos
        for bot_id, room_name in turn:
            bot = next((b for b in self.bots if b.name == bot_id), None)
            room = next((r for r in self.rooms if r.name == room_name), None)
            if bot is None or room is None:
                continue
            dx, dy = room.x - bot.pos[0], room.y - bot.pos[1]
            distance = math.hypot(dx, dy)
            if distance > 0:
                dx, dy = dx / distance, dy / distance
            speed = self.base_speed * distance
            bot.target = (room.x, room.y)
            bot.speed = (dx * speed, dy * speed)
        self._processing = True
        self._initialized = True

    def _step_bots(self) -> bool:
        all_arrived = True
        if not self._initialized:
            return all_arrived
        for bot in self.bots:
            distance = math.hypot(bot.target[0] - bot.pos[0], bot.target[1] - bot.pos[1])
            if distance > _ARRIVAL_DISTANCE:
                bot.pos = (bot.pos[0] + bot.speed[0], bot.pos[1] + bot.speed[1])
                all_arrived = False
            else:
                bot.pos = bot.target
                bot.speed = (0.0, 0.0)
        return all_arrived