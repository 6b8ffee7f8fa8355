import pytest

from amazed.motion import Animator, Bot, layout_rooms
from amazed.replay import RoomSpec


def _rooms():
    return [
        RoomSpec(0, 0.0, 0.0, is_start=True),
        RoomSpec(1, 100.0, 0.0),
        RoomSpec(2, 100.0, 100.0, is_end=True),
    ]


def _run(animator, limit=10000):
    for _ in range(limit):
        if animator.finished:
            return
        animator.update(0.5)
    raise AssertionError("animation did not finish")


def test_layout_centres_single_room():
    placed = layout_rooms([RoomSpec(5, 3.0, 4.0)], 1920, 1080, 100)
    assert (placed[0].x, placed[0].y) == (960, 540)


def test_layout_of_nothing():
    assert layout_rooms([]) == []


def test_bots_start_in_start_room():
    animator = Animator(_rooms(), [], 3)
    assert [bot.name for bot in animator.bots] == [1, 2, 3]
    assert all(bot.pos == (0.0, 0.0) for bot in animator.bots)
    assert animator.finished


def test_no_start_room_means_no_bots():
    rooms = [RoomSpec(0, 0.0, 0.0), RoomSpec(1, 1.0, 1.0)]
    assert Animator(rooms, [[(1, 1)]], 2).bots == []


def test_bots_follow_moves_to_end():
    animator = Animator(_rooms(), [[(1, 1)], [(1, 2), (2, 1)], [(2, 2)]], 2)
    _run(animator)
    assert all(bot.pos == (100.0, 100.0) for bot in animator.bots)
    assert not any(bot.moving for bot in animator.bots)


def test_bot_moves_toward_target():
    animator = Animator(_rooms(), [[(1, 1)]], 1)
    animator.update(0.0)
    bot = animator.bots[0]
    assert bot.moving
    assert bot.target == (100.0, 0.0)
    assert 0.0 < bot.pos[0] < 100.0
    assert bot.pos[1] == 0.0


def test_pause_between_turns():
    animator = Animator(_rooms(), [[(1, 1)], [(1, 2)]], 1)
    while animator.current_turn == 0:
        animator.update(0.01)
    assert animator.paused
    animator.update(0.1)
    assert animator.paused
    assert animator.bots[0].pos == (100.0, 0.0)
    animator.update(0.5)
    assert not animator.paused


def test_toggle_pause_freezes_animation():
    animator = Animator(_rooms(), [[(1, 1)]], 1)
    assert animator.toggle_pause() is True
    for _ in range(10):
        animator.update(0.5)
    assert animator.bots[0].pos == (0.0, 0.0)
    assert animator.toggle_pause() is False
    _run(animator)
    assert animator.bots[0].pos == (100.0, 0.0)


def test_bot_moving_property():
    assert not Bot(1, (0.0, 0.0)).moving
    assert Bot(1, (0.0, 0.0), speed=(1.0, 0.0)).moving


@pytest.mark.parametrize("robots", [1, 4])
def test_unknown_room_is_ignored(robots):
    animator = Animator(_rooms(), [[(1, 99)]], robots)
    _run(animator)
    assert all(bot.pos == (0.0, 0.0) for bot in animator.bots)