"""Tests for the win condition."""

import pytest

from gearpuzzle.models import GEAR_DIMENSIONS, GearInstance, GearRole, GearSize, Position, RotationDirection
from gearpuzzle.engine import check_win, goal_satisfied, mesh_propagate, spin_of


def gear_at(gear_id, role, size, cx, cy, speed=0.0, direction=None):
    r = GEAR_DIMENSIONS[size].outer_radius
    return GearInstance(
        id=gear_id,
        role=role,
        size=size,
        position=Position(cx - r, cy - r),
        rotation_speed=speed,
        required_direction=direction,
    )


def medium_pair(direction):
    return [
        gear_at("start", GearRole.START, GearSize.MEDIUM, 100, 100, speed=0.8),
        gear_at("goal", GearRole.GOAL, GearSize.MEDIUM, 240, 100, direction=direction),
    ]


class TestSpin:
    """Tests for speed to direction mapping."""

    def test_spin_of(self):
        assert spin_of(0.8) is RotationDirection.CW
        assert spin_of(-0.8) is RotationDirection.CCW
        assert spin_of(0.0) is None


class TestGoalSatisfied:
    """Tests for a single goal's requirement."""

    @pytest.mark.parametrize(
        "direction,speed,expected",
        [
            (RotationDirection.ANY, 0.5, True),
            (RotationDirection.ANY, -0.5, True),
            (RotationDirection.ANY, 0.0, False),
            (None, -0.5, True),
            (None, 0.0, False),
            (RotationDirection.CW, 0.5, True),
            (RotationDirection.CW, -0.5, False),
            (RotationDirection.CCW, -0.5, True),
            (RotationDirection.CCW, 0.5, False),
            (RotationDirection.CCW, 0.0, False),
        ],
    )
    def test_requirement(self, direction, speed, expected):
        goal = gear_at("g", GearRole.GOAL, GearSize.SMALL, 0, 0, speed=speed, direction=direction)
        assert goal_satisfied(goal) is expected

    def test_locked_goal_never_satisfied(self):
        goal = gear_at("g", GearRole.GOAL, GearSize.SMALL, 0, 0, direction=RotationDirection.ANY)
        goal.locked = True
        assert not goal_satisfied(goal)


class TestCheckWin:
    """Tests for the board-level win check."""

    def test_medium_pair_any_wins(self):
        assert check_win(mesh_propagate(medium_pair(RotationDirection.ANY)))

    def test_medium_pair_cw_loses(self):
        result = mesh_propagate(medium_pair(RotationDirection.CW))
        assert result[1].rotation_speed == pytest.approx(-0.8)
        assert not check_win(result)

    def test_medium_pair_ccw_wins(self):
        assert check_win(mesh_propagate(medium_pair(RotationDirection.CCW)))

    def test_no_goals(self):
        assert not check_win([])
        start = gear_at("start", GearRole.START, GearSize.MEDIUM, 100, 100, speed=0.8)
        assert not check_win(mesh_propagate([start]))

    def test_isolated_goal_fails(self):
        gears = [
            gear_at("start", GearRole.START, GearSize.MEDIUM, 100, 100, speed=0.8),
            gear_at("goal", GearRole.GOAL, GearSize.MEDIUM, 800, 600, direction=RotationDirection.ANY),
        ]
        result = mesh_propagate(gears)
        assert result[1].rotation_speed == 0
        assert not check_win(result)

    def test_all_goals_required(self):
        gears = [
            gear_at("start", GearRole.START, GearSize.MEDIUM, 100, 100, speed=0.8),
            gear_at("goal-1", GearRole.GOAL, GearSize.MEDIUM, 240, 100),
            gear_at("goal-2", GearRole.GOAL, GearSize.MEDIUM, 800, 600),
        ]
        assert not check_win(mesh_propagate(gears))

        gears[2] = gear_at("goal-2", GearRole.GOAL, GearSize.MEDIUM, 100, 240)
        assert check_win(mesh_propagate(gears))

    def test_positional_gears_ignored(self):
        gears = medium_pair(RotationDirection.ANY) + [
            gear_at("p", GearRole.POSITIONAL, GearSize.SMALL, 900, 700),
        ]
        assert check_win(mesh_propagate(gears))
