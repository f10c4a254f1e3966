import pytest

from open_fortress.coordinates import (
    world_coordinates_to_world_position,
    world_position_to_world_coordinates,
)
from open_fortress.path import Path
from open_fortress.pathfinding import PathUnreachable, Pathfinder
from open_fortress.world_map import WorldMap


def _solve(finder, world_map, limit=10_000):
    for _ in range(limit):
        result = finder.calculate_step(world_map)
        if result is not None:
            return result
    raise AssertionError("search did not finish")


def test_start_equal_to_target_gives_single_point():
    finder = Pathfinder((2, 3, 0), (2, 3, 0))
    path = finder.calculate_step(WorldMap())
    assert isinstance(path, Path)
    assert path.points == [world_coordinates_to_world_position((2, 3, 0))]
    assert finder.steps == 0


def test_first_step_keeps_searching():
    finder = Pathfinder((0, 0, 0), (4, 0, 0))
    assert finder.calculate_step(WorldMap()) is None
    assert finder.steps == 1
    assert len(finder.cost_so_far) == 27


@pytest.mark.parametrize(
    "start, target",
    [((0, 0, 0), (3, 0, 0)), ((0, 0, 0), (-2, 5, 1)), ((1, 1, 0), (1, -4, -2))],
)
def test_path_connects_start_to_target(start, target):
    path = _solve(Pathfinder(start, target), WorldMap())
    assert path.points[0] == world_coordinates_to_world_position(start)
    assert path.points[-1] == world_coordinates_to_world_position(target)
    tiles = [world_position_to_world_coordinates(p) for p in path.points]
    for a, b in zip(tiles, tiles[1:]):
        assert max(abs(p - q) for p, q in zip(a, b)) == 1


def test_straight_path_has_no_detours():
    path = _solve(Pathfinder((0, 0, 0), (3, 0, 0)), WorldMap())
    tiles = [world_position_to_world_coordinates(p) for p in path.points]
    assert [t.x for t in tiles] == [0, 1, 2, 3]


def test_empty_frontier_is_unreachable():
    finder = Pathfinder((0, 0, 0), (5, 5, 0))
    while finder.frontier.pop() is not None:
        pass
    with pytest.raises(PathUnreachable):
        finder.calculate_step(WorldMap())