"""Step-by-step A* search over world coordinates."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Hashable

from open_fortress.coordinates import (
    WorldCoordinates,
    all_neighbors,
    world_coordinates_to_world_position,
)
from open_fortress.path import Path
from open_fortress.world_map import WorldMap

# Flat extra cost added to every priority; the map is not consulted yet.
_HEURISTIC_COST = 1


class PathUnreachable(Exception):
    """Raised when the search has run out of coordinates to explore."""


class _Frontier:
    """Min-priority queue where pushing a queued item updates its priority."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Hashable]] = []
        self._live: dict[Hashable, int] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._live)

    def push(self, item: Hashable, priority: int) -> None:
        order = next(self._counter)
        self._live[item] = order
        heapq.heappush(self._heap, (priority, order, item))

    def pop(self) -> Hashable | None:
        """Remove and return the item with the lowest priority, or None if empty."""
        while self._heap:
            _, order, item = heapq.heappop(self._heap)
            if self._live.get(item) == order:
                del self._live[item]
                return item
        return None


def _distance_squared(a: tuple[int, int, int], b: tuple[int, int, int]) -> int:
    return sum((p - q) ** 2 for p, q in zip(a, b))


class Pathfinder:
    """A* search from a start to a target, advanced one step at a time."""

    def __init__(self, start: tuple[int, int, int], target: tuple[int, int, int]) -> None:
        start = WorldCoordinates(*start)
        self.target = WorldCoordinates(*target)
        self.frontier = _Frontier()
        self.frontier.push(start, 0)
        self.came_from: dict[WorldCoordinates, WorldCoordinates | None] = {start: None}
        self.cost_so_far: dict[WorldCoordinates, int] = {start: 0}
        self.steps = 0

    def calculate_step(self, world_map: WorldMap) -> Path | None:
        """Expand one coordinate; return the finished path, or None while still searching.

        Raises PathUnreachable when nothing is left to explore.
        """
        current = self.frontier.pop()
        if current is None:
            raise PathUnreachable(f"no path to {tuple(self.target)}")
        if current == self.target:
            return Path(self._to_path())

        current_cost = self.cost_so_far[current]
        for neighbor, neighbor_cost in all_neighbors(current):
            new_cost = current_cost + neighbor_cost
            known = self.cost_so_far.get(neighbor)
            if known is None or new_cost < known:
                self.cost_so_far[neighbor] = new_cost
                priority = (
                    new_cost
                    + _HEURISTIC_COST
                    + _distance_squared(neighbor, self.target)
                )
                self.frontier.push(neighbor, priority)
                self.came_from[neighbor] = current
        self.steps += 1
        return None

    def _to_path(self) -> list[tuple[float, float, float]]:
        points = [world_coordinates_to_world_position(self.target)]
        previous = self.came_from.get(self.target)
        while previous is not None:
            points.append(world_coordinates_to_world_position(previous))
            previous = self.came_from.get(previous)
        points.reverse()
        return points