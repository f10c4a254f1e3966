"""Coordinate types for the world grid and conversions to world space."""

from __future__ import annotations

import math
from typing import NamedTuple, TypeVar

TILE_SIZE: tuple[float, float] = (32.0, 32.0)
"""Width and height of a single tile in world units."""

_P = TypeVar("_P", bound=tuple)

# Offsets in the documented order: NW, N, NE, W, E, SW, S, SE.
_SAME_LAYER: tuple[tuple[int, int, int, int], ...] = (
    (-1, 1, 0, 2), (0, 1, 0, 1), (1, 1, 0, 2),
    (-1, 0, 0, 1), (1, 0, 0, 1),
    (-1, -1, 0, 2), (0, -1, 0, 1), (1, -1, 0, 2),
)

_ALL: tuple[tuple[int, int, int, int], ...] = (
    # layer above
    (-1, 1, 1, 3), (0, 1, 1, 2), (1, 1, 1, 3),
    (-1, 0, 1, 2), (0, 0, 1, 1), (1, 0, 1, 2),
    (-1, -1, 1, 3), (0, -1, 1, 2), (1, -1, 1, 3),
    # same layer
    *_SAME_LAYER,
    # layer below
    (-1, 1, -1, 3), (0, 1, -1, 2), (1, 1, -1, 3),
    (-1, 0, -1, 2), (0, 0, -1, 1), (1, 0, -1, 2),
    (-1, -1, -1, 3), (0, -1, -1, 2), (1, -1, -1, 3),
)


class WorldCoordinates(NamedTuple):
    """Integer coordinates of a block in the world."""

    x: int
    y: int
    z: int


class ChunkCoordinates(NamedTuple):
    """Coordinates of a chunk within the world."""

    x: int
    y: int
    z: int


class BlockCoordinates(NamedTuple):
    """Coordinates of a block within a chunk; never negative."""

    x: int
    y: int
    z: int

    @classmethod
    def of(cls, x: int, y: int, z: int) -> BlockCoordinates:
        """Build block coordinates, rejecting negative components."""
        if min(x, y, z) < 0:
            raise ValueError(f"block coordinates must be non-negative: {(x, y, z)}")
        return cls(x, y, z)


def _shift(point: _P, offsets) -> list[tuple[_P, int]]:
    build = getattr(type(point), "_make", tuple)
    x, y, z = point
    return [(build((x + dx, y + dy, z + dz)), cost) for dx, dy, dz, cost in offsets]


def same_layer_neighbors(point: _P) -> list[tuple[_P, int]]:
    """Return the eight neighbours on the same layer with their squared cost.

    The order is NW, N, NE, W, E, SW, S, SE.
    """
    return _shift(point, _SAME_LAYER)


def all_neighbors(point: _P) -> list[tuple[_P, int]]:
    """Return all 26 neighbours with their squared cost: above, same layer, below."""
    return _shift(point, _ALL)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def world_position_to_world_coordinates(
    position: tuple[float, float, float],
) -> WorldCoordinates:
    """Map a world-space position to the nearest tile coordinates."""
    x, y, z = position
    return WorldCoordinates(
        _round_half_away(x / TILE_SIZE[0]),
        _round_half_away(y / TILE_SIZE[1]),
        _round_half_away(z),
    )


def world_coordinates_to_world_position(
    coordinates: tuple[int, int, int],
) -> tuple[float, float, float]:
    """Map tile coordinates to the world-space position of the tile's centre."""
    x, y, z = coordinates
    return (float(x) * TILE_SIZE[0], float(y) * TILE_SIZE[1], float(z))