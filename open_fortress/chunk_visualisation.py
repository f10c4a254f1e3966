"""Which chunks to show around the camera, and the tile flags of their blocks."""

from __future__ import annotations

import math
from collections.abc import Iterable

from open_fortress.chunk import CHUNK_SIZE, to_chunk_and_block
from open_fortress.coordinates import TILE_SIZE, ChunkCoordinates, same_layer_neighbors
from open_fortress.world_map import WorldMap

Area = tuple[tuple[float, float], tuple[float, float]]
"""Visible area relative to the camera: ((min_x, min_y), (max_x, max_y))."""

ChunkRanges = tuple[range, range, range]


def block_flags(world_map: WorldMap, coordinates: tuple[int, int, int]) -> int:
    """Return a bit per same-layer neighbour, set when that neighbour is solid.

    Bit ``i`` belongs to the ``i``-th neighbour in the order NW, N, NE, W, E, SW, S, SE.
    """
    return sum(
        int(world_map.solidness(neighbor)) << bit
        for bit, (neighbor, _) in enumerate(same_layer_neighbors(tuple(coordinates)))
    )


def visible_chunk_ranges(
    camera_x: float, camera_y: float, layer: int, area: Area
) -> ChunkRanges:
    """Return the x, y and z chunk ranges covering the camera's visible area."""
    (area_min_x, area_min_y), (area_max_x, area_max_y) = area
    chunk_width = CHUNK_SIZE[0] * TILE_SIZE[0]
    chunk_height = CHUNK_SIZE[1] * TILE_SIZE[1]
    min_chunk_x = math.floor((camera_x + area_min_x) / chunk_width)
    max_chunk_x = math.ceil((camera_x + area_max_x) / chunk_width)
    min_chunk_y = math.floor((camera_y + area_min_y) / chunk_height)
    max_chunk_y = math.ceil((camera_y + area_max_y) / chunk_height)
    return (
        range(min_chunk_x, max_chunk_x),
        range(min_chunk_y, max_chunk_y),
        range(layer, layer + 1),
    )


def dirty_chunks(coordinates: tuple[int, int, int]) -> list[ChunkCoordinates]:
    """Chunks to redraw after the block at ``coordinates`` changed.

    A block on a chunk's edge also affects the tiles of the surrounding chunks.
    """
    chunk, block = to_chunk_and_block(coordinates)
    affected = [chunk]
    if (
        block.x == 0
        or block.y == 0
        or block.x == CHUNK_SIZE[0] - 1
        or block.y == CHUNK_SIZE[1] - 1
    ):
        affected.extend(ChunkCoordinates(*neighbor) for neighbor, _ in same_layer_neighbors(chunk))
    return affected


def chunks_to_request(
    existing: Iterable[tuple[int, int, int]], ranges: ChunkRanges
) -> list[ChunkCoordinates]:
    """Chunks inside ``ranges`` that are not shown yet, ordered by x, then y, then z."""
    shown = {ChunkCoordinates(*chunk) for chunk in existing}
    x_range, y_range, z_range = ranges
    return [
        candidate
        for candidate in (
            ChunkCoordinates(x, y, z) for x in x_range for y in y_range for z in z_range
        )
        if candidate not in shown
    ]


def chunks_to_delete(
    existing: Iterable[tuple[int, int, int]], ranges: ChunkRanges
) -> list[ChunkCoordinates]:
    """Shown chunks that have left ``ranges``."""
    x_range, y_range, z_range = ranges
    return [
        chunk
        for chunk in (ChunkCoordinates(*c) for c in existing)
        if chunk.x not in x_range or chunk.y not in y_range or chunk.z not in z_range
    ]