"""Fixed-size chunks of blocks generated from height noise."""

from __future__ import annotations

import math
from dataclasses import dataclass

from open_fortress.block_type import BlockType
from open_fortress.coordinates import BlockCoordinates, ChunkCoordinates, WorldCoordinates
from open_fortress.noise import OpenSimplex

CHUNK_SIZE: tuple[int, int, int] = (16, 16, 1)
"""Number of blocks along x, y and z in one chunk."""

_BLOCK_COUNT = CHUNK_SIZE[0] * CHUNK_SIZE[1] * CHUNK_SIZE[2]

_LOWEST = -10984.0
_HIGHEST = 8848.0


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _remap(value: float) -> float:
    return (value + 1.0) / 2.0 * (_HIGHEST - _LOWEST) + _LOWEST


def to_index(block: tuple[int, int, int]) -> int:
    """Return the index of a block within its chunk's block list."""
    x, y, z = block
    return x * CHUNK_SIZE[1] * CHUNK_SIZE[2] + y * CHUNK_SIZE[2] + z


def to_world_coordinates(
    chunk: tuple[int, int, int], block: tuple[int, int, int]
) -> WorldCoordinates:
    """Combine chunk and in-chunk block coordinates into world coordinates."""
    return WorldCoordinates(*(c * size + b for c, size, b in zip(chunk, CHUNK_SIZE, block)))


def to_chunk_and_block(
    coordinates: tuple[int, int, int],
) -> tuple[ChunkCoordinates, BlockCoordinates]:
    """Split world coordinates into the chunk and the block within it."""
    chunk = ChunkCoordinates(*(c // size for c, size in zip(coordinates, CHUNK_SIZE)))
    block = BlockCoordinates(*(c % size for c, size in zip(coordinates, CHUNK_SIZE)))
    return chunk, block


def _block_for(height: int, threshold: int) -> BlockType:
    if height == threshold and threshold > 0:
        return BlockType.BRIGHT_GRASS
    if height < threshold:
        return BlockType.DIRT
    if threshold < height < 0:
        return BlockType.WATER
    return BlockType.NONE


@dataclass
class Chunk:
    """A chunk of the world and the blocks it contains."""

    coordinates: ChunkCoordinates
    blocks: list[BlockType]

    @classmethod
    def generate(cls, coordinates: tuple[int, int, int], noise: OpenSimplex) -> Chunk:
        """Generate a chunk's terrain from the height given by ``noise``."""
        coordinates = ChunkCoordinates(*coordinates)
        size_x, size_y, size_z = CHUNK_SIZE
        blocks = [BlockType.NONE] * _BLOCK_COUNT
        for x in range(size_x):
            for y in range(size_y):
                world_x = coordinates.x + x / size_x
                world_y = coordinates.y + y / size_y
                threshold = _round_half_away(_remap(noise.get(world_x, world_y)))
                for z in range(size_z):
                    height = coordinates.z * size_z + z
                    blocks[to_index((x, y, z))] = _block_for(height, threshold)
        return cls(coordinates, blocks)

    def remove_block(self, block: tuple[int, int, int]) -> None:
        """Clear the block at the given in-chunk coordinates."""
        self.blocks[to_index(block)] = BlockType.NONE