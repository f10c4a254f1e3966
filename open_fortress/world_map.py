"""The world map: lazily generated chunks and block damage."""

from __future__ import annotations

from collections.abc import Hashable

from open_fortress.block_type import BlockType
from open_fortress.chunk import Chunk, to_chunk_and_block, to_index
from open_fortress.coordinates import ChunkCoordinates, WorldCoordinates
from open_fortress.noise import OpenSimplex


class WorldMap:
    """All generated chunks of the world together with per-block health."""

    def __init__(self, entity: Hashable | None = None, noise: OpenSimplex | None = None) -> None:
        self.entity = entity
        self.noise = noise if noise is not None else OpenSimplex(0)
        self.chunks: dict[ChunkCoordinates, Chunk] = {}
        self.block_states: dict[WorldCoordinates, float] = {}

    def get_chunk(self, coordinates: tuple[int, int, int]) -> Chunk:
        """Return the chunk at ``coordinates``, generating it on first use."""
        key = ChunkCoordinates(*coordinates)
        chunk = self.chunks.get(key)
        if chunk is None:
            chunk = Chunk.generate(key, self.noise)
            self.chunks[key] = chunk
        return chunk

    def get_block(self, coordinates: tuple[int, int, int]) -> BlockType | None:
        """Return the block at ``coordinates``, or None if empty or not generated."""
        chunk_coordinates, block = to_chunk_and_block(coordinates)
        chunk = self.chunks.get(chunk_coordinates)
        if chunk is None:
            return None
        found = chunk.blocks[to_index(block)]
        return None if found is BlockType.NONE else found

    def solidness(self, coordinates: tuple[int, int, int]) -> bool:
        """Whether the block is solid; cells of ungenerated chunks count as solid."""
        chunk_coordinates, block = to_chunk_and_block(coordinates)
        chunk = self.chunks.get(chunk_coordinates)
        return chunk is None or chunk.blocks[to_index(block)].is_solid()

    def damage_block(self, coordinates: tuple[int, int, int], damage: float) -> bool:
        """Damage a block; return True if it was destroyed.

        A block's first damage only registers it at full health.
        """
        key = WorldCoordinates(*coordinates)
        if key in self.block_states:
            self.block_states[key] -= damage
        else:
            self.block_states[key] = 1.0
        remaining = self.block_states[key]
        destroyed = remaining < 0.0
        if destroyed:
            chunk_coordinates, block = to_chunk_and_block(key)
            self.get_chunk(chunk_coordinates).remove_block(block)
        return destroyed