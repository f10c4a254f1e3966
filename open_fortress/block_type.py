"""Block kinds and the mapping from neighbour flags to tileset indices."""

from __future__ import annotations

from enum import Enum

# Neighbour flag bits, in neighbour order: NW=1, N=2, NE=4, W=8, E=16, SW=32, S=64, SE=128.
# Each entry is (mask, expected, tile index); the first entry whose masked flags match wins.
_MASKS: tuple[tuple[int, int, int], ...] = (
    (0b01011010, 0b00000000, 0),   # none
    (0b01011010, 0b00000010, 1),   # N
    (0b01011010, 0b00010000, 5),   # E
    (0b01011010, 0b00001000, 2),   # W
    (0b01011010, 0b01000000, 13),  # S
    (0b01011010, 0b00011000, 8),   # horizontal
    (0b01011010, 0b01000010, 14),  # vertical
    (0b01011011, 0b00001010, 3),   # N to W
    (0b01011110, 0b00010010, 6),   # N to E
    (0b01111010, 0b01001000, 15),  # S to W
    (0b11011010, 0b01010000, 18),  # S to E
    (0b01011011, 0b00001011, 4),   # upper left L
    (0b01011110, 0b00010110, 7),   # upper right L
    (0b11011010, 0b11010000, 35),  # bottom right L
    (0b01111010, 0b01101000, 27),  # bottom left L
    (0b11111010, 0b11111000, 42),  # top
    (0b01011111, 0b00011111, 12),  # bottom
    (0b01111011, 0b01101011, 29),  # right
    (0b11011010, 0b11010010, 36),  # left
    (0b01111011, 0b01001011, 17),  # upper left L with S
    (0b11011110, 0b01010110, 21),  # upper right L with S
    (0b01011111, 0b00011110, 11),  # upper right L with W
    (0b01011111, 0b00011011, 10),  # upper left L with E
    (0b01111011, 0b01101010, 28),  # bottom left L with N
    (0b11111010, 0b01111000, 30),  # bottom left L with E
    (0b11111010, 0b11011000, 37),  # bottom right L with W
    (0b01011111, 0b00011010, 9),   # T up
    (0b11011110, 0b01010010, 19),  # T right
    (0b11111010, 0b01011000, 22),  # T down
    (0b01111011, 0b01001010, 16),  # T left
    (0b11111111, 0b01011010, 23),  # cross
    (0b11111111, 0b01011011, 24),  # upper left L with E and S
    (0b11111111, 0b01011110, 25),  # upper right L with W and S
    (0b11111111, 0b11011010, 38),  # bottom right L with W and N
    (0b11111111, 0b01111010, 31),  # bottom left L with E and N
    (0b11111111, 0b01111110, 33),  # upper right and bottom left L
    (0b11111111, 0b11011011, 39),  # upper left and bottom right L
    (0b11111111, 0b11111010, 45),  # top with N exit
    (0b11111111, 0b01111011, 32),  # right with E exit
    (0b11111111, 0b01011111, 26),  # bottom with S exit
    (0b11111111, 0b11011110, 40),  # left with W exit
    (0b11111111, 0b11111110, 44),  # no upper left corner
    (0b11111111, 0b11111011, 43),  # no upper right corner
    (0b11111111, 0b11011111, 41),  # no bottom left corner
    (0b11111111, 0b01111111, 34),  # no bottom right corner
    (0b11111111, 0b11111111, 47),  # all
)


class BlockType(Enum):
    """Kind of block occupying a cell of the world."""

    GRASS = "grass"
    WATER = "water"
    LAVA = "lava"
    BRIGHT_GRASS = "bright_grass"
    DIRT = "dirt"
    FIELD = "field"
    NONE = "none"

    def is_solid(self) -> bool:
        return self in _SOLID

    def index(self, flags: int) -> int:
        """Return the tileset index for a block whose solid neighbours are ``flags``."""
        if not 0 <= flags <= 0xFF:
            raise ValueError(f"flags must fit in eight bits, got {flags}")
        for mask, expected, tile in _MASKS:
            if flags & mask == expected:
                return tile
        raise ValueError(f"flag {flags:08b} has no mapped index")


_SOLID = frozenset(
    {BlockType.BRIGHT_GRASS, BlockType.DIRT, BlockType.FIELD, BlockType.GRASS}
)