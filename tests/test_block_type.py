import pytest

from open_fortress.block_type import BlockType


def test_index_mapping():
    for flags in range(255):
        assert 0 <= BlockType.DIRT.index(flags) <= 47


@pytest.mark.parametrize(
    "flags,expected",
    [
        (0b00000000, 0),
        (0b00000010, 1),
        (0b00010000, 5),
        (0b00001000, 2),
        (0b01000000, 13),
        (0b00011000, 8),
        (0b01000010, 14),
        (0b01011010, 23),
        (0b11111110, 44),
        (0b01111111, 34),
        (0b11111111, 47),
    ],
)
def test_known_indices(flags, expected):
    assert BlockType.DIRT.index(flags) == expected


def test_corners_alone_do_not_matter():
    assert BlockType.GRASS.index(0b10100101) == BlockType.GRASS.index(0)


def test_index_independent_of_block_kind():
    assert [BlockType.WATER.index(f) for f in range(256)] == [
        BlockType.DIRT.index(f) for f in range(256)
    ]


@pytest.mark.parametrize("flags", [-1, 256])
def test_out_of_range_flags_rejected(flags):
    with pytest.raises(ValueError):
        BlockType.DIRT.index(flags)


@pytest.mark.parametrize(
    "block,solid",
    [
        (BlockType.GRASS, True),
        (BlockType.BRIGHT_GRASS, True),
        (BlockType.DIRT, True),
        (BlockType.FIELD, True),
        (BlockType.WATER, False),
        (BlockType.LAVA, False),
        (BlockType.NONE, False),
    ],
)
def test_is_solid(block, solid):
    assert block.is_solid() is solid