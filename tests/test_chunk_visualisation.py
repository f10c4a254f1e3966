import pytest

from open_fortress.block_type import BlockType
from open_fortress.chunk import CHUNK_SIZE
from open_fortress.chunk_visualisation import (
    block_flags,
    chunks_to_delete,
    chunks_to_request,
    dirty_chunks,
    visible_chunk_ranges,
)
from open_fortress.coordinates import TILE_SIZE, ChunkCoordinates, same_layer_neighbors
from open_fortress.world_map import WorldMap


def test_flags_of_ungenerated_surroundings_map_to_full_tile():
    flags = block_flags(WorldMap(), (0, 0, 0))
    assert BlockType.DIRT.index(flags) == 47


def test_flags_follow_neighbour_solidness():
    world_map = WorldMap()
    world_map.get_chunk((0, 0, 0))
    coordinates = (5, 5, 0)
    flags = block_flags(world_map, coordinates)
    for bit, (neighbor, _) in enumerate(same_layer_neighbors(coordinates)):
        assert bool(flags >> bit & 1) == world_map.solidness(neighbor)
    assert 0 <= flags <= 0xFF


@pytest.mark.parametrize(
    "camera, area",
    [
        ((0.0, 0.0), ((-640.0, -360.0), (640.0, 360.0))),
        ((1000.0, -300.0), ((-100.0, -50.0), (100.0, 50.0))),
    ],
)
def test_visible_ranges_cover_area(camera, area):
    camera_x, camera_y = camera
    (min_x, min_y), (max_x, max_y) = area
    x_range, y_range, z_range = visible_chunk_ranges(camera_x, camera_y, 3, area)
    width = CHUNK_SIZE[0] * TILE_SIZE[0]
    height = CHUNK_SIZE[1] * TILE_SIZE[1]
    assert x_range.start * width <= camera_x + min_x < (x_range.start + 1) * width
    assert (x_range.stop - 1) * width < camera_x + max_x <= x_range.stop * width
    assert y_range.start * height <= camera_y + min_y < (y_range.start + 1) * height
    assert (y_range.stop - 1) * height < camera_y + max_y <= y_range.stop * height
    assert list(z_range) == [3]


def test_interior_block_dirties_only_its_chunk():
    assert dirty_chunks((5, 5, 0)) == [ChunkCoordinates(0, 0, 0)]


def test_edge_block_dirties_neighbouring_chunks():
    result = dirty_chunks((0, 5, 0))
    assert result[0] == ChunkCoordinates(0, 0, 0)
    assert result[1:] == [
        ChunkCoordinates(*n) for n, _ in same_layer_neighbors(ChunkCoordinates(0, 0, 0))
    ]


def test_negative_edge_block_dirties_neighbours_of_its_chunk():
    result = dirty_chunks((-1, 5, 0))
    assert result[0] == ChunkCoordinates(-1, 0, 0)
    assert len(result) == 9


def test_request_skips_existing_chunks():
    ranges = (range(0, 2), range(0, 2), range(0, 1))
    existing = [ChunkCoordinates(0, 0, 0), ChunkCoordinates(5, 5, 0)]
    requested = chunks_to_request(existing, ranges)
    assert ChunkCoordinates(0, 0, 0) not in requested
    assert set(requested) == {
        ChunkCoordinates(0, 1, 0),
        ChunkCoordinates(1, 0, 0),
        ChunkCoordinates(1, 1, 0),
    }
    assert requested == sorted(requested)


def test_delete_returns_chunks_outside_ranges():
    ranges = (range(0, 2), range(0, 2), range(0, 1))
    existing = [
        ChunkCoordinates(0, 0, 0),
        ChunkCoordinates(2, 0, 0),
        ChunkCoordinates(1, 1, 1),
    ]
    assert chunks_to_delete(existing, ranges) == [
        ChunkCoordinates(2, 0, 0),
        ChunkCoordinates(1, 1, 1),
    ]


def test_requested_chunks_are_never_deleted():
    ranges = visible_chunk_ranges(0.0, 0.0, 0, ((-700.0, -400.0), (700.0, 400.0)))
    requested = chunks_to_request([], ranges)
    assert requested
    assert chunks_to_delete(requested, ranges) == []