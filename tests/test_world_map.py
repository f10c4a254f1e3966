from open_fortress.block_type import BlockType
from open_fortress.chunk import to_index
from open_fortress.coordinates import ChunkCoordinates, WorldCoordinates
from open_fortress.world_map import WorldMap


def test_unloaded_block_is_missing_and_solid():
    world = WorldMap()
    coords = WorldCoordinates(3, 4, 0)
    assert world.get_block(coords) is None
    assert world.solidness(coords) is True


def test_get_chunk_is_cached():
    world = WorldMap()
    first = world.get_chunk((1, 2, 0))
    assert world.get_chunk(ChunkCoordinates(1, 2, 0)) is first
    assert list(world.chunks) == [ChunkCoordinates(1, 2, 0)]


def test_get_block_matches_chunk_contents():
    world = WorldMap()
    chunk = world.get_chunk((0, 0, -1))
    for x in range(16):
        for y in range(16):
            stored = chunk.blocks[to_index((x, y, 0))]
            expected = None if stored is BlockType.NONE else stored
            assert world.get_block(WorldCoordinates(x, y, -1)) == expected


def test_solidness_matches_block_kind():
    world = WorldMap()
    chunk = world.get_chunk((-1, 0, 0))
    for x in range(16):
        stored = chunk.blocks[to_index((x, 5, 0))]
        assert world.solidness(WorldCoordinates(-16 + x, 5, 0)) == stored.is_solid()


def test_deep_block_is_dirt():
    world = WorldMap()
    world.get_chunk((0, 0, -20000))
    assert world.get_block(WorldCoordinates(7, 7, -20000)) is BlockType.DIRT


def test_first_damage_only_registers_block():
    world = WorldMap()
    coords = WorldCoordinates(2, 2, -20000)
    assert world.damage_block(coords, 5.0) is False
    assert world.block_states[coords] == 1.0


def test_damage_destroys_block_once_health_below_zero():
    world = WorldMap()
    coords = WorldCoordinates(2, 2, -20000)
    world.get_chunk((0, 0, -20000))
    assert world.damage_block(coords, 0.5) is False
    assert world.damage_block(coords, 0.5) is False
    assert world.get_block(coords) is BlockType.DIRT
    assert world.damage_block(coords, 0.6) is True
    assert world.get_block(coords) is None
    assert world.solidness(coords) is False


def test_destroying_block_generates_its_chunk():
    world = WorldMap()
    coords = WorldCoordinates(-5, 9, 3)
    world.damage_block(coords, 0.0)
    assert world.damage_block(coords, 2.0) is True
    assert ChunkCoordinates(-1, 0, 3) in world.chunks
    assert world.get_block(coords) is None


def test_entity_is_kept():
    world = WorldMap(entity="world-map")
    assert world.entity == "world-map"