# open_fortress

This is the simulation core of a small colony-building game. It covers a
procedurally generated world that is split into chunks, digging through
blocks, step-by-step A* pathfinding, a shared queue of work orders, plant
growth, sprite frame stepping and the screen-state transitions. Every part is
a plain Python object. You drive them from your own loop and pass in the
elapsed time yourself.

The package needs no libraries outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `open_fortress.coordinates` holds the named tuples `WorldCoordinates`,
  `ChunkCoordinates` and `BlockCoordinates`. `BlockCoordinates.of` rejects
  negative components.
  - `same_layer_neighbors(point)` returns the 8 neighbours with their squared
    cost, in the order NW, N, NE, W, E, SW, S, SE.
  - `all_neighbors(point)` returns all 26 neighbours: the layer above, then the
    same layer, then the layer below.
  - `world_position_to_world_coordinates` and
    `world_coordinates_to_world_position` convert using `TILE_SIZE`, which is
    32×32. Rounding is half away from zero.
- `open_fortress.noise`: `OpenSimplex(seed)` is seeded 2D gradient noise.
  `get(x, y)` returns a value of roughly -1 to 1.
- `open_fortress.block_type` defines the `BlockType` enum.
  - `is_solid()` is true for grass, bright grass, dirt and field.
  - `index(flags)` maps an 8-bit neighbour mask to a tileset frame. It raises
    `ValueError` for values outside 0–255.
- `open_fortress.chunk` holds `CHUNK_SIZE`, which is 16×16×1.
  - `Chunk.generate(coordinates, noise)` fills a chunk from the noise height.
    Blocks below the height are dirt. A block exactly at a positive height is
    bright grass. Blocks above the height but below zero are water. Everything
    else is empty.
  - `Chunk.remove_block(block)` clears one block.
  - The helpers are `to_index`, `to_world_coordinates` and
    `to_chunk_and_block`.
- `open_fortress.world_map`: `WorldMap` generates chunks on first use through
  `get_chunk`.
  - `get_block` returns `None` for empty cells and for chunks not yet
    generated.
  - `solidness` treats cells of ungenerated chunks as solid.
  - `damage_block(coordinates, damage)` registers a block at health 1.0 on its
    first call. Later calls subtract `damage`. It returns `True` once health
    drops below zero and the block is removed.
- `open_fortress.chunk_visualisation`:
  - `block_flags` builds a neighbour mask from the solidness of the
    neighbouring cells.
  - `visible_chunk_ranges` turns a camera position, layer and visible area
    into x, y and z chunk ranges.
  - `chunks_to_request` and `chunks_to_delete` compare the shown chunks with
    those ranges.
  - `dirty_chunks` lists the chunks to redraw after a block changes. For a
    block on a chunk edge this includes the 8 surrounding chunks.
- `open_fortress.camera`:
  - `Camera` has `zoom(delta)`, `scroll(up, down)` to change the visible
    layer, and `pan(axis)`, which moves at the pan rate along the normalised
    axis.
  - `CameraSettings` holds `zoom_rate`, which defaults to 0.05, and
    `pan_rate`, which defaults to 10.
- `open_fortress.path`: `Path(points)` moves one segment per second of
  `tick(delta)`. It has `complete()` and `current_position()`, which
  interpolates linearly.
- `open_fortress.pathfinding`: `Pathfinder(start, target)` expands one
  coordinate per `calculate_step(world_map)`.
  - While the search is still running, it returns `None`.
  - When it reaches the target, it returns a `Path`.
  - If nothing is left to explore, it raises `PathUnreachable`.
- `open_fortress.work`:
  - `WorkOrder.dig(world_position)` creates an order at the nearest block.
    `realise()` turns it into a `TaskQueue`, which walks there and then digs.
  - `TaskQueue.next_task()` takes tasks from the end of the queue.
  - `WorkOrderQueue` keeps pending and in-progress orders. Its methods are
    `register`, `unregister`, `contains` and `take`.
  - `dig_step(world_map, task, delta)` damages the task's block. When the
    block breaks, it returns the chunks to redraw.
  - `brush_can_dig` tells whether a dig order may be placed at a cursor
    position.
- `open_fortress.plants`:
  - `PlantData.load_json(text)` reads a document of the form
    `{"plants": [{"name", "growth_per_tick_in_grams",
    "growth_stages_biomass_limits_in_grams"}]}` and raises `ValueError` on
    malformed input.
  - `new_carrot()` returns a `Plant` of 10 g.
  - `growth_ticks` counts the ticks due in a frame. One tick falls on every
    elapsed whole second divisible by five, plus one for each full five
    seconds of the frame.
  - `grow_plants` adds each plant's growth rate, capped at its last growth
    stage.
- `open_fortress.animation`:
  - `AnimationConfig(fps=12)` advances a frame when its timer fires.
    `tick(delta, frames)` keeps the frame inside an inclusive range.
  - `DwarfAnimationState` gives the dwarf frame ranges: idling is 0–4 and
    walking is 8–15.
- `open_fortress.screens`:
  - `AppState` starts at the splash screen.
  - `ImageNodeFade` fades an image in, holds it, and fades it out over 1.8 s,
    with 0.6 s fades.
  - `splash_next_state` and `loading_next_state` return the state to move to,
    or `None`.
- `open_fortress.resource_handles`: `ResourceHandles` queues handles with an
  insert callback. `process(is_loaded)` cycles through the queue once and
  inserts the handles that are ready. `is_all_done()` reports when nothing is
  waiting.

## Example

```python
from open_fortress.chunk import to_chunk_and_block
from open_fortress.coordinates import WorldCoordinates
from open_fortress.world_map import WorldMap

world = WorldMap()
target = WorldCoordinates(3, 4, 0)
chunk, _ = to_chunk_and_block(target)
world.get_chunk(chunk)            # generate the chunk
print(world.get_block(target))    # a BlockType, or None if the cell is empty
while not world.damage_block(target, 0.25):
    pass                          # keep digging until destroyed
print(world.get_block(target))    # None
```

## What it does not do

- There is no rendering, window, input handling, audio or menu. The package
  has no command to start a game.
- It does not load assets from disk. `PlantData.load_json` takes the document
  text, and `ResourceHandles` only tracks handles you give it, with a loading
  check that you supply.
- The pathfinder does not check whether blocks can be passed, and its
  heuristic does not consult the map. It searches freely through world
  coordinates.