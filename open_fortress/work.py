"""Work orders placed by the player and the tasks workers carry out for them."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum

from open_fortress.chunk_visualisation import dirty_chunks
from open_fortress.coordinates import (
    ChunkCoordinates,
    WorldCoordinates,
    world_coordinates_to_world_position,
    world_position_to_world_coordinates,
)
from open_fortress.world_map import WorldMap


class WorkOrderKind(Enum):
    """Kinds of work the player can order."""

    DIG = "dig"


@dataclass(frozen=True)
class WorkOrder:
    """A piece of work ordered by the player at a block of the world."""

    coordinates: WorldCoordinates
    kind: WorkOrderKind = WorkOrderKind.DIG

    @classmethod
    def dig(cls, world_position: tuple[float, float, float]) -> WorkOrder:
        """A digging order for the block nearest to ``world_position``."""
        return cls(world_position_to_world_coordinates(world_position), WorkOrderKind.DIG)

    @property
    def name(self) -> str:
        x, y, z = self.coordinates
        return f"WorkOrder - Dig [{x}, {y}, {z}]"

    @property
    def translation(self) -> tuple[float, float, float]:
        """World position of the ordered block, snapped to the tile grid."""
        return world_coordinates_to_world_position(self.coordinates)

    def realise(self) -> TaskQueue:
        """The tasks a worker performs to fulfil this order: walk there, then dig."""
        return TaskQueue([Task.dig(self.coordinates), Task.walk_to(self.coordinates)])


class TaskKind(Enum):
    """Concrete steps a worker can take."""

    WALK_TO = "walk_to"
    DIG = "dig"


@dataclass(frozen=True)
class Task:
    """A concrete step taken towards fulfilling a work order."""

    kind: TaskKind
    position: WorldCoordinates

    @classmethod
    def dig(cls, position: tuple[int, int, int]) -> Task:
        return cls(TaskKind.DIG, WorldCoordinates(*position))

    @classmethod
    def walk_to(cls, position: tuple[int, int, int]) -> Task:
        return cls(TaskKind.WALK_TO, WorldCoordinates(*position))


@dataclass
class TaskQueue:
    """Tasks a worker still has to do, stored last-first and taken from the end."""

    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    def next_task(self) -> Task | None:
        """Take the next task, or None once the queue is finished."""
        return self.tasks.pop() if self.tasks else None


@dataclass
class WorkOrderQueue:
    """Work orders waiting for a worker and those being worked on."""

    pending: deque[tuple[Hashable, WorkOrder]] = field(default_factory=deque)
    in_progress: deque[tuple[Hashable, WorkOrder]] = field(default_factory=deque)

    def register(self, entity: Hashable, order: WorkOrder) -> None:
        """Queue a newly placed order."""
        self.pending.append((entity, order))

    def unregister(self, order: WorkOrder) -> None:
        """Forget every queued or running order equal to ``order``."""
        self.pending = deque(item for item in self.pending if item[1] != order)
        self.in_progress = deque(item for item in self.in_progress if item[1] != order)

    def contains(self, order: WorkOrder) -> bool:
        return any(queued == order for _, queued in self.pending) or any(
            running == order for _, running in self.in_progress
        )

    def take(self) -> tuple[Hashable, WorkOrder] | None:
        """Hand the oldest pending order to a worker, marking it in progress."""
        if not self.pending:
            return None
        item = self.pending.popleft()
        self.in_progress.append(item)
        return item


def dig_step(world_map: WorldMap, task: Task, delta: float) -> list[ChunkCoordinates]:
    """Dig at the task's block for ``delta`` seconds.

    Returns the chunks to redraw once the block is destroyed, or an empty list
    while digging goes on.
    """
    if task.kind is not TaskKind.DIG:
        raise ValueError(f"not a digging task: {task}")
    if world_map.damage_block(task.position, delta):
        return dirty_chunks(task.position)
    return []


def brush_can_dig(
    world_map: WorldMap,
    queue: WorkOrderQueue,
    world_position: tuple[float, float],
    layer: int,
) -> bool:
    """Whether a dig order may be placed at the cursor's position on ``layer``.

    The block must exist and must not be ordered already.
    """
    x, y = world_position[0], world_position[1]
    coordinates = world_position_to_world_coordinates((x, y, float(layer)))
    if queue.contains(WorkOrder(coordinates, WorkOrderKind.DIG)):
        return False
    return world_map.get_block(coordinates) is not None