"""A path of world positions walked one segment per second."""

from __future__ import annotations

Vec3 = tuple[float, float, float]


class Path:
    """Positions to move through, with progress along the current segment."""

    def __init__(self, points: list[Vec3]) -> None:
        self.points = list(points)
        self.current_index = 0
        self.current_t = 0.0

    def tick(self, delta: float) -> None:
        """Advance by ``delta`` seconds; passing one second moves to the next segment."""
        self.current_t += delta
        if self.current_t > 1.0:
            self.current_index += 1
            self.current_t = 0.0

    def complete(self) -> bool:
        return self.current_index >= len(self.points)

    def current_position(self) -> Vec3:
        """Position between the current and the next point; the last point at the end."""
        if not self.points:
            raise ValueError("path has no points")
        if self.current_index + 1 >= len(self.points):
            return self.points[-1]
        current = self.points[self.current_index]
        following = self.points[self.current_index + 1]
        t = self.current_t
        return tuple(a + (b - a) * t for a, b in zip(current, following))