"""The game camera: zoom, layer scrolling and panning."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CameraSettings:
    """How fast the camera zooms and pans."""

    zoom_rate: float = 0.05
    pan_rate: float = 10.0


@dataclass
class Camera:
    """Orthographic camera state: projection scale, visible layer and position."""

    settings: CameraSettings = field(default_factory=CameraSettings)
    scale: float = 1.0
    layer: int = 0
    translation: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def zoom(self, delta: float) -> None:
        """Zoom by a scroll amount; positive values zoom in."""
        self.scale *= 1.0 - delta * self.settings.zoom_rate

    def scroll(self, up: bool, down: bool) -> None:
        """Move one layer up or down for each pressed control."""
        self.layer += int(up) - int(down)

    def pan(self, axis: tuple[float, float]) -> None:
        """Move at the pan rate in the direction of ``axis``; a zero axis does nothing."""
        ax, ay = axis
        length = math.hypot(ax, ay)
        if length == 0.0:
            return
        step = self.settings.pan_rate / length
        x, y, z = self.translation
        self.translation = (x + ax * step, y + ay * step, z)