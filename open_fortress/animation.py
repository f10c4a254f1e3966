"""Sprite frame animation driven by a repeating timer."""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Frames(Protocol):
    """Something that names an inclusive range of atlas frames."""

    def frames(self) -> tuple[int, int]: ...


class AnimationConfig:
    """Current frame of a sprite animation and the timer that advances it."""

    def __init__(self, fps: int = 12) -> None:
        if not 1 <= fps <= 255:
            raise ValueError(f"fps must be between 1 and 255, got {fps}")
        self.fps = fps
        self.current_frame = 0
        self.duration = 1.0 / fps
        self.elapsed = 0.0

    def _timer_finished(self, delta: float) -> bool:
        self.elapsed += delta
        if self.elapsed >= self.duration:
            self.elapsed %= self.duration
            return True
        return False

    def tick(self, delta: float, frames: tuple[int, int]) -> int:
        """Advance by ``delta`` seconds within the inclusive frame range; return the frame."""
        if self._timer_finished(delta):
            self.current_frame += 1
        start, end = frames
        if not start <= self.current_frame <= end:
            self.current_frame = start
        return self.current_frame


class DwarfAnimationState(Enum):
    """Animations of a dwarf sprite."""

    IDLING = "idling"
    WALKING = "walking"

    @classmethod
    def default(cls) -> DwarfAnimationState:
        return cls.IDLING

    def frames(self) -> tuple[int, int]:
        if self is DwarfAnimationState.IDLING:
            return (0, 4)
        return (8, 15)