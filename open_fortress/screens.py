"""Application states and the splash and loading screen transitions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class AppState(Enum):
    """Top-level state of the application; the game starts at the splash screen."""

    SPLASHSCREEN = "splashscreen"
    LOADING = "loading"
    MAIN_MENU = "main_menu"
    MAIN_GAME = "main_game"

    @classmethod
    def default(cls) -> AppState:
        return cls.SPLASHSCREEN


@dataclass
class ImageNodeFade:
    """Fade-in, hold and fade-out of an image over a fixed duration (seconds)."""

    total_duration: float = 1.8
    fade_duration: float = 0.6
    t: float = 0.0

    def alpha(self) -> float:
        """Opacity following a trapezoid: ramps up, holds at 1.0, ramps down."""
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def elapsed(self) -> bool:
        return self.t >= self.total_duration

    def tick(self, delta: float) -> None:
        """Advance the fade by ``delta`` seconds."""
        self.t += delta


def splash_next_state(fades: Iterable[ImageNodeFade]) -> AppState | None:
    """Move on to loading once every splash fade has elapsed."""
    if all(fade.elapsed() for fade in fades):
        return AppState.LOADING
    return None


def loading_next_state(all_done: bool) -> AppState | None:
    """Move on to the main menu once all assets are loaded."""
    return AppState.MAIN_MENU if all_done else None