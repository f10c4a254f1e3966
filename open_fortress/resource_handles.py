"""Tracking of assets that become resources once fully loaded."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable

InsertFn = Callable[[Hashable], None]


class ResourceHandles:
    """Queue of handles waiting to load; each is inserted once it is ready."""

    def __init__(self) -> None:
        self.waiting: deque[tuple[Hashable, InsertFn]] = deque()
        self.finished: list[Hashable] = []

    def add(self, handle: Hashable, insert: InsertFn) -> None:
        """Queue ``handle``; ``insert`` is called with it once it has loaded."""
        self.waiting.append((handle, insert))

    def is_all_done(self) -> bool:
        """True once every requested asset has loaded and been inserted."""
        return not self.waiting

    def process(self, is_loaded: Callable[[Hashable], bool]) -> list[Hashable]:
        """Cycle once through the waiting handles; return those finished this pass."""
        done: list[Hashable] = []
        for _ in range(len(self.waiting)):
            handle, insert = self.waiting.popleft()
            if is_loaded(handle):
                insert(handle)
                self.finished.append(handle)
                done.append(handle)
            else:
                self.waiting.append((handle, insert))
        return done