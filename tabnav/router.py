"""Host router boundary and an in-process router implementation.

The navigation components never own the host's history. They observe
completed navigations, ask the host to push/replace, and may veto a
back/forward move through the before-pop-state hook.
"""
from __future__ import annotations

import logging
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

RouteHandler = Callable[[str], None]
ReadyHandler = Callable[[bool], None]
# Receives the destination path and the step (-1 back, +1 forward);
# returning False cancels the move.
PopStateHandler = Callable[[str, int], bool]


class HostRouter(Protocol):
    """What the navigation components need from the host router."""

    @property
    def is_ready(self) -> bool: ...

    @property
    def current_path(self) -> str: ...

    def push(self, path: str) -> None: ...

    def replace(self, path: str) -> None: ...

    def on_route_change_complete(self, handler: RouteHandler) -> None: ...

    def off_route_change_complete(self, handler: RouteHandler) -> None: ...

    def on_ready_change(self, handler: ReadyHandler) -> None: ...

    def off_ready_change(self, handler: ReadyHandler) -> None: ...

    def set_before_pop_state(self, handler: PopStateHandler | None) -> None: ...


class MemoryRouter:
    """A browser-like router with one global, linear history.

    - ``push`` drops any forward entries and appends
    - ``replace`` overwrites the current entry
    - ``back``/``forward`` move the cursor unless the pop-state hook vetoes it

    Every completed move notifies route-change handlers synchronously, in
    registration order.
    """

    def __init__(self, initial_path: str = "/", ready: bool = True):
        """Initialize with a single history entry.

        Args:
            initial_path: Path of the first entry
            ready: Whether the router starts out initialized
        """
        self.entries: list[str] = [initial_path]
        self.index = 0
        self._ready = ready
        self._route_handlers: list[RouteHandler] = []
        self._ready_handlers: list[ReadyHandler] = []
        self._before_pop_state: PopStateHandler | None = None
        self.pushed: list[str] = []

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def current_path(self) -> str:
        return self.entries[self.index]

    def set_ready(self, ready: bool) -> None:
        """Change readiness and notify ready-change handlers on a real change."""
        if ready == self._ready:
            return
        self._ready = ready
        logger.debug("Router readiness -> %s", ready)
        for handler in list(self._ready_handlers):
            handler(ready)

    def push(self, path: str) -> None:
        del self.entries[self.index + 1:]
        self.entries.append(path)
        self.index = len(self.entries) - 1
        self.pushed.append(path)
        self._emit(path)

    def replace(self, path: str) -> None:
        self.entries[self.index] = path
        self._emit(path)

    def can_go_back(self) -> bool:
        return self.index > 0

    def can_go_forward(self) -> bool:
        return self.index < len(self.entries) - 1

    def back(self) -> bool:
        """Move one entry back. Returns True if the host performed the move."""
        if not self.can_go_back():
            return False
        return self._pop_to(self.index - 1)

    def forward(self) -> bool:
        """Move one entry forward. Returns True if the host performed the move."""
        if not self.can_go_forward():
            return False
        return self._pop_to(self.index + 1)

    def _pop_to(self, target: int) -> bool:
        destination = self.entries[target]
        delta = target - self.index
        if self._before_pop_state is not None and not self._before_pop_state(destination, delta):
            logger.debug("Pop to %s cancelled by before-pop-state hook", destination)
            return False
        self.index = target
        self._emit(destination)
        return True

    def _emit(self, path: str) -> None:
        for handler in list(self._route_handlers):
            handler(path)

    def on_route_change_complete(self, handler: RouteHandler) -> None:
        self._route_handlers.append(handler)

    def off_route_change_complete(self, handler: RouteHandler) -> None:
        if handler in self._route_handlers:
            self._route_handlers.remove(handler)

    def on_ready_change(self, handler: ReadyHandler) -> None:
        self._ready_handlers.append(handler)

    def off_ready_change(self, handler: ReadyHandler) -> None:
        if handler in self._ready_handlers:
            self._ready_handlers.remove(handler)

    def set_before_pop_state(self, handler: PopStateHandler | None) -> None:
        self._before_pop_state = handler
