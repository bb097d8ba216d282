"""Records completed navigations into per-section histories."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from .navigator import NavigationOutcome, SafeNavigator
from .sections import SectionId, classify

if TYPE_CHECKING:
    from .router import HostRouter
    from .state import NavigationState

logger = logging.getLogger(__name__)

UsernameSource = Callable[[], "str | None"]


class NavigationTracker:
    """Listens to the host router and keeps ``NavigationState`` current.

    Only this class writes to the history store.

    Lifecycle:
    - ``attach()`` subscribes to the router and records the current path
    - every completed navigation is classified and appended to its section
    - a host back move inside the active section unwinds that section
    - events that arrive before the router is ready are dropped
    - when the router becomes ready again, the current path is re-recorded
    - ``detach()`` removes every subscription
    """

    def __init__(
        self,
        state: NavigationState,
        router: HostRouter,
        username: UsernameSource,
        navigator: SafeNavigator | None = None,
    ):
        """Initialize tracker with its collaborators.

        Args:
            state: Session navigation state (written by this tracker only)
            router: Host router to observe
            username: Returns the signed-in username; called on every event
            navigator: Used by the back/forward guard to redirect within a
                section. Without it the guard is not installed.
        """
        self.state = state
        self.router = router
        self.username = username
        self.navigator = navigator
        self.attached = False
        # Destination of a host back move inside the active section
        self._pending_back: str | None = None

    def attach(self) -> None:
        if self.attached:
            return
        self.router.on_route_change_complete(self._handle_route_change)
        self.router.on_ready_change(self._handle_ready_change)
        if self.navigator is not None:
            self.router.set_before_pop_state(self.before_pop_state)
        self.attached = True
        self.record_current()

    def detach(self) -> None:
        if not self.attached:
            return
        self.router.off_route_change_complete(self._handle_route_change)
        self.router.off_ready_change(self._handle_ready_change)
        if self.navigator is not None:
            self.router.set_before_pop_state(None)
        self.attached = False

    def record_current(self) -> None:
        """Record the router's current path (startup / re-initialization)."""
        self.on_navigation_completed(self.router.current_path, self.username())

    def on_navigation_completed(self, path: str, current_username: str | None) -> None:
        """Classify ``path`` and append it to its section's history.

        Args:
            path: Path the host router just finished navigating to
            current_username: Signed-in user at the time of the event
        """
        if not self.router.is_ready:
            logger.debug("Router not ready; ignoring navigation to %s", path)
            return

        pending, self._pending_back = self._pending_back, None
        section = classify(path, current_username)
        history = self.state.history

        same_section = not self.state.is_tab_switch(section)
        if pending == path and same_section and history.previous_path(section) == path:
            # Host back inside the section: unwind instead of growing the stack.
            history.rewind(section)
            logger.debug("Back to %s within %s", path, section)
            return

        if same_section:
            history.record_visit(section, path)
        else:
            # The previous section's stack is left exactly as it was.
            logger.debug("Tab switch %s -> %s at %s", self.state.current_section, section, path)
            history.record_visit(section, path)
            self.state.current_section = section
        logger.debug("Recorded %s in %s history", path, section)

    def rewind(self, section: SectionId) -> str | None:
        """Drop the top of ``section``'s history; returns the new top."""
        return self.state.history.rewind(section)

    def before_pop_state(self, destination: str, delta: int = -1) -> bool:
        """Keep host back/forward inside the active section.

        If the move would leave the active section and that section still has
        somewhere to go back to, step back inside the section instead and
        cancel the host's own move.

        Args:
            destination: Path the host is about to move to
            delta: -1 for a back move, +1 for a forward move

        Returns:
            True to let the host perform the move, False to cancel it
        """
        current = self.state.current_section
        if current is None or self.navigator is None:
            return True

        target = classify(destination, self.username())
        if target == current:
            # Forward inside the section is an ordinary visit.
            if delta < 0:
                self._pending_back = destination
            return True

        history = self.state.history
        top = history.last_path(current)
        previous = self.rewind(current)
        if previous is None:
            return True

        logger.debug(
            "Back/forward to %s would leave %s; staying in section at %s",
            destination,
            current,
            previous,
        )
        outcome = self.navigator.safe_navigate(previous, replace=True)
        if outcome is not NavigationOutcome.NAVIGATED:
            # Nothing moved; put the dropped entry back and let the host go.
            history.record_visit(current, top)
            return True
        return False

    def _handle_route_change(self, path: str) -> None:
        self.on_navigation_completed(path, self.username())

    def _handle_ready_change(self, ready: bool) -> None:
        if ready:
            self.record_current()
