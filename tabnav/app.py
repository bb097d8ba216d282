"""Bootstrap and UI-facing entry points for section navigation."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .activator import SectionActivator
from .history import HistoryStore
from .navigator import NavigationOutcome, SafeNavigator
from .sections import SectionId, classify
from .settings import Settings, load_settings
from .state import NavigationState, UserSession
from .tracker import NavigationTracker

if TYPE_CHECKING:
    from .router import HostRouter

logger = logging.getLogger(__name__)


class SectionNavigation:
    """Wires tracker, activator and safe navigator for one session.

    Tab controls call ``handle_section_click``; Back buttons call
    ``go_back``. Both are no-ops until the host router is ready.
    """

    def __init__(
        self,
        router: HostRouter,
        session: UserSession,
        settings: Settings,
    ):
        self.router = router
        self.session = session
        self.settings = settings
        self.state = NavigationState(history=HistoryStore(settings.TABNAV_MAX_HISTORY))
        self.navigator = SafeNavigator(router)
        self.activator = SectionActivator(self.state)
        self.tracker = NavigationTracker(
            self.state,
            router,
            session.current_username,
            navigator=self.navigator,
        )

    @property
    def current_section(self) -> SectionId | None:
        return self.state.current_section

    def histories(self) -> dict[str, list[str]]:
        return self.state.history.all_histories()

    def handle_section_click(self, section: SectionId) -> NavigationOutcome | None:
        """Open ``section`` where the user left it.

        Returns:
            The navigation outcome, or None if the router is not ready yet
        """
        if not self.router.is_ready:
            logger.debug("Router not ready; ignoring click on %s", section)
            return None
        path = self.activator.activate(section, self.session.current_username())
        return self.navigator.safe_navigate(path)

    def go_back(self, fallback: str | None = None) -> NavigationOutcome | None:
        """Step back within the current section.

        Rewinds the section history when it has an earlier entry; otherwise
        falls back to the section root, or ``fallback`` when already there.
        """
        if not self.router.is_ready:
            return None

        username = self.session.current_username()
        current_path = self.router.current_path
        section = classify(current_path, username)

        previous = self.tracker.rewind(section)
        if previous is not None:
            return self.navigator.safe_navigate(previous)

        target = self.activator.back_path(
            current_path,
            username,
            fallback=fallback or self.settings.TABNAV_BACK_FALLBACK,
        )
        return self.navigator.safe_navigate(target)

    def close(self) -> None:
        self.tracker.detach()


def create_navigation(
    router: HostRouter,
    session: UserSession | None = None,
    settings: Settings | None = None,
) -> SectionNavigation:
    """Create the session's navigation components and start tracking.

    Call once at application startup; the returned object owns the session's
    only ``NavigationState``.
    """
    nav = SectionNavigation(
        router,
        session if session is not None else UserSession(),
        settings if settings is not None else load_settings(),
    )
    nav.tracker.attach()
    return nav
