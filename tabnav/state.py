"""Session-scoped navigation state and the signed-in user."""
from __future__ import annotations

from dataclasses import dataclass, field

from .history import HistoryStore
from .sections import SectionId


@dataclass
class NavigationState:
    """Navigation state for one running client session.

    Create exactly one per session (``create_navigation`` does this) and pass
    it to the tracker and activator. Nothing is persisted: a reload starts
    from an empty instance.
    """

    history: HistoryStore = field(default_factory=HistoryStore)

    # Section of the last recorded navigation; None until the first one
    current_section: SectionId | None = None

    def is_tab_switch(self, section: SectionId) -> bool:
        """True if navigating into ``section`` leaves the active section."""
        return section != self.current_section


@dataclass
class UserSession:
    """Identity collaborator: who is signed in right now.

    The navigation components read ``username`` on every call and never keep
    a copy, so a logout/login between calls is always honoured.
    """

    username: str | None = None

    def login(self, username: str) -> None:
        self.username = username.strip() or None

    def logout(self) -> None:
        self.username = None

    def current_username(self) -> str | None:
        return self.username
