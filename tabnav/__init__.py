"""tabnav: per-section navigation history for tabbed clients.

Each top-level section (feed, community, map, ...) keeps its own bounded
history, so returning to a tab resumes where the user left it.
"""
from .activator import SectionActivator
from .app import SectionNavigation, create_navigation
from .history import MAX_HISTORY, HistoryStore
from .navigator import NavigationOutcome, SafeNavigator
from .paths import ParsedPath
from .router import HostRouter, MemoryRouter
from .sections import Section, classify, normalize_section, section_root
from .state import NavigationState, UserSession
from .tracker import NavigationTracker

__all__ = [
    "MAX_HISTORY",
    "HistoryStore",
    "HostRouter",
    "MemoryRouter",
    "NavigationOutcome",
    "NavigationState",
    "NavigationTracker",
    "ParsedPath",
    "SafeNavigator",
    "Section",
    "SectionActivator",
    "SectionNavigation",
    "UserSession",
    "classify",
    "create_navigation",
    "normalize_section",
    "section_root",
]
