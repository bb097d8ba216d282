"""Decides where a tab click (or in-app Back) should take the user."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .paths import ParsedPath
from .sections import Section, SectionId, classify, normalize_section, section_root

if TYPE_CHECKING:
    from .state import NavigationState

logger = logging.getLogger(__name__)

OWN_PROFILE_PATH = "/profile"
DEFAULT_BACK_FALLBACK = "/community"


class SectionActivator:
    """Computes destination paths from the recorded section histories.

    Read-only with respect to the history store; it returns a path and leaves
    the actual navigation to ``SafeNavigator``.
    """

    def __init__(self, state: NavigationState):
        self.state = state

    def activate(self, target_section: SectionId, requester_username: str | None) -> str:
        """Path to open when the user clicks the tab for ``target_section``.

        - Profile tab: always the requester's own profile root
        - The tab that is already active: the section root (reset to top)
        - Otherwise: the last path visited in that section, unless it points at
          another user's profile, in which case the section root
        """
        if isinstance(target_section, str):
            target_section = target_section.strip()
        section = normalize_section(target_section)
        root = section_root(section)

        if section == Section.PROFILE:
            return OWN_PROFILE_PATH

        if section == self.state.current_section:
            return root

        last = self.state.history.last_path(section)
        if last is None:
            return root

        handle = ParsedPath.parse(last).foreign_profile_handle(requester_username)
        if handle is not None:
            logger.info(
                "Discarding stale %s entry %s (profile of %s, requester %s)",
                section,
                last,
                handle,
                requester_username,
            )
            return root
        return last

    def back_path(
        self,
        current_path: str,
        requester_username: str | None,
        fallback: str = DEFAULT_BACK_FALLBACK,
    ) -> str:
        """Path an in-app Back button should open from ``current_path``.

        The previous entry of the current section if there is one, else the
        section root, else (already at the root) ``fallback``.
        """
        section = classify(current_path, requester_username)
        previous = self.state.history.previous_path(section)
        if previous is not None:
            return previous

        # A single segment (or none) is the section root itself.
        if len(ParsedPath.parse(current_path).segments) <= 1:
            return fallback
        return section_root(section)
