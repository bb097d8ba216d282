"""Single choke point for section-initiated navigations."""
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from .paths import ParsedPath

if TYPE_CHECKING:
    from .router import HostRouter

logger = logging.getLogger(__name__)


class NavigationOutcome(str, Enum):
    NAVIGATED = "navigated"
    REJECTED_UNRESOLVED = "rejected:unresolved-template"

    def __str__(self) -> str:
        return self.value


class SafeNavigator:
    """Hands paths to the host router once they are known to be concrete.

    A path that still carries a route template placeholder (``/community/[id]``)
    is a caller bug. It is logged and dropped so the host never navigates to
    a literal, broken URL.
    """

    def __init__(self, router: HostRouter):
        self.router = router

    def safe_navigate(self, path: str, replace: bool = False) -> NavigationOutcome:
        """Navigate to ``path`` unless it is an unresolved template.

        Args:
            path: Destination path
            replace: Overwrite the current host history entry instead of pushing

        Returns:
            The outcome; the host router is only called on ``NAVIGATED``
        """
        parsed = ParsedPath.parse(path)
        if not parsed.is_resolved:
            logger.warning("Refusing to navigate to unresolved template path %r", path)
            return NavigationOutcome.REJECTED_UNRESOLVED

        if replace:
            self.router.replace(parsed.raw)
        else:
            self.router.push(parsed.raw)
        return NavigationOutcome.NAVIGATED
