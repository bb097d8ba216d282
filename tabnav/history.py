"""Per-section bounded path stacks."""
from __future__ import annotations

import logging
import threading

from .sections import SectionId, section_key

logger = logging.getLogger(__name__)

MAX_HISTORY = 20


class HistoryStore:
    """One bounded stack of visited paths per section.

    Rules for every stack:
    - Push a path equal to the current top: no-op (re-render loops)
    - More than ``max_history`` entries: oldest entries are dropped first
    - Stacks are created lazily on the first visit to a section

    Reads hand out copies; the live lists never leave the store. A single
    lock guards all operations so a reader never sees a half-evicted stack.
    """

    def __init__(self, max_history: int = MAX_HISTORY):
        """Initialize an empty store.

        Args:
            max_history: Capacity of each section stack (>= 1)
        """
        if max_history < 1:
            raise ValueError(f"max_history must be >= 1, got {max_history}")
        self.max_history = max_history
        self._stacks: dict[str, list[str]] = {}
        self._lock = threading.Lock()

    def record_visit(self, section: SectionId, path: str) -> None:
        """Append ``path`` to the stack of ``section``.

        Args:
            section: Section the path was classified into
            path: Path exactly as navigated
        """
        key = section_key(section)
        with self._lock:
            stack = self._stacks.setdefault(key, [])
            if stack and stack[-1] == path:
                return
            stack.append(path)
            overflow = len(stack) - self.max_history
            if overflow > 0:
                del stack[:overflow]
                logger.debug("Evicted %d oldest entries from %s history", overflow, key)

    def last_path(self, section: SectionId) -> str | None:
        """Top of the section's stack, or None if never visited."""
        with self._lock:
            stack = self._stacks.get(section_key(section))
            return stack[-1] if stack else None

    def previous_path(self, section: SectionId) -> str | None:
        """Entry just below the top, or None with fewer than two entries."""
        with self._lock:
            stack = self._stacks.get(section_key(section))
            if stack and len(stack) > 1:
                return stack[-2]
            return None

    def rewind(self, section: SectionId) -> str | None:
        """Drop the top entry and return the new top.

        Nothing is dropped (and None is returned) when the stack has fewer
        than two entries: the first page of a section is never forgotten.
        """
        key = section_key(section)
        with self._lock:
            stack = self._stacks.get(key)
            if not stack or len(stack) < 2:
                return None
            dropped = stack.pop()
            logger.debug("Rewound %s history past %s", key, dropped)
            return stack[-1]

    def sections(self) -> list[str]:
        """Sections with a stack, in first-visit order."""
        with self._lock:
            return list(self._stacks)

    def all_histories(self) -> dict[str, list[str]]:
        """Copy of every stack, keyed by section."""
        with self._lock:
            return {key: list(stack) for key, stack in self._stacks.items()}

    def depth(self, section: SectionId) -> int:
        """Number of entries recorded for ``section``."""
        with self._lock:
            return len(self._stacks.get(section_key(section), ()))
