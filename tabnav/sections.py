"""Section identifiers and the path -> section classifier."""
from __future__ import annotations

from enum import Enum
from typing import Union

from .paths import ParsedPath


class Section(str, Enum):
    """Top-level areas of the app, each with its own browsing history."""

    FEED = "feed"
    COMMUNITY = "community"
    MAP = "map"
    PROFILE = "profile"
    POLITICIANS = "politicians"
    SEARCH = "search"
    MESSAGES = "messages"

    def __str__(self) -> str:
        return self.value


# Unknown prefixes are kept as plain strings (ad hoc sections).
SectionId = Union[Section, str]


def normalize_section(name: SectionId | None) -> SectionId:
    """Map a tab/prefix name to its canonical section.

    ``""`` (the root path) is the feed; known names become ``Section``
    members; anything else passes through unchanged.
    """
    if isinstance(name, Section):
        return name
    key = name or ""
    if not key:
        return Section.FEED
    try:
        return Section(key)
    except ValueError:
        return key


def section_key(section: SectionId | None) -> str:
    """Plain string key for ``section`` (used as the history mapping key)."""
    normalized = normalize_section(section)
    if isinstance(normalized, Section):
        return normalized.value
    return normalized


def section_root(section: SectionId | None) -> str:
    """Root path of a section, e.g. ``/community``."""
    return f"/{section_key(section)}"


def classify(path: str | ParsedPath, current_username: str | None) -> SectionId:
    """Return the section that ``path`` belongs to for ``current_username``.

    Viewing another user's profile (``/profile/<other>``) is community
    browsing, not the viewer's own profile. With no authenticated user every
    user-specific profile path counts as someone else's.

    Pure: the result depends only on the arguments.
    """
    parsed = path if isinstance(path, ParsedPath) else ParsedPath.parse(path)

    handle = parsed.profile_handle
    if handle is not None and (current_username is None or handle != current_username):
        return Section.COMMUNITY

    return normalize_section(parsed.prefix)
