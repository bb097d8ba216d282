"""Parsed navigation paths.

A path is split once into its segments so that every consumer (classifier,
activator, safe navigator) works from the same structure instead of
re-scanning the raw string.
"""
from __future__ import annotations

from dataclasses import dataclass, field


def _split_suffix(raw: str) -> tuple[str, str]:
    """Split ``raw`` into (path part, ``?query`` / ``#fragment`` suffix)."""
    cut = len(raw)
    for marker in ("?", "#"):
        idx = raw.find(marker)
        if idx != -1:
            cut = min(cut, idx)
    return raw[:cut], raw[cut:]


def _is_placeholder(segment: str) -> bool:
    return "[" in segment and "]" in segment


@dataclass(frozen=True)
class ParsedPath:
    """An application path broken into segments.

    Attributes:
        raw: The path exactly as received (recorded and pushed verbatim)
        segments: Non-empty ``/``-separated segments of the path part
        query: Query string and/or fragment suffix, possibly empty
        is_resolved: False when a segment is still a route template
            placeholder such as ``[id]``
    """

    raw: str
    segments: tuple[str, ...] = ()
    query: str = ""
    is_resolved: bool = field(default=True)

    @classmethod
    def parse(cls, raw: str | None) -> ParsedPath:
        text = raw or ""
        path_part, query = _split_suffix(text)
        segments = tuple(seg for seg in path_part.split("/") if seg)
        resolved = not any(_is_placeholder(seg) for seg in segments)
        return cls(raw=text, segments=segments, query=query, is_resolved=resolved)

    @property
    def prefix(self) -> str:
        """First segment, or ``""`` for the root path."""
        return self.segments[0] if self.segments else ""

    @property
    def profile_handle(self) -> str | None:
        """Handle in ``/profile/<handle>/...``, if this is a user-specific profile path."""
        if self.prefix == "profile" and len(self.segments) > 1:
            return self.segments[1]
        return None

    def foreign_profile_handle(self, username: str | None) -> str | None:
        """Return the first profile handle in this path that is not ``username``.

        Any ``profile`` segment counts, not just the leading one, so
        ``/community/7/profile/alice`` is caught as well.
        """
        for idx, seg in enumerate(self.segments[:-1]):
            if seg != "profile":
                continue
            handle = self.segments[idx + 1]
            if username is None or handle != username:
                return handle
        return None

    def __str__(self) -> str:
        return self.raw
