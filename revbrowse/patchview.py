"""Decisions of the patch view: filter cycling, diff targets and tab captions."""

from __future__ import annotations

import enum
from collections.abc import Callable

from .config import ZERO_SHA
from .patch import PatchFilter


class DiffTo(enum.IntEnum):
    """What the current revision is diffed against."""

    PARENT = 0
    HEAD = 1
    SHA = 2


FILTER_ICONS = {
    PatchFilter.VIEW_ALL: ":/icons/resources/plusminus.svg",
    PatchFilter.VIEW_ADDED: ":/icons/resources/plusonly.svg",
    PatchFilter.VIEW_REMOVED: ":/icons/resources/minusonly.svg",
}

_NEXT_FILTER = {
    PatchFilter.VIEW_ALL: PatchFilter.VIEW_ADDED,
    PatchFilter.VIEW_ADDED: PatchFilter.VIEW_REMOVED,
    PatchFilter.VIEW_REMOVED: PatchFilter.VIEW_ALL,
}

_CAPTION_MAX = 30


def next_filter(current: PatchFilter) -> PatchFilter:
    """Return the filter that follows ``current`` when the filter button is pressed."""
    return _NEXT_FILTER[current]


def normalize_diff_target(
    kind: DiffTo, text: str, resolve_ref: Callable[[str], str]
) -> str | None:
    """Return the SHA to diff against, or None when the target is the working dir.

    An empty string means diff against the parent. Names and abbreviated
    SHAs are resolved with ``resolve_ref``.
    """
    kind = DiffTo(kind)
    if kind is DiffTo.PARENT:
        sha = ""
    elif kind is DiffTo.HEAD:
        sha = "HEAD"
    else:
        sha = text
    if sha == ZERO_SHA:
        return None
    if sha and len(sha) != 40:
        return resolve_ref(sha)
    return sha


def tab_caption(short_log: str) -> str:
    """Shorten a commit subject to fit a tab title."""
    if len(short_log) > _CAPTION_MAX:
        return short_log[: _CAPTION_MAX - 3].strip() + "..."
    return short_log