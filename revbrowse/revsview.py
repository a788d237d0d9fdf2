"""Decisions of the revision view: pane toggling, lane menus and SHA display."""

from __future__ import annotations

from collections.abc import Callable, Sequence


def toggle_diff_index(stacked_index: int, tab_index: int) -> tuple[int, int]:
    """Swap between log and diff panes; returns the new (stacked, tab) indexes.

    Stacked page 0 holds the tabbed layout, whose tabs 0 and 1 are log and
    diff; otherwise pages 1 and 2 of the stack are log and diff.
    """
    if stacked_index == 0:
        return stacked_index, 1 - tab_index
    return 3 - stacked_index, tab_index


def lanes_menu(
    parents: Sequence[str], children: Sequence[str], short_log: Callable[[str], str]
) -> list[str]:
    """Return the entries of a lane's context menu: children first, then parents."""
    entries = [f"Child: {short_log(sha)}" for sha in children]
    for sha in parents:
        log = short_log(sha)
        entries.append(f"Parent: {log or sha}")
    return entries


def lane_target(parents: Sequence[str], children: Sequence[str], index: int) -> str:
    """Return the SHA chosen by the ``index``-th lane menu entry."""
    if index < 0 or index >= len(children) + len(parents):
        raise IndexError(f"no lane menu entry {index}")
    if index < len(children):
        return children[index]
    return parents[index - len(children)]


def short_hash(sha: str, length: int, enabled: bool) -> str:
    """Return ``sha`` cut to ``length`` digits when short references are enabled."""
    return sha[:length] if enabled else sha


def revision_not_found_message(sha: str) -> str:
    """Status bar message for a revision missing from the main view."""
    return f"Sorry, revision {sha} has not been found in main view"