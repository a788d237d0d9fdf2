"""Smart browsing labels: link text, visibility at scroll ends and wheel switching."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable

AT_TOP = 1
AT_BTM = 2

# distance from a scroll end, in scroll bar steps, that still counts as "at the end"
_EDGE = 5

# seconds
_SWITCH_QUIET = 0.4
_SCROLL_QUIET = 0.4
_ROLL_TIMEOUT = 0.3

# wheel steps needed before a switch happens
_INERTIA = 3

_LABEL = '<p><img src=":/icons/resources/{icon}"> {first} {second}</p>'
_LINK = '<a href="{target}">{title}</a>'


class Link(enum.IntEnum):
    """Targets of the smart browsing labels."""

    UP = 1
    DOWN = 2
    LOG = 3
    DIFF = 4

    @property
    def title(self) -> str:
        return self.name.capitalize()

    def anchor(self) -> str:
        """Return the HTML anchor for this link."""
        return _LINK.format(target=int(self), title=self.title)


def label_text(icon: str, first: Link | None = None, second: Link | None = None) -> str:
    """Return the rich text of a label showing an icon and up to two links."""
    return _LABEL.format(
        icon=icon,
        first=first.anchor() if first is not None else "",
        second=second.anchor() if second is not None else "",
    )


def visibility_flags(
    enabled: bool, scrollbar_visible: bool, value: int, minimum: int, maximum: int
) -> int:
    """Return AT_TOP and/or AT_BTM when the view is scrolled to that end."""
    top = enabled and (not scrollbar_visible or value - minimum < _EDGE)
    btm = enabled and (not scrollbar_visible or maximum - value < _EDGE)
    return (AT_TOP if top else 0) | (AT_BTM if btm else 0)


def switch_links(text: str) -> str:
    """Swap the two links of a label's text."""
    if text.count("href=") != 2:
        raise ValueError("label text must hold exactly two links")
    parts = text.split("<a href=")
    if len(parts) < 3:
        raise ValueError("label text must hold exactly two anchors")
    link1 = parts[1].split("</a>", 1)[0]
    link2 = parts[2].split("</a>", 1)[0]
    first_mark, second_mark = "\x00\x01", "\x00\x02"
    swapped = text.replace(link1, first_mark).replace(link2, second_mark)
    return swapped.replace(first_mark, link2).replace(second_mark, link1)


def link_from_label(text: str) -> str:
    """Return the target of the first link in a label's text."""
    after = text.split("href=", 1)[1] if "href=" in text else ""
    fields = after.split('"')
    return fields[1] if len(fields) > 1 else ""


def parse_link(text: str) -> Link:
    """Return the link a target string stands for; raises ValueError if unknown."""
    try:
        return Link(int(text))
    except ValueError:
        raise ValueError(f"unknown link target: {text!r}") from None


class WheelSwitcher:
    """Decide when wheel rolling past a scroll end should switch views.

    A quick roll of several steps out of range triggers a switch; rolls
    just after a switch are swallowed so that the new view does not scroll.
    """

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.monotonic
        self.wheel_count = 0
        self._scroll_started: float | None = None
        self._switched_at: float | None = None
        self._last_roll: float | None = None

    def reset(self) -> None:
        """Restart the scroll timer and forget counted wheel steps."""
        self._scroll_started = self._clock()
        self.wheel_count = 0

    def wheel_rolled(self, delta: int, flags: int) -> tuple[bool, int]:
        """Handle one wheel event.

        Returns ``(filtered, side)``: ``filtered`` is True when the event should
        be swallowed, ``side`` is AT_TOP or AT_BTM when the link of that label
        should be activated, else 0.
        """
        now = self._clock()
        just_switched = (
            self._switched_at is not None and now - self._switched_at < _SWITCH_QUIET
        )
        if just_switched:
            self._switched_at = now

        scrolling = (
            self._scroll_started is not None and now - self._scroll_started < _SCROLL_QUIET
        )
        direction_changed = self.wheel_count * delta < 0

        # called before the scroll bar moves, so the roll direction matters
        scrolling_out = bool(flags & AT_TOP and delta > 0) or bool(flags & AT_BTM and delta < 0)

        # a scroll must start in range but may go on out of range
        if not scrolling_out or scrolling:
            self._scroll_started = now

        if not scrolling_out or just_switched:
            return just_switched, 0

        too_slow = self._last_roll is not None and now - self._last_roll > _ROLL_TIMEOUT
        self._last_roll = now

        if direction_changed or scrolling or too_slow:
            self.wheel_count = 0

        self.wheel_count += 1 if delta > 0 else -1
        if abs(self.wheel_count) < _INERTIA:
            return False, 0

        side = AT_TOP if self.wheel_count > 0 else AT_BTM
        self.wheel_count = 0
        self._switched_at = now
        return False, side