"""Patch text model: line classification, filtering and pattern matches."""

from __future__ import annotations

import enum
import re
from collections.abc import Sequence
from dataclasses import dataclass

from .textutil import LineAssembler


class PatchFilter(enum.Enum):
    """Which changed lines of a patch are shown."""

    VIEW_ALL = 0
    VIEW_ADDED = 1
    VIEW_REMOVED = 2


class LineStyle(enum.Enum):
    """How a patch line is highlighted."""

    PLAIN = "plain"
    HUNK = "hunk"
    ADDED = "added"
    REMOVED = "removed"
    FILE_HEADER = "file_header"
    META = "meta"


_META_PREFIXES = ("copy ", "index ", "new ", "old ", "rename ", "similarity ")


def classify_line(text: str, combined_length: int = 0) -> LineStyle:
    """Return the highlight style of one patch line.

    ``combined_length`` is the number of parents of a combined (merge) diff,
    or 0 for an ordinary diff.
    """
    if not text:
        return LineStyle.PLAIN
    first = text[0]
    if first == "@":
        return LineStyle.HUNK
    if first == "+":
        return LineStyle.ADDED
    if first == "-":
        return LineStyle.REMOVED
    if first in "cdinors":
        if text.startswith("diff --git a/"):
            return LineStyle.FILE_HEADER
        if text.startswith(_META_PREFIXES):
            return LineStyle.META
        if combined_length > 0 and text.startswith("diff --combined"):
            return LineStyle.FILE_HEADER
        return LineStyle.PLAIN
    if first == " " and combined_length > 0:
        head = text[:combined_length]
        if "+" in head:
            return LineStyle.ADDED
        if "-" in head:
            return LineStyle.REMOVED
    return LineStyle.PLAIN


@dataclass(frozen=True)
class Match:
    """A matched region; ``index_to`` is one past the last matched column."""

    para_from: int
    index_from: int
    para_to: int
    index_to: int


def _minimal(pattern: str) -> str:
    """Make every quantifier of a regular expression non-greedy."""
    out: list[str] = []
    i = 0
    n = len(pattern)
    after_open_group = False
    while i < n:
        c = pattern[i]
        if c == "\\" and i + 1 < n:
            out.append(pattern[i : i + 2])
            i += 2
            after_open_group = False
            continue
        if c == "[":
            j = i + 1
            if j < n and pattern[j] == "^":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                j += 2 if pattern[j] == "\\" else 1
            out.append(pattern[i : j + 1])
            i = j + 1
            after_open_group = False
            continue
        quantifier = None
        if c in "*+":
            quantifier = c
        elif c == "?" and not after_open_group:
            quantifier = c
        elif c == "{":
            m = re.match(r"\{\d+(,\d*)?\}|\{,\d+\}", pattern[i:])
            if m:
                quantifier = m.group()
        after_open_group = c == "("
        if quantifier is None:
            out.append(c)
            i += 1
            continue
        out.append(quantifier)
        i += len(quantifier)
        if i < n and pattern[i] == "?":
            out.append("?")
            i += 1
        else:
            out.append("?")
    return "".join(out)


def _compile(pattern: str, is_regexp: bool) -> re.Pattern[str]:
    source = _minimal(pattern) if is_regexp else re.escape(pattern)
    return re.compile(source, re.IGNORECASE)


def find_matches(text: str, pattern: str, is_regexp: bool = False) -> list[Match]:
    """Find every case-insensitive occurrence of ``pattern`` in ``text``.

    Regular expressions match minimally. Consecutive matches may share
    their boundary character, as a search resumes at the end of the last one.
    """
    if not pattern:
        return []
    regex = _compile(pattern, is_regexp)
    matches: list[Match] = []
    search_from = 0
    while (m := regex.search(text, search_from)) is not None:
        start, end = m.start(), m.end()
        if end == start:
            search_from = start + 1
            if search_from > len(text):
                break
            continue
        last = end - 1
        para_from = text.count("\n", 0, start)
        index_from = start - text.rfind("\n", 0, start + 1) - 1
        para_to = text.count("\n", 0, last)
        index_to = last - text.rfind("\n", 0, last + 1)
        matches.append(Match(para_from, index_from, para_to, index_to))
        search_from = max(last, start + 1)
    return matches


def match_in_line(matches: Sequence[Match], para: int) -> tuple[int, int] | None:
    """Return ``(index_from, index_to)`` of the first match touching line ``para``.

    A value of 0 for ``index_to`` means the match runs to the end of the line.
    """
    for m in matches:
        if m.para_from <= para <= m.para_to:
            index_from = m.index_from if para == m.para_from else 0
            index_to = m.index_to if para == m.para_to else 0
            return index_from, index_to
    return None


def filter_patch(
    text: str,
    current: PatchFilter,
    previous: PatchFilter = PatchFilter.VIEW_ALL,
    top_line: int | None = None,
) -> tuple[str, int | None]:
    """Drop added or removed lines from ``text`` according to ``current``.

    When ``top_line`` is given it is the top visible line under the
    ``previous`` filter, and the matching line under ``current`` is returned
    along with the text. Kept lines each end with a newline.
    """
    if top_line is None and current is PatchFilter.VIEW_ALL:
        return text, None

    prev = top_line
    if prev is not None and previous is PatchFilter.VIEW_ALL:
        prev = -prev

    kept: list[str] = []
    not_neg = not_pos = 0
    to_added = [0]
    to_removed = [0]
    for line in text.split("\n"):
        neg = line.startswith("-") and not line.startswith("---")
        pos = line.startswith("+") and not line.startswith("+++")
        if not pos:
            not_pos += 1
        if not neg:
            not_neg += 1
        to_added.append(not_neg)
        to_removed.append(not_pos)
        cur_line = len(to_added) - 1

        drop = (neg and current is PatchFilter.VIEW_ADDED) or (
            pos and current is PatchFilter.VIEW_REMOVED
        )
        if not drop:
            kept.append(line + "\n")

        if prev is not None and prev == not_neg and previous is PatchFilter.VIEW_ADDED:
            prev = -cur_line
        if prev is not None and prev == not_pos and previous is PatchFilter.VIEW_REMOVED:
            prev = -cur_line

    if prev is not None and prev <= 0:
        idx = -prev
        if current is PatchFilter.VIEW_ALL:
            prev = idx
        elif current is PatchFilter.VIEW_ADDED:
            prev = to_added[min(idx, len(to_added) - 1)]
        else:
            prev = to_removed[min(idx, len(to_removed) - 1)]
        prev = max(prev, 0)

    return "".join(kept), prev


class PatchContent:
    """The text of a patch as it streams in, with filtering and highlight matches."""

    def __init__(self, encoding: str | None = None) -> None:
        self.encoding = encoding
        self.current_filter = PatchFilter.VIEW_ALL
        self.previous_filter = PatchFilter.VIEW_ALL
        self.pattern = ""
        self.is_regexp = False
        self.top_line = 0
        self.raw = bytearray()
        self.text = ""
        self.matches: list[Match] = []
        self.loaded = False
        self._assembler = LineAssembler(encoding)

    def clear(self) -> None:
        """Forget all loaded data."""
        self.raw = bytearray()
        self.text = ""
        self.matches = []
        self.loaded = False
        self._assembler = LineAssembler(self.encoding)

    def feed(self, data: bytes) -> None:
        """Add a chunk of diff output; only the first chunk is shown at once."""
        self.raw.extend(data)
        if not self.text:
            self._process(bytes(data))

    def finish(self) -> bool:
        """Show all received data and compute highlight matches; True if any matched."""
        if not self.raw.endswith(b"\n"):
            self.raw.extend(b"\n")
        self.refresh()
        self.loaded = True
        self.matches = find_matches(self.text, self.pattern, self.is_regexp)
        return bool(self.matches)

    def set_highlight(self, pattern: str, is_regexp: bool = False) -> None:
        """Set the pattern to highlight, recomputing matches if data is loaded."""
        self.pattern = pattern
        self.is_regexp = is_regexp
        if self.loaded:
            self.finish()

    def refresh(self) -> None:
        """Rebuild the text from the raw data under the current filter."""
        top = self.top_line
        raw = bytes(self.raw)
        self.clear()
        self.raw = bytearray(raw)
        new_top = self._process(raw, top)
        self.top_line = new_top if new_top is not None else 0

    def _process(self, chunk: bytes, top_line: int | None = None) -> int | None:
        new_lines = self._assembler.feed(chunk)
        if new_lines is None:
            return top_line
        new_lines, top_line = filter_patch(
            new_lines, self.current_filter, self.previous_filter, top_line
        )
        if top_line is not None or not self.text:
            self.text = new_lines
        else:
            self.text = f"{self.text}\n{new_lines}"
        return top_line