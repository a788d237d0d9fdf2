"""Data behind the settings dialog: text codecs, git config tree and user info."""

from __future__ import annotations

import fnmatch
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

CODECS = (
    "Latin1", "Big5 -- Chinese", "EUC-JP -- Japanese",
    "EUC-KR -- Korean", "GB18030 -- Chinese", "ISO-2022-JP -- Japanese",
    "Shift_JIS -- Japanese", "UTF-8 -- Unicode, 8-bit",
    "KOI8-R -- Russian", "KOI8-U -- Ukrainian", "ISO-8859-1 -- Western",
    "ISO-8859-2 -- Central European", "ISO-8859-3 -- Central European",
    "ISO-8859-4 -- Baltic", "ISO-8859-5 -- Cyrillic", "ISO-8859-6 -- Arabic",
    "ISO-8859-7 -- Greek", "ISO-8859-8 -- Hebrew, visually ordered",
    "ISO-8859-8-i -- Hebrew, logically ordered", "ISO-8859-9 -- Turkish",
    "ISO-8859-10", "ISO-8859-13", "ISO-8859-14", "ISO-8859-15 -- Western",
    "windows-1250 -- Central European", "windows-1251 -- Cyrillic",
    "windows-1252 -- Western", "windows-1253 -- Greek", "windows-1254 -- Turkish",
    "windows-1255 -- Hebrew", "windows-1256 -- Arabic", "windows-1257 -- Baltic",
    "windows-1258",
)

_LOCAL_PREFIX = "Local Codec ("


def codec_names(local_codec: str) -> list[str]:
    """Return the codec labels offered, the local codec first."""
    return [f"{_LOCAL_PREFIX}{local_codec})", *CODECS]


def codec_index(codecs: Sequence[str], current: str | None) -> int:
    """Index of the first label containing ``current`` (case-insensitive), else 0."""
    name = current if current else "Latin1"
    pattern = f"*{name.lower()}*"
    for idx, label in enumerate(codecs):
        if fnmatch.fnmatchcase(label.lower(), pattern):
            return idx
    return 0


def codec_from_label(label: str) -> str:
    """Return the codec name a label stands for."""
    if label.startswith(_LOCAL_PREFIX) and label.endswith(")"):
        return label[len(_LOCAL_PREFIX):-1]
    return label.split(" --", 1)[0]


@dataclass
class ConfigNode:
    """One section or option of the git configuration tree."""

    name: str
    value: str = ""
    children: list[ConfigNode] = field(default_factory=list)

    def child(self, name: str) -> ConfigNode | None:
        return next((c for c in self.children if c.name == name), None)


def _add_option(parent: ConfigNode, paths: list[str], value: str) -> None:
    if not paths:
        parent.value = value
        return
    name, rest = paths[0], paths[1:]
    # the option list is sorted, so only a differing name starts a new child
    if not parent.children or name != parent.children[0].name:
        parent.children.append(ConfigNode(name))
    _add_option(parent.children[-1], rest, value)


def build_config_tree(lines: Iterable[str]) -> list[ConfigNode]:
    """Build a tree from ``section.sub.key=value`` lines; lines without a value are skipped."""
    roots: list[ConfigNode] = []
    for line in sorted(lines):
        parts = line.split("=")
        if len(parts) < 2 or not parts[1]:
            continue
        paths = parts[0].split(".")
        value = parts[1]
        name, rest = paths[0], paths[1:]
        node = next((r for r in roots if r.name == name), None)
        if node is None:
            node = ConfigNode(name)
            roots.append(node)
        _add_option(node, rest, value)
    return roots


def select_user(info: Sequence[str]) -> tuple[int, str, str]:
    """Pick the first (source, user, email) triple with a user name.

    Returns the triple's index with its user and email; index 0 when none has one.
    """
    if len(info) % 3 != 0:
        raise ValueError("user info must be made of (source, user, email) triples")
    if not info:
        raise ValueError("no user info given")
    triples = [tuple(info[i:i + 3]) for i in range(0, len(info), 3)]
    idx = next((i for i, (_, user, _) in enumerate(triples) if user), 0)
    _, user, email = triples[idx]
    return idx, user, email