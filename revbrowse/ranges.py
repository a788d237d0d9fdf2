"""Ordering of reference names and building of the revision range passed to git log."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence

# a (dotted) number, something else, a number, end of string
_RC_RE = re.compile(r"[\d.]+([^\d.]+\d+)\Z")
# a one or two digit number preceded and followed by a non digit
_VER_RE = re.compile(r"([^\d])(\d{1,2})(?=[^\d])")

# impossible strings starting with ' ' (32) and '!' (33), which both sort
# before every other printable character
_RC_MARK = " $$%%"
_NO_RC_MARK = "!$$%%"


def _sort_key(ref: str) -> str:
    m = _RC_RE.search(ref)
    if m is not None:
        pos = m.start(1)
        key = ref[:pos] + _RC_MARK + ref[pos:]
    else:
        key = ref + _NO_RC_MARK
    # pad every number to three digits so that 1.5 sorts before 1.10
    while _VER_RE.search(key):
        key = _VER_RE.sub(r"\g<1>0\g<2>", key)
    return key


def order_refs(refs: Iterable[str]) -> list[str]:
    """Order reference names newest first, release candidates after their release.

    Names that normalize to the same key collapse to the last one given.
    """
    by_key: dict[str, str] = {}
    for ref in refs:
        by_key[_sort_key(ref)] = ref
    return [by_key[key] for key in sorted(by_key, reverse=True)]


def ref_choices(
    branches: Iterable[str],
    remotes: Iterable[str],
    tags: Iterable[str],
    tag_is_head: Callable[[str], bool] | None = None,
) -> tuple[list[str], int]:
    """Return the list of selectable refs and the index of the default 'from' ref.

    Groups are separated by an empty entry. The default is the newest tag,
    or the one after it when the newest tag is the current branch head.
    """
    choices: list[str] = []
    ordered_tags: list[str] = []
    for group, separate in ((branches, True), (remotes, True), (tags, False)):
        ordered_tags = order_refs(group)
        if ordered_tags:
            choices.extend(ordered_tags)
            if separate:
                choices.append("")

    default = len(choices) - len(ordered_tags)
    if ordered_tags and tag_is_head is not None and tag_is_head(ordered_tags[0]):
        default += 1 if len(ordered_tags) > 1 else -1

    if choices and not choices[-1]:
        choices.pop()
    return choices, default


def build_range(from_ref: str, to_ref: str, options: str = "", whole_history: bool = False) -> str:
    """Combine the range ends and extra options into git log arguments.

    Everything from the first ``--`` in ``options`` on is placed after the range.
    """
    if whole_history:
        rng = "HEAD"
    else:
        rng = from_ref + ".." if from_ref else ""
        rng += to_ref
    idx = options.find("--")
    if idx != -1:
        rng = options[:idx] + rng + " " + options[idx:]
    else:
        rng = options + " " + rng
    return rng.strip()


def toggle_all_option(options: str, enabled: bool) -> str:
    """Add or remove the ``--all`` option from an option string."""
    opt = options.replace("--all", "")
    if enabled:
        opt += " --all"
    return opt.strip()


def split_choices(choices: Sequence[str]) -> list[list[str]]:
    """Split a choice list back into its groups."""
    groups: list[list[str]] = [[]]
    for item in choices:
        if item:
            groups[-1].append(item)
        else:
            groups.append([])
    return [g for g in groups if g]