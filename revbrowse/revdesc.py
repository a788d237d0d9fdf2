"""Link handling of the revision description view."""

from __future__ import annotations

import re

_SHA_RE = re.compile(r"[0-9a-f]{40}", re.IGNORECASE)


def is_sha_link(link: str) -> bool:
    """Return True when a clicked link is a full 40 digit SHA to jump to."""
    return _SHA_RE.fullmatch(link) is not None