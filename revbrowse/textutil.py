"""Hashing of SHA strings, line reassembly of streamed output and file helpers."""

from __future__ import annotations

import locale
import os

_IS_WINDOWS = os.name == "nt"

_HASH_POSITIONS = (0, 2, 4, 6, 8, 10, 12)


def _hex_val(ch: str) -> int:
    code = ord(ch)
    return code - 48 if code < 64 else code - 87


def sha_hash(sha: str) -> int:
    """Fast hash of a lower-case hex SHA built from its even digits up to position 12."""
    if len(sha) <= _HASH_POSITIONS[-1]:
        raise ValueError(f"sha too short to hash: {sha!r}")
    total = 0
    for shift, pos in zip(range(24, -1, -4), _HASH_POSITIONS):
        total += _hex_val(sha[pos]) << shift
    return total & 0xFFFFFFFF


class LineAssembler:
    """Turn chunks of process output into whole lines, holding back a partial tail."""

    def __init__(self, encoding: str | None = None) -> None:
        self.encoding = encoding or locale.getpreferredencoding(False)
        self.pending = ""

    def _decode(self, chunk: bytes) -> str:
        return chunk.decode(self.encoding, errors="replace").replace("\0", " ")

    def feed(self, chunk: bytes) -> str | None:
        """Return the complete lines in ``chunk`` (without the final newline), or None."""
        text = self._decode(chunk)
        if text.endswith("\n"):
            result = self.pending + text[:-1]
            self.pending = ""
            return result
        idx = text.rfind("\n")
        if idx == -1:
            self.pending += text
            return None
        result = self.pending + text[:idx]
        self.pending = text[idx + 1 :]
        return result


def write_file(path: str | os.PathLike[str], data: str | bytes, executable: bool = False) -> None:
    """Write text or bytes to ``path``; raises OSError on failure."""
    if isinstance(data, bytes):
        with open(path, "wb") as fh:
            fh.write(data)
    else:
        if _IS_WINDOWS:
            data = data.replace("\r\n", "\n").replace("\n", "\r\n")
        with open(path, "w", encoding=locale.getpreferredencoding(False), newline="") as fh:
            fh.write(data)
    if executable and not _IS_WINDOWS:
        os.chmod(path, 0o755)


def read_file(path: str | os.PathLike[str]) -> str:
    """Read the whole text of ``path``; raises OSError on failure."""
    with open(path, encoding=locale.getpreferredencoding(False), newline="") as fh:
        return fh.read()