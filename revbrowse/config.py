"""Application constants and a small persistent settings store."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

PACKAGE = "qgit"
VERSION = "2.10"

# minimum git version required
GIT_VERSION = "1.5.5"

SCRIPT_EXT = ".bat" if os.name == "nt" else ".sh"

# colors as (red, green, blue)
BROWN = (150, 75, 0)
ORANGE = (255, 160, 50)
DARK_ORANGE = (216, 144, 0)
LIGHT_ORANGE = (255, 221, 170)
LIGHT_BLUE = (85, 255, 255)
PURPLE = (221, 221, 255)
DARK_GREEN = (0, 205, 0)

# patches drag and drop
PATCHES_DIR = "/.qgit_patches_copy"
PATCHES_NAME = "qgit_import"

# git index parameters
ZERO_SHA = "0000000000000000000000000000000000000000"
CUSTOM_SHA = "*** CUSTOM * CUSTOM * CUSTOM * CUSTOM **"
ALL_MERGE_FILES = "ALL_MERGE_FILES"

# settings keys
ORG_KEY = "qgit"
APP_KEY = "qgit4"
GIT_DIR_KEY = "msysgit_exec_dir"
DCLICK_ACT_KEY = "double_click_action"
EXT_DIFF_KEY = "external_diff_viewer"
EXT_EDITOR_KEY = "external_editor"
REC_REP_KEY = "recent_open_repos"
STD_FNT_KEY = "standard_font"
TYPWRT_FNT_KEY = "typewriter_font"
FLAGS_KEY = "flags"
PATCH_DIR_KEY = "Patch/last_dir"
FMT_P_OPT_KEY = "Patch/args"
AM_P_OPT_KEY = "Patch/args_2"
EX_KEY = "Working_dir/exclude_file_path"
EX_PER_DIR_KEY = "Working_dir/exclude_per_directory_file_name"
CON_GEOM_KEY = "Console/geometry"
CMT_GEOM_KEY = "Commit/geometry"
MAIN_GEOM_KEY = "Top_window/geometry"
REV_GEOM_KEY = "Rev_List_view/geometry"
REV_COLS_KEY = "Rev_List_view/columns"
FILE_COLS_KEY = "File_List_view/columns"
CMT_TEMPL_KEY = "Commit/template_file_path"
CMT_ARGS_KEY = "Commit/args"
RANGE_FROM_KEY = "RangeSelect/from"
RANGE_TO_KEY = "RangeSelect/to"
RANGE_OPT_KEY = "RangeSelect/options"
ACT_GEOM_KEY = "Custom_actions/geometry"
ACT_LIST_KEY = "Custom_actions/list"
ACT_GROUP_KEY = "Custom_action_list/"
ACT_TEXT_KEY = "/commands"
ACT_FLAGS_KEY = "/flags"

# settings default values
CMT_TEMPL_DEF = ".git/commit-template"
EX_DEF = ".git/info/exclude"
EX_PER_DIR_DEF = ".gitignore"
EXT_DIFF_DEF = "kompare"
EXT_EDITOR_DEF = "emacs"

# cache file
BAK_EXT = ".bak"
C_DAT_FILE = "/qgit_cache.dat"

QUOTE_CHAR = "$"

DEFAULT_FLAGS = 0

_UINT_MASK = 0xFFFFFFFF


class Settings:
    """Key/value settings kept in memory and, when a path is given, in a JSON file."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._values: dict[str, Any] = {}
        if self.path is not None and self.path.exists():
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
            if not isinstance(data, dict):
                raise ValueError(f"malformed settings file: {self.path}")
            self._values = data

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def value(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set_value(self, key: str, value: Any) -> None:
        self._values[key] = value
        self._save()

    def flags(self, key: str = FLAGS_KEY) -> int:
        return int(self.value(key, DEFAULT_FLAGS)) & _UINT_MASK

    def test_flag(self, flag: int, key: str = FLAGS_KEY) -> bool:
        return bool(self.flags(key) & flag)

    def set_flag(self, flag: int, on: bool, key: str = FLAGS_KEY) -> None:
        current = self.flags(key)
        current = current | flag if on else current & ~flag & _UINT_MASK
        self.set_value(key, current)

    def save_geometry(
        self,
        name: str,
        window: Any = None,
        splitters: Iterable[tuple[Sequence[int], Any]] = (),
    ) -> None:
        """Store a window geometry and the states of its splitters.

        Each splitter is given as ``(sizes, state)``; splitters with a
        collapsed pane (a size of 0) keep their previously saved state.
        """
        if window is not None:
            self._values[f"{name}_window"] = window
        for count, (sizes, state) in enumerate(splitters, start=1):
            if 0 in sizes:
                continue
            self._values[f"{name}_splitter_{count}"] = state
        self._save()

    def restore_geometry(self, name: str, splitter_count: int = 0) -> tuple[Any, list[Any]]:
        """Return the saved window geometry and splitter states (None where unsaved)."""
        window = self._values.get(f"{name}_window")
        states = [
            self._values.get(f"{name}_splitter_{count}")
            for count in range(1, splitter_count + 1)
        ]
        return window, states

    def _save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        with tmp.open("w", encoding="utf-8") as fh:
            json.dump(self._values, fh, indent=2, sort_keys=True)
        os.replace(tmp, self.path)