# revbrowse

The view logic of a git revision browser as a plain Python library, with no
GUI toolkit underneath. It works on diff text, ref names, tree listings and
settings that the caller supplies. It has no dependencies beyond the
standard library.

## Installation

```
pip install revbrowse
```

To run the tests:

```
pip install "revbrowse[test]"
pytest
```

## What it provides

- `revbrowse.config`
  - Application constants: settings keys and defaults, `ZERO_SHA`, colours.
  - `Settings` is a key/value store. It lives in memory, or in a JSON file
    when given a path. It handles flag words (`flags`, `test_flag`,
    `set_flag`) and window and splitter geometry (`save_geometry`,
    `restore_geometry`). Splitters with a collapsed pane are not saved.
- `revbrowse.textutil`
  - `LineAssembler.feed` joins streamed output chunks into whole lines and
    holds back a partial last line.
  - `sha_hash` is a short hash of a hex SHA.
  - `write_file` and `read_file` write and read files, optionally making a
    file executable. They raise `OSError` on failure.
- `revbrowse.mimeicons`: `icon_for` picks an icon resource name for a file.
  It tries the full file name first, then the extension, then a default.
- `revbrowse.patch`: works on diff text.
  - `classify_line` returns the `LineStyle` of a diff line. It also handles
    combined (merge) diffs.
  - `filter_patch` keeps only added or only removed lines (`PatchFilter`).
    It can carry the top visible line across a filter change.
  - `find_matches` finds case-insensitive substring or minimal
    regular-expression matches as `Match` regions.
  - `match_in_line` returns the part of a line that a match covers.
  - `PatchContent` models a streaming patch view with `feed`, `finish`,
    `refresh`, `clear` and `set_highlight`.
- `revbrowse.patchview`
  - `next_filter` cycles through the patch filter modes.
  - `normalize_diff_target` resolves the "diff to" target (`DiffTo`) using a
    ref resolver that the caller supplies.
  - `tab_caption` shortens a caption to fit a tab.
- `revbrowse.ranges`
  - `order_refs` sorts refs newest first. Version numbers sort numerically
    and release candidates come after their release.
  - `ref_choices` builds the grouped list of refs and the default "from"
    index.
  - `split_choices` splits that list back into its groups.
  - `build_range` makes the `git log` argument string.
  - `toggle_all_option` adds or removes `--all`.
- `revbrowse.settingsmodel`
  - `codec_names`, `codec_index` and `codec_from_label` handle the list of
    text encodings.
  - `build_config_tree` turns `git config --list` lines into a tree of
    `ConfigNode` objects.
  - `select_user` picks the first (source, user, email) triple that has a
    user name.
- `revbrowse.smartbrowse`
  - `WheelSwitcher` detects a quick mouse-wheel roll past a scroll end that
    should switch views.
  - `visibility_flags` tells whether a view is at its top (`AT_TOP`) or at
    its bottom (`AT_BTM`).
  - `label_text`, `switch_links`, `link_from_label` and `parse_link` handle
    navigation labels and their `Link` targets.
- `revbrowse.revdesc`: `is_sha_link` tells whether a link is a full 40-digit
  SHA.
- `revbrowse.treeview`: `FileTree`, `FileItem` and `DirItem` make a
  repository tree that loads each directory through a caller-supplied
  loader when it is expanded.
  - `locate` finds the item for a path.
  - `is_modified` marks working-directory changes.
- `revbrowse.revsview`
  - `toggle_diff_index` switches between the log and diff panes.
  - `lanes_menu` and `lane_target` build the parent/child lane menu and
    resolve the chosen entry.
  - `short_hash` abbreviates a SHA.
  - `revision_not_found_message` gives the status message for a missing
    revision.

## Examples

Ordering tags and building a range:

```python
from revbrowse.ranges import order_refs, build_range

order_refs(["v1.5", "v1.5-rc1", "v1.5.1"])
# ['v1.5.1', 'v1.5', 'v1.5-rc1']

build_range("v1.0", "HEAD", "-- src/")
# 'v1.0..HEAD -- src/'
```

Joining streamed lines:

```python
from revbrowse.textutil import LineAssembler

assembler = LineAssembler()
assembler.feed(b"diff --git a/x b/x\n+ad")  # 'diff --git a/x b/x'
assembler.feed(b"ded\n")                    # '+added'
```

## What it does not do

There is no window, widget or command-line program here. The package never
runs `git`. Diff output, ref lists, tree listings, config lines and user
information all come from the caller, and the caller draws the results.