import re

import pytest

from revbrowse.patch import (
    LineStyle,
    Match,
    PatchContent,
    PatchFilter,
    classify_line,
    filter_patch,
    find_matches,
    match_in_line,
)


@pytest.mark.parametrize(
    "line, style",
    [
        ("", LineStyle.PLAIN),
        ("@@ -1,2 +1,3 @@", LineStyle.HUNK),
        ("+added", LineStyle.ADDED),
        ("-removed", LineStyle.REMOVED),
        ("diff --git a/x b/x", LineStyle.FILE_HEADER),
        ("index 123..456", LineStyle.META),
        ("similarity index 90%", LineStyle.META),
        ("rename from x", LineStyle.META),
        ("context", LineStyle.PLAIN),
        (" plain context", LineStyle.PLAIN),
    ],
)
def test_classify_line(line, style):
    assert classify_line(line) is style


def _matched(text, m):
    lines = text.split("\n")
    assert m.para_from == m.para_to
    return lines[m.para_from][m.index_from : m.index_to]


def test_find_matches_plain_case_insensitive():
    text = "foo bar\nbaz FOO"
    matches = find_matches(text, "foo")
    assert len(matches) == text.lower().count("foo")
    assert all(_matched(text, m).lower() == "foo" for m in matches)
    assert matches[1].para_from == 1
    assert find_matches(text, "FOO") == matches


def test_find_matches_empty_pattern():
    assert find_matches("anything", "") == []


def test_find_matches_single_char_terminates():
    text = "foo"
    assert len(find_matches(text, "o")) == text.count("o")


def test_find_matches_regexp_is_minimal():
    text = "xfoooy"
    matches = find_matches(text, "f.*o", True)
    assert _matched(text, matches[0]) == "fo"


def test_find_matches_regexp_plus_minimal():
    text = "aaa"
    matches = find_matches(text, "a+", True)
    assert all(_matched(text, m) == "a" for m in matches)


def test_find_matches_invalid_regexp():
    with pytest.raises(re.error):
        find_matches("text", "(", True)


def test_match_across_lines_and_match_in_line():
    text = "foo bar\nbaz foo"
    matches = find_matches(text, "bar\nbaz")
    m = matches[0]
    assert (m.para_from, m.para_to) == (0, 1)
    assert match_in_line(matches, 0) == (m.index_from, 0)
    assert match_in_line(matches, 1) == (0, m.index_to)
    assert match_in_line(matches, 2) is None


def test_match_in_line_single_line():
    matches = [Match(2, 3, 2, 7)]
    assert match_in_line(matches, 2) == (3, 7)
    assert match_in_line(matches, 1) is None


def test_filter_all_without_top_line_is_identity():
    text = "a\n-b\n+c"
    assert filter_patch(text, PatchFilter.VIEW_ALL) == (text, None)


def test_filter_added_drops_removed_lines():
    out, top = filter_patch("a\n-b\n+c\n--- hdr", PatchFilter.VIEW_ADDED)
    assert out.split("\n")[:-1] == ["a", "+c", "--- hdr"]
    assert top is None


def test_filter_removed_drops_added_lines():
    out, _ = filter_patch("a\n-b\n+c\n+++ hdr", PatchFilter.VIEW_REMOVED)
    assert out.split("\n")[:-1] == ["a", "-b", "+++ hdr"]


def test_filter_top_line_round_trip():
    text = "ctx\n-r1\n-r2\n+a1\nctx2"
    _, top = filter_patch(text, PatchFilter.VIEW_ADDED, PatchFilter.VIEW_ALL, 4)
    assert top == 2
    _, back = filter_patch(text, PatchFilter.VIEW_ALL, PatchFilter.VIEW_ADDED, top)
    assert back == 4


def test_filter_all_keeps_top_line():
    text = "a\nb\nc"
    out, top = filter_patch(text, PatchFilter.VIEW_ALL, PatchFilter.VIEW_ALL, 2)
    assert top == 2
    assert out == "".join(line + "\n" for line in text.split("\n"))


DIFF = b"diff --git a/x b/x\n+added\n-removed\n context\n"


def test_patch_content_load_and_filter():
    pc = PatchContent("utf-8")
    pc.feed(DIFF)
    pc.finish()
    assert pc.loaded
    assert "-removed" in pc.text.split("\n")
    pc.previous_filter = pc.current_filter
    pc.current_filter = PatchFilter.VIEW_ADDED
    pc.refresh()
    lines = pc.text.split("\n")
    assert "-removed" not in lines
    assert "+added" in lines


def test_patch_content_chunked_feed():
    pc = PatchContent("utf-8")
    pc.feed(b"line1\npart")
    assert pc.text == "line1"
    pc.feed(b"ial")
    pc.finish()
    assert pc.text.split("\n")[:2] == ["line1", "partial"]


def test_patch_content_highlight():
    pc = PatchContent("utf-8")
    pc.feed(DIFF)
    pc.finish()
    assert pc.matches == []
    pc.set_highlight("ADDED")
    assert pc.matches
    span = match_in_line(pc.matches, 1)
    line = pc.text.split("\n")[1]
    assert line[span[0] : span[1]] == "added"


def test_patch_content_clear():
    pc = PatchContent("utf-8")
    pc.feed(DIFF)
    pc.finish()
    pc.clear()
    assert (pc.text, bytes(pc.raw), pc.loaded) == ("", b"", False)