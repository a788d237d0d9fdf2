import pytest

from revbrowse.revsview import (
    lane_target,
    lanes_menu,
    revision_not_found_message,
    short_hash,
    toggle_diff_index,
)


@pytest.mark.parametrize("stacked,tab", [(0, 0), (0, 1), (1, 0), (2, 1)])
def test_toggle_is_involution(stacked, tab):
    once = toggle_diff_index(stacked, tab)
    assert once != (stacked, tab)
    assert toggle_diff_index(*once) == (stacked, tab)


def test_toggle_tab_layout_keeps_stack():
    new_stacked, new_tab = toggle_diff_index(0, 0)
    assert new_stacked == 0
    assert new_tab == 1


def test_toggle_stacked_layout_keeps_tab():
    assert toggle_diff_index(1, 0)[1] == 0
    assert toggle_diff_index(1, 0)[0] == 2


def test_lanes_menu_order_and_fallback():
    logs = {"c1": "child one", "p1": "parent one", "p2": ""}
    entries = lanes_menu(["p1", "p2"], ["c1"], logs.get)
    assert entries == ["Child: child one", "Parent: parent one", "Parent: p2"]


def test_lane_target_matches_menu_order():
    parents, children = ["p1", "p2"], ["c1", "c2"]
    targets = [lane_target(parents, children, i) for i in range(4)]
    assert targets == children + parents


def test_lane_target_out_of_range():
    with pytest.raises(IndexError):
        lane_target(["p"], ["c"], 2)
    with pytest.raises(IndexError):
        lane_target(["p"], [], -1)


def test_short_hash():
    sha = "0123456789abcdef0123456789abcdef01234567"
    assert short_hash(sha, 7, True) == sha[:7]
    assert short_hash(sha, 7, False) == sha


def test_revision_not_found_message():
    msg = revision_not_found_message("abc")
    assert msg.startswith("Sorry, revision abc")
    assert msg.endswith("has not been found in main view")