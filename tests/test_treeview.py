import pytest

from revbrowse.config import ZERO_SHA
from revbrowse.mimeicons import icon_for
from revbrowse.treeview import DirItem, FileItem, FileTree

TREES = {
    "root": [("tree", "srcsha", "src"), ("blob", "b1", "README.md")],
    "srcsha": [("tree", "libsha", "lib"), ("blob", "b2", "main.c")],
    "libsha": [("blob", "b3", "util.h")],
}


class Loader:
    def __init__(self, trees=TREES):
        self.trees = trees
        self.calls = []

    def __call__(self, sha, wd, path):
        self.calls.append((sha, wd, path))
        return self.trees.get(sha)


def test_full_name_excludes_root():
    root = DirItem("repo", None, "root")
    src = DirItem("src", root, "s")
    f = FileItem("main.c", src)
    assert root.full_name == ""
    assert src.full_name == "src"
    assert f.full_name == "src/main.c"
    assert root.children == [src]


def test_set_root_expands_and_marks_modified():
    loader = Loader()
    tree = FileTree(loader, modified_files={"README.md"}, modified_dirs={"src"})
    root = tree.set_root("root", "repo")
    assert [c.name for c in root.children] == ["src", "README.md"]
    assert root.children[0].bold is True
    assert root.children[1].bold is True
    assert root.children[0].is_dir and not root.children[1].is_dir
    assert loader.calls == [("root", False, "")]


def test_set_root_empty_sha():
    tree = FileTree(Loader())
    assert tree.set_root("") is None
    assert tree.root is None


def test_working_dir_flag_passed_to_loader():
    loader = Loader({ZERO_SHA: [("blob", "x", "a.txt")]})
    tree = FileTree(loader)
    tree.set_root(ZERO_SHA)
    assert tree.is_working_dir is True
    assert loader.calls == [(ZERO_SHA, True, "")]


def test_expand_loads_once():
    loader = Loader()
    tree = FileTree(loader)
    root = tree.set_root("root")
    src = root.children[0]
    assert tree.expand(src) is True
    assert tree.expand(src) is True
    assert loader.calls.count(("srcsha", False, "src")) == 1
    assert [c.full_name for c in src.children] == ["src/lib", "src/main.c"]


def test_expand_failure_invalidates_tree():
    tree = FileTree(Loader({"root": [("tree", "missing", "gone")]}))
    root = tree.set_root("root")
    assert tree.expand(root.children[0]) is False
    assert tree.tree_is_valid is False
    assert tree.locate("gone") is None


def test_icons_follow_expansion_and_names():
    tree = FileTree(Loader())
    root = tree.set_root("root")
    src, readme = root.children
    assert src.icon == icon_for("#folder_closed")
    tree.expand(src)
    assert src.icon == icon_for("#folder_open")
    assert readme.icon == icon_for("README.md")


def test_locate_nested_file():
    tree = FileTree(Loader())
    tree.set_root("root")
    item = tree.locate("src/lib/util.h")
    assert item.full_name == "src/lib/util.h"
    assert item.parent.expanded is True


def test_locate_directory_and_missing():
    tree = FileTree(Loader())
    tree.set_root("root")
    assert tree.locate("src/lib").is_dir is True
    assert tree.locate("src/nothing.c") is None
    assert tree.locate("README.md/x") is None
    assert tree.locate("") is None


def test_is_modified():
    tree = FileTree(Loader(), modified_files=["a/b.c"], modified_dirs=["a"])
    assert tree.is_modified("a/b.c") is True
    assert tree.is_modified("a", True) is True
    assert tree.is_modified("a") is False
    assert tree.is_modified("a/b.c", True) is False


def test_locate_without_root():
    tree = FileTree(Loader())
    with pytest.raises(AttributeError):
        tree.locate("src").name