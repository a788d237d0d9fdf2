"""Tree of repository files and directories, loaded one directory at a time."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .config import ZERO_SHA
from .mimeicons import FOLDER_CLOSED, FOLDER_OPEN, icon_for

# (type, sha, name) as listed by git ls-tree; type is "tree" for directories
TreeEntries = Iterable[tuple[str, str, str]]
TreeLoader = Callable[[str, bool, str], "TreeEntries | None"]


class FileItem:
    """A file shown in the tree."""

    is_dir = False

    def __init__(self, name: str, parent: DirItem | None = None) -> None:
        self.name = name
        self.parent = parent
        self.children: list[FileItem] = []
        self.bold = False
        if parent is not None:
            parent.children.append(self)

    @property
    def icon(self) -> str:
        return icon_for(self.name)

    @property
    def full_name(self) -> str:
        """Path from the repository root; the root directory itself has none."""
        if self.parent is None:
            return ""
        parts = [self.name]
        node = self.parent
        while node is not None and node.parent is not None:
            parts.append(node.name)
            node = node.parent
        return "/".join(reversed(parts))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_name or self.name!r})"


class DirItem(FileItem):
    """A directory shown in the tree, whose content is loaded on expansion."""

    is_dir = True

    def __init__(self, name: str, parent: DirItem | None = None, tree_sha: str = "") -> None:
        super().__init__(name, parent)
        self.tree_sha = tree_sha
        self.expanded = False
        self.loaded = False

    @property
    def icon(self) -> str:
        return icon_for(FOLDER_OPEN if self.expanded else FOLDER_CLOSED)


class FileTree:
    """Files and directories of one revision, fetched lazily through ``loader``.

    ``loader(tree_sha, is_working_dir, tree_path)`` returns the entries of a
    directory, or None when they cannot be read.
    """

    def __init__(
        self,
        loader: TreeLoader,
        modified_files: Iterable[str] = (),
        modified_dirs: Iterable[str] = (),
    ) -> None:
        self._loader = loader
        self.modified_files = set(modified_files)
        self.modified_dirs = set(modified_dirs)
        self.root: DirItem | None = None
        self.tree_is_valid = False
        self.is_working_dir = False

    def set_root(self, tree_sha: str, name: str = "") -> DirItem | None:
        """Replace the tree with the one of ``tree_sha`` and expand its root."""
        self.root = None
        self.tree_is_valid = True
        self.is_working_dir = tree_sha == ZERO_SHA
        if not tree_sha:
            return None
        self.root = DirItem(name, None, tree_sha)
        self.expand(self.root)
        return self.root

    def expand(self, item: DirItem) -> bool:
        """Open a directory, loading its entries the first time; False on failure."""
        item.expanded = True
        if item.loaded:
            return True
        entries = self._loader(item.tree_sha, self.is_working_dir, item.full_name)
        self.tree_is_valid = entries is not None
        if entries is None:
            return False
        for kind, sha, name in entries:
            if kind == "tree":
                child: FileItem = DirItem(name, item, sha)
                child.bold = self.is_modified(child.full_name, True)
            else:
                child = FileItem(name, item)
                child.bold = self.is_modified(child.full_name)
        item.loaded = True
        return True

    def locate(self, file_name: str) -> FileItem | None:
        """Return the item at ``file_name``, expanding directories on the way."""
        if self.root is None or not self.tree_is_valid or not file_name:
            return None
        node: FileItem = self.root
        for part in file_name.split("/"):
            if not isinstance(node, DirItem):
                return None
            if not node.loaded and not self.expand(node):
                return None
            child = next((c for c in node.children if c.name == part), None)
            if child is None:
                return None
            if isinstance(child, DirItem) and not self.expand(child):
                return None
            node = child
        return node

    def is_modified(self, path: str, is_dir: bool = False) -> bool:
        """Return True when ``path`` has changes in the working directory."""
        return path in (self.modified_dirs if is_dir else self.modified_files)