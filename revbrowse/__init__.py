"""View logic of a git revision browser: patches, refs, ranges, trees and settings."""

__version__ = "2.10"

__all__ = [
    "config",
    "textutil",
    "mimeicons",
    "patch",
    "patchview",
    "ranges",
    "settingsmodel",
    "smartbrowse",
    "revdesc",
    "treeview",
    "revsview",
]