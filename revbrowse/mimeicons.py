"""Choice of a tree view icon for a file name."""

from __future__ import annotations

FOLDER_CLOSED = "#folder_closed"
FOLDER_OPEN = "#folder_open"
DEFAULT = "#default"

_ICONS: dict[str, str] = {
    FOLDER_CLOSED: "folder.svg",
    FOLDER_OPEN: "folder-open.svg",
    DEFAULT: "snap-page.svg",
    "CMakeLists.txt": "file/text-x-cmake.svg",
    "Dockerfile": "file/text-dockerfile.svg",
    "csv": "file/text-csv.svg",
    "c": "file/text-x-csrc.svg",
    "cpp": "file/text-x-c++src.svg",
    "h": "file/text-x-chdr.svg",
    "hpp": "file/text-x-c++hdr.svg",
    "txt": "file/text-x-generic.svg",
    "rtf": "file/text-rtf.svg",
    "sh": "file/text-x-script.svg",
    "perl": "file/application-x-perl.svg",
    "pl": "file/application-x-perl.svg",
    "py": "file/application-x-python-bytecode.svg",
    "java": "file/application-x-java.svg",
    "jar": "file/application-x-java.svg",
    "tar": "file/application-x-tar.svg",
    "gz": "file/application-x-ace.svg",
    "tgz": "file/application-x-compressed-tar.svg",
    "zip": "file/application-zip.svg",
    "bz": "file/application-x-bzip.svg",
    "bz2": "file/application-x-bzip.svg",
    "html": "file/text-html.svg",
    "xml": "file/dialog-xml-editor.svg",
    "bmp": "file/image-bmp.svg",
    "gif": "file/image-gif.svg",
    "jpg": "file/image-jpeg.svg",
    "jpeg": "file/image-jpeg.svg",
    "png": "file/image-png.svg",
    "svg": "file/image-svg+xml-compressed.svg",
    "tiff": "file/image-tiff.svg",
    "ico": "file/image-x-ico.svg",
    "xcf": "file/image-x-xcf.svg",
    "pbm": "file/image-x-generic.svg",
    "pgm": "file/image-x-generic.svg",
    "ppm": "file/image-x-generic.svg",
    "xbm": "file/image-x-generic.svg",
    "xpm": "file/image-x-generic.svg",
    "json": "file/application-json.svg",
    "pdf": "file/application-pdf.svg",
    "js": "file/application-x-javascript.svg",
    "go": "file/text-x-go.svg",
    "md": "file/text-x-markdown.svg",
    "patch": "file/text-x-patch.svg",
    "qml": "file/text-x-qml.svg",
    "tex": "file/text-x-tex.svg",
    "rb": "file/application-x-ruby.svg",
    "rs": "file/text-rust.svg",
    "css": "file/text-css.svg",
    "cs": "file/text-x-csharp.svg",
    "r": "file/text-x-r.svg",
    "ui": "file/application-x-designer.svg",
    "pro": "file/project-development.svg",
    "sln": "file/project-development.svg",
    "vcproj": "file/project-development.svg",
    "vcxproj": "file/project-development.svg",
    "Makefile": "file/application-x-sharedlib.svg",
}


def icon_for(file_name: str) -> str:
    """Return the icon resource for a file: by full name, then by extension, else default."""
    if file_name in _ICONS:
        return _ICONS[file_name]
    ext = file_name.rsplit(".", 1)[-1].lower()
    return _ICONS.get(ext, _ICONS[DEFAULT])