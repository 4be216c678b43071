"""Finder adapter: directory contents, selection, path bar and sidebar.

Files and folders are the cells, icons and rows of a Finder window. Whether
an item is a folder is guessed from its name: names ending in a known file
extension are files, everything else is assumed to be a folder.
"""

from ..classification.classifier import classify
from ..model.snapshot import WindowContent
from .profiles import FINDER_ITEMS
from .records import FinderItem

FILE_EXTENSIONS = (
    "txt",
    "pdf",
    "doc",
    "docx",
    "xls",
    "xlsx",
    "jpg",
    "png",
    "gif",
    "mp3",
    "mp4",
    "mov",
    "zip",
    "dmg",
    "app",
)


def is_directory(name: str) -> bool:
    """Guess whether a Finder item name denotes a folder."""
    if "." in name and not name.startswith("."):
        extension = name.rsplit(".", 1)[1]
        if extension.lower() in FILE_EXTENSIONS:
            return False
    return True


def parse(content: WindowContent) -> list[FinderItem]:
    """Extract the items visible in a Finder window, toolbar buttons excluded."""
    items = []
    for record in classify(content.elements, FINDER_ITEMS):
        name = record["name"]
        items.append(FinderItem(name=name, is_directory=is_directory(name)))
    return items


def parse_selected(content: WindowContent) -> list[FinderItem]:
    """Items that are focused, plus every cell.

    Finder does not expose selection on list cells, so every named cell is
    reported as selected.
    """
    items = []
    for element in content.elements:
        if not (element.is_focused or element.role == "AXCell"):
            continue
        name = element.title or element.value
        if name:
            items.append(FinderItem(name=name, is_directory=is_directory(name), is_selected=True))
    return items


def focused_item(content: WindowContent) -> FinderItem | None:
    """The element holding keyboard focus, if it has a name."""
    for element in content.elements:
        if element.is_focused:
            name = element.title or element.value
            return FinderItem(name=name, is_selected=True) if name else None
    return None


def current_path(content: WindowContent) -> str | None:
    """Path shown in the path bar, else the window title."""
    for element in content.elements:
        if not element.has_role("AXStaticText", "AXButton"):
            continue
        text = element.value or element.title
        if text and text.startswith(("/", "~")):
            return text
    return content.window_title or None


def sidebar_items(content: WindowContent) -> list[str]:
    """Titles of the sidebar favourites and locations."""
    return [
        element.title
        for element in content.elements
        if element.has_role("AXOutlineRow", "AXCell") and element.title
    ]


def is_visible(items: list[FinderItem], name: str) -> bool:
    """Case-insensitive check that some item's name contains ``name``."""
    needle = name.lower()
    return any(needle in item.name.lower() for item in items)
