"""Notes adapter: sidebar list and the open note."""

from ..classification.classifier import classify
from ..model.snapshot import WindowContent
from .profiles import NOTES_LIST
from .records import Note, NoteSummary

KNOWN_FOLDERS = ("All iCloud", "Notes", "Recently Deleted", "Shared", "All")


def parse(content: WindowContent) -> list[NoteSummary]:
    """Extract the notes listed in the sidebar."""
    return [
        NoteSummary(
            title=record["title"],
            preview=record.get("preview"),
            modified_date=record.get("modified_date"),
        )
        for record in classify(content.elements, NOTES_LIST)
    ]


def parse_current_note(content: WindowContent) -> Note | None:
    """Read the note open in the editor.

    The title is the first editable value, or the window title up to its
    last dash (``"Groceries - Notes"``). The body is the remaining editable
    text, falling back to all visible text.

    Returns:
        The note, or None if it has no title
    """
    note = Note()

    if content.editable_values:
        note.title = content.editable_values[0]
    else:
        head, dash, _ = content.window_title.rpartition("-")
        if dash:
            note.title = head.strip()

    if len(content.editable_values) > 1:
        note.body = "\n".join(content.editable_values[1:])
    elif content.values:
        note.body = "\n".join(content.values)

    for element in content.elements:
        if element.role == "AXImage":
            note.has_attachments = True
        elif element.role == "AXCheckBox":
            note.has_checklist = True

    return note if note.title else None


def is_folder_name(text: str) -> bool:
    """Known folder names, or any label without a file extension."""
    lowered = text.lower()
    return any(folder.lower() in lowered for folder in KNOWN_FOLDERS) or "." not in text


def folders(content: WindowContent) -> list[str]:
    """List folder names from the source list."""
    return [
        element.title
        for element in content.elements
        if element.has_role("AXOutlineRow", "AXStaticText")
        and element.title
        and is_folder_name(element.title)
    ]


def search(notes: list[NoteSummary], query: str) -> list[NoteSummary]:
    """Case-insensitive title search."""
    needle = query.lower()
    return [note for note in notes if needle in note.title.lower()]
