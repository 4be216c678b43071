"""Tests for the notes adapter."""

import pytest

from axtract.domains import notes


@pytest.fixture
def sidebar(window_content):
    return window_content(
        {
            "role": "AXWindow",
            "title": "Notes",
            "children": [
                {
                    "role": "AXRow",
                    "title": "Groceries",
                    "children": [
                        {"role": "AXStaticText", "value": "10/3/24"},
                        {"role": "AXStaticText", "value": "Milk, eggs"},
                    ],
                },
                {
                    "role": "AXRow",
                    "title": "Trip ideas",
                    "children": [
                        {"role": "AXStaticText", "value": "Yesterday"},
                        {"role": "AXStaticText", "value": "Lisbon in spring"},
                    ],
                },
                {"role": "AXRow", "children": [{"role": "AXStaticText", "value": "orphan"}]},
            ],
        },
        application_name="Notes",
    )


class TestNoteList:
    """Test sidebar extraction."""

    def test_titles(self, sidebar):
        """Test that titled rows become notes and untitled rows are dropped."""
        assert [n.title for n in notes.parse(sidebar)] == ["Groceries", "Trip ideas"]

    def test_date_and_preview(self, sidebar):
        """Test the modified date and preview columns."""
        groceries, trip = notes.parse(sidebar)

        assert groceries.modified_date == "10/3/24"
        assert groceries.preview == "Milk, eggs"
        assert trip.modified_date == "Yesterday"
        assert trip.preview == "Lisbon in spring"

    def test_search(self, sidebar):
        """Test case-insensitive title search."""
        listed = notes.parse(sidebar)

        assert [n.title for n in notes.search(listed, "TRIP")] == ["Trip ideas"]
        assert notes.search(listed, "taxes") == []


class TestCurrentNote:
    """Test the note editor."""

    def test_editor(self, window_content):
        """Test title, body, checklist and attachment detection."""
        content = window_content(
            {
                "role": "AXWindow",
                "title": "Groceries - Notes",
                "children": [
                    {"role": "AXTextArea", "value": "Groceries"},
                    {"role": "AXTextArea", "value": "Milk"},
                    {"role": "AXTextArea", "value": "Eggs"},
                    {"role": "AXCheckBox"},
                    {"role": "AXImage"},
                ],
            }
        )

        note = notes.parse_current_note(content)

        assert note.title == "Groceries"
        assert note.body == "Milk\nEggs"
        assert note.has_checklist
        assert note.has_attachments

    def test_title_from_window(self, window_content):
        """Test falling back to the window title and visible text."""
        content = window_content(
            {
                "role": "AXWindow",
                "title": "Trip ideas - Notes",
                "children": [{"role": "AXGroup", "value": "Lisbon"}],
            }
        )

        note = notes.parse_current_note(content)

        assert note.title == "Trip ideas"
        assert note.body == "Lisbon"
        assert not note.has_checklist

    def test_no_title(self, window_content):
        """Test that an untitled editor yields None."""
        assert notes.parse_current_note(window_content({"role": "AXWindow", "title": "Notes"})) is None


class TestFolders:
    """Test folder helpers."""

    @pytest.mark.parametrize(
        "text,expected",
        [("Recently Deleted", True), ("Work", True), ("report.pdf", False)],
    )
    def test_is_folder_name(self, text, expected):
        """Test known names and extension-less labels."""
        assert notes.is_folder_name(text) is expected

    def test_folders(self, window_content):
        """Test that only source-list roles are considered."""
        content = window_content(
            {
                "role": "AXWindow",
                "children": [
                    {"role": "AXOutlineRow", "title": "Notes"},
                    {"role": "AXStaticText", "title": "Work"},
                    {"role": "AXStaticText", "title": "draft.txt"},
                    {"role": "AXButton", "title": "Shared"},
                ],
            }
        )

        assert notes.folders(content) == ["Notes", "Work"]
