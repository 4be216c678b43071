"""Tests for snapshots, window content and generic records."""

import pytest

from axtract.model import (
    ClassifiedRecord,
    ErrorLocation,
    ExtractedPattern,
    PatternKind,
    UIElementSnapshot,
    WindowContent,
)


@pytest.fixture
def content():
    return WindowContent(
        application_name="Notes",
        window_title="Groceries",
        elements=(
            UIElementSnapshot(role="AXWindow", title="Groceries"),
            UIElementSnapshot(role="AXTextArea", value="Milk"),
            UIElementSnapshot(role="AXButton", title="Share"),
            UIElementSnapshot(role="AXStaticText", value="Edited today"),
            UIElementSnapshot(role="AXTextField", value="Search"),
        ),
        values=("Milk", "Edited today", "Search"),
        labels=("Groceries", "Share"),
        editable_values=("Milk", "Edited today", "Search"),
    )


class TestUIElementSnapshot:
    """Test snapshot helpers."""

    def test_defaults(self):
        """Test that absent attributes are unset and flags are False."""
        snapshot = UIElementSnapshot()

        assert snapshot.role is None
        assert snapshot.is_enabled is False
        assert snapshot.is_hidden is False
        assert snapshot.child_count == 0

    def test_text_priority(self):
        """Test value, then title, then description."""
        assert UIElementSnapshot(value="v", title="t").text == "v"
        assert UIElementSnapshot(value="", title="t", description="d").text == "t"
        assert UIElementSnapshot(description="d").text == "d"
        assert UIElementSnapshot().text is None

    def test_roles(self):
        """Test editable roles and role matching."""
        assert UIElementSnapshot(role="AXTextArea").is_editable
        assert not UIElementSnapshot(role="AXButton").is_editable
        assert UIElementSnapshot(role="AXRow").has_role("AXCell", "AXRow")
        assert not UIElementSnapshot().has_role("AXRow")

    def test_frozen(self):
        """Test that snapshots cannot be mutated."""
        snapshot = UIElementSnapshot(role="AXButton")

        with pytest.raises(AttributeError):
            snapshot.role = "AXRow"


class TestWindowContent:
    """Test window content queries and renderings."""

    def test_role_queries(self, content):
        """Test the role shortcuts."""
        assert [e.title for e in content.buttons] == ["Share"]
        assert [e.value for e in content.text_fields] == ["Milk", "Search"]
        assert [e.value for e in content.static_text] == ["Edited today"]
        assert content.elements_with_role("AXWindow")[0].title == "Groceries"

    def test_contains(self, content):
        """Test case handling of contains."""
        assert content.contains("milk")
        assert not content.contains("milk", case_sensitive=True)
        assert content.contains("Share")
        assert not content.contains("Eggs")

    def test_is_empty(self, content):
        """Test emptiness."""
        assert WindowContent().is_empty
        assert not content.is_empty

    def test_plain_text(self):
        """Test the sectioned plain text layout."""
        content = WindowContent(values=("a", "b"), labels=("L",), editable_values=("e",))

        assert content.as_plain_text() == (
            "=== Editable Content ===\ne\n\n"
            "=== Text Content ===\na\nb\n\n"
            "=== Labels & Descriptions ===\nL"
        )

    def test_plain_text_skips_empty_sections(self):
        """Test that empty sections are omitted."""
        assert WindowContent(labels=("L",)).as_plain_text() == "=== Labels & Descriptions ===\nL"
        assert WindowContent().as_plain_text() == ""

    def test_semantic_summary(self, content):
        """Test counts and the first editable values."""
        summary = content.semantic_summary()

        assert "- 3 editable text fields\n" in summary
        assert "- 2 labels\n" in summary
        assert "- 5 total UI elements\n" in summary
        assert summary.endswith("Primary content: Milk | Edited today | Search")

    def test_to_dict(self, content):
        """Test serialization."""
        data = content.to_dict()

        assert data["application_name"] == "Notes"
        assert data["values"] == ["Milk", "Edited today", "Search"]
        assert data["elements"][1]["role"] == "AXTextArea"


class TestClassifiedRecord:
    """Test the record mapping."""

    def test_fill_is_first_writer_wins(self):
        """Test that a filled field keeps its value."""
        record = ClassifiedRecord()

        assert record.fill("subject", "Hi")
        assert not record.fill("subject", "Bye")
        assert record["subject"] == "Hi"

    def test_empty_value_does_not_count_as_filled(self):
        """Test that an empty field can still be filled."""
        record = ClassifiedRecord()
        record.fill("subject", "")

        assert not record.is_filled("subject")
        assert record.fill("subject", "Hi")

    def test_append(self):
        """Test accumulation with a separator."""
        record = ClassifiedRecord()
        record.append("notes", "a")
        record.append("notes", "b", "\n")

        assert record.as_dict() == {"notes": "a\nb"}

    def test_mapping_protocol(self):
        """Test membership, iteration and equality."""
        record = ClassifiedRecord()
        record.fill("b", "2")
        record.fill("a", "1")

        assert "a" in record
        assert list(record) == ["b", "a"]
        assert len(record) == 2
        assert record == {"b": "2", "a": "1"}
        assert record.get("missing") is None

    def test_value_positions(self):
        """Test that note_value returns increasing positions."""
        record = ClassifiedRecord()

        assert [record.note_value() for _ in range(3)] == [0, 1, 2]
        assert record.value_count == 3


class TestExtractedPattern:
    """Test pattern serialization."""

    def test_to_dict_with_location(self):
        """Test that error locations are flattened."""
        pattern = ExtractedPattern(
            PatternKind.ERROR_LOCATION, "a.c:1:2", 0, 7, ErrorLocation("a.c", 1, 2)
        )

        assert pattern.to_dict() == {
            "kind": "error_location",
            "text": "a.c:1:2",
            "start": 0,
            "end": 7,
            "file": "a.c",
            "line": 1,
            "column": 2,
        }

    def test_to_dict_without_location(self):
        """Test plain matches."""
        data = ExtractedPattern(PatternKind.URL, "https://x.io", 3, 15).to_dict()

        assert data == {"kind": "url", "text": "https://x.io", "start": 3, "end": 15}
