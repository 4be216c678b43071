"""Tests for the mail adapter (Apple Mail and Outlook)."""

import pytest

from axtract.domains import mail
from axtract.domains.records import OutlookView
from axtract.model import WindowContent
from axtract.walker import walk


@pytest.fixture
def mail_list(host, mail_list_window):
    return walk(host, mail_list_window, application_name="Mail")


@pytest.fixture
def outlook_list(window_content):
    return window_content(
        {
            "role": "AXWindow",
            "title": "Inbox",
            "children": [
                {"role": "AXButton", "title": "New Email"},
                {"role": "AXButton", "title": "Reply"},
                {
                    "role": "AXTable",
                    "children": [
                        {
                            "role": "AXRow",
                            "children": [
                                {"role": "AXStaticText", "value": "carol@corp.com"},
                                {"role": "AXStaticText", "value": "Yesterday"},
                                {"role": "AXStaticText", "value": "Q3 planning kickoff"},
                                {"role": "AXStaticText", "value": "Please review"},
                            ],
                        },
                        {
                            "role": "AXRow",
                            "children": [
                                {"role": "AXStaticText", "value": "dave@corp.com"},
                                {"role": "AXStaticText", "value": "Lunch"},
                                {"role": "AXStaticText", "value": "Offsite agenda"},
                            ],
                        },
                    ],
                },
            ],
        },
        application_name="Microsoft Outlook",
    )


class TestMessageLists:
    """Test message list extraction."""

    def test_apple_mail_rows(self, mail_list):
        """Test that each row becomes a message and the empty row is dropped."""
        messages = mail.parse(mail_list)

        assert [m.subject for m in messages] == ["Team Meeting", "Standup"]

    def test_apple_mail_fields(self, mail_list):
        """Test sender, date and preview assignment."""
        first = mail.parse(mail_list)[0]

        assert first.sender == "alice@example.com"
        assert first.date == "2:00 PM"
        assert first.preview == "Agenda attached"
        assert first.recipient is None

    def test_outlook_rows(self, outlook_list):
        """Test that toolbar labels never become messages."""
        messages = mail.parse_outlook(outlook_list)

        assert [m.subject for m in messages] == ["Q3 planning kickoff", "Offsite agenda"]
        assert messages[0].date == "Yesterday"

    def test_outlook_short_text_is_preview(self, outlook_list):
        """Test that a subject must be longer than five characters."""
        second = mail.parse_outlook(outlook_list)[1]

        assert second.preview == "Lunch"


class TestCurrentMessage:
    """Test the message viewer."""

    def test_apple_mail_viewer(self, window_content):
        """Test header detection and body collection."""
        content = window_content(
            {
                "role": "AXWindow",
                "title": "Q3 Budget",
                "children": [
                    {"role": "AXStaticText", "value": "alice@example.com"},
                    {"role": "AXStaticText", "value": "me@example.com"},
                    {"role": "AXStaticText", "value": "Subject: Q3 Budget"},
                    {"role": "AXStaticText", "value": "Hi team,"},
                    {"role": "AXStaticText", "value": "Numbers attached."},
                ],
            }
        )

        message = mail.parse_current_message(content)

        assert message.sender == "alice@example.com"
        assert message.recipient == "me@example.com"
        assert message.subject == "Q3 Budget"
        assert message.body == "Hi team,\nNumbers attached."

    def test_outlook_viewer(self, window_content):
        """Test Outlook's layout, where the subject comes first."""
        content = window_content(
            {
                "role": "AXWindow",
                "children": [
                    {"role": "AXStaticText", "value": "Quarterly results"},
                    {"role": "AXStaticText", "value": "carol@corp.com"},
                    {"role": "AXStaticText", "value": "See attached deck"},
                ],
            }
        )

        message = mail.parse_current_message(content, outlook=True)

        assert message.subject == "Quarterly results"
        assert message.sender == "carol@corp.com"
        assert message.body == "See attached deck"

    def test_no_text(self, window_content):
        """Test that a window without text has no current message."""
        assert mail.parse_current_message(window_content({"role": "AXWindow"})) is None


class TestMailboxes:
    """Test sidebar and badge helpers."""

    def test_apple_mail_mailboxes(self, window_content):
        """Test that known mailbox names are listed."""
        content = window_content(
            {
                "role": "AXWindow",
                "children": [
                    {"role": "AXOutlineRow", "title": "Inbox"},
                    {"role": "AXOutlineRow", "title": "Sent Messages"},
                    {"role": "AXOutlineRow", "title": "Projects"},
                    {"role": "AXButton", "title": "Trash"},
                ],
            }
        )

        assert mail.mailboxes(content) == ["Inbox", "Sent Messages"]

    def test_outlook_folders(self, window_content):
        """Test Outlook folder names."""
        content = window_content(
            {
                "role": "AXWindow",
                "children": [
                    {"role": "AXCell", "title": "Deleted Items"},
                    {"role": "AXCell", "title": "Focused"},
                    {"role": "AXCell", "title": "Receipts"},
                ],
            }
        )

        assert mail.mailboxes(content, outlook=True) == ["Deleted Items", "Focused"]

    def test_apple_mail_unread_count(self, window_content):
        """Test the numeric badge."""
        content = window_content(
            {
                "role": "AXWindow",
                "children": [
                    {"role": "AXStaticText", "value": "Inbox"},
                    {"role": "AXStaticText", "value": "3"},
                ],
            }
        )

        assert mail.unread_count(content) == 3
        assert mail.unread_count(window_content({"role": "AXWindow"})) is None

    @pytest.mark.parametrize(
        "row,expected",
        [
            ({"role": "AXOutlineRow", "title": "Inbox (5)"}, 5),
            ({"role": "AXCell", "title": "Inbox", "value": "7"}, 7),
            ({"role": "AXCell", "title": "Inbox"}, None),
        ],
    )
    def test_outlook_unread_count(self, window_content, row, expected):
        """Test the Inbox value and the parenthesized count."""
        content = window_content({"role": "AXWindow", "children": [row]})

        assert mail.unread_count(content, outlook=True) == expected


class TestCompose:
    """Test compose window detection and reading."""

    @pytest.fixture
    def compose_window(self, window_content):
        return window_content(
            {
                "role": "AXWindow",
                "title": "New Message",
                "children": [
                    {"role": "AXTextField", "title": "To", "value": "bob@example.com"},
                    {"role": "AXTextField", "title": "Subject", "value": "Hello"},
                    {"role": "AXTextArea", "value": "Body text"},
                ],
            }
        )

    def test_is_composing(self, compose_window, mail_list):
        """Test compose detection by title."""
        assert mail.is_composing(compose_window)
        assert not mail.is_composing(mail_list)

    def test_field_label_marks_compose(self, window_content):
        """Test compose detection by header field label."""
        content = window_content(
            {"role": "AXWindow", "children": [{"role": "AXTextField", "title": "Cc"}]}
        )

        assert mail.is_composing(content)

    def test_compose_fields(self, compose_window):
        """Test header fields and body."""
        fields = mail.compose_fields(compose_window)

        assert fields.to == "bob@example.com"
        assert fields.subject == "Hello"
        assert fields.cc is None
        assert "Body text" in fields.body

    def test_not_composing(self, mail_list):
        """Test that a list window has no compose fields."""
        assert mail.compose_fields(mail_list) is None


class TestOutlookView:
    """Test which Outlook module a window shows."""

    @pytest.mark.parametrize(
        "tree,expected",
        [
            ({"role": "AXWindow", "title": "Calendar - Outlook"}, OutlookView.CALENDAR),
            (
                {"role": "AXWindow", "title": "Outlook", "children": [{"role": "AXButton", "title": "Calendar"}]},
                OutlookView.CALENDAR,
            ),
            ({"role": "AXWindow", "title": "People"}, OutlookView.CONTACTS),
            (
                {"role": "AXWindow", "title": "Outlook", "children": [{"role": "AXButton", "title": "To Do"}]},
                OutlookView.TASKS,
            ),
            ({"role": "AXWindow", "title": "Inbox - Outlook"}, OutlookView.MAIL),
        ],
    )
    def test_outlook_view(self, window_content, tree, expected):
        """Test title and label keywords."""
        assert mail.outlook_view(window_content(tree)) is expected

    def test_empty_window(self):
        """Test that an empty read is unknown."""
        assert mail.outlook_view(WindowContent()) is OutlookView.UNKNOWN
