"""Tests for the Teams chat adapter."""

import pytest

from axtract.domains import chat


@pytest.fixture
def conversation(window_content):
    return window_content(
        {
            "role": "AXWindow",
            "title": "Chat - Ada Lovelace - Microsoft Teams",
            "children": [
                {"role": "AXButton", "title": "New chat"},
                {
                    "role": "AXGroup",
                    "children": [
                        {"role": "AXStaticText", "value": "Ada Lovelace"},
                        {"role": "AXStaticText", "value": "10:42 AM"},
                        {"role": "AXStaticText", "value": "Morning all,"},
                        {"role": "AXStaticText", "value": "ready for review?"},
                    ],
                },
                {
                    "role": "AXGroup",
                    "children": [
                        {"role": "AXStaticText", "value": "Grace Hopper"},
                        {"role": "AXStaticText", "value": "Yesterday"},
                        {"role": "AXStaticText", "value": "ship it"},
                    ],
                },
                {"role": "AXGroup", "children": [{"role": "AXStaticText", "value": "Charles"}]},
                {"role": "AXGroup", "children": [{"role": "AXButton", "title": "Mute"}]},
            ],
        },
        application_name="Microsoft Teams",
    )


class TestMessages:
    """Test conversation extraction."""

    def test_messages_in_order(self, conversation):
        """Test that each group with content is one message."""
        messages = chat.parse(conversation)

        assert [m.sender for m in messages] == ["Ada Lovelace", "Grace Hopper"]

    def test_content_accumulates(self, conversation):
        """Test that message lines are joined."""
        first = chat.parse(conversation)[0]

        assert first.content == "Morning all, ready for review?"
        assert first.timestamp == "10:42 AM"

    def test_chrome_is_ignored(self, conversation):
        """Test that toolbar labels never become content."""
        assert all("Mute" not in m.content for m in chat.parse(conversation))


class TestThreadsAndChannels:
    """Test the recent-chats list and the channel tree."""

    def test_parse_chats(self, window_content):
        """Test that rows without a recognizable name are dropped."""
        content = window_content(
            {
                "role": "AXWindow",
                "title": "Microsoft Teams",
                "children": [
                    {
                        "role": "AXRow",
                        "title": "Ada Lovelace",
                        "children": [
                            {"role": "AXStaticText", "value": "9:15 AM"},
                            {"role": "AXStaticText", "value": "See you then"},
                        ],
                    },
                    {
                        "role": "AXRow",
                        "title": "design sync",
                        "children": [{"role": "AXStaticText", "value": "notes posted"}],
                    },
                    {
                        "role": "AXRow",
                        "title": "Grace Hopper",
                        "children": [{"role": "AXStaticText", "value": "Thanks!"}],
                    },
                ],
            }
        )

        threads = chat.parse_chats(content)

        assert [t.name for t in threads] == ["Ada Lovelace", "Grace Hopper"]
        assert threads[0].last_message_time == "9:15 AM"
        assert threads[0].last_message == "See you then"
        assert threads[1].last_message == "Thanks!"

    def test_parse_channels(self, window_content):
        """Test that channels are attributed to the preceding team."""
        content = window_content(
            {
                "role": "AXWindow",
                "children": [
                    {"role": "AXOutlineRow", "title": "Engineering"},
                    {"role": "AXStaticText", "value": "General"},
                    {"role": "AXStaticText", "value": "#releases"},
                    {"role": "AXStaticText", "value": "random"},
                    {"role": "AXOutlineRow", "title": "Design"},
                    {"role": "AXCell", "title": "General"},
                ],
            }
        )

        channels = chat.parse_channels(content)

        assert [c.full_name for c in channels] == [
            "Engineering > General",
            "Engineering > releases",
            "Design > General",
        ]


class TestMeetings:
    """Test call detection."""

    @pytest.fixture
    def call_window(self, window_content):
        return window_content(
            {
                "role": "AXWindow",
                "children": [
                    {"role": "AXHeading", "title": "Weekly sync"},
                    {"role": "AXStaticText", "value": "12:04"},
                    {"role": "AXStaticText", "value": "5 participants"},
                    {"role": "AXButton", "title": "Mute"},
                    {"role": "AXButton", "title": "Leave"},
                ],
            }
        )

    def test_is_in_meeting(self, call_window):
        """Test call control detection."""
        assert chat.is_in_meeting(call_window)

    def test_parse_meeting(self, call_window):
        """Test title, timer and participant count."""
        meeting = chat.parse_meeting(call_window)

        assert meeting.title == "Weekly sync"
        assert meeting.duration == "12:04"
        assert meeting.participant_count == 5

    def test_no_hang_up_control(self, window_content):
        """Test that without a leave button there is no call."""
        content = window_content(
            {"role": "AXWindow", "children": [{"role": "AXHeading", "title": "Weekly sync"}]}
        )

        assert chat.parse_meeting(content) is None
        assert not chat.is_in_meeting(content)


class TestHeaderHelpers:
    """Test chat name, participants and badges."""

    def test_name_from_window_title(self, conversation):
        """Test the middle segment of the window title."""
        assert chat.current_chat_name(conversation) == "Ada Lovelace"

    def test_name_from_heading(self, window_content):
        """Test falling back to the first non-toolbar heading."""
        content = window_content(
            {
                "role": "AXWindow",
                "title": "Microsoft Teams",
                "children": [
                    {"role": "AXStaticText", "title": "Activity"},
                    {"role": "AXHeading", "title": "Release planning"},
                ],
            }
        )

        assert chat.current_chat_name(content) == "Release planning"

    def test_participants(self, window_content):
        """Test that capitalized names are listed and toolbar labels are not."""
        content = window_content(
            {
                "role": "AXWindow",
                "children": [
                    {"role": "AXStaticText", "value": "Ada Lovelace"},
                    {"role": "AXStaticText", "value": "hello there"},
                    {"role": "AXButton", "title": "Settings"},
                    {"role": "AXStaticText", "value": "Grace Hopper"},
                ],
            }
        )

        assert chat.participants(content) == ["Ada Lovelace", "Grace Hopper"]

    def test_unread_count(self, window_content):
        """Test the first badge in range."""
        content = window_content(
            {
                "role": "AXWindow",
                "children": [
                    {"role": "AXStaticText", "value": "0"},
                    {"role": "AXStaticText", "value": "1500"},
                    {"role": "AXButton", "value": "4"},
                    {"role": "AXStaticText", "value": "3"},
                ],
            }
        )

        assert chat.unread_count(content) == 3
        assert chat.unread_count(window_content({"role": "AXWindow"})) is None
