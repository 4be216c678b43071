"""Chat adapter for Microsoft Teams.

Message lists and the recent-chats sidebar go through the classifier; the
channel tree and call controls are read directly from element roles.
"""

import re

from ..classification.classifier import classify
from ..classification.heuristics import looks_like_duration, looks_like_person_name
from ..model.snapshot import WindowContent
from .profiles import CHAT_MESSAGES, CHAT_THREADS, is_teams_chrome
from .records import ChatChannel, ChatMessage, ChatThread, MeetingStatus

TEAMS_BUNDLE_IDS = ("com.microsoft.teams2", "com.microsoft.teams")

DEFAULT_WINDOW_TITLE = "Microsoft Teams"

# Controls only present while a call is running
CALL_CONTROLS = ("leave", "hang up", "mute", "camera", "share screen", "participants")
HANG_UP_CONTROLS = ("leave", "hang up")

_DIGITS_RE = re.compile(r"\d+")


def parse(content: WindowContent) -> list[ChatMessage]:
    """Extract messages from the open conversation."""
    return [
        ChatMessage(
            content=record["content"].strip(),
            sender=record.get("sender"),
            timestamp=record.get("timestamp"),
        )
        for record in classify(content.elements, CHAT_MESSAGES)
    ]


def parse_chats(content: WindowContent) -> list[ChatThread]:
    """Extract entries of the recent-chats list."""
    return [
        ChatThread(
            name=record["name"],
            last_message=record.get("last_message"),
            last_message_time=record.get("last_message_time"),
        )
        for record in classify(content.elements, CHAT_THREADS)
    ]


def parse_channels(content: WindowContent) -> list[ChatChannel]:
    """Extract channels from the teams tree.

    Outline rows name a team; the channel entries that follow belong to it.
    """
    channels: list[ChatChannel] = []
    current_team: str | None = None

    for element in content.elements:
        text = element.title or element.value
        if not text:
            continue
        if element.has_role("AXOutlineRow", "AXDisclosureTriangle"):
            current_team = text
        elif element.has_role("AXStaticText", "AXCell"):
            if text.startswith("#") or "General" in text:
                channels.append(ChatChannel(name=text.replace("#", "").strip(), team_name=current_team))

    return channels


def is_in_meeting(content: WindowContent) -> bool:
    """Detect call controls in the focused window."""
    for element in content.elements:
        text = (element.title or element.value or "").lower()
        if any(control in text for control in CALL_CONTROLS):
            return True
    return False


def parse_meeting(content: WindowContent) -> MeetingStatus | None:
    """Read the running call's title, timer and participant count.

    Returns:
        The call status, or None if no hang-up control is visible
    """
    meeting = MeetingStatus()
    in_call = False

    for element in content.elements:
        text = element.value or element.title
        if not text:
            continue
        lowered = text.lower()

        if any(control in lowered for control in HANG_UP_CONTROLS):
            in_call = True
        if element.role == "AXHeading" and meeting.title is None:
            meeting.title = text
        if looks_like_duration(text):
            meeting.duration = text
        if "participant" in lowered:
            digits = "".join(_DIGITS_RE.findall(text))
            if digits:
                meeting.participant_count = int(digits)

    return meeting if in_call else None


def current_chat_name(content: WindowContent) -> str | None:
    """Name of the open chat or channel.

    Taken from a window title such as ``Chat - Ada Lovelace - Microsoft Teams``,
    else from the first heading or static text that is not a toolbar label.
    """
    title = content.window_title
    if title and title != DEFAULT_WINDOW_TITLE:
        parts = title.split(" - ")
        if len(parts) >= 2:
            return parts[1]

    for element in content.elements:
        if element.has_role("AXHeading", "AXStaticText") and element.title:
            if not is_teams_chrome(element.title):
                return element.title
    return None


def participants(content: WindowContent) -> list[str]:
    """Names visible in the chat header or participant list."""
    names: list[str] = []
    for element in content.elements:
        text = element.value or element.title
        if text and looks_like_person_name(text) and not is_teams_chrome(text):
            names.append(text)
    return names


def unread_count(content: WindowContent) -> int | None:
    """Read the first notification badge between 1 and 999."""
    for element in content.elements:
        value = (element.value or "").strip()
        if not value.isdigit() or not 0 < int(value) < 1000:
            continue
        if element.role and ("Badge" in element.role or "StaticText" in element.role):
            return int(value)
    return None
