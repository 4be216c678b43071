"""Declarative classifier configurations for every supported domain.

Each profile names the boundary roles that start a record, the ordered
field-guess chain and the fields a record needs before it is kept. The
adapter modules only project the resulting records into typed dataclasses.
"""

from collections.abc import Sequence

from ..classification.classifier import (
    DomainProfile,
    FieldRule,
    role_contains,
    role_in,
    title_or_value,
    value_or_title,
)
from ..classification.heuristics import (
    is_short,
    looks_like_chat_time,
    looks_like_email_address,
    looks_like_list_date,
    looks_like_person_name,
    looks_like_time_label,
    starts_with_any,
)
from ..model.snapshot import UIElementSnapshot
from ..patterns.text_extraction import contains_date

# Toolbar and sidebar labels that are never record content
OUTLOOK_CHROME = (
    "New Email",
    "Reply",
    "Forward",
    "Delete",
    "Archive",
    "Flag",
    "Move",
    "More",
    "Filter",
    "Search",
    "Sync",
    "Inbox",
    "Sent",
    "Drafts",
    "Calendar",
    "Contacts",
)

TEAMS_CHROME = (
    "New chat",
    "Search",
    "Settings",
    "More",
    "Filter",
    "Activity",
    "Chat",
    "Teams",
    "Calendar",
    "Calls",
    "Files",
    "Mute",
    "Unmute",
    "Camera",
    "Share",
    "Leave",
    "Reactions",
)

BROWSER_CHROME = ("Close", "Minimize", "Zoom", "Back", "Forward", "Reload", "Home")

PHOTOS_CHROME = (
    "Close",
    "Zoom",
    "Minimize",
    "Share",
    "Edit",
    "Info",
    "Rotate",
    "Favorite",
    "Delete",
    "Add to",
    "More",
)

FINDER_CHROME = ("Back", "Forward", "View", "Action", "Share", "Tags", "Search", "Sort", "Group")


def is_outlook_chrome(value: str) -> bool:
    return value in OUTLOOK_CHROME


def is_teams_chrome(value: str) -> bool:
    return starts_with_any(value, TEAMS_CHROME)


def is_browser_chrome(value: str) -> bool:
    return value in BROWSER_CHROME


def is_photos_chrome(value: str) -> bool:
    return starts_with_any(value, PHOTOS_CHROME)


def is_finder_chrome(value: str) -> bool:
    return value in FINDER_CHROME


def element_title(element: UIElementSnapshot) -> Sequence[str | None]:
    return (element.title,)


def title_or_description(element: UIElementSnapshot) -> Sequence[str | None]:
    return (element.title or element.description,)


def strip_subject_prefix(value: str) -> str:
    index = value.lower().find("subject:")
    return value[index + len("subject:") :].strip() if index >= 0 else value.strip()


def _has_subject_prefix(value: str) -> bool:
    return "subject:" in value.lower()


def _longer_than_five(value: str) -> bool:
    return len(value) > 5


def _longer_than_two(value: str) -> bool:
    return len(value) > 2


def _names_a_chat(value: str) -> bool:
    return looks_like_person_name(value) or "Chat" in value


def _short_date(value: str) -> bool:
    return is_short(value, 40) and contains_date(value)


# Calendar

CALENDAR_LIST = DomainProfile(
    name="calendar.list",
    boundary=role_contains("Cell", "Row", "Group"),
    rules=(
        FieldRule("time", looks_like_time_label),
        FieldRule("end_time", looks_like_time_label),
        FieldRule("title", is_short),
        FieldRule("location", is_short),
    ),
    catch_all="notes",
    catch_all_separator="\n",
    required_fields=("title",),
)

# Editable fields of the event editor, in on-screen order
CALENDAR_EDITOR = DomainProfile(
    name="calendar.editor",
    rules=(
        FieldRule("title", max_index=1),
        FieldRule("location", max_index=2),
    ),
    catch_all="notes",
    catch_all_separator="\n",
    required_fields=("title",),
)

# One event per calendar cell or block; its title carries the time
OUTLOOK_EVENTS = DomainProfile(
    name="outlook.events",
    boundary=role_in("AXCell", "AXGroup"),
    rules=(FieldRule("title", _longer_than_two, roles=frozenset({"AXCell", "AXGroup"})),),
    ignore=is_outlook_chrome,
    value_source=title_or_value,
    one_record_per_value=True,
    required_fields=("title",),
)

# Mail

MAIL_LIST = DomainProfile(
    name="mail.list",
    boundary=role_contains("Row", "Cell"),
    rules=(
        FieldRule("sender", looks_like_email_address),
        FieldRule("recipient", looks_like_email_address),
        FieldRule("date", looks_like_list_date),
        FieldRule("subject"),
        FieldRule("preview"),
    ),
    required_fields=("subject",),
)

MAIL_VIEWER = DomainProfile(
    name="mail.viewer",
    rules=(
        FieldRule("sender", looks_like_email_address),
        FieldRule("recipient", looks_like_email_address),
        FieldRule("subject", _has_subject_prefix, transform=strip_subject_prefix),
        FieldRule("subject", max_index=3),
    ),
    catch_all="body",
    catch_all_separator="\n",
    required_fields=("subject",),
)

OUTLOOK_LIST = DomainProfile(
    name="outlook.list",
    boundary=role_in("AXRow", "AXCell"),
    rules=(
        FieldRule("sender", looks_like_email_address),
        FieldRule("recipient", looks_like_email_address),
        FieldRule("date", looks_like_list_date),
        FieldRule("subject", _longer_than_five),
        FieldRule("preview"),
    ),
    ignore=is_outlook_chrome,
    value_source=value_or_title,
    required_fields=("subject",),
)

OUTLOOK_VIEWER = DomainProfile(
    name="outlook.viewer",
    rules=(
        FieldRule("sender", looks_like_email_address),
        FieldRule("subject", _has_subject_prefix, transform=strip_subject_prefix),
        FieldRule("subject", _longer_than_five, max_index=5),
    ),
    catch_all="body",
    catch_all_separator="\n",
    required_fields=("subject",),
)

# Chat

CHAT_MESSAGES = DomainProfile(
    name="chat.messages",
    boundary=role_in("AXGroup", "AXListItem"),
    rules=(
        FieldRule("sender", looks_like_person_name),
        FieldRule("timestamp", looks_like_chat_time),
        FieldRule("content", accumulate=True),
    ),
    ignore=is_teams_chrome,
    value_source=value_or_title,
    required_fields=("content",),
)

CHAT_THREADS = DomainProfile(
    name="chat.threads",
    boundary=role_in("AXCell", "AXRow"),
    rules=(
        FieldRule("name", _names_a_chat, roles=frozenset({"AXCell", "AXRow"})),
        FieldRule("last_message_time", looks_like_chat_time),
        FieldRule("last_message"),
    ),
    value_source=title_or_value,
    required_fields=("name",),
)

# Notes

NOTES_LIST = DomainProfile(
    name="notes.list",
    boundary=role_in("AXRow", "AXCell"),
    rules=(
        FieldRule("title", roles=frozenset({"AXRow", "AXCell"})),
        FieldRule("modified_date", _short_date),
        FieldRule("preview"),
    ),
    value_source=title_or_value,
    required_fields=("title",),
)

# Browser

BROWSER_TABS = DomainProfile(
    name="browser.tabs",
    boundary=role_in("AXRadioButton", "AXButton"),
    rules=(FieldRule("title", roles=frozenset({"AXRadioButton", "AXButton"})),),
    ignore=is_browser_chrome,
    value_source=element_title,
    one_record_per_value=True,
    required_fields=("title",),
)

# Photos

PHOTOS_GRID = DomainProfile(
    name="photos.grid",
    boundary=role_in("AXImage", "AXButton"),
    rules=(FieldRule("title", roles=frozenset({"AXImage", "AXButton"})),),
    ignore=is_photos_chrome,
    value_source=title_or_description,
    one_record_per_value=True,
    required_fields=("title",),
)

# Finder

FINDER_ITEMS = DomainProfile(
    name="finder.items",
    boundary=role_in("AXCell", "AXIcon", "AXRow"),
    rules=(FieldRule("name", roles=frozenset({"AXCell", "AXIcon", "AXRow"})),),
    ignore=is_finder_chrome,
    value_source=title_or_value,
    one_record_per_value=True,
    required_fields=("name",),
)
