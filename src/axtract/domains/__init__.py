"""Domain adapters.

Each adapter module exposes ``parse(content)`` returning typed records from
:mod:`axtract.domains.records`, plus the supplementary readers of its domain.
"""

from . import browser, calendar, chat, compiler, finder, mail, notes, photos, profiles, terminal
from .records import (
    BrowserTab,
    CalendarEvent,
    ChatChannel,
    ChatMessage,
    ChatThread,
    CompilerError,
    ComposeFields,
    FinderItem,
    LocationSource,
    MailMessage,
    MeetingStatus,
    Note,
    NoteSummary,
    OutlookView,
    PhotoItem,
    PhotoLocation,
    PhotoMetadata,
    Severity,
    TerminalSession,
    TravelLog,
)

__all__ = [
    "browser",
    "calendar",
    "chat",
    "compiler",
    "finder",
    "mail",
    "notes",
    "photos",
    "profiles",
    "terminal",
    "BrowserTab",
    "CalendarEvent",
    "ChatChannel",
    "ChatMessage",
    "ChatThread",
    "CompilerError",
    "ComposeFields",
    "FinderItem",
    "LocationSource",
    "MailMessage",
    "MeetingStatus",
    "Note",
    "NoteSummary",
    "OutlookView",
    "PhotoItem",
    "PhotoLocation",
    "PhotoMetadata",
    "Severity",
    "TerminalSession",
    "TravelLog",
]
