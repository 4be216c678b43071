"""Typed records produced by the domain adapters.

Records are plain mutable dataclasses: adapters project a
:class:`ClassifiedRecord` into one of these and may enrich it afterwards.
Each record renders a human-readable ``summary``.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from ..catalog.bundle_identifiers import Browser, Terminal


class Severity(Enum):
    """Compiler diagnostic severity."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class OutlookView(Enum):
    """Top-level Outlook module shown in a window."""

    MAIL = "mail"
    CALENDAR = "calendar"
    CONTACTS = "contacts"
    TASKS = "tasks"
    UNKNOWN = "unknown"


class LocationSource(Enum):
    """Where a photo location was read from."""

    PHOTO_METADATA = "photo_metadata"
    GPS = "gps"


def _serialize(record: Any) -> dict[str, Any]:
    data = asdict(record)
    for key, value in data.items():
        if isinstance(value, Enum):
            data[key] = value.value
    return data


@dataclass
class CalendarEvent:
    """A calendar entry as shown in a day/week list or an event editor."""

    title: str = ""
    time: str | None = None
    location: str | None = None
    url: str | None = None
    notes: str | None = None
    attendees: list[str] = field(default_factory=list)
    calendar: str | None = None
    is_all_day: bool = False

    @property
    def summary(self) -> str:
        lines = [self.title]
        if self.time:
            lines.append(f"Time: {self.time}")
        if self.location:
            lines.append(f"Location: {self.location}")
        if self.attendees:
            lines.append(f"Attendees: {', '.join(self.attendees)}")
        if self.url:
            lines.append(f"URL: {self.url}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)


@dataclass
class MailMessage:
    """A message from a mailbox list or the message viewer."""

    subject: str = ""
    sender: str | None = None
    recipient: str | None = None
    date: str | None = None
    preview: str | None = None
    body: str | None = None
    is_read: bool = True
    has_attachments: bool = False

    @property
    def summary(self) -> str:
        lines: list[str] = []
        if self.sender:
            lines.append(f"From: {self.sender}")
        if self.recipient:
            lines.append(f"To: {self.recipient}")
        lines.append(f"Subject: {self.subject}")
        if self.date:
            lines.append(f"Date: {self.date}")
        if self.preview:
            lines.append(f"Preview: {self.preview}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)


@dataclass
class ComposeFields:
    """Header and body fields of an open compose window."""

    to: str | None = None
    cc: str | None = None
    bcc: str | None = None
    subject: str | None = None
    body: str | None = None

    @property
    def summary(self) -> str:
        parts = [
            f"{label}: {value}"
            for label, value in (("To", self.to), ("Cc", self.cc), ("Subject", self.subject))
            if value
        ]
        return "\n".join(parts)


@dataclass
class ChatMessage:
    """One message in a chat or channel conversation."""

    content: str = ""
    sender: str | None = None
    timestamp: str | None = None
    is_read: bool = True

    @property
    def summary(self) -> str:
        parts: list[str] = []
        if self.sender:
            parts.append(self.sender)
        parts.append(self.content.strip())
        if self.timestamp:
            parts.append(f"({self.timestamp})")
        return ": ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)


@dataclass
class ChatThread:
    """An entry of the recent-chats list."""

    name: str = ""
    last_message: str | None = None
    last_message_time: str | None = None
    unread_count: int = 0
    is_group: bool = False

    @property
    def summary(self) -> str:
        if self.last_message:
            return f"{self.name}: {self.last_message}"
        return self.name


@dataclass
class ChatChannel:
    """A channel and the team it belongs to."""

    name: str = ""
    team_name: str | None = None
    unread_count: int = 0

    @property
    def full_name(self) -> str:
        if self.team_name:
            return f"{self.team_name} > {self.name}"
        return self.name

    @property
    def summary(self) -> str:
        return self.full_name


@dataclass
class MeetingStatus:
    """State of an ongoing call."""

    title: str | None = None
    duration: str | None = None
    participant_count: int | None = None
    is_muted: bool = False
    is_camera_on: bool = False
    is_screen_sharing: bool = False

    @property
    def summary(self) -> str:
        parts: list[str] = []
        if self.title:
            parts.append(self.title)
        if self.duration:
            parts.append(f"Duration: {self.duration}")
        if self.participant_count is not None:
            parts.append(f"{self.participant_count} participants")
        return " - ".join(parts)


@dataclass
class Note:
    """The note open in the editor."""

    title: str = ""
    body: str | None = None
    folder: str | None = None
    has_attachments: bool = False
    has_checklist: bool = False
    modified_date: str | None = None

    @property
    def summary(self) -> str:
        lines = [self.title]
        if self.body:
            preview = self.body[:100]
            lines.append(preview + ("..." if len(self.body) > 100 else ""))
        return "\n".join(lines)

    @property
    def plain_text(self) -> str:
        return "\n\n".join(part for part in (self.title, self.body) if part is not None)

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)


@dataclass
class NoteSummary:
    """A row of the notes list."""

    title: str = ""
    preview: str | None = None
    folder: str | None = None
    modified_date: str | None = None

    @property
    def summary(self) -> str:
        if self.preview:
            return f"{self.title} - {self.preview}"
        return self.title

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)


@dataclass
class CompilerError:
    """A diagnostic reported by a compiler or editor."""

    message: str = ""
    severity: Severity = Severity.ERROR
    file: str | None = None
    line: int | None = None
    column: int | None = None
    raw_text: str = ""

    @property
    def summary(self) -> str:
        parts: list[str] = []
        if self.file:
            parts.append(self.file)
        if self.line is not None:
            parts.append(f"line {self.line}")
        if self.message:
            parts.append(self.message)
        return ": ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)


@dataclass
class BrowserTab:
    """A browser tab."""

    title: str = ""
    url: str | None = None
    browser: Browser | None = None
    is_active: bool = False

    @property
    def summary(self) -> str:
        parts = [self.title]
        if self.url:
            parts.append(self.url)
        if self.browser is not None:
            parts.append(f"({self.browser.display_name})")
        return " - ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)


@dataclass
class TerminalSession:
    """Visible state of one terminal window."""

    title: str = ""
    terminal: Terminal | None = None
    window_index: int = 0
    last_lines: list[str] = field(default_factory=list)
    current_directory: str | None = None

    @property
    def summary(self) -> str:
        parts: list[str] = []
        if self.terminal is not None:
            parts.append(self.terminal.display_name)
        if self.title:
            parts.append(self.title)
        return " - ".join(parts)

    @property
    def recent_output(self) -> str:
        return "\n".join(self.last_lines)

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)


@dataclass
class PhotoItem:
    """A photo thumbnail or the photo in the viewer."""

    title: str = ""
    date: str | None = None
    time: str | None = None
    location: str | None = None
    is_selected: bool = False
    is_favorite: bool = False

    @property
    def summary(self) -> str:
        parts = [self.title]
        if self.date:
            parts.append(self.date)
        if self.location:
            parts.append(self.location)
        return " - ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)


@dataclass
class PhotoMetadata:
    """Fields read from the photo info panel."""

    date: str | None = None
    time: str | None = None
    timezone: str | None = None
    location: str | None = None
    camera_model: str | None = None
    dimensions: str | None = None
    file_size: str | None = None

    @property
    def summary(self) -> str:
        labelled = (
            ("Date", self.date),
            ("Time", self.time),
            ("Timezone", self.timezone),
            ("Location", self.location),
            ("Camera", self.camera_model),
            ("Size", self.dimensions),
        )
        return "\n".join(f"{label}: {value}" for label, value in labelled if value)

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)


@dataclass
class PhotoLocation:
    """A place name or coordinate pair shown for a photo.

    Two locations are equal when their names are.
    """

    name: str = ""
    latitude: float | None = field(default=None, compare=False)
    longitude: float | None = field(default=None, compare=False)
    source: LocationSource = field(default=LocationSource.PHOTO_METADATA, compare=False)

    @property
    def summary(self) -> str:
        if self.latitude is not None and self.longitude is not None:
            return f"{self.name} ({self.latitude}, {self.longitude})"
        return self.name

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)


@dataclass
class TravelLog:
    """Places, dates and cameras across the photos of a library view."""

    photo_count: int = 0
    unique_locations: list[str] = field(default_factory=list)
    date_range: list[str] = field(default_factory=list)
    cameras: list[str] = field(default_factory=list)

    @property
    def start(self) -> str | None:
        return self.date_range[0] if self.date_range else None

    @property
    def end(self) -> str | None:
        return self.date_range[-1] if self.date_range else None

    @property
    def summary(self) -> str:
        lines = [
            "Travel Log Summary",
            "==================",
            f"Photos: {self.photo_count}",
            f"Locations: {len(self.unique_locations)}",
            f"Date Range: {self.start or '?'} to {self.end or '?'}",
            f"Cameras: {', '.join(self.cameras)}",
            "",
            "Locations visited:",
        ]
        lines.extend(f"- {location}" for location in self.unique_locations)
        return "\n".join(lines)

    def as_markdown(self) -> str:
        lines = [
            "# Travel Log",
            "",
            f"**{self.photo_count} photos** across **{len(self.unique_locations)} locations**",
            "",
            "## Timeline",
            f"- Start: {self.start or 'Unknown'}",
            f"- End: {self.end or 'Unknown'}",
            "",
            "## Locations",
        ]
        lines.extend(f"- {location}" for location in self.unique_locations)
        lines.extend(["", "## Equipment"])
        lines.extend(f"- {camera}" for camera in self.cameras)
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)


@dataclass
class FinderItem:
    """A file or folder shown in a Finder window."""

    name: str = ""
    path: str | None = None
    is_directory: bool = False
    is_selected: bool = False
    size: str | None = None
    modified_date: str | None = None
    kind: str | None = None

    @property
    def summary(self) -> str:
        parts = [self.name]
        if self.is_directory:
            parts.append("(folder)")
        if self.path:
            parts.append(self.path)
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)
