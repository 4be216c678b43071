"""Calendar adapter: Calendar day/week lists, the event editor and the Outlook calendar."""

from ..classification.classifier import classify, classify_values
from ..classification.heuristics import looks_like_time_label
from ..model.records import ClassifiedRecord
from ..model.snapshot import WindowContent
from ..patterns.text_extraction import (
    contains_meeting_link,
    extract_emails,
    extract_times,
    first_meeting_url,
)
from .profiles import CALENDAR_EDITOR, CALENDAR_LIST, OUTLOOK_EVENTS
from .records import CalendarEvent

# Element titles that mark an Outlook calendar view
OUTLOOK_CALENDAR_INDICATORS = (
    "Today",
    "Week",
    "Month",
    "Day",
    "Work Week",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
    "Calendar",
)


def _to_event(record: ClassifiedRecord) -> CalendarEvent:
    time = record.get("time")
    end_time = record.get("end_time")
    if time and end_time:
        time = f"{time} - {end_time}"
    return CalendarEvent(
        title=record["title"],
        time=time,
        location=record.get("location"),
        notes=record.get("notes"),
    )


def parse(content: WindowContent) -> list[CalendarEvent]:
    """Extract the events visible in a calendar window."""
    return [_to_event(record) for record in classify(content.elements, CALENDAR_LIST)]


def parse_current_event(content: WindowContent) -> CalendarEvent | None:
    """Read the event open in the editor or inspector.

    The first editable value is the title, the second the location and the
    rest are notes. Times, attendee addresses and a meeting link are then
    picked up from anywhere in the window.

    Returns:
        The event, or None if no title could be found
    """
    records = classify_values(content.editable_values, CALENDAR_EDITOR)
    if not records:
        return None

    event = _to_event(records[0])
    for element in content.elements:
        value = element.value
        if not value:
            continue
        if looks_like_time_label(value):
            event.time = event.time or value
        elif "@" in value:
            for address in extract_emails(value):
                if address not in event.attendees:
                    event.attendees.append(address)
        elif contains_meeting_link(value) and event.url is None:
            event.url = first_meeting_url(value) or value

    return event


def is_meeting(event: CalendarEvent) -> bool:
    """An event is a meeting if it has attendees or a conferencing link."""
    if event.attendees:
        return True
    return contains_meeting_link(event.notes) or contains_meeting_link(event.url)


def meeting_link(event: CalendarEvent) -> str | None:
    """Return the event's conferencing URL, preferring its URL field over its notes."""
    if event.url and contains_meeting_link(event.url):
        return event.url
    return first_meeting_url(event.notes)


def search_events(events: list[CalendarEvent], query: str) -> list[CalendarEvent]:
    """Case-insensitive search over title, location and notes."""
    needle = query.lower()
    return [
        event
        for event in events
        if any(needle in (text or "").lower() for text in (event.title, event.location, event.notes))
    ]


def is_outlook_calendar_view(content: WindowContent) -> bool:
    """Check whether an Outlook window shows the calendar rather than mail."""
    for element in content.elements:
        if element.title and any(indicator in element.title for indicator in OUTLOOK_CALENDAR_INDICATORS):
            return True
    return "Calendar" in content.window_title


def parse_outlook(content: WindowContent) -> list[CalendarEvent]:
    """Extract the events of an Outlook calendar window.

    Each calendar cell or block is one event. Outlook puts the time in the
    block's title, so the first time (or ``start - end`` pair) found there
    becomes the event time.

    Returns:
        Events in on-screen order, empty if the window is not in calendar view
    """
    if not is_outlook_calendar_view(content):
        return []

    events = []
    for record in classify(content.elements, OUTLOOK_EVENTS):
        title = record["title"]
        times = extract_times(title)
        events.append(CalendarEvent(title=title, time=" - ".join(times[:2]) or None))
    return events


def upcoming_meeting(events: list[CalendarEvent]) -> CalendarEvent | None:
    """First event of a day list, which Outlook orders by start time."""
    return events[0] if events else None
