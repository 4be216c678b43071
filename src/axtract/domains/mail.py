"""Mail adapter for Apple Mail and Outlook.

List views are classified row by row; the message viewer is classified as a
single record from its leading text values.
"""

import logging
import re

from ..classification.classifier import classify, classify_values
from ..model.records import ClassifiedRecord
from ..model.snapshot import WindowContent
from .profiles import MAIL_LIST, MAIL_VIEWER, OUTLOOK_LIST, OUTLOOK_VIEWER
from .records import ComposeFields, MailMessage, OutlookView

logger = logging.getLogger(__name__)

MAILBOX_NAMES = ("Inbox", "Sent", "Drafts", "Junk", "Trash", "Archive", "All Mail")

OUTLOOK_FOLDERS = (
    "Inbox",
    "Sent",
    "Drafts",
    "Junk",
    "Trash",
    "Deleted",
    "Archive",
    "Outbox",
    "Focused",
    "Other",
)

COMPOSE_TITLES = ("New Message", "Reply", "Forward", "Compose")
COMPOSE_FIELD_LABELS = ("To", "Cc", "Subject")

_PARENTHESIZED_COUNT_RE = re.compile(r"\((\d+)\)")

# Number of leading text values the message viewer looks at
_VIEWER_WINDOW = 10
_OUTLOOK_VIEWER_WINDOW = 20


def _to_message(record: ClassifiedRecord) -> MailMessage:
    return MailMessage(
        subject=record["subject"],
        sender=record.get("sender"),
        recipient=record.get("recipient"),
        date=record.get("date"),
        preview=record.get("preview"),
        body=record.get("body"),
    )


def parse(content: WindowContent) -> list[MailMessage]:
    """Extract messages from an Apple Mail message list."""
    return [_to_message(record) for record in classify(content.elements, MAIL_LIST)]


def parse_outlook(content: WindowContent) -> list[MailMessage]:
    """Extract messages from an Outlook message list."""
    return [_to_message(record) for record in classify(content.elements, OUTLOOK_LIST)]


def parse_current_message(content: WindowContent, *, outlook: bool = False) -> MailMessage | None:
    """Read the message being viewed or composed.

    Looks at the first distinct text values of the window, editable ones
    first.

    Args:
        content: Focused window content
        outlook: Use Outlook's viewer layout

    Returns:
        The message, or None if no subject was found
    """
    window = _OUTLOOK_VIEWER_WINDOW if outlook else _VIEWER_WINDOW
    profile = OUTLOOK_VIEWER if outlook else MAIL_VIEWER
    # Editable nodes appear in both sequences
    texts = list(dict.fromkeys(content.editable_values + content.values))[:window]

    records = classify_values(texts, profile)
    return _to_message(records[0]) if records else None


def mailboxes(content: WindowContent, *, outlook: bool = False) -> list[str]:
    """List sidebar mailbox or folder names."""
    if outlook:
        roles, names = ("AXOutlineRow", "AXCell"), OUTLOOK_FOLDERS
    else:
        roles, names = ("AXOutlineRow", "AXStaticText"), MAILBOX_NAMES

    found: list[str] = []
    for element in content.elements:
        if not element.has_role(*roles) or not element.title:
            continue
        title = element.title.lower()
        if any(name.lower() in title for name in names):
            found.append(element.title)
    return found


def unread_count(content: WindowContent, *, outlook: bool = False) -> int | None:
    """Read the unread badge, if one is visible.

    Apple Mail shows the count as a numeric static text. Outlook shows it
    as the Inbox row's value or as ``Inbox (5)``.
    """
    for element in content.elements:
        if outlook:
            title = element.title or ""
            if "Inbox" not in title:
                continue
            if element.value and element.value.strip().isdigit():
                return int(element.value)
            match = _PARENTHESIZED_COUNT_RE.search(title)
            if match:
                return int(match.group(1))
        elif element.role and "StaticText" in element.role:
            if element.value and element.value.strip().isdigit():
                return int(element.value)
    return None


def is_composing(content: WindowContent) -> bool:
    """Detect a compose, reply or forward window."""
    for element in content.elements:
        title = element.title
        if not title:
            continue
        if any(marker in title for marker in COMPOSE_TITLES):
            return True
        if element.role == "AXTextField" and title in COMPOSE_FIELD_LABELS:
            return True
    return False


def compose_fields(content: WindowContent) -> ComposeFields | None:
    """Read the header fields and body of a compose window.

    Returns:
        The fields, or None if the window is not a compose window
    """
    if not is_composing(content):
        return None

    compose = ComposeFields()
    for element in content.text_fields:
        if not element.title or element.value is None:
            continue
        label = element.title.lower()
        if label in ("to", "cc", "bcc", "subject"):
            setattr(compose, label, element.value)

    if content.editable_values:
        compose.body = "\n".join(content.editable_values)

    logger.debug(f"Read compose window with subject {compose.subject!r}")
    return compose


def outlook_view(content: WindowContent) -> OutlookView:
    """Which Outlook module a window shows, judged from its title and labels."""
    if content.is_empty:
        return OutlookView.UNKNOWN

    title = content.window_title.lower()
    labels = " ".join(content.labels).lower()

    if "calendar" in title or "calendar" in labels:
        return OutlookView.CALENDAR
    if "contacts" in title or "people" in title or "contacts" in labels:
        return OutlookView.CONTACTS
    if "tasks" in title or "to do" in labels:
        return OutlookView.TASKS
    return OutlookView.MAIL
