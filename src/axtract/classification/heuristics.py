"""Value predicates shared by the domain field-guess chains.

All predicates take one non-empty string and answer a yes/no question about
its shape. They are deliberately loose; misclassification on unusual input
is expected.
"""

import re

from ..patterns.text_extraction import contains_date, contains_time

_WEEKDAY_ABBREVIATION_RE = re.compile(r"\b(?:Mon|Tue|Tues|Wed|Thu|Thur|Thurs|Fri|Sat|Sun)\b", re.I)
_SHORT_DATE_RE = re.compile(r"\b\d{1,2}/\d{1,2}\b")
_CLOCK_RE = re.compile(r"\b\d{1,2}:\d{2}(?::\d{2})?\b")


def looks_like_email_address(value: str) -> bool:
    """A bare address: contains ``@`` and no space."""
    return "@" in value and " " not in value


def looks_like_time_label(value: str) -> bool:
    """Short label containing a colon, such as ``2:00 PM`` or ``9:30``."""
    return ":" in value and len(value) < 20


def is_short(value: str, limit: int = 100) -> bool:
    return len(value) < limit


def is_long(value: str, limit: int = 100) -> bool:
    return len(value) >= limit


def looks_like_list_date(value: str) -> bool:
    """Date column of a message list: dates, clock times, weekdays, Today/Yesterday."""
    return (
        contains_date(value)
        or contains_time(value)
        or _SHORT_DATE_RE.search(value) is not None
        or _WEEKDAY_ABBREVIATION_RE.search(value) is not None
    )


def looks_like_chat_time(value: str) -> bool:
    """Chat timestamps: clock times, Today/Yesterday, ``M/D``."""
    return (
        contains_time(value)
        or _SHORT_DATE_RE.search(value) is not None
        or "Yesterday" in value
        or "Today" in value
    )


def looks_like_duration(value: str) -> bool:
    """Running call timer such as ``12:04`` or ``1:02:33``."""
    return len(value) < 10 and _CLOCK_RE.search(value) is not None


def looks_like_person_name(value: str) -> bool:
    """One to five words, at least one capitalized, no ``@``, under 50 characters."""
    words = value.split(" ")
    if not 1 <= len(words) <= 5:
        return False
    if "@" in value or len(value) >= 50:
        return False
    return any(word[:1].isupper() for word in words)


def matches_any(value: str, needles: tuple[str, ...], *, case_sensitive: bool = True) -> bool:
    """Check whether ``value`` contains any of ``needles``."""
    if case_sensitive:
        return any(needle in value for needle in needles)
    lowered = value.lower()
    return any(needle.lower() in lowered for needle in needles)


def starts_with_any(value: str, prefixes: tuple[str, ...]) -> bool:
    return value.startswith(prefixes)
