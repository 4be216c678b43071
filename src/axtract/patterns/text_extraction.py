"""
Pattern extraction library.

Stateless, regex-driven functions that pull URLs, e-mail addresses, times,
dates, file paths and ``file:line:column`` error locations out of arbitrary
strings, plus a coarse content-type classifier.

Every function returns matches in first-to-last occurrence order. Where a
kind has several layouts they are compiled into one alternation so that a
substring is reported once. None of these functions raise on malformed input:
no match simply means an empty list.

Usage Examples
--------------
::

    from axtract.patterns import extract_urls, classify_content_type

    extract_urls("Visit https://example.com and http://test.org/path")
    # ['https://example.com', 'http://test.org/path']

    classify_content_type("Warning: Check this")
    # ContentType.WARNING
"""

import logging
import re

from ..model.records import ContentType, ErrorLocation, ExtractedPattern, PatternKind

logger = logging.getLogger(__name__)

MEETING_DOMAINS: tuple[str, ...] = (
    "zoom.us",
    "meet.google.com",
    "teams.microsoft.com",
    "webex.com",
    "gotomeeting.com",
)

SOURCE_EXTENSIONS: tuple[str, ...] = (
    "swift",
    "js",
    "ts",
    "py",
    "rb",
    "go",
    "rs",
    "java",
    "kt",
    "cpp",
    "c",
    "h",
    "m",
    "mm",
    "cs",
)

_URL_RE = re.compile(r"https?://[^\s<>\"']+")

_EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

_TIME_RE = re.compile(
    r"\b\d{1,2}:\d{2}(?:\s*(?:AM|PM|am|pm)\b)?"  # 2:30 PM, 14:00
    r"|\b\d{1,2}\s*(?:AM|PM|am|pm)\b"  # 2 PM
)

_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|Aug(?:ust)?"
    r"|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)

_DATE_RE = re.compile(
    r"\b\d{1,2}/\d{1,2}/\d{2,4}\b"  # MM/DD/YYYY
    r"|\b\d{4}-\d{2}-\d{2}\b"  # YYYY-MM-DD
    rf"|\b{_MONTHS}\.?\s+\d{{1,2}},?\s+\d{{4}}\b"  # Jan 15, 2024
    r"|\b(?:Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)\b"
    r"|\b(?:Today|Tomorrow|Yesterday)\b",
    re.IGNORECASE,
)

_FILE_PATH_RE = re.compile(
    r"/[^\s:]+\.[A-Za-z]+"  # Unix paths
    r"|[A-Za-z]:\\[^\s:]+"  # Windows paths
    rf"|[^\s/]+\.(?:{'|'.join(SOURCE_EXTENSIONS)})\b"  # Bare source filenames
)

# The file part must contain a non-digit so clock times like 10:30:15 are skipped
_ERROR_LOCATION_RE = re.compile(
    r"(?P<cfile>[^\s:]*[^\s:\d][^\s:]*):(?P<cline>\d+):(?P<ccol>\d+)"  # file:line:col
    r"|(?P<pfile>[^\s(]+)\((?P<pline>\d+),\s*(?P<pcol>\d+)\)"  # file(line,col)
)

_ERROR_KEYWORDS = ("error", "exception", "failed")


def _find_all(pattern: re.Pattern[str], text: str | None) -> list[str]:
    if not text:
        return []
    return [match.group(0) for match in pattern.finditer(text)]


def extract_urls(text: str | None) -> list[str]:
    """Extract ``http``/``https`` URLs."""
    return _find_all(_URL_RE, text)


def extract_meeting_urls(text: str | None) -> list[str]:
    """Extract URLs pointing at a known meeting platform (Zoom, Meet, Teams, ...)."""
    return [url for url in extract_urls(text) if contains_meeting_link(url)]


def extract_emails(text: str | None) -> list[str]:
    """Extract e-mail addresses."""
    return _find_all(_EMAIL_RE, text)


def extract_times(text: str | None) -> list[str]:
    """Extract clock times such as ``2:30 PM``, ``14:00`` or ``2 pm``."""
    return _find_all(_TIME_RE, text)


def extract_dates(text: str | None) -> list[str]:
    """Extract numeric, ISO, month-name, weekday and relative dates."""
    return _find_all(_DATE_RE, text)


def extract_file_paths(text: str | None) -> list[str]:
    """Extract Unix paths, Windows drive paths and bare source filenames."""
    return _find_all(_FILE_PATH_RE, text)


def _error_location(match: re.Match[str]) -> ErrorLocation | None:
    prefix = "c" if match.group("cfile") is not None else "p"
    try:
        line = int(match.group(f"{prefix}line"))
    except ValueError:
        logger.debug(f"Dropping error location with malformed line: {match.group(0)!r}")
        return None

    column: int | None
    try:
        column = int(match.group(f"{prefix}col"))
    except ValueError:
        column = None

    return ErrorLocation(file=match.group(f"{prefix}file"), line=line, column=column)


def extract_error_locations(text: str | None) -> list[ErrorLocation]:
    """Extract ``file:line:col`` and ``file(line,col)`` references.

    Matches whose line number cannot be parsed are dropped.
    """
    if not text:
        return []

    locations: list[ErrorLocation] = []
    for match in _ERROR_LOCATION_RE.finditer(text):
        location = _error_location(match)
        if location is not None:
            locations.append(location)
    return locations


def classify_content_type(text: str | None) -> ContentType:
    """Classify text by checking, in order, for error, warning, URL, e-mail and code."""
    if not text:
        return ContentType.TEXT

    lowered = text.lower()
    if any(keyword in lowered for keyword in _ERROR_KEYWORDS):
        return ContentType.ERROR
    if "warning" in lowered:
        return ContentType.WARNING
    if extract_urls(text):
        return ContentType.URL
    if extract_emails(text):
        return ContentType.EMAIL
    if extract_file_paths(text):
        return ContentType.CODE
    return ContentType.TEXT


# Convenience predicates


def contains_meeting_link(text: str | None) -> bool:
    """Case-insensitive check for a meeting platform domain."""
    if not text:
        return False
    lowered = text.lower()
    return any(domain in lowered for domain in MEETING_DOMAINS)


def first_url(text: str | None) -> str | None:
    urls = extract_urls(text)
    return urls[0] if urls else None


def first_meeting_url(text: str | None) -> str | None:
    urls = extract_meeting_urls(text)
    return urls[0] if urls else None


def looks_like_url(text: str | None) -> bool:
    """Loose check used for address bars, which often omit the scheme."""
    if not text:
        return False
    return text.startswith(("http", "www")) or any(
        tld in text for tld in (".com", ".org", ".io", ".dev")
    )


def contains_time(text: str | None) -> bool:
    return bool(text) and _TIME_RE.search(text) is not None


def contains_date(text: str | None) -> bool:
    return bool(text) and _DATE_RE.search(text) is not None


_KIND_PATTERNS: tuple[tuple[PatternKind, re.Pattern[str]], ...] = (
    (PatternKind.URL, _URL_RE),
    (PatternKind.EMAIL, _EMAIL_RE),
    (PatternKind.TIME, _TIME_RE),
    (PatternKind.DATE, _DATE_RE),
    (PatternKind.FILE_PATH, _FILE_PATH_RE),
)


def extract_patterns(text: str | None) -> list[ExtractedPattern]:
    """Run every extractor and return all matches ordered by position.

    Different kinds may overlap (an error location also contains a file
    path); each kind is reported on its own.
    """
    if not text:
        return []

    found: list[ExtractedPattern] = []
    for kind, pattern in _KIND_PATTERNS:
        for match in pattern.finditer(text):
            found.append(ExtractedPattern(kind, match.group(0), match.start(), match.end()))

    for match in _ERROR_LOCATION_RE.finditer(text):
        location = _error_location(match)
        if location is not None:
            found.append(
                ExtractedPattern(
                    PatternKind.ERROR_LOCATION,
                    match.group(0),
                    match.start(),
                    match.end(),
                    location=location,
                )
            )

    found.sort(key=lambda p: (p.start, p.end))
    return found
