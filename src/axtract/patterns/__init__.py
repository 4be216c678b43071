"""Regex-driven pattern extraction (URLs, e-mails, times, dates, paths, error locations)."""

from .text_extraction import (
    MEETING_DOMAINS,
    SOURCE_EXTENSIONS,
    classify_content_type,
    contains_date,
    contains_meeting_link,
    contains_time,
    extract_dates,
    extract_emails,
    extract_error_locations,
    extract_file_paths,
    extract_meeting_urls,
    extract_patterns,
    extract_times,
    extract_urls,
    first_meeting_url,
    first_url,
    looks_like_url,
)

__all__ = [
    "MEETING_DOMAINS",
    "SOURCE_EXTENSIONS",
    "classify_content_type",
    "contains_date",
    "contains_meeting_link",
    "contains_time",
    "extract_dates",
    "extract_emails",
    "extract_error_locations",
    "extract_file_paths",
    "extract_meeting_urls",
    "extract_patterns",
    "extract_times",
    "extract_urls",
    "first_meeting_url",
    "first_url",
    "looks_like_url",
]
