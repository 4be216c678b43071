"""Photos adapter: grid, selection, info panel, sidebar and travel log."""

import re
from collections.abc import Iterable

from ..classification.classifier import classify
from ..model.snapshot import WindowContent
from ..patterns.text_extraction import contains_time
from .profiles import PHOTOS_GRID
from .records import LocationSource, PhotoItem, PhotoLocation, PhotoMetadata, TravelLog

SYSTEM_ALBUMS = (
    "Recents",
    "Favorites",
    "People",
    "Places",
    "Imports",
    "Hidden",
    "Recently Deleted",
    "Screenshots",
    "Selfies",
    "Portrait",
    "Panoramas",
    "Videos",
    "Slo-mo",
    "Time-lapse",
    "Bursts",
    "Live Photos",
    "Depth Effect",
    "Long Exposure",
)

CAMERA_MARKERS = ("iPhone", "Canon", "Nikon", "Sony", "Camera", "DSLR")
SIZE_UNITS = ("MB", "KB", "GB")
TIMEZONE_MARKERS = ("GMT", "UTC", "EST", "PST", "Time Zone")
EDITING_CONTROLS = ("Adjust", "Edit", "Filters", "Crop")
UNKNOWN_DATE = "Unknown"

LOCATION_KEYWORDS = (
    "Street",
    "Ave",
    "Road",
    "Rd",
    "Boulevard",
    "Blvd",
    "Drive",
    "Dr",
    "Lane",
    "Ln",
    "Way",
    "Court",
    "Ct",
    "City",
    "Town",
    "County",
    "State",
    "Country",
    "Airport",
    "Beach",
    "Park",
    "Mountain",
    "Lake",
    "Restaurant",
    "Hotel",
    "Museum",
    "Store",
)

_COORDINATES_RE = re.compile(r"(?P<latitude>-?\d{1,3}\.\d+),\s*(?P<longitude>-?\d{1,3}\.\d+)")
_DIMENSIONS_RE = re.compile(r"\d+\s*[×x]\s*\d+")
_DATE_IN_TITLE_RE = re.compile(
    r"\d{1,2}/\d{1,2}/\d{2,4}"
    r"|\d{4}-\d{2}-\d{2}"
    r"|(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\s+\d{1,2},?\s*\d{4}",
    re.IGNORECASE,
)
_INFO_DATE_RE = re.compile(
    r"\d{1,2}/\d{1,2}/\d{2,4}"
    r"|\d{4}-\d{2}-\d{2}"
    r"|(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\s+\d{1,2}",
    re.IGNORECASE,
)


def looks_like_location(text: str) -> bool:
    """GPS coordinates or a place keyword such as ``Street`` or ``Airport``."""
    if _COORDINATES_RE.search(text):
        return True
    lowered = text.lower()
    return any(keyword.lower() in lowered for keyword in LOCATION_KEYWORDS)


def date_in_title(title: str) -> str | None:
    match = _DATE_IN_TITLE_RE.search(title)
    return match.group(0) if match else None


def location_in_title(title: str) -> str | None:
    """Coordinates or the first comma-separated part of a title that names a place."""
    coordinates = _COORDINATES_RE.search(title)
    if coordinates:
        return coordinates.group(0)
    for part in title.split(","):
        part = part.strip()
        if part and looks_like_location(part):
            return part
    return None


def parse(content: WindowContent) -> list[PhotoItem]:
    """Extract the photos visible in the grid."""
    photos = []
    for record in classify(content.elements, PHOTOS_GRID):
        title = record["title"]
        photos.append(PhotoItem(title=title, date=date_in_title(title), location=location_in_title(title)))
    return photos


def parse_selected(content: WindowContent) -> list[PhotoItem]:
    """Photos that are focused, plus every image element in the viewer."""
    photos: list[PhotoItem] = []
    for element in content.elements:
        if not (element.is_focused or element.role == "AXImage"):
            continue
        title = element.title or element.description
        if title:
            photos.append(PhotoItem(title=title, is_selected=element.is_focused))
    return photos


def parse_metadata(content: WindowContent) -> PhotoMetadata | None:
    """Read the info panel.

    A single text can fill several fields (``"Jan 5, 2024 at 3:02 PM"`` is
    both date and time); later texts overwrite earlier ones.

    Returns:
        The metadata, or None if no field was recognised
    """
    metadata = PhotoMetadata()
    found = False

    for element in content.elements:
        value = element.value or element.title
        if not value:
            continue

        if _INFO_DATE_RE.search(value):
            metadata.date = value
            found = True
        if contains_time(value):
            metadata.time = value
            found = True
        if any(marker in value for marker in CAMERA_MARKERS):
            metadata.camera_model = value
            found = True
        if looks_like_location(value):
            metadata.location = value
            found = True
        if _DIMENSIONS_RE.search(value):
            metadata.dimensions = value
            found = True
        if any(unit in value for unit in SIZE_UNITS):
            metadata.file_size = value
            found = True
        if any(marker in value for marker in TIMEZONE_MARKERS):
            metadata.timezone = value
            found = True

    return metadata if found else None


def is_album_name(text: str) -> bool:
    return text in SYSTEM_ALBUMS or "." not in text


def albums(content: WindowContent) -> list[str]:
    """Album names from the sidebar."""
    return [
        element.title
        for element in content.elements
        if element.has_role("AXOutlineRow", "AXCell") and element.title and is_album_name(element.title)
    ]


def current_album(content: WindowContent) -> str | None:
    """Album or view shown: the window title, else the focused sidebar row."""
    if content.window_title and content.window_title != "Photos":
        return content.window_title
    for element in content.elements:
        if element.role == "AXOutlineRow" and element.is_focused:
            return element.title
    return None


def is_places_view(content: WindowContent) -> bool:
    """The Places view contains a map."""
    for element in content.elements:
        if element.role and "Map" in element.role:
            return True
        if element.title and "Places" in element.title:
            return True
    return False


def is_editing(content: WindowContent) -> bool:
    return any(
        element.title and any(control in element.title for control in EDITING_CONTROLS)
        for element in content.elements
    )


def extract_locations(content: WindowContent) -> list[PhotoLocation]:
    """Every text in the window that names a place or gives coordinates."""
    locations = []
    for element in content.elements:
        text = element.value or element.title
        if not text or not looks_like_location(text):
            continue
        location = PhotoLocation(name=text)
        coordinates = _COORDINATES_RE.search(text)
        if coordinates:
            location.latitude = float(coordinates.group("latitude"))
            location.longitude = float(coordinates.group("longitude"))
            location.source = LocationSource.GPS
        locations.append(location)
    return locations


def photos_with_locations(photos: list[PhotoItem]) -> list[PhotoItem]:
    return [photo for photo in photos if photo.location]


def photos_by_date(photos: list[PhotoItem]) -> dict[str, list[PhotoItem]]:
    """Group photos by the date in their title; undated photos go under ``"Unknown"``."""
    grouped: dict[str, list[PhotoItem]] = {}
    for photo in photos:
        grouped.setdefault(photo.date or UNKNOWN_DATE, []).append(photo)
    return grouped


def travel_log(windows: Iterable[WindowContent], metadata: PhotoMetadata | None = None) -> TravelLog:
    """Summarise the photos, places and dates visible across Photos windows.

    Args:
        windows: Photos windows to read
        metadata: Info panel of the current photo, for the camera model

    Returns:
        The log. Locations keep first-seen order and dates are sorted as text.
    """
    photos: list[PhotoItem] = []
    names: list[str] = []
    for content in windows:
        photos.extend(parse(content))
        for location in extract_locations(content):
            if location.name not in names:
                names.append(location.name)

    dates = sorted(date for date in photos_by_date(photos) if date != UNKNOWN_DATE)
    cameras = [metadata.camera_model or "Unknown"] if metadata is not None else []

    return TravelLog(photo_count=len(photos), unique_locations=names, date_range=dates, cameras=cameras)
