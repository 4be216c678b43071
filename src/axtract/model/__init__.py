"""Data model: attribute snapshots, window content, generic records."""

from .records import (
    ClassifiedRecord,
    ContentType,
    ErrorLocation,
    ExtractedPattern,
    PatternKind,
)
from .snapshot import EDITABLE_ROLES, Point, Size, UIElementSnapshot, WindowContent

__all__ = [
    "EDITABLE_ROLES",
    "Point",
    "Size",
    "UIElementSnapshot",
    "WindowContent",
    "ClassifiedRecord",
    "ContentType",
    "ErrorLocation",
    "ExtractedPattern",
    "PatternKind",
]
