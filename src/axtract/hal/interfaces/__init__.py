"""Interfaces for the external accessibility collaborators."""

from .accessibility_tree import (
    SNAPSHOT_ATTRIBUTES,
    ApplicationInfo,
    IAccessibilityTree,
    IApplicationHost,
)

__all__ = [
    "SNAPSHOT_ATTRIBUTES",
    "ApplicationInfo",
    "IAccessibilityTree",
    "IApplicationHost",
]
