"""Accessibility tree interface definition.

This module defines the two capabilities the core consumes from a host
accessibility API (macOS AX, Windows UIA, an in-memory test double, ...):

- :class:`IAccessibilityTree`: child enumeration and attribute lookup on
  opaque element handles.
- :class:`IApplicationHost`: locating root handles (focused window, the
  windows of an application) plus permission and process queries.

The walker only needs :class:`IAccessibilityTree`. The application reader
facade needs both.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

# Attribute names, using the macOS AX vocabulary. Other bindings translate.
ROLE = "AXRole"
SUBROLE = "AXSubrole"
ROLE_DESCRIPTION = "AXRoleDescription"
TITLE = "AXTitle"
VALUE = "AXValue"
DESCRIPTION = "AXDescription"
HELP = "AXHelp"
FOCUSED = "AXFocused"
ENABLED = "AXEnabled"
MAIN = "AXMain"
MINIMIZED = "AXMinimized"
HIDDEN = "AXHidden"
POSITION = "AXPosition"
SIZE = "AXSize"
SELECTED_TEXT = "AXSelectedText"

SNAPSHOT_ATTRIBUTES: tuple[str, ...] = (
    ROLE,
    SUBROLE,
    ROLE_DESCRIPTION,
    TITLE,
    VALUE,
    DESCRIPTION,
    HELP,
    FOCUSED,
    ENABLED,
    MAIN,
    MINIMIZED,
    HIDDEN,
    POSITION,
    SIZE,
    SELECTED_TEXT,
)


@dataclass(frozen=True)
class ApplicationInfo:
    """A running application as reported by the host."""

    bundle_id: str | None
    name: str
    pid: int | None = None


class IAccessibilityTree(ABC):
    """Read-only access to a tree of opaque element handles.

    Implementations must not be called concurrently against the same live
    tree; host handles are not guaranteed to be thread-safe.
    """

    @abstractmethod
    def enumerate_children(self, element: Any) -> Sequence[Any]:
        """Return the element's children in host order.

        Args:
            element: Opaque element handle

        Returns:
            Child handles, possibly empty
        """
        ...

    @abstractmethod
    def get_attribute(self, element: Any, name: str) -> Any | None:
        """Query one attribute.

        Args:
            element: Opaque element handle
            name: Attribute name, one of :data:`SNAPSHOT_ATTRIBUTES`

        Returns:
            The typed attribute value, or None if absent or unsupported
        """
        ...

    def get_backend_name(self) -> str:
        """Get the name of this backend implementation."""
        return type(self).__name__


class IApplicationHost(IAccessibilityTree):
    """Tree access plus the application-level queries of a host."""

    @abstractmethod
    def has_permission(self) -> bool:
        """Check whether this process may query the accessibility API."""
        ...

    @abstractmethod
    def running_applications(self) -> list[ApplicationInfo]:
        """List running applications."""
        ...

    @abstractmethod
    def frontmost_application(self) -> ApplicationInfo | None:
        """Return the application owning keyboard focus, if any."""
        ...

    @abstractmethod
    def focused_window(self) -> Any | None:
        """Return the focused window handle of the frontmost application."""
        ...

    @abstractmethod
    def application_windows(self, bundle_id: str) -> list[tuple[ApplicationInfo, Any]]:
        """Return every window of every running instance of ``bundle_id``."""
        ...

    def is_running(self, bundle_id: str) -> bool:
        """Check if an application with this identifier is running."""
        return any(app.bundle_id == bundle_id for app in self.running_applications())
