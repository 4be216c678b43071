"""In-memory accessibility host.

Satisfies :class:`IApplicationHost` with plain Python objects. Used as the
test double for the walker and classifier, and to replay trees captured
elsewhere (for example a JSON dump) without a live OS session.

Example:
    >>> window = MemoryElement.from_dict({
    ...     "role": "AXWindow",
    ...     "title": "Inbox",
    ...     "children": [{"role": "AXStaticText", "value": "Hello"}],
    ... })
    >>> host = InMemoryAccessibilityHost()
    >>> host.add_application("com.apple.mail", "Mail", [window], frontmost=True)
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ....exceptions import AccessibilityPermissionError
from ...interfaces.accessibility_tree import (
    DESCRIPTION,
    ENABLED,
    FOCUSED,
    HELP,
    HIDDEN,
    MAIN,
    MINIMIZED,
    POSITION,
    ROLE,
    ROLE_DESCRIPTION,
    SELECTED_TEXT,
    SIZE,
    SUBROLE,
    TITLE,
    VALUE,
    ApplicationInfo,
    IApplicationHost,
)

# Friendly keys accepted by MemoryElement.from_dict
_DICT_KEYS: dict[str, str] = {
    "role": ROLE,
    "subrole": SUBROLE,
    "role_description": ROLE_DESCRIPTION,
    "title": TITLE,
    "value": VALUE,
    "description": DESCRIPTION,
    "help": HELP,
    "focused": FOCUSED,
    "enabled": ENABLED,
    "main": MAIN,
    "minimized": MINIMIZED,
    "hidden": HIDDEN,
    "position": POSITION,
    "size": SIZE,
    "selected_text": SELECTED_TEXT,
}


@dataclass(eq=False)
class MemoryElement:
    """A node of an in-memory tree. Identity is object identity."""

    attributes: dict[str, Any] = field(default_factory=dict)
    children: list["MemoryElement"] = field(default_factory=list)

    def add_child(self, child: "MemoryElement") -> "MemoryElement":
        self.children.append(child)
        return child

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MemoryElement":
        """Build a tree from nested dicts.

        Keys may be friendly names (``role``, ``title``, ...) or raw AX
        attribute names; ``children`` holds nested dicts.
        """
        attributes: dict[str, Any] = {}
        for key, value in data.items():
            if key == "children":
                continue
            attributes[_DICT_KEYS.get(key, key)] = value

        return cls(
            attributes=attributes,
            children=[cls.from_dict(child) for child in data.get("children", [])],
        )


@dataclass
class _MemoryApplication:
    info: ApplicationInfo
    windows: list[MemoryElement]
    focused_window: MemoryElement | None


class InMemoryAccessibilityHost(IApplicationHost):
    """Host backed by :class:`MemoryElement` trees."""

    def __init__(self, *, trusted: bool = True) -> None:
        self.trusted = trusted
        self._applications: list[_MemoryApplication] = []
        self._frontmost: _MemoryApplication | None = None

    def add_application(
        self,
        bundle_id: str | None,
        name: str,
        windows: Sequence[MemoryElement],
        *,
        frontmost: bool = False,
        focused_window: MemoryElement | None = None,
        pid: int | None = None,
    ) -> ApplicationInfo:
        """Register a running application and its windows.

        The focused window defaults to the first window.
        """
        app = _MemoryApplication(
            info=ApplicationInfo(bundle_id=bundle_id, name=name, pid=pid),
            windows=list(windows),
            focused_window=focused_window or (windows[0] if windows else None),
        )
        self._applications.append(app)
        if frontmost:
            self._frontmost = app
        return app.info

    # IAccessibilityTree

    def enumerate_children(self, element: Any) -> Sequence[Any]:
        return list(element.children)

    def get_attribute(self, element: Any, name: str) -> Any | None:
        return element.attributes.get(name)

    def get_backend_name(self) -> str:
        return "memory"

    # IApplicationHost

    def has_permission(self) -> bool:
        return self.trusted

    def running_applications(self) -> list[ApplicationInfo]:
        return [app.info for app in self._applications]

    def frontmost_application(self) -> ApplicationInfo | None:
        return self._frontmost.info if self._frontmost else None

    def focused_window(self) -> Any | None:
        self._check_trusted()
        if self._frontmost is None:
            return None
        return self._frontmost.focused_window

    def application_windows(self, bundle_id: str) -> list[tuple[ApplicationInfo, Any]]:
        self._check_trusted()
        return [
            (app.info, window)
            for app in self._applications
            if app.info.bundle_id == bundle_id
            for window in app.windows
        ]

    def _check_trusted(self) -> None:
        if not self.trusted:
            raise AccessibilityPermissionError()
