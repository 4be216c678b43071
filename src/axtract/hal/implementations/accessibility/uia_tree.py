"""Windows UI Automation (UIA) host implementation.

Binds :class:`IApplicationHost` to Windows UI Automation through the
``uiautomation`` package. UIA control types are translated to the AX role
vocabulary the rest of axtract uses, so the same domain profiles work on
both platforms. Applications are identified by their executable name
(``OUTLOOK.EXE``), resolved with psutil.

Note: This implementation only works on Windows.

Example:
    >>> host = UIAAccessibilityHost()
    >>> window = host.focused_window()
"""

import platform
from collections.abc import Sequence
from typing import Any

from ....exceptions import BackendUnavailableError
from ....logging import get_logger
from ....model.snapshot import Point, Size
from ...interfaces.accessibility_tree import (
    DESCRIPTION,
    ENABLED,
    FOCUSED,
    HELP,
    HIDDEN,
    POSITION,
    ROLE,
    ROLE_DESCRIPTION,
    SIZE,
    TITLE,
    VALUE,
    ApplicationInfo,
    IApplicationHost,
)

logger = get_logger(__name__)

# UIA control type to AX role mapping
UIA_ROLE_MAP: dict[int, str] = {
    50000: "AXButton",  # Button
    50001: "AXGroup",  # Calendar
    50002: "AXCheckBox",  # CheckBox
    50003: "AXComboBox",  # ComboBox
    50004: "AXTextField",  # Edit
    50005: "AXLink",  # Hyperlink
    50006: "AXImage",  # Image
    50007: "AXRow",  # ListItem
    50008: "AXList",  # List
    50009: "AXMenu",  # Menu
    50010: "AXMenuBar",  # MenuBar
    50011: "AXMenuItem",  # MenuItem
    50012: "AXProgressIndicator",  # ProgressBar
    50013: "AXRadioButton",  # RadioButton
    50014: "AXScrollBar",  # ScrollBar
    50015: "AXSlider",  # Slider
    50016: "AXIncrementor",  # Spinner
    50017: "AXGroup",  # StatusBar
    50018: "AXTabGroup",  # Tab
    50019: "AXRadioButton",  # TabItem
    50020: "AXStaticText",  # Text
    50021: "AXToolbar",  # ToolBar
    50022: "AXHelpTag",  # ToolTip
    50023: "AXOutline",  # Tree
    50024: "AXOutlineRow",  # TreeItem
    50025: "AXUnknown",  # Custom
    50026: "AXGroup",  # Group
    50027: "AXValueIndicator",  # Thumb
    50028: "AXRow",  # DataItem
    50029: "AXTextArea",  # Document
    50030: "AXMenuButton",  # SplitButton
    50031: "AXWindow",  # Window
    50032: "AXGroup",  # Pane
    50033: "AXHeading",  # Header
    50034: "AXCell",  # HeaderItem
    50035: "AXTable",  # Table
    50036: "AXGroup",  # TitleBar
    50037: "AXSplitter",  # Separator
}


def _is_windows() -> bool:
    """Check if running on Windows."""
    return platform.system() == "Windows"


class UIAAccessibilityHost(IApplicationHost):
    """Accessibility host backed by Windows UI Automation."""

    def __init__(self) -> None:
        self._uia: Any = None  # uiautomation module

    def _ensure_uia_available(self) -> Any:
        """Import the uiautomation module on first use."""
        if self._uia is not None:
            return self._uia

        if not _is_windows():
            raise BackendUnavailableError("windows_uia", "only available on Windows")

        try:
            import uiautomation as auto
        except ImportError as e:
            logger.error("uiautomation_missing", detail=str(e))
            raise BackendUnavailableError(
                "windows_uia",
                "uiautomation not installed. Install with: pip install axtract[windows]",
            ) from e

        self._uia = auto
        return self._uia

    # IAccessibilityTree

    def enumerate_children(self, element: Any) -> Sequence[Any]:
        return list(element.GetChildren())

    def get_attribute(self, element: Any, name: str) -> Any | None:
        if name == ROLE:
            return UIA_ROLE_MAP.get(getattr(element, "ControlType", 50025), "AXUnknown")
        if name == ROLE_DESCRIPTION:
            return getattr(element, "LocalizedControlType", None) or None
        if name == TITLE:
            return getattr(element, "Name", None) or None
        if name == VALUE:
            return self._value_of(element)
        if name == DESCRIPTION:
            return getattr(element, "AutomationId", None) or None
        if name == HELP:
            return getattr(element, "HelpText", None) or None
        if name == FOCUSED:
            return getattr(element, "HasKeyboardFocus", None)
        if name == ENABLED:
            return getattr(element, "IsEnabled", None)
        if name == HIDDEN:
            return getattr(element, "IsOffscreen", None)
        if name in (POSITION, SIZE):
            rect = getattr(element, "BoundingRectangle", None)
            if rect is None or not hasattr(rect, "left"):
                return None
            if name == POSITION:
                return Point(rect.left, rect.top)
            return Size(rect.right - rect.left, rect.bottom - rect.top)
        return None

    def get_backend_name(self) -> str:
        return "windows_uia"

    # IApplicationHost

    def has_permission(self) -> bool:
        # UIA does not gate reads behind a user-granted permission
        self._ensure_uia_available()
        return True

    def running_applications(self) -> list[ApplicationInfo]:
        auto = self._ensure_uia_available()
        seen: dict[int, ApplicationInfo] = {}
        for window in auto.GetRootControl().GetChildren():
            info = self._app_info(window)
            if info.pid is not None:
                seen.setdefault(info.pid, info)
        return list(seen.values())

    def frontmost_application(self) -> ApplicationInfo | None:
        auto = self._ensure_uia_available()
        window = auto.GetForegroundControl()
        return self._app_info(window) if window is not None else None

    def focused_window(self) -> Any | None:
        auto = self._ensure_uia_available()
        return auto.GetForegroundControl()

    def application_windows(self, bundle_id: str) -> list[tuple[ApplicationInfo, Any]]:
        auto = self._ensure_uia_available()
        windows: list[tuple[ApplicationInfo, Any]] = []
        for window in auto.GetRootControl().GetChildren():
            info = self._app_info(window)
            if info.bundle_id is not None and info.bundle_id.lower() == bundle_id.lower():
                windows.append((info, window))
        return windows

    @staticmethod
    def _value_of(element: Any) -> Any | None:
        try:
            pattern = element.GetValuePattern()
        except Exception as e:
            logger.debug("value_pattern_unavailable", error=str(e))
            return None
        value = getattr(pattern, "Value", None) if pattern is not None else None
        return value or None

    @staticmethod
    def _app_info(window: Any) -> ApplicationInfo:
        import psutil

        pid = getattr(window, "ProcessId", None)
        executable: str | None = None
        if pid:
            try:
                executable = psutil.Process(pid).name()
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                executable = None
        return ApplicationInfo(
            bundle_id=executable,
            name=getattr(window, "Name", None) or executable or "Unknown",
            pid=pid,
        )
