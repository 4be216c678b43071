"""macOS Accessibility (AX) host implementation.

Binds :class:`IApplicationHost` to the macOS Accessibility API through
pyobjc (``ApplicationServices`` for AXUIElement queries, ``AppKit`` for
running applications). Every attribute query goes through
``AXUIElementCopyAttributeValue``; a non-success error code yields None.
Window lookups on an application that has quit (``kAXErrorInvalidUIElement``
or ``kAXErrorCannotComplete``) raise :class:`TargetNotAvailableError`.

Note: This implementation only works on macOS with the ``pyobjc`` extras
installed. On other platforms construction succeeds but the first query
raises :class:`BackendUnavailableError`.

Example:
    >>> host = MacAccessibilityHost()
    >>> if host.has_permission():
    ...     window = host.focused_window()
"""

import platform
from collections.abc import Sequence
from typing import Any

from ....config import get_settings
from ....exceptions import (
    AccessibilityPermissionError,
    BackendUnavailableError,
    TargetNotAvailableError,
)
from ....logging import get_logger
from ....model.snapshot import Point, Size
from ...interfaces.accessibility_tree import (
    POSITION,
    SIZE,
    ApplicationInfo,
    IApplicationHost,
)

logger = get_logger(__name__)

_CHILDREN = "AXChildren"
_WINDOWS = "AXWindows"
_FOCUSED_APPLICATION = "AXFocusedApplication"
_FOCUSED_WINDOW = "AXFocusedWindow"


def _is_macos() -> bool:
    """Check if running on macOS."""
    return platform.system() == "Darwin"


class MacAccessibilityHost(IApplicationHost):
    """Accessibility host backed by the macOS AX API."""

    def __init__(self, messaging_timeout: float | None = None) -> None:
        """Initialize the host.

        Args:
            messaging_timeout: Per-query timeout in seconds. Defaults to the
                ``messaging_timeout`` setting.
        """
        self._timeout = (
            messaging_timeout if messaging_timeout is not None else get_settings().messaging_timeout
        )
        self._ax: Any = None  # ApplicationServices module
        self._appkit: Any = None  # AppKit module

    def _ensure_ax_available(self) -> Any:
        """Import the pyobjc bindings on first use."""
        if self._ax is not None:
            return self._ax

        if not _is_macos():
            raise BackendUnavailableError("macos_ax", "only available on macOS")

        try:
            import AppKit
            import ApplicationServices
        except ImportError as e:
            logger.error("pyobjc_missing", detail=str(e))
            raise BackendUnavailableError(
                "macos_ax", "pyobjc not installed. Install with: pip install axtract[macos]"
            ) from e

        self._ax = ApplicationServices
        self._appkit = AppKit
        system_wide = ApplicationServices.AXUIElementCreateSystemWide()
        ApplicationServices.AXUIElementSetMessagingTimeout(system_wide, self._timeout)
        logger.debug("ax_backend_loaded", messaging_timeout=self._timeout)
        return self._ax

    def _copy(self, element: Any, name: str) -> tuple[int, Any | None]:
        ax = self._ensure_ax_available()
        error, value = ax.AXUIElementCopyAttributeValue(element, name, None)
        return error, value if error == ax.kAXErrorSuccess else None

    def _copy_attribute(self, element: Any, name: str) -> Any | None:
        return self._copy(element, name)[1]

    def _is_gone(self, error: int) -> bool:
        """The element's process quit or stopped answering."""
        return error in (self._ax.kAXErrorInvalidUIElement, self._ax.kAXErrorCannotComplete)

    # IAccessibilityTree

    def enumerate_children(self, element: Any) -> Sequence[Any]:
        children = self._copy_attribute(element, _CHILDREN)
        return list(children) if children else []

    def get_attribute(self, element: Any, name: str) -> Any | None:
        value = self._copy_attribute(element, name)
        if value is None:
            return None

        if name == POSITION:
            ok, point = self._ax.AXValueGetValue(value, self._ax.kAXValueCGPointType, None)
            return Point(point.x, point.y) if ok else None
        if name == SIZE:
            ok, size = self._ax.AXValueGetValue(value, self._ax.kAXValueCGSizeType, None)
            return Size(size.width, size.height) if ok else None

        return value

    def get_backend_name(self) -> str:
        return "macos_ax"

    # IApplicationHost

    def has_permission(self) -> bool:
        ax = self._ensure_ax_available()
        options = {ax.kAXTrustedCheckOptionPrompt: False}
        return bool(ax.AXIsProcessTrustedWithOptions(options))

    def request_permission(self) -> bool:
        """Show the system prompt asking for accessibility access."""
        ax = self._ensure_ax_available()
        options = {ax.kAXTrustedCheckOptionPrompt: True}
        return bool(ax.AXIsProcessTrustedWithOptions(options))

    def running_applications(self) -> list[ApplicationInfo]:
        self._ensure_ax_available()
        workspace = self._appkit.NSWorkspace.sharedWorkspace()
        return [self._app_info(app) for app in workspace.runningApplications()]

    def frontmost_application(self) -> ApplicationInfo | None:
        self._ensure_ax_available()
        app = self._appkit.NSWorkspace.sharedWorkspace().frontmostApplication()
        return self._app_info(app) if app is not None else None

    def focused_window(self) -> Any | None:
        """Return the focused window of the frontmost application.

        Raises:
            TargetNotAvailableError: If the focused application quit or
                stopped answering during the lookup
        """
        ax = self._ensure_ax_available()
        self._require_permission()

        system_wide = ax.AXUIElementCreateSystemWide()
        app_element = self._copy_attribute(system_wide, _FOCUSED_APPLICATION)
        if app_element is None:
            return None

        error, window = self._copy(app_element, _FOCUSED_WINDOW)
        if self._is_gone(error):
            raise TargetNotAvailableError(
                "Focused application is no longer available", reason="APPLICATION_NOT_RUNNING"
            )
        return window

    def application_windows(self, bundle_id: str) -> list[tuple[ApplicationInfo, Any]]:
        """Return the windows of every running instance of ``bundle_id``.

        Instances that quit between enumeration and the window query are
        skipped.

        Raises:
            TargetNotAvailableError: If every matching instance quit
        """
        ax = self._ensure_ax_available()
        self._require_permission()

        windows: list[tuple[ApplicationInfo, Any]] = []
        instances = 0
        gone = 0
        workspace = self._appkit.NSWorkspace.sharedWorkspace()
        for app in workspace.runningApplications():
            if app.bundleIdentifier() != bundle_id:
                continue
            instances += 1
            info = self._app_info(app)
            app_element = ax.AXUIElementCreateApplication(app.processIdentifier())

            error, app_windows = self._copy(app_element, _WINDOWS)
            if self._is_gone(error):
                logger.info("application_gone", bundle_id=bundle_id, pid=info.pid, ax_error=error)
                gone += 1
                continue
            for window in app_windows or []:
                windows.append((info, window))

        if instances and gone == instances:
            raise TargetNotAvailableError(
                f"{bundle_id} quit while its windows were read",
                bundle_id=bundle_id,
                reason="APPLICATION_NOT_RUNNING",
            )
        return windows

    def _require_permission(self) -> None:
        if not self.has_permission():
            raise AccessibilityPermissionError()

    @staticmethod
    def _app_info(app: Any) -> ApplicationInfo:
        bundle_id = app.bundleIdentifier()
        return ApplicationInfo(
            bundle_id=str(bundle_id) if bundle_id is not None else None,
            name=str(app.localizedName() or bundle_id or "Unknown"),
            pid=int(app.processIdentifier()),
        )
