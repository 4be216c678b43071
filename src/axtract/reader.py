"""High-level facade over a host binding and the tree walker.

:class:`ApplicationReader` is the one place where host failures become
explicit outcomes: permission problems and vanished targets are reported
through :class:`ReadStatus` instead of exceptions.

Example:
    >>> from axtract import ApplicationReader, create_default_host
    >>> from axtract.domains import calendar
    >>> reader = ApplicationReader(create_default_host())
    >>> events = reader.collect("com.apple.iCal", calendar.parse)
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from .exceptions import AccessibilityPermissionError, TargetNotAvailableError
from .hal.interfaces.accessibility_tree import IApplicationHost
from .logging import get_logger
from .model.snapshot import WindowContent
from .walker.tree_walker import AccessibilityTreeWalker

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class ReadStatus(Enum):
    """Outcome of a read."""

    SUCCESS = "success"
    PERMISSION_DENIED = "permission_denied"
    APPLICATION_NOT_RUNNING = "application_not_running"
    WINDOW_NOT_FOUND = "window_not_found"


@dataclass(frozen=True)
class ReadResult(Generic[T]):
    """Status plus content, which is only set on success."""

    status: ReadStatus
    content: T | None = None
    message: str | None = None

    @property
    def success(self) -> bool:
        return self.status is ReadStatus.SUCCESS

    @classmethod
    def ok(cls, content: T) -> "ReadResult[T]":
        return cls(ReadStatus.SUCCESS, content)

    @classmethod
    def failed(cls, status: ReadStatus, message: str | None = None) -> "ReadResult[T]":
        return cls(status, None, message)


def _status_for(error: TargetNotAvailableError) -> ReadStatus:
    try:
        return ReadStatus[error.reason]
    except KeyError:
        return ReadStatus.WINDOW_NOT_FOUND


class ApplicationReader:
    """Reads windows of running applications through an :class:`IApplicationHost`."""

    def __init__(self, host: IApplicationHost, walker: AccessibilityTreeWalker | None = None) -> None:
        """Initialize the reader.

        Args:
            host: Platform binding or in-memory host
            walker: Walker to use. Defaults to one over ``host`` with the configured depth.
        """
        self.host = host
        self.walker = walker or AccessibilityTreeWalker(host)

    def check_permission(self) -> bool:
        return self.host.has_permission()

    def is_running(self, bundle_id: str) -> bool:
        return self.host.is_running(bundle_id)

    def frontmost_bundle_id(self) -> str | None:
        app = self.host.frontmost_application()
        return app.bundle_id if app else None

    def read_focused_window(self) -> ReadResult[WindowContent]:
        """Walk the focused window of the frontmost application."""
        if not self.host.has_permission():
            logger.warning("accessibility_permission_denied")
            return ReadResult.failed(ReadStatus.PERMISSION_DENIED)

        try:
            content = self.walker.read_focused_window()
        except AccessibilityPermissionError as e:
            logger.warning("accessibility_permission_denied", error=str(e))
            return ReadResult.failed(ReadStatus.PERMISSION_DENIED, e.message)
        except TargetNotAvailableError as e:
            logger.info("focused_window_unavailable", reason=e.reason)
            return ReadResult.failed(_status_for(e), e.message)

        if content is None:
            logger.info("focused_window_unavailable", reason=ReadStatus.WINDOW_NOT_FOUND.name)
            return ReadResult.failed(ReadStatus.WINDOW_NOT_FOUND)

        logger.info(
            "focused_window_read",
            application=content.application_name,
            elements=len(content.elements),
        )
        return ReadResult.ok(content)

    def read(self, bundle_id: str) -> ReadResult[list[WindowContent]]:
        """Walk every window of an application."""
        if not self.host.has_permission():
            logger.warning("accessibility_permission_denied", bundle_id=bundle_id)
            return ReadResult.failed(ReadStatus.PERMISSION_DENIED)

        if not self.host.is_running(bundle_id):
            logger.info("application_not_running", bundle_id=bundle_id)
            return ReadResult.failed(ReadStatus.APPLICATION_NOT_RUNNING)

        try:
            windows = self.walker.read_all_windows(bundle_id)
        except AccessibilityPermissionError as e:
            logger.warning("accessibility_permission_denied", bundle_id=bundle_id, error=str(e))
            return ReadResult.failed(ReadStatus.PERMISSION_DENIED, e.message)
        except TargetNotAvailableError as e:
            logger.info("application_unavailable", bundle_id=bundle_id, reason=e.reason)
            return ReadResult.failed(_status_for(e), e.message)

        logger.info("application_read", bundle_id=bundle_id, windows=len(windows))
        return ReadResult.ok(windows)

    def read_as_text(self) -> str | None:
        """Focused window as sectioned plain text, or None if it cannot be read."""
        result = self.read_focused_window()
        if result.success and result.content is not None:
            return result.content.as_plain_text()
        return None

    def llm_context(self) -> str:
        """Describe the current screen for a language model prompt."""
        context = "=== Current Screen Context ===\n\n"

        result = self.read_focused_window()
        if result.success and result.content is not None:
            content = result.content
            context += f"Application: {content.application_name}\n"
            context += f"Window: {content.window_title}\n"
            context += content.semantic_summary()
            context += "\n\n"
            context += content.as_plain_text()

        return context

    def collect(self, bundle_id: str, parser: Callable[[WindowContent], list[R]]) -> list[R]:
        """Parse every window of an application and concatenate the records.

        Args:
            bundle_id: Application to read
            parser: Domain ``parse`` function

        Returns:
            Records from all windows, empty if the application cannot be read
        """
        result = self.read(bundle_id)
        if not result.success or result.content is None:
            return []

        records: list[R] = []
        for content in result.content:
            records.extend(parser(content))
        return records

    def current(
        self,
        bundle_ids: str | Iterable[str],
        parser: Callable[[WindowContent], R],
    ) -> R | None:
        """Parse the focused window, but only if one of ``bundle_ids`` is frontmost.

        Args:
            bundle_ids: Accepted application identifier(s)
            parser: Function applied to the focused window's content

        Returns:
            The parser's result, or None if another application is frontmost
            or the window cannot be read
        """
        accepted = {bundle_ids} if isinstance(bundle_ids, str) else set(bundle_ids)
        if self.frontmost_bundle_id() not in accepted:
            return None

        result = self.read_focused_window()
        if not result.success or result.content is None:
            return None
        return parser(result.content)
