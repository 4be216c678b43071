"""Tests for the macOS host's window lookups, with stand-ins for the pyobjc modules."""

import pytest

from axtract import ApplicationReader, ReadStatus
from axtract.exceptions import TargetNotAvailableError
from axtract.hal.implementations.accessibility import MacAccessibilityHost

SUCCESS = 0
INVALID_ELEMENT = -25202
CANNOT_COMPLETE = -25204
NO_VALUE = -25212


class _FakeApplicationServices:
    """Answers AXUIElementCopyAttributeValue from a table of (element, attribute) pairs."""

    kAXErrorSuccess = SUCCESS
    kAXErrorInvalidUIElement = INVALID_ELEMENT
    kAXErrorCannotComplete = CANNOT_COMPLETE
    kAXTrustedCheckOptionPrompt = "AXTrustedCheckOptionPrompt"

    def __init__(self, answers):
        self.answers = answers

    def AXIsProcessTrustedWithOptions(self, options):
        return True

    def AXUIElementCreateSystemWide(self):
        return "system"

    def AXUIElementCreateApplication(self, pid):
        return f"app:{pid}"

    def AXUIElementCopyAttributeValue(self, element, name, _):
        return self.answers.get((element, name), (NO_VALUE, None))


class _FakeRunningApp:
    def __init__(self, bundle_id, name, pid):
        self._bundle_id = bundle_id
        self._name = name
        self._pid = pid

    def bundleIdentifier(self):
        return self._bundle_id

    def localizedName(self):
        return self._name

    def processIdentifier(self):
        return self._pid


class _FakeWorkspace:
    def __init__(self, apps):
        self.apps = apps

    def runningApplications(self):
        return self.apps

    def frontmostApplication(self):
        return self.apps[0] if self.apps else None


class _FakeAppKit:
    def __init__(self, apps):
        workspace = _FakeWorkspace(apps)

        class NSWorkspace:
            @staticmethod
            def sharedWorkspace():
                return workspace

        self.NSWorkspace = NSWorkspace


@pytest.fixture
def make_host():
    def build(answers, apps):
        host = MacAccessibilityHost(messaging_timeout=0.5)
        host._ax = _FakeApplicationServices(answers)
        host._appkit = _FakeAppKit(apps)
        return host

    return build


class TestApplicationWindows:
    """Test listing the windows of an application."""

    def test_windows_of_every_instance(self, make_host):
        """Test that windows are paired with their instance."""
        host = make_host(
            {("app:10", "AXWindows"): (SUCCESS, ["inbox", "draft"])},
            [_FakeRunningApp("com.apple.mail", "Mail", 10)],
        )

        windows = host.application_windows("com.apple.mail")

        assert [window for _, window in windows] == ["inbox", "draft"]
        assert windows[0][0].pid == 10

    @pytest.mark.parametrize("error", [INVALID_ELEMENT, CANNOT_COMPLETE])
    def test_quit_application_raises(self, make_host, error):
        """Test that an application gone before its windows are read is reported."""
        host = make_host(
            {("app:10", "AXWindows"): (error, None)},
            [_FakeRunningApp("com.apple.mail", "Mail", 10)],
        )

        with pytest.raises(TargetNotAvailableError) as exc_info:
            host.application_windows("com.apple.mail")

        assert exc_info.value.reason == "APPLICATION_NOT_RUNNING"
        assert exc_info.value.bundle_id == "com.apple.mail"

    def test_one_quit_instance_is_skipped(self, make_host):
        """Test that surviving instances are still listed."""
        host = make_host(
            {
                ("app:10", "AXWindows"): (INVALID_ELEMENT, None),
                ("app:11", "AXWindows"): (SUCCESS, ["inbox"]),
            },
            [
                _FakeRunningApp("com.apple.mail", "Mail", 10),
                _FakeRunningApp("com.apple.mail", "Mail", 11),
            ],
        )

        windows = host.application_windows("com.apple.mail")

        assert [(info.pid, window) for info, window in windows] == [(11, "inbox")]

    def test_no_windows_is_not_an_error(self, make_host):
        """Test that an application without windows yields an empty list."""
        host = make_host({}, [_FakeRunningApp("com.apple.mail", "Mail", 10)])

        assert host.application_windows("com.apple.mail") == []

    def test_reader_reports_application_not_running(self, make_host):
        """Test that the reader turns a quit application into a status."""
        host = make_host(
            {("app:10", "AXWindows"): (CANNOT_COMPLETE, None)},
            [_FakeRunningApp("com.apple.mail", "Mail", 10)],
        )

        result = ApplicationReader(host).read("com.apple.mail")

        assert result.status is ReadStatus.APPLICATION_NOT_RUNNING
        assert result.content is None


class TestFocusedWindow:
    """Test the focused window lookup."""

    def test_focused_window(self, make_host):
        """Test the focused application's focused window."""
        host = make_host(
            {
                ("system", "AXFocusedApplication"): (SUCCESS, "app:10"),
                ("app:10", "AXFocusedWindow"): (SUCCESS, "inbox"),
            },
            [_FakeRunningApp("com.apple.mail", "Mail", 10)],
        )

        assert host.focused_window() == "inbox"

    def test_no_focused_application(self, make_host):
        """Test that nothing focused means no window."""
        host = make_host({}, [])

        assert host.focused_window() is None

    def test_quit_application_raises(self, make_host):
        """Test that a focused application that quit is reported."""
        host = make_host(
            {
                ("system", "AXFocusedApplication"): (SUCCESS, "app:10"),
                ("app:10", "AXFocusedWindow"): (INVALID_ELEMENT, None),
            },
            [_FakeRunningApp("com.apple.mail", "Mail", 10)],
        )

        with pytest.raises(TargetNotAvailableError):
            host.focused_window()

        result = ApplicationReader(host).read_focused_window()
        assert result.status is ReadStatus.APPLICATION_NOT_RUNNING
