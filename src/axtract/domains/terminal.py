"""Terminal adapter.

A terminal window has no record structure: its text is the scrollback.
``parse`` yields one session per window and the remaining functions read
prompt conventions out of that text.
"""

import re

from ..catalog.bundle_identifiers import Terminal
from ..model.snapshot import WindowContent
from .records import TerminalSession

SCROLLBACK_LINES = 50

ERROR_INDICATORS = (
    "error:",
    "Error:",
    "ERROR:",
    "failed",
    "Failed",
    "FAILED",
    "fatal:",
    "Fatal:",
    "FATAL:",
    "exception",
    "Exception",
    "EXCEPTION",
    "permission denied",
    "command not found",
    "No such file or directory",
)

ERROR_KEYWORDS = ("error", "failed", "fatal", "exception")

PROMPT_CHARACTERS = ("$", ">", "%")
PROMPT_ENDINGS = ("$", ">", "%", "#")

_DIRECTORY_PATTERNS = (
    re.compile(r"\w+@[\w.-]+:([^\s$#]+)"),  # user@host:path
    re.compile(r"(?:pwd|PWD):\s*([^\n]+)"),
    re.compile(r"(?:~|/[^\s:$#%>]+)[^\s:$#%>]*"),
)


def output(content: WindowContent) -> str | None:
    """Visible terminal text, one value per line."""
    if not content.values:
        return None
    return "\n".join(content.values)


def current_directory(content: WindowContent) -> str | None:
    """Working directory shown by the prompt or by ``pwd``."""
    text = output(content)
    if text is None:
        return None

    for pattern in _DIRECTORY_PATTERNS:
        match = pattern.search(text)
        if match is None:
            continue
        path = (match.group(1) if pattern.groups else match.group(0)).strip()
        if "/" in path or path.startswith("~"):
            return path
    return None


def last_command(content: WindowContent) -> str | None:
    """Most recent non-empty text after a prompt character."""
    text = output(content)
    if text is None:
        return None

    for line in reversed(text.split("\n")):
        line = line.strip()
        if not line:
            continue
        for prompt in PROMPT_CHARACTERS:
            index = line.find(prompt)
            if index < 0:
                continue
            command = line[index + 1 :].strip()
            if command:
                return command
            break
    return None


def has_error(content: WindowContent) -> bool:
    text = output(content)
    return text is not None and any(indicator in text for indicator in ERROR_INDICATORS)


def errors(content: WindowContent) -> list[str]:
    """Output lines mentioning an error keyword."""
    text = output(content)
    if text is None:
        return []
    return [
        line.strip()
        for line in text.split("\n")
        if any(keyword in line.lower() for keyword in ERROR_KEYWORDS)
    ]


def is_process_running(content: WindowContent) -> bool:
    """Guess whether a command is still running.

    A trailing prompt character means the shell is idle; any other last
    line (including spinners and progress dots) means something is running.
    """
    text = output(content)
    if text is None:
        return False
    last_line = text.split("\n")[-1].strip()
    return not last_line.endswith(PROMPT_ENDINGS)


def parse(
    content: WindowContent,
    terminal: Terminal | None = None,
    window_index: int = 0,
) -> list[TerminalSession]:
    """Describe the window as a single terminal session."""
    session = TerminalSession(
        title=content.window_title,
        terminal=terminal,
        window_index=window_index,
        last_lines=list(content.values[-SCROLLBACK_LINES:]),
        current_directory=current_directory(content),
    )
    return [session]
