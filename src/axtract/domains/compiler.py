"""Compiler diagnostics adapter for IDE windows.

Every text value and label of an IDE window is a candidate diagnostic
line. Lines mentioning a severity keyword are kept when they parse in the
IDE's layout:

- Xcode: ``/path/File.swift:42:10: error: message``
- Unity: ``Assets/Scripts/File.cs(42,10): error CS0103: message``
- anything else: the whole line is the message, with the first
  ``file:line:col`` or ``file(line,col)`` location if there is one.
"""

import logging
import re
from dataclasses import replace

from ..catalog.bundle_identifiers import IDE
from ..classification.classifier import DomainProfile, FieldRule, classify_values
from ..model.snapshot import WindowContent
from ..patterns.text_extraction import extract_error_locations
from .records import CompilerError, Severity

logger = logging.getLogger(__name__)

_XCODE_RE = re.compile(
    r"(?P<file>[^:]+\.\w+):(?P<line>\d+):(?P<column>\d+):\s*(?:error|warning):\s*(?P<message>\S.*)"
)
_UNITY_RE = re.compile(
    r"(?P<file>[^(]+)\((?P<line>\d+),(?P<column>\d+)\):\s*(?:error|warning)\s*\w+:\s*(?P<message>\S.*)"
)

_LAYOUTS = {
    IDE.XCODE: _XCODE_RE,
    IDE.UNITY: _UNITY_RE,
}


def severity_of(text: str) -> Severity | None:
    """Map severity keywords to a :class:`Severity`; None if there are none."""
    lowered = text.lower()
    if "error" in lowered or "failed" in lowered:
        return Severity.ERROR
    if "warning" in lowered:
        return Severity.WARNING
    return None


def parse_diagnostic(text: str, ide: IDE | None = None) -> CompilerError | None:
    """Parse one line of IDE output.

    Args:
        text: Candidate line
        ide: Layout to expect. None accepts any line with a severity keyword.

    Returns:
        The diagnostic, or None if the line has no severity keyword or does
        not match the IDE's layout
    """
    severity = severity_of(text)
    if severity is None:
        return None

    layout = _LAYOUTS.get(ide) if ide is not None else None
    if layout is not None:
        match = layout.search(text)
        if match is None:
            return None
        return CompilerError(
            message=match.group("message").strip(),
            severity=severity,
            file=match.group("file").strip(),
            line=int(match.group("line")),
            column=int(match.group("column")),
            raw_text=text,
        )

    error = CompilerError(message=text, severity=severity, raw_text=text)
    locations = extract_error_locations(text)
    if locations:
        error.file = locations[0].file
        error.line = locations[0].line
        error.column = locations[0].column
    return error


_DIAGNOSTIC_LINES = DomainProfile(
    name="compiler.diagnostics",
    rules=(FieldRule("raw", lambda text: severity_of(text) is not None),),
    required_fields=("raw",),
    one_record_per_value=True,
)


def profile_for(ide: IDE | None) -> DomainProfile:
    """Diagnostic profile that only keeps lines parseable for ``ide``."""
    return replace(
        _DIAGNOSTIC_LINES,
        name=f"compiler.{ide.name.lower() if ide else 'generic'}",
        validator=lambda record: parse_diagnostic(record["raw"], ide) is not None,
    )


def parse(content: WindowContent, ide: IDE | None = None) -> list[CompilerError]:
    """Extract diagnostics from an IDE window.

    Args:
        content: IDE window content
        ide: IDE whose diagnostic layout to expect

    Returns:
        Diagnostics in on-screen order, text values before labels
    """
    records = classify_values(content.values + content.labels, profile_for(ide))

    errors: list[CompilerError] = []
    for record in records:
        error = parse_diagnostic(record["raw"], ide)
        if error is not None:
            errors.append(error)

    logger.debug(f"Found {len(errors)} diagnostics in {content.window_title!r}")
    return errors


def current_file(content: WindowContent) -> str | None:
    """File name leading the window title (``"main.swift - App"``)."""
    head = content.window_title.split(" - ")[0]
    return head if "." in head else None


def project_name(content: WindowContent, ide: IDE) -> str | None:
    """Project name from the window title.

    Xcode titles read ``File - Project`` and Unity titles ``Unity - Project - Scene``;
    other IDEs are not recognised.
    """
    if ide not in (IDE.XCODE, IDE.UNITY):
        return None
    parts = content.window_title.split(" - ")
    return parts[1] if len(parts) >= 2 else None


def open_files(content: WindowContent) -> list[str]:
    """Titles of editor tabs that look like file names."""
    return [
        element.title
        for element in content.elements
        if element.has_role("AXRadioButton", "AXButton") and element.title and "." in element.title
    ]
