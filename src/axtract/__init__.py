"""axtract: structured records from accessibility trees.

Walks the UI tree a host accessibility API exposes, snapshots every node
and classifies the flat result into domain records (calendar events, mail,
chat, notes, compiler diagnostics, browser tabs, terminal sessions, photos).
"""

from .catalog import BUNDLE_IDENTIFIERS, IDE, Browser, Terminal, bundle_id_for
from .classification import DomainProfile, FieldRule, RecordClassifier, classify, classify_values
from .config import AxtractSettings, get_settings, reset_settings
from .exceptions import (
    AccessibilityPermissionError,
    AxtractException,
    BackendUnavailableError,
    TargetNotAvailableError,
)
from .hal import ApplicationInfo, IAccessibilityTree, IApplicationHost, create_default_host
from .logging import LogContext, get_logger, setup_logging
from .model import ClassifiedRecord, UIElementSnapshot, WindowContent
from .reader import ApplicationReader, ReadResult, ReadStatus
from .walker import AccessibilityTreeWalker, walk

__version__ = "0.1.0"

__all__ = [
    # Tree access
    "ApplicationInfo",
    "IAccessibilityTree",
    "IApplicationHost",
    "create_default_host",
    # Traversal
    "AccessibilityTreeWalker",
    "UIElementSnapshot",
    "WindowContent",
    "walk",
    # Classification
    "ClassifiedRecord",
    "DomainProfile",
    "FieldRule",
    "RecordClassifier",
    "classify",
    "classify_values",
    # Facade
    "ApplicationReader",
    "ReadResult",
    "ReadStatus",
    # Catalog
    "BUNDLE_IDENTIFIERS",
    "Browser",
    "IDE",
    "Terminal",
    "bundle_id_for",
    # Configuration and logging
    "AxtractSettings",
    "LogContext",
    "get_logger",
    "get_settings",
    "reset_settings",
    "setup_logging",
    # Errors
    "AccessibilityPermissionError",
    "AxtractException",
    "BackendUnavailableError",
    "TargetNotAvailableError",
]
