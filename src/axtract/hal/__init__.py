"""Hardware/host abstraction layer.

Interfaces for the accessibility collaborators the core consumes, and the
bindings that satisfy them.
"""

import platform

from .interfaces import ApplicationInfo, IAccessibilityTree, IApplicationHost


def create_default_host() -> IApplicationHost:
    """Create the host binding for the current platform.

    Returns:
        MacAccessibilityHost on macOS, UIAAccessibilityHost on Windows

    Raises:
        BackendUnavailableError: On platforms without a binding
    """
    from ..exceptions import BackendUnavailableError
    from .implementations.accessibility import MacAccessibilityHost, UIAAccessibilityHost

    system = platform.system()
    if system == "Darwin":
        return MacAccessibilityHost()
    if system == "Windows":
        return UIAAccessibilityHost()
    raise BackendUnavailableError(system.lower() or "unknown", "no accessibility binding")


__all__ = [
    "ApplicationInfo",
    "IAccessibilityTree",
    "IApplicationHost",
    "create_default_host",
]
