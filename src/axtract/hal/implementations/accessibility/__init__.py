"""Accessibility host implementations.

This module provides implementations of the IApplicationHost interface
for different accessibility backends:

- InMemoryAccessibilityHost: plain Python trees (tests, replaying captures)
- MacAccessibilityHost: macOS Accessibility API via pyobjc [macOS only]
- UIAAccessibilityHost: Windows UI Automation via uiautomation [Windows only]

The platform bindings import their native libraries lazily, so importing
this package never requires them.
"""

from axtract.hal.implementations.accessibility.ax_tree import MacAccessibilityHost
from axtract.hal.implementations.accessibility.memory_tree import (
    InMemoryAccessibilityHost,
    MemoryElement,
)
from axtract.hal.implementations.accessibility.uia_tree import UIAAccessibilityHost

__all__ = [
    "InMemoryAccessibilityHost",
    "MacAccessibilityHost",
    "MemoryElement",
    "UIAAccessibilityHost",
]
