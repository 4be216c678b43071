"""Pytest configuration and fixtures."""

import os

import pytest

from axtract.config import reset_settings
from axtract.hal.implementations.accessibility import InMemoryAccessibilityHost, MemoryElement


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test with default settings, whatever the shell exports."""
    for key in list(os.environ):
        if key.startswith("AXTRACT_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def host():
    """Provide an empty trusted in-memory host."""
    return InMemoryAccessibilityHost()


@pytest.fixture
def ordered_tree():
    """Root with children [A, B], where A has child A1."""
    return MemoryElement.from_dict(
        {
            "role": "AXWindow",
            "title": "Root",
            "children": [
                {
                    "role": "AXGroup",
                    "title": "A",
                    "children": [{"role": "AXStaticText", "value": "A1"}],
                },
                {"role": "AXButton", "title": "B"},
            ],
        }
    )


@pytest.fixture
def mail_list_window():
    """Mailbox window with two message rows and a toolbar."""
    return MemoryElement.from_dict(
        {
            "role": "AXWindow",
            "title": "Inbox",
            "children": [
                {"role": "AXButton", "title": "Get Mail"},
                {
                    "role": "AXTable",
                    "children": [
                        {
                            "role": "AXRow",
                            "children": [
                                {"role": "AXStaticText", "value": "alice@example.com"},
                                {"role": "AXStaticText", "value": "2:00 PM"},
                                {"role": "AXStaticText", "value": "Team Meeting"},
                                {"role": "AXStaticText", "value": "Agenda attached"},
                            ],
                        },
                        {
                            "role": "AXRow",
                            "children": [
                                {"role": "AXStaticText", "value": "bob@example.com"},
                                {"role": "AXStaticText", "value": "Standup"},
                            ],
                        },
                        {"role": "AXRow"},
                    ],
                },
            ],
        }
    )


@pytest.fixture
def window_content():
    """Walk a nested-dict tree and return its WindowContent."""
    from axtract.walker import walk

    def build(tree, application_name="", window_title=None):
        return walk(
            InMemoryAccessibilityHost(),
            MemoryElement.from_dict(tree),
            application_name=application_name,
            window_title=window_title,
        )

    return build
