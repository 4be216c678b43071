"""
Attribute snapshot model.

Immutable value objects describing one UI node (:class:`UIElementSnapshot`)
and one traversal's worth of nodes (:class:`WindowContent`). Both are
produced fresh by the tree walker and never mutated afterwards, so they are
safe to share read-only between consumers.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

# Roles whose value is free text typed or displayed by the application
EDITABLE_ROLES: frozenset[str] = frozenset({"AXTextArea", "AXTextField", "AXStaticText"})


@dataclass(frozen=True)
class Point:
    """Screen position of an element's top-left corner."""

    x: float
    y: float


@dataclass(frozen=True)
class Size:
    """Width and height of an element."""

    width: float
    height: float


@dataclass(frozen=True)
class UIElementSnapshot:
    """One materialized accessibility node.

    String attributes are ``None`` when the host did not report them. State
    flags default to ``False`` when absent.
    """

    role: str | None = None
    subrole: str | None = None
    role_description: str | None = None
    title: str | None = None
    value: str | None = None
    description: str | None = None
    help: str | None = None

    # State
    is_focused: bool = False
    is_enabled: bool = False
    is_main: bool = False
    is_minimized: bool = False
    is_hidden: bool = False

    # Geometry
    position: Point | None = None
    size: Size | None = None

    selected_text: str | None = None
    child_count: int = 0

    @property
    def text(self) -> str | None:
        """First non-empty of value, title and description."""
        for candidate in (self.value, self.title, self.description):
            if candidate:
                return candidate
        return None

    @property
    def is_editable(self) -> bool:
        return self.role in EDITABLE_ROLES

    def has_role(self, *roles: str) -> bool:
        """Check whether the role equals one of ``roles``."""
        return self.role is not None and self.role in roles

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class WindowContent:
    """Everything collected from one traversal.

    ``elements`` is in pre-order. ``values``, ``labels`` and
    ``editable_values`` are aggregated in the same order: a node's own
    entries precede those of its subtree.
    """

    application_name: str = ""
    window_title: str = ""
    elements: tuple[UIElementSnapshot, ...] = field(default_factory=tuple)
    values: tuple[str, ...] = field(default_factory=tuple)
    labels: tuple[str, ...] = field(default_factory=tuple)
    editable_values: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.elements

    @property
    def buttons(self) -> list[UIElementSnapshot]:
        return self.elements_with_role("AXButton")

    @property
    def text_fields(self) -> list[UIElementSnapshot]:
        return [e for e in self.elements if e.has_role("AXTextField", "AXTextArea")]

    @property
    def static_text(self) -> list[UIElementSnapshot]:
        return self.elements_with_role("AXStaticText")

    def elements_with_role(self, role: str) -> list[UIElementSnapshot]:
        """Find elements with exactly this role."""
        return [e for e in self.elements if e.role == role]

    def contains(self, text: str, case_sensitive: bool = False) -> bool:
        """Check whether any collected text contains ``text``."""
        haystack = " ".join(self.values + self.labels + self.editable_values)
        if case_sensitive:
            return text in haystack
        return text.lower() in haystack.lower()

    def as_plain_text(self) -> str:
        """Render collected text as sectioned plain text for LLM prompts."""
        sections: list[str] = []

        if self.editable_values:
            sections.append(
                "=== Editable Content ===\n" + "\n".join(self.editable_values) + "\n\n"
            )
        if self.values:
            sections.append("=== Text Content ===\n" + "\n".join(self.values) + "\n\n")
        if self.labels:
            sections.append("=== Labels & Descriptions ===\n" + "\n".join(self.labels))

        return "".join(sections)

    def semantic_summary(self) -> str:
        """Short description of what the window holds."""
        primary = " | ".join(self.editable_values[:3])
        return (
            "Window contains:\n"
            f"- {len(self.editable_values)} editable text fields\n"
            f"- {len(self.values)} text elements\n"
            f"- {len(self.labels)} labels\n"
            f"- {len(self.elements)} total UI elements\n"
            "\n"
            f"Primary content: {primary}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "application_name": self.application_name,
            "window_title": self.window_title,
            "elements": [e.to_dict() for e in self.elements],
            "values": list(self.values),
            "labels": list(self.labels),
            "editable_values": list(self.editable_values),
        }
