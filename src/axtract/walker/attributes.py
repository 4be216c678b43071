"""Attribute snapshot extraction.

Reads the fixed attribute set of one element into a
:class:`UIElementSnapshot`. Each query is isolated: an exception or an
unexpected type from the host leaves that one field unset.
"""

from collections.abc import Sequence
from typing import Any

from ..hal.interfaces import accessibility_tree as attrs
from ..hal.interfaces.accessibility_tree import IAccessibilityTree
from ..logging import get_logger
from ..model.snapshot import Point, Size, UIElementSnapshot

logger = get_logger(__name__)


def _query(tree: IAccessibilityTree, element: Any, name: str) -> Any | None:
    try:
        return tree.get_attribute(element, name)
    except Exception as e:
        logger.debug("attribute_query_failed", attribute=name, error=str(e))
        return None


def _as_string(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    return False


def _pair(value: Any, first: str, second: str) -> tuple[float, float] | None:
    if value is None:
        return None
    if hasattr(value, first) and hasattr(value, second):
        try:
            return float(getattr(value, first)), float(getattr(value, second))
        except (TypeError, ValueError):
            return None
    if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
        try:
            return float(value[0]), float(value[1])
        except (TypeError, ValueError):
            return None
    return None


def _as_point(value: Any) -> Point | None:
    if isinstance(value, Point):
        return value
    pair = _pair(value, "x", "y")
    return Point(*pair) if pair else None


def _as_size(value: Any) -> Size | None:
    if isinstance(value, Size):
        return value
    pair = _pair(value, "width", "height")
    return Size(*pair) if pair else None


def snapshot_element(
    tree: IAccessibilityTree,
    element: Any,
    children: Sequence[Any] | None = None,
) -> UIElementSnapshot:
    """Materialize one element's attributes.

    Args:
        tree: Host tree access
        element: Opaque element handle
        children: Already enumerated children, used for ``child_count``

    Returns:
        Immutable snapshot of the element
    """
    if children is None:
        children = enumerate_children(tree, element)

    def text(name: str) -> str | None:
        return _as_string(_query(tree, element, name))

    def flag(name: str) -> bool:
        return _as_bool(_query(tree, element, name))

    return UIElementSnapshot(
        role=text(attrs.ROLE),
        subrole=text(attrs.SUBROLE),
        role_description=text(attrs.ROLE_DESCRIPTION),
        title=text(attrs.TITLE),
        value=text(attrs.VALUE),
        description=text(attrs.DESCRIPTION),
        help=text(attrs.HELP),
        is_focused=flag(attrs.FOCUSED),
        is_enabled=flag(attrs.ENABLED),
        is_main=flag(attrs.MAIN),
        is_minimized=flag(attrs.MINIMIZED),
        is_hidden=flag(attrs.HIDDEN),
        position=_as_point(_query(tree, element, attrs.POSITION)),
        size=_as_size(_query(tree, element, attrs.SIZE)),
        selected_text=text(attrs.SELECTED_TEXT),
        child_count=len(children),
    )


def enumerate_children(tree: IAccessibilityTree, element: Any) -> list[Any]:
    """List an element's children, treating host failures as no children."""
    try:
        return list(tree.enumerate_children(element) or [])
    except Exception as e:
        logger.debug("child_enumeration_failed", error=str(e))
        return []
