"""Generic depth-bounded accessibility tree walker.

Flattens a live tree of opaque element handles into a
:class:`WindowContent`. Traversal is pre-order, depth-first and
left-to-right among siblings. Nodes at ``depth >= max_depth`` are not
visited, which also bounds traversal of cyclic trees the host may report.
A handle that reappears among its own descendants (the same Python object
as one of its ancestors) is not entered again. Repeated siblings are
still visited.

The walk uses an explicit stack, so a large configured depth cannot exhaust
the interpreter's recursion limit.

Example:
    >>> walker = AccessibilityTreeWalker(host)
    >>> content = walker.walk(window)
    >>> print(content.as_plain_text())
"""

from typing import Any

from ..config import get_settings
from ..hal.interfaces.accessibility_tree import IAccessibilityTree, IApplicationHost
from ..logging import get_logger
from ..model.snapshot import WindowContent
from .attributes import enumerate_children, snapshot_element

logger = get_logger(__name__)

DEFAULT_MAX_DEPTH = 50


class AccessibilityTreeWalker:
    """Walks accessibility trees exposed by an :class:`IAccessibilityTree`.

    The walker holds no state between calls; every walk returns a fresh
    :class:`WindowContent`.
    """

    def __init__(self, tree: IAccessibilityTree, max_depth: int | None = None) -> None:
        """Initialize the walker.

        Args:
            tree: Host tree access
            max_depth: Default depth bound. Falls back to the ``max_depth`` setting.
        """
        self.tree = tree
        self.max_depth = max_depth if max_depth is not None else get_settings().max_depth

    def walk(
        self,
        root: Any | None,
        max_depth: int | None = None,
        *,
        application_name: str = "",
        window_title: str | None = None,
    ) -> WindowContent | None:
        """Collect every descendant of ``root`` within the depth bound.

        Args:
            root: Root element handle, or None if it could not be resolved
            max_depth: Depth bound for this call (root is depth 0)
            application_name: Application name recorded on the result
            window_title: Window title recorded on the result. Defaults to
                the root element's title.

        Returns:
            The collected content, or None if ``root`` is None
        """
        if root is None:
            return None

        limit = self.max_depth if max_depth is None else max_depth

        elements = []
        values: list[str] = []
        labels: list[str] = []
        editable_values: list[str] = []
        depth_limited = False
        cycles_skipped = 0

        # Ancestors of the node being visited; holding them keeps their ids unique
        path: list[Any] = []
        on_path: set[int] = set()

        stack: list[tuple[Any, int]] = [(root, 0)] if limit > 0 else []
        while stack:
            element, depth = stack.pop()

            while len(path) > depth:
                on_path.discard(id(path.pop()))
            if id(element) in on_path:
                cycles_skipped += 1
                continue
            path.append(element)
            on_path.add(id(element))

            children = enumerate_children(self.tree, element)
            snapshot = snapshot_element(self.tree, element, children)
            elements.append(snapshot)

            if snapshot.value:
                values.append(snapshot.value)
            if snapshot.title:
                labels.append(snapshot.title)
            if snapshot.description:
                labels.append(snapshot.description)
            if snapshot.is_editable and snapshot.value:
                editable_values.append(snapshot.value)

            if depth + 1 >= limit:
                depth_limited = depth_limited or bool(children)
                continue

            # Reversed so the leftmost child is popped first
            for child in reversed(children):
                stack.append((child, depth + 1))

        if window_title is None:
            window_title = (elements[0].title if elements else None) or ""

        logger.debug(
            "tree_walked",
            backend=self.tree.get_backend_name(),
            nodes=len(elements),
            max_depth=limit,
            depth_limited=depth_limited,
            cycles_skipped=cycles_skipped,
        )

        return WindowContent(
            application_name=application_name,
            window_title=window_title,
            elements=tuple(elements),
            values=tuple(values),
            labels=tuple(labels),
            editable_values=tuple(editable_values),
        )

    def read_focused_window(self) -> WindowContent | None:
        """Walk the focused window of the frontmost application.

        Returns:
            The window's content, or None if no window has focus

        Raises:
            AccessibilityPermissionError: If the host refuses access
        """
        host = self._host()
        window = host.focused_window()
        if window is None:
            return None

        app = host.frontmost_application()
        return self.walk(window, application_name=app.name if app else "Unknown")

    def read_all_windows(self, bundle_id: str) -> list[WindowContent]:
        """Walk every window of every running instance of an application.

        Raises:
            AccessibilityPermissionError: If the host refuses access
        """
        host = self._host()
        contents: list[WindowContent] = []
        for app, window in host.application_windows(bundle_id):
            content = self.walk(window, application_name=app.name or bundle_id)
            if content is not None:
                contents.append(content)
        return contents

    def _host(self) -> IApplicationHost:
        if not isinstance(self.tree, IApplicationHost):
            raise TypeError(
                f"{type(self.tree).__name__} cannot locate windows; an IApplicationHost is required"
            )
        return self.tree


def walk(
    tree: IAccessibilityTree,
    root: Any | None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    *,
    application_name: str = "",
    window_title: str | None = None,
) -> WindowContent | None:
    """Walk ``root`` once. See :meth:`AccessibilityTreeWalker.walk`."""
    return AccessibilityTreeWalker(tree, max_depth=max_depth).walk(
        root, application_name=application_name, window_title=window_title
    )
