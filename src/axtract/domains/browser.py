"""Browser adapter: tab bar, address bar, links and page text."""

from ..catalog.bundle_identifiers import Browser
from ..classification.classifier import classify
from ..model.snapshot import WindowContent
from ..patterns.text_extraction import first_url, looks_like_url
from .profiles import BROWSER_TABS
from .records import BrowserTab

ADDRESS_BAR_ROLES = ("AXTextField", "AXComboBox")


def parse(content: WindowContent, browser: Browser | None = None) -> list[BrowserTab]:
    """Extract open tabs from a browser window's tab bar."""
    return [
        BrowserTab(title=record["title"], browser=browser)
        for record in classify(content.elements, BROWSER_TABS)
    ]


def _address_bar_value(content: WindowContent) -> str | None:
    for element in content.elements:
        if element.has_role(*ADDRESS_BAR_ROLES) and looks_like_url(element.value):
            return element.value
    return None


def parse_active_tab(content: WindowContent, browser: Browser | None = None) -> BrowserTab | None:
    """Describe the focused tab from the window title and address bar.

    Returns:
        The tab, or None if the window has no title
    """
    if not content.window_title:
        return None
    return BrowserTab(
        title=content.window_title,
        url=_address_bar_value(content),
        browser=browser,
        is_active=True,
    )


def current_url(content: WindowContent) -> str | None:
    """URL from the address bar, falling back to a URL in the window title."""
    url = _address_bar_value(content)
    if url is not None:
        return url
    if "http" in content.window_title:
        return first_url(content.window_title)
    return None


def links(content: WindowContent) -> list[str]:
    """Titles and values of every link element."""
    found: list[str] = []
    for element in content.elements_with_role("AXLink"):
        if element.title is not None:
            found.append(element.title)
        if element.value is not None:
            found.append(element.value)
    return found


def page_content(content: WindowContent) -> str | None:
    """Plain text of the window if it holds a web area."""
    if any(element.has_role("AXWebArea", "AXGroup") for element in content.elements):
        return content.as_plain_text()
    return None


def find_in_page(content: WindowContent, text: str) -> bool:
    page = page_content(content)
    return page is not None and text.lower() in page.lower()
