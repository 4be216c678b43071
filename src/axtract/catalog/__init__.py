"""Application identifier tables."""

from .bundle_identifiers import BUNDLE_IDENTIFIERS, IDE, Browser, Terminal, bundle_id_for

__all__ = ["BUNDLE_IDENTIFIERS", "IDE", "Browser", "Terminal", "bundle_id_for"]
