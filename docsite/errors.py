"""Exception types shared by the live site, the static build and the CLI."""

from __future__ import annotations

from typing import Sequence


class DocsiteError(RuntimeError):
    """Base class for documentation site failures."""


class SiteConfigError(DocsiteError):
    """Raised when site settings from secrets or env are invalid."""


class SidebarConfigError(DocsiteError):
    """Raised when the sidebar literal cannot be turned into a navigation tree."""


class DocNotFoundError(DocsiteError):
    """Raised when a document identifier does not resolve to a markdown file."""

    def __init__(self, doc_id: str, message: str | None = None) -> None:
        self.doc_id = doc_id
        super().__init__(message or f"No document found for id '{doc_id}'")


class DocFormatError(DocsiteError):
    """Raised when a markdown document has unreadable front matter."""


class BrokenLinksError(DocsiteError):
    """Raised by the link check when the broken-link policy is ``throw``."""

    def __init__(self, broken: Sequence[object]) -> None:
        self.broken = list(broken)
        lines = [f"Found {len(self.broken)} broken link(s):"]
        lines.extend(f"  - {item}" for item in self.broken)
        super().__init__("\n".join(lines))


__all__ = [
    "BrokenLinksError",
    "DocFormatError",
    "DocNotFoundError",
    "DocsiteError",
    "SidebarConfigError",
    "SiteConfigError",
]
