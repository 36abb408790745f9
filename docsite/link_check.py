"""Build-time link integrity for the sidebar, the landing page and doc bodies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Mapping, Sequence

from loguru import logger
from markdown_it import MarkdownIt

from docsite.docs_store import DocsStore
from docsite.errors import BrokenLinksError, DocsiteError
from docsite.nav_tree import SidebarNode, iter_doc_ids
from docsite.routes import doc_id_from_route, is_home_route, resolve_doc_href

_md = MarkdownIt("commonmark").enable("table")


@dataclass(frozen=True)
class BrokenLink:
    source: str
    target: str
    reason: str

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.reason})"


def extract_links(markdown: str) -> List[str]:
    """Return every link href in a markdown body, in document order."""
    hrefs: List[str] = []
    for token in _md.parse(markdown):
        for child in token.children or []:
            if child.type == "link_open":
                href = child.attrGet("href")
                if href:
                    hrefs.append(str(href))
    return hrefs


def _check_route(
    source: str, route: str, store: DocsStore, base_url: str
) -> Iterator[BrokenLink]:
    if is_home_route(route, base_url):
        return
    doc_id = doc_id_from_route(route, base_url)
    if doc_id is None:
        yield BrokenLink(source, route, "not a documentation route")
    elif not store.exists(doc_id):
        yield BrokenLink(source, route, f"no document '{doc_id}'")


def check_links(
    sidebar: Sequence[SidebarNode],
    store: DocsStore,
    extra_links: Mapping[str, Iterable[str]] | None = None,
    *,
    base_url: str = "/",
    scan_bodies: bool = True,
) -> List[BrokenLink]:
    """Collect broken links; ``extra_links`` maps a page name to the routes it links to."""
    broken: List[BrokenLink] = []

    doc_ids = list(iter_doc_ids(sidebar))
    for doc_id in doc_ids:
        if not store.exists(doc_id):
            broken.append(BrokenLink("sidebar", doc_id, "document missing"))

    for source, routes in (extra_links or {}).items():
        for route in routes:
            broken.extend(_check_route(source, route, store, base_url))

    if scan_bodies:
        for doc_id in doc_ids:
            if not store.exists(doc_id):
                continue
            try:
                body = store.load(doc_id).body
            except DocsiteError as exc:
                broken.append(BrokenLink(doc_id, doc_id, str(exc)))
                continue
            for href in extract_links(body):
                route = resolve_doc_href(href, doc_id)
                if route is None:
                    continue
                for item in _check_route(f"docs/{doc_id}", route, store, base_url):
                    broken.append(BrokenLink(item.source, href, item.reason))

    return broken


def enforce_link_policy(broken: Sequence[BrokenLink], policy: str) -> None:
    if not broken or policy == "ignore":
        return
    if policy == "throw":
        raise BrokenLinksError(broken)
    for item in broken:
        logger.warning("Broken link: {}", item)


__all__ = ["BrokenLink", "check_links", "enforce_link_policy", "extract_links"]
