"""URL routes for documents and the landing page."""

from __future__ import annotations

import posixpath
import re
from typing import Optional

DOCS_ROUTE_BASE = "docs"
HOME_ROUTE = "/"

DOC_SUFFIXES = (".md", ".mdx")

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")


def _prefix(base_url: str) -> str:
    return "/" + base_url.strip("/") if base_url.strip("/") else ""


def _strip_doc_suffix(path: str) -> str:
    for suffix in DOC_SUFFIXES:
        if path.endswith(suffix):
            return path[: -len(suffix)]
    return path


def doc_route(doc_id: str, base_url: str = "/") -> str:
    """``platform/overview`` -> ``/docs/platform/overview`` (under ``base_url``)."""
    return f"{_prefix(base_url)}/{DOCS_ROUTE_BASE}/{doc_id.strip('/')}"


def home_route(base_url: str = "/") -> str:
    return _prefix(base_url) + "/"


def doc_id_from_route(route: str, base_url: str = "/") -> Optional[str]:
    """Inverse of :func:`doc_route`; ``None`` for routes outside the docs tree.

    A trailing ``.md``/``.mdx`` is accepted: ``/docs/intro.md`` -> ``intro``.
    """
    path = (route or "").split("#", 1)[0].split("?", 1)[0]
    prefix = f"{_prefix(base_url)}/{DOCS_ROUTE_BASE}/"
    if not path.startswith(prefix):
        return None
    doc_id = _strip_doc_suffix(path[len(prefix):].strip("/"))
    return doc_id or None


def is_home_route(route: str, base_url: str = "/") -> bool:
    path = (route or "").split("#", 1)[0].split("?", 1)[0]
    return path in ("", home_route(base_url), home_route(base_url).rstrip("/"))


def resolve_doc_href(href: str, current_doc_id: str) -> Optional[str]:
    """Route for an href written inside ``current_doc_id``; ``None`` if it is not internal.

    Site-absolute hrefs keep their path with any doc suffix dropped. Relative
    hrefs are resolved against the current document's folder when they name a
    ``.md``/``.mdx`` file, the same way file links between markdown pages
    work. External URLs, bare anchors and relative non-markdown paths give
    ``None``.
    """
    if not href or href.startswith("#") or href.startswith("//") or _SCHEME_RE.match(href):
        return None

    path, sep, fragment = href.partition("#")
    anchor = sep + fragment

    if path.startswith("/"):
        path = path.split("?", 1)[0]
        doc_id = doc_id_from_route(path)
        if doc_id is None:
            return path + anchor
        return doc_route(doc_id) + anchor

    path = path.split("?", 1)[0]
    if not path.endswith(DOC_SUFFIXES):
        return None

    folder = posixpath.dirname(current_doc_id)
    target = posixpath.normpath(posixpath.join(folder, _strip_doc_suffix(path)))
    # ``..`` past the docs root stays in the id so the link check reports it
    return doc_route(target) + anchor


__all__ = [
    "DOCS_ROUTE_BASE",
    "DOC_SUFFIXES",
    "HOME_ROUTE",
    "doc_id_from_route",
    "doc_route",
    "home_route",
    "is_home_route",
    "resolve_doc_href",
]
