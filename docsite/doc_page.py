from __future__ import annotations

from html import escape
from typing import Callable, Optional, Sequence

import streamlit as st
from markdown_it import MarkdownIt

from docsite.docs_store import DocPage, DocsStore
from docsite.nav_tree import SidebarNode, breadcrumbs, pagination
from docsite.routes import doc_route, resolve_doc_href

HrefFor = Callable[[str], str]

_md = MarkdownIt("commonmark", {"html": True}).enable("table")


def _identity(route: str) -> str:
    return route


def render_doc_body(doc: DocPage, href_for: Optional[HrefFor] = None) -> str:
    """Markdown body -> HTML; internal links are resolved to routes and passed through ``href_for``."""
    href_for = href_for or _identity
    tokens = _md.parse(doc.body)
    for token in tokens:
        for child in token.children or []:
            if child.type != "link_open":
                continue
            route = resolve_doc_href(str(child.attrGet("href") or ""), doc.doc_id)
            if route is None:
                continue
            child.attrSet("href", href_for(route))
            # streamlit opens untargeted links in a new tab
            child.attrSet("target", "_self")
    return _md.renderer.render(tokens, _md.options, {})


def build_breadcrumbs_html(sidebar: Sequence[SidebarNode], doc: DocPage) -> str:
    trail = breadcrumbs(sidebar, doc.doc_id) or []
    parts = [f"<li class='breadcrumbs__item'>{escape(label)}</li>" for label in trail]
    parts.append(
        f"<li class='breadcrumbs__item breadcrumbs__item--active'>{escape(doc.sidebar_label)}</li>"
    )
    return (
        "<nav class='breadcrumbs-nav' aria-label='Breadcrumbs'><ul class='breadcrumbs'>"
        + "".join(parts)
        + "</ul></nav>"
    )


def build_pager_html(
    sidebar: Sequence[SidebarNode],
    doc: DocPage,
    store: DocsStore,
    href_for: Optional[HrefFor] = None,
) -> str:
    href_for = href_for or _identity
    prev_id, next_id = pagination(sidebar, doc.doc_id)
    links = []
    for doc_id, kind, caption in ((prev_id, "prev", "Previous"), (next_id, "next", "Next")):
        if doc_id is None or not store.exists(doc_id):
            continue
        label = store.load(doc_id).sidebar_label
        links.append(
            f"<a class='pagination-nav__link pagination-nav__link--{kind}' "
            f"href='{escape(href_for(doc_route(doc_id)))}' target='_self'>"
            f"<div class='pagination-nav__sublabel'>{caption}</div>"
            f"<div class='pagination-nav__label'>{escape(label)}</div></a>"
        )
    if not links:
        return ""
    return "<nav class='pagination-nav' aria-label='Docs pages'>" + "".join(links) + "</nav>"


def render_doc_html(
    doc: DocPage,
    sidebar: Sequence[SidebarNode],
    store: DocsStore,
    href_for: Optional[HrefFor] = None,
) -> str:
    return "\n".join(
        part
        for part in (
            build_breadcrumbs_html(sidebar, doc),
            f"<article class='markdown'>{render_doc_body(doc, href_for)}</article>",
            build_pager_html(sidebar, doc, store, href_for),
        )
        if part
    )


def show_doc_page(
    doc: DocPage,
    sidebar: Sequence[SidebarNode],
    store: DocsStore,
    href_for: Optional[HrefFor] = None,
) -> None:
    st.markdown(render_doc_html(doc, sidebar, store, href_for), unsafe_allow_html=True)


__all__ = [
    "build_breadcrumbs_html",
    "build_pager_html",
    "render_doc_body",
    "render_doc_html",
    "show_doc_page",
]
