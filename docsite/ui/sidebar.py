# path: docsite/ui/sidebar.py
from __future__ import annotations

import re
from html import escape
from typing import Callable, Optional, Sequence

import streamlit as st

from docsite.docs_store import DocsStore
from docsite.nav_tree import SidebarCategory, SidebarDoc, SidebarNode, contains_doc
from docsite.routes import doc_id_from_route, doc_route, home_route


# ----------------------------- Public API --------------------------------- #

def build_sidebar(
    *,
    current_route: str,
    sidebar: Sequence[SidebarNode],
    store: DocsStore,
    app_title: str,
    app_tagline: str,
    app_version: str,
    go: Callable[[str], None],
) -> None:
    """Render the docs navigation tree; the only module allowed to touch ``st.sidebar``."""
    active_doc = doc_id_from_route(current_route)

    with st.sidebar:
        st.markdown(_build_header_html(app_title, app_tagline), unsafe_allow_html=True)

        if st.button(
            "Home",
            key="navbtn_home",
            width="stretch",
            disabled=active_doc is None,
        ):
            go(home_route())

        for node in sidebar:
            if isinstance(node, SidebarDoc):
                _doc_button(node.doc_id, store, active_doc, go)
                continue
            expanded = not node.collapsed or (
                active_doc is not None and contains_doc(node, active_doc)
            )
            with st.expander(node.label, expanded=expanded):
                _render_items(node.items, store, active_doc, go)

        st.markdown(_build_footer_html(app_title, app_version), unsafe_allow_html=True)


__all__ = ["build_sidebar"]


# --------------------------- Internal helpers ------------------------------ #

def _render_items(
    items: Sequence[SidebarNode],
    store: DocsStore,
    active_doc: Optional[str],
    go: Callable[[str], None],
) -> None:
    for node in items:
        if isinstance(node, SidebarDoc):
            _doc_button(node.doc_id, store, active_doc, go)
        else:
            # Streamlit cannot nest expanders, so deeper categories are labelled groups.
            _render_group(node, store, active_doc, go)


def _render_group(
    category: SidebarCategory,
    store: DocsStore,
    active_doc: Optional[str],
    go: Callable[[str], None],
) -> None:
    st.markdown(
        f"<div class='sb-group-label' role='heading' aria-level='3'>{escape(category.label)}</div>",
        unsafe_allow_html=True,
    )
    _render_items(category.items, store, active_doc, go)


def _doc_button(
    doc_id: str,
    store: DocsStore,
    active_doc: Optional[str],
    go: Callable[[str], None],
) -> None:
    label = store.load(doc_id).sidebar_label if store.exists(doc_id) else doc_id
    key_suffix = re.sub(r"[^0-9a-zA-Z_-]+", "_", doc_id).strip("_") or "item"
    is_active = doc_id == active_doc
    clicked = st.button(
        label,
        key=f"navbtn_{key_suffix}",
        width="stretch",
        disabled=is_active,
    )
    if clicked and not is_active:
        go(doc_route(doc_id))


def _build_header_html(title: str, tagline: str) -> str:
    tagline_html = f"<p class='sb-tagline'>{escape(tagline)}</p>" if tagline else ""
    return (
        f"""
        <div class='sb-header-card' role='banner'>
          <div class='sb-title-block'>
            <h1 class='sb-title'>{escape(title or "")}</h1>
            {tagline_html}
          </div>
        </div>
        """.strip()
    )


def _build_footer_html(title: str, version: str) -> str:
    return (
        f"""
        <footer class='sb-footer-line' aria-label='Site version'>
          <span class='sb-footer-title'>{escape(title or "")}</span>
          <span class='sb-version'>v{escape(version or "")}</span>
        </footer>
        """.strip()
    )
