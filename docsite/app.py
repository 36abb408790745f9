# -*- coding: utf-8 -*-
# file: docsite/app.py
"""Live documentation site: ``streamlit run docsite/app.py``."""
from __future__ import annotations

from pathlib import Path
from typing import Tuple

import streamlit as st

from docsite.doc_page import show_doc_page
from docsite.docs_store import DocsStore
from docsite.errors import DocsiteError
from docsite.home import home_page_title, show_home_page
from docsite.nav_tree import SidebarNode, iter_doc_ids, load_sidebar
from docsite.routes import doc_id_from_route, is_home_route
from docsite.site_config import SiteConfig, load_site_config
from docsite.ui import build_sidebar, current_route, go, href_for, inject_theme_css


@st.cache_resource
def get_site() -> Tuple[SiteConfig, Tuple[SidebarNode, ...]]:
    return load_site_config(), load_sidebar()


@st.cache_resource
def get_store(docs_dir: Path) -> DocsStore:
    return DocsStore(docs_dir)


def _page_title(config: SiteConfig, store: DocsStore, route: str) -> str:
    doc_id = doc_id_from_route(route)
    if doc_id and store.exists(doc_id):
        return f"{store.load(doc_id).title} | {config.title}"
    return home_page_title(config)


def main() -> None:
    try:
        config, sidebar = get_site()
    except DocsiteError as exc:
        st.set_page_config(page_title="Docs", layout="wide", initial_sidebar_state="expanded")
        st.error(f"Site configuration error: {exc}")
        st.stop()

    store = get_store(config.docs_dir)
    route = current_route()

    st.set_page_config(
        page_title=_page_title(config, store, route),
        layout="wide",
        initial_sidebar_state="expanded",
    )
    inject_theme_css()

    build_sidebar(
        current_route=route,
        sidebar=sidebar,
        store=store,
        app_title=config.title,
        app_tagline=config.tagline,
        app_version=config.version,
        go=go,
    )

    if is_home_route(route):
        show_home_page(config, href_for=href_for)
        return

    doc_id = doc_id_from_route(route)
    if doc_id is None or doc_id not in set(iter_doc_ids(sidebar)) or not store.exists(doc_id):
        st.error(f"Page not found: {route}")
        return

    try:
        doc = store.load(doc_id)
    except DocsiteError as exc:
        st.error(str(exc))
        return
    show_doc_page(doc, sidebar, store, href_for=href_for)


if __name__ == "__main__":
    main()
