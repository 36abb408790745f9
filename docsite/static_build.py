# path: docsite/static_build.py
"""Render the documentation site to plain HTML files."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from html import escape
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from docsite.doc_page import render_doc_html
from docsite.docs_store import DocsStore
from docsite.home import PAGE_DESCRIPTION, home_page_title, home_routes, render_home_html
from docsite.link_check import check_links, enforce_link_policy
from docsite.nav_tree import SidebarCategory, SidebarDoc, SidebarNode, contains_doc, iter_doc_ids
from docsite.routes import doc_route
from docsite.site_config import SiteConfig

STYLESHEET = Path(__file__).resolve().parent / "styles" / "docsite.css"


@dataclass
class BuildResult:
    out_dir: Path
    pages: List[Path] = field(default_factory=list)
    broken_links: int = 0


def make_href_for(base_url: str):
    prefix = "/" + base_url.strip("/") if base_url.strip("/") else ""

    def href_for(route: str) -> str:
        return prefix + route

    return href_for


def render_sidebar_html(
    nodes: Sequence[SidebarNode],
    store: DocsStore,
    href_for,
    active_doc: Optional[str] = None,
) -> str:
    """Nested ``<ul>``; categories become ``<details>`` blocks."""
    items: List[str] = []
    for node in nodes:
        if isinstance(node, SidebarDoc):
            label = store.load(node.doc_id).sidebar_label if store.exists(node.doc_id) else node.doc_id
            active = " menu__link--active" if node.doc_id == active_doc else ""
            current = " aria-current='page'" if active else ""
            items.append(
                f"<li class='menu__list-item'><a class='menu__link{active}'{current} "
                f"href='{escape(href_for(doc_route(node.doc_id)))}'>{escape(label)}</a></li>"
            )
            continue
        is_open = not node.collapsed or (active_doc is not None and contains_doc(node, active_doc))
        open_attr = " open" if is_open else ""
        items.append(
            f"<li class='menu__list-item'><details class='menu__category'{open_attr}>"
            f"<summary class='menu__caret'>{escape(node.label)}</summary>"
            f"{render_sidebar_html(node.items, store, href_for, active_doc)}"
            "</details></li>"
        )
    return "<ul class='menu__list'>" + "".join(items) + "</ul>"


def _page_shell(
    config: SiteConfig,
    *,
    title: str,
    description: str,
    sidebar_html: str,
    content_html: str,
    href_for,
) -> str:
    sidebar_block = (
        f"<aside class='theme-doc-sidebar'><nav class='menu' aria-label='Docs sidebar'>{sidebar_html}</nav></aside>"
        if sidebar_html
        else ""
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{escape(title)}</title>
<meta name="description" content="{escape(description)}">
<link rel="stylesheet" href="{escape(href_for('/assets/docsite.css'))}">
</head>
<body>
<nav class="navbar"><a class="navbar__brand" href="{escape(href_for('/'))}">{escape(config.title)}</a></nav>
<div class="main-wrapper">
{sidebar_block}
<div class="doc-content">
{content_html}
</div>
</div>
<footer class="footer">{escape(config.title)} v{escape(config.version)}</footer>
</body>
</html>
"""


def _write(path: Path, text: str, result: BuildResult) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    result.pages.append(path)


def _sitemap_xml(config: SiteConfig, routes: Sequence[str], href_for) -> str:
    site = config.url.rstrip("/")
    urls = "\n".join(f"  <url><loc>{escape(site + href_for(r))}</loc></url>" for r in routes)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{urls}\n"
        "</urlset>\n"
    )


def build_site(
    config: SiteConfig,
    sidebar: Sequence[SidebarNode],
    store: DocsStore,
    out_dir: Path | str,
) -> BuildResult:
    """Check links under the configured policy, then write the site to ``out_dir``."""
    out = Path(out_dir)
    result = BuildResult(out_dir=out)

    broken = check_links(sidebar, store, {"home": home_routes()})
    enforce_link_policy(broken, config.on_broken_links)
    result.broken_links = len(broken)

    href_for = make_href_for(config.base_url)
    doc_ids = [doc_id for doc_id in iter_doc_ids(sidebar) if store.exists(doc_id)]
    logger.info("Building {} documents into {}", len(doc_ids), out)

    home_html = _page_shell(
        config,
        title=home_page_title(config),
        description=PAGE_DESCRIPTION,
        sidebar_html="",
        content_html=render_home_html(config, href_for),
        href_for=href_for,
    )
    _write(out / "index.html", home_html, result)

    for doc_id in doc_ids:
        doc = store.load(doc_id)
        page = _page_shell(
            config,
            title=f"{doc.title} | {config.title}",
            description=doc.description or config.description,
            sidebar_html=render_sidebar_html(sidebar, store, href_for, active_doc=doc_id),
            content_html=render_doc_html(doc, sidebar, store, href_for),
            href_for=href_for,
        )
        _write(out / "docs" / doc_id / "index.html", page, result)

    not_found = _page_shell(
        config,
        title=f"Page Not Found | {config.title}",
        description=config.description,
        sidebar_html="",
        content_html=(
            "<main class='container'><h1>Page Not Found</h1>"
            f"<p>We could not find what you were looking for. <a href='{escape(href_for('/'))}'>Back to the start page</a>.</p></main>"
        ),
        href_for=href_for,
    )
    _write(out / "404.html", not_found, result)

    css_target = out / "assets" / "docsite.css"
    css_target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(STYLESHEET, css_target)
    result.pages.append(css_target)

    if config.url:
        routes = ["/"] + [doc_route(doc_id) for doc_id in doc_ids]
        _write(out / "sitemap.xml", _sitemap_xml(config, routes, href_for), result)

    logger.info("Wrote {} files to {}", len(result.pages), out)
    return result


__all__ = ["BuildResult", "build_site", "make_href_for", "render_sidebar_html"]
