import pytest

from docsite.docs_store import DocsStore
from docsite.errors import BrokenLinksError
from docsite.nav_tree import load_sidebar
from docsite.site_config import DEFAULT_DOCS_DIR, SiteConfig
from docsite.static_build import build_site, make_href_for, render_sidebar_html


def test_build_writes_every_sidebar_page(tmp_path):
    out = tmp_path / "site"
    config = SiteConfig(title="PMS Docs", tagline="Tagline here")
    result = build_site(config, load_sidebar(), DocsStore(DEFAULT_DOCS_DIR), out)

    assert (out / "index.html").is_file()
    assert (out / "404.html").is_file()
    assert (out / "assets" / "docsite.css").is_file()
    assert (out / "docs" / "services" / "auth" / "failure-modes" / "index.html").is_file()
    assert not (out / "sitemap.xml").exists()
    assert result.broken_links == 0

    index = (out / "index.html").read_text(encoding="utf-8")
    assert "<title>Welcome | PMS Docs</title>" in index
    assert "Tagline here" in index


def test_doc_page_contains_sidebar_with_active_link(tmp_path):
    out = tmp_path / "site"
    build_site(SiteConfig(), load_sidebar(), DocsStore(DEFAULT_DOCS_DIR), out)
    page = (out / "docs" / "services" / "auth" / "security" / "index.html").read_text(encoding="utf-8")
    assert "menu__link menu__link--active' aria-current='page' href='/docs/services/auth/security'" in page
    # the collapsed Auth Service category opens because it holds the active page
    assert "<details class='menu__category' open><summary class='menu__caret'>Auth Service</summary>" in page


def test_base_url_and_sitemap(tmp_path):
    out = tmp_path / "site"
    config = SiteConfig(url="https://docs.example.com", base_url="/pms/")
    build_site(config, load_sidebar(), DocsStore(DEFAULT_DOCS_DIR), out)

    index = (out / "index.html").read_text(encoding="utf-8")
    assert "href='/pms/docs/platform/overview'" in index
    sitemap = (out / "sitemap.xml").read_text(encoding="utf-8")
    assert "<loc>https://docs.example.com/pms/docs/intro</loc>" in sitemap


def test_broken_links_stop_the_build(docs_root, small_sidebar, tmp_path):
    # landing page targets are missing from the small fixture tree
    with pytest.raises(BrokenLinksError):
        build_site(SiteConfig(), load_sidebar(small_sidebar), DocsStore(docs_root), tmp_path / "out")
    assert not (tmp_path / "out" / "index.html").exists()


def test_warn_policy_builds_anyway(docs_root, small_sidebar, tmp_path):
    config = SiteConfig(on_broken_links="warn")
    result = build_site(config, load_sidebar(small_sidebar), DocsStore(docs_root), tmp_path / "out")
    assert result.broken_links == 3
    assert (tmp_path / "out" / "docs" / "guide" / "usage" / "index.html").is_file()


def test_render_sidebar_html_respects_collapsed(docs_root):
    tree = load_sidebar(
        [
            "intro",
            {"type": "category", "label": "Guide", "items": ["guide/setup", "guide/usage"]},
        ]
    )
    store = DocsStore(docs_root)
    closed = render_sidebar_html(tree, store, make_href_for("/"))
    assert "<details class='menu__category'><summary" in closed
    opened = render_sidebar_html(tree, store, make_href_for("/"), active_doc="guide/usage")
    assert "<details class='menu__category' open>" in opened
    assert ">Use it</a>" in opened
