from docsite.routes import (
    doc_id_from_route,
    doc_route,
    home_route,
    is_home_route,
    resolve_doc_href,
)


def test_doc_route_default_base():
    assert doc_route("platform/overview") == "/docs/platform/overview"


def test_doc_route_with_base_url():
    assert doc_route("intro", base_url="/pms/") == "/pms/docs/intro"
    assert home_route("/pms/") == "/pms/"


def test_doc_id_from_route_round_trip_and_rejects():
    assert doc_id_from_route("/docs/services/auth/overview") == "services/auth/overview"
    assert doc_id_from_route("/docs/intro#top") == "intro"
    assert doc_id_from_route("/pms/docs/intro", base_url="/pms/") == "intro"
    assert doc_id_from_route("/blog/post") is None
    assert doc_id_from_route("/docs/") is None


def test_is_home_route():
    assert is_home_route("/")
    assert is_home_route("")
    assert not is_home_route("/docs/intro")
    assert is_home_route("/pms", base_url="/pms/")


def test_doc_suffix_is_dropped_from_routes():
    assert doc_id_from_route("/docs/platform/overview.md") == "platform/overview"
    assert doc_id_from_route("/docs/intro.mdx#top") == "intro"


def test_resolve_relative_markdown_links():
    assert resolve_doc_href("usage.md", "guide/setup") == "/docs/guide/usage"
    assert resolve_doc_href("./usage.md#step-2", "guide/setup") == "/docs/guide/usage#step-2"
    assert resolve_doc_href("../intro.mdx", "guide/setup") == "/docs/intro"
    assert resolve_doc_href("guide/setup.md", "intro") == "/docs/guide/setup"


def test_resolve_absolute_links():
    assert resolve_doc_href("/docs/platform/overview.md", "intro") == "/docs/platform/overview"
    assert resolve_doc_href("/docs/intro#top", "guide/setup") == "/docs/intro#top"
    assert resolve_doc_href("/blog", "intro") == "/blog"


def test_resolve_leaves_non_internal_links_alone():
    for href in ("https://example.com/a.md", "mailto:ops@example.com", "#anchor", "//cdn/x.md", "img/diagram.png", ""):
        assert resolve_doc_href(href, "guide/setup") is None
