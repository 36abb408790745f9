from __future__ import annotations

import pytest

from docsite.errors import SidebarConfigError
from docsite.nav_tree import (
    SidebarCategory,
    breadcrumbs,
    contains_doc,
    duplicate_doc_ids,
    find_category,
    iter_doc_ids,
    load_sidebar,
    pagination,
)

TREE = [
    "intro",
    {
        "type": "category",
        "label": "Services",
        "items": [
            {"type": "category", "label": "Auth", "items": ["auth/a", "auth/b"]},
            "services/misc",
        ],
    },
    "outro",
]


def test_iter_doc_ids_is_depth_first():
    assert list(iter_doc_ids(load_sidebar(TREE))) == [
        "intro",
        "auth/a",
        "auth/b",
        "services/misc",
        "outro",
    ]


def test_breadcrumbs_follow_category_path():
    nodes = load_sidebar(TREE)
    assert breadcrumbs(nodes, "auth/b") == ["Services", "Auth"]
    assert breadcrumbs(nodes, "intro") == []
    assert breadcrumbs(nodes, "nope") is None


def test_pagination_crosses_category_boundaries():
    nodes = load_sidebar(TREE)
    assert pagination(nodes, "intro") == (None, "auth/a")
    assert pagination(nodes, "auth/b") == ("auth/a", "services/misc")
    assert pagination(nodes, "outro") == ("services/misc", None)
    assert pagination(nodes, "missing") == (None, None)


def test_find_category_searches_nested_levels():
    nodes = load_sidebar(TREE)
    auth = find_category(nodes, "Auth")
    assert isinstance(auth, SidebarCategory)
    assert contains_doc(auth, "auth/a")
    assert not contains_doc(auth, "intro")
    assert find_category(nodes, "Missing") is None


def test_duplicate_ids_are_rejected():
    tree = ["a", {"type": "category", "label": "X", "items": ["b", "a"]}]
    assert duplicate_doc_ids(tree) == ["a"]
    with pytest.raises(SidebarConfigError, match="Duplicate"):
        load_sidebar(tree)


@pytest.mark.parametrize(
    "bad",
    [
        [42],
        [""],
        [{"type": "link", "label": "x", "href": "https://example.com"}],
        [{"type": "category", "label": "", "items": ["a"]}],
        [{"type": "category", "label": "Empty", "items": []}],
    ],
)
def test_malformed_items_raise(bad):
    with pytest.raises(SidebarConfigError):
        load_sidebar(bad)
