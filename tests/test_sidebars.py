"""Shape of the shipped sidebar tree and its link integrity against docs/."""

from __future__ import annotations

from docsite.docs_store import DocsStore
from docsite.nav_tree import (
    SidebarCategory,
    SidebarDoc,
    find_category,
    iter_doc_ids,
    load_sidebar,
    top_level_categories,
)
from docsite.sidebars import DEFAULT_SIDEBAR, SIDEBARS
from docsite.site_config import DEFAULT_DOCS_DIR


def test_six_top_level_categories_in_order():
    nodes = load_sidebar()
    assert top_level_categories(nodes) == [
        "Platform",
        "Services",
        "Frontend",
        "Infrastructure",
        "Operations",
        "Reference",
    ]


def test_intro_is_the_first_entry():
    nodes = load_sidebar()
    assert nodes[0] == SidebarDoc("intro")


def test_services_holds_only_the_auth_service_category():
    services = find_category(load_sidebar(), "Services")
    assert services is not None
    assert len(services.items) == 1

    auth = services.items[0]
    assert isinstance(auth, SidebarCategory)
    assert auth.label == "Auth Service"
    assert [n.doc_id for n in auth.items] == [
        "services/auth/overview",
        "services/auth/api-contract",
        "services/auth/security",
        "services/auth/deployment",
        "services/auth/failure-modes",
    ]


def test_collapsed_flags():
    nodes = load_sidebar()
    for label in top_level_categories(nodes):
        assert find_category(nodes, label).collapsed is False
    # no explicit flag on the nested category
    assert find_category(nodes, "Auth Service").collapsed is True


def test_document_ids_are_unique():
    ids = list(iter_doc_ids(load_sidebar()))
    assert len(ids) == len(set(ids)) == 31


def test_every_sidebar_id_has_a_document():
    store = DocsStore(DEFAULT_DOCS_DIR)
    missing = [doc_id for doc_id in iter_doc_ids(load_sidebar()) if not store.exists(doc_id)]
    assert missing == []


def test_no_orphan_documents():
    store = DocsStore(DEFAULT_DOCS_DIR)
    assert set(store.all_doc_ids()) == set(iter_doc_ids(load_sidebar()))


def test_literal_is_not_mutated_by_loading():
    before = repr(SIDEBARS[DEFAULT_SIDEBAR])
    load_sidebar()
    load_sidebar()
    assert repr(SIDEBARS[DEFAULT_SIDEBAR]) == before
