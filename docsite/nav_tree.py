"""Typed view over the sidebar literal in :mod:`docsite.sidebars`."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from docsite.errors import SidebarConfigError
from docsite.sidebars import DEFAULT_SIDEBAR, SIDEBARS


@dataclass(frozen=True)
class SidebarDoc:
    doc_id: str


@dataclass(frozen=True)
class SidebarCategory:
    label: str
    items: Tuple["SidebarNode", ...] = field(default_factory=tuple)
    # Categories without an explicit flag start collapsed.
    collapsed: bool = True


SidebarNode = Union[SidebarDoc, SidebarCategory]


def load_sidebar(raw_items: Sequence[object] | None = None) -> Tuple[SidebarNode, ...]:
    """Convert literal sidebar items into nodes; raise on malformed or duplicate entries."""
    if raw_items is None:
        raw_items = SIDEBARS[DEFAULT_SIDEBAR]

    nodes = tuple(_load_item(item, path=()) for item in raw_items)

    dupes = duplicate_doc_ids(raw_items)
    if dupes:
        raise SidebarConfigError(f"Duplicate document ids in sidebar: {', '.join(dupes)}")
    return nodes


def _load_item(item: object, path: Tuple[str, ...]) -> SidebarNode:
    where = " > ".join(path) or "<root>"
    if isinstance(item, str):
        doc_id = item.strip()
        if not doc_id:
            raise SidebarConfigError(f"Empty document id under {where}")
        return SidebarDoc(doc_id)

    if not isinstance(item, Mapping):
        raise SidebarConfigError(
            f"Sidebar item under {where} must be a doc id or a category, got {type(item).__name__}"
        )

    kind = item.get("type", "category")
    if kind != "category":
        raise SidebarConfigError(f"Unsupported sidebar item type '{kind}' under {where}")

    label = str(item.get("label") or "").strip()
    if not label:
        raise SidebarConfigError(f"Category without a label under {where}")

    children = item.get("items") or []
    if not isinstance(children, (list, tuple)) or not children:
        raise SidebarConfigError(f"Category '{label}' has no items")

    child_path = path + (label,)
    return SidebarCategory(
        label=label,
        items=tuple(_load_item(child, child_path) for child in children),
        collapsed=bool(item.get("collapsed", True)),
    )


def _iter_raw_ids(raw_items: Iterable[object]) -> Iterator[str]:
    for item in raw_items:
        if isinstance(item, str):
            yield item.strip()
        elif isinstance(item, Mapping):
            yield from _iter_raw_ids(item.get("items") or [])


def duplicate_doc_ids(raw_items: Iterable[object]) -> List[str]:
    counts = Counter(_iter_raw_ids(raw_items))
    return sorted(doc_id for doc_id, n in counts.items() if n > 1)


def iter_doc_ids(nodes: Iterable[SidebarNode]) -> Iterator[str]:
    """Yield document ids depth-first in declaration order."""
    for node in nodes:
        if isinstance(node, SidebarDoc):
            yield node.doc_id
        else:
            yield from iter_doc_ids(node.items)


def top_level_categories(nodes: Iterable[SidebarNode]) -> List[str]:
    return [node.label for node in nodes if isinstance(node, SidebarCategory)]


def find_category(nodes: Iterable[SidebarNode], label: str) -> Optional[SidebarCategory]:
    for node in nodes:
        if not isinstance(node, SidebarCategory):
            continue
        if node.label == label:
            return node
        found = find_category(node.items, label)
        if found is not None:
            return found
    return None


def contains_doc(category: SidebarCategory, doc_id: str) -> bool:
    return doc_id in set(iter_doc_ids(category.items))


def breadcrumbs(nodes: Iterable[SidebarNode], doc_id: str) -> Optional[List[str]]:
    """Category labels from the root down to ``doc_id``; ``None`` if not listed."""
    for node in nodes:
        if isinstance(node, SidebarDoc):
            if node.doc_id == doc_id:
                return []
            continue
        trail = breadcrumbs(node.items, doc_id)
        if trail is not None:
            return [node.label] + trail
    return None


def pagination(nodes: Iterable[SidebarNode], doc_id: str) -> Tuple[Optional[str], Optional[str]]:
    """Return the previous and next doc ids around ``doc_id`` in sidebar order."""
    order = list(iter_doc_ids(nodes))
    try:
        idx = order.index(doc_id)
    except ValueError:
        return None, None
    prev_id = order[idx - 1] if idx > 0 else None
    next_id = order[idx + 1] if idx + 1 < len(order) else None
    return prev_id, next_id


__all__ = [
    "SidebarCategory",
    "SidebarDoc",
    "SidebarNode",
    "breadcrumbs",
    "contains_doc",
    "duplicate_doc_ids",
    "find_category",
    "iter_doc_ids",
    "load_sidebar",
    "pagination",
    "top_level_categories",
]
