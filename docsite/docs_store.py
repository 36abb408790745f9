# path: docsite/docs_store.py
"""Markdown documents on disk, addressed by document id.

A document id is the path below ``docs/`` without its extension, e.g.
``services/auth/overview`` -> ``docs/services/auth/overview.md``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from docsite.errors import DocFormatError, DocNotFoundError
from docsite.routes import DOC_SUFFIXES

_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
_H1_RE = re.compile(r"^#[ \t]+(.+?)[ \t#]*$", re.MULTILINE)


@dataclass(frozen=True)
class DocPage:
    doc_id: str
    title: str
    body: str
    source_path: Path
    sidebar_label: str
    description: str = ""


def parse_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Split ``text`` into (front matter mapping, markdown body)."""
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text
    try:
        meta = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError as exc:
        raise DocFormatError(f"Invalid front matter: {exc}") from exc
    if not isinstance(meta, dict):
        raise DocFormatError("Front matter must be a mapping of keys to values")
    return meta, text[match.end():]


def _first_heading(body: str) -> Optional[str]:
    m = _H1_RE.search(body)
    return m.group(1).strip() if m else None


def _check_doc_id(doc_id: str) -> str:
    cleaned = (doc_id or "").strip()
    if (
        not cleaned
        or cleaned.startswith("/")
        or "\\" in cleaned
        or ".." in cleaned.split("/")
    ):
        raise DocNotFoundError(doc_id, f"Invalid document id '{doc_id}'")
    return cleaned


class DocsStore:
    """Resolves document ids against a ``docs/`` directory."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def path_for(self, doc_id: str) -> Optional[Path]:
        doc_id = _check_doc_id(doc_id)
        for suffix in DOC_SUFFIXES:
            candidate = self.root / f"{doc_id}{suffix}"
            if candidate.is_file():
                return candidate
        return None

    def exists(self, doc_id: str) -> bool:
        try:
            return self.path_for(doc_id) is not None
        except DocNotFoundError:
            return False

    def load(self, doc_id: str) -> DocPage:
        path = self.path_for(doc_id)
        if path is None:
            raise DocNotFoundError(doc_id)
        return _load_doc(doc_id.strip(), path, path.stat().st_mtime_ns)

    def all_doc_ids(self) -> List[str]:
        """Every document id found under the root, sorted."""
        if not self.root.is_dir():
            return []
        ids = set()
        for suffix in DOC_SUFFIXES:
            for path in self.root.rglob(f"*{suffix}"):
                ids.add(path.relative_to(self.root).with_suffix("").as_posix())
        return sorted(ids)


@lru_cache(maxsize=256)
def _load_doc(doc_id: str, path: Path, mtime_ns: int) -> DocPage:
    # mtime_ns is part of the cache key so edited files are re-read.
    try:
        text = path.read_text(encoding="utf-8")
        meta, body = parse_front_matter(text)
    except DocFormatError as exc:
        raise DocFormatError(f"{path}: {exc}") from exc

    title = str(meta.get("title") or _first_heading(body) or doc_id.rsplit("/", 1)[-1])
    return DocPage(
        doc_id=doc_id,
        title=title,
        body=body,
        source_path=path,
        sidebar_label=str(meta.get("sidebar_label") or title),
        description=str(meta.get("description") or ""),
    )


__all__ = ["DOC_SUFFIXES", "DocPage", "DocsStore", "parse_front_matter"]
