#!/usr/bin/env python3
"""Pre-commit hook: only ``docsite/ui/sidebar.py`` may render into ``st.sidebar``.

The navigation tree is drawn in one place so every page shares the same
sidebar; a stray ``st.sidebar.write`` in a page module would show up under
the tree on that page only.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

REPO_ROOT = Path(__file__).resolve().parents[1]
PACKAGE_DIR = REPO_ROOT / "docsite"
ALLOWED_FILES = {PACKAGE_DIR / "ui" / "sidebar.py"}


def sidebar_uses(source: str, filename: str = "<string>") -> List[Tuple[int, str]]:
    """Return ``(lineno, line)`` for each ``st.sidebar`` reference in ``source``."""
    try:
        tree = ast.parse(source, filename=filename)
    except SyntaxError:
        return []
    lines = source.splitlines()
    hits = []
    for node in ast.walk(tree):
        if (
            isinstance(node, ast.Attribute)
            and node.attr == "sidebar"
            and isinstance(node.value, ast.Name)
            and node.value.id == "st"
        ):
            text = lines[node.lineno - 1].strip() if node.lineno - 1 < len(lines) else ""
            hits.append((node.lineno, text))
    return sorted(hits)


def _default_paths() -> List[Path]:
    return sorted(PACKAGE_DIR.rglob("*.py"))


def find_violations(paths: Iterable[Path]) -> List[str]:
    violations: List[str] = []
    for path in paths:
        path = path.resolve()
        if path in ALLOWED_FILES or not path.is_file():
            continue
        try:
            source = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            continue
        hits = sidebar_uses(source, str(path))
        if hits:
            try:
                shown = path.relative_to(REPO_ROOT)
            except ValueError:
                shown = path
            body = "\n".join(f"  line {lineno}: {text}" for lineno, text in hits)
            violations.append(f"{shown}:\n{body}")
    return violations


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv if argv is not None else sys.argv[1:])
    paths = [Path(a) if Path(a).is_absolute() else REPO_ROOT / a for a in args] or _default_paths()
    violations = find_violations(paths)
    if violations:
        print(
            "\n".join(
                [
                    "Direct st.sidebar usage is restricted to docsite/ui/sidebar.py.",
                    "Route navigation widgets through docsite.ui.build_sidebar.",
                    *violations,
                ]
            ),
            file=sys.stderr,
        )
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
