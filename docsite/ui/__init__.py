"""Public exports for the :mod:`docsite.ui` package."""

from __future__ import annotations

from .nav import current_route, go, href_for
from .sidebar import build_sidebar
from .theme import inject_theme_css

__all__ = [
    "build_sidebar",
    "current_route",
    "go",
    "href_for",
    "inject_theme_css",
]
