# path: docsite/sidebars.py
"""Sidebar declaration for the documentation site.

Plain literal data: strings are document ids, dicts are categories. Edit this
file by hand when pages are added, renamed or moved; ``docsite check-links``
verifies every id against ``docs/``.
"""

from __future__ import annotations

from typing import Dict, List, Union

SidebarItem = Union[str, Dict[str, object]]

SIDEBARS: Dict[str, List[SidebarItem]] = {
    "docsSidebar": [
        "intro",
        {
            "type": "category",
            "label": "Platform",
            "collapsed": False,
            "items": [
                "platform/overview",
                "platform/architecture",
                "platform/ingress-and-networking",
                "platform/security-model",
                "platform/authentication-flow",
                "platform/configuration-management",
                "platform/environments",
            ],
        },
        {
            "type": "category",
            "label": "Services",
            "collapsed": False,
            "items": [
                {
                    "type": "category",
                    "label": "Auth Service",
                    "items": [
                        "services/auth/overview",
                        "services/auth/api-contract",
                        "services/auth/security",
                        "services/auth/deployment",
                        "services/auth/failure-modes",
                    ],
                },
            ],
        },
        {
            "type": "category",
            "label": "Frontend",
            "collapsed": False,
            "items": [
                "frontend/overview",
                "frontend/configuration",
                "frontend/auth-integration",
                "frontend/websocket-integration",
                "frontend/common-issues",
            ],
        },
        {
            "type": "category",
            "label": "Infrastructure",
            "collapsed": False,
            "items": [
                "infrastructure/eks",
                "infrastructure/ingress",
                "infrastructure/networking",
                "infrastructure/secrets-management",
                "infrastructure/scaling-and-upgrades",
            ],
        },
        {
            "type": "category",
            "label": "Operations",
            "collapsed": False,
            "items": [
                "operations/deployment-guide",
                "operations/monitoring",
                "operations/debugging",
                "operations/runbooks",
                "operations/incident-response",
            ],
        },
        {
            "type": "category",
            "label": "Reference",
            "collapsed": False,
            "items": [
                "reference/endpoints",
                "reference/ports-and-protocols",
                "reference/glossary",
            ],
        },
    ],
}

DEFAULT_SIDEBAR = "docsSidebar"

__all__ = ["DEFAULT_SIDEBAR", "SIDEBARS", "SidebarItem"]
