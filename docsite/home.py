# docsite/home.py — landing page: hero banner + three entry cards
from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Callable, List, Optional, Tuple

import streamlit as st

from docsite.site_config import SiteConfig

HrefFor = Callable[[str], str]

PAGE_TITLE = "Welcome"
PAGE_DESCRIPTION = "PMS Platform Documentation"


@dataclass(frozen=True)
class FeatureCard:
    icon: str
    title: str
    text: str
    link_label: str
    route: str


HERO_CTA_LABEL = "Get Started"
HERO_CTA_ROUTE = "/docs/intro"

FEATURE_CARDS: Tuple[FeatureCard, ...] = (
    FeatureCard(
        icon="🏗️",
        title="Platform Architecture",
        text="Learn about the PMS platform architecture, security model, and core concepts.",
        link_label="Explore Platform →",
        route="/docs/platform/overview",
    ),
    FeatureCard(
        icon="🔧",
        title="Services",
        text="Detailed documentation for all platform services including auth, analytics, and more.",
        link_label="View Services →",
        route="/docs/services/auth/overview",
    ),
    FeatureCard(
        icon="⚙️",
        title="Operations",
        text="Deployment guides, monitoring, debugging, and operational runbooks.",
        link_label="Read Operations →",
        route="/docs/operations/deployment-guide",
    ),
)


def _identity(route: str) -> str:
    return route


def home_routes() -> List[str]:
    """Every route the landing page links to (call-to-action first)."""
    return [HERO_CTA_ROUTE] + [card.route for card in FEATURE_CARDS]


def home_page_title(config: SiteConfig) -> str:
    return f"{PAGE_TITLE} | {config.title}"


def build_hero_html(config: SiteConfig, href_for: Optional[HrefFor] = None) -> str:
    href_for = href_for or _identity
    return (
        f"""
        <header class='hero hero--primary hero-banner'>
          <div class='container'>
            <h1 class='hero__title'>{escape(config.title)}</h1>
            <p class='hero__subtitle'>{escape(config.tagline)}</p>
            <div class='hero-buttons'>
              <a class='button button--secondary button--lg' href='{escape(href_for(HERO_CTA_ROUTE))}' target='_self'>{escape(HERO_CTA_LABEL)}</a>
            </div>
          </div>
        </header>
        """.strip()
    )


def _build_card_html(card: FeatureCard, href_for: HrefFor) -> str:
    return (
        f"""
        <div class='col col--4 feature-card'>
          <h3>{card.icon} {escape(card.title)}</h3>
          <p>{escape(card.text)}</p>
          <a href='{escape(href_for(card.route))}' target='_self'>{escape(card.link_label)}</a>
        </div>
        """.strip()
    )


def build_features_html(href_for: Optional[HrefFor] = None) -> str:
    href_for = href_for or _identity
    cards = "\n".join(_build_card_html(card, href_for) for card in FEATURE_CARDS)
    return (
        "<main><div class='container margin-vert--lg'><div class='row'>\n"
        f"{cards}\n"
        "</div></div></main>"
    )


def render_home_html(config: SiteConfig, href_for: Optional[HrefFor] = None) -> str:
    """Landing page markup; a pure function of ``config`` and ``href_for``."""
    return build_hero_html(config, href_for) + "\n" + build_features_html(href_for)


def show_home_page(config: SiteConfig, href_for: Optional[HrefFor] = None) -> None:
    st.markdown(render_home_html(config, href_for), unsafe_allow_html=True)


__all__ = [
    "FEATURE_CARDS",
    "FeatureCard",
    "HERO_CTA_LABEL",
    "HERO_CTA_ROUTE",
    "PAGE_DESCRIPTION",
    "build_features_html",
    "build_hero_html",
    "home_page_title",
    "home_routes",
    "render_home_html",
    "show_home_page",
]
