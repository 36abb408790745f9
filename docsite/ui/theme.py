from __future__ import annotations

from pathlib import Path

import streamlit as st

STYLES_DIR = Path(__file__).resolve().parents[1] / "styles"


def inject_css(path: Path) -> None:
    if path.exists():
        st.markdown(
            f"<style id='ds-theme'>{path.read_text(encoding='utf-8')}</style>",
            unsafe_allow_html=True,
        )


def inject_theme_css() -> None:
    """Load the stylesheet shared with the static build."""
    inject_css(STYLES_DIR / "docsite.css")
