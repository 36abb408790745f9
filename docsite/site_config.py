from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from loguru import logger

try:
    import streamlit as st
except Exception:  # pragma: no cover - allow headless usage (CLI / static build)
    st = None

from docsite.errors import SiteConfigError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_DOCS_DIR = PROJECT_ROOT / "docs"

BROKEN_LINK_POLICIES = ("throw", "warn", "ignore")

ENV_PREFIX = "DOCSITE_"


@dataclass(frozen=True)
class SiteConfig:
    """Read-only site settings handed to every renderer."""

    title: str = "PMS Platform"
    tagline: str = "Architecture, services, infrastructure and operations for the PMS platform"
    description: str = "PMS Platform Documentation"
    url: str = ""
    base_url: str = "/"
    docs_dir: Path = DEFAULT_DOCS_DIR
    on_broken_links: str = "throw"
    version: str = "1.0.0"

    def get(self, key: str, default: Any = None) -> Any:
        return getattr(self, key, default) if key in _FIELD_NAMES else default

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


_FIELD_NAMES = {f.name for f in fields(SiteConfig)}


def validate_site_config(config: SiteConfig) -> SiteConfig:
    if not config.title.strip():
        raise SiteConfigError("Site title must not be empty.")
    if not (config.base_url.startswith("/") and config.base_url.endswith("/")):
        raise SiteConfigError(
            f"base_url must start and end with '/', got {config.base_url!r}."
        )
    if config.on_broken_links not in BROKEN_LINK_POLICIES:
        raise SiteConfigError(
            f"on_broken_links must be one of {', '.join(BROKEN_LINK_POLICIES)}, "
            f"got {config.on_broken_links!r}."
        )
    return config


def _read_streamlit_secrets() -> Mapping[str, Any]:
    if st is None:
        return {}
    try:
        return dict(st.secrets["site"])
    except Exception:
        # No secrets.toml or no [site] table.
        return {}


def load_site_config(
    secrets: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> SiteConfig:
    """
    Prefer Streamlit secrets:
      st.secrets["site"]["title"], ...

    Fallback to env:
      DOCSITE_TITLE, DOCSITE_TAGLINE, ...

    Anything missing keeps the built-in default.
    """
    secrets = _read_streamlit_secrets() if secrets is None else secrets
    environ = os.environ if environ is None else environ

    values: Dict[str, Any] = {}
    for name in _FIELD_NAMES:
        raw = secrets.get(name)
        source = "secrets"
        if raw is None:
            raw = environ.get(ENV_PREFIX + name.upper())
            source = "env"
        if raw is None:
            continue
        values[name] = Path(raw).expanduser() if name == "docs_dir" else str(raw)
        logger.debug("site config {} taken from {}", name, source)

    return validate_site_config(SiteConfig(**values))


__all__ = [
    "BROKEN_LINK_POLICIES",
    "DEFAULT_DOCS_DIR",
    "PROJECT_ROOT",
    "SiteConfig",
    "load_site_config",
    "validate_site_config",
]
