"""Command line entry point: ``docsite build | check-links | serve``."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from docsite.docs_store import DocsStore
from docsite.errors import DocsiteError
from docsite.home import home_routes
from docsite.link_check import check_links
from docsite.nav_tree import load_sidebar
from docsite.site_config import PROJECT_ROOT, SiteConfig, load_site_config
from docsite.static_build import build_site

APP_PATH = Path(__file__).resolve().parent / "app.py"


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="docsite", description="PMS platform documentation site")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Render the static site")
    build.add_argument("--out", type=Path, default=PROJECT_ROOT / "build", help="Output directory")
    build.add_argument("--docs-dir", type=Path, default=None, help="Markdown source directory")

    check = sub.add_parser("check-links", help="Verify sidebar, landing page and doc links")
    check.add_argument("--docs-dir", type=Path, default=None, help="Markdown source directory")

    sub.add_parser("serve", help="Run the live site with Streamlit")
    return parser.parse_args(argv)


def _load_config(args: argparse.Namespace) -> SiteConfig:
    config = load_site_config()
    docs_dir = getattr(args, "docs_dir", None)
    if docs_dir is not None:
        config = replace(config, docs_dir=docs_dir)
    return config


def cmd_build(args: argparse.Namespace) -> int:
    config = _load_config(args)
    result = build_site(config, load_sidebar(), DocsStore(config.docs_dir), args.out)
    logger.info("Site built in {} ({} files)", result.out_dir, len(result.pages))
    return 0


def cmd_check_links(args: argparse.Namespace) -> int:
    config = _load_config(args)
    broken = check_links(load_sidebar(), DocsStore(config.docs_dir), {"home": home_routes()})
    for item in broken:
        logger.error("Broken link: {}", item)
    if broken:
        return 1
    logger.info("All links resolve.")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from streamlit.web.cli import main as st_main

    sys.argv = ["streamlit", "run", str(APP_PATH), "--server.headless=true"]
    return st_main()


COMMANDS = {
    "build": cmd_build,
    "check-links": cmd_check_links,
    "serve": cmd_serve,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        return COMMANDS[args.command](args)
    except DocsiteError as exc:
        logger.error("{}", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
