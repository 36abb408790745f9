# launch.py — starts the live documentation site, also from a PyInstaller bundle
import os
import sys

from streamlit.web.cli import main as st_main


def resource_path(rel_path: str) -> str:
    base = getattr(sys, "_MEIPASS", os.path.abspath("."))
    return os.path.join(base, rel_path)


if __name__ == "__main__":
    os.chdir(getattr(sys, "_MEIPASS", os.path.abspath(".")))

    # bundled builds ship docs/ next to the executable
    os.environ.setdefault("DOCSITE_DOCS_DIR", resource_path("docs"))

    app_path = resource_path(os.path.join("docsite", "app.py"))
    sys.argv = ["streamlit", "run", app_path, "--server.headless=true"]
    raise SystemExit(st_main())
