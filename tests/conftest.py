import sys
from contextlib import contextmanager
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def write_doc(root: Path, doc_id: str, text: str) -> Path:
    path = root / f"{doc_id}.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def docs_root(tmp_path):
    root = tmp_path / "docs"
    write_doc(root, "intro", "---\ntitle: Intro\n---\n\n# Intro\n\nSee [setup](/docs/guide/setup).\n")
    write_doc(root, "guide/setup", "# Setup\n\nNext: [usage](/docs/guide/usage).\n")
    write_doc(root, "guide/usage", "---\nsidebar_label: Use it\n---\nPlain body.\n")
    return root


@pytest.fixture
def small_sidebar():
    return [
        "intro",
        {
            "type": "category",
            "label": "Guide",
            "collapsed": False,
            "items": ["guide/setup", "guide/usage"],
        },
    ]


class StopRun(Exception):
    """Raised by the fake ``st.stop``."""


class FakeStreamlit:
    """Records the streamlit calls made by the UI helpers."""

    def __init__(self, clicked=(), query_params=None):
        self.session_state = {}
        self.query_params = dict(query_params or {})
        self.clicked = set(clicked)
        self.calls = []
        self.reruns = 0

    @contextmanager
    def _block(self, name, **kwargs):
        self.calls.append((name, kwargs))
        yield self

    @property
    def sidebar(self):
        return self._block("sidebar")

    def expander(self, label, expanded=False):
        return self._block("expander", label=label, expanded=expanded)

    def button(self, label, key=None, disabled=False, width="content", **kwargs):
        self.calls.append(
            ("button", {"label": label, "key": key, "disabled": disabled, "width": width})
        )
        return key in self.clicked

    def markdown(self, body, **kwargs):
        self.calls.append(("markdown", {"body": body}))

    def error(self, message, **kwargs):
        self.calls.append(("error", {"message": message}))

    def set_page_config(self, **kwargs):
        self.calls.append(("set_page_config", kwargs))

    def stop(self):
        raise StopRun()

    def rerun(self):
        self.reruns += 1

    def recorded(self, name):
        return [kwargs for call, kwargs in self.calls if call == name]
