"""PMS platform documentation site: sidebar tree, landing page, live and static renderers."""

__version__ = "1.0.0"
