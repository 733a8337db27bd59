"""Server-rendered pages (landing page)."""

from app.pages.root import render_root_page

__all__ = ["render_root_page"]
