"""HTML rendering for feed_pages."""

from .index_renderer import render_index
from .page_renderer import render_feed_page, render_unavailable_page

__all__ = [
    "render_feed_page",
    "render_index",
    "render_unavailable_page",
]
