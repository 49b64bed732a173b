"""Jinja2 environment for the page templates shipped with feed_pages."""

from functools import lru_cache

from jinja2 import Environment, PackageLoader, StrictUndefined


@lru_cache(maxsize=2)
def get_environment(escape_html: bool = True) -> Environment:
    """Return the template environment.

    Args:
        escape_html: Escape interpolated feed text. False reproduces the
            verbatim output where feed markup passes straight through.
    """
    return Environment(
        loader=PackageLoader("feed_pages", "templates"),
        autoescape=escape_html,
        undefined=StrictUndefined,
    )
