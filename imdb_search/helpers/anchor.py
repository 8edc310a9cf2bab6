"""Anchor tag parsing."""

from dataclasses import dataclass

from bs4 import Tag

from imdb_search.helpers.traversal import inner_html


@dataclass(frozen=True)
class Anchor:
    """Display text and target of a hyperlink.

    Attributes:
        text: Inner markup of the anchor element.
        href: Link target, usually site-relative.
    """

    text: str
    href: str

    def absolute_url(self, base_url: str) -> str:
        """Return href prefixed with base_url."""
        return resolve_absolute(self, base_url)


def parse_anchor(element: Tag) -> Anchor | None:
    """Build an Anchor from an ``<a>`` element.

    Args:
        element: Anchor element.

    Returns:
        Anchor, or None if the element has no href attribute.
    """
    href = element.get("href")
    if href is None:
        return None

    return Anchor(text=inner_html(element), href=str(href))


def resolve_absolute(anchor: Anchor, base_url: str) -> str:
    """Concatenate base_url and the anchor's href.

    No normalisation is done: the href is expected to be
    site-relative (``/title/tt0076759/``).

    Args:
        anchor: Parsed anchor.
        base_url: Site base URL without trailing slash.

    Returns:
        Absolute URL.
    """
    return f"{base_url}{anchor.href}"
