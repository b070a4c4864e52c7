"""Rewrite relative ``href``/``src`` attributes in HTML as absolute URLs.

Rendered pages use links relative to their own slug. When page HTML is
reused away from its location (feeds, previews fetched by another page),
those links must be anchored to the page's absolute URL instead. Absolute
URLs, root-relative paths, fragments and ``mailto:``/``tel:``/``data:``
references are left untouched.
"""

from __future__ import annotations

import logging
from urllib.parse import urljoin

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

PASSTHROUGH_PREFIXES = (
    "http://",
    "https://",
    "mailto:",
    "tel:",
    "#",
    "/",
    "data:",
)


def absolutize_links(html: str, base_url: str) -> str:
    """Return ``html`` with relative link attributes resolved against ``base_url``.

    Parameters
    ----------
    html : str
        HTML document or fragment.
    base_url : str
        Absolute URL of the page the HTML was rendered for.

    Returns
    -------
    str
        The serialized HTML. Elements whose value cannot be joined are
        skipped without aborting the rest of the document.

    Examples
    --------
    >>> absolutize_links('<a href="../b">b</a>', "https://example.com/a/c")
    '<a href="https://example.com/b">b</a>'
    """
    soup = BeautifulSoup(html, "html.parser")
    for element in soup.select("[href], [src]"):
        attribute = "href" if element.has_attr("href") else "src"
        value = element.get(attribute)
        if not isinstance(value, str) or not value:
            continue
        if value.startswith(PASSTHROUGH_PREFIXES):
            continue
        try:
            element[attribute] = urljoin(base_url, value)
        except ValueError:
            logger.warning("Skipping unparsable %s=%r", attribute, value)
            continue
    return str(soup)


__all__ = ["absolutize_links"]
