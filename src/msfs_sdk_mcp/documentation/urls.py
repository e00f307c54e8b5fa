"""
Name: URL helpers.
Description: Turns the relative and parent-relative links found on documentation pages into absolute URLs, and derives a path category from a link.
"""

from ..constants import DEFAULT_BASE_URL
from ..models import PathCategory
from .catalog import PATH_KEYWORDS

# Pages on the site live under /html/
HTML_ROOT = "/html/"


def normalize_href(href: str, base_url: str = DEFAULT_BASE_URL) -> str:
    """Convert a link found on the documentation site into an absolute URL.

    Absolute links pass through. A parent-relative link has its first
    ``../`` replaced by ``/html/``, and a bare relative link is placed under
    ``/html/``. Malformed links are not rejected; the result is only
    guaranteed to be syntactically absolute.

    Args:
        href: Link as it appears in the page
        base_url: Scheme and host of the documentation site

    Returns:
        Absolute URL
    """
    if href.startswith(("http://", "https://")):
        return href

    if href.startswith("../"):
        path = HTML_ROOT + href[len("../"):]
    elif not href.startswith("/"):
        path = HTML_ROOT + href
    else:
        path = href

    return f"{base_url.rstrip('/')}{path}"


def classify_path(path: str) -> PathCategory:
    """Derive a category from a link path.

    Keywords are matched case-sensitively in a fixed order, so a path
    containing several keywords gets the first one listed.

    Args:
        path: Link or path to classify

    Returns:
        The matching category, or PathCategory.GENERAL
    """
    for keyword, category in PATH_KEYWORDS:
        if keyword in path:
            return category
    return PathCategory.GENERAL
