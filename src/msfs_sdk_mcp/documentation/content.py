"""
Name: Page content extraction.
Description: Isolates the primary content region of a single documentation page, harvests its code examples and related links, and caps the amount of text returned.
"""

import logging
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from ..constants import (
    DEFAULT_BASE_URL,
    DEFAULT_PAGE_TITLE,
    MAX_CONTENT_LENGTH,
    MIN_CODE_EXAMPLE_LENGTH,
    TRUNCATION_MARKER,
)
from ..models import PageContent
from .urls import normalize_href

logger = logging.getLogger(__name__)

# Site chrome that must never contribute text or code
CHROME_SELECTOR = "nav, header, footer, .navigation, .toc"
INVISIBLE_TAGS = ["script", "style", "noscript"]


def truncate_content(text: str, limit: int = MAX_CONTENT_LENGTH) -> str:
    """Cut text to ``limit`` characters, marking the cut."""
    if len(text) > limit:
        return text[:limit] + TRUNCATION_MARKER
    return text


def region_text(elements: List[Tag]) -> str:
    """Visible text of a region, one stripped line per source line."""
    lines = []
    for element in elements:
        for line in element.get_text().splitlines():
            line = " ".join(line.split())
            if line:
                lines.append(line)
    return "\n".join(lines).strip()


class ContentExtractor:
    """Extracts readable content from a documentation page."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL):
        """Initialize the extractor.

        Args:
            base_url: Scheme and host used to absolutize links when the page URL is unknown
        """
        self.base_url = base_url

    def extract(
        self,
        html: str,
        section: Optional[str] = None,
        page_url: Optional[str] = None,
    ) -> PageContent:
        """Extract the content of a page.

        Args:
            html: Raw HTML of the page
            section: Optional id, class name or data-section value to narrow to
            page_url: URL the page was fetched from, used to resolve links

        Returns:
            PageContent with capped text, code examples and related links
        """
        soup = BeautifulSoup(html, "html.parser")
        self._strip_chrome(soup)

        title = self._title(soup)

        region = None
        if section:
            region = self.find_section(soup, section)
            if region is None:
                logger.debug(f"Section '{section}' not found, using main content")
        if region is None:
            region = self.main_region(soup)

        return PageContent(
            title=title,
            content=truncate_content(region_text(region)),
            code_examples=self.code_examples(soup),
            related_links=self.related_links(region, page_url),
        )

    def _strip_chrome(self, soup: BeautifulSoup) -> None:
        for element in soup.select(CHROME_SELECTOR):
            # Nested chrome goes away with its ancestor
            if not element.decomposed:
                element.decompose()
        for element in soup.find_all(INVISIBLE_TAGS):
            element.decompose()

    def _title(self, soup: BeautifulSoup) -> str:
        if soup.title is not None:
            title = soup.title.get_text().strip()
            if title:
                return title
        return DEFAULT_PAGE_TITLE

    def find_section(self, soup: BeautifulSoup, section: str) -> Optional[List[Tag]]:
        """Locate a section by id, then class name, then data-section value.

        Args:
            soup: Parsed page
            section: Section identifier

        Returns:
            Matching elements, or None if nothing matched
        """
        element = soup.find(id=section)
        if element is not None:
            return [element]

        elements = soup.find_all(class_=section)
        if elements:
            return elements

        elements = soup.find_all(attrs={"data-section": section})
        if elements:
            return elements

        return None

    def main_region(self, soup: BeautifulSoup) -> List[Tag]:
        """Pick the page's main content: main, then .content, then body."""
        main = soup.find("main")
        if main is not None:
            return [main]

        content = soup.select_one(".content")
        if content is not None:
            return [content]

        if soup.body is not None:
            return [soup.body]
        return [soup]

    def code_examples(self, soup: BeautifulSoup) -> List[str]:
        """Collect code blocks from the whole page in document order.

        A code element inside a pre block is part of that block and is not
        collected twice. Blocks of 10 characters or fewer are dropped.
        """
        examples = []
        for element in soup.find_all(["pre", "code"]):
            if element.name == "code" and element.find_parent("pre") is not None:
                continue
            code = element.get_text().strip()
            if len(code) > MIN_CODE_EXAMPLE_LENGTH:
                examples.append(code)
        return examples

    def related_links(
        self, region: List[Tag], page_url: Optional[str] = None
    ) -> List[str]:
        """Distinct .htm links inside the region, as absolute URLs."""
        links = []
        for element in region:
            for anchor in element.find_all("a", href=True):
                href = anchor["href"]
                if ".htm" not in href:
                    continue
                if page_url:
                    url = urljoin(page_url, href)
                else:
                    url = normalize_href(href, self.base_url)
                if url not in links:
                    links.append(url)
        return links
