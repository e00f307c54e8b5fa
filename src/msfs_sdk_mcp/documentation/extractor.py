"""
Name: Search result extraction.
Description: Recovers result entries from the documentation site's search page. The site publishes no stable markup, so extraction runs an ordered cascade of selector strategies and stops at the first one that yields anything.

The cascade has two tiers:
1. Structural selectors: result-container class names, list items holding known section titles, and the siblings of the "result(s) found" banner. Any element that resolves to an .htm link and has visible text counts.
2. Anchor text: every .htm anchor whose text contains the query, case-insensitively.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from bs4 import BeautifulSoup, Tag

from ..constants import DEFAULT_BASE_URL, MAX_TITLE_LENGTH
from ..models import SearchResult
from .urls import classify_path, normalize_href

logger = logging.getLogger(__name__)


def own_or_descendant_href(element: Tag) -> Optional[str]:
    """Return the element's href, or the href of its first descendant anchor."""
    href = element.get("href")
    if href:
        return href
    anchor = element.find("a")
    if anchor is not None:
        return anchor.get("href")
    return None


def own_href(element: Tag) -> Optional[str]:
    return element.get("href")


def links_to_page(href: Optional[str], text: str, query: str) -> bool:
    """Accept any element that links to an .htm page and has visible text."""
    return bool(href) and ".htm" in href and bool(text)


def text_mentions_query(href: Optional[str], text: str, query: str) -> bool:
    """Accept anchors whose visible text contains the query."""
    return bool(href) and bool(text) and query.lower() in text.lower()


@dataclass(frozen=True)
class ExtractionStrategy:
    """One step of the selector cascade."""

    name: str
    tier: int
    selector: str
    href_of: Callable[[Tag], Optional[str]]
    accepts: Callable[[Optional[str], str, str], bool]
    description: str

    def describe(self, query: str) -> str:
        return self.description.format(query=query)


def _structural(selector: str) -> ExtractionStrategy:
    return ExtractionStrategy(
        name=selector,
        tier=1,
        selector=selector,
        href_of=own_or_descendant_href,
        accepts=links_to_page,
        description='Documentation page containing "{query}"',
    )


STRUCTURAL_SELECTORS = (
    ".search-result",
    ".result-item",
    ".topic",
    ".search-hit",
    ".result",
    'li:-soup-contains("Samples, Schemas, Tutorials")',
    'li:-soup-contains("How To")',
    'li:-soup-contains("Content Configuration")',
    'li:-soup-contains("Developer Mode")',
    'div:-soup-contains("result(s) found") ~ *',
)

ANCHOR_TEXT_STRATEGY = ExtractionStrategy(
    name="anchor-text",
    tier=2,
    selector='a[href*=".htm"]',
    href_of=own_href,
    accepts=text_mentions_query,
    description='Found "{query}" in link text',
)

DEFAULT_STRATEGIES = tuple(
    _structural(selector) for selector in STRUCTURAL_SELECTORS
) + (ANCHOR_TEXT_STRATEGY,)


def visible_text(element: Tag) -> str:
    """Element text with runs of whitespace collapsed."""
    return " ".join(element.get_text().split())


class ResultExtractor:
    """Extracts search results from a documentation search page."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        strategies: Sequence[ExtractionStrategy] = DEFAULT_STRATEGIES,
    ):
        """Initialize the extractor.

        Args:
            base_url: Scheme and host used to absolutize links
            strategies: Cascade to run, in order
        """
        self.base_url = base_url
        self.strategies = tuple(strategies)

    def extract(self, html: str, query: str, limit: int) -> List[SearchResult]:
        """Run the cascade over a search results page.

        Args:
            html: Raw HTML of the search page
            query: Query the page was requested for
            limit: Maximum number of results

        Returns:
            Results of the first strategy that found any, in document order
        """
        soup = BeautifulSoup(html, "html.parser")

        for strategy in self.strategies:
            results = self.run_strategy(soup, strategy, query, limit)
            if results:
                logger.info(
                    f"Found {len(results)} results using selector: {strategy.name}"
                )
                return results
            logger.debug(f"Selector {strategy.name} (tier {strategy.tier}) found nothing")

        logger.info(f"No results extracted for '{query}'")
        return []

    def run_strategy(
        self,
        soup: BeautifulSoup,
        strategy: ExtractionStrategy,
        query: str,
        limit: int,
    ) -> List[SearchResult]:
        """Collect the results a single strategy yields.

        Args:
            soup: Parsed search page
            strategy: Strategy to apply
            query: Query the page was requested for
            limit: Maximum number of results

        Returns:
            Deduplicated results, first occurrence of each URL wins
        """
        results: List[SearchResult] = []
        seen_urls = set()

        for element in soup.select(strategy.selector):
            if len(results) >= limit:
                break

            href = strategy.href_of(element)
            text = visible_text(element)
            if not strategy.accepts(href, text, query):
                continue

            url = normalize_href(href, self.base_url)
            if url in seen_urls:
                continue
            seen_urls.add(url)

            results.append(
                SearchResult(
                    title=text[:MAX_TITLE_LENGTH],
                    url=url,
                    description=strategy.describe(query),
                    # Classify the link as written, before normalization
                    category=classify_path(href),
                )
            )
            logger.debug(f"Found result via {strategy.name}: {text[:50]}...")

        return results
