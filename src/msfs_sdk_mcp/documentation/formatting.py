"""Text rendering of documentation results for MCP clients."""

from typing import Iterable, List

from ..constants import MAX_CODE_EXAMPLES, MAX_RELATED_LINKS
from ..models import PageContent, SearchResult
from .catalog import CATEGORY_DESCRIPTIONS


def format_search_results(
    results: List[SearchResult], query: str, category: str
) -> str:
    blocks = [
        f"**{result.title}**\n"
        f"- Category: {result.category.value}\n"
        f"- URL: {result.url}\n"
        f"- Description: {result.description}\n"
        for result in results
    ]
    return (
        f'Search results for "{query}" in category "{category}":\n\n'
        + "\n---\n".join(blocks)
    )


def format_no_results(query: str, category: str) -> str:
    return (
        f'No results found for "{query}" in category "{category}". '
        "The search was performed on the MSFS documentation website."
    )


def format_page(page: PageContent, url: str) -> str:
    """Render a page with at most three code examples and five related links."""
    text = f"**{page.title}**\n\nURL: {url}\n\n{page.content}"

    if page.code_examples:
        text += "\n\n**Code Examples:**\n"
        for index, example in enumerate(page.code_examples[:MAX_CODE_EXAMPLES], 1):
            text += f"\n\nExample {index}:\n```\n{example}\n```"

    if page.related_links:
        text += "\n\n**Related Links:**\n"
        text += "\n".join(
            f"- {link}" for link in page.related_links[:MAX_RELATED_LINKS]
        )

    return text


def format_categories() -> str:
    listing = "\n".join(
        f"- **{name}**: {description}" for name, description in CATEGORY_DESCRIPTIONS
    )
    return (
        f"Available MSFS SDK Documentation Categories:\n\n{listing}\n\n"
        "Usage examples:\n"
        '- Search for "livery" in all categories: use category "all" or "index"\n'
        '- Search for "livery" in contents: use category "contents"\n'
        '- Search for "livery" in glossary: use category "glossary"'
    )


def format_category_items(items: Iterable[str]) -> str:
    return "\n".join(items)
