"""Search request construction for the documentation site."""

import logging
from typing import Any, Union

from ..constants import (
    DEFAULT_SEARCH_LIMIT,
    DEFAULT_SEARCH_URL,
    MAX_SEARCH_LIMIT,
    MIN_SEARCH_LIMIT,
    SEARCH_QUERY_PARAM,
    SEARCH_SCOPE_PARAM,
)
from ..models import ScopeCategory, SearchRequest
from .catalog import SCOPE_PARAMETERS

logger = logging.getLogger(__name__)


def resolve_scope(category: Union[str, ScopeCategory, None]) -> ScopeCategory:
    """Map a category string onto a search scope.

    Unknown or empty values fall back to ScopeCategory.ALL.
    """
    if isinstance(category, ScopeCategory):
        return category
    try:
        return ScopeCategory((category or "").strip().lower())
    except ValueError:
        logger.debug(f"Unknown search category {category!r}, using 'all'")
        return ScopeCategory.ALL


def clamp_limit(limit: Any) -> int:
    """Clamp a result limit to the supported range."""
    try:
        value = int(limit)
    except (TypeError, ValueError):
        return DEFAULT_SEARCH_LIMIT
    return max(MIN_SEARCH_LIMIT, min(MAX_SEARCH_LIMIT, value))


def build_search_request(
    query: str,
    category: Union[str, ScopeCategory, None] = ScopeCategory.ALL,
    limit: Any = DEFAULT_SEARCH_LIMIT,
    search_url: str = DEFAULT_SEARCH_URL,
) -> SearchRequest:
    """Build the search request for a query.

    Args:
        query: Free-text search query
        category: Search scope (contents, index, glossary or all)
        limit: Maximum number of results, clamped to [1, 20]
        search_url: Page that serves the site's search results

    Returns:
        SearchRequest with the encoded query and optional scope parameter
    """
    scope = resolve_scope(category)
    params = {SEARCH_QUERY_PARAM: query}

    scope_param = SCOPE_PARAMETERS[scope]
    if scope_param:
        params[SEARCH_SCOPE_PARAM] = scope_param

    return SearchRequest(
        url=search_url,
        params=params,
        query=query,
        scope=scope,
        limit=clamp_limit(limit),
    )
