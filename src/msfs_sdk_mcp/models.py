"""
Name: Shared models.
Description: Contains the pydantic models and enumerations shared by the extraction pipeline, the intent parser and the MCP layer.
"""

from enum import Enum
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import DocumentationError, ErrorKind

# Characters encodeURIComponent leaves unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"


class ScopeCategory(str, Enum):
    """Which part of the documentation site a search targets."""

    CONTENTS = "contents"
    INDEX = "index"
    GLOSSARY = "glossary"
    ALL = "all"


class PathCategory(str, Enum):
    """Classification tag derived from a result's URL path."""

    AIRCRAFT = "aircraft"
    SCENERY = "scenery"
    SIMVARS = "simvars"
    PANELS = "panels"
    MISSIONS = "missions"
    PACKAGING = "packaging"
    TOOLS = "tools"
    GENERAL = "general"


class CommandTool(str, Enum):
    """Operations a free-text command can resolve to."""

    SEARCH = "search"
    GET_CONTENT = "get_content"
    LIST_CATEGORIES = "list_categories"


class SearchResult(BaseModel):
    """A documentation page discovered on a search results page."""

    title: str = Field(max_length=100)
    url: str
    description: str
    category: PathCategory
    last_updated: Optional[str] = None


class PageContent(BaseModel):
    """Extracted content of a single documentation page."""

    title: str
    content: str
    code_examples: List[str] = Field(default_factory=list)
    related_links: List[str] = Field(default_factory=list)


class SearchRequest(BaseModel):
    """A fully-formed search request against the documentation site."""

    url: str
    params: Dict[str, str]
    query: str
    scope: ScopeCategory
    limit: int

    @property
    def full_url(self) -> str:
        """Render the request URL with its query string.

        Parameters are escaped the way a browser's ``encodeURIComponent``
        escapes them, which is what the site's search page expects.

        Returns:
            The absolute request URL
        """
        if not self.params:
            return self.url
        query_string = "&".join(
            f"{name}={quote(value, safe=_URI_COMPONENT_SAFE)}"
            for name, value in self.params.items()
        )
        return f"{self.url}?{query_string}"


class ParsedCommand(BaseModel):
    """Structured operation recovered from a free-text command."""

    tool: CommandTool
    arguments: Dict[str, Any] = Field(default_factory=dict)


class OperationResult(BaseModel):
    """Outcome of a documentation operation.

    Every operation returns one of these instead of raising, so callers see
    the same shape whether a search, a page fetch or a listing failed.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: Optional[Any] = None
    error: Optional[DocumentationError] = None

    @classmethod
    def success(cls, value: Any) -> "OperationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DocumentationError) -> "OperationResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    @property
    def text(self) -> str:
        """Text rendering of the outcome for the MCP client."""
        if self.error is not None:
            return f"Error: {self.error.message}"
        return str(self.value)

    def unwrap(self) -> Any:
        """Return the value, or raise the carried error.

        Raises:
            DocumentationError: If the operation failed
        """
        if self.error is not None:
            raise self.error
        return self.value
