"""
Name: Constants and settings.
Description: Centralized location for constants and settings used throughout the MSFS SDK MCP server.
This file contains the documentation site endpoints, output caps and server defaults to maintain consistency.
"""


# Documentation site
DEFAULT_BASE_URL = "https://docs.flightsimulator.com"
DEFAULT_SEARCH_URL = f"{DEFAULT_BASE_URL}/html/Introduction/Introduction.htm"
DEFAULT_USER_AGENT = "MSFS-SDK-MCP-Server/1.0"
DEFAULT_TIMEOUT = 30.0

# Search request parameters
SEARCH_QUERY_PARAM = "rhsearch"
SEARCH_SCOPE_PARAM = "agt"

# Search settings
DEFAULT_SEARCH_LIMIT = 10
MIN_SEARCH_LIMIT = 1
MAX_SEARCH_LIMIT = 20
DEFAULT_INTENT_LIMIT = 5

# Output caps
MAX_TITLE_LENGTH = 100
MAX_CONTENT_LENGTH = 4000
TRUNCATION_MARKER = "..."
MIN_CODE_EXAMPLE_LENGTH = 10
MAX_CODE_EXAMPLES = 3
MAX_RELATED_LINKS = 5
DEFAULT_PAGE_TITLE = "MSFS SDK Documentation"

# Server settings
DEFAULT_SERVER_NAME = "msfs-sdk-mcp"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_TRANSPORT = "stdio"
SSE_MOUNT_PATH = "/mcp"

# Environment variables
ENV_BASE_URL = "MSFS_DOCS_BASE_URL"
ENV_SEARCH_URL = "MSFS_DOCS_SEARCH_URL"
ENV_USER_AGENT = "MSFS_DOCS_USER_AGENT"
ENV_TIMEOUT = "MSFS_DOCS_TIMEOUT"
