"""
Name: Utility functions.
Description: Common utility functions for the MSFS SDK MCP server, including logging setup and loading the service configuration from the environment.
"""

import logging
import os
import sys
from typing import Optional

from pydantic import BaseModel, Field

from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_SEARCH_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    ENV_BASE_URL,
    ENV_SEARCH_URL,
    ENV_TIMEOUT,
    ENV_USER_AGENT,
)

# Configure logging
logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False, stream=None):
    """Configure logging for the application.

    Log records go to stderr by default because stdout carries the MCP
    stdio protocol.

    Args:
        debug: Whether to enable debug mode
        stream: Stream for the console handler (defaults to sys.stderr)
    """
    logging_level = logging.DEBUG if debug else logging.INFO
    root_logger = logging.getLogger()
    root_logger.setLevel(logging_level)

    # Check if handlers are already configured to prevent duplicates
    if root_logger.handlers:
        # Update existing handlers with the current log level
        for handler in root_logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.setLevel(logging_level)
        return

    # Create console handler
    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(logging_level)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    console_handler.setFormatter(formatter)

    # Add handler to the logger
    root_logger.addHandler(console_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


class ServiceConfig(BaseModel):
    """Configuration for talking to the documentation site."""

    base_url: str = DEFAULT_BASE_URL
    search_url: str = DEFAULT_SEARCH_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "ServiceConfig":
        """Build a configuration from environment variables.

        Reads MSFS_DOCS_BASE_URL, MSFS_DOCS_SEARCH_URL, MSFS_DOCS_USER_AGENT
        and MSFS_DOCS_TIMEOUT. Unset variables keep their defaults.

        Args:
            load_env_file: Whether to load a .env file first

        Returns:
            ServiceConfig instance
        """
        if load_env_file:
            from dotenv import load_dotenv

            load_dotenv()

        values = {}
        base_url = os.environ.get(ENV_BASE_URL)
        if base_url:
            values["base_url"] = base_url.rstrip("/")
        search_url = os.environ.get(ENV_SEARCH_URL)
        if search_url:
            values["search_url"] = search_url
        user_agent = os.environ.get(ENV_USER_AGENT)
        if user_agent:
            values["user_agent"] = user_agent

        timeout = _parse_timeout(os.environ.get(ENV_TIMEOUT))
        if timeout is not None:
            values["timeout"] = timeout

        return cls(**values)


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    """Parse a timeout value, ignoring malformed input."""
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {ENV_TIMEOUT} value: {raw!r}")
        return None
    if timeout <= 0:
        logger.warning(f"Ignoring non-positive {ENV_TIMEOUT} value: {raw!r}")
        return None
    return timeout


def setup_environment(debug: bool = False) -> ServiceConfig:
    """Setup the environment for the application.

    - Configures logging
    - Loads environment variables from .env file

    Args:
        debug: Whether to enable debug logging

    Returns:
        The service configuration read from the environment
    """
    # Configure logging first
    configure_logging(debug=debug)

    config = ServiceConfig.from_env()
    logger.debug(f"Using documentation site {config.base_url}")
    return config
