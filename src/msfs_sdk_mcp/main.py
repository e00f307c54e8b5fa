"""
Name: Command-line interface.
Description: Implements the command-line interface for the MSFS SDK MCP server with commands for serving the MCP tools and for running a single documentation operation (search, page content, category listings, natural language commands) from the shell.
"""

import argparse
import asyncio
import logging
import sys

from .constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_SEARCH_LIMIT,
    DEFAULT_SERVER_NAME,
    DEFAULT_TRANSPORT,
)
from .documentation.service import DocumentationService
from .manager import start_mcp_server
from .mcp.config import MCPServerConfig
from .models import OperationResult
from .utils import setup_environment

logger = logging.getLogger(__name__)


def serve_command(args):
    """Start the MCP server."""
    service_config = setup_environment(debug=args.debug)
    server_config = MCPServerConfig(
        name=args.name,
        transport=args.transport,
        host=args.host,
        port=args.port,
        debug=args.debug,
    )
    try:
        start_mcp_server(server_config, service_config)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")


def _run_operation(args, operation) -> int:
    """Run one service operation and print its text.

    Args:
        args: Parsed command-line arguments
        operation: Callable taking the service and returning a coroutine

    Returns:
        Process exit status
    """
    service_config = setup_environment(debug=args.debug)
    service = DocumentationService(config=service_config)
    result: OperationResult = asyncio.run(operation(service))
    print(result.text)
    return 0 if result.ok else 1


def search_command(args) -> int:
    """Search the documentation."""
    return _run_operation(
        args, lambda service: service.search(args.query, args.category, args.limit)
    )


def content_command(args) -> int:
    """Print the content of a documentation page."""
    return _run_operation(
        args, lambda service: service.get_content(args.url, args.section)
    )


def categories_command(args) -> int:
    """List the search categories."""
    return _run_operation(args, lambda service: service.list_categories())


def items_command(args) -> int:
    """List the items of a category."""
    return _run_operation(
        args, lambda service: service.list_category_items(args.category)
    )


def ask_command(args) -> int:
    """Run a natural language command."""
    return _run_operation(args, lambda service: service.run_command(args.command))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description="MSFS SDK MCP - Search the Microsoft Flight Simulator SDK documentation"
    )
    subparsers = parser.add_subparsers(dest="command_name", help="Command to run")

    def add_debug_arg(parser):
        """Add debug argument to parser."""
        parser.add_argument(
            "--debug", action="store_true", help="Enable debug logging"
        )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the MCP server")
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=DEFAULT_TRANSPORT,
        help="Transport to serve the MCP tools over",
    )
    serve_parser.add_argument(
        "--name", type=str, default=DEFAULT_SERVER_NAME, help="MCP server name"
    )
    serve_parser.add_argument(
        "--host", type=str, default=DEFAULT_HOST, help="Host to bind the SSE server to"
    )
    serve_parser.add_argument(
        "--port", type=int, default=DEFAULT_PORT, help="Port to bind the SSE server to"
    )
    add_debug_arg(serve_parser)
    serve_parser.set_defaults(handler=serve_command)

    # Search command
    search_parser = subparsers.add_parser("search", help="Search the documentation")
    search_parser.add_argument("query", type=str, help="Search query")
    search_parser.add_argument(
        "--category",
        type=str,
        default="all",
        help="Search scope: contents, index, glossary or all",
    )
    search_parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_SEARCH_LIMIT,
        help="Maximum number of results (1-20)",
    )
    add_debug_arg(search_parser)
    search_parser.set_defaults(handler=search_command)

    # Content command
    content_parser = subparsers.add_parser(
        "content", help="Print the content of a documentation page"
    )
    content_parser.add_argument("url", type=str, help="URL of the documentation page")
    content_parser.add_argument(
        "--section", type=str, default=None, help="Section id, class or data-section"
    )
    add_debug_arg(content_parser)
    content_parser.set_defaults(handler=content_command)

    # Categories command
    categories_parser = subparsers.add_parser(
        "categories", help="List the search categories"
    )
    add_debug_arg(categories_parser)
    categories_parser.set_defaults(handler=categories_command)

    # Items command
    items_parser = subparsers.add_parser(
        "items", help="List the items of a documentation category"
    )
    items_parser.add_argument(
        "category", type=str, help="Category: index, contents or glossary"
    )
    add_debug_arg(items_parser)
    items_parser.set_defaults(handler=items_command)

    # Ask command
    ask_parser = subparsers.add_parser(
        "ask", help='Run a natural language command, e.g. "Search livery op msfs sdk"'
    )
    ask_parser.add_argument("command", type=str, help="Natural language command")
    add_debug_arg(ask_parser)
    ask_parser.set_defaults(handler=ask_command)

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return

    status = handler(args)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
