"""
Name: MSFS SDK MCP package.
Description: Defines the package version and exposes the CLI entry point for the MSFS SDK documentation MCP server, which searches and extracts pages from the Microsoft Flight Simulator SDK documentation site.
"""

__version__ = "1.0.0"
__author__ = "MSFS SDK MCP contributors"

from .main import main as cli_main

__all__ = ["cli_main"]
