"""Unit tests for the command-line interface."""

import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from msfs_sdk_mcp.constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_SERVER_NAME
from msfs_sdk_mcp.exceptions import ValidationError
from msfs_sdk_mcp.main import main
from msfs_sdk_mcp.models import OperationResult
from msfs_sdk_mcp.utils import ServiceConfig


class TestMainCLI(unittest.TestCase):

    @patch("msfs_sdk_mcp.main.serve_command")
    def test_serve_command_defaults(self, mock_serve_command):
        """Test the 'serve' command with default arguments."""
        mock_serve_command.return_value = None
        with patch("sys.argv", ["msfs-sdk-mcp", "serve"]):
            main()
        mock_serve_command.assert_called_once()
        called_args = mock_serve_command.call_args[0][0]
        self.assertEqual(called_args.transport, "stdio")
        self.assertEqual(called_args.name, DEFAULT_SERVER_NAME)
        self.assertEqual(called_args.host, DEFAULT_HOST)
        self.assertEqual(called_args.port, DEFAULT_PORT)
        self.assertFalse(called_args.debug)

    @patch("msfs_sdk_mcp.main.start_mcp_server")
    @patch("msfs_sdk_mcp.main.setup_environment")
    def test_serve_sse(self, mock_setup_environment, mock_start_mcp_server):
        """Test the 'serve' command builds the server configuration."""
        mock_setup_environment.return_value = ServiceConfig()
        main(["serve", "--transport", "sse", "--host", "127.0.0.1", "--port", "9000", "--debug"])

        mock_setup_environment.assert_called_once_with(debug=True)
        server_config, service_config = mock_start_mcp_server.call_args[0]
        self.assertEqual(server_config.transport, "sse")
        self.assertEqual(server_config.host, "127.0.0.1")
        self.assertEqual(server_config.port, 9000)
        self.assertTrue(server_config.debug)
        self.assertIs(service_config, mock_setup_environment.return_value)

    @patch("msfs_sdk_mcp.main.start_mcp_server", side_effect=KeyboardInterrupt)
    @patch("msfs_sdk_mcp.main.setup_environment")
    def test_serve_interrupted(self, mock_setup_environment, mock_start_mcp_server):
        """Test Ctrl-C stops the server without a traceback."""
        main(["serve"])
        mock_start_mcp_server.assert_called_once()

    def test_invalid_transport(self):
        with self.assertRaises(SystemExit):
            main(["serve", "--transport", "websocket"])

    @patch("msfs_sdk_mcp.main.search_command")
    def test_search_arguments(self, mock_search_command):
        mock_search_command.return_value = 0
        main(["search", "livery", "--category", "glossary", "--limit", "3"])
        called_args = mock_search_command.call_args[0][0]
        self.assertEqual(called_args.query, "livery")
        self.assertEqual(called_args.category, "glossary")
        self.assertEqual(called_args.limit, 3)

    @patch("msfs_sdk_mcp.main.search_command")
    def test_search_defaults(self, mock_search_command):
        mock_search_command.return_value = 0
        main(["search", "livery"])
        called_args = mock_search_command.call_args[0][0]
        self.assertEqual(called_args.category, "all")
        self.assertEqual(called_args.limit, 10)

    @patch("msfs_sdk_mcp.main.content_command")
    def test_content_arguments(self, mock_content_command):
        mock_content_command.return_value = 0
        main(["content", "https://docs.flightsimulator.com/a.htm", "--section", "overview"])
        called_args = mock_content_command.call_args[0][0]
        self.assertEqual(called_args.url, "https://docs.flightsimulator.com/a.htm")
        self.assertEqual(called_args.section, "overview")

    @patch("msfs_sdk_mcp.main.items_command")
    def test_items_arguments(self, mock_items_command):
        mock_items_command.return_value = 0
        main(["items", "glossary"])
        self.assertEqual(mock_items_command.call_args[0][0].category, "glossary")

    @patch("msfs_sdk_mcp.main.ask_command")
    def test_ask_arguments(self, mock_ask_command):
        mock_ask_command.return_value = 0
        main(["ask", "Search livery op msfs sdk"])
        self.assertEqual(
            mock_ask_command.call_args[0][0].command, "Search livery op msfs sdk"
        )

    @patch("argparse.ArgumentParser.print_help")
    def test_no_command(self, mock_print_help):
        main([])
        mock_print_help.assert_called_once()


class TestOneShotCommands(unittest.TestCase):
    """Tests for the commands that run a single operation."""

    def setUp(self):
        self.setup_patcher = patch(
            "msfs_sdk_mcp.main.setup_environment", return_value=ServiceConfig()
        )
        self.setup_patcher.start()
        self.service = MagicMock()
        self.service_patcher = patch(
            "msfs_sdk_mcp.main.DocumentationService", return_value=self.service
        )
        self.service_patcher.start()

    def tearDown(self):
        self.service_patcher.stop()
        self.setup_patcher.stop()

    @patch("builtins.print")
    def test_search_prints_result(self, mock_print):
        self.service.search = AsyncMock(return_value=OperationResult.success("results"))

        main(["search", "livery", "--limit", "2"])

        self.service.search.assert_awaited_once_with("livery", "all", 2)
        mock_print.assert_called_once_with("results")

    @patch("builtins.print")
    def test_categories_prints_result(self, mock_print):
        self.service.list_categories = AsyncMock(
            return_value=OperationResult.success("categories")
        )
        main(["categories"])
        mock_print.assert_called_once_with("categories")

    @patch("builtins.print")
    def test_content_passes_section(self, mock_print):
        self.service.get_content = AsyncMock(return_value=OperationResult.success("page"))
        main(["content", "https://docs.flightsimulator.com/a.htm"])
        self.service.get_content.assert_awaited_once_with(
            "https://docs.flightsimulator.com/a.htm", None
        )

    @patch("builtins.print")
    def test_ask_runs_command(self, mock_print):
        self.service.run_command = AsyncMock(return_value=OperationResult.success("ok"))
        main(["ask", "list categories"])
        self.service.run_command.assert_awaited_once_with("list categories")

    @patch("builtins.print")
    def test_failure_exits_with_status_one(self, mock_print):
        self.service.list_category_items = AsyncMock(
            return_value=OperationResult.failure(ValidationError("Invalid category: x"))
        )

        with self.assertRaises(SystemExit) as context:
            main(["items", "x"])

        self.assertEqual(context.exception.code, 1)
        mock_print.assert_called_once_with("Error: Invalid category: x")


if __name__ == "__main__":
    unittest.main()
