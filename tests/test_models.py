"""Unit tests for the shared models and error types."""

import unittest

from pydantic import ValidationError as PydanticValidationError

from msfs_sdk_mcp.exceptions import (
    DocumentationError,
    ErrorKind,
    NetworkError,
    ParseFailure,
    ValidationError,
)
from msfs_sdk_mcp.models import (
    OperationResult,
    PageContent,
    PathCategory,
    ScopeCategory,
    SearchRequest,
    SearchResult,
)


class TestErrors(unittest.TestCase):
    """Tests for the exception hierarchy."""

    def test_kinds(self):
        self.assertEqual(NetworkError("x").kind, ErrorKind.NETWORK)
        self.assertEqual(ValidationError("x").kind, ErrorKind.VALIDATION)
        self.assertEqual(ParseFailure("x").kind, ErrorKind.PARSE)

    def test_base_error_kind_is_general(self):
        self.assertEqual(DocumentationError("x").kind, ErrorKind.GENERAL)
        result = OperationResult.failure(DocumentationError("Unexpected"))
        self.assertEqual(result.error_kind, ErrorKind.GENERAL)
        self.assertNotEqual(result.error_kind, NetworkError("x").kind)

    def test_hierarchy(self):
        for error_class in [NetworkError, ValidationError, ParseFailure]:
            self.assertTrue(issubclass(error_class, DocumentationError))

    def test_message(self):
        error = NetworkError("Failed", status_code=500)
        self.assertEqual(error.message, "Failed")
        self.assertEqual(str(error), "Failed")
        self.assertEqual(error.status_code, 500)


class TestOperationResult(unittest.TestCase):
    """Tests for the OperationResult class."""

    def test_success(self):
        result = OperationResult.success("text")
        self.assertTrue(result.ok)
        self.assertIsNone(result.error_kind)
        self.assertEqual(result.text, "text")
        self.assertEqual(result.unwrap(), "text")

    def test_failure(self):
        error = ValidationError("Query parameter is required")
        result = OperationResult.failure(error)
        self.assertFalse(result.ok)
        self.assertEqual(result.error_kind, ErrorKind.VALIDATION)
        self.assertEqual(result.text, "Error: Query parameter is required")
        with self.assertRaises(ValidationError) as context:
            result.unwrap()
        self.assertIs(context.exception, error)


class TestSearchModels(unittest.TestCase):
    """Tests for the search models."""

    def test_title_limit(self):
        with self.assertRaises(PydanticValidationError):
            SearchResult(
                title="x" * 101,
                url="https://docs.flightsimulator.com/html/a.htm",
                description="d",
                category=PathCategory.GENERAL,
            )

    def test_page_defaults(self):
        page = PageContent(title="t", content="c")
        self.assertEqual(page.code_examples, [])
        self.assertEqual(page.related_links, [])

    def test_full_url_encoding(self):
        request = SearchRequest(
            url="https://docs.flightsimulator.com/search.htm",
            params={"rhsearch": "a/b c!(x)"},
            query="a/b c!(x)",
            scope=ScopeCategory.CONTENTS,
            limit=10,
        )
        self.assertEqual(
            request.full_url,
            "https://docs.flightsimulator.com/search.htm?rhsearch=a%2Fb%20c!(x)",
        )

    def test_full_url_without_params(self):
        request = SearchRequest(
            url="https://example.com/s.htm",
            params={},
            query="",
            scope=ScopeCategory.ALL,
            limit=1,
        )
        self.assertEqual(request.full_url, "https://example.com/s.htm")
