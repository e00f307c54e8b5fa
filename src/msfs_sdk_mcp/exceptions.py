"""Error types raised by the documentation operations."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of failure an operation can report."""

    NETWORK = "network"
    VALIDATION = "validation"
    PARSE = "parse"
    GENERAL = "general"


class DocumentationError(Exception):
    """Base exception for documentation lookups."""

    kind: ErrorKind = ErrorKind.GENERAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(DocumentationError):
    """Non-OK HTTP status or transport failure."""

    kind = ErrorKind.NETWORK

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(DocumentationError):
    """Missing required argument or a value outside an enumerated set."""

    kind = ErrorKind.VALIDATION


class ParseFailure(DocumentationError):
    """A free-text command matched none of the known patterns."""

    kind = ErrorKind.PARSE
