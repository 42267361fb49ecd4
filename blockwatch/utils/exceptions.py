"""
Exception hierarchy for blockwatch.

Provides:
- A base error carrying a code, category and details
- One error type per failure the engine can surface to its caller
- A helper that renders any exception as a short CLI message
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for classification."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    RETRYABLE = "retryable"
    FATAL = "fatal"


class BlockwatchError(Exception):
    """Base exception for all blockwatch errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidInputError(BlockwatchError):
    """Empty or malformed argument passed to an engine operation."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="INVALID_INPUT", category=ErrorCategory.VALIDATION, details=details)


class NotSubscribedError(BlockwatchError):
    """Transaction query for an address that is not in the registry."""

    def __init__(self, address: str):
        super().__init__(
            f"address is not subscribed: {address}",
            code="NOT_SUBSCRIBED",
            category=ErrorCategory.NOT_FOUND,
            details={"address": address},
        )
        self.address = address


class RPCError(BlockwatchError):
    """Transport failure or an error reported by the JSON-RPC node."""

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        status_code: int | None = None,
        payload: Any = None,
    ):
        details: dict[str, Any] = {}
        if method:
            details["method"] = method
        if status_code is not None:
            details["status_code"] = status_code
        if payload is not None:
            details["payload"] = payload
        super().__init__(message, code="RPC_ERROR", category=ErrorCategory.RETRYABLE, details=details)
        self.method = method
        self.status_code = status_code
        self.payload = payload


class ParseError(BlockwatchError):
    """Malformed hex quantity or malformed JSON payload in a response."""

    def __init__(self, message: str, value: Any = None):
        details = {"value": repr(value)} if value is not None else {}
        super().__init__(message, code="PARSE_ERROR", category=ErrorCategory.VALIDATION, details=details)
        self.value = value


def format_error(exc: Exception, include_details: bool = False) -> str:
    """Format an exception as a one-line message for the command line."""
    if isinstance(exc, BlockwatchError):
        if include_details:
            return f"Error [{exc.code}] ({exc.category.value}): {exc.message}"
        return f"Error: {exc.message}"
    return f"Error: {exc}"
