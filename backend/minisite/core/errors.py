"""Error Hierarchy — typed, categorized exceptions and failure classification.

Invariants:
    - Every SiteError has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; server failures (500) are critical
    - to_response() produces the JSON envelope {"error": code}, never internal details
    - classify_failure() maps any exception to exactly one of FAILURE_CODES

Design Decisions:
    - Single hierarchy with SiteError base: one registered handler catches all
    - CSRF and form validation problems are NOT exceptions: they become flash messages
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CLIENT = "client"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"
    FATAL = "fatal"


INTERNAL_ERROR = "internal_error"
FATAL_ERROR = "fatal_error"
FAILURE_CODES = (INTERNAL_ERROR, FATAL_ERROR)

# Interpreter-level failures: the process state itself is suspect
_FATAL_TYPES = (MemoryError, RecursionError, SystemError)


class SiteError(Exception):
    """Base exception for all expected, user-facing errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the JSON error envelope."""
        return {"error": self.code}


# ─── Client Errors (400-level) ──────────────────────────────────

class MethodNotAllowedError(SiteError):
    """Route exists but does not accept the request method."""
    def __init__(self, method: str, path: str):
        super().__init__(
            f"{method} not allowed on {path}",
            "method_not_allowed", ErrorCategory.CLIENT,
            ErrorSeverity.WARNING, 405,
        )
        self.method = method
        self.path = path


class PageNotFoundError(SiteError):
    """No route matches the requested path."""
    def __init__(self, path: str):
        super().__init__(
            f"No page at {path}",
            "not_found", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.path = path


# ─── Server Failures (500) ──────────────────────────────────────

def classify_failure(exc: BaseException) -> str:
    """Map an unhandled exception to its public error code."""
    if isinstance(exc, _FATAL_TYPES):
        return FATAL_ERROR
    return INTERNAL_ERROR
