"""
wpsync Error Classes

All errors raised by wpsync packages derive from WpSyncError so the CLI can
catch one type, print a consistent message and exit with a non-zero code.

Usage:
    from wpsync_common.errors import ManifestNotFoundError

    raise ManifestNotFoundError("composer.json not found")
"""

from typing import Any, Dict, Optional


class WpSyncError(Exception):
    """
    Base exception for all wpsync errors.

    Attributes:
        message: Human readable description
        code: Machine readable error code
    """

    code = "WPSYNC_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code:
            self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }


class ValidationError(WpSyncError):
    """Input data failed validation."""

    code = "VALIDATION_ERROR"


class NotFoundError(WpSyncError):
    """A required file or resource does not exist."""

    code = "NOT_FOUND"


class ConflictError(WpSyncError):
    """The operation would overwrite something that already exists."""

    code = "CONFLICT"


class ManifestNotFoundError(NotFoundError):
    """The project's composer.json does not exist."""

    code = "MANIFEST_NOT_FOUND"


class ManifestParseError(WpSyncError):
    """The project's composer.json is not a valid JSON object."""

    code = "MANIFEST_PARSE_ERROR"


class HostError(WpSyncError):
    """
    The WordPress host could not be queried.

    Raised when the wp-cli binary is missing, exits non-zero,
    or returns output that cannot be parsed.
    """

    code = "HOST_ERROR"

    def __init__(self, message: str, command: Optional[str] = None, stderr: str = ""):
        self.command = command
        self.stderr = stderr
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if self.command:
            data["command"] = self.command
        if self.stderr:
            data["stderr"] = self.stderr
        return data
