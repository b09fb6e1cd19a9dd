"""
wpsync Common Package

Shared utilities and primitives used across all wpsync packages.

This package provides:
- Exception classes for consistent error handling
- Constants for package ids, URLs and file names
- Logging helpers
- Environment-driven settings

Usage:
    from wpsync_common import ManifestNotFoundError, get_logger, get_settings
    from wpsync_common import KNOWN_CORE_PACKAGES, WPACKAGIST_URL
"""

# Error classes
from .errors import (
    WpSyncError,
    ValidationError,
    NotFoundError,
    ConflictError,
    ManifestNotFoundError,
    ManifestParseError,
    HostError,
)

# Constants
from .constants import (
    WPSYNC_VERSION,
    DEFAULT_MANIFEST_FILE,
    COMPONENT_MANIFEST_FILE,
    REPOSITORIES_FILE,
    REPOSITORIES_DEFAULT_FILE,
    KNOWN_CORE_PACKAGES,
    DEFAULT_CORE_PACKAGE,
    SINGLE_FILE_MARKER,
    WP_ORG_API_TEMPLATE,
    WPACKAGIST_URL,
    WPACKAGIST_VENDORS,
    DEFAULT_REPOSITORY_TYPE,
    FALLBACK_PRO_REPOSITORIES,
    LOG_LEVELS,
)

# Logger
from .logger import get_logger, configure_logging

# Settings
from .config import Settings, get_settings

__version__ = WPSYNC_VERSION

__all__ = [
    # Errors
    "WpSyncError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "HostError",
    # Constants
    "WPSYNC_VERSION",
    "DEFAULT_MANIFEST_FILE",
    "COMPONENT_MANIFEST_FILE",
    "REPOSITORIES_FILE",
    "REPOSITORIES_DEFAULT_FILE",
    "KNOWN_CORE_PACKAGES",
    "DEFAULT_CORE_PACKAGE",
    "SINGLE_FILE_MARKER",
    "WP_ORG_API_TEMPLATE",
    "WPACKAGIST_URL",
    "WPACKAGIST_VENDORS",
    "DEFAULT_REPOSITORY_TYPE",
    "FALLBACK_PRO_REPOSITORIES",
    "LOG_LEVELS",
    # Logger
    "get_logger",
    "configure_logging",
    # Settings
    "Settings",
    "get_settings",
]
