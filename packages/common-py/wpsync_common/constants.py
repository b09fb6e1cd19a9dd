"""
wpsync Shared Constants

Single source of truth for package identifiers, URLs and file names used
across the wpsync packages.

Usage:
    from wpsync_common.constants import KNOWN_CORE_PACKAGES, WPACKAGIST_URL
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

WPSYNC_VERSION = "0.3.0"
"""Current wpsync release"""


# =============================================================================
# FILE NAMES
# =============================================================================

DEFAULT_MANIFEST_FILE = "composer.json"
"""Project manifest synced by the tool"""

COMPONENT_MANIFEST_FILE = "composer.json"
"""Manifest a plugin or theme may ship in its own directory"""

REPOSITORIES_FILE = "repositories.json"
"""Operator-owned pro repository override file"""

REPOSITORIES_DEFAULT_FILE = "repositories.default.json"
"""Pro repository template bundled with wpsync_sdk"""


# =============================================================================
# WORDPRESS CORE
# =============================================================================

KNOWN_CORE_PACKAGES = ["roots/wordpress", "johnpbloch/wordpress"]
"""Composer packages that install WordPress core, in preference order"""

DEFAULT_CORE_PACKAGE = "roots/wordpress"
"""Core package proposed when the manifest declares none"""

SINGLE_FILE_MARKER = "(single file)"
"""Suffix appended to the display name of single-file mu-plugins"""


# =============================================================================
# PUBLIC PACKAGE INDEX
# =============================================================================

WP_ORG_API_TEMPLATE = "https://api.wordpress.org/{kind}s/info/1.0/{slug}.json"
"""wordpress.org info endpoint, keyed by component kind and slug"""

WPACKAGIST_URL = "https://wpackagist.org"
"""Composer repository mirroring wordpress.org plugins and themes"""

WPACKAGIST_VENDORS = {
    "plugin": "wpackagist-plugin",
    "theme": "wpackagist-theme",
}
"""Vendor prefix used by WPackagist for each component kind"""

DEFAULT_REPOSITORY_TYPE = "composer"
"""Repository type used when a definition does not specify one"""


# =============================================================================
# PRO REPOSITORY FALLBACK
# =============================================================================

FALLBACK_PRO_REPOSITORIES = [
    {
        "url": "https://connect.advancedcustomfields.com",
        "type": "composer",
        "plugins": {
            "Advanced Custom Fields Pro": "advanced-custom-fields/advanced-custom-fields-pro",
        },
    },
]
"""Used when neither repositories.json nor the bundled default can be read"""


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_WP_BIN = "wp"
"""wp-cli executable looked up on PATH"""

DEFAULT_REQUEST_TIMEOUT = 30
"""Timeout in seconds for package index lookups"""

DEFAULT_LOG_LEVEL = "warning"
"""Default logging level"""

LOG_LEVELS = ["debug", "info", "warning", "error"]
"""Valid log levels"""

HTTP_OK = 200
