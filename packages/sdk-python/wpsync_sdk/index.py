"""
Public Package Index Client
===========================

Checks whether a plugin or theme is published on wordpress.org, which means
WPackagist mirrors it as ``wpackagist-{kind}/{slug}``.

A lookup never raises: anything other than HTTP 200, including transport
errors, means "not found".
"""

from typing import Optional

import requests

from wpsync_common import (
    WP_ORG_API_TEMPLATE,
    get_logger,
)
from wpsync_common.constants import DEFAULT_REQUEST_TIMEOUT, HTTP_OK

logger = get_logger(__name__)


class PackageIndexClient:
    """Existence checks against the wordpress.org info API."""

    def __init__(
        self,
        url_template: str = WP_ORG_API_TEMPLATE,
        timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.url_template = url_template
        self.timeout = timeout
        self.session = session

    def url_for(self, kind: str, slug: str) -> str:
        return self.url_template.format(kind=kind, slug=slug)

    def exists(self, kind: str, slug: str) -> bool:
        """
        Look up a component on the public index.

        Args:
            kind: "plugin" or "theme"
            slug: Component slug

        Returns:
            True on HTTP 200, False otherwise
        """
        url = self.url_for(kind, slug)
        getter = self.session.get if self.session is not None else requests.get
        try:
            response = getter(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.debug(f"Index lookup failed for {kind} '{slug}': {e}")
            return False

        logger.debug(f"Index lookup {url} -> {response.status_code}")
        return response.status_code == HTTP_OK
