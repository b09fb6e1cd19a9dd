"""
WordPress Host Access
=====================

The sync engine reads the installed state of WordPress through the
WordPressHost protocol. WpCliHost implements it on top of wp-cli.
"""

from pathlib import Path
from typing import Dict, List, Optional, Protocol

from wpsync_schema import ComponentDescriptor, ComponentKind

from .wp_cli import WpCliHost


class WordPressHost(Protocol):
    """Installed components of one WordPress site."""

    def core_version(self) -> str:
        ...

    def active_plugins(self) -> List[ComponentDescriptor]:
        ...

    def mu_plugins(self) -> List[ComponentDescriptor]:
        ...

    def active_theme(self) -> Optional[ComponentDescriptor]:
        ...

    def component_directories(self) -> Dict[ComponentKind, Path]:
        ...


__all__ = [
    "WordPressHost",
    "WpCliHost",
]
