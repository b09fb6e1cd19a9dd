"""
wpsync Schema Package

Pydantic models for discovered components, resolution results and the pro
repository manifest.

Usage:
    from wpsync_schema import ComponentDescriptor, ComponentKind

    descriptor = ComponentDescriptor(
        kind=ComponentKind.PLUGIN,
        display_name="Akismet Anti-spam",
        raw_version="5.0.2",
        slug="akismet",
    )
"""

from .models import (
    ComponentKind,
    ComponentDescriptor,
    RepositoryDescriptor,
    ResolutionResult,
    UnresolvedItem,
    ProPackage,
    ProRepositoryDefinition,
    ProRepositoryManifest,
)

# Re-export so callers can catch validation failures from one place
from wpsync_common import ValidationError

__version__ = "0.3.0"

__all__ = [
    "ComponentKind",
    "ComponentDescriptor",
    "RepositoryDescriptor",
    "ResolutionResult",
    "UnresolvedItem",
    "ProPackage",
    "ProRepositoryDefinition",
    "ProRepositoryManifest",
    "ValidationError",
]
