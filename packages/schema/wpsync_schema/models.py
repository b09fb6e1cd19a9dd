"""
wpsync Data Models

Pydantic models for the values that flow through a sync run: the components
discovered on the WordPress host, the outcome of resolving each of them to a
Composer package, and the pro repository manifest that maps commercial
plugins to private Composer repositories.

Design Principles:
- Pure validation: receives dicts, validates structure, returns typed objects
- No file I/O: reading and writing files is the SDK's responsibility
- Lenient where operators hand-edit data: malformed pro repository entries
  are skipped instead of failing the whole run

The project composer.json itself is deliberately *not* modelled: it is kept
as a plain dict so fields wpsync does not own survive a round trip unchanged.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from wpsync_common import (
    DEFAULT_REPOSITORY_TYPE,
    SINGLE_FILE_MARKER,
    ValidationError,
)


# =============================================================================
# DISCOVERED COMPONENTS
# =============================================================================


class ComponentKind(str, Enum):
    """Kinds of WordPress components a sync run discovers."""

    CORE = "core"
    PLUGIN = "plugin"
    MU_PLUGIN = "mu-plugin"
    THEME = "theme"


class ComponentDescriptor(BaseModel):
    """
    One component discovered on the host.

    Constructed once per discovered item and consumed by the resolver.

    Attributes:
        kind: Component kind
        display_name: Human readable name ("Akismet Anti-spam")
        raw_version: Installed version string, usually dotted numeric
        slug: Directory-derived identifier ("akismet")
        single_file: True for mu-plugins that live directly in the mu-plugins dir
    """

    kind: ComponentKind
    display_name: str
    raw_version: str = ""
    slug: str = ""
    single_file: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator("raw_version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> str:
        """Hosts occasionally report versions as numbers or null."""
        if v is None:
            return ""
        return str(v).strip()

    @property
    def is_exact_category(self) -> bool:
        """Must-use plugins are pinned to an exact major.minor."""
        return self.kind == ComponentKind.MU_PLUGIN


# =============================================================================
# RESOLUTION
# =============================================================================


class RepositoryDescriptor(BaseModel):
    """A Composer repository entry, unique by url."""

    type: str = DEFAULT_REPOSITORY_TYPE
    url: str

    model_config = ConfigDict(frozen=True)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValidationError("Repository url cannot be empty")
        return v

    def to_manifest(self) -> Dict[str, str]:
        """Render as a composer.json ``repositories`` entry."""
        return {"type": self.type, "url": self.url}


class ResolutionResult(BaseModel):
    """
    Outcome of resolving one component.

    A successful result has both package_id and constraint set. repository
    is None when the package needs no new repository entry.
    """

    package_id: Optional[str] = None
    constraint: Optional[str] = None
    repository: Optional[RepositoryDescriptor] = None

    @property
    def is_resolved(self) -> bool:
        return self.package_id is not None and self.constraint is not None

    @classmethod
    def failure(cls) -> "ResolutionResult":
        return cls()


class UnresolvedItem(BaseModel):
    """A component no strategy could map to a package."""

    name: str
    version: str
    type: ComponentKind
    slug: str = ""

    @classmethod
    def from_descriptor(cls, descriptor: ComponentDescriptor) -> "UnresolvedItem":
        name = descriptor.display_name
        if descriptor.single_file:
            name = f"{name} {SINGLE_FILE_MARKER}"
        return cls(
            name=name,
            version=descriptor.raw_version,
            type=descriptor.kind,
            slug=descriptor.slug,
        )

    @property
    def is_single_file(self) -> bool:
        return SINGLE_FILE_MARKER in self.name

    def to_row(self) -> Dict[str, str]:
        """Row for the unresolved items table."""
        return {
            "name": self.name,
            "version": self.version,
            "type": self.type.value,
            "slug": self.slug,
        }


# =============================================================================
# PRO REPOSITORY MANIFEST
# =============================================================================


class ProPackage(BaseModel):
    """Extended plugin entry: ``{"package": "vendor/name", "slug": "dir-name"}``."""

    package: str
    slug: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class ProRepositoryDefinition(BaseModel):
    """
    One private repository and the plugins it serves.

    ``plugins`` maps a plugin display name to either a bare package id or a
    ProPackage. Entries in any other shape are dropped.
    """

    url: str
    type: str = DEFAULT_REPOSITORY_TYPE
    plugins: Dict[str, Union[str, ProPackage]] = {}

    model_config = ConfigDict(extra="allow")

    @field_validator("plugins", mode="before")
    @classmethod
    def drop_malformed_plugins(cls, v: Any) -> Dict[str, Any]:
        if not isinstance(v, dict):
            return {}
        kept: Dict[str, Any] = {}
        for name, info in v.items():
            if isinstance(info, str):
                kept[name] = info
            elif isinstance(info, dict) and isinstance(info.get("package"), str):
                kept[name] = info
        return kept

    @field_validator("type", mode="before")
    @classmethod
    def default_type(cls, v: Any) -> str:
        return v or DEFAULT_REPOSITORY_TYPE

    def to_repository(self) -> RepositoryDescriptor:
        return RepositoryDescriptor(type=self.type, url=self.url)


class ProRepositoryManifest(BaseModel):
    """Contents of repositories.json / repositories.default.json."""

    repositories: List[ProRepositoryDefinition] = []

    model_config = ConfigDict(extra="allow")

    @field_validator("repositories", mode="before")
    @classmethod
    def drop_malformed_repositories(cls, v: Any) -> List[Any]:
        if not isinstance(v, list):
            raise ValidationError("'repositories' must be a list")
        return [
            repo
            for repo in v
            if isinstance(repo, dict) and isinstance(repo.get("url"), str) and repo["url"].strip()
        ]
