"""
Package Resolution
==================

Maps a discovered WordPress component to a Composer package id and
constraint.

Resolution Rules (tried in order, first success wins):
1. Pro repository map -> package from a private repository, plus that
   repository. Always first: commercial packages must never be replaced
   by a public mirror.
2. Local composer.json in the component's own directory -> its ``name``
3. wordpress.org lookup (plugins and themes only) -> ``wpackagist-{kind}/{slug}``
4. WordPress core -> the core package already declared, else roots/wordpress

Each rule is a strategy with the same signature, so the chain can be
reordered or tested one link at a time.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from wpsync_common import (
    COMPONENT_MANIFEST_FILE,
    DEFAULT_CORE_PACKAGE,
    KNOWN_CORE_PACKAGES,
    WPACKAGIST_VENDORS,
    get_logger,
)
from wpsync_schema import (
    ComponentDescriptor,
    ComponentKind,
    ProRepositoryDefinition,
    ResolutionResult,
)

from ..index import PackageIndexClient
from .pro_repos import match_pro_repository
from .version import constraint_for

logger = get_logger(__name__)


@dataclass
class ResolutionContext:
    """
    State shared by all resolutions of one sync run.

    Attributes:
        existing_require: ``require`` section of the manifest being synced
        public_index_used: Set once any component resolved via wordpress.org,
            so the WPackagist repository gets added at the end of the run
    """

    existing_require: Dict[str, str] = field(default_factory=dict)
    public_index_used: bool = False


ResolutionStrategy = Callable[
    [ComponentDescriptor, str, ResolutionContext], Optional[ResolutionResult]
]


class PackageResolver:
    """
    Resolves components through an ordered chain of strategies.

    Args:
        pro_repositories: Loaded pro repository definitions
        component_dirs: Base directory per kind for local composer.json lookups
        index_client: Public index client; None disables rule 3
        strategies: Override the default chain
    """

    def __init__(
        self,
        pro_repositories: Sequence[ProRepositoryDefinition] = (),
        component_dirs: Optional[Mapping[ComponentKind, Path]] = None,
        index_client: Optional[PackageIndexClient] = None,
        strategies: Optional[Sequence[ResolutionStrategy]] = None,
    ):
        self.pro_repositories = list(pro_repositories)
        self.component_dirs = dict(component_dirs or {})
        self.index_client = index_client
        if strategies is None:
            strategies = [
                self.from_pro_repository,
                self.from_local_manifest,
                self.from_public_index,
                self.from_core_package,
            ]
        self.strategies: List[ResolutionStrategy] = list(strategies)

    def resolve(
        self,
        descriptor: ComponentDescriptor,
        context: Optional[ResolutionContext] = None,
    ) -> ResolutionResult:
        """
        Resolve one component.

        Returns:
            The first successful strategy result, or a failed result
            (all fields None) when every strategy passes or the component
            reports no version
        """
        if context is None:
            context = ResolutionContext()
        if not descriptor.raw_version:
            logger.debug(f"{descriptor.kind.value} '{descriptor.display_name}' reports no version")
            return ResolutionResult.failure()

        constraint = constraint_for(descriptor.raw_version, descriptor.is_exact_category)

        for strategy in self.strategies:
            result = strategy(descriptor, constraint, context)
            if result is not None and result.is_resolved:
                logger.debug(
                    f"{descriptor.kind.value} '{descriptor.display_name}' -> "
                    f"{result.package_id}:{result.constraint} via {getattr(strategy, '__name__', strategy)}"
                )
                return result

        logger.debug(f"{descriptor.kind.value} '{descriptor.display_name}' could not be resolved")
        return ResolutionResult.failure()

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def from_pro_repository(
        self, descriptor: ComponentDescriptor, constraint: str, context: ResolutionContext
    ) -> Optional[ResolutionResult]:
        match = match_pro_repository(
            descriptor.display_name, descriptor.slug or None, self.pro_repositories
        )
        if match is None:
            return None
        return ResolutionResult(
            package_id=match.package_id,
            constraint=constraint,
            repository=match.repository,
        )

    def from_local_manifest(
        self, descriptor: ComponentDescriptor, constraint: str, context: ResolutionContext
    ) -> Optional[ResolutionResult]:
        base_dir = self.component_dirs.get(descriptor.kind)
        if base_dir is None or not descriptor.slug:
            return None

        manifest_file = Path(base_dir) / descriptor.slug / COMPONENT_MANIFEST_FILE
        if not manifest_file.is_file():
            return None

        try:
            data = json.loads(manifest_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.debug(f"Skipping unreadable {manifest_file}: {e}")
            return None

        name = data.get("name") if isinstance(data, dict) else None
        if not isinstance(name, str) or not name:
            return None
        return ResolutionResult(package_id=name, constraint=constraint)

    def from_public_index(
        self, descriptor: ComponentDescriptor, constraint: str, context: ResolutionContext
    ) -> Optional[ResolutionResult]:
        if self.index_client is None or not descriptor.slug:
            return None
        if descriptor.kind not in (ComponentKind.PLUGIN, ComponentKind.THEME):
            return None

        kind = descriptor.kind.value
        if not self.index_client.exists(kind, descriptor.slug):
            return None

        context.public_index_used = True
        return ResolutionResult(
            package_id=f"{WPACKAGIST_VENDORS[kind]}/{descriptor.slug}",
            constraint=constraint,
        )

    def from_core_package(
        self, descriptor: ComponentDescriptor, constraint: str, context: ResolutionContext
    ) -> Optional[ResolutionResult]:
        if descriptor.kind != ComponentKind.CORE:
            return None

        package_id = next(
            (pkg for pkg in KNOWN_CORE_PACKAGES if pkg in context.existing_require),
            DEFAULT_CORE_PACKAGE,
        )
        return ResolutionResult(package_id=package_id, constraint=constraint)
