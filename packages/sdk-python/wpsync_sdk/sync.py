"""
Composer Sync
=============

Runs a full sync of a WordPress install into its composer.json:

1. load composer.json (fatal if missing or unparsable)
2. scan core, active plugins, must-use plugins and the active theme,
   resolving each component to a package
3. add the WPackagist repository if wordpress.org was used
4. offer declared packages as matches for unresolved components
5. merge, show the proposed changes and ask for confirmation
6. write composer.json and report what could not be resolved

Per-component failures never abort a run; they end up in the unresolved
report.
"""

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from wpsync_common import WPACKAGIST_URL, get_logger
from wpsync_schema import (
    ComponentDescriptor,
    ComponentKind,
    ProRepositoryDefinition,
    RepositoryDescriptor,
    UnresolvedItem,
)

from .dependencies import (
    ChangeSet,
    ExistingPackageMatcher,
    ManifestMerger,
    PackageResolver,
    ResolutionContext,
    load_pro_repositories,
)
from .host import WordPressHost
from .index import PackageIndexClient
from .interaction import Prompter, SyncReporter
from .manifest import load_manifest, write_manifest

logger = get_logger(__name__)

UNRESOLVED_COLUMNS = ["name", "version", "type", "slug"]


@dataclass
class PendingChanges:
    """Buffers filled while scanning, before anything touches the manifest."""

    requires: Dict[str, str] = field(default_factory=dict)
    repositories: Dict[str, RepositoryDescriptor] = field(default_factory=dict)
    overrides: Dict[str, str] = field(default_factory=dict)
    unresolved: List[UnresolvedItem] = field(default_factory=list)

    def add_repository(self, repository: RepositoryDescriptor) -> None:
        # First discovery of a url wins for the whole run
        self.repositories.setdefault(repository.url, repository)


@dataclass
class SyncReport:
    """Outcome of a sync run."""

    changes: ChangeSet
    applied: bool
    unresolved: List[UnresolvedItem] = field(default_factory=list)
    proposed: Dict[str, Any] = field(default_factory=dict)
    confirmed: Optional[bool] = None

    @property
    def up_to_date(self) -> bool:
        return self.changes.is_empty


class ComposerSync:
    """
    Syncs the runtime state of a WordPress host into composer.json.

    Args:
        host: WordPressHost to scan
        prompter: Answers the confirmation questions
        reporter: Receives progress and result output
        pro_repositories: Pro repository definitions; loaded from
            ``repositories_file`` / the bundled default when None
        index_client: Public index client; None disables wordpress.org lookups
        repositories_file: Operator-owned repositories.json
    """

    def __init__(
        self,
        host: WordPressHost,
        prompter: Prompter,
        reporter: SyncReporter,
        pro_repositories: Optional[Sequence[ProRepositoryDefinition]] = None,
        index_client: Optional[PackageIndexClient] = None,
        repositories_file: Optional[Path] = None,
    ):
        self.host = host
        self.prompter = prompter
        self.reporter = reporter
        if pro_repositories is None:
            pro_repositories = load_pro_repositories(repositories_file)
        self.pro_repositories = list(pro_repositories)
        self.index_client = index_client
        self.merger = ManifestMerger()

    def run(self, manifest_path: Union[str, Path], dry_run: bool = False) -> SyncReport:
        """
        Sync one manifest.

        Args:
            manifest_path: Path to composer.json
            dry_run: Show the proposed changes but never prompt or write

        Returns:
            SyncReport

        Raises:
            ManifestNotFoundError: composer.json does not exist
            ManifestParseError: composer.json is not a JSON object
            HostError: WordPress could not be queried
        """
        manifest_path = Path(manifest_path)
        manifest = load_manifest(manifest_path)
        original = copy.deepcopy(manifest)

        context = ResolutionContext(existing_require=dict(manifest.get("require") or {}))
        resolver = PackageResolver(
            pro_repositories=self.pro_repositories,
            component_dirs=self.host.component_directories(),
            index_client=self.index_client,
        )
        pending = PendingChanges()

        self.reporter.log("Scanning WordPress Core...")
        core = ComponentDescriptor(
            kind=ComponentKind.CORE,
            display_name="WordPress",
            raw_version=self.host.core_version(),
            slug="wordpress",
        )
        self._collect(resolver, context, pending, core)

        self.reporter.log("Scanning active plugins...")
        for descriptor in self.host.active_plugins():
            self._collect(resolver, context, pending, descriptor)

        self.reporter.log("Scanning Must-Use plugins...")
        for descriptor in self.host.mu_plugins():
            self._collect(resolver, context, pending, descriptor)

        self.reporter.log("Scanning active theme...")
        theme = self.host.active_theme()
        if theme is not None:
            self._collect(resolver, context, pending, theme)

        if context.public_index_used:
            pending.add_repository(RepositoryDescriptor(type="composer", url=WPACKAGIST_URL))

        pending.unresolved = self._match_existing(pending, manifest)

        result = self.merger.merge(
            original,
            pending.requires,
            pending.repositories,
            overrides=pending.overrides,
        )
        report = SyncReport(
            changes=result.changes,
            applied=False,
            unresolved=pending.unresolved,
            proposed=result.manifest,
        )

        report.applied = self._confirm_and_write(report, manifest_path, dry_run)
        if report.applied:
            self.reporter.success(f"Successfully updated {manifest_path.name}.")

        if report.unresolved:
            self.reporter.warning("The following items could not be resolved and were omitted:")
            self.reporter.table([item.to_row() for item in report.unresolved], UNRESOLVED_COLUMNS)

        return report

    def _collect(
        self,
        resolver: PackageResolver,
        context: ResolutionContext,
        pending: PendingChanges,
        descriptor: ComponentDescriptor,
    ) -> None:
        if descriptor.single_file:
            pending.unresolved.append(UnresolvedItem.from_descriptor(descriptor))
            return

        result = resolver.resolve(descriptor, context)
        if not result.is_resolved:
            pending.unresolved.append(UnresolvedItem.from_descriptor(descriptor))
            return

        pending.requires[result.package_id] = result.constraint
        if result.repository is not None:
            pending.add_repository(result.repository)

    def _match_existing(
        self, pending: PendingChanges, manifest: Dict[str, Any]
    ) -> List[UnresolvedItem]:
        matcher = ExistingPackageMatcher(self.prompter, self.reporter)
        still_unresolved = []
        for item in pending.unresolved:
            match = matcher.match(item, manifest)
            if match is None:
                still_unresolved.append(item)
                continue
            logger.debug(f"Matched '{item.name}' to existing package {match.package_id}")
            pending.overrides[match.package_id] = match.constraint
        return still_unresolved

    def _confirm_and_write(self, report: SyncReport, manifest_path: Path, dry_run: bool) -> bool:
        name = manifest_path.name
        changes = report.changes

        if changes.is_empty:
            self.reporter.log(f"{name} is already up-to-date. No changes needed.")
            return False

        self.reporter.log(f"The following changes are proposed for {name}:")
        if changes.requirements:
            self.reporter.log("--- Requirements ---", style="yellow")
            for line in changes.requirements:
                self.reporter.log(line)
        if changes.repositories:
            self.reporter.log("--- Repositories ---", style="yellow")
            for line in changes.repositories:
                self.reporter.log(line)

        if dry_run:
            self.reporter.log("Dry run. No changes were made.")
            return False

        report.confirmed = self.prompter.confirm("Apply these changes?", default=False)
        if not report.confirmed:
            self.reporter.log("Aborted. No changes were made.")
            return False

        write_manifest(manifest_path, report.proposed)
        return True
