"""
Existing Package Matching
=========================

Second chance for components the resolver could not map. If the manifest
already declares exactly one package whose name (after the vendor) equals
the component slug, e.g. slug ``searchwp`` and ``searchwp/searchwp``, the
operator is asked whether that package is the component.

Zero or several candidates leave the item unresolved without asking.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from wpsync_common import KNOWN_CORE_PACKAGES, get_logger
from wpsync_schema import ComponentKind, UnresolvedItem

from ..interaction import Prompter, SyncReporter
from .version import constraint_for

logger = get_logger(__name__)


@dataclass
class ExistingMatch:
    """A confirmed match against a package already in the manifest."""

    package_id: str
    constraint: str


def find_candidates(slug: str, manifest: Mapping[str, Any]) -> List[str]:
    """
    Packages in ``require`` or ``require-dev`` whose name segment equals slug.

    Comparison is case-insensitive. WordPress core packages are never
    candidates.
    """
    declared: Dict[str, Any] = {}
    declared.update(manifest.get("require") or {})
    declared.update(manifest.get("require-dev") or {})

    wanted = slug.lower()
    candidates = []
    for package in declared:
        if package in KNOWN_CORE_PACKAGES:
            continue
        parts = package.split("/")
        if len(parts) == 2 and parts[1].lower() == wanted:
            candidates.append(package)
    return candidates


class ExistingPackageMatcher:
    """Matches unresolved items against declared packages, with confirmation."""

    def __init__(self, prompter: Prompter, reporter: SyncReporter):
        self.prompter = prompter
        self.reporter = reporter

    def match(self, item: UnresolvedItem, manifest: Mapping[str, Any]) -> Optional[ExistingMatch]:
        """
        Try to match one unresolved item.

        Returns:
            ExistingMatch if exactly one candidate exists and the operator
            confirmed it, otherwise None
        """
        if not item.slug or not item.version:
            return None

        candidates = find_candidates(item.slug, manifest)
        if len(candidates) != 1:
            if candidates:
                logger.debug(f"'{item.slug}' is ambiguous: {', '.join(candidates)}")
            return None

        package = candidates[0]
        self.reporter.log("")
        self.reporter.log("Potential match found:", style="yellow")
        self.reporter.log(f"  {item.type.value}: {item.name} (v{item.version})")
        self.reporter.log(f"  Package: {package}")
        if item.is_single_file:
            self.reporter.log("  Note: This is a single-file MU-plugin", style="red")

        if not self.prompter.confirm("Use this package?", default=False):
            return None

        constraint = constraint_for(item.version, item.type == ComponentKind.MU_PLUGIN)
        return ExistingMatch(package_id=package, constraint=constraint)
