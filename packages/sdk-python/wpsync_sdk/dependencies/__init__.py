"""
wpsync Dependency Resolution
============================

Provides utilities for:
- Normalizing installed versions into Composer constraints
- Matching commercial plugins to private repositories
- Resolving components to packages through a strategy chain
- Deciding whether a declared constraint already covers an install
- Matching leftovers against packages already in composer.json
- Merging everything into the manifest with a readable change set
"""

from .constraints import ConstraintKind, classify_constraint, satisfies
from .existing import ExistingMatch, ExistingPackageMatcher, find_candidates
from .merger import (
    ChangeSet,
    ManifestMerger,
    MergeResult,
    compute_changes,
    merge_manifest,
    merge_repositories,
    merge_requirements,
)
from .pro_repos import (
    ProRepositoryMatch,
    copy_default_manifest,
    load_pro_repositories,
    match_pro_repository,
)
from .resolver import PackageResolver, ResolutionContext, ResolutionStrategy
from .version import Version, constraint_for, parse_version, to_minor

__all__ = [
    # Version utilities
    "Version",
    "to_minor",
    "constraint_for",
    "parse_version",
    # Constraints
    "ConstraintKind",
    "classify_constraint",
    "satisfies",
    # Pro repositories
    "ProRepositoryMatch",
    "copy_default_manifest",
    "load_pro_repositories",
    "match_pro_repository",
    # Resolution
    "PackageResolver",
    "ResolutionContext",
    "ResolutionStrategy",
    # Existing packages
    "ExistingMatch",
    "ExistingPackageMatcher",
    "find_candidates",
    # Merging
    "ChangeSet",
    "ManifestMerger",
    "MergeResult",
    "compute_changes",
    "merge_manifest",
    "merge_repositories",
    "merge_requirements",
]
