"""
Manifest Merger
===============

Merges newly resolved packages and repositories into an existing
composer.json without destroying what the operator already wrote.

Merge rules:
- a package already in ``require-dev`` is left alone; it is never moved or
  duplicated into ``require``
- a package already in ``require`` keeps its constraint unless that
  constraint does not satisfy the new one
- anything else is appended to ``require``
- operator-confirmed overrides replace the declared constraint outright
- repositories are unioned by url; an existing entry is never replaced

Fields the merger does not own are copied through untouched.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple
from urllib.parse import urlparse

from wpsync_common import get_logger
from wpsync_schema import RepositoryDescriptor

from .constraints import satisfies

logger = get_logger(__name__)


@dataclass
class ChangeSet:
    """Human readable description of what a merge changes."""

    requirements: List[str] = field(default_factory=list)
    repositories: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.requirements and not self.repositories


@dataclass
class MergeResult:
    """Result of merging resolved entries into a manifest."""

    # Proposed composer.json content
    manifest: Dict[str, Any]

    changes: ChangeSet = field(default_factory=ChangeSet)

    # Resolved packages dropped because require-dev already declares them
    skipped_dev: List[str] = field(default_factory=list)


def merge_requirements(
    require: Mapping[str, str],
    require_dev: Mapping[str, str],
    new_requires: Mapping[str, str],
) -> Tuple[Dict[str, str], List[str]]:
    """
    Merge resolved packages into ``require``.

    Returns:
        (merged require, packages skipped because of require-dev)
    """
    merged = dict(require)
    skipped: List[str] = []

    for package, constraint in new_requires.items():
        if package in require_dev:
            skipped.append(package)
            continue

        if package in merged:
            if not satisfies(merged[package], constraint):
                logger.debug(f"Updating {package}: {merged[package]} -> {constraint}")
                merged[package] = constraint
        else:
            merged[package] = constraint

    return merged, skipped


def _repository_key(url: str) -> str:
    return urlparse(url).netloc or url


def merge_repositories(existing: Any, new_repositories: Mapping[str, RepositoryDescriptor]) -> Any:
    """
    Union repositories by url, keeping existing entries.

    ``existing`` may be composer's list form or its keyed object form; the
    form is preserved. Entries without a url are kept where they are.
    """
    if isinstance(existing, dict):
        merged_map = dict(existing)
        known = {repo.get("url") for repo in merged_map.values() if isinstance(repo, dict)}
        for url, repo in new_repositories.items():
            if url not in known:
                key = _repository_key(url)
                while key in merged_map:
                    key = f"{key}-"
                merged_map[key] = repo.to_manifest()
                known.add(url)
        return merged_map

    merged_list = list(existing or [])
    known = {repo.get("url") for repo in merged_list if isinstance(repo, dict)}
    for url, repo in new_repositories.items():
        if url not in known:
            merged_list.append(repo.to_manifest())
            known.add(url)
    return merged_list


def _repository_urls(repositories: Any) -> List[str]:
    if isinstance(repositories, dict):
        repositories = list(repositories.values())
    return [repo["url"] for repo in repositories or [] if isinstance(repo, dict) and repo.get("url")]


def compute_changes(
    original: Mapping[str, Any],
    final: Mapping[str, Any],
    forced: Optional[Set[str]] = None,
) -> ChangeSet:
    """
    Describe the difference between two manifests for display.

    Only additions and constraint changes are listed. A changed constraint
    is listed only if the original one does not already satisfy the new
    one, except for packages in ``forced``, which are listed on any change.
    """
    changes = ChangeSet()
    forced = forced or set()

    original_require = original.get("require") or {}
    for package, constraint in (final.get("require") or {}).items():
        if package not in original_require:
            changes.requirements.append(f"ADD:    {package}: {constraint}")
        elif original_require[package] != constraint and (
            package in forced or not satisfies(original_require[package], constraint)
        ):
            changes.requirements.append(
                f"MODIFY: {package}: {original_require[package]} -> {constraint}"
            )

    original_urls = set(_repository_urls(original.get("repositories")))
    for url in _repository_urls(final.get("repositories")):
        if url not in original_urls:
            changes.repositories.append(f"ADD:    Repository at {url}")

    return changes


class ManifestMerger:
    """Combines resolved entries with an existing composer.json."""

    def merge(
        self,
        original: Mapping[str, Any],
        new_requires: Mapping[str, str],
        new_repositories: Mapping[str, RepositoryDescriptor],
        overrides: Optional[Mapping[str, str]] = None,
    ) -> MergeResult:
        """
        Merge resolved packages and repositories into a copy of ``original``.

        Args:
            original: Parsed composer.json (not modified)
            new_requires: package id -> constraint, in discovery order
            new_repositories: url -> repository, in discovery order
            overrides: Operator-confirmed package id -> constraint; written
                even when the declared constraint already satisfies it

        Returns:
            MergeResult with the proposed manifest and its change set
        """
        final: Dict[str, Any] = copy.deepcopy(dict(original))
        require_dev = original.get("require-dev") or {}

        merged_require, skipped = merge_requirements(
            original.get("require") or {},
            require_dev,
            new_requires,
        )

        forced: Set[str] = set()
        for package, constraint in (overrides or {}).items():
            if package in require_dev:
                skipped.append(package)
                continue
            merged_require[package] = constraint
            forced.add(package)

        if skipped:
            logger.debug(f"Already in require-dev, left alone: {', '.join(skipped)}")

        config = original.get("config")
        if isinstance(config, dict) and config.get("sort-packages"):
            merged_require = dict(sorted(merged_require.items()))

        if merged_require or "require" in original:
            final["require"] = merged_require

        merged_repositories = merge_repositories(original.get("repositories"), new_repositories)
        if merged_repositories or "repositories" in original:
            final["repositories"] = merged_repositories

        return MergeResult(
            manifest=final,
            changes=compute_changes(original, final, forced),
            skipped_dev=skipped,
        )


def merge_manifest(
    original: Mapping[str, Any],
    new_requires: Mapping[str, str],
    new_repositories: Mapping[str, RepositoryDescriptor],
    overrides: Optional[Mapping[str, str]] = None,
) -> MergeResult:
    """Convenience function wrapping ManifestMerger.merge."""
    return ManifestMerger().merge(original, new_requires, new_repositories, overrides)
