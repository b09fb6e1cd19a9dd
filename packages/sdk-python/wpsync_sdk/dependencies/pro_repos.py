"""
Pro Repository Matching
=======================

Maps commercial plugins and themes to the private Composer repositories that
serve them. Definitions come from, in order:

1. ``repositories.json`` in the project (operator-owned override)
2. ``repositories.default.json`` bundled with wpsync_sdk
3. a built-in fallback with a single ACF Pro entry

Matching is a pure function over the loaded definitions; load once per run.
"""

import json
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from wpsync_common import (
    FALLBACK_PRO_REPOSITORIES,
    REPOSITORIES_DEFAULT_FILE,
    REPOSITORIES_FILE,
    ConflictError,
    NotFoundError,
    ValidationError,
    WpSyncError,
    get_logger,
)
from wpsync_schema import (
    ProPackage,
    ProRepositoryDefinition,
    ProRepositoryManifest,
    RepositoryDescriptor,
)

logger = get_logger(__name__)

BUNDLED_DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / REPOSITORIES_DEFAULT_FILE


@dataclass
class ProRepositoryMatch:
    """A plugin found in a pro repository definition."""

    package_id: str
    repository: RepositoryDescriptor


def fallback_definitions() -> List[ProRepositoryDefinition]:
    """Built-in definitions used when no manifest file is usable."""
    return ProRepositoryManifest.model_validate({"repositories": FALLBACK_PRO_REPOSITORIES}).repositories


def select_manifest_file(
    override_path: Optional[Path],
    default_path: Optional[Path] = BUNDLED_DEFAULT_PATH,
) -> Optional[Path]:
    """Return the first existing candidate file, override first."""
    for candidate in (override_path, default_path):
        if candidate is not None and candidate.is_file():
            return candidate
    return None


def load_pro_repositories(
    override_path: Optional[Path] = None,
    default_path: Optional[Path] = BUNDLED_DEFAULT_PATH,
) -> List[ProRepositoryDefinition]:
    """
    Load pro repository definitions.

    Args:
        override_path: Operator-owned repositories.json, if any
        default_path: Bundled template

    Returns:
        Ordered list of definitions. A missing, unreadable or malformed
        manifest falls back to the built-in definitions.
    """
    manifest_file = select_manifest_file(override_path, default_path)
    if manifest_file is None:
        logger.debug("No pro repository manifest found, using built-in fallback")
        return fallback_definitions()

    try:
        data = json.loads(manifest_file.read_text(encoding="utf-8"))
        manifest = ProRepositoryManifest.model_validate(data)
    except (OSError, json.JSONDecodeError, PydanticValidationError, ValidationError) as e:
        logger.warning(f"Ignoring unusable pro repository manifest {manifest_file}: {e}")
        return fallback_definitions()

    if not isinstance(data, dict) or "repositories" not in data:
        logger.warning(f"{manifest_file} has no 'repositories' key, using built-in fallback")
        return fallback_definitions()

    logger.debug(f"Loaded {len(manifest.repositories)} pro repositories from {manifest_file}")
    return manifest.repositories


def match_pro_repository(
    name: str,
    slug: Optional[str],
    definitions: Sequence[ProRepositoryDefinition],
) -> Optional[ProRepositoryMatch]:
    """
    Find the package for a plugin in the pro repository definitions.

    Definitions and their entries are scanned in order and the first hit
    wins. An entry hits when its key equals ``name`` or, for extended
    entries carrying a ``slug``, when that slug equals ``slug``.

    Args:
        name: Display name of the plugin or theme
        slug: Directory slug, if known
        definitions: Loaded definitions

    Returns:
        ProRepositoryMatch or None
    """
    for definition in definitions:
        for entry_name, info in definition.plugins.items():
            if isinstance(info, ProPackage):
                package_id, expected_slug = info.package, info.slug
            else:
                package_id, expected_slug = info, None

            if entry_name == name or (slug and expected_slug and slug == expected_slug):
                return ProRepositoryMatch(
                    package_id=package_id,
                    repository=definition.to_repository(),
                )
    return None


def copy_default_manifest(
    target_dir: Path,
    default_path: Path = BUNDLED_DEFAULT_PATH,
) -> Path:
    """
    Copy the bundled template to ``target_dir/repositories.json``.

    Args:
        target_dir: Project directory
        default_path: Template to copy

    Returns:
        Path of the new file

    Raises:
        ConflictError: If repositories.json already exists
        NotFoundError: If the template is missing
        WpSyncError: If target_dir is not a writable directory or the copy fails
    """
    target_dir = Path(target_dir)
    target_file = target_dir / REPOSITORIES_FILE

    if target_file.exists():
        raise ConflictError(f"File already exists: {target_file}")

    if not default_path.is_file():
        raise NotFoundError(f"Default manifest not found: {default_path}")

    if not target_dir.is_dir() or not os.access(target_dir, os.W_OK):
        raise WpSyncError(f"Target directory is not writable: {target_dir}")

    try:
        shutil.copyfile(default_path, target_file)
    except OSError as e:
        raise WpSyncError(f"Failed to copy manifest file: {e}")

    logger.debug(f"Copied {default_path} to {target_file}")
    return target_file
