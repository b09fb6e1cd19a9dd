"""
wpsync SDK

Reconciles a WordPress install with its composer.json: resolves core,
plugins, must-use plugins and the active theme to Composer packages and
merges them into the manifest.

Usage:
    from wpsync_sdk import ComposerSync, WpCliHost, PackageIndexClient, AutoConfirm, LoggingReporter

    sync = ComposerSync(
        host=WpCliHost(path="/var/www/html"),
        prompter=AutoConfirm(),
        reporter=LoggingReporter(),
        index_client=PackageIndexClient(),
    )
    report = sync.run("composer.json")
"""

from .dependencies import (
    ChangeSet,
    ExistingPackageMatcher,
    ManifestMerger,
    MergeResult,
    PackageResolver,
    ResolutionContext,
    constraint_for,
    load_pro_repositories,
    match_pro_repository,
    satisfies,
    to_minor,
)
from .host import WordPressHost, WpCliHost
from .index import PackageIndexClient
from .interaction import AutoConfirm, LoggingReporter, Prompter, SyncReporter
from .manifest import dump_manifest, load_manifest, write_manifest
from .sync import ComposerSync, SyncReport

__version__ = "0.3.0"

__all__ = [
    # Sync
    "ComposerSync",
    "SyncReport",
    # Host
    "WordPressHost",
    "WpCliHost",
    # Index
    "PackageIndexClient",
    # Interaction
    "Prompter",
    "SyncReporter",
    "AutoConfirm",
    "LoggingReporter",
    # Manifest
    "load_manifest",
    "write_manifest",
    "dump_manifest",
    # Dependencies
    "ChangeSet",
    "ExistingPackageMatcher",
    "ManifestMerger",
    "MergeResult",
    "PackageResolver",
    "ResolutionContext",
    "constraint_for",
    "load_pro_repositories",
    "match_pro_repository",
    "satisfies",
    "to_minor",
]
