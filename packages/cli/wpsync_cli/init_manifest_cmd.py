"""Init-manifest command - Copy the pro repository template for customization."""
from pathlib import Path

import typer

from wpsync_common import WpSyncError
from wpsync_sdk.dependencies import copy_default_manifest

from .utils import console, handle_error, success

app = typer.Typer()


@app.command(name="init-manifest")
def init_manifest(
    path: str = typer.Argument(
        ".",
        help="Directory to copy repositories.json into"
    )
):
    """
    Copy the default pro repository manifest to your project for customization.

    The copy is named repositories.json and takes precedence over the
    bundled default on the next sync. An existing file is never overwritten.

    Examples:
        wp-composer-sync init-manifest
        wp-composer-sync init-manifest /path/to/project
    """
    try:
        target_file = copy_default_manifest(Path(path))
    except WpSyncError as e:
        handle_error(e)
        raise typer.Exit(1)

    success(f"Copied manifest to: {target_file}")
    console.print("You can now edit this file to add your premium plugin repositories.")
