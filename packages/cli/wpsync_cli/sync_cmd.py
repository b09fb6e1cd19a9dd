"""Sync command - Merge the installed WordPress components into composer.json."""
from pathlib import Path
from typing import Optional

import typer

from wpsync_common import WpSyncError, configure_logging, get_settings
from wpsync_sdk import AutoConfirm, ComposerSync, PackageIndexClient, WpCliHost

from .utils import ConsoleReporter, TyperPrompter, console, handle_error, info

app = typer.Typer()


@app.command(name="sync")
def sync(
    manifest: Optional[str] = typer.Option(
        None,
        "--manifest", "-m",
        help="Path to composer.json (default: ./composer.json)"
    ),
    path: Optional[str] = typer.Option(
        None,
        "--path",
        help="WordPress root passed to wp-cli"
    ),
    wp_bin: Optional[str] = typer.Option(
        None,
        "--wp-bin",
        help="wp-cli executable (default: wp)"
    ),
    repositories: Optional[str] = typer.Option(
        None,
        "--repositories", "-r",
        help="Pro repository manifest (default: ./repositories.json)"
    ),
    yes: bool = typer.Option(
        False,
        "--yes", "-y",
        help="Answer yes to every confirmation"
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show proposed changes without writing"
    ),
    offline: bool = typer.Option(
        False,
        "--offline",
        help="Skip wordpress.org lookups"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show detailed output"
    )
):
    """
    Scan the WordPress install and merge its dependencies into composer.json.

    Each component is resolved, in order, through:
    - the pro repository manifest (commercial plugins)
    - a composer.json in the component's own directory
    - wordpress.org, via WPackagist (plugins and themes)

    Existing constraints that already cover the installed version are kept.
    Nothing is written until you confirm the proposed changes.

    Examples:
        wp-composer-sync sync
        wp-composer-sync sync --path /var/www/html
        wp-composer-sync sync --dry-run
        wp-composer-sync sync --yes -m site/composer.json
    """
    try:
        settings = get_settings()
        configure_logging("debug" if verbose else settings.log_level)

        manifest_path = Path(manifest or settings.manifest_file)
        repositories_path = Path(repositories or settings.repositories_file)

        host = WpCliHost(
            wp_bin=wp_bin or settings.wp_bin,
            path=path or settings.wp_path,
        )
        index_client = None
        if not offline:
            index_client = PackageIndexClient(
                url_template=settings.index_url_template,
                timeout=settings.request_timeout,
            )
        prompter = AutoConfirm() if yes else TyperPrompter()

        if verbose:
            info(f"Manifest: {manifest_path}")
            if repositories_path.is_file():
                info(f"Pro repositories: {repositories_path}")

        runner = ComposerSync(
            host=host,
            prompter=prompter,
            reporter=ConsoleReporter(),
            index_client=index_client,
            repositories_file=repositories_path,
        )
        runner.run(manifest_path, dry_run=dry_run)

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        info("\nSync cancelled by user. No changes were made.")
        raise typer.Exit(130)
    except WpSyncError as e:
        handle_error(e, verbose)
        raise typer.Exit(1)
    except Exception as e:
        handle_error(e, verbose)
        console.print("\n[dim]Tip: run with --verbose for details[/dim]")
        raise typer.Exit(1)
