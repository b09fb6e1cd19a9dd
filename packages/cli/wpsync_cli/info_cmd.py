"""Info command - Version and resolved configuration."""
import sys
from pathlib import Path

import typer
from rich.table import Table

from wpsync_common import WPACKAGIST_URL, get_settings
from wpsync_sdk.dependencies import load_pro_repositories
from wpsync_sdk.dependencies.pro_repos import select_manifest_file

from .utils import console, error

app = typer.Typer()


@app.command(name="version")
def version():
    """
    Show wp-composer-sync version information and the effective setup.

    Displays:
    - CLI, SDK and Python versions
    - The wp-cli binary and composer.json a sync would use
    - Which pro repository manifest is in effect and how many
      repositories it defines

    Examples:
        wp-composer-sync version
        WPSYNC_WP_BIN=/usr/local/bin/wp wp-composer-sync version
    """
    try:
        import wpsync_sdk
        from wpsync_cli import __version__ as cli_version

        settings = get_settings()
        python_version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"

        table = Table(title="wp-composer-sync Version Information", show_header=True, header_style="bold cyan")
        table.add_column("Component", style="cyan", no_wrap=True)
        table.add_column("Version", style="green")

        table.add_row("CLI", cli_version)
        table.add_row("SDK", wpsync_sdk.__version__)
        table.add_row("Python", python_version)

        console.print(table)

        repositories_path = Path(settings.repositories_file)
        manifest_source = select_manifest_file(repositories_path)
        definitions = load_pro_repositories(repositories_path)

        setup = Table(title="Sync Setup", show_header=True, header_style="bold cyan")
        setup.add_column("Setting", style="cyan", no_wrap=True)
        setup.add_column("Value", style="green", overflow="fold")

        setup.add_row("wp-cli binary", settings.wp_bin)
        setup.add_row("WordPress path", settings.wp_path or "(current directory)")
        setup.add_row("Manifest", settings.manifest_file)
        setup.add_row("Pro manifest", str(manifest_source) if manifest_source else "(built-in fallback)")
        setup.add_row("Pro repositories", str(len(definitions)))
        setup.add_row("Public mirror", WPACKAGIST_URL)

        console.print(setup)

    except Exception as e:
        error(f"Failed to get version info: {str(e)}")
        raise typer.Exit(1)
