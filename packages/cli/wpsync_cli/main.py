"""wp-composer-sync CLI - Main entry point."""
import typer

from . import info_cmd, init_manifest_cmd, sync_cmd

app = typer.Typer(
    name="wp-composer-sync",
    help="Sync the plugins, theme and core of a WordPress install into composer.json",
    no_args_is_help=True,
    add_completion=False
)

# Register all commands
app.command(name="sync")(sync_cmd.sync)
app.command(name="init-manifest")(init_manifest_cmd.init_manifest)
app.command(name="version")(info_cmd.version)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
