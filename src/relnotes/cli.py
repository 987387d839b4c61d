"""Command-line interface for relnotes."""

import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from relnotes.errors import ConfigError, ReleaseNotesError
from relnotes.log import configure_logging
from relnotes.models import ReleaseConfig, Settings
from relnotes.pipeline import ReleaseNotesPipeline, wait_for_acknowledgment
from relnotes.storage import ConfigStore

app = typer.Typer(
    name="relnotes",
    help="Draft release notes from the commits made since the last tag",
    add_completion=False,
)
console = Console()


def _settings(config: Optional[Path], non_interactive: bool, verbose: bool) -> Settings:
    settings = Settings()
    if config is not None:
        settings.config_file = config
    if non_interactive:
        settings.non_interactive = True
    configure_logging("DEBUG" if verbose else settings.log_level)
    return settings


def load_or_create_config(store: ConfigStore, interactive: bool = True) -> ReleaseConfig:
    """Load the configuration document, or create it from prompts.

    When the document exists but cannot be loaded, an interactive session
    is offered to recreate it; otherwise the ConfigError propagates.
    """
    if store.exists():
        try:
            return store.load()
        except ConfigError as e:
            if not interactive:
                raise
            console.print(f"[bold yellow]Warning:[/bold yellow] {escape(str(e))}")
            if not typer.confirm("Create a new configuration?", default=True):
                raise
            return store.create_interactive()

    if not interactive:
        raise ConfigError(f"Configuration file not found: {store.path}")

    console.print(f"[bold yellow]No configuration found at[/bold yellow] {store.path}, creating one")
    config = store.create_interactive()
    console.print(f"[bold green]✓[/bold green] Configuration saved to {store.path}")
    return config


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context) -> None:
    """Draft release notes (same as `relnotes draft` when no command is given)."""
    if ctx.invoked_subcommand is None:
        draft(config=None, non_interactive=False, verbose=False)


@app.command()
def draft(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file (default: ./default.json)"),
    non_interactive: bool = typer.Option(False, "--non-interactive", help="Never prompt and skip the final pause"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Sync the repository and summarize the commits since the most recent tag."""
    settings = _settings(config, non_interactive, verbose)
    interactive = not settings.non_interactive

    try:
        store = ConfigStore(settings.config_file)
        release_config = load_or_create_config(store, interactive=interactive)

        console.print(f"[bold green]Repository:[/bold green] {escape(release_config.git.path)}")
        console.print(f"[bold blue]Branch:[/bold blue] {escape(release_config.git.branch)}")
        if release_config.ai.enabled:
            console.print(f"[bold blue]Summary:[/bold blue] AI ({escape(release_config.ai.endpoint)})")
        else:
            console.print("[bold blue]Summary:[/bold blue] plain text")

        pipeline = ReleaseNotesPipeline(release_config)
        result = pipeline.run()

        console.print(result.render(), markup=False, highlight=False, soft_wrap=True)

        provider = pipeline.summarizer.last_provider
        if verbose and provider is not None and hasattr(provider, "get_usage_stats"):
            usage = provider.get_usage_stats()
            console.print("\n[bold]API Usage:[/bold]")
            console.print(f"  Input Tokens: {usage['total_tokens']['input']:,}")
            console.print(f"  Output Tokens: {usage['total_tokens']['output']:,}")

    except ReleaseNotesError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)

    wait_for_acknowledgment(interactive)


@app.command()
def init(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file (default: ./default.json)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Create or overwrite the configuration file interactively."""
    settings = _settings(config, False, verbose)

    try:
        store = ConfigStore(settings.config_file)
        if store.exists():
            console.print(f"[bold yellow]Overwriting[/bold yellow] {store.path}")
        store.create_interactive()
    except ReleaseNotesError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[bold green]✓[/bold green] Configuration saved to {store.path}")


@app.command()
def version() -> None:
    """Show version information."""
    from relnotes import __version__

    console.print(f"[bold]relnotes[/bold] version {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
