"""Main CLI entry point."""

import asyncio
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import click
import yaml

from .. import __version__
from ..config import Config, ConfigManager
from ..core.interfaces import ICollectionLoader, ISourceRefresher
from ..core.models import LanguageFilter, MovieCollection, RefreshResult
from ..core.services import MovieCatalog
from ..infrastructure import Container, setup_logging
from ..utils import AVAILABLE_COLUMNS, FILM_RATINGS, MovieBrowserError, RefreshError, column_label
from .render import render_card, render_detail, render_table

LANGUAGE_CHOICES = [mode.value for mode in LanguageFilter if mode.value]


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="movie-browser")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool) -> None:
    """Movie Collection Browser - Search, filter and sort merged movie collections."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config

    # Skip configuration loading for commands that don't need it
    if ctx.invoked_subcommand == "init":
        return

    try:
        config_manager = ConfigManager(config)
        app_config = config_manager.load_config()

        if verbose:
            app_config.logging.level = "DEBUG"
        setup_logging(app_config.logging)

        container = Container(config_manager)
        container.configure_default_services()

        ctx.obj["config"] = app_config
        ctx.obj["container"] = container

    except (MovieBrowserError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


@cli.command("list")
@click.option("--search", "-s", default="", help="Search titles and directors")
@click.option("--genre", "-g", default="", help="Only movies of this genre")
@click.option("--source", default="", help="Only movies of this collection")
@click.option(
    "--language",
    "-l",
    type=click.Choice(LANGUAGE_CHOICES),
    default=None,
    help="Keep movies that include or exclude the configured language",
)
@click.option(
    "--rating",
    "-r",
    "film_rating",
    default="",
    help=f"Age classification ({', '.join(FILM_RATINGS)})",
)
@click.option(
    "--sort",
    "sort_keys",
    multiple=True,
    help="Column to sort on; repeat the same column to sort descending",
)
@click.option("--view", type=click.Choice(["cards", "table"]), default="cards")
@click.option("--column", "columns", multiple=True, help="Table column (repeatable)")
@click.pass_context
def list_movies(
    ctx: click.Context,
    search: str,
    genre: str,
    source: str,
    language: Optional[str],
    film_rating: str,
    sort_keys: Tuple[str, ...],
    view: str,
    columns: Tuple[str, ...],
) -> None:
    """List movies matching the filters."""
    config: Config = ctx.obj["config"]
    catalog = _load_catalog(ctx)

    catalog.apply_filters(
        search=search,
        genre=genre,
        source=source,
        language=LanguageFilter(language or ""),
        film_rating=film_rating,
    )
    for key in sort_keys:
        catalog.sort_by(key)

    movies = catalog.view

    if view == "table":
        visible = list(columns) or config.browser.visible_columns
        click.echo(render_table(movies, visible, config.browser, catalog.sort_config))
    else:
        for movie in movies:
            click.echo(render_card(movie, config.browser))
            click.echo("")

    click.echo(f"{len(movies)} film(s) sur {len(catalog)}")


@cli.command()
@click.argument("title")
@click.pass_context
def show(ctx: click.Context, title: str) -> None:
    """Show every detail of a movie."""
    config: Config = ctx.obj["config"]
    catalog = _load_catalog(ctx)

    movie = catalog.find(title)
    if movie is None:
        click.echo(f"Movie not found: {title}", err=True)
        sys.exit(1)

    click.echo(render_detail(movie, config.browser))


@cli.command()
@click.pass_context
def genres(ctx: click.Context) -> None:
    """List the genres available for filtering."""
    catalog = _load_catalog(ctx)
    for genre in catalog.genres:
        click.echo(genre)


@cli.command()
@click.pass_context
def columns(ctx: click.Context) -> None:
    """List table columns, marking the visible ones."""
    config: Config = ctx.obj["config"]
    visible = config.browser.visible_columns

    for column in AVAILABLE_COLUMNS:
        mark = "✓" if column in visible else " "
        click.echo(f"[{mark}] {column} ({column_label(column)})")


@cli.command()
@click.pass_context
def refresh(ctx: click.Context) -> None:
    """Copy the newest CSV export of each source directory."""
    container: Container = ctx.obj["container"]
    refresher = container.get(ISourceRefresher)  # type: ignore

    try:
        summary = refresher.refresh(fail_if_empty=True)
    except RefreshError as e:
        _echo_refresh_results(e.results)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    _echo_refresh_results(summary.results)
    click.echo("Refresh complete")


def _echo_refresh_results(results: List[RefreshResult]) -> None:
    """Print one line per refreshed source."""
    for result in results:
        if result.is_successful and result.copied_file and result.modified_at:
            click.echo(f"✓ {result.name}: {result.copied_file.name} -> {result.target_file.name}")
            click.echo(f"   Date: {result.modified_at:%d/%m/%Y %H:%M:%S}")
        else:
            click.echo(f"✗ {result.name}: {result.error}")


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=Path.cwd() / "config" / "config.yaml",
    help="Output path for configuration file",
)
def init(output: Path) -> None:
    """Initialize configuration file."""
    try:
        if output.exists():
            if not click.confirm(f"Configuration file {output} already exists. Overwrite?"):
                return

        output.parent.mkdir(parents=True, exist_ok=True)

        ConfigManager.create_default_config(output)
        click.echo(f"Configuration file created at: {output}")

    except OSError as e:
        click.echo(f"Failed to create configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configured sources and how many movies each provides."""
    config: Config = ctx.obj["config"]
    collection = _load_collection_or_exit(ctx)

    click.echo("Movie Collection Browser Status")
    click.echo("=" * 40)

    for result in collection.sources:
        if result.available:
            click.echo(f"✓ {result.tag}: {len(result.records)} films ({result.location})")
        else:
            click.echo(f"✗ {result.tag}: {result.error} ({result.location})")

    click.echo(f"Total: {len(collection)} films, {len(collection.genres)} genres")
    click.echo(f"Language filter: {config.browser.language_filter_target}")


def _load_catalog(ctx: click.Context) -> MovieCatalog:
    """Load the collection and wrap it in a catalog."""
    config: Config = ctx.obj["config"]
    collection = _load_collection_or_exit(ctx)
    return MovieCatalog.from_collection(collection, config.browser.language_filter_target)


def _load_collection_or_exit(ctx: click.Context) -> MovieCollection:
    """Run the loader, exiting on unexpected application errors."""
    container: Container = ctx.obj["container"]

    try:
        return asyncio.run(_load_collection(container))
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.")
        sys.exit(1)
    except MovieBrowserError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


async def _load_collection(container: Container) -> MovieCollection:
    """Load every source, then release the loader's HTTP session."""
    loader = container.get(ICollectionLoader)  # type: ignore
    try:
        return await loader.load()
    finally:
        await loader.close()


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
