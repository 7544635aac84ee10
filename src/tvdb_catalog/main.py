"""Command line entry point for tvdb-catalog."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from tvdb_catalog import __version__
from tvdb_catalog.core.config import Settings, load_settings
from tvdb_catalog.core.errors import CatalogError
from tvdb_catalog.core.logging import configure_logging
from tvdb_catalog.models import Series
from tvdb_catalog.services import CatalogClient, CatalogEndpoints, HttpFetcher

app = typer.Typer(
    name="tvdb-catalog",
    help="Look up TV series and episodes on TheTVDB",
)
console = Console()


def _config_option():
    return typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
    )


def _setup(config: Optional[Path]) -> Settings:
    settings = load_settings(config)
    configure_logging(settings.logging)
    return settings


def _series_table(results: list[Series]) -> Table:
    table = Table(title="Series")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("First aired")
    table.add_column("Network")
    table.add_column("IMDb")

    for series in results:
        table.add_row(
            str(series.id),
            series.series_name,
            series.first_aired,
            series.network,
            series.imdb_id,
        )
    return table


def _print_series(series: Series, episodes: bool) -> None:
    console.print(f"[bold]{series.series_name}[/bold] ({series.id})")
    if series.network:
        console.print(f"Network: {series.network}")
    if series.status:
        console.print(f"Status: {series.status}")
    genres = [genre for genre in series.genre if genre]
    if genres:
        console.print(f"Genre: {', '.join(genres)}")
    if series.overview:
        console.print(series.overview)

    if not episodes or not series.seasons:
        return

    for season_number in sorted(series.seasons):
        table = Table(title=f"Season {season_number}")
        table.add_column("#", justify="right")
        table.add_column("Name")
        table.add_column("First aired")
        for episode in series.seasons[season_number]:
            table.add_row(str(episode.episode_number), episode.episode_name, episode.first_aired)
        console.print(table)


def _run(settings: Settings, action):
    """Run an action against a fresh client, turning catalog errors into exit code 1."""
    with HttpFetcher(settings.catalog) as fetcher:
        client = CatalogClient(fetcher, CatalogEndpoints(settings.catalog))
        try:
            return action(client)
        except CatalogError as e:
            console.print(f"[red][X][/red] {e}")
            raise typer.Exit(code=1)


@app.command()
def search(
    name: str = typer.Argument(..., help="Show name"),
    config: Optional[Path] = _config_option(),
) -> None:
    """Search series by name using the XML API."""
    settings = _setup(config)
    results = _run(settings, lambda client: client.search_by_name(name))
    if not results:
        console.print(f"[yellow][!][/yellow] No series found for '{name}'")
        return
    console.print(_series_table(results))


@app.command("web-search")
def web_search(
    name: str = typer.Argument(..., help="Show name"),
    max_results: Optional[int] = typer.Option(None, "--max", "-m", help="Maximum number of series"),
    config: Optional[Path] = _config_option(),
) -> None:
    """Search series using the catalog's web search page."""
    settings = _setup(config)
    limit = settings.search.max_results if max_results is None else max_results
    results = _run(settings, lambda client: client.search_web(name, limit))
    if not results:
        console.print(f"[yellow][!][/yellow] No series found for '{name}'")
        return
    console.print(_series_table(results))


@app.command()
def show(
    series_id: int = typer.Argument(..., help="Catalog series ID"),
    episodes: bool = typer.Option(False, "--episodes", "-e", help="Include the episode list"),
    config: Optional[Path] = _config_option(),
) -> None:
    """Show a series by catalog ID."""
    settings = _setup(config)

    def action(client: CatalogClient) -> Series:
        series = client.get_by_catalog_id(series_id)
        if episodes:
            client.enrich_series(series)
        return series

    _print_series(_run(settings, action), episodes)


@app.command()
def imdb(
    imdb_id: str = typer.Argument(..., help="IMDb ID, e.g. tt0903747"),
    episodes: bool = typer.Option(False, "--episodes", "-e", help="Include the episode list"),
    config: Optional[Path] = _config_option(),
) -> None:
    """Show a series by IMDb ID."""
    settings = _setup(config)

    def action(client: CatalogClient) -> Series:
        series = client.get_by_external_id(imdb_id)
        if episodes:
            client.enrich_series(series)
        return series

    _print_series(_run(settings, action), episodes)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"tvdb-catalog v{__version__}")


if __name__ == "__main__":
    app()
