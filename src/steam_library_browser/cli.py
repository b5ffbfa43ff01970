"""
CLI interface for Steam Library Browser.

Commands:
    slb scan        - Scan Steam library for installed games
    slb list        - List installed games
    slb info        - Show details for one game
    slb launch      - Launch a game through Steam
    slb store-page  - Open the store page of a game
    slb store       - Browse Steam store categories
    slb search      - Search the Steam store
    slb open-steam  - Open the Steam client
    slb big-picture - Open Steam Big Picture mode
    slb config      - Show or change configuration
"""

import json
import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from typing import Optional
from pathlib import Path

from steam_library_browser import __version__
from steam_library_browser.steam.errors import LaunchError, SteamLibraryError
from steam_library_browser.steam.models import InstalledGame, LibraryInfo
from steam_library_browser.utils.formatting import format_relative_time, format_size

app = typer.Typer(
    name="slb",
    help="Steam Library Browser - browse and launch installed Steam games",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]Steam Library Browser[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """
    Steam Library Browser.

    Lists the games installed in every Steam library on this machine
    and launches them through the Steam client.
    """


def _status_printer(verbose: bool):
    """Status callback for the scanner, None unless verbose."""
    if not verbose:
        return None
    return lambda message: console.print(f"[dim]{escape(message)}[/dim]")


def _load_library(steam_path: Optional[Path], verbose: bool = False) -> LibraryInfo:
    """Scan the library or exit with an error message."""
    from steam_library_browser.config.settings import settings
    from steam_library_browser.steam.library_scanner import SteamLibraryScanner

    scanner = SteamLibraryScanner(
        steam_path or settings.STEAM_PATH,
        on_status=_status_printer(verbose),
    )
    try:
        return scanner.collect()
    except SteamLibraryError as e:
        console.print(f"[red]Library load failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _find_game(library: LibraryInfo, game: str) -> InstalledGame:
    """Find an installed game by App ID or name or exit."""
    found = None
    if game.isdecimal():
        found = library.get_game_by_id(int(game))
    if found is None:
        found = library.get_game_by_name(game)
    if found is None:
        console.print(f"[red]No installed game matches '{escape(game)}'[/red]")
        raise typer.Exit(1)
    return found


def _updated_text(game: InstalledGame) -> str:
    if game.last_updated is None:
        return "-"
    return format_relative_time(game.last_updated)


def _open(action, success: str, failure: str) -> None:
    """Run a launcher action and report the outcome."""
    try:
        action()
    except LaunchError as e:
        console.print(f"[red]{escape(failure)}[/red]")
        console.print(f"[dim]{escape(str(e))}[/dim]")
        raise typer.Exit(1)
    console.print(f"[green]{escape(success)}[/green]")


STEAM_PATH_OPTION = typer.Option(
    None,
    "--steam-path",
    "-s",
    help="Path to Steam installation (auto-detected if not specified)",
)
VERBOSE_OPTION = typer.Option(False, "--verbose", help="Show scan progress")


@app.command()
def scan(
    steam_path: Optional[Path] = STEAM_PATH_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """
    Scan Steam library for installed games.

    Finds every Steam library folder and counts the installed games.
    """
    console.print("[bold]Scanning Steam library...[/bold]")

    library = _load_library(steam_path, verbose)

    if library.game_count == 0:
        console.print("\n[yellow]No games found.[/yellow]")
        console.print("[dim]Make sure Steam is installed and games are installed.[/dim]")
        return

    console.print(f"\n[green]Found {library.game_count} installed games.[/green]")
    console.print(f"[cyan]Total library size: {format_size(library.total_size)}[/cyan]")


@app.command("list")
def list_games(
    search: Optional[str] = typer.Option(
        None,
        "--search",
        "-q",
        help="Only show games whose name contains this text",
    ),
    recent: bool = typer.Option(
        False,
        "--recent",
        "-r",
        help="Sort by last update, newest first",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
    steam_path: Optional[Path] = STEAM_PATH_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """
    List installed Steam games.

    Shows all games found in the Steam libraries with optional filtering.
    """
    library = _load_library(steam_path, verbose)

    if as_json:
        typer.echo(json.dumps(library.to_dict(), indent=2))
        return

    games = library.filter(search) if search else library.games
    if recent:
        games = LibraryInfo(games=games).recently_updated()

    if not games:
        console.print("[yellow]No games found.[/yellow]")
        if library.game_count == 0:
            console.print("[dim]No Steam games installed.[/dim]")
        else:
            console.print("[dim]Try searching for a different game name.[/dim]")
        raise typer.Exit(0)

    table = Table(title=f"Installed Games ({library.game_count})")
    table.add_column("App ID", style="cyan", justify="right")
    table.add_column("Name", style="white")
    table.add_column("Size", style="green", justify="right")
    table.add_column("Updated", style="magenta")
    table.add_column("Status", style="dim")

    for game in games:
        table.add_row(
            str(game.app_id),
            escape(game.name),
            format_size(game.size_on_disk),
            _updated_text(game),
            game.status_label,
        )

    console.print(table)
    console.print(f"\nTotal: {len(games)} games, {format_size(sum(g.size_on_disk for g in games))}")


@app.command()
def info(
    game: str = typer.Argument(..., help="App ID or name of an installed game"),
    steam_path: Optional[Path] = STEAM_PATH_OPTION,
) -> None:
    """
    Show details for an installed game.
    """
    from steam_library_browser.steam.launcher import capsule_image_url, store_url

    library = _load_library(steam_path)
    found = _find_game(library, game)

    console.print(Panel(
        f"""[bold]App ID:[/bold] {found.app_id}
[bold]Size:[/bold] {format_size(found.size_on_disk)}
[bold]Updated:[/bold] {_updated_text(found)}
[bold]Status:[/bold] {found.status_label}
[bold]Install Dir:[/bold] {escape(str(found.install_dir))}
[bold]Store:[/bold] {store_url(found.app_id)}
[bold]Image:[/bold] {capsule_image_url(found.app_id)}""",
        title=escape(found.name),
        border_style="blue",
    ))


@app.command()
def launch(
    game: str = typer.Argument(..., help="App ID or name of an installed game"),
    steam_path: Optional[Path] = STEAM_PATH_OPTION,
) -> None:
    """
    Launch an installed game through Steam.
    """
    from steam_library_browser.steam.launcher import launch_game

    library = _load_library(steam_path)
    found = _find_game(library, game)

    _open(
        lambda: launch_game(found.app_id),
        f"Starting {found.name}",
        "Could not launch the game. Make sure Steam is installed and running.",
    )


@app.command("store-page")
def store_page(
    game: str = typer.Argument(..., help="App ID or name of an installed game"),
    steam_path: Optional[Path] = STEAM_PATH_OPTION,
) -> None:
    """
    Open the Steam store page of a game.

    A numeric App ID is opened directly without scanning the library.
    """
    from steam_library_browser.steam.launcher import open_store_page

    if game.isdecimal() and int(game) > 0:
        app_id, name = int(game), f"App {game}"
    else:
        found = _find_game(_load_library(steam_path), game)
        app_id, name = found.app_id, found.name

    _open(
        lambda: open_store_page(app_id),
        f"Opening {name} store page",
        "Could not open the Steam store page",
    )


@app.command()
def store(
    query: str = typer.Argument("", help="Filter categories by title or description"),
    open_category: Optional[str] = typer.Option(
        None,
        "--open",
        "-o",
        help="Open the category with this title",
    ),
) -> None:
    """
    Browse Steam store categories.
    """
    from steam_library_browser.steam.launcher import open_url
    from steam_library_browser.steam.store import filter_categories, find_category

    if open_category:
        category = find_category(open_category)
        if category is None:
            console.print(f"[red]Unknown category: {escape(open_category)}[/red]")
            raise typer.Exit(1)
        _open(
            lambda: open_url(category.url),
            f"Opening {category.title}",
            "Could not open the Steam store page",
        )
        return

    categories = filter_categories(query)
    if not categories:
        console.print(f"[yellow]No store categories match '{escape(query)}'.[/yellow]")
        console.print(f"[dim]Search the store with: slb search \"{escape(query)}\"[/dim]")
        return

    table = Table(title="Store Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Description", style="white")
    for category in categories:
        table.add_row(category.title, category.description)

    console.print(table)
    console.print("\n[dim]Open with: slb store --open \"New Releases\"[/dim]")


@app.command()
def search(
    query: str = typer.Argument(..., help="Search term"),
) -> None:
    """
    Search the Steam store.
    """
    from steam_library_browser.steam.launcher import open_url
    from steam_library_browser.steam.store import search_url

    try:
        url = search_url(query)
    except ValueError:
        console.print("[red]Search query required. Please enter a search term.[/red]")
        raise typer.Exit(1)

    _open(
        lambda: open_url(url),
        f'Searching for "{query}"',
        "Could not open the search page",
    )


@app.command("open-steam")
def open_steam() -> None:
    """
    Open the Steam client.
    """
    from steam_library_browser.steam.launcher import open_steam_client

    _open(open_steam_client, "Launching Steam client", "Failed to open Steam. Make sure Steam is installed.")


@app.command("big-picture")
def big_picture() -> None:
    """
    Open Steam Big Picture mode.
    """
    from steam_library_browser.steam.launcher import open_big_picture

    _open(
        open_big_picture,
        "Launching Steam Big Picture mode",
        "Failed to open Big Picture. Make sure Steam is installed.",
    )


@app.command()
def config(
    steam_path: Optional[Path] = typer.Option(
        None,
        "--steam-path",
        "-s",
        help="Save a Steam installation path",
    ),
    clear: bool = typer.Option(False, "--clear", "-c", help="Clear the saved Steam path"),
) -> None:
    """
    Show or change configuration.

    Without options: shows the Steam path that will be used.
    """
    from steam_library_browser.config.settings import settings
    from steam_library_browser.steam.path_resolver import resolve_base_path

    if clear:
        settings.clear_steam_path()
        console.print("[green]✓ Saved Steam path cleared[/green]")
        return

    if steam_path:
        if not steam_path.exists():
            console.print(f"[red]Path does not exist: {escape(str(steam_path))}[/red]")
            raise typer.Exit(1)
        settings.set_steam_path(steam_path.resolve())
        console.print(f"[green]Steam path set to:[/green] {escape(str(steam_path.resolve()))}")
        return

    console.print("[bold]Current Configuration[/bold]\n")
    console.print(f"[bold]Config file:[/bold] {escape(str(settings.CONFIG_FILE))}")

    override = settings.STEAM_PATH
    if override:
        console.print(f"[bold]Steam path:[/bold] {escape(str(override))} [dim](configured)[/dim]")
    else:
        detected = resolve_base_path()
        if detected:
            console.print(f"[bold]Steam path:[/bold] {escape(str(detected))} [dim](auto-detected)[/dim]")
        else:
            console.print("[bold]Steam path:[/bold] [yellow]Not found[/yellow]")
    console.print(f"\n[dim]Change with: slb config --steam-path PATH or ${settings.STEAM_PATH_ENV}[/dim]")


if __name__ == "__main__":
    app()
