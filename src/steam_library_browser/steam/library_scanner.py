"""
Steam Library Scanner.

Finds the Steam installation, walks every library folder and merges
the installed games into one LibraryInfo.
"""

from pathlib import Path
from typing import Callable, Optional

from steam_library_browser.steam.errors import PlatformUnsupportedError, SteamNotFoundError
from steam_library_browser.steam.library_folders import list_library_paths
from steam_library_browser.steam.manifest_scanner import ManifestScanner
from steam_library_browser.steam.models import InstalledGame, LibraryInfo
from steam_library_browser.steam.path_resolver import is_platform_supported, resolve_base_path


def merge_games(game_lists: list[list[InstalledGame]]) -> list[InstalledGame]:
    """
    Merge per-library game lists.

    The first record seen for an App ID wins, so earlier libraries take
    precedence. The result is sorted by name, case-insensitive.
    """
    games_by_id: dict[int, InstalledGame] = {}
    for games in game_lists:
        for game in games:
            if game.app_id not in games_by_id:
                games_by_id[game.app_id] = game

    return sorted(games_by_id.values(), key=lambda g: g.name.casefold())


class SteamLibraryScanner:
    """Scans the Steam library for installed games."""

    def __init__(
        self,
        steam_path: Optional[Path] = None,
        on_status: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize scanner.

        Args:
            steam_path: Path to Steam installation. Auto-detected if None.
            on_status: Callback for status messages (optional).
        """
        self.steam_path = steam_path
        self.on_status = on_status

    def _log(self, message: str) -> None:
        """Log a status message."""
        if self.on_status:
            self.on_status(message)

    def find_steam_path(self) -> Path:
        """
        Find the Steam installation path.

        Raises:
            PlatformUnsupportedError: No lookup mechanism on this host.
            SteamNotFoundError: Steam is not installed or the path is gone.
        """
        if self.steam_path is not None:
            if not Path(self.steam_path).exists():
                raise SteamNotFoundError(f"Steam path does not exist: {self.steam_path}")
            return Path(self.steam_path)

        if not is_platform_supported():
            raise PlatformUnsupportedError(
                "Steam library browsing is only supported on Windows and Linux. "
                "Please specify path with --steam-path"
            )

        steam_path = resolve_base_path()
        if steam_path is None:
            raise SteamNotFoundError(
                "Steam installation not found. "
                "Please specify path with --steam-path"
            )
        return steam_path

    def collect(self) -> LibraryInfo:
        """
        Scan all Steam libraries and return installed games.

        Every call rescans the filesystem.

        Returns:
            LibraryInfo with unique games sorted by name.
        """
        steam_path = self.find_steam_path()
        self._log(f"Steam path found: {steam_path}")

        library_paths = list_library_paths(steam_path, on_status=self.on_status)
        self._log(f"Library paths found: {', '.join(str(p) for p in library_paths)}")

        manifest_scanner = ManifestScanner(on_status=self.on_status)
        game_lists = []
        for library_path in library_paths:
            self._log(f"Scanning library: {library_path}")
            games = manifest_scanner.scan(library_path)
            self._log(f"Found {len(games)} games in {library_path}")
            game_lists.append(games)

        info = LibraryInfo(games=merge_games(game_lists))
        self._log(f"Total unique games found: {info.game_count}")
        return info


def collect(
    steam_path: Optional[Path] = None,
    on_status: Optional[Callable[[str], None]] = None,
) -> LibraryInfo:
    """Scan the Steam library. See SteamLibraryScanner.collect()."""
    return SteamLibraryScanner(steam_path, on_status).collect()
