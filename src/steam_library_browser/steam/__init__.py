"""Steam installation discovery, manifest scanning and launching."""

from steam_library_browser.steam.errors import (
    SteamLibraryError,
    PlatformUnsupportedError,
    SteamNotFoundError,
    LaunchError,
)
from steam_library_browser.steam.models import InstalledGame, LibraryInfo, StateFlags
from steam_library_browser.steam.path_resolver import resolve_base_path, is_platform_supported
from steam_library_browser.steam.library_folders import list_library_paths
from steam_library_browser.steam.manifest_scanner import ManifestScanner, scan_library
from steam_library_browser.steam.library_scanner import SteamLibraryScanner, collect

__all__ = [
    # Errors
    "SteamLibraryError",
    "PlatformUnsupportedError",
    "SteamNotFoundError",
    "LaunchError",
    # Models
    "InstalledGame",
    "LibraryInfo",
    "StateFlags",
    # Scanning
    "resolve_base_path",
    "is_platform_supported",
    "list_library_paths",
    "ManifestScanner",
    "scan_library",
    "SteamLibraryScanner",
    "collect",
]
