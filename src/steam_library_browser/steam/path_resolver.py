"""
Steam Path Resolver.

Finds the Steam installation directory. On Windows the registry is
queried, on Linux the usual native and Flatpak locations are checked.
"""

import sys
from pathlib import Path
from typing import Optional

# WOW6432Node (32-bit view) is where the installer writes on 64-bit Windows
REGISTRY_KEYS = [
    r"SOFTWARE\WOW6432Node\Valve\Steam",
    r"SOFTWARE\Valve\Steam",
]
REGISTRY_VALUE = "InstallPath"


def _current_platform() -> str:
    return sys.platform


def _linux_candidates() -> list[Path]:
    home = Path.home()
    return [
        home / ".steam" / "steam",
        home / ".steam" / "root",
        home / ".local" / "share" / "Steam",
        # Flatpak Steam
        home / ".var" / "app" / "com.valvesoftware.Steam" / ".steam" / "steam",
        Path("/opt/steam"),
    ]


def is_platform_supported() -> bool:
    """Whether this host has a way to look up the Steam installation."""
    platform = _current_platform()
    return platform == "win32" or platform.startswith("linux")


def _query_registry(key_path: str, value_name: str = REGISTRY_VALUE) -> Optional[str]:
    """Read a string value from HKEY_LOCAL_MACHINE, None if missing."""
    import winreg

    try:
        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, key_path) as key:
            value, _ = winreg.QueryValueEx(key, value_name)
    except OSError:
        return None

    if not isinstance(value, str):
        return None
    return value


def _resolve_windows() -> Optional[Path]:
    for key_path in REGISTRY_KEYS:
        value = _query_registry(key_path)
        if value is None:
            continue
        value = value.strip()
        if value and Path(value).exists():
            return Path(value)
    return None


def _resolve_linux() -> Optional[Path]:
    for path in _linux_candidates():
        if path.exists() and (path / "steamapps").exists():
            return path
    return None


def resolve_base_path() -> Optional[Path]:
    """
    Find the Steam installation directory.

    Returns:
        Path to the Steam base directory, or None if Steam is not
        installed or the platform is not supported.
    """
    platform = _current_platform()
    if platform == "win32":
        return _resolve_windows()
    if platform.startswith("linux"):
        return _resolve_linux()
    return None
