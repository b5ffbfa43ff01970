"""
Steam library errors.

Only PlatformUnsupportedError and SteamNotFoundError abort a scan.
Unreadable files and malformed manifests are skipped where they occur.
"""


class SteamLibraryError(Exception):
    """Base class for all Steam library errors."""

    pass


class PlatformUnsupportedError(SteamLibraryError):
    """Raised when the host has no way to look up the Steam installation."""

    pass


class SteamNotFoundError(SteamLibraryError, FileNotFoundError):
    """Raised when the Steam installation directory cannot be found."""

    pass


class LaunchError(SteamLibraryError):
    """Raised when no URL handler accepted a steam:// or store URL."""

    pass
