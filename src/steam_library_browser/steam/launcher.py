"""
Steam URL launcher.

Builds steam:// and store URLs and hands them to the default URL handler.
"""

import webbrowser

from steam_library_browser.steam.errors import LaunchError

STEAM_CLIENT_URL = "steam://"
BIG_PICTURE_URL = "steam://open/bigpicture"
STORE_BASE_URL = "https://store.steampowered.com"
CDN_BASE_URL = "https://cdn.akamai.steamstatic.com/steam/apps"


def _check_app_id(app_id: int) -> int:
    if isinstance(app_id, bool) or not isinstance(app_id, int) or app_id <= 0:
        raise ValueError(f"Invalid Steam App ID: {app_id!r}")
    return app_id


def run_url(app_id: int) -> str:
    """steam:// URL that starts a game."""
    return f"steam://run/{_check_app_id(app_id)}"


def store_url(app_id: int) -> str:
    """Store page URL for a game."""
    return f"{STORE_BASE_URL}/app/{_check_app_id(app_id)}/"


def capsule_image_url(app_id: int) -> str:
    """Small capsule image (184x69) for a game."""
    return f"{CDN_BASE_URL}/{_check_app_id(app_id)}/capsule_184x69.jpg"


def open_url(url: str) -> None:
    """
    Open a URL with the default handler.

    Raises:
        LaunchError: If no handler accepted the URL.
    """
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        raise LaunchError(f"Could not open {url}: {e}") from e
    if not opened:
        raise LaunchError(f"No handler available for {url}")


def launch_game(app_id: int) -> str:
    """Launch a game through the Steam client. Returns the URL opened."""
    url = run_url(app_id)
    open_url(url)
    return url


def open_store_page(app_id: int) -> str:
    """Open the store page of a game. Returns the URL opened."""
    url = store_url(app_id)
    open_url(url)
    return url


def open_steam_client() -> str:
    """Bring up the Steam client."""
    open_url(STEAM_CLIENT_URL)
    return STEAM_CLIENT_URL


def open_big_picture() -> str:
    """Start Steam Big Picture mode."""
    open_url(BIG_PICTURE_URL)
    return BIG_PICTURE_URL
