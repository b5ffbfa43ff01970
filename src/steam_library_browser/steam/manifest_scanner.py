"""
Steam Manifest Scanner.

Parses the appmanifest_<appid>.acf files of a single Steam library.
"""

import re
from pathlib import Path
from typing import Callable, Optional

from steam_library_browser.steam.models import InstalledGame

MANIFEST_PATTERN = re.compile(r"^appmanifest_(\d+)\.acf$")

# Steam client and Steamworks Common Redistributables
RESERVED_APP_IDS = {
    7,
    228980,
}


def _string_field(content: str, key: str) -> Optional[str]:
    match = re.search(rf'"{key}"\s+"((?:[^"\\]|\\.)+)"', content)
    if not match:
        return None
    return re.sub(r"\\(.)", r"\1", match.group(1))


def _int_field(content: str, key: str) -> Optional[int]:
    match = re.search(rf'"{key}"\s+"([^"]*)"', content)
    if not match:
        return None
    value = match.group(1).strip()
    # Non-numeric values count as missing
    if not value.isdecimal():
        return None
    return int(value)


def parse_app_id(filename: str) -> Optional[int]:
    """Get the App ID from an appmanifest filename, None if it doesn't match."""
    match = MANIFEST_PATTERN.match(filename)
    if not match:
        return None
    return int(match.group(1))


def parse_manifest(content: str, app_id: int, library_path: Path) -> Optional[InstalledGame]:
    """
    Build an InstalledGame from appmanifest content.

    Args:
        content: Text of the .acf file.
        app_id: App ID taken from the filename.
        library_path: Library the manifest belongs to.

    Returns:
        InstalledGame, or None if "name" or "installdir" is missing.
    """
    name = _string_field(content, "name")
    install_dir = _string_field(content, "installdir")
    if name is None or install_dir is None:
        return None

    size_on_disk = _int_field(content, "SizeOnDisk")

    return InstalledGame(
        app_id=app_id,
        name=name,
        install_dir=library_path / "steamapps" / "common" / install_dir,
        size_on_disk=size_on_disk if size_on_disk is not None else 0,
        last_updated=_int_field(content, "LastUpdated"),
        state_flags=_int_field(content, "StateFlags"),
        library_path=library_path,
    )


class ManifestScanner:
    """Scans one Steam library for installed games."""

    def __init__(self, on_status: Optional[Callable[[str], None]] = None):
        """
        Initialize scanner.

        Args:
            on_status: Callback for status messages (optional).
        """
        self.on_status = on_status

    def _log(self, message: str) -> None:
        """Log a status message."""
        if self.on_status:
            self.on_status(message)

    def scan(self, library_path: Path) -> list[InstalledGame]:
        """Return all games with a valid manifest in library_path/steamapps."""
        steamapps = library_path / "steamapps"
        if not steamapps.is_dir():
            return []

        try:
            filenames = sorted(entry.name for entry in steamapps.iterdir())
        except OSError as e:
            self._log(f"Error listing {steamapps}: {e}")
            return []

        games = []
        for filename in filenames:
            app_id = parse_app_id(filename)
            if app_id is None or app_id <= 0:
                continue
            if app_id in RESERVED_APP_IDS:
                continue

            manifest_path = steamapps / filename
            try:
                content = manifest_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                self._log(f"Error reading manifest {filename}: {e}")
                continue

            game = parse_manifest(content, app_id, library_path)
            if game is None:
                self._log(f"Skipping {filename}: missing name or installdir")
                continue
            games.append(game)

        return games


def scan_library(
    library_path: Path,
    on_status: Optional[Callable[[str], None]] = None,
) -> list[InstalledGame]:
    """Scan one library directory for installed games."""
    return ManifestScanner(on_status).scan(library_path)
