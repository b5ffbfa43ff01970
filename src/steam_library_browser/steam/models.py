"""
Steam library data models.

InstalledGame is created by the manifest scanner, LibraryInfo by the
library scanner. Both are rebuilt on every scan.
"""

from dataclasses import dataclass, field
from enum import IntFlag
from pathlib import Path
from typing import Optional


class StateFlags(IntFlag):
    """Bits of the StateFlags field in appmanifest files."""
    INVALID = 0
    UNINSTALLED = 1
    UPDATE_REQUIRED = 2
    FULLY_INSTALLED = 4
    ENCRYPTED = 8
    LOCKED = 16
    FILES_MISSING = 32
    APP_RUNNING = 64
    FILES_CORRUPT = 128
    UPDATE_RUNNING = 256
    UPDATE_PAUSED = 512
    UPDATE_STARTED = 1024
    UNINSTALLING = 2048
    BACKUP_RUNNING = 4096
    RECONFIGURING = 65536
    VALIDATING = 131072
    ADDING_FILES = 262144
    PREALLOCATING = 524288
    DOWNLOADING = 1048576
    STAGING = 2097152
    COMMITTING = 4194304
    UPDATE_STOPPING = 8388608


# Checked in order, first match wins
_STATUS_LABELS = [
    (StateFlags.UNINSTALLING, "Uninstalling"),
    (StateFlags.DOWNLOADING, "Downloading"),
    (StateFlags.UPDATE_RUNNING, "Updating"),
    (StateFlags.UPDATE_PAUSED, "Update Paused"),
    (StateFlags.VALIDATING, "Validating"),
    (StateFlags.FILES_MISSING, "Files Missing"),
    (StateFlags.FILES_CORRUPT, "Files Corrupt"),
    (StateFlags.UPDATE_REQUIRED, "Update Required"),
    (StateFlags.FULLY_INSTALLED, "Installed"),
]


@dataclass(frozen=True)
class InstalledGame:
    """A game found in an appmanifest_<appid>.acf file."""
    app_id: int
    name: str
    install_dir: Path
    size_on_disk: int = 0
    last_updated: Optional[int] = None
    state_flags: Optional[int] = None
    library_path: Optional[Path] = None

    @property
    def state(self) -> Optional[StateFlags]:
        """Decoded StateFlags, None if the manifest had none."""
        if self.state_flags is None:
            return None
        return StateFlags(self.state_flags)

    @property
    def status_label(self) -> str:
        """Short human-readable install state."""
        state = self.state
        if state is None:
            return "Unknown"
        for flag, label in _STATUS_LABELS:
            if state & flag:
                return label
        return "Unknown"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "app_id": self.app_id,
            "name": self.name,
            "install_dir": str(self.install_dir),
            "size_on_disk": self.size_on_disk,
            "last_updated": self.last_updated,
            "state_flags": self.state_flags,
            "library_path": str(self.library_path) if self.library_path else None,
        }


@dataclass
class LibraryInfo:
    """Result of a full library scan."""
    games: list[InstalledGame] = field(default_factory=list)

    @property
    def total_size(self) -> int:
        """Sum of SizeOnDisk over all games, in bytes."""
        return sum(game.size_on_disk for game in self.games)

    @property
    def game_count(self) -> int:
        """Number of unique installed games."""
        return len(self.games)

    def get_game_by_id(self, app_id: int) -> Optional[InstalledGame]:
        """Get a game by its App ID."""
        for game in self.games:
            if game.app_id == app_id:
                return game
        return None

    def get_game_by_name(self, name: str) -> Optional[InstalledGame]:
        """Get a game by name (prefers exact match, then partial match)."""
        name_lower = name.lower().strip()
        if not name_lower:
            return None

        for game in self.games:
            if game.name.lower() == name_lower:
                return game

        # Shorter names are more specific, so "Portal" beats "Portal 2"
        matches = [g for g in self.games if name_lower in g.name.lower()]
        if matches:
            matches.sort(key=lambda g: len(g.name))
            return matches[0]

        return None

    def filter(self, query: str) -> list[InstalledGame]:
        """Games whose name contains query (case-insensitive)."""
        query_lower = query.lower()
        return [g for g in self.games if query_lower in g.name.lower()]

    def recently_updated(self) -> list[InstalledGame]:
        """Games with an update timestamp first (newest first), then the rest by name."""
        return sorted(
            self.games,
            key=lambda g: (g.last_updated is None, -(g.last_updated or 0)),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "games": [game.to_dict() for game in self.games],
            "total_size": self.total_size,
            "game_count": self.game_count,
        }
