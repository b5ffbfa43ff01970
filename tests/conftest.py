"""Shared fixtures for building fake Steam installations."""

from pathlib import Path
from typing import Optional

import pytest


def _manifest_text(
    app_id: int,
    name: Optional[str] = None,
    installdir: Optional[str] = None,
    size: Optional[str] = None,
    last_updated: Optional[str] = None,
    state_flags: Optional[str] = "4",
) -> str:
    """Build appmanifest content the way Steam writes it."""
    lines = ['"AppState"', "{", f'\t"appid"\t\t"{app_id}"', '\t"Universe"\t\t"1"']
    if name is not None:
        lines.append(f'\t"name"\t\t"{name}"')
    if state_flags is not None:
        lines.append(f'\t"StateFlags"\t\t"{state_flags}"')
    if installdir is not None:
        lines.append(f'\t"installdir"\t\t"{installdir}"')
    if last_updated is not None:
        lines.append(f'\t"LastUpdated"\t\t"{last_updated}"')
    if size is not None:
        lines.append(f'\t"SizeOnDisk"\t\t"{size}"')
    lines.extend(['\t"UserConfig"', "\t{", '\t\t"language"\t\t"english"', "\t}", "}"])
    return "\n".join(lines) + "\n"


def _write_manifest(library: Path, app_id: int, **fields) -> Path:
    """Write appmanifest_<app_id>.acf into library/steamapps."""
    steamapps = library / "steamapps"
    steamapps.mkdir(parents=True, exist_ok=True)
    path = steamapps / f"appmanifest_{app_id}.acf"
    path.write_text(_manifest_text(app_id, **fields), encoding="utf-8")
    return path


def _library_folders_text(*paths: Path) -> str:
    """Build libraryfolders.vdf content listing the given libraries."""
    lines = ['"libraryfolders"', "{"]
    for i, path in enumerate(paths):
        escaped = str(path).replace("\\", "\\\\")
        lines.extend([
            f'\t"{i}"',
            "\t{",
            f'\t\t"path"\t\t"{escaped}"',
            '\t\t"label"\t\t""',
            '\t\t"apps"',
            "\t\t{",
            "\t\t}",
            "\t}",
        ])
    lines.append("}")
    return "\n".join(lines) + "\n"


@pytest.fixture
def steam_root(tmp_path: Path) -> Path:
    """An empty Steam installation with a steamapps directory."""
    root = tmp_path / "Steam"
    (root / "steamapps").mkdir(parents=True)
    return root


@pytest.fixture
def manifest_text():
    """Builder for appmanifest content."""
    return _manifest_text


@pytest.fixture
def write_manifest():
    """Writer for appmanifest files inside a library."""
    return _write_manifest


@pytest.fixture
def library_folders_text():
    """Builder for libraryfolders.vdf content."""
    return _library_folders_text
