"""
Steam library folders.

Reads steamapps/libraryfolders.vdf to find extra library directories.
"""

import re
from pathlib import Path
from typing import Callable, Optional

PATH_PATTERN = re.compile(r'"path"\s+"((?:[^"\\]|\\.)+)"')


def _unescape(value: str) -> str:
    # VDF escapes backslashes and quotes: "D:\\Games" -> D:\Games
    return re.sub(r"\\(.)", r"\1", value)


def parse_library_folders(content: str) -> list[str]:
    """Extract every "path" value from libraryfolders.vdf content."""
    return [_unescape(m.group(1)) for m in PATH_PATTERN.finditer(content)]


def list_library_paths(
    base_path: Path,
    on_status: Optional[Callable[[str], None]] = None,
) -> list[Path]:
    """
    List all Steam library directories.

    Args:
        base_path: Steam installation directory.
        on_status: Callback for status messages (optional).

    Returns:
        base_path followed by every existing library listed in
        libraryfolders.vdf. Duplicates are kept.
    """
    library_folders = base_path / "steamapps" / "libraryfolders.vdf"
    if not library_folders.exists():
        return [base_path]

    try:
        content = library_folders.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        if on_status:
            on_status(f"Error reading library folders: {e}")
        return [base_path]

    paths = [base_path]
    for value in parse_library_folders(content):
        lib_path = Path(value)
        if lib_path.exists():
            paths.append(lib_path)

    return paths
