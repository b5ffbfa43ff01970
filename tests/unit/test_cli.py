"""
Tests for the slb command line interface.
"""

import json
import webbrowser
from pathlib import Path

import pytest
from typer.testing import CliRunner

from steam_library_browser import __version__, cli
from steam_library_browser.cli import app
from steam_library_browser.config.settings import Settings
from steam_library_browser.steam import library_scanner

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch):
    """Keep the real config file and environment out of the tests."""
    monkeypatch.setattr(Settings, "CONFIG_DIR", tmp_path / "config")
    monkeypatch.setattr(Settings, "CONFIG_FILE", tmp_path / "config" / "config.json")
    monkeypatch.delenv(Settings.STEAM_PATH_ENV, raising=False)


@pytest.fixture
def opened(monkeypatch):
    urls = []

    def fake_open(url, *args, **kwargs):
        urls.append(url)
        return True

    monkeypatch.setattr(webbrowser, "open", fake_open)
    return urls


@pytest.fixture
def library(steam_root: Path, write_manifest) -> Path:
    write_manifest(steam_root, 570, name="Dota 2", installdir="dota 2 beta", size="12000000000")
    write_manifest(steam_root, 620, name="Portal 2", installdir="Portal 2", size="1024")
    return steam_root


@pytest.fixture
def bracketed_library(steam_root: Path, write_manifest) -> Path:
    """Names that look like rich markup."""
    write_manifest(steam_root, 570, name="Dota [/] 2", installdir="dota 2 beta", size="100")
    write_manifest(steam_root, 620, name="Portal [red]Edition", installdir="Portal 2", size="200")
    return steam_root


@pytest.fixture
def wide_console(monkeypatch):
    """Keep long URLs on one line."""
    monkeypatch.setattr(cli.console, "width", 200)


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestScan:
    """Tests for slb scan."""

    def test_scan(self, library: Path):
        result = runner.invoke(app, ["scan", "--steam-path", str(library)])
        assert result.exit_code == 0
        assert "Found 2 installed games" in result.output
        assert "11.18 GB" in result.output

    def test_scan_empty(self, steam_root: Path):
        result = runner.invoke(app, ["scan", "--steam-path", str(steam_root)])
        assert result.exit_code == 0
        assert "No games found" in result.output

    def test_scan_verbose(self, library: Path):
        result = runner.invoke(app, ["scan", "--steam-path", str(library), "--verbose"])
        assert result.exit_code == 0
        assert "Scanning library" in result.output

    def test_steam_not_found(self, monkeypatch):
        monkeypatch.setattr(library_scanner, "is_platform_supported", lambda: True)
        monkeypatch.setattr(library_scanner, "resolve_base_path", lambda: None)

        result = runner.invoke(app, ["scan"])

        assert result.exit_code == 1
        assert "Library load failed" in result.output

    def test_uses_configured_path(self, library: Path, monkeypatch):
        monkeypatch.setenv(Settings.STEAM_PATH_ENV, str(library))

        result = runner.invoke(app, ["scan"])

        assert result.exit_code == 0
        assert "Found 2 installed games" in result.output


class TestList:
    """Tests for slb list."""

    def test_list_table(self, library: Path):
        result = runner.invoke(app, ["list", "--steam-path", str(library)])
        assert result.exit_code == 0
        assert "Dota 2" in result.output
        assert "Portal 2" in result.output
        assert "Total: 2 games" in result.output

    def test_list_search(self, library: Path):
        result = runner.invoke(app, ["list", "--steam-path", str(library), "--search", "portal"])
        assert result.exit_code == 0
        assert "Portal 2" in result.output
        assert "Dota 2" not in result.output

    def test_list_search_no_match(self, library: Path):
        result = runner.invoke(app, ["list", "--steam-path", str(library), "-q", "zzz"])
        assert result.exit_code == 0
        assert "No games found" in result.output

    def test_list_json(self, library: Path):
        result = runner.invoke(app, ["list", "--steam-path", str(library), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["game_count"] == 2
        assert data["total_size"] == 12000001024
        assert [g["name"] for g in data["games"]] == ["Dota 2", "Portal 2"]

    def test_list_names_with_brackets(self, bracketed_library: Path):
        """Game names are shown as written, never read as markup."""
        result = runner.invoke(app, ["list", "--steam-path", str(bracketed_library)])
        assert result.exit_code == 0
        assert "Dota [/] 2" in result.output
        assert "Portal [red]Edition" in result.output

    def test_list_search_and_recent(self, steam_root: Path, write_manifest):
        """--recent orders the search results, it doesn't replace them."""
        write_manifest(steam_root, 400, name="Portal", installdir="Portal", last_updated="100")
        write_manifest(steam_root, 620, name="Portal 2", installdir="Portal 2", last_updated="300")
        write_manifest(steam_root, 570, name="Dota 2", installdir="dota 2 beta", last_updated="200")

        result = runner.invoke(
            app, ["list", "--steam-path", str(steam_root), "--search", "portal", "--recent"]
        )

        assert result.exit_code == 0
        assert "Dota 2" not in result.output
        assert result.output.index("620") < result.output.index("400")
        assert "Total: 2 games" in result.output


class TestGameCommands:
    """Tests for info, launch and store-page."""

    def test_info(self, library: Path):
        result = runner.invoke(app, ["info", "570", "--steam-path", str(library)])
        assert result.exit_code == 0
        assert "Dota 2" in result.output
        assert "store.steampowered.com/app/570" in result.output

    def test_info_shows_capsule_image(self, library: Path, wide_console):
        result = runner.invoke(app, ["info", "620", "--steam-path", str(library)])
        assert result.exit_code == 0
        assert "steamstatic.com/steam/apps/620/capsule_184x69.jpg" in result.output

    def test_info_name_with_brackets(self, bracketed_library: Path, wide_console):
        result = runner.invoke(app, ["info", "570", "--steam-path", str(bracketed_library)])
        assert result.exit_code == 0
        assert "Dota [/] 2" in result.output

    def test_launch_name_with_brackets(self, bracketed_library: Path, opened):
        result = runner.invoke(app, ["launch", "620", "--steam-path", str(bracketed_library)])
        assert result.exit_code == 0
        assert opened == ["steam://run/620"]
        assert "Starting Portal [red]Edition" in result.output

    def test_unknown_name_with_brackets(self, library: Path):
        result = runner.invoke(app, ["info", "[/]", "--steam-path", str(library)])
        assert result.exit_code == 1
        assert "No installed game matches '[/]'" in result.output

    def test_info_unknown(self, library: Path):
        result = runner.invoke(app, ["info", "Half-Life", "--steam-path", str(library)])
        assert result.exit_code == 1
        assert "No installed game matches" in result.output

    def test_launch_by_name(self, library: Path, opened):
        result = runner.invoke(app, ["launch", "portal", "--steam-path", str(library)])
        assert result.exit_code == 0
        assert opened == ["steam://run/620"]
        assert "Starting Portal 2" in result.output

    def test_launch_failure(self, library: Path, monkeypatch):
        monkeypatch.setattr(webbrowser, "open", lambda url, *a, **kw: False)
        result = runner.invoke(app, ["launch", "570", "--steam-path", str(library)])
        assert result.exit_code == 1
        assert "Could not launch the game" in result.output

    def test_store_page_by_id_without_scan(self, opened):
        result = runner.invoke(app, ["store-page", "440"])
        assert result.exit_code == 0
        assert opened == ["https://store.steampowered.com/app/440/"]

    def test_store_page_by_name(self, library: Path, opened):
        result = runner.invoke(app, ["store-page", "Dota 2", "--steam-path", str(library)])
        assert result.exit_code == 0
        assert opened == ["https://store.steampowered.com/app/570/"]


class TestStoreCommands:
    """Tests for store, search, open-steam and big-picture."""

    def test_store_lists_categories(self):
        result = runner.invoke(app, ["store"])
        assert result.exit_code == 0
        assert "Featured" in result.output
        assert "Sports Games" in result.output

    def test_store_filter(self):
        result = runner.invoke(app, ["store", "indie"])
        assert result.exit_code == 0
        assert "Indie Games" in result.output
        assert "Featured" not in result.output

    def test_store_open(self, opened):
        result = runner.invoke(app, ["store", "--open", "vr games"])
        assert result.exit_code == 0
        assert opened == ["https://store.steampowered.com/vr/"]

    def test_store_open_unknown(self, opened):
        result = runner.invoke(app, ["store", "--open", "racing"])
        assert result.exit_code == 1
        assert opened == []

    def test_search(self, opened):
        result = runner.invoke(app, ["search", "half life"])
        assert result.exit_code == 0
        assert opened == ["https://store.steampowered.com/search/?term=half%20life"]

    def test_search_blank(self, opened):
        result = runner.invoke(app, ["search", "  "])
        assert result.exit_code == 1
        assert opened == []

    def test_open_steam(self, opened):
        result = runner.invoke(app, ["open-steam"])
        assert result.exit_code == 0
        assert opened == ["steam://"]

    def test_big_picture(self, opened):
        result = runner.invoke(app, ["big-picture"])
        assert result.exit_code == 0
        assert opened == ["steam://open/bigpicture"]


class TestConfig:
    """Tests for slb config."""

    def test_set_and_show(self, steam_root: Path):
        result = runner.invoke(app, ["config", "--steam-path", str(steam_root)])
        assert result.exit_code == 0
        assert Settings().STEAM_PATH == steam_root.resolve()

        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "configured" in result.output

    def test_set_missing_path(self, tmp_path: Path):
        result = runner.invoke(app, ["config", "--steam-path", str(tmp_path / "nope")])
        assert result.exit_code == 1

    def test_clear(self, steam_root: Path):
        runner.invoke(app, ["config", "--steam-path", str(steam_root)])
        result = runner.invoke(app, ["config", "--clear"])
        assert result.exit_code == 0
        assert Settings().STEAM_PATH is None
