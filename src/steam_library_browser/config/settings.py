"""
Application settings and configuration paths.
"""

from pathlib import Path
from typing import Optional
import os
import json


class Settings:
    """Application settings."""

    # Config directory (XDG compliant)
    CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "slb"

    # Config file path (steam path override etc.)
    CONFIG_FILE = CONFIG_DIR / "config.json"

    # Environment variable overriding the Steam installation path
    STEAM_PATH_ENV = "SLB_STEAM_PATH"

    def _load_config(self) -> dict:
        """Load config from file."""
        if self.CONFIG_FILE.exists():
            try:
                with open(self.CONFIG_FILE) as f:
                    config = json.load(f)
                if isinstance(config, dict):
                    return config
            except (json.JSONDecodeError, IOError):
                pass
        return {}

    def _save_config(self, config: dict) -> None:
        """Save config to file."""
        self.ensure_config_dir()
        with open(self.CONFIG_FILE, "w") as f:
            json.dump(config, f, indent=2)

    @property
    def STEAM_PATH(self) -> Optional[Path]:
        """Get Steam path override: env var > config file > None (auto-detect)."""
        # 1. Environment variable has highest priority
        env_path = os.environ.get(self.STEAM_PATH_ENV)
        if env_path:
            return Path(env_path).expanduser()
        # 2. Config file
        config = self._load_config()
        if config.get("steam_path"):
            return Path(config["steam_path"]).expanduser()
        # 3. Auto-detect
        return None

    def set_steam_path(self, steam_path: Path) -> None:
        """Save Steam path override in config file."""
        config = self._load_config()
        config["steam_path"] = str(steam_path)
        self._save_config(config)

    def clear_steam_path(self) -> None:
        """Remove Steam path override from config file."""
        config = self._load_config()
        if "steam_path" in config:
            del config["steam_path"]
            self._save_config(config)

    @classmethod
    def ensure_config_dir(cls) -> Path:
        """Ensure config directory exists and return path."""
        cls.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        return cls.CONFIG_DIR


# Singleton instance
settings = Settings()
