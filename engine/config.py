"""
Game configuration system for saving/loading user preferences.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Tuple

from engine.error_handler import ConfigError, log_error
from settings import WINDOW_WIDTH, WINDOW_HEIGHT

# Config file location
CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
CONFIG_FILE = CONFIG_DIR / "settings.json"

logger = logging.getLogger("code_knight.config")


class GameConfig:
    """Manages game configuration/settings."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path: Path = path or CONFIG_FILE
        self.reset_defaults()

    def reset_defaults(self) -> None:
        self.width: int = WINDOW_WIDTH
        self.height: int = WINDOW_HEIGHT
        self.fullscreen: bool = False
        self.sound_enabled: bool = True
        self.telemetry_enabled: bool = False
        self.rng_seed: Optional[int] = None  # fixed seed gives reproducible snippet picks

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for saving."""
        return {
            "width": self.width,
            "height": self.height,
            "fullscreen": self.fullscreen,
            "sound_enabled": self.sound_enabled,
            "telemetry_enabled": self.telemetry_enabled,
            "rng_seed": self.rng_seed,
        }

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Load config from dictionary."""
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be an object, got {type(data).__name__}")
        self.width = int(data.get("width", WINDOW_WIDTH))
        self.height = int(data.get("height", WINDOW_HEIGHT))
        self.fullscreen = bool(data.get("fullscreen", False))
        self.sound_enabled = bool(data.get("sound_enabled", True))
        self.telemetry_enabled = bool(data.get("telemetry_enabled", False))
        seed = data.get("rng_seed")
        self.rng_seed = None if seed is None else int(seed)
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Invalid resolution {self.width}x{self.height}")

    def get_resolution(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def save(self) -> bool:
        """Save config to file."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
            return True
        except OSError as e:
            log_error(e, "save_config")
            return False

    def load(self) -> bool:
        """
        Load config from file.

        A missing file keeps the defaults. A broken one is logged and the
        defaults are restored.
        """
        if not self.path.exists():
            return False

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            self.from_dict(data)
            logger.debug("Loaded config from %s", self.path)
            return True
        except (OSError, ValueError, TypeError, ConfigError) as e:
            log_error(e, "load_config")
            self.reset_defaults()
            return False


# Global config instance
_config = GameConfig()


def get_config() -> GameConfig:
    """Get the global config instance."""
    return _config


def load_config() -> GameConfig:
    """Load and return the config."""
    _config.load()
    return _config


def save_config() -> bool:
    """Save the global config."""
    return _config.save()
