"""
Centralized error handling and logging.

This module provides:
- The "code_knight" logger (daily log file + console warnings)
- Custom exception types for config and high-score storage
- log_error() for collaborator failures that must not stop a battle
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

# Setup logging directory
LOG_DIR = Path(__file__).resolve().parent.parent / "logs"

logger = logging.getLogger("code_knight")
logger.setLevel(logging.DEBUG)


def setup_logging(log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Attach the file and console handlers once.

    Called from main(); tests never call it, so importing the game does not
    create log files.
    """
    if logger.handlers:
        return logger

    log_dir = log_dir or LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    # File handler for detailed logs
    log_file = log_dir / f"game_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )

    # Console handler for warnings/errors
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter('%(levelname)s: %(message)s')
    )

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


class GameError(Exception):
    """Base exception for game-specific errors."""
    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class ConfigError(GameError):
    """Settings file could not be read or written."""
    pass


class HighScoreError(GameError):
    """High-score file could not be read or written."""
    pass


def log_error(error: Exception, context: str = "") -> None:
    """
    Log an error with context information.

    Args:
        error: The exception that occurred
        context: Where the error occurred (e.g., "load_config", "effect_PlaySound")
    """
    logger.error(
        "Error in %s: %s: %s",
        context,
        type(error).__name__,
        error,
        exc_info=error,
    )

